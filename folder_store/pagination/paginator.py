"""Offset-token windowing over an in-memory folder sequence."""

import logging
from typing import Optional, Sequence

from ..config import get_settings
from ..errors.problem_details import InvalidArgumentError
from ..models.folders import Folder, FetchFolderResponse
from .token import encode_page_token, decode_page_token

logger = logging.getLogger(__name__)


def paginate_folders(
    folders: Sequence[Folder],
    page_token: str = "",
    page_size: Optional[int] = None
) -> FetchFolderResponse:
    """Return one page of folders and the token for the page after it.

    Each call is stateless: the page is fully determined by ``folders`` and
    ``page_token``. An offset at or past the end yields an empty page with no
    next token rather than an error.

    Args:
        folders: Filtered folders, in the order they should be paged
        page_token: Token from the previous page; empty for the first page
        page_size: Folders per page, defaults to the configured page size

    Returns:
        Response holding the page and the next page token ("" on the last page)

    Raises:
        InvalidArgumentError: If page_size is not an integer of at least 1
        PageTokenDecodeError: If page_token is malformed
    """
    if page_size is None:
        page_size = get_settings().page_size
    if isinstance(page_size, bool) or not isinstance(page_size, int):
        raise InvalidArgumentError(f"Invalid page size: {page_size!r} (must be an integer)")
    if page_size < 1:
        raise InvalidArgumentError(f"Invalid page size: {page_size} (must be at least 1)")

    start = decode_page_token(page_token) if page_token else 0
    total = len(folders)

    end = min(start + page_size, total)
    page = list(folders[start:end])

    next_page_token = ""
    if end < total:
        next_page_token = encode_page_token(end)

    logger.debug(f"Paginated folders {start}:{end} of {total}")
    return FetchFolderResponse(folders=page, next_page_token=next_page_token)
