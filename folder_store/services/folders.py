"""Tenant-scoped folder retrieval."""

import logging
from typing import Optional
from uuid import UUID

from ..errors.problem_details import (
    InvalidArgumentError, PageTokenDecodeError, PaginationError, FolderNotFoundError
)
from ..models.folders import FetchFolderRequest, FetchFolderResponse
from ..pagination import paginate_folders
from ..providers.base import FolderProvider

logger = logging.getLogger(__name__)

NIL_UUID = UUID(int=0)


def fetch_folders_by_org_id(
    request: Optional[FetchFolderRequest],
    provider: Optional[FolderProvider],
    page_size: Optional[int] = None
) -> FetchFolderResponse:
    """Fetch the folders belonging to an organization.

    Reads every folder from ``provider`` once, keeps those whose ``org_id``
    matches the request in provider order, and either returns them all or one
    page of them.

    Args:
        request: Organization, pagination flag and page token
        provider: Source of the full folder set
        page_size: Folders per page when paginating, defaults to the
            configured page size

    Returns:
        The matching folders and, when paginating, the next page token

    Raises:
        InvalidArgumentError: If request or provider is missing or the
            organization ID is the nil UUID
        PaginationError: If the page token cannot be decoded
        FolderNotFoundError: If no folders match; the empty response is
            available as ``exc.response``
    """
    if request is None:
        raise InvalidArgumentError("Fetch request is required")
    if provider is None:
        raise InvalidArgumentError("Folder provider is required")
    if request.org_id == NIL_UUID:
        raise InvalidArgumentError("Organization ID must not be the nil UUID")

    matching = [
        folder for folder in provider.get_folders()
        if folder.org_id == request.org_id
        and (request.include_deleted or not folder.deleted)
    ]
    logger.debug(f"Matched {len(matching)} folders for organization {request.org_id}")

    if request.paginate:
        try:
            response = paginate_folders(matching, request.page_token, page_size)
        except PageTokenDecodeError as e:
            raise PaginationError(f"Pagination error: {e}") from e
    else:
        response = FetchFolderResponse(folders=matching)

    if not response.folders:
        raise FolderNotFoundError(request.org_id, response=response)

    return response
