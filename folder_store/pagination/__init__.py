"""Pagination module for offset-token pagination."""

from .token import encode_page_token, decode_page_token
from .paginator import paginate_folders

__all__ = [
    "encode_page_token",
    "decode_page_token",
    "paginate_folders"
]
