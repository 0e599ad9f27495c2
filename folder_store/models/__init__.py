"""Data models for the Folder Store."""

from .folders import (
    Folder,
    FetchFolderRequest,
    FetchFolderResponse
)

__all__ = [
    "Folder",
    "FetchFolderRequest",
    "FetchFolderResponse"
]
