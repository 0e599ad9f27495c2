"""Folder Store: tenant-scoped folder listing with opaque page tokens."""

from .models.folders import Folder, FetchFolderRequest, FetchFolderResponse
from .pagination import paginate_folders
from .services.folders import fetch_folders_by_org_id

__all__ = [
    "Folder",
    "FetchFolderRequest",
    "FetchFolderResponse",
    "paginate_folders",
    "fetch_folders_by_org_id"
]
