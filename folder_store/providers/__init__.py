"""Folder providers and the configured provider factory."""

from functools import lru_cache
from pathlib import Path
from typing import Union

from ..config import get_settings
from .base import FolderProvider
from .file import FileFolderProvider
from .static import StaticFolderProvider


@lru_cache(maxsize=None)
def _cached_file_provider(path: Path) -> FileFolderProvider:
    return FileFolderProvider(path)


def file_folder_provider(path: Union[str, Path]) -> FileFolderProvider:
    """Get the provider for a data file, reading each file once per process."""
    return _cached_file_provider(Path(path))


def get_folder_provider() -> FolderProvider:
    """Get the provider for the configured data file."""
    return file_folder_provider(get_settings().data_file)


__all__ = [
    "FolderProvider",
    "FileFolderProvider",
    "StaticFolderProvider",
    "file_folder_provider",
    "get_folder_provider"
]
