"""Folder provider capability."""

from typing import Protocol, Sequence, runtime_checkable

from ..models.folders import Folder


@runtime_checkable
class FolderProvider(Protocol):
    """Supplies the complete, unfiltered set of folders.

    All selection and pagination happens in the folder service, so a provider
    takes no filtering arguments.
    """

    def get_folders(self) -> Sequence[Folder]:
        ...
