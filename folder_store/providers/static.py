"""In-memory folder provider."""

from typing import Iterable, Sequence

from ..models.folders import Folder


class StaticFolderProvider:
    """Serves a fixed list of folders."""

    def __init__(self, folders: Iterable[Folder] = ()):
        self._folders = tuple(folders)

    def get_folders(self) -> Sequence[Folder]:
        return self._folders
