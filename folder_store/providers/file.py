"""Folder provider backed by a JSON or YAML data file."""

import json
import logging
from pathlib import Path
from typing import List, Optional, Sequence, Union

import yaml
from pydantic import TypeAdapter

from ..models.folders import Folder

logger = logging.getLogger(__name__)

_folder_list = TypeAdapter(List[Folder])


class FileFolderProvider:
    """Loads folders from a data file on first use and caches them.

    The file holds either a list of folder objects or a mapping with a
    ``folders`` list. Files ending in ``.yaml`` or ``.yml`` are parsed as
    YAML, anything else as JSON.
    """

    def __init__(self, path: Union[str, Path]):
        self.path = Path(path)
        self._folders: Optional[Sequence[Folder]] = None

    def get_folders(self) -> Sequence[Folder]:
        if self._folders is None:
            self._folders = tuple(self._load())
        return self._folders

    def _load(self) -> List[Folder]:
        with open(self.path, "r", encoding="utf-8") as f:
            if self.path.suffix.lower() in (".yaml", ".yml"):
                raw = yaml.safe_load(f)
            else:
                raw = json.load(f)

        if isinstance(raw, dict):
            raw = raw.get("folders", [])
        if raw is None:
            raw = []

        folders = _folder_list.validate_python(raw)
        logger.info(f"Loaded {len(folders)} folders from {self.path}")
        return folders
