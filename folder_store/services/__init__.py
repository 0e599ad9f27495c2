"""Folder services."""

from .folders import fetch_folders_by_org_id

__all__ = ["fetch_folders_by_org_id"]
