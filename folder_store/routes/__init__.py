"""API routes for the Folder Store."""

from .folders import router as folders_router

__all__ = ["folders_router"]
