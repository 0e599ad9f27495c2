"""Pydantic models for folders and folder fetches."""

from typing import List
from uuid import UUID

from pydantic import BaseModel, Field, ConfigDict


class Folder(BaseModel):
    """A tenant-scoped folder record."""

    id: UUID = Field(description="Folder UUID")
    name: str = Field(description="Display name, not unique")
    org_id: UUID = Field(description="Organization that owns this folder")
    deleted: bool = Field(default=False, description="Soft-delete marker")

    model_config = ConfigDict(
        frozen=True,
        json_schema_extra={
            "example": {
                "id": "4212d618-66ff-468a-862d-ea49fef5e183",
                "name": "noble-vixen",
                "org_id": "c1556e17-b7c0-45a3-a6ae-9546248fb17a",
                "deleted": True
            }
        }
    )


class FetchFolderRequest(BaseModel):
    """Caller intent for a folder fetch."""

    org_id: UUID = Field(description="Organization to fetch folders for")
    paginate: bool = Field(default=False, description="Return one page instead of every folder")
    page_token: str = Field(default="", description="Opaque token from a previous page; empty for the first page")
    include_deleted: bool = Field(default=True, description="Include soft-deleted folders")


class FetchFolderResponse(BaseModel):
    """Result of a folder fetch."""

    folders: List[Folder] = Field(default_factory=list, description="Matching folders in provider order")
    next_page_token: str = Field(default="", description="Token for the next page; empty when there is none")

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "folders": [
                    {
                        "id": "4212d618-66ff-468a-862d-ea49fef5e183",
                        "name": "noble-vixen",
                        "org_id": "c1556e17-b7c0-45a3-a6ae-9546248fb17a",
                        "deleted": True
                    }
                ],
                "next_page_token": "Mg=="
            }
        }
    )
