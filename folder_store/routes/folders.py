"""Folders API endpoints."""

import logging
from typing import Annotated
from uuid import UUID

from fastapi import APIRouter, Depends, Query

from ..models.folders import FetchFolderRequest, FetchFolderResponse
from ..providers import FolderProvider, get_folder_provider
from ..services.folders import fetch_folders_by_org_id


logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/organizations/{org_id}/folders",
    tags=["Folders"],
    responses={
        400: {"description": "Bad Request - Invalid organization ID or page token"},
        404: {"description": "Not Found - Organization has no folders"}
    }
)


@router.get(
    "",
    response_model=FetchFolderResponse,
    summary="List folders for an organization",
    description="List an organization's folders, optionally one page at a time using an opaque page token.",
    responses={
        200: {"description": "Folders retrieved successfully"}
    }
)
def list_organization_folders(
    org_id: UUID,
    provider: Annotated[FolderProvider, Depends(get_folder_provider)],
    paginate: Annotated[bool, Query(description="Return a single page")] = False,
    page_token: Annotated[str, Query(description="Token from the previous page")] = "",
    include_deleted: Annotated[bool, Query(description="Include soft-deleted folders")] = True
) -> FetchFolderResponse:
    """List folders for an organization.

    Folders come back in the data source's order. When ``paginate`` is set the
    response carries ``next_page_token``, which is empty on the last page.
    """
    logger.info(f"Listing folders for organization {org_id} (paginate={paginate})")

    request = FetchFolderRequest(
        org_id=org_id,
        paginate=paginate,
        page_token=page_token,
        include_deleted=include_deleted
    )
    return fetch_folders_by_org_id(request, provider)
