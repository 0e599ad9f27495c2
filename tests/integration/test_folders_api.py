"""Integration tests for the folders API endpoint."""

import base64
from uuid import uuid4

from fastapi import status
from fastapi.testclient import TestClient

from folder_store.config import DEFAULT_ORG_ID
from folder_store.main import create_app
from folder_store.pagination import encode_page_token


def folders_url(org_id):
    return f"/v1/organizations/{org_id}/folders"


class TestFoldersAPI:
    """Test the folders endpoint against an in-memory provider."""

    def test_list_all_folders(self, test_client, org_id, folders):
        """Test listing every folder for an organization."""
        response = test_client.get(folders_url(org_id))

        assert response.status_code == status.HTTP_200_OK
        data = response.json()
        assert [f["id"] for f in data["folders"]] == [
            str(f.id) for f in folders if f.org_id == org_id
        ]
        assert data["next_page_token"] == ""

    def test_exclude_deleted(self, test_client, org_id):
        """Test include_deleted=false drops soft-deleted folders."""
        response = test_client.get(folders_url(org_id), params={"include_deleted": "false"})

        assert response.status_code == status.HTTP_200_OK
        assert not any(f["deleted"] for f in response.json()["folders"])

    def test_paginate_through_all_pages(self, test_client, org_id, folders):
        """Test following next_page_token until the last page."""
        seen = []
        token = ""
        pages = 0

        while True:
            response = test_client.get(
                folders_url(org_id), params={"paginate": "true", "page_token": token}
            )
            assert response.status_code == status.HTTP_200_OK
            data = response.json()
            seen.extend(f["id"] for f in data["folders"])
            pages += 1
            token = data["next_page_token"]
            if not token:
                break

        assert pages == 3
        assert seen == [str(f.id) for f in folders if f.org_id == org_id]

    def test_first_page_token(self, test_client, org_id):
        """Test the first page returns the token for offset two."""
        response = test_client.get(folders_url(org_id), params={"paginate": "true"})

        data = response.json()
        assert len(data["folders"]) == 2
        assert data["next_page_token"] == encode_page_token(2)

    def test_malformed_page_token(self, test_client, org_id):
        """Test a malformed token is a 400 problem."""
        response = test_client.get(
            folders_url(org_id), params={"paginate": "true", "page_token": "ab271ac"}
        )

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.headers["content-type"] == "application/problem+json"
        data = response.json()
        assert data["title"] == "Pagination Error"
        assert data["instance"] == folders_url(org_id)

    def test_oversized_page_token(self, test_client, org_id):
        """Test a token too large to convert is a 400 problem, not a 500."""
        token = base64.b64encode(b"1" * 5000).decode("ascii")

        response = test_client.get(
            folders_url(org_id), params={"paginate": "true", "page_token": token}
        )

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.json()["title"] == "Pagination Error"

    def test_unknown_org_not_found(self, test_client):
        """Test an organization without folders is a 404 problem."""
        unknown = uuid4()

        response = test_client.get(folders_url(unknown))

        assert response.status_code == status.HTTP_404_NOT_FOUND
        data = response.json()
        assert data["org_id"] == str(unknown)
        assert str(unknown) in data["detail"]

    def test_nil_org_id(self, test_client):
        """Test the nil UUID is rejected."""
        response = test_client.get(folders_url("00000000-0000-0000-0000-000000000000"))

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.json()["title"] == "Invalid Argument"

    def test_invalid_org_id(self, test_client):
        """Test a non-UUID organization ID fails validation."""
        response = test_client.get(folders_url("not-a-uuid"))

        assert response.status_code == 422
        assert response.json()["title"] == "Validation Error"


class TestFoldersAPISampleData:
    """Test the endpoint against the bundled sample data file."""

    def test_default_org_folders(self):
        """Test the configured provider serves the sample organization."""
        with TestClient(create_app()) as client:
            response = client.get(folders_url(DEFAULT_ORG_ID))

        assert response.status_code == status.HTTP_200_OK
        assert len(response.json()["folders"]) == 6
