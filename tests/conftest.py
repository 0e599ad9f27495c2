"""Pytest configuration and shared fixtures for the Folder Store tests."""

import logging
from typing import List
from uuid import UUID, uuid4

import pytest
from fastapi.testclient import TestClient

from folder_store.main import create_app
from folder_store.models.folders import Folder
from folder_store.providers import StaticFolderProvider, get_folder_provider


logging.getLogger("folder_store").setLevel(logging.WARNING)


@pytest.fixture
def org_id() -> UUID:
    """Organization that owns most test folders."""
    return uuid4()


@pytest.fixture
def other_org_id() -> UUID:
    """A second organization."""
    return uuid4()


def make_folder(org_id: UUID, name: str, deleted: bool = False) -> Folder:
    return Folder(id=uuid4(), name=name, org_id=org_id, deleted=deleted)


@pytest.fixture
def folders(org_id: UUID, other_org_id: UUID) -> List[Folder]:
    """Interleaved folders for two organizations; one of org_id's is deleted."""
    return [
        make_folder(org_id, "Test-Folder 1"),
        make_folder(other_org_id, "Other-Folder 1"),
        make_folder(org_id, "Test-Folder 2", deleted=True),
        make_folder(org_id, "Test-Folder 3"),
        make_folder(other_org_id, "Other-Folder 2"),
        make_folder(org_id, "Test-Folder 4"),
        make_folder(org_id, "Test-Folder 5"),
    ]


@pytest.fixture
def provider(folders: List[Folder]) -> StaticFolderProvider:
    """In-memory provider serving the shared folders."""
    return StaticFolderProvider(folders)


@pytest.fixture
def test_client(provider: StaticFolderProvider):
    """Test client whose folder provider is the in-memory fixture."""
    app = create_app()
    app.dependency_overrides[get_folder_provider] = lambda: provider
    with TestClient(app) as client:
        yield client
    app.dependency_overrides.clear()
