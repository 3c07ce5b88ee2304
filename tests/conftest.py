"""Pytest configuration and fixtures."""

import os
from collections.abc import Generator
from unittest.mock import MagicMock, patch

import pytest
from fastapi.testclient import TestClient
from starlette.datastructures import UploadFile

# Set test environment variables before importing application modules
os.environ.setdefault("APP_ENV", "test")
os.environ.setdefault("DEBUG", "true")
os.environ.setdefault("SUPABASE_URL", "https://test-project.supabase.co")
os.environ.setdefault("SUPABASE_SECRET_KEY", "test-secret-key")

from profile_api.services.identity_service import Account, IdentityVerifier  # noqa: E402
from profile_api.services.media_storage_service import (  # noqa: E402
    MediaStorageService,
    RemovalResult,
)
from support import PUBLIC_URL_BASE, InMemoryProfileRepository  # noqa: E402


@pytest.fixture
def known_uids() -> set[str]:
    """Account IDs the fake auth provider knows about."""
    return {"u1", "u2"}


@pytest.fixture
def verifier(known_uids: set[str]) -> MagicMock:
    """IdentityVerifier mock that recognizes ``known_uids``."""
    mock = MagicMock(spec=IdentityVerifier)

    async def verify(uid: str) -> Account | None:
        return Account(user_id=uid) if uid in known_uids else None

    mock.verify.side_effect = verify
    return mock


@pytest.fixture
def repository() -> InMemoryProfileRepository:
    """Empty in-memory profile repository."""
    return InMemoryProfileRepository()


@pytest.fixture
def media() -> MagicMock:
    """MediaStorageService mock returning predictable public URLs."""
    mock = MagicMock(spec=MediaStorageService)
    counter = iter(range(1, 1000))

    async def store(upload: UploadFile) -> str:
        return f"{PUBLIC_URL_BASE}/profile-pictures/{next(counter)}-{upload.filename}"

    async def remove(key: str) -> RemovalResult:
        return RemovalResult(key=key, removed=True)

    mock.store.side_effect = store
    mock.remove.side_effect = remove
    mock.key_from_locator.side_effect = lambda locator: (
        "profile-pictures/" + locator.rsplit("/", 1)[-1]
    )
    return mock


@pytest.fixture
def mock_supabase_client() -> Generator[MagicMock, None, None]:
    """Provide a mocked Supabase client.

    Yields:
        MagicMock: Mocked Supabase client for testing.
    """
    mock_client = MagicMock()

    mock_response = MagicMock()
    mock_response.data = []
    mock_client.table.return_value.select.return_value.limit.return_value.execute.return_value = (
        mock_response
    )

    with patch("profile_api.core.supabase.get_supabase_client", return_value=mock_client):
        yield mock_client


@pytest.fixture
def client(
    mock_supabase_client: MagicMock,
    verifier: MagicMock,
    repository: InMemoryProfileRepository,
    media: MagicMock,
) -> Generator[TestClient, None, None]:
    """Provide a test client with platform collaborators replaced by fakes.

    Yields:
        TestClient: FastAPI test client.
    """
    from profile_api.api.deps import (
        get_identity_verifier,
        get_media_storage,
        get_profile_repository,
    )
    from profile_api.core.supabase import get_supabase_client
    from profile_api.main import app

    app.dependency_overrides[get_supabase_client] = lambda: mock_supabase_client
    app.dependency_overrides[get_identity_verifier] = lambda: verifier
    app.dependency_overrides[get_profile_repository] = lambda: repository
    app.dependency_overrides[get_media_storage] = lambda: media

    with TestClient(app) as test_client:
        yield test_client

    app.dependency_overrides.clear()
