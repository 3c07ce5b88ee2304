"""FastAPI dependency injection functions."""

from typing import Annotated

from fastapi import Depends
from supabase import Client

from profile_api.core.config import Settings, get_settings
from profile_api.core.supabase import get_supabase_client
from profile_api.services.identity_service import IdentityVerifier
from profile_api.services.media_storage_service import MediaStorageService
from profile_api.services.profile_repository import ProfileRepository
from profile_api.services.profile_service import ProfileService

SettingsDep = Annotated[Settings, Depends(get_settings)]
SupabaseDep = Annotated[Client, Depends(get_supabase_client)]


def get_identity_verifier(client: SupabaseDep) -> IdentityVerifier:
    """Build the auth account verifier."""
    return IdentityVerifier(client)


def get_profile_repository(client: SupabaseDep, settings: SettingsDep) -> ProfileRepository:
    """Build the profile repository for the configured table."""
    return ProfileRepository(client, table=settings.profiles_table)


def get_media_storage(client: SupabaseDep, settings: SettingsDep) -> MediaStorageService:
    """Build the profile picture store for the configured bucket."""
    return MediaStorageService(
        client,
        bucket=settings.storage_bucket,
        key_prefix=settings.media_key_prefix,
    )


def get_profile_service(
    verifier: Annotated[IdentityVerifier, Depends(get_identity_verifier)],
    repository: Annotated[ProfileRepository, Depends(get_profile_repository)],
    media: Annotated[MediaStorageService, Depends(get_media_storage)],
) -> ProfileService:
    """Build the profile service from its collaborators.

    Override this (or any collaborator) through
    ``app.dependency_overrides`` to substitute fakes.
    """
    return ProfileService(verifier=verifier, repository=repository, media=media)


# Type alias for cleaner dependency injection
ProfileServiceDep = Annotated[ProfileService, Depends(get_profile_service)]
