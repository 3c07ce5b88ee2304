"""Profile API routes."""

import logging
from typing import Annotated, Any

from fastapi import APIRouter, File, Form, UploadFile, status

from profile_api.api.deps import ProfileServiceDep
from profile_api.api.middleware.error_handler import APIError, InternalError
from profile_api.core.config import get_settings
from profile_api.schemas.profile import ProfileMutationResponse, ProfileResponse

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/profile", tags=["profiles"])

OptionalField = Annotated[str | None, Form()]
PictureUpload = Annotated[
    UploadFile | None,
    File(alias="profilePicture", description="Optional profile picture"),
]


def _error_details(exc: Exception) -> list[dict[str, Any]] | None:
    """Expose the raw failure to clients outside production."""
    if get_settings().is_production:
        return None
    return [{"msg": str(exc), "type": type(exc).__name__}]


def _internal_error(message: str, exc: Exception) -> InternalError:
    logger.exception("%s: %s", message, exc)
    return InternalError(message, details=_error_details(exc))


@router.get(
    "/{uid}",
    response_model=ProfileResponse,
    summary="Get a user's profile",
    responses={
        404: {"description": "Account or profile not found"},
        500: {"description": "Error fetching profile"},
    },
)
async def get_profile(uid: str, service: ProfileServiceDep) -> ProfileResponse:
    """Return the stored profile for an existing auth account."""
    try:
        profile = await service.get_profile(uid)
    except APIError:
        raise
    except Exception as e:
        raise _internal_error("Error fetching profile", e) from e

    return ProfileResponse(**profile)


@router.post(
    "",
    response_model=ProfileMutationResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create a profile",
    responses={
        403: {"description": "Unknown account"},
        500: {"description": "Error creating profile"},
    },
)
async def create_profile(
    service: ProfileServiceDep,
    uid: Annotated[str, Form()],
    name: OptionalField = None,
    gender: OptionalField = None,
    lifestyle: OptionalField = None,
    profile_picture: PictureUpload = None,
) -> ProfileMutationResponse:
    """Create a profile for an auth account.

    An existing profile for the same account is overwritten.
    """
    try:
        profile = await service.create_profile(
            uid,
            {"name": name, "gender": gender, "lifestyle": lifestyle},
            upload=profile_picture,
        )
    except APIError:
        raise
    except Exception as e:
        raise _internal_error("Error creating profile", e) from e

    return ProfileMutationResponse(
        message="Profile created successfully",
        profile=ProfileResponse(**profile),
    )


@router.put(
    "/{uid}",
    response_model=ProfileMutationResponse,
    summary="Update a profile",
    responses={
        403: {"description": "Unknown account"},
        404: {"description": "Profile not found"},
        500: {"description": "Error updating profile"},
    },
)
async def update_profile(
    uid: str,
    service: ProfileServiceDep,
    name: OptionalField = None,
    gender: OptionalField = None,
    lifestyle: OptionalField = None,
    profile_picture: PictureUpload = None,
) -> ProfileMutationResponse:
    """Update a profile.

    Omitted or empty fields keep their stored value. Supplying a picture
    replaces the stored one.
    """
    try:
        profile = await service.update_profile(
            uid,
            {"name": name, "gender": gender, "lifestyle": lifestyle},
            upload=profile_picture,
        )
    except APIError:
        raise
    except Exception as e:
        raise _internal_error("Error updating profile", e) from e

    return ProfileMutationResponse(
        message="Profile updated successfully",
        profile=ProfileResponse(**profile),
    )
