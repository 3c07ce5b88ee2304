"""Profile business logic service."""

import logging

from fastapi import UploadFile

from profile_api.api.middleware.error_handler import AuthorizationError, NotFoundError
from profile_api.models.profile import EDITABLE_FIELDS, Profile, ProfileFields
from profile_api.services.identity_service import IdentityVerifier
from profile_api.services.media_storage_service import MediaStorageService
from profile_api.services.profile_repository import ProfileRepository

logger = logging.getLogger(__name__)


class ProfileService:
    """Create, read and update user profiles.

    Each operation is a short sequential protocol: verify the account,
    touch storage if a picture was supplied, then write the full row.
    Nothing is locked; concurrent updates for one account race and the
    last write wins.

    The service owns any staged upload it is given and closes it on
    every exit path; the media store only reads it.
    """

    def __init__(
        self,
        verifier: IdentityVerifier,
        repository: ProfileRepository,
        media: MediaStorageService,
    ) -> None:
        """Initialize profile service with its collaborators.

        Args:
            verifier: Auth account lookup.
            repository: Profile row storage.
            media: Profile picture storage.
        """
        self.verifier = verifier
        self.repository = repository
        self.media = media

    async def create_profile(
        self,
        uid: str,
        fields: ProfileFields,
        upload: UploadFile | None = None,
    ) -> Profile:
        """Create a profile, overwriting any existing one.

        Args:
            uid: Auth account ID.
            fields: Name, gender and lifestyle as supplied.
            upload: Optional staged profile picture.

        Returns:
            Profile: The stored profile.

        Raises:
            AuthorizationError: If the account does not exist.
        """
        try:
            if await self.verifier.verify(uid) is None:
                raise AuthorizationError()

            profile_picture = None
            if upload is not None:
                profile_picture = await self.media.store(upload)

            record = {
                "uid": uid,
                **{key: fields.get(key) for key in EDITABLE_FIELDS},
                "profile_picture": profile_picture,
            }
            profile = await self.repository.put(uid, record)
        finally:
            if upload is not None:
                await upload.close()

        logger.info("Profile created for %s", uid)
        return profile

    async def get_profile(self, uid: str) -> Profile:
        """Get the profile of an existing account.

        Args:
            uid: Auth account ID.

        Returns:
            Profile: The stored profile.

        Raises:
            NotFoundError: If the account or its profile does not exist.
        """
        if await self.verifier.verify(uid) is None:
            raise NotFoundError("User not found")

        profile = await self.repository.get(uid)
        if profile is None:
            raise NotFoundError("Profile not found")

        return profile

    async def update_profile(
        self,
        uid: str,
        fields: ProfileFields,
        upload: UploadFile | None = None,
    ) -> Profile:
        """Merge supplied fields and an optional new picture into a profile.

        Empty or missing fields keep their stored value. A new picture
        replaces the old one: the old object is deleted on a best-effort
        basis before the new one is uploaded. If the upload then fails
        the error propagates and the stored row still points at the old
        object.

        Args:
            uid: Auth account ID.
            fields: Fields to change.
            upload: Optional staged replacement picture.

        Returns:
            Profile: The merged profile as stored.

        Raises:
            AuthorizationError: If the account does not exist.
            NotFoundError: If the account has no profile yet.
        """
        try:
            if await self.verifier.verify(uid) is None:
                raise AuthorizationError()

            current = await self.repository.get(uid)
            if current is None:
                raise NotFoundError("Profile not found")

            profile_picture = current.get("profile_picture")
            if upload is not None:
                if profile_picture:
                    result = await self.media.remove(self.media.key_from_locator(profile_picture))
                    if not result.removed:
                        logger.warning(
                            "Replacing picture for %s left %s in storage", uid, result.key
                        )
                profile_picture = await self.media.store(upload)

            merged = {
                **current,
                **{key: fields.get(key) or current.get(key) for key in EDITABLE_FIELDS},
                "profile_picture": profile_picture,
            }
            profile = await self.repository.put(uid, merged)
        finally:
            if upload is not None:
                await upload.close()

        logger.info("Profile updated for %s", uid)
        return profile
