"""Profile picture storage in a Supabase Storage bucket."""

import logging
import time
from dataclasses import dataclass
from urllib.parse import unquote, urlsplit

from fastapi import UploadFile
from supabase import Client

logger = logging.getLogger(__name__)

DEFAULT_CONTENT_TYPE = "application/octet-stream"

# Used when the multipart part carries no filename
FALLBACK_FILENAME = "upload"


@dataclass(frozen=True)
class RemovalResult:
    """Outcome of a best-effort delete.

    Callers are free to ignore it; it exists so a failed delete is a
    value rather than a swallowed exception.
    """

    key: str
    removed: bool
    error: str | None = None


class MediaStorageService:
    """Uploads and removes profile pictures in object storage."""

    def __init__(self, client: Client, bucket: str, key_prefix: str = "profile-pictures") -> None:
        """Initialize media storage.

        Args:
            client: Supabase client.
            bucket: Storage bucket name.
            key_prefix: Folder that all profile pictures are stored under.
        """
        self.client = client
        self.bucket = bucket
        self.key_prefix = key_prefix.rstrip("/")

    def build_key(self, filename: str | None) -> str:
        """Build a storage key for an uploaded file.

        Millisecond timestamps make keys unique in practice, not in theory:
        two uploads of the same filename in the same millisecond collide.
        """
        return f"{self.key_prefix}/{int(time.time() * 1000)}-{filename or FALLBACK_FILENAME}"

    def key_from_locator(self, locator: str) -> str:
        """Derive the storage key from a public URL.

        Only the last path segment is used; the prefix is re-applied.
        """
        filename = unquote(urlsplit(locator).path.rsplit("/", 1)[-1])
        return f"{self.key_prefix}/{filename}"

    async def store(self, upload: UploadFile) -> str:
        """Upload a staged file and return its public URL.

        Reads the upload but does not close it; releasing the staged file
        belongs to whoever received it from the request.

        Args:
            upload: Staged multipart upload.

        Returns:
            str: Publicly resolvable URL of the stored object.
        """
        key = self.build_key(upload.filename)
        content = await upload.read()
        self.client.storage.from_(self.bucket).upload(
            path=key,
            file=content,
            file_options={"content-type": upload.content_type or DEFAULT_CONTENT_TYPE},
        )

        logger.info("Stored profile picture %s (%d bytes)", key, len(content))
        return self.client.storage.from_(self.bucket).get_public_url(key)

    async def remove(self, key: str) -> RemovalResult:
        """Delete a stored object without raising.

        Args:
            key: Storage key of the object.

        Returns:
            RemovalResult: Whether the delete went through.
        """
        try:
            self.client.storage.from_(self.bucket).remove([key])
        except Exception as e:
            logger.warning("Failed to delete %s from storage: %s", key, e)
            return RemovalResult(key=key, removed=False, error=str(e))

        logger.info("Deleted %s from storage", key)
        return RemovalResult(key=key, removed=True)
