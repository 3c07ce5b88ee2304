"""Shared test doubles and builders."""

import io
from typing import Any

from starlette.datastructures import Headers, UploadFile

PUBLIC_URL_BASE = "https://test-project.supabase.co/storage/v1/object/public/profile-media"


def make_upload(
    content: bytes = b"\x89PNG fake image",
    filename: str = "avatar.png",
    content_type: str = "image/png",
) -> UploadFile:
    """Build a staged upload like the one FastAPI hands to routes."""
    return UploadFile(
        file=io.BytesIO(content),
        filename=filename,
        headers=Headers({"content-type": content_type}),
    )


class InMemoryProfileRepository:
    """Dict-backed stand-in for ProfileRepository."""

    def __init__(self, rows: dict[str, dict[str, Any]] | None = None) -> None:
        self.rows: dict[str, dict[str, Any]] = dict(rows or {})
        self.get_calls: list[str] = []
        self.put_calls: list[tuple[str, dict[str, Any]]] = []

    async def get(self, uid: str) -> dict[str, Any] | None:
        self.get_calls.append(uid)
        row = self.rows.get(uid)
        return dict(row) if row is not None else None

    async def put(self, uid: str, record: dict[str, Any]) -> dict[str, Any]:
        row = {**record, "uid": uid}
        self.put_calls.append((uid, row))
        self.rows[uid] = row
        return dict(row)
