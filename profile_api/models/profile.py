"""Profile model type definitions for database operations."""

from typing import TypedDict


class Profile(TypedDict):
    """Profile table row representation.

    One row per auth account, keyed by the account id. Maps directly to
    the database schema.
    """

    uid: str
    name: str | None
    gender: str | None
    lifestyle: str | None
    profile_picture: str | None


class ProfileFields(TypedDict, total=False):
    """Client-editable profile fields.

    All fields are optional; empty values are treated as absent on update.
    """

    name: str | None
    gender: str | None
    lifestyle: str | None


EDITABLE_FIELDS: tuple[str, ...] = ("name", "gender", "lifestyle")
