"""Database model type definitions."""

from profile_api.models.profile import EDITABLE_FIELDS, Profile, ProfileFields

__all__ = [
    "EDITABLE_FIELDS",
    "Profile",
    "ProfileFields",
]
