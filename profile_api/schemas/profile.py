"""Profile Pydantic schemas for API request/response models."""

from pydantic import BaseModel, ConfigDict, Field


class ProfileResponse(BaseModel):
    """Schema for profile API responses.

    Serialized with the ``profilePicture`` key used by the upload form.
    """

    model_config = ConfigDict(from_attributes=True, populate_by_name=True)

    uid: str = Field(description="Auth account ID, also the profile key")
    name: str | None = Field(default=None, description="Display name")
    gender: str | None = Field(default=None, description="Gender")
    lifestyle: str | None = Field(default=None, description="Lifestyle descriptor")
    profile_picture: str | None = Field(
        default=None,
        alias="profilePicture",
        description="Public URL of the profile picture, null if none uploaded",
    )


class ProfileMutationResponse(BaseModel):
    """Envelope returned by create and update."""

    message: str = Field(description="Outcome message")
    profile: ProfileResponse = Field(description="The stored profile")
