"""
Pydantic models for user payloads.

``UserCreate`` trims and lower-cases the email before validating it.
``UserReplace`` (PUT) and ``UserEmailUpdate`` (PATCH) validate the
email syntax but keep the submitted string unchanged, so updated
emails are stored exactly as the client sent them.  All three accept
only a bare address; the display-name form ``Name <addr>`` is a
validation error.
"""

from typing import Any

from pydantic import BaseModel, Field, field_validator
from pydantic.networks import validate_email
from pydantic_core import PydanticCustomError

NAME_MIN_LENGTH = 6


def _check_email(value: str) -> str:
    """Accept only a bare address and return it unchanged.

    ``validate_email`` also parses the display-name form
    ``Name <addr>``; that form is rejected here.
    """
    _, normalized = validate_email(value)
    if normalized.lower() != value.strip().lower():
        raise PydanticCustomError(
            "value_error",
            "value is not a valid email address: {reason}",
            {"reason": "expected a bare address without a display name"},
        )
    return value


class UserCreate(BaseModel):
    """Schema for creating a user."""

    name: str = Field(..., min_length=NAME_MIN_LENGTH, examples=["Alice Smith"])
    email: str = Field(..., examples=["alice@example.com"])

    @field_validator("email", mode="before")
    @classmethod
    def normalize_email(cls, value: Any) -> Any:
        if isinstance(value, str):
            return value.strip().lower()
        return value

    @field_validator("email")
    @classmethod
    def check_email(cls, value: str) -> str:
        return _check_email(value)


class UserReplace(BaseModel):
    """Schema for replacing both fields of a user (PUT)."""

    name: str = Field(..., min_length=NAME_MIN_LENGTH, examples=["Alice Smith"])
    email: str = Field(..., examples=["Alice@Example.com"])

    @field_validator("email")
    @classmethod
    def check_email(cls, value: str) -> str:
        return _check_email(value)


class UserEmailUpdate(BaseModel):
    """Schema for changing only the email of a user (PATCH)."""

    email: str = Field(..., examples=["alice.smith@example.com"])

    @field_validator("email")
    @classmethod
    def check_email(cls, value: str) -> str:
        return _check_email(value)


class UserRead(BaseModel):
    """Schema for reading a user from the API."""

    id: str
    name: str
    email: str

    model_config = {
        "from_attributes": True,
    }
