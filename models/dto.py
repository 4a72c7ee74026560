"""
models/dto.py
-------------
Validated request shapes accepted by the UserService.
"""

from typing import Optional

from pydantic import BaseModel, field_validator


def _not_blank(value: Optional[str]) -> Optional[str]:
    if value is None:
        return None
    value = value.strip()
    if not value:
        raise ValueError("must not be empty")
    return value


class CreateUserDto(BaseModel):
    """Payload for registering a user. Both fields are required."""
    name: str
    email: str

    @field_validator("name", "email")
    @classmethod
    def required(cls, value: str) -> str:
        return _not_blank(value)


class UpdateUserDto(BaseModel):
    """
    Payload for changing a user.

    Fields left out keep their stored value; fields that are sent must not
    be empty.
    """
    name: Optional[str] = None
    email: Optional[str] = None

    @field_validator("name", "email")
    @classmethod
    def not_blank_when_given(cls, value: Optional[str]) -> Optional[str]:
        return _not_blank(value)
