# eventboard/schemas/user.py
"""
Pydantic schemas for user endpoints.
Defines request models for registration, login and partial updates.
"""
from typing import Optional

from pydantic import BaseModel, EmailStr, Field, field_validator


class CreateUserRequest(BaseModel):
    """
    Request model for user registration.
    The password is hashed server-side and never echoed back.
    """
    username: str = Field(min_length=5)  # Display name (at least 5 characters)
    email: EmailStr  # Login email (unique among live users)
    password: str = Field(min_length=6)  # Plain text password (at least 6 characters)


class LoginUserRequest(BaseModel):
    """
    Request model for the login endpoint.
    """
    email: EmailStr
    password: str = Field(min_length=6)


class UpdateUserRequest(BaseModel):
    """
    Request model for updating a user.
    All fields are optional - only non-empty fields overwrite stored values.
    """
    username: Optional[str] = Field(default=None, min_length=5)
    email: Optional[EmailStr] = None
    password: Optional[str] = Field(default=None, min_length=6)

    @field_validator("*", mode="before")
    @classmethod
    def _empty_means_unset(cls, value):
        # "" is treated the same as an omitted field
        if isinstance(value, str) and value == "":
            return None
        return value
