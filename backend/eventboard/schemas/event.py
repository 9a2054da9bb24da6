# eventboard/schemas/event.py
"""
Pydantic schemas for event endpoints.
Dates travel as text and are parsed by the service layer, which accepts
either an RFC 3339 timestamp or a bare YYYY-MM-DD date.
"""
from typing import Optional

from pydantic import BaseModel, Field, field_validator


class CreateEventRequest(BaseModel):
    """
    Request model for creating an event.
    """
    name: str = Field(min_length=1)  # Event name (required)
    description: str = ""  # Free text description
    date: str = Field(min_length=1)  # "2025-06-01" or "2025-06-01T18:30:00Z"
    location: str = ""  # Where the event takes place


class UpdateEventRequest(BaseModel):
    """
    Request model for updating an event.
    All fields are optional - only non-empty fields overwrite stored values;
    an update without a date leaves the stored date untouched.
    """
    name: Optional[str] = None
    description: Optional[str] = None
    date: Optional[str] = None
    location: Optional[str] = None

    @field_validator("*", mode="before")
    @classmethod
    def _empty_means_unset(cls, value):
        if isinstance(value, str) and value == "":
            return None
        return value
