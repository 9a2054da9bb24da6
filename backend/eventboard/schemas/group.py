# eventboard/schemas/group.py
from typing import Optional

from pydantic import BaseModel, Field, field_validator


class CreateGroupRequest(BaseModel):
    name: str = Field(min_length=1)  # Group name (must be unique)


class UpdateGroupRequest(BaseModel):
    name: Optional[str] = None  # New name; empty or missing leaves it unchanged

    @field_validator("name", mode="before")
    @classmethod
    def _empty_means_unset(cls, value):
        if isinstance(value, str) and value == "":
            return None
        return value
