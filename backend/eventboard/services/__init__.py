"""
Services Module

Orchestrates repository calls per use case:
- Users: registration, login, profile updates, soft deletion
- Groups: CRUD and user membership
- Events: CRUD with date parsing, user and group attendance
"""

# Service interfaces
from .base import (
    EventService,
    GroupService,
    UserService,
)

# Default implementations
from .user_service import DefaultUserService
from .group_service import DefaultGroupService
from .event_service import DefaultEventService

__all__ = [
    # Interfaces
    "UserService",
    "GroupService",
    "EventService",
    # Implementations
    "DefaultUserService",
    "DefaultGroupService",
    "DefaultEventService",
]
