# eventboard/repositories/__init__.py
"""
Data access layer.

Protocols in `base` describe what the service layer needs; the Tortoise ORM
classes below are the production implementations.
"""
from .base import EventRepository, GroupRepository, UserRepository
from .event import TortoiseEventRepository
from .group import TortoiseGroupRepository
from .user import TortoiseUserRepository

__all__ = [
    "UserRepository",
    "GroupRepository",
    "EventRepository",
    "TortoiseUserRepository",
    "TortoiseGroupRepository",
    "TortoiseEventRepository",
]
