# eventboard/models/__init__.py
"""
Database models module initialization.
Exports all Tortoise ORM models for convenient imports.

Models exported:
- User: User account, credentials and soft-delete marker
- Group: Named group of users
- Event: Dated event attended by users and groups
"""
from .user import User
from .group import Group
from .event import Event
