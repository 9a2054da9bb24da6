# eventboard/repositories/base.py
"""
Data access interfaces.

Each repository is a structural Protocol: the Tortoise implementations in this
package satisfy them, and tests substitute in-memory fakes without any shared
base class. Every method raises NotFoundError for a missing row instead of
returning None.
"""
import datetime as dt
from typing import Any, Protocol, Sequence

from eventboard.models import Event, Group, User


class UserRepository(Protocol):
    async def create(self, username: str, email: str, password_hash: str) -> int: ...

    async def get_by_id(self, user_id: int) -> User: ...

    async def get_all(self) -> Sequence[User]: ...

    async def find_by_email(self, email: str) -> User: ...

    async def update(self, user_id: int, fields: dict[str, Any]) -> None: ...

    async def delete(self, user_id: int) -> None: ...

    async def verify_credentials(self, email: str, password: str) -> int: ...


class GroupRepository(Protocol):
    async def create(self, name: str) -> int: ...

    async def get_by_id(self, group_id: int) -> Group: ...

    async def get_all(self) -> Sequence[Group]: ...

    async def update(self, group_id: int, fields: dict[str, Any]) -> None: ...

    async def delete(self, group_id: int) -> None: ...

    async def add_user(self, group_id: int, user_id: int) -> None: ...

    async def remove_user(self, group_id: int, user_id: int) -> None: ...


class EventRepository(Protocol):
    async def create(self, name: str, description: str, date: dt.datetime, location: str) -> int: ...

    async def get_by_id(self, event_id: int) -> Event: ...

    async def get_all(self) -> Sequence[Event]: ...

    async def update(self, event_id: int, fields: dict[str, Any]) -> None: ...

    async def delete(self, event_id: int) -> None: ...

    async def add_user(self, event_id: int, user_id: int) -> None: ...

    async def remove_user(self, event_id: int, user_id: int) -> None: ...

    async def add_group(self, event_id: int, group_id: int) -> None: ...

    async def remove_group(self, event_id: int, group_id: int) -> None: ...
