"""
Service interfaces

Handlers depend on these Protocols rather than on the concrete classes, so any
object with matching methods (for example an in-memory fake in tests) can be
injected through FastAPI's dependency overrides.
"""
from typing import Protocol, Sequence

from eventboard.models import Event, Group, User
from eventboard.schemas import (
    CreateEventRequest,
    CreateGroupRequest,
    CreateUserRequest,
    LoginUserRequest,
    UpdateEventRequest,
    UpdateGroupRequest,
    UpdateUserRequest,
)


class UserService(Protocol):
    async def get_users(self) -> Sequence[User]: ...

    async def get_user(self, user_id: int) -> User: ...

    async def create_user(self, request: CreateUserRequest) -> int: ...

    async def update_user(self, user_id: int, request: UpdateUserRequest) -> None: ...

    async def delete_user(self, user_id: int) -> None: ...

    async def login(self, request: LoginUserRequest) -> int: ...


class GroupService(Protocol):
    async def get_groups(self) -> Sequence[Group]: ...

    async def get_group(self, group_id: int) -> Group: ...

    async def create_group(self, request: CreateGroupRequest) -> Group: ...

    async def update_group(self, group_id: int, request: UpdateGroupRequest) -> Group: ...

    async def delete_group(self, group_id: int) -> None: ...

    async def add_user_to_group(self, group_id: int, user_id: int) -> None: ...

    async def remove_user_from_group(self, group_id: int, user_id: int) -> None: ...


class EventService(Protocol):
    async def get_events(self) -> Sequence[Event]: ...

    async def get_event(self, event_id: int) -> Event: ...

    async def create_event(self, request: CreateEventRequest) -> Event: ...

    async def update_event(self, event_id: int, request: UpdateEventRequest) -> Event: ...

    async def delete_event(self, event_id: int) -> None: ...

    async def add_user_to_event(self, event_id: int, user_id: int) -> None: ...

    async def remove_user_from_event(self, event_id: int, user_id: int) -> None: ...

    async def add_group_to_event(self, event_id: int, group_id: int) -> None: ...

    async def remove_group_from_event(self, event_id: int, group_id: int) -> None: ...
