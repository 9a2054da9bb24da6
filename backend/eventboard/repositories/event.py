# eventboard/repositories/event.py
import datetime as dt
from typing import Any

from tortoise import timezone
from tortoise.query_utils import Prefetch

from eventboard.core.errors import NotFoundError
from eventboard.models import Event, Group
from eventboard.repositories.group import get_group
from eventboard.repositories.user import get_live_user, live_users


def with_attendees(qs):
    """Prefetch an event's live users and its groups."""
    return qs.prefetch_related(
        Prefetch("users", queryset=live_users().order_by("id")),
        Prefetch("groups", queryset=Group.all().order_by("id")),
    )


async def get_event(event_id: int) -> Event:
    event = await Event.get_or_none(id=event_id)
    if event is None:
        raise NotFoundError("event", event_id)
    return event


class TortoiseEventRepository:
    async def create(self, name: str, description: str, date: dt.datetime, location: str) -> int:
        event = await Event.create(name=name, description=description, date=date, location=location)
        return event.id

    async def get_by_id(self, event_id: int) -> Event:
        event = await with_attendees(Event.filter(id=event_id)).first()
        if event is None:
            raise NotFoundError("event", event_id)
        return event

    async def get_all(self) -> list[Event]:
        return await with_attendees(Event.all().order_by("id"))

    async def update(self, event_id: int, fields: dict[str, Any]) -> None:
        updated = await Event.filter(id=event_id).update(**fields, updated_at=timezone.now())
        if not updated:
            raise NotFoundError("event", event_id)

    async def delete(self, event_id: int) -> None:
        deleted = await Event.filter(id=event_id).delete()
        if not deleted:
            raise NotFoundError("event", event_id)

    async def add_user(self, event_id: int, user_id: int) -> None:
        event = await get_event(event_id)
        user = await get_live_user(user_id)
        await event.users.add(user)

    async def remove_user(self, event_id: int, user_id: int) -> None:
        event = await get_event(event_id)
        user = await get_live_user(user_id)
        await event.users.remove(user)

    async def add_group(self, event_id: int, group_id: int) -> None:
        event = await get_event(event_id)
        group = await get_group(group_id)
        await event.groups.add(group)

    async def remove_group(self, event_id: int, group_id: int) -> None:
        event = await get_event(event_id)
        group = await get_group(group_id)
        await event.groups.remove(group)
