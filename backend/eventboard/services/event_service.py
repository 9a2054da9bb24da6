"""
Event use cases.

The only business rules live here: event dates arrive as text and are parsed
(RFC 3339 first, then YYYY-MM-DD) before anything is written, and partial
updates only overwrite the fields that were supplied.
"""
from typing import Any, Sequence

from eventboard.core.dates import parse_event_date
from eventboard.models import Event
from eventboard.repositories import EventRepository
from eventboard.schemas import CreateEventRequest, UpdateEventRequest


class DefaultEventService:
    """EventService backed by an EventRepository."""

    def __init__(self, repo: EventRepository):
        self.repo = repo

    async def get_events(self) -> Sequence[Event]:
        return await self.repo.get_all()

    async def get_event(self, event_id: int) -> Event:
        return await self.repo.get_by_id(event_id)

    async def create_event(self, request: CreateEventRequest) -> Event:
        """
        Create an event and return it fully loaded.

        The entity is read back after the insert so the response always has
        the same shape (users and groups included), even though a new event
        has no associations yet.

        Raises:
            InvalidDateFormatError: the date is in neither accepted format;
                nothing is persisted in that case
        """
        date = parse_event_date(request.date)
        event_id = await self.repo.create(
            name=request.name,
            description=request.description,
            date=date,
            location=request.location,
        )
        return await self.repo.get_by_id(event_id)

    async def update_event(self, event_id: int, request: UpdateEventRequest) -> Event:
        """
        Apply a partial update and return the reloaded event.

        Raises:
            InvalidDateFormatError: a date was supplied but could not be parsed
            NotFoundError: no event with this id
        """
        fields: dict[str, Any] = {}
        if request.name:
            fields["name"] = request.name
        if request.description:
            fields["description"] = request.description
        if request.location:
            fields["location"] = request.location
        if request.date:
            fields["date"] = parse_event_date(request.date)
        await self.repo.update(event_id, fields)
        return await self.repo.get_by_id(event_id)

    async def delete_event(self, event_id: int) -> None:
        await self.repo.delete(event_id)

    async def add_user_to_event(self, event_id: int, user_id: int) -> None:
        await self.repo.add_user(event_id, user_id)

    async def remove_user_from_event(self, event_id: int, user_id: int) -> None:
        await self.repo.remove_user(event_id, user_id)

    async def add_group_to_event(self, event_id: int, group_id: int) -> None:
        await self.repo.add_group(event_id, group_id)

    async def remove_group_from_event(self, event_id: int, group_id: int) -> None:
        await self.repo.remove_group(event_id, group_id)
