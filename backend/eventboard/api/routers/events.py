from fastapi import APIRouter, Depends, HTTPException, Response, status

from eventboard.api.deps import get_event_service
from eventboard.api.errors import internal_error
from eventboard.api.serializers import event_to_dict
from eventboard.core.errors import InvalidDateFormatError, NotFoundError
from eventboard.schemas import CreateEventRequest, UpdateEventRequest
from eventboard.services import EventService

router = APIRouter(prefix="/events", tags=["events"])

EVENT_NOT_FOUND = "Event not found"
BAD_DATE = "Invalid date format. Use YYYY-MM-DD or RFC3339."


def _not_found(detail: str = EVENT_NOT_FOUND) -> HTTPException:
    return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=detail)


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_event(body: CreateEventRequest, events: EventService = Depends(get_event_service)):
    """
    Create an event. The date can be YYYY-MM-DD or RFC3339.

    Returns:
        dict: The new event, fully loaded (empty users and groups lists)

    Raises:
        HTTPException (400): Validation failed or invalid date format
        HTTPException (500): Unexpected failure
    """
    try:
        event = await events.create_event(body)
    except InvalidDateFormatError:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=BAD_DATE)
    except Exception:
        raise internal_error("Failed to create event")
    return event_to_dict(event)


@router.get("")
async def list_events(events: EventService = Depends(get_event_service)):
    try:
        rows = await events.get_events()
    except Exception:
        raise internal_error("Failed to retrieve events")
    return [event_to_dict(e) for e in rows]


@router.get("/{event_id}")
async def get_event(event_id: int, events: EventService = Depends(get_event_service)):
    try:
        event = await events.get_event(event_id)
    except NotFoundError:
        raise _not_found()
    except Exception:
        raise internal_error("Failed to retrieve event")
    return event_to_dict(event)


@router.put("/{event_id}")
async def update_event(
    event_id: int,
    body: UpdateEventRequest,
    events: EventService = Depends(get_event_service),
):
    """
    Partially update an event. Only non-empty fields are applied; without a
    date the stored date is kept.

    Raises:
        HTTPException (400): Validation failed or invalid date format
        HTTPException (404): Event not found
        HTTPException (500): Unexpected failure
    """
    try:
        event = await events.update_event(event_id, body)
    except InvalidDateFormatError:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=BAD_DATE)
    except NotFoundError:
        raise _not_found()
    except Exception:
        raise internal_error("Failed to update event")
    return event_to_dict(event)


@router.delete("/{event_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_event(event_id: int, events: EventService = Depends(get_event_service)):
    try:
        await events.delete_event(event_id)
    except NotFoundError:
        raise _not_found()
    except Exception:
        raise internal_error("Failed to delete event")
    return Response(status_code=status.HTTP_204_NO_CONTENT)


# ==============================================================================
# Attendance
#     Prefix: /api/events/{event_id}/users|groups/{id}
# ==============================================================================
@router.post("/{event_id}/users/{user_id}")
async def add_user_to_event(
    event_id: int,
    user_id: int,
    events: EventService = Depends(get_event_service),
):
    try:
        await events.add_user_to_event(event_id, user_id)
    except NotFoundError:
        raise _not_found("Event or User not found")
    except Exception:
        raise internal_error("Failed to add user to event")
    return {"message": "User added to event successfully"}


@router.delete("/{event_id}/users/{user_id}")
async def remove_user_from_event(
    event_id: int,
    user_id: int,
    events: EventService = Depends(get_event_service),
):
    """Removing a user who is not attending succeeds."""
    try:
        await events.remove_user_from_event(event_id, user_id)
    except NotFoundError:
        raise _not_found("Event or User not found")
    except Exception:
        raise internal_error("Failed to remove user from event")
    return {"message": "User removed from event successfully"}


@router.post("/{event_id}/groups/{group_id}")
async def add_group_to_event(
    event_id: int,
    group_id: int,
    events: EventService = Depends(get_event_service),
):
    try:
        await events.add_group_to_event(event_id, group_id)
    except NotFoundError:
        raise _not_found("Event or Group not found")
    except Exception:
        raise internal_error("Failed to add group to event")
    return {"message": "Group added to event successfully"}


@router.delete("/{event_id}/groups/{group_id}")
async def remove_group_from_event(
    event_id: int,
    group_id: int,
    events: EventService = Depends(get_event_service),
):
    try:
        await events.remove_group_from_event(event_id, group_id)
    except NotFoundError:
        raise _not_found("Event or Group not found")
    except Exception:
        raise internal_error("Failed to remove group from event")
    return {"message": "Group removed from event successfully"}
