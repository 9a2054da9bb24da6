# eventboard/api/serializers.py
"""
Model -> JSON conversion for API responses.
User payloads never include the password hash.
"""
from eventboard.models import Event, Group, User


def _iso(value):
    return value.isoformat() if value else None


def user_to_dict(u: User) -> dict:
    return {
        "id": u.id,
        "username": u.username,
        "email": u.email,
        "created_at": _iso(u.created_at),
        "updated_at": _iso(u.updated_at),
    }


def group_to_dict(g: Group, include_users: bool = True) -> dict:
    """
    Convert a Group to a dict.

    include_users requires the users relation to have been prefetched
    (the repository's reads do this).
    """
    data = {
        "id": g.id,
        "name": g.name,
        "created_at": _iso(g.created_at),
        "updated_at": _iso(g.updated_at),
    }
    if include_users:
        data["users"] = [user_to_dict(u) for u in g.users]
    return data


def event_to_dict(e: Event) -> dict:
    return {
        "id": e.id,
        "name": e.name,
        "description": e.description,
        "date": _iso(e.date),
        "location": e.location,
        "users": [user_to_dict(u) for u in e.users],
        "groups": [group_to_dict(g, include_users=False) for g in e.groups],
        "created_at": _iso(e.created_at),
        "updated_at": _iso(e.updated_at),
    }
