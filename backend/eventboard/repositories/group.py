# eventboard/repositories/group.py
from typing import Any

from tortoise import timezone
from tortoise.exceptions import IntegrityError
from tortoise.query_utils import Prefetch

from eventboard.core.errors import AlreadyExistsError, NotFoundError
from eventboard.models import Group
from eventboard.repositories.user import get_live_user, live_users


def with_members(qs):
    """Prefetch a group's live (not soft-deleted) users."""
    return qs.prefetch_related(Prefetch("users", queryset=live_users().order_by("id")))


async def get_group(group_id: int) -> Group:
    group = await Group.get_or_none(id=group_id)
    if group is None:
        raise NotFoundError("group", group_id)
    return group


class TortoiseGroupRepository:
    async def create(self, name: str) -> int:
        try:
            group = await Group.create(name=name)
        except IntegrityError as exc:
            raise AlreadyExistsError("group", "name", name) from exc
        return group.id

    async def get_by_id(self, group_id: int) -> Group:
        group = await with_members(Group.filter(id=group_id)).first()
        if group is None:
            raise NotFoundError("group", group_id)
        return group

    async def get_all(self) -> list[Group]:
        return await with_members(Group.all().order_by("id"))

    async def update(self, group_id: int, fields: dict[str, Any]) -> None:
        try:
            updated = await Group.filter(id=group_id).update(**fields, updated_at=timezone.now())
        except IntegrityError as exc:
            raise AlreadyExistsError("group", "name", fields.get("name")) from exc
        if not updated:
            raise NotFoundError("group", group_id)

    async def delete(self, group_id: int) -> None:
        deleted = await Group.filter(id=group_id).delete()
        if not deleted:
            raise NotFoundError("group", group_id)

    async def add_user(self, group_id: int, user_id: int) -> None:
        group = await get_group(group_id)
        user = await get_live_user(user_id)
        # add() skips links that already exist
        await group.users.add(user)

    async def remove_user(self, group_id: int, user_id: int) -> None:
        group = await get_group(group_id)
        user = await get_live_user(user_id)
        await group.users.remove(user)
