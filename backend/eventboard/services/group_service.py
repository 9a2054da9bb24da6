from typing import Sequence

from eventboard.models import Group
from eventboard.repositories import GroupRepository
from eventboard.schemas import CreateGroupRequest, UpdateGroupRequest


class DefaultGroupService:
    def __init__(self, repo: GroupRepository):
        self.repo = repo

    async def get_groups(self) -> Sequence[Group]:
        return await self.repo.get_all()

    async def get_group(self, group_id: int) -> Group:
        return await self.repo.get_by_id(group_id)

    async def create_group(self, request: CreateGroupRequest) -> Group:
        group_id = await self.repo.create(request.name)
        return await self.repo.get_by_id(group_id)

    async def update_group(self, group_id: int, request: UpdateGroupRequest) -> Group:
        fields = {}
        if request.name:
            fields["name"] = request.name
        await self.repo.update(group_id, fields)
        return await self.repo.get_by_id(group_id)

    async def delete_group(self, group_id: int) -> None:
        await self.repo.delete(group_id)

    async def add_user_to_group(self, group_id: int, user_id: int) -> None:
        await self.repo.add_user(group_id, user_id)

    async def remove_user_from_group(self, group_id: int, user_id: int) -> None:
        await self.repo.remove_user(group_id, user_id)
