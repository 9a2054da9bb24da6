"""
Repository tests against an in-memory SQLite database.
"""
import asyncio
import datetime as dt

import pytest

from eventboard.core.errors import (
    AlreadyExistsError,
    InvalidCredentialsError,
    NotFoundError,
)
from eventboard.core.security import hash_password
from eventboard.models import User
from eventboard.repositories import (
    TortoiseEventRepository,
    TortoiseGroupRepository,
    TortoiseUserRepository,
)


pytestmark = pytest.mark.asyncio

JUNE_FIRST = dt.datetime(2025, 6, 1, tzinfo=dt.timezone.utc)


async def _new_user(repo: TortoiseUserRepository, email: str, password: str = "secret1") -> int:
    return await repo.create("someone", email, hash_password(password))


class TestUserRepository:
    async def test_create_and_get(self, db):
        repo = TortoiseUserRepository()
        user_id = await _new_user(repo, "a@example.com")

        user = await repo.get_by_id(user_id)
        assert user.email == "a@example.com"
        assert user.deleted_at is None

    async def test_duplicate_email_rejected(self, db):
        repo = TortoiseUserRepository()
        await _new_user(repo, "a@example.com")
        with pytest.raises(AlreadyExistsError):
            await _new_user(repo, "a@example.com")

    async def test_soft_delete_hides_user_and_keeps_email_reserved(self, db):
        repo = TortoiseUserRepository()
        user_id = await _new_user(repo, "a@example.com")

        await repo.delete(user_id)

        with pytest.raises(NotFoundError):
            await repo.get_by_id(user_id)
        assert await repo.get_all() == []
        # A second delete affects nothing
        with pytest.raises(NotFoundError):
            await repo.delete(user_id)
        # The deleted row still holds its email
        with pytest.raises(AlreadyExistsError):
            await _new_user(repo, "a@example.com")

    async def test_concurrent_registrations_keep_one_row(self, db):
        repo = TortoiseUserRepository()
        password_hash = hash_password("secret1")

        results = await asyncio.gather(
            repo.create("alice1", "dup@example.com", password_hash),
            repo.create("alice2", "dup@example.com", password_hash),
            return_exceptions=True,
        )

        created = [r for r in results if isinstance(r, int)]
        rejected = [r for r in results if isinstance(r, AlreadyExistsError)]
        assert len(created) == 1
        assert len(rejected) == 1
        assert await User.filter(email="dup@example.com").count() == 1
        assert await repo.verify_credentials("dup@example.com", "secret1") == created[0]

    async def test_update_missing_user(self, db):
        with pytest.raises(NotFoundError):
            await TortoiseUserRepository().update(999, {"username": "nobody"})

    async def test_update_to_taken_email(self, db):
        repo = TortoiseUserRepository()
        await _new_user(repo, "a@example.com")
        second = await _new_user(repo, "b@example.com")
        with pytest.raises(AlreadyExistsError):
            await repo.update(second, {"email": "a@example.com"})

    async def test_find_by_email(self, db):
        repo = TortoiseUserRepository()
        user_id = await _new_user(repo, "a@example.com")
        assert (await repo.find_by_email("a@example.com")).id == user_id
        with pytest.raises(NotFoundError):
            await repo.find_by_email("missing@example.com")

    async def test_verify_credentials(self, db):
        repo = TortoiseUserRepository()
        user_id = await _new_user(repo, "a@example.com", password="secret1")

        assert await repo.verify_credentials("a@example.com", "secret1") == user_id
        with pytest.raises(InvalidCredentialsError):
            await repo.verify_credentials("a@example.com", "wrong-password")
        with pytest.raises(InvalidCredentialsError):
            await repo.verify_credentials("missing@example.com", "secret1")


class TestGroupRepository:
    async def test_unique_name(self, db):
        repo = TortoiseGroupRepository()
        await repo.create("Ops")
        with pytest.raises(AlreadyExistsError):
            await repo.create("Ops")

    async def test_membership_is_idempotent(self, db):
        users = TortoiseUserRepository()
        groups = TortoiseGroupRepository()
        user_id = await _new_user(users, "a@example.com")
        group_id = await groups.create("Ops")

        await groups.add_user(group_id, user_id)
        await groups.add_user(group_id, user_id)

        group = await groups.get_by_id(group_id)
        assert [u.id for u in group.users] == [user_id]

    async def test_remove_non_member_is_noop(self, db):
        users = TortoiseUserRepository()
        groups = TortoiseGroupRepository()
        user_id = await _new_user(users, "a@example.com")
        group_id = await groups.create("Ops")

        await groups.remove_user(group_id, user_id)

        assert list((await groups.get_by_id(group_id)).users) == []

    async def test_association_requires_both_sides(self, db):
        users = TortoiseUserRepository()
        groups = TortoiseGroupRepository()
        user_id = await _new_user(users, "a@example.com")
        group_id = await groups.create("Ops")

        with pytest.raises(NotFoundError):
            await groups.add_user(999, user_id)
        with pytest.raises(NotFoundError):
            await groups.add_user(group_id, 999)
        with pytest.raises(NotFoundError):
            await groups.remove_user(group_id, 999)

    async def test_deleted_users_drop_out_of_group_reads(self, db):
        users = TortoiseUserRepository()
        groups = TortoiseGroupRepository()
        keep = await _new_user(users, "a@example.com")
        gone = await _new_user(users, "b@example.com")
        group_id = await groups.create("Ops")
        await groups.add_user(group_id, keep)
        await groups.add_user(group_id, gone)

        await users.delete(gone)

        group = await groups.get_by_id(group_id)
        assert [u.id for u in group.users] == [keep]

    async def test_update_and_delete_missing_group(self, db):
        repo = TortoiseGroupRepository()
        with pytest.raises(NotFoundError):
            await repo.update(999, {"name": "x"})
        with pytest.raises(NotFoundError):
            await repo.delete(999)


class TestEventRepository:
    async def test_create_and_read_with_associations(self, db):
        users = TortoiseUserRepository()
        groups = TortoiseGroupRepository()
        events = TortoiseEventRepository()
        user_id = await _new_user(users, "a@example.com")
        group_id = await groups.create("Ops")
        event_id = await events.create("Launch", "", JUNE_FIRST, "HQ")

        await events.add_user(event_id, user_id)
        await events.add_group(event_id, group_id)

        event = await events.get_by_id(event_id)
        assert event.date == JUNE_FIRST
        assert [u.id for u in event.users] == [user_id]
        assert [g.id for g in event.groups] == [group_id]

        await events.remove_user(event_id, user_id)
        await events.remove_group(event_id, group_id)
        await events.remove_group(event_id, group_id)

        event = await events.get_by_id(event_id)
        assert list(event.users) == []
        assert list(event.groups) == []

    async def test_update_keeps_unsent_fields(self, db):
        events = TortoiseEventRepository()
        event_id = await events.create("Launch", "Big day", JUNE_FIRST, "HQ")

        await events.update(event_id, {"location": "Annex"})

        event = await events.get_by_id(event_id)
        assert event.location == "Annex"
        assert event.description == "Big day"
        assert event.date == JUNE_FIRST

    async def test_delete(self, db):
        events = TortoiseEventRepository()
        event_id = await events.create("Launch", "", JUNE_FIRST, "")

        await events.delete(event_id)

        with pytest.raises(NotFoundError):
            await events.get_by_id(event_id)
        with pytest.raises(NotFoundError):
            await events.delete(event_id)

    async def test_association_with_missing_group(self, db):
        events = TortoiseEventRepository()
        event_id = await events.create("Launch", "", JUNE_FIRST, "")
        with pytest.raises(NotFoundError):
            await events.add_group(event_id, 999)
