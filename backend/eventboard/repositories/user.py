# eventboard/repositories/user.py
from typing import Any

from tortoise import timezone
from tortoise.exceptions import IntegrityError

from eventboard.core.errors import (
    AlreadyExistsError,
    InvalidCredentialsError,
    NotFoundError,
)
from eventboard.core.security import dummy_verify, verify_password
from eventboard.models import User


def live_users():
    """Queryset of users that have not been soft-deleted."""
    return User.filter(deleted_at__isnull=True)


async def get_live_user(user_id: int) -> User:
    user = await live_users().get_or_none(id=user_id)
    if user is None:
        raise NotFoundError("user", user_id)
    return user


class TortoiseUserRepository:
    """User persistence; deletion is soft and deleted users are invisible to reads."""

    async def create(self, username: str, email: str, password_hash: str) -> int:
        try:
            user = await User.create(username=username, email=email, password_hash=password_hash)
        except IntegrityError as exc:
            raise AlreadyExistsError("user", "email", email) from exc
        return user.id

    async def get_by_id(self, user_id: int) -> User:
        return await get_live_user(user_id)

    async def get_all(self) -> list[User]:
        return await live_users().order_by("id")

    async def find_by_email(self, email: str) -> User:
        user = await live_users().get_or_none(email=email)
        if user is None:
            raise NotFoundError("user")
        return user

    async def update(self, user_id: int, fields: dict[str, Any]) -> None:
        try:
            updated = await live_users().filter(id=user_id).update(**fields, updated_at=timezone.now())
        except IntegrityError as exc:
            raise AlreadyExistsError("user", "email", fields.get("email")) from exc
        if not updated:
            raise NotFoundError("user", user_id)

    async def delete(self, user_id: int) -> None:
        now = timezone.now()
        deleted = await live_users().filter(id=user_id).update(deleted_at=now, updated_at=now)
        if not deleted:
            raise NotFoundError("user", user_id)

    async def verify_credentials(self, email: str, password: str) -> int:
        """
        Check a login attempt and return the matching user id.

        An unknown email and a wrong password both raise
        InvalidCredentialsError, and both pay for one hash verification.
        """
        try:
            user = await self.find_by_email(email)
        except NotFoundError:
            dummy_verify()
            raise InvalidCredentialsError() from None
        if not verify_password(password, user.password_hash):
            raise InvalidCredentialsError()
        return user.id
