"""
User use cases: registration, login and profile maintenance.
"""
from typing import Any, Sequence

from eventboard.core.security import hash_password
from eventboard.models import User
from eventboard.repositories import UserRepository
from eventboard.schemas import CreateUserRequest, LoginUserRequest, UpdateUserRequest


class DefaultUserService:
    """UserService backed by a UserRepository."""

    def __init__(self, repo: UserRepository):
        self.repo = repo

    async def get_users(self) -> Sequence[User]:
        return await self.repo.get_all()

    async def get_user(self, user_id: int) -> User:
        return await self.repo.get_by_id(user_id)

    async def create_user(self, request: CreateUserRequest) -> int:
        """
        Persist a new user and return its id.

        The plain text password is hashed here and never reaches storage.

        Raises:
            AlreadyExistsError: a live user already has this email
        """
        return await self.repo.create(
            username=request.username,
            email=request.email,
            password_hash=hash_password(request.password),
        )

    async def update_user(self, user_id: int, request: UpdateUserRequest) -> None:
        fields: dict[str, Any] = {}
        if request.username:
            fields["username"] = request.username
        if request.email:
            fields["email"] = request.email
        if request.password:
            fields["password_hash"] = hash_password(request.password)
        await self.repo.update(user_id, fields)

    async def delete_user(self, user_id: int) -> None:
        await self.repo.delete(user_id)

    async def login(self, request: LoginUserRequest) -> int:
        """Return the id of the user these credentials belong to (InvalidCredentialsError otherwise)."""
        return await self.repo.verify_credentials(request.email, request.password)
