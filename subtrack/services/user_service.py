"""User service — validation and lookup on top of the user repository."""

from __future__ import annotations

import logging

from subtrack.db.user_repo import UserRepository
from subtrack.errors import ValidationError
from subtrack.models.user import User

logger = logging.getLogger(__name__)


class UserService:
    def __init__(self, repo: UserRepository):
        self._repo = repo

    def create(self, username: str) -> User:
        if not username or not username.strip():
            raise ValidationError("username is required")
        user = self._repo.create(User(username=username))
        logger.info(f"Created user {user.id}: {user.username}")
        return user

    def get_by_id(self, user_id: int) -> User:
        return self._repo.get_by_id(user_id)

    def get_by_username(self, username: str) -> list[User]:
        return self._repo.get_by_username(username)

    def find_all(self) -> list[User]:
        return self._repo.find_all()
