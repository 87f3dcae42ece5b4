"""Repository for the ``users`` table."""

from __future__ import annotations

from typing import Any

from subtrack.db.database import Database
from subtrack.db.errors import RecordNotFoundError
from subtrack.db.table import Table
from subtrack.errors import NotFoundError
from subtrack.models.user import User

USERS_TABLE = "users"


class UserRepository:
    """Typed access to the ``users`` table.

    Registers the table on construction, so only one ``UserRepository`` may
    be built per :class:`Database`.
    """

    def __init__(self, db: Database):
        self._db = db
        db.add_table(USERS_TABLE, User)

    def _table(self) -> Table[User]:
        return self._db.table(USERS_TABLE)

    # -- Create ----------------------------------------------------------------

    def create(self, user: User) -> User:
        """Insert a new user; ``user.id`` is assigned in place."""
        self._table().insert(user)
        return user

    # -- Read ------------------------------------------------------------------

    def get_by_id(self, user_id: int) -> User:
        try:
            return _as_user(self._table().get(user_id))
        except RecordNotFoundError:
            raise NotFoundError("user", user_id) from None

    def get_by_username(self, username: str) -> list[User]:
        return [
            _as_user(r)
            for r in self._table().find(lambda r: _as_user(r).username == username)
        ]

    def find_all(self) -> list[User]:
        return [_as_user(r) for r in self._table().find(lambda r: True)]

    # -- Update / Delete -------------------------------------------------------

    def update(self, user: User) -> User:
        try:
            self._table().update(user)
        except RecordNotFoundError:
            raise NotFoundError("user", user.id) from None
        return user

    def delete(self, user_id: int) -> None:
        try:
            self._table().delete(user_id)
        except RecordNotFoundError:
            raise NotFoundError("user", user_id) from None


def _as_user(record: Any) -> User:
    if not isinstance(record, User):
        raise TypeError(f"{USERS_TABLE} table holds a {type(record).__name__}")
    return record
