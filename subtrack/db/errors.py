"""Error types raised by the in-memory table store."""

from __future__ import annotations

from typing import Optional


class StoreError(Exception):
    """Base class for all store errors."""


class EmptyTableNameError(StoreError, ValueError):
    """No table name was provided."""

    def __init__(self) -> None:
        super().__init__("no table name provided")


class TableNotFoundError(StoreError):
    """The named table is not registered."""

    def __init__(self, name: str) -> None:
        super().__init__(f"no table found: {name!r}")
        self.table = name


class TableExistsError(StoreError):
    """A table with the same name is already registered."""

    def __init__(self, name: str) -> None:
        super().__init__(f"table already exists: {name!r}")
        self.table = name


class AlreadyHasIDError(StoreError):
    """Insert was given a record that already carries a primary key."""

    def __init__(self, table: str, key: int) -> None:
        super().__init__(f"record already has an ID ({key}) in table {table!r}")
        self.table = table
        self.key = key


class RecordNotFoundError(StoreError):
    """No record is stored under the given primary key."""

    def __init__(self, table: str, key: Optional[int]) -> None:
        super().__init__(f"not found: {table!r} has no record with ID {key}")
        self.table = table
        self.key = key
