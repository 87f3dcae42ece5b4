"""Data layer — in-memory tables with a repository per entity type."""

from subtrack.db.database import Database
from subtrack.db.errors import (
    AlreadyHasIDError,
    EmptyTableNameError,
    RecordNotFoundError,
    StoreError,
    TableExistsError,
    TableNotFoundError,
)
from subtrack.db.table import UNSET_ID, PrimaryKey, Record, Table

__all__ = [
    "Database", "Table", "Record", "PrimaryKey", "UNSET_ID",
    "StoreError", "EmptyTableNameError", "TableNotFoundError", "TableExistsError",
    "AlreadyHasIDError", "RecordNotFoundError",
]
