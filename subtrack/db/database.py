"""Registry of named in-memory tables."""

from __future__ import annotations

import logging
import threading
from typing import Any, Optional

from subtrack.db.errors import EmptyTableNameError, TableExistsError, TableNotFoundError
from subtrack.db.table import Table

logger = logging.getLogger(__name__)


class Database:
    """
    Append-only registry of :class:`Table` objects.

    Tables live as long as the database; there is no drop or rename.  The
    database is an ordinary object: construct one and hand it to the
    repositories that need it.
    """

    def __init__(self) -> None:
        self._tables: dict[str, Table[Any]] = {}
        self._lock = threading.Lock()

    def add_table(self, name: str, record_type: Optional[type] = None) -> Table[Any]:
        """Create and register an empty table. Raises if the name is taken."""
        if not name:
            raise EmptyTableNameError()
        with self._lock:
            if name in self._tables:
                raise TableExistsError(name)
            table: Table[Any] = Table(name, record_type)
            self._tables[name] = table
        logger.info(f"Created table {name}")
        return table

    def table(self, name: str) -> Table[Any]:
        """Return the shared handle for ``name``."""
        if not name:
            raise EmptyTableNameError()
        with self._lock:
            try:
                return self._tables[name]
            except KeyError:
                raise TableNotFoundError(name) from None

    def tables(self) -> list[str]:
        with self._lock:
            return sorted(self._tables)

    def __contains__(self, name: object) -> bool:
        with self._lock:
            return name in self._tables
