"""A single named collection of records keyed by an auto-incrementing ID."""

from __future__ import annotations

import copy
import logging
from typing import Callable, Generic, Optional, Protocol, TypeVar, runtime_checkable

from subtrack.db.errors import AlreadyHasIDError, RecordNotFoundError
from subtrack.db.locks import RWLock

logger = logging.getLogger(__name__)

PrimaryKey = int

UNSET_ID: PrimaryKey = 0


@runtime_checkable
class Record(Protocol):
    """Anything storable in a :class:`Table`: it has a gettable/settable ``id``."""

    id: PrimaryKey


R = TypeVar("R", bound=Record)


class Table(Generic[R]):
    """
    In-memory table of records of one type.

    The table owns ID issuance: ``insert`` is the only operation that assigns
    keys, and keys are never reissued even after ``delete``.  Stored records
    are private copies; everything handed back to callers is a snapshot, so
    changes must go through ``update``.

    ``insert``/``update``/``delete`` hold the write lock, ``get``/``find``
    hold the read lock.
    """

    def __init__(self, name: str, record_type: Optional[type[R]] = None):
        self._name = name
        self._record_type = record_type
        self._last_id: PrimaryKey = UNSET_ID
        self._data: dict[PrimaryKey, R] = {}
        self._lock = RWLock()

    @property
    def name(self) -> str:
        return self._name

    def __len__(self) -> int:
        with self._lock.read():
            return len(self._data)

    def __repr__(self) -> str:
        return f"Table(name={self._name!r}, records={len(self)})"

    # -- Mutations -------------------------------------------------------------

    def insert(self, record: R) -> None:
        """Assign the next ID to ``record`` (in place) and store a copy of it."""
        self._check_type(record)
        with self._lock.write():
            if record.id != UNSET_ID:
                raise AlreadyHasIDError(self._name, record.id)
            stored = copy.deepcopy(record)
            stored.id = self._last_id + 1
            self._data[stored.id] = stored
            self._last_id = stored.id
            record.id = stored.id
        logger.debug(f"Inserted record {record.id} into {self._name}")

    def update(self, record: R) -> None:
        """Replace the stored record with the same ID wholesale."""
        self._check_type(record)
        with self._lock.write():
            if record.id not in self._data:
                raise RecordNotFoundError(self._name, record.id)
            self._data[record.id] = copy.deepcopy(record)
        logger.debug(f"Updated record {record.id} in {self._name}")

    def delete(self, key: PrimaryKey) -> None:
        with self._lock.write():
            if key not in self._data:
                raise RecordNotFoundError(self._name, key)
            del self._data[key]
        logger.debug(f"Deleted record {key} from {self._name}")

    # -- Reads -----------------------------------------------------------------

    def get(self, key: PrimaryKey) -> R:
        with self._lock.read():
            try:
                record = self._data[key]
            except KeyError:
                raise RecordNotFoundError(self._name, key) from None
            return copy.deepcopy(record)

    def find(self, predicate: Callable[[R], bool]) -> list[R]:
        """Return copies of every record matching ``predicate``, ordered by ID.

        The predicate sees a snapshot taken under the read lock and runs after
        the lock is released, so it may read or write this table.
        """
        with self._lock.read():
            snapshot = [copy.deepcopy(record) for _, record in sorted(self._data.items())]
        return [record for record in snapshot if predicate(record)]

    # -- Helpers ---------------------------------------------------------------

    def _check_type(self, record: R) -> None:
        if self._record_type is not None and not isinstance(record, self._record_type):
            raise TypeError(
                f"table {self._name!r} stores {self._record_type.__name__}, "
                f"got {type(record).__name__}"
            )
