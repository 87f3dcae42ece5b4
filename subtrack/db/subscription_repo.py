"""Repository for the ``subscription`` table."""

from __future__ import annotations

from typing import Any, Callable

from subtrack.db.database import Database
from subtrack.db.errors import RecordNotFoundError
from subtrack.db.table import Table
from subtrack.errors import NotFoundError
from subtrack.models.subscription import Subscription

SUBSCRIPTIONS_TABLE = "subscription"


class SubscriptionRepository:
    """Typed access to the ``subscription`` table."""

    def __init__(self, db: Database):
        self._db = db
        db.add_table(SUBSCRIPTIONS_TABLE, Subscription)

    def _table(self) -> Table[Subscription]:
        return self._db.table(SUBSCRIPTIONS_TABLE)

    # -- Create ----------------------------------------------------------------

    def create(self, subscription: Subscription) -> Subscription:
        self._table().insert(subscription)
        return subscription

    # -- Read ------------------------------------------------------------------

    def get_by_id(self, subscription_id: int) -> Subscription:
        try:
            return _as_subscription(self._table().get(subscription_id))
        except RecordNotFoundError:
            raise NotFoundError("subscription", subscription_id) from None

    def get_by(self, predicate: Callable[[Subscription], bool]) -> list[Subscription]:
        """All subscriptions matching ``predicate``, oldest ID first."""
        return [
            _as_subscription(r)
            for r in self._table().find(lambda r: predicate(_as_subscription(r)))
        ]

    def find_all(self) -> list[Subscription]:
        return self.get_by(lambda s: True)

    # -- Update / Delete -------------------------------------------------------

    def update(self, subscription: Subscription) -> Subscription:
        try:
            self._table().update(subscription)
        except RecordNotFoundError:
            raise NotFoundError("subscription", subscription.id) from None
        return subscription

    def delete(self, subscription_id: int) -> None:
        try:
            self._table().delete(subscription_id)
        except RecordNotFoundError:
            raise NotFoundError("subscription", subscription_id) from None


def _as_subscription(record: Any) -> Subscription:
    if not isinstance(record, Subscription):
        raise TypeError(f"{SUBSCRIPTIONS_TABLE} table holds a {type(record).__name__}")
    return record
