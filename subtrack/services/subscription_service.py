"""Subscription service — plan validation and the active-subscription rule.

A subscription is *active* when its plan never expires (free tier) or when
``created_at + plan.duration`` is still in the future.  When a user holds
several subscriptions only the most recent one counts: an expired paid plan
is not rescued by an older free one, and a newer free plan replaces an older
paid one.
"""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import Callable, Optional, Union

from subtrack.db.subscription_repo import SubscriptionRepository
from subtrack.errors import NoActiveSubscriptionError
from subtrack.models.subscription import PlanType, Subscription, get_plan
from subtrack.services.user_service import UserService

logger = logging.getLogger(__name__)

Clock = Callable[[], datetime]


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


class SubscriptionService:
    """
    Subscription operations for the HTTP layer.

    ``clock`` is injected so expiry can be tested without sleeping.  When a
    ``user_service`` is given, ``create`` refuses subscriptions for unknown
    users.
    """

    def __init__(
        self,
        repo: SubscriptionRepository,
        user_service: Optional[UserService] = None,
        clock: Clock = utc_now,
    ):
        self._repo = repo
        self._users = user_service
        self._clock = clock

    # -- Create ----------------------------------------------------------------

    def create(self, user_id: int, plan_type: Union[PlanType, str]) -> Subscription:
        plan = get_plan(plan_type)
        if self._users is not None:
            self._users.get_by_id(user_id)

        subscription = Subscription(
            user_id=user_id,
            plan_type=plan.type,
            created_at=self._clock(),
        )
        self._repo.create(subscription)
        logger.info(
            f"Created subscription {subscription.id} for user {user_id} ({plan.type.value})"
        )
        return subscription

    # -- Read ------------------------------------------------------------------

    def get_by_id(self, subscription_id: int) -> Subscription:
        return self._repo.get_by_id(subscription_id)

    def get_by_user_id(
        self, user_id: int, plan_type: Optional[Union[PlanType, str]] = None
    ) -> list[Subscription]:
        if plan_type is None:
            return self._repo.get_by(lambda s: s.user_id == user_id)
        wanted = get_plan(plan_type).type
        return self._repo.get_by(lambda s: s.user_id == user_id and s.plan_type == wanted)

    def get_by_plan_type(self, plan_type: Union[PlanType, str]) -> list[Subscription]:
        wanted = get_plan(plan_type).type
        return self._repo.get_by(lambda s: s.plan_type == wanted)

    def find_all(self) -> list[Subscription]:
        return self._repo.find_all()

    # -- Active rule -----------------------------------------------------------

    def get_active_for_user(
        self, user_id: int, plan_type: Optional[Union[PlanType, str]] = None
    ) -> Subscription:
        """
        Return the user's most recent subscription if it is still active.

        Results from the repository are ordered by ID, which is creation
        order, so the last element is the most recent.

        Raises:
            NoActiveSubscriptionError: no subscriptions, or the latest expired.
        """
        subscriptions = self.get_by_user_id(user_id, plan_type)
        if not subscriptions:
            raise NoActiveSubscriptionError(user_id)

        latest = subscriptions[-1]
        if not latest.is_active(self._clock()):
            logger.debug(f"Subscription {latest.id} for user {user_id} expired at {latest.expires_at}")
            raise NoActiveSubscriptionError(user_id)
        return latest
