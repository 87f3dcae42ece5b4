"""Subscription domain model and the plan catalogue."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timedelta
from enum import Enum
from typing import Any, Optional, Union

from subtrack.errors import InvalidPlanTypeError


class PlanType(str, Enum):
    FREE = "free"
    BASIC = "basic"
    PREMIUM = "premium"


@dataclass(frozen=True)
class Plan:
    """A purchasable plan. A zero ``duration`` never expires."""

    type: PlanType
    price: float
    duration: timedelta

    @property
    def is_free_tier(self) -> bool:
        return self.duration == timedelta(0)


PLAN_DURATION = timedelta(days=30)

PLANS: dict[PlanType, Plan] = {
    PlanType.FREE: Plan(PlanType.FREE, 0.0, timedelta(0)),
    PlanType.BASIC: Plan(PlanType.BASIC, 9.99, PLAN_DURATION),
    PlanType.PREMIUM: Plan(PlanType.PREMIUM, 19.99, PLAN_DURATION),
}


def get_plan(plan_type: Union[PlanType, str]) -> Plan:
    """Look up a plan, accepting the enum or its string value."""
    try:
        return PLANS[PlanType(plan_type)]
    except (ValueError, KeyError):
        raise InvalidPlanTypeError(plan_type) from None


@dataclass
class Subscription:
    """A user's subscription to one plan, starting at ``created_at``."""

    user_id: int = 0
    plan_type: PlanType = PlanType.FREE
    created_at: Optional[datetime] = None
    id: int = 0

    @property
    def plan(self) -> Plan:
        return get_plan(self.plan_type)

    @property
    def expires_at(self) -> Optional[datetime]:
        """End of the paid period; ``None`` for free-tier plans or unsaved rows."""
        if self.created_at is None or self.plan.is_free_tier:
            return None
        return self.created_at + self.plan.duration

    def is_active(self, now: datetime) -> bool:
        if self.plan.is_free_tier:
            return True
        expires_at = self.expires_at
        return expires_at is not None and expires_at > now

    def to_dict(self) -> dict[str, Any]:
        expires_at = self.expires_at
        return {
            "id": self.id,
            "user_id": self.user_id,
            "plan_type": self.plan_type.value,
            "created_at": self.created_at.isoformat() if self.created_at else None,
            "expires_at": expires_at.isoformat() if expires_at else None,
        }
