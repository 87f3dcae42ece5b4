"""Domain models for users and subscriptions."""

from subtrack.models.user import User
from subtrack.models.subscription import PLANS, Plan, PlanType, Subscription, get_plan

__all__ = [
    "User",
    "Subscription", "Plan", "PlanType", "PLANS", "get_plan",
]
