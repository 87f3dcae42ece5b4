"""Service layer for users and subscriptions."""

from subtrack.services.user_service import UserService
from subtrack.services.subscription_service import SubscriptionService, utc_now

__all__ = ["UserService", "SubscriptionService", "utc_now"]
