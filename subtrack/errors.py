"""Service-level error types shared by repositories, services and the API."""

from __future__ import annotations

from typing import Any, Optional


class SubtrackError(Exception):
    """Base class for all domain errors."""


class NotFoundError(SubtrackError):
    """The requested entity does not exist."""

    def __init__(self, entity: str, key: Any = None, message: Optional[str] = None) -> None:
        super().__init__(message or f"{entity} not found: {key}")
        self.entity = entity
        self.key = key


class NoActiveSubscriptionError(NotFoundError):
    """The user has no subscription that is currently active."""

    def __init__(self, user_id: int) -> None:
        super().__init__("subscription", user_id, f"no active subscription for user {user_id}")
        self.user_id = user_id


class ValidationError(SubtrackError, ValueError):
    """Input rejected before it reached the store."""


class InvalidDomainValueError(ValidationError):
    """A value is outside the set the domain accepts."""


class InvalidPlanTypeError(InvalidDomainValueError):
    """Unknown subscription plan."""

    def __init__(self, plan_type: Any) -> None:
        super().__init__(f"invalid plan type: {plan_type!r}")
        self.plan_type = plan_type
