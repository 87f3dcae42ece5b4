"""User domain model."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass
class User:
    """An account that can hold subscriptions."""

    username: str = ""
    id: int = 0

    def to_dict(self) -> dict[str, Any]:
        return {"id": self.id, "username": self.username}
