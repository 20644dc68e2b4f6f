"""Domain entity for seller subscriptions."""

import math
from dataclasses import dataclass
from datetime import datetime, timezone
from enum import Enum

from .reference import Identifier, Reference


class SubscriptionStatus(str, Enum):
    """Lifecycle states of a seller subscription."""

    ACTIVE = "active"
    EXPIRED = "expired"
    CANCELED = "canceled"


@dataclass
class Subscription:
    """Links a seller to a plan for a billing period."""

    id: Identifier
    seller: Reference | None
    plan: Reference | None
    status: str = SubscriptionStatus.ACTIVE.value
    current_period_start: datetime | None = None
    current_period_end: datetime | None = None
    cancel_at_period_end: bool = False
    created_at: datetime | None = None

    def days_until_expiry(self, now: datetime | None = None) -> int | None:
        """Whole days left in the current period (rounded up, never negative)."""
        if self.current_period_end is None:
            return None
        now = now or datetime.now(timezone.utc)
        remaining = (self.current_period_end - now).total_seconds() / 86400
        days = math.ceil(remaining)
        return days if days > 0 else 0
