"""Domain entity for seller subscription plans."""

from dataclasses import dataclass, field
from datetime import datetime, timezone

from .reference import Identifier


@dataclass
class Plan:
    """A subscription plan sellers can be assigned to."""

    id: Identifier
    code: str
    name: str
    price: float = 0.0
    description: str = ""
    currency: str = "PHP"
    interval: str = "monthly"
    features: list[str] = field(default_factory=list)
    discount_percent: float = 0.0
    discount_expires_at: datetime | None = None
    is_active: bool = True
    created_at: datetime | None = None

    def discount_active(self, now: datetime | None = None) -> bool:
        """A discount applies when a percent is set and it has not expired."""
        if not self.discount_percent:
            return False
        if self.discount_expires_at is None:
            return True
        now = now or datetime.now(timezone.utc)
        return self.discount_expires_at > now

    def final_price(self, now: datetime | None = None) -> int | float:
        """Price after an active discount, rounded, never below 1."""
        if not self.discount_active(now):
            return self.price
        discounted = self.price * (1 - self.discount_percent / 100)
        return max(round(discounted), 1)
