"""Domain entity for customer refund requests."""

from dataclasses import dataclass
from datetime import datetime
from enum import Enum

from .reference import Identifier, Reference


class RefundStatus(str, Enum):
    """Lifecycle states of a refund request."""

    PENDING = "pending"
    APPROVED = "approved"
    PROCESSED = "processed"
    REJECTED = "rejected"
    FAILED = "failed"


# Statuses whose amount counts as money already refunded
REFUNDED_STATUSES = frozenset({RefundStatus.APPROVED.value, RefundStatus.PROCESSED.value})


@dataclass
class Refund:
    """A customer's request to be refunded for an order.

    status is kept as the raw wire string so unknown backend states survive
    a round trip; compare it against RefundStatus members.
    """

    id: Identifier
    order: Reference | None
    customer: Reference | None
    status: str = RefundStatus.PENDING.value
    amount: float | None = None
    seller: Reference | None = None
    reason: str = ""
    admin_note: str | None = None
    created_at: datetime | None = None

    @property
    def is_pending(self) -> bool:
        return self.status == RefundStatus.PENDING

    @property
    def awaiting_payout(self) -> bool:
        """Approved but not yet processed — a failed second approval step leaves this."""
        return self.status == RefundStatus.APPROVED
