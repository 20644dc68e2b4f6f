from .reference import (
    Identifier,
    PopulatedReference,
    Reference,
    display_field,
    display_name,
    parse_reference,
    reference_id,
)
from .category import Category
from .municipality import Municipality
from .refund import Refund, RefundStatus, REFUNDED_STATUSES
from .plan import Plan
from .subscription import Subscription, SubscriptionStatus
from .modal_session import Attachment, FilterState, ModalMode, ModalSession

__all__ = [
    "Identifier",
    "PopulatedReference",
    "Reference",
    "display_field",
    "display_name",
    "parse_reference",
    "reference_id",
    "Category",
    "Municipality",
    "Refund",
    "RefundStatus",
    "REFUNDED_STATUSES",
    "Plan",
    "Subscription",
    "SubscriptionStatus",
    "Attachment",
    "FilterState",
    "ModalMode",
    "ModalSession",
]
