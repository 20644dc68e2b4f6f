"""Convert backend JSON documents into domain entities."""

import logging
from datetime import datetime
from typing import Any

from admin_console.domain.entities import (
    Category,
    Municipality,
    Plan,
    Refund,
    RefundStatus,
    Subscription,
    SubscriptionStatus,
    parse_reference,
)

logger = logging.getLogger(__name__)


def _id(data: dict[str, Any]) -> str:
    return str(data.get("_id") or data.get("id") or "")


def _datetime(raw: Any) -> datetime | None:
    if not raw or not isinstance(raw, str):
        return None
    try:
        return datetime.fromisoformat(raw.replace("Z", "+00:00"))
    except ValueError:
        logger.debug("Unparseable timestamp %r", raw)
        return None


def _number(raw: Any) -> float | None:
    if raw is None or isinstance(raw, bool):
        return None
    try:
        return float(raw)
    except (TypeError, ValueError):
        return None


def category_from_payload(data: dict[str, Any]) -> Category:
    parent = data.get("parentCategory", data.get("parent"))
    return Category(
        id=_id(data),
        name=data.get("name", ""),
        description=data.get("description") or "",
        parent=parse_reference(parent),
        is_active=bool(data.get("isActive", True)),
        image=data.get("image") or None,
        created_at=_datetime(data.get("createdAt")),
    )


def municipality_from_payload(data: dict[str, Any]) -> Municipality:
    return Municipality(
        id=_id(data),
        name=data.get("name", ""),
        province=data.get("province") or "",
        is_active=bool(data.get("isActive", True)),
        created_at=_datetime(data.get("createdAt")),
    )


def refund_from_payload(data: dict[str, Any]) -> Refund:
    return Refund(
        id=_id(data),
        order=parse_reference(data.get("order") or data.get("orderId")),
        customer=parse_reference(
            data.get("customer") or data.get("user") or data.get("customerId")
        ),
        seller=parse_reference(data.get("seller") or data.get("vendor")),
        amount=_number(data.get("amount")),
        reason=data.get("reason") or "",
        status=data.get("status") or RefundStatus.PENDING.value,
        admin_note=data.get("adminNote") or data.get("adminNotes"),
        created_at=_datetime(data.get("createdAt")),
    )


def plan_from_payload(data: dict[str, Any]) -> Plan:
    return Plan(
        id=_id(data),
        code=data.get("code", ""),
        name=data.get("name", ""),
        description=data.get("description") or "",
        price=_number(data.get("price")) or 0.0,
        currency=data.get("currency") or "PHP",
        interval=data.get("interval") or "monthly",
        features=list(data.get("features") or []),
        discount_percent=_number(data.get("discountPercent")) or 0.0,
        discount_expires_at=_datetime(data.get("discountExpiresAt")),
        is_active=bool(data.get("isActive", True)),
        created_at=_datetime(data.get("createdAt")),
    )


def subscription_from_payload(data: dict[str, Any]) -> Subscription:
    return Subscription(
        id=_id(data),
        seller=parse_reference(data.get("sellerId") or data.get("seller")),
        plan=parse_reference(data.get("planId") or data.get("plan")),
        status=data.get("status") or SubscriptionStatus.ACTIVE.value,
        current_period_start=_datetime(data.get("currentPeriodStart")),
        current_period_end=_datetime(data.get("currentPeriodEnd")),
        cancel_at_period_end=bool(data.get("cancelAtPeriodEnd", False)),
        created_at=_datetime(data.get("createdAt")),
    )
