"""Plan screen — subscription plans offered to sellers."""

from collections.abc import Iterable, Sequence
from datetime import datetime, timezone
from typing import Any

from admin_console.application.schemas import PlanPayload
from admin_console.domain.entities import Plan

from .base import AdminScreen


class PlanScreen(AdminScreen[Plan]):
    entity_label = "Plan"
    payload_schema = PlanPayload
    status_options = ("all", "active", "inactive")

    def search_fields(self, item: Plan) -> Iterable[str | None]:
        return (item.code, item.name, item.description)

    def status_value(self, item: Plan) -> str:
        return "active" if item.is_active else "inactive"

    def statistics(self, items: Sequence[Plan]) -> dict[str, Any]:
        now = datetime.now(timezone.utc)
        active = sum(1 for p in items if p.is_active)
        return {
            "total": len(items),
            "active": active,
            "inactive": len(items) - active,
            "discounted": sum(1 for p in items if p.discount_active(now)),
        }

    def default_draft(self) -> dict[str, Any]:
        return {
            "code": "",
            "name": "",
            "description": "",
            "price": 0,
            "currency": "PHP",
            "interval": "monthly",
            "features": [],
            "discount_percent": 0,
            "discount_expires_at": None,
            "is_active": True,
        }

    def draft_from(self, item: Plan) -> dict[str, Any]:
        return {
            "code": item.code,
            "name": item.name,
            "description": item.description,
            "price": item.price,
            "currency": item.currency,
            "interval": item.interval,
            "features": list(item.features),
            "discount_percent": item.discount_percent,
            "discount_expires_at": item.discount_expires_at,
            "is_active": item.is_active,
        }
