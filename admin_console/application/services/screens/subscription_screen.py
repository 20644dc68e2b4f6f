"""Subscription screen — which plan each seller is on."""

from collections.abc import Iterable, Sequence
from typing import Any

from admin_console.application.services import derived_views
from admin_console.application.services.collection_store import CollectionStore
from admin_console.application.services.workflow_orchestrator import (
    WorkflowOrchestrator,
    plan_change_payload,
)
from admin_console.domain.entities import (
    ModalSession,
    Subscription,
    SubscriptionStatus,
    display_field,
    display_name,
    reference_id,
)

from .base import AdminScreen, Operation


class SubscriptionScreen(AdminScreen[Subscription]):
    entity_label = "Subscription"
    supports_create = False
    supports_edit = False
    supports_delete = False
    actions = frozenset({"change-plan"})
    status_options = ("all",) + tuple(s.value for s in SubscriptionStatus)

    def __init__(self, store: CollectionStore[Subscription], orchestrator: WorkflowOrchestrator):
        super().__init__(store)
        self._orchestrator = orchestrator

    def search_fields(self, item: Subscription) -> Iterable[str | None]:
        return (
            display_name(item.seller),
            display_field(item.seller, "email"),
            display_field(item.plan, "name"),
            display_field(item.plan, "code"),
            item.status,
        )

    def statistics(self, items: Sequence[Subscription]) -> dict[str, Any]:
        counts = derived_views.count_by(items, lambda s: s.status)
        stats: dict[str, Any] = {"total": len(items)}
        for status in SubscriptionStatus:
            stats[status.value] = counts.get(status.value, 0)
        return stats

    def action_draft(self, kind: str, item: Subscription) -> dict[str, Any]:
        return {"plan": reference_id(item.plan) or ""}

    def prepare_action(self, kind: str, target: Subscription, draft: dict[str, Any]) -> Operation:
        if kind == "change-plan":
            plan = str(draft.get("plan") or "")
            plan_change_payload(plan)
            return lambda: self._orchestrator.reassign_plan(target.id, plan)
        return super().prepare_action(kind, target, draft)

    def success_message(self, session: ModalSession) -> str:
        if session.action == "change-plan":
            return "Subscription plan updated"
        return super().success_message(session)
