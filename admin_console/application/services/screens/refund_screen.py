"""Refund screen — review, approve, reject and pay out refund requests."""

from collections.abc import Iterable, Sequence
from typing import Any

from admin_console.application.schemas import RefundApproval, RefundRejection
from admin_console.application.services import derived_views
from admin_console.application.services.collection_store import CollectionStore
from admin_console.application.services.workflow_orchestrator import WorkflowOrchestrator
from admin_console.domain.entities import (
    REFUNDED_STATUSES,
    ModalSession,
    Refund,
    RefundStatus,
    display_field,
    display_name,
)
from admin_console.domain.exceptions import DraftValidationError

from .base import AdminScreen, Operation


class RefundScreen(AdminScreen[Refund]):
    """Refunds are never created or edited by admins, only decided on.

    The status filter is delegated to the backend so large histories are
    not downloaded just to show the pending queue.
    """

    entity_label = "Refund"
    supports_create = False
    supports_edit = False
    supports_delete = False
    actions = frozenset({"approve", "reject", "process"})
    status_options = ("all",) + tuple(s.value for s in RefundStatus)

    def __init__(self, store: CollectionStore[Refund], orchestrator: WorkflowOrchestrator):
        super().__init__(store)
        self._orchestrator = orchestrator

    def search_fields(self, item: Refund) -> Iterable[str | None]:
        return (
            derived_views.format_order_reference(item.order),
            display_name(item.customer),
            display_field(item.customer, "email"),
            display_name(item.seller),
            item.reason,
        )

    def fetch_filters(self, status: str) -> dict[str, Any]:
        if not status or status == derived_views.ALL_STATUSES:
            return {}
        return {"status": status}

    def statistics(self, items: Sequence[Refund]) -> dict[str, Any]:
        counts = derived_views.count_by(items, lambda r: r.status)
        stats: dict[str, Any] = {"total": len(items)}
        for status in RefundStatus:
            stats[status.value] = counts.get(status.value, 0)
        stats["total_refunded"] = derived_views.sum_amount(items, REFUNDED_STATUSES)
        return stats

    def action_draft(self, kind: str, item: Refund) -> dict[str, Any]:
        return {"note": ""}

    def prepare_action(self, kind: str, target: Refund, draft: dict[str, Any]) -> Operation:
        if kind == "approve":
            approval = self.validate(RefundApproval, draft)
            return lambda: self._orchestrator.approve_refund(target.id, approval.note)
        if kind == "reject":
            rejection = self.validate(RefundRejection, draft)
            return lambda: self._orchestrator.reject_refund(target.id, rejection.note)
        if kind == "process":
            if target.status != RefundStatus.APPROVED:
                raise DraftValidationError("Only approved refunds can be processed")
            return lambda: self._orchestrator.process_refund(target.id)
        return super().prepare_action(kind, target, draft)

    def success_message(self, session: ModalSession) -> str:
        return {
            "approve": "Refund approved and processed",
            "reject": "Refund rejected",
            "process": "Refund processed",
        }.get(session.action, super().success_message(session))
