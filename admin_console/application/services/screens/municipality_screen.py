"""Municipality screen — service areas with an active flag."""

from collections.abc import Iterable, Sequence
from typing import Any

from admin_console.application.interfaces import ResourceGateway
from admin_console.application.schemas import MunicipalityPayload
from admin_console.application.services.collection_store import CollectionStore
from admin_console.application.services.workflow_orchestrator import WorkflowOrchestrator
from admin_console.domain.entities import ModalSession, Municipality

from .base import AdminScreen, Operation


class MunicipalityScreen(AdminScreen[Municipality]):
    entity_label = "Municipality"
    payload_schema = MunicipalityPayload
    actions = frozenset({"toggle-status"})
    status_options = ("all", "active", "inactive")

    def __init__(
        self,
        store: CollectionStore[Municipality],
        orchestrator: WorkflowOrchestrator,
        gateway: ResourceGateway[Municipality],
    ):
        super().__init__(store)
        self._orchestrator = orchestrator
        self._gateway = gateway

    def search_fields(self, item: Municipality) -> Iterable[str | None]:
        return (item.name, item.province)

    def status_value(self, item: Municipality) -> str:
        return "active" if item.is_active else "inactive"

    def statistics(self, items: Sequence[Municipality]) -> dict[str, Any]:
        active = sum(1 for m in items if m.is_active)
        return {"total": len(items), "active": active, "inactive": len(items) - active}

    def default_draft(self) -> dict[str, Any]:
        return {"name": "", "province": "", "is_active": True}

    def draft_from(self, item: Municipality) -> dict[str, Any]:
        return {"name": item.name, "province": item.province, "is_active": item.is_active}

    def prepare_action(self, kind: str, target: Municipality, draft: dict[str, Any]) -> Operation:
        if kind == "toggle-status":
            return lambda: self._orchestrator.toggle_active(self._gateway, target)
        return super().prepare_action(kind, target, draft)

    def success_message(self, session: ModalSession) -> str:
        if session.action == "toggle-status":
            state = "deactivated" if session.target.is_active else "activated"
            return f"{session.target.name} {state}"
        return super().success_message(session)
