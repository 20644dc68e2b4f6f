"""Category screen — tree of product categories."""

from collections.abc import Iterable, Sequence
from typing import Any

from admin_console.application.interfaces import CategoryGateway
from admin_console.application.schemas import CategoryPayload
from admin_console.application.services import derived_views
from admin_console.application.services.collection_store import CollectionStore
from admin_console.application.services.workflow_orchestrator import WorkflowOrchestrator
from admin_console.domain.entities import Category, ModalSession, display_name

from .base import AdminScreen, Operation


class CategoryScreen(AdminScreen[Category]):
    entity_label = "Category"
    payload_schema = CategoryPayload
    actions = frozenset({"toggle-status"})
    status_options = ("all", "active", "inactive")

    def __init__(
        self,
        store: CollectionStore[Category],
        orchestrator: WorkflowOrchestrator,
        gateway: CategoryGateway,
    ):
        super().__init__(store)
        self._orchestrator = orchestrator
        self._gateway = gateway

    def search_fields(self, item: Category) -> Iterable[str | None]:
        return (item.name, item.description, self.parent_name(item))

    def status_value(self, item: Category) -> str:
        return "active" if item.is_active else "inactive"

    def parent_name(self, item: Category) -> str | None:
        """Parent label, resolving bare identifiers against the loaded collection."""
        if item.parent_id is None:
            return None
        parent = self._store.find(item.parent_id)
        if parent is not None:
            return parent.name
        return display_name(item.parent)

    def fetch_filters(self, status: str) -> dict[str, Any]:
        """Inactive categories are hidden by the backend unless asked for."""
        return {"includeInactive": True}

    def statistics(self, items: Sequence[Category]) -> dict[str, Any]:
        active = sum(1 for c in items if c.is_active)
        return {
            "total": len(items),
            "roots": len(derived_views.root_items(items)),
            "active": active,
            "inactive": len(items) - active,
        }

    def subcategory_count(self, item: Category, items: Sequence[Category]) -> int:
        return derived_views.subcategory_count(items, item.id)

    def delete_warning(self, item: Category, items: Sequence[Category]) -> str | None:
        count = self.subcategory_count(item, items)
        if not count:
            return None
        noun = "subcategory" if count == 1 else "subcategories"
        return f"This category has {count} {noun} that will be orphaned."

    def default_draft(self) -> dict[str, Any]:
        return {
            "name": "",
            "description": "",
            "parent_category": None,
            "is_active": True,
            "image_file": None,
        }

    def draft_from(self, item: Category) -> dict[str, Any]:
        return {
            "name": item.name,
            "description": item.description,
            "parent_category": item.parent_id,
            "is_active": item.is_active,
        }

    def prepare_action(self, kind: str, target: Category, draft: dict[str, Any]) -> Operation:
        if kind == "toggle-status":
            return lambda: self._orchestrator.toggle_category(self._gateway, target)
        return super().prepare_action(kind, target, draft)

    def success_message(self, session: ModalSession) -> str:
        if session.action == "toggle-status":
            state = "deactivated" if session.target.is_active else "activated"
            return f"Category {state}"
        return super().success_message(session)
