"""Screen context — the handle the presentation layer works with."""

import logging
from dataclasses import dataclass, field
from typing import Any, Generic, TypeVar

from admin_console.application.services import derived_views
from admin_console.application.services.collection_store import CollectionStore
from admin_console.application.services.modal_controller import ModalController
from admin_console.application.services.screens import AdminScreen
from admin_console.domain.entities import FilterState

logger = logging.getLogger(__name__)

T = TypeVar("T")


@dataclass
class ScreenContext(Generic[T]):
    """Binds a screen's store, dialog controller and filter state."""

    screen: AdminScreen[T]
    store: CollectionStore[T]
    modal: ModalController[T]
    filters: FilterState = field(default_factory=FilterState)

    async def load(self) -> list[T]:
        return await self.store.fetch(self.screen.fetch_filters(self.filters.status))

    def set_query(self, query: str) -> None:
        """Text search stays local; typing never hits the network."""
        self.filters.query = query

    async def set_status(self, status: str) -> list[T]:
        """A status change re-fetches (the screen may delegate it to the backend)."""
        self.filters.status = status or derived_views.ALL_STATUSES
        logger.debug("%s status filter → %s", self.store.resource_name, self.filters.status)
        return await self.load()

    def visible_items(self) -> list[T]:
        return derived_views.apply_filters(
            self.store.items,
            self.filters,
            self.screen.search_fields,
            self.screen.status_value,
        )

    def statistics(self) -> dict[str, Any]:
        return self.screen.statistics(self.store.items)
