"""Remote collection store — the in-memory copy of one backend collection."""

import logging
from typing import Any, Generic, TypeVar

from admin_console.application.interfaces import Notifier, ResourceGateway, Severity
from admin_console.domain.entities import Attachment
from admin_console.domain.exceptions import BackendError

logger = logging.getLogger(__name__)

T = TypeVar("T")


class CollectionStore(Generic[T]):
    """Owns the collection of one resource type.

    items is only ever replaced wholesale by a successful fetch. Writes go
    straight to the gateway and leave items untouched; callers re-fetch
    after a successful write so the list always mirrors a server snapshot.

    loading is True from construction until the first fetch settles
    (success or failure). Later fetches only toggle refreshing, so rows
    already on screen never disappear behind a spinner.
    """

    def __init__(self, gateway: ResourceGateway[T], notifier: Notifier):
        self._gateway = gateway
        self._notifier = notifier
        self.items: list[T] = []
        self.loading = True
        self.refreshing = False
        self.has_loaded = False
        self.error: str | None = None
        self._last_filters: dict[str, Any] | None = None

    @property
    def resource_name(self) -> str:
        return self._gateway.resource_name

    @property
    def show_spinner(self) -> bool:
        """Only an initial, still-empty load blocks the screen."""
        return self.loading and not self.items

    async def fetch(self, filters: dict[str, Any] | None = None) -> list[T]:
        """Replace items with the server collection.

        On failure the previous items are kept, the error is recorded and
        surfaced as a notification; nothing is raised.
        """
        if filters is not None:
            self._last_filters = dict(filters)
        self.refreshing = True
        try:
            fresh = await self._gateway.fetch_all(self._last_filters)
        except BackendError as e:
            self.error = e.message
            logger.error("Failed to fetch %s: %s", self.resource_name, e)
            self._notifier.notify(
                f"Failed to load {self.resource_name}: {e.message}", Severity.ERROR
            )
        else:
            self.items = list(fresh)
            self.error = None
            logger.debug("Loaded %d %s", len(self.items), self.resource_name)
        finally:
            self.refreshing = False
            self.loading = False
            self.has_loaded = True
        return self.items

    async def fetch_one(self, resource_id: str) -> T:
        return await self._gateway.fetch_one(resource_id)

    async def create(
        self, payload: dict[str, Any], attachment: Attachment | None = None
    ) -> T:
        return await self._gateway.create(payload, attachment)

    async def update(self, resource_id: str, payload: dict[str, Any]) -> T:
        return await self._gateway.update(resource_id, payload)

    async def delete(self, resource_id: str) -> None:
        await self._gateway.delete(resource_id)

    def find(self, resource_id: str) -> T | None:
        for item in self.items:
            if getattr(item, "id", None) == resource_id:
                return item
        return None

    def clear_error(self) -> None:
        self.error = None
