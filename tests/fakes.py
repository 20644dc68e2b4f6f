"""In-memory fakes for the console's ports."""

import asyncio
from collections.abc import Callable
from typing import Any

from admin_console.application.interfaces import (
    CategoryGateway,
    Notifier,
    RefundGateway,
    ResourceGateway,
    Severity,
)
from admin_console.domain.entities import Attachment, Category, Refund
from admin_console.domain.exceptions import BackendError, EntityNotFoundError
from admin_console.infrastructure.admin_api.mappers import (
    category_from_payload,
    refund_from_payload,
)


class RecordingNotifier(Notifier):
    """Keeps every notification for assertions."""

    def __init__(self):
        self.messages: list[tuple[str, str]] = []

    def notify(self, message: str, severity: Severity | str = Severity.INFO) -> None:
        value = severity.value if isinstance(severity, Severity) else str(severity)
        self.messages.append((value, message))

    def of(self, severity: str) -> list[str]:
        return [m for s, m in self.messages if s == severity]


class FakeGateway(ResourceGateway[Any]):
    """Stores raw backend documents and maps them on every read, like the real API."""

    def __init__(
        self,
        mapper: Callable[[dict[str, Any]], Any],
        resource_name: str = "items",
        documents: list[dict[str, Any]] | None = None,
    ):
        self._mapper = mapper
        self._resource_name = resource_name
        self._docs: dict[str, dict[str, Any]] = {}
        self._next_id = 1
        for doc in documents or []:
            self._docs[doc["_id"]] = dict(doc)
        self.calls: list[tuple[str, Any]] = []
        self.fail_with: BackendError | None = None
        self.fail_fetch_with: BackendError | None = None
        self.gate: asyncio.Event | None = None
        self.last_attachment: Attachment | None = None

    @property
    def resource_name(self) -> str:
        return self._resource_name

    async def _maybe_wait(self) -> None:
        if self.gate is not None:
            await self.gate.wait()

    def _new_id(self) -> str:
        new_id = f"{self._next_id:024x}"
        self._next_id += 1
        return new_id

    async def fetch_all(self, filters: dict[str, Any] | None = None) -> list[Any]:
        self.calls.append(("fetch_all", filters))
        await self._maybe_wait()
        if self.fail_fetch_with:
            raise self.fail_fetch_with
        docs = list(self._docs.values())
        for key, value in (filters or {}).items():
            docs = [d for d in docs if d.get(key) == value]
        return [self._mapper(d) for d in docs]

    async def fetch_one(self, resource_id: str) -> Any:
        self.calls.append(("fetch_one", resource_id))
        if resource_id not in self._docs:
            raise EntityNotFoundError(self._resource_name, resource_id)
        return self._mapper(self._docs[resource_id])

    async def create(self, payload: dict[str, Any], attachment: Attachment | None = None) -> Any:
        self.calls.append(("create", payload))
        self.last_attachment = attachment
        await self._maybe_wait()
        if self.fail_with:
            raise self.fail_with
        doc = {"_id": self._new_id(), **payload}
        self._docs[doc["_id"]] = doc
        return self._mapper(doc)

    async def update(self, resource_id: str, payload: dict[str, Any]) -> Any:
        self.calls.append(("update", (resource_id, payload)))
        await self._maybe_wait()
        if self.fail_with:
            raise self.fail_with
        if resource_id not in self._docs:
            raise EntityNotFoundError(self._resource_name, resource_id)
        self._docs[resource_id].update(payload)
        return self._mapper(self._docs[resource_id])

    async def delete(self, resource_id: str) -> None:
        self.calls.append(("delete", resource_id))
        await self._maybe_wait()
        if self.fail_with:
            raise self.fail_with
        if resource_id not in self._docs:
            raise EntityNotFoundError(self._resource_name, resource_id)
        del self._docs[resource_id]

    def count(self, operation: str) -> int:
        return sum(1 for name, _ in self.calls if name == operation)


class FakeRefundGateway(FakeGateway, RefundGateway):
    """Refund fake whose approve/process/reject steps can be made to fail."""

    def __init__(self, documents: list[dict[str, Any]] | None = None):
        super().__init__(refund_from_payload, "refunds", documents)
        self.fail_step: str | None = None

    def _decide(self, step: str, refund_id: str, **changes: Any) -> Refund:
        self.calls.append((step, refund_id))
        if self.fail_step == step:
            raise BackendError("refunds", 502, f"{step} failed")
        if refund_id not in self._docs:
            raise EntityNotFoundError("refunds", refund_id)
        self._docs[refund_id].update(changes)
        return self._mapper(self._docs[refund_id])

    async def approve(self, refund_id: str, note: str | None = None) -> Refund:
        return self._decide("approve", refund_id, status="approved", adminNote=note)

    async def process(self, refund_id: str) -> Refund:
        return self._decide("process", refund_id, status="processed")

    async def reject(self, refund_id: str, note: str) -> Refund:
        return self._decide("reject", refund_id, status="rejected", adminNote=note)


class FakeCategoryGateway(FakeGateway, CategoryGateway):
    """Hides inactive categories unless includeInactive is asked for, like the backend."""

    def __init__(self, documents: list[dict[str, Any]] | None = None):
        super().__init__(category_from_payload, "categories", documents)

    async def fetch_all(self, filters: dict[str, Any] | None = None) -> list[Category]:
        sent = filters
        filters = dict(filters or {})
        include_inactive = filters.pop("includeInactive", False)
        items = await super().fetch_all(filters)
        self.calls[-1] = ("fetch_all", sent)
        if include_inactive:
            return items
        return [item for item in items if item.is_active]

    async def toggle(self, category_id: str) -> Category:
        self.calls.append(("toggle", category_id))
        await self._maybe_wait()
        if self.fail_with:
            raise self.fail_with
        if category_id not in self._docs:
            raise EntityNotFoundError("categories", category_id)
        doc = self._docs[category_id]
        doc["isActive"] = not doc.get("isActive", True)
        return self._mapper(doc)
