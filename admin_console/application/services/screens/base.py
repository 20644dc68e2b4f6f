"""Base class for resource screens.

A screen describes one resource type to the generic machinery: which
fields are searchable, what a fresh or edit draft looks like, how a draft
becomes a validated payload, and which backend operation each dialog
submits.
"""

from abc import ABC, abstractmethod
from collections.abc import Awaitable, Callable, Iterable, Sequence
from typing import Any, ClassVar, Generic, TypeVar

from pydantic import BaseModel, ValidationError

from admin_console.application.schemas import first_error_message
from admin_console.application.services.collection_store import CollectionStore
from admin_console.domain.entities import Attachment, ModalMode, ModalSession
from admin_console.domain.exceptions import DraftValidationError

T = TypeVar("T")

Operation = Callable[[], Awaitable[Any]]


class AdminScreen(ABC, Generic[T]):
    """Resource-specific configuration for one admin screen."""

    entity_label: ClassVar[str] = "Item"
    payload_schema: ClassVar[type[BaseModel] | None] = None
    supports_create: ClassVar[bool] = True
    supports_edit: ClassVar[bool] = True
    supports_delete: ClassVar[bool] = True
    actions: ClassVar[frozenset[str]] = frozenset()
    status_options: ClassVar[tuple[str, ...]] = ()

    def __init__(self, store: CollectionStore[T]):
        self._store = store

    @property
    def resource_name(self) -> str:
        return self._store.resource_name

    # ── Views ────────────────────────────────────────────────────────

    @abstractmethod
    def search_fields(self, item: T) -> Iterable[str | None]:
        """Strings the text search matches against."""
        ...

    def status_value(self, item: T) -> Any:
        return getattr(item, "status", None)

    def fetch_filters(self, status: str) -> dict[str, Any] | None:
        """Query filters sent on fetch for a status selection (None = local only)."""
        return None

    @abstractmethod
    def statistics(self, items: Sequence[T]) -> dict[str, Any]:
        ...

    def delete_warning(self, item: T, items: Sequence[T]) -> str | None:
        return None

    # ── Drafts ───────────────────────────────────────────────────────

    def default_draft(self) -> dict[str, Any]:
        return {}

    def draft_from(self, item: T) -> dict[str, Any]:
        return {}

    def action_draft(self, kind: str, item: T) -> dict[str, Any]:
        return {}

    def supports(self, mode: ModalMode, action: str | None = None) -> bool:
        if mode is ModalMode.CREATE:
            return self.supports_create
        if mode is ModalMode.EDIT:
            return self.supports_edit
        if mode is ModalMode.DELETE_CONFIRM:
            return self.supports_delete
        if mode is ModalMode.ACTION_CONFIRM:
            return action in self.actions
        return False

    # ── Submission ───────────────────────────────────────────────────

    def validate(self, schema: type[BaseModel], draft: dict[str, Any]) -> BaseModel:
        """Run a draft through a schema; the first problem becomes a DraftValidationError."""
        try:
            return schema.model_validate(draft)
        except ValidationError as e:
            message, field = first_error_message(e)
            raise DraftValidationError(message, field) from e

    def build_payload(self, draft: dict[str, Any]) -> dict[str, Any]:
        if self.payload_schema is None:
            raise DraftValidationError(f"{self.entity_label} cannot be edited here")
        model = self.validate(self.payload_schema, draft)
        return model.model_dump(mode="json", by_alias=True)

    def prepare(self, session: ModalSession, draft: dict[str, Any]) -> Operation:
        """Validate the draft and return the operation to run on submit.

        Raises DraftValidationError synchronously, before anything is sent.
        """
        target = session.target
        if session.mode is ModalMode.CREATE:
            payload = self.build_payload(draft)
            attachment = draft.get("image_file")
            if attachment is not None and not isinstance(attachment, Attachment):
                raise DraftValidationError("Unsupported image attachment", field="image_file")
            return lambda: self._store.create(payload, attachment)
        if session.mode is ModalMode.EDIT:
            payload = self.build_payload(draft)
            return lambda: self._store.update(target.id, payload)
        if session.mode is ModalMode.DELETE_CONFIRM:
            return lambda: self._store.delete(target.id)
        if session.mode is ModalMode.ACTION_CONFIRM:
            return self.prepare_action(session.action or "", target, draft)
        raise DraftValidationError("No dialog is open")

    def prepare_action(self, kind: str, target: T, draft: dict[str, Any]) -> Operation:
        raise DraftValidationError(f"Unsupported action '{kind}'")

    def success_message(self, session: ModalSession) -> str:
        label = self.entity_label
        if session.mode is ModalMode.CREATE:
            return f"{label} created successfully"
        if session.mode is ModalMode.EDIT:
            return f"{label} updated successfully"
        if session.mode is ModalMode.DELETE_CONFIRM:
            return f"{label} deleted successfully"
        return f"{label} {session.action or 'action'} completed"
