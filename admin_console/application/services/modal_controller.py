"""Modal lifecycle controller — one dialog session per screen.

closed → create | edit | delete-confirm | action-confirm → closed

submitting is raised synchronously before the first await of a submit, so
a second submit() issued while a request is outstanding is a no-op. The
target of an outstanding request also stays locked after its dialog is
cancelled: no dialog can be reopened on it until the request settles.
"""

import logging
from typing import Any, Generic, TypeVar

from admin_console.application.interfaces import Notifier, Severity
from admin_console.application.services.collection_store import CollectionStore
from admin_console.application.services.screens import AdminScreen
from admin_console.domain.entities import ModalMode, ModalSession, reference_id
from admin_console.domain.exceptions import BackendError, DraftValidationError, WorkflowError

logger = logging.getLogger(__name__)

T = TypeVar("T")


def _target_id(resource: Any) -> str | None:
    if resource is None:
        return None
    return reference_id(getattr(resource, "id", None))


class ModalController(Generic[T]):
    """Drives a screen's dialogs and guarantees at most one submission in flight."""

    def __init__(self, screen: AdminScreen[T], store: CollectionStore[T], notifier: Notifier):
        self._screen = screen
        self._store = store
        self._notifier = notifier
        self.session = ModalSession()
        self.draft: dict[str, Any] = {}
        # Targets whose submission is still awaiting the backend, even if the
        # dialog that started it has since been cancelled.
        self._in_flight: set[str] = set()

    @property
    def mode(self) -> ModalMode:
        return self.session.mode

    @property
    def submitting(self) -> bool:
        return self.session.submitting

    def is_in_flight(self, resource: T | None) -> bool:
        """Whether a submission against this resource has not settled yet."""
        target_id = _target_id(resource)
        return target_id is not None and target_id in self._in_flight

    # ── Opening ──────────────────────────────────────────────────────

    def open_create(self) -> bool:
        if not self._can_open(ModalMode.CREATE):
            return False
        self._open(ModalMode.CREATE, draft=self._screen.default_draft())
        return True

    def open_edit(self, resource: T) -> bool:
        if not self._can_open(ModalMode.EDIT, target=resource):
            return False
        self._open(ModalMode.EDIT, target=resource, draft=self._screen.draft_from(resource))
        return True

    def open_delete(self, resource: T) -> bool:
        if not self._can_open(ModalMode.DELETE_CONFIRM, target=resource):
            return False
        warning = self._screen.delete_warning(resource, self._store.items)
        self._open(ModalMode.DELETE_CONFIRM, target=resource, warning=warning)
        return True

    def open_action(self, resource: T, kind: str) -> bool:
        if not self._can_open(ModalMode.ACTION_CONFIRM, kind, target=resource):
            return False
        self._open(
            ModalMode.ACTION_CONFIRM,
            target=resource,
            action=kind,
            draft=self._screen.action_draft(kind, resource),
        )
        return True

    def _can_open(
        self, mode: ModalMode, action: str | None = None, *, target: T | None = None
    ) -> bool:
        if self.session.is_open:
            logger.debug(
                "Not opening %s: a %s dialog is already open", mode.value, self.session.mode.value
            )
            return False
        if self.is_in_flight(target):
            logger.debug(
                "Not opening %s: a submission for %s is still in flight",
                mode.value,
                _target_id(target),
            )
            return False
        if not self._screen.supports(mode, action):
            logger.warning(
                "%s does not support %s%s",
                type(self._screen).__name__,
                mode.value,
                f" '{action}'" if action else "",
            )
            return False
        return True

    def _open(
        self,
        mode: ModalMode,
        *,
        target: T | None = None,
        action: str | None = None,
        draft: dict[str, Any] | None = None,
        warning: str | None = None,
    ) -> None:
        self.session = ModalSession(mode=mode, target=target, action=action, warning=warning)
        self.draft = dict(draft or {})

    # ── Editing / closing ────────────────────────────────────────────

    def update_draft(self, **fields: Any) -> None:
        if not self.session.is_open:
            return
        self.draft.update(fields)

    def cancel(self) -> None:
        """Close from any state and discard the draft.

        Not blocked while submitting: disabling cancel during a request is
        left to the UI (see ModalSession.can_cancel).
        """
        self.session = ModalSession()
        self.draft = {}

    backdrop_click = cancel

    # ── Submitting ───────────────────────────────────────────────────

    async def submit(self) -> bool:
        """Validate and run the open dialog's operation. Returns True on success."""
        session = self.session
        if not session.is_open:
            logger.debug("Ignoring submit: no dialog open")
            return False
        if session.submitting:
            logger.debug("Ignoring submit: %s already in flight", session.mode.value)
            return False

        try:
            operation = self._screen.prepare(session, self.draft)
        except DraftValidationError as e:
            self._notifier.notify(e.message, Severity.ERROR)
            return False

        target_id = _target_id(session.target)
        session.submitting = True
        if target_id is not None:
            self._in_flight.add(target_id)
        try:
            await operation()
        except WorkflowError as e:
            session.submitting = False
            logger.error("%s failed: %s", e.workflow, e)
            self._notifier.notify(self._workflow_failure_message(e), Severity.ERROR)
            # The server may be partway through; show what it actually holds.
            await self._store.fetch()
            return False
        except BackendError as e:
            session.submitting = False
            logger.error("%s %s failed: %s", self._store.resource_name, session.mode.value, e)
            self._notifier.notify(e.message, Severity.ERROR)
            return False
        except Exception:
            session.submitting = False
            raise
        finally:
            self._in_flight.discard(target_id)

        message = self._screen.success_message(session)
        if self.session is session:
            self.cancel()
        self._notifier.notify(message, Severity.SUCCESS)
        await self._store.fetch()
        return True

    @staticmethod
    def _workflow_failure_message(error: WorkflowError) -> str:
        if error.partially_applied:
            done = ", ".join(error.completed_steps)
            return (
                f"'{error.failed_step}' failed after {done} succeeded: {error.reason}. "
                "The list has been refreshed to show the current state."
            )
        return error.reason
