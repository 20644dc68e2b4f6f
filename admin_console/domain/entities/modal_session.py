"""Domain entity for a screen's dialog state."""

from dataclasses import dataclass
from enum import Enum
from typing import Any


class ModalMode(str, Enum):
    """Which dialog, if any, is open on a screen."""

    CLOSED = "closed"
    CREATE = "create"
    EDIT = "edit"
    DELETE_CONFIRM = "delete-confirm"
    ACTION_CONFIRM = "action-confirm"


@dataclass
class ModalSession:
    """The single dialog session of a screen.

    One tagged value instead of independent per-dialog flags, so two dialogs
    can never be open at once. submitting only has meaning while open.
    """

    mode: ModalMode = ModalMode.CLOSED
    target: Any | None = None
    action: str | None = None
    submitting: bool = False
    warning: str | None = None

    @property
    def is_open(self) -> bool:
        return self.mode is not ModalMode.CLOSED

    @property
    def can_cancel(self) -> bool:
        return not self.submitting

    @property
    def can_submit(self) -> bool:
        return self.is_open and not self.submitting


@dataclass
class FilterState:
    """Search query plus status filter of a screen; "all" disables the status filter."""

    query: str = ""
    status: str = "all"


@dataclass(frozen=True)
class Attachment:
    """An opaque binary (e.g. a category image) sent alongside a create/update."""

    filename: str
    content: bytes
    content_type: str = "application/octet-stream"
