"""Abstract interface (port) for user-facing notifications (toasts)."""

from abc import ABC, abstractmethod
from enum import Enum


class Severity(str, Enum):
    SUCCESS = "success"
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"


class Notifier(ABC):
    """Fire-and-forget notification sink; nothing is returned to the caller."""

    @abstractmethod
    def notify(self, message: str, severity: Severity | str = Severity.INFO) -> None:
        ...
