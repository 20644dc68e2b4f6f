"""Notifier adapter that routes toasts to the logging system.

The real toast widget lives in the presentation layer; this adapter is the
default sink for headless use and keeps a short history for inspection.
"""

import logging
from collections import deque

from admin_console.application.interfaces import Notifier, Severity

logger = logging.getLogger(__name__)

_LEVELS = {
    Severity.SUCCESS: logging.INFO,
    Severity.INFO: logging.INFO,
    Severity.WARNING: logging.WARNING,
    Severity.ERROR: logging.ERROR,
}


class LoggingNotifier(Notifier):
    """Logs each notification at a level matching its severity."""

    def __init__(self, history_size: int = 50):
        self.history: deque[tuple[str, str]] = deque(maxlen=history_size)

    def notify(self, message: str, severity: Severity | str = Severity.INFO) -> None:
        try:
            level = _LEVELS[Severity(severity)]
        except ValueError:
            level = logging.INFO
        severity_name = severity.value if isinstance(severity, Severity) else str(severity)
        self.history.append((severity_name, message))
        logger.log(level, "[%s] %s", severity_name, message)
