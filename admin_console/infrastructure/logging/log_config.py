"""Logging setup for the console.

Root level and handler come from Settings.log_level; each log_level_*
setting then overrides the level of a group of loggers, so outbound HTTP
chatter can be muted while workflows stay verbose.

    from admin_console.infrastructure.logging.log_config import setup_logging
    setup_logging()   # once at startup; open_console() does it for you
"""

import logging
import sys

from admin_console.config import Settings, get_settings

_FORMAT = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"

# Settings field → logger names whose level it controls
_CATEGORY_MAP: dict[str, tuple[str, ...]] = {
    "log_level_http": ("httpx", "httpcore"),
    "log_level_api": ("admin_console.infrastructure.admin_api",),
    "log_level_workflow": (
        "WorkflowOrchestrator",
        "admin_console.application.services.workflow_orchestrator",
    ),
    "log_level_controller": (
        "admin_console.application.services.collection_store",
        "admin_console.application.services.modal_controller",
        "admin_console.application.services.screen_context",
        "admin_console.infrastructure.notifications",
    ),
}


def setup_logging(settings: Settings | None = None) -> None:
    """Apply root and per-category log levels from settings."""
    settings = settings or get_settings()
    _configure_root(_parse_level(settings.log_level))

    applied = {}
    for field_name, logger_names in _CATEGORY_MAP.items():
        level = _parse_level(getattr(settings, field_name, "INFO"))
        applied[field_name] = logging.getLevelName(level)
        for logger_name in logger_names:
            logging.getLogger(logger_name).setLevel(level)

    logging.getLogger(__name__).debug("Log levels: root=%s %s", settings.log_level, applied)


def _configure_root(level: int) -> None:
    root = logging.getLogger()
    root.setLevel(level)
    # Leave handlers installed by a host application (or pytest) alone.
    if root.handlers:
        return
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(_FORMAT, datefmt="%H:%M:%S"))
    root.addHandler(handler)


def _parse_level(raw: str) -> int:
    """Level name → logging constant; unknown names fall back to INFO."""
    level = logging.getLevelName(str(raw).strip().upper())
    return level if isinstance(level, int) else logging.INFO
