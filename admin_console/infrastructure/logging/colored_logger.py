"""Colored workflow logger for multi-step admin actions.

Each workflow step is logged as a start line and then either a completion
line with its duration or a red failure line, tagged with a colored stage
label so an approve → process sequence is easy to follow in a terminal.

    APPROVE   green      PROCESS   magenta    REJECT   yellow
    REASSIGN  blue       TOGGLE    cyan       ERROR    red
"""

import logging
import time
from contextlib import contextmanager
from typing import Any, NamedTuple

_RESET = "\033[0m"
_BOLD = "\033[1m"
_DIM = "\033[2m"
_GRAY = "\033[90m"
_RED = "\033[91m"
_GREEN = "\033[92m"
_YELLOW = "\033[93m"
_BLUE = "\033[94m"
_MAGENTA = "\033[95m"
_CYAN = "\033[96m"
_WHITE = "\033[97m"


class Stage(NamedTuple):
    label: str
    color: str
    icon: str


class WorkflowStage:
    """Stage tags, one per workflow step name."""

    APPROVE = Stage("APPROVE", _GREEN, "✔")
    PROCESS = Stage("PROCESS", _MAGENTA, "💸")
    REJECT = Stage("REJECT", _YELLOW, "✖")
    REASSIGN = Stage("REASSIGN", _BLUE, "🔁")
    TOGGLE = Stage("TOGGLE", _CYAN, "⏻")
    WORKFLOW = Stage("WORKFLOW", _WHITE, "⚙")
    ERROR = Stage("ERROR", _RED, "❌")

    @classmethod
    def for_step(cls, name: str) -> Stage:
        """Stage for a step name, falling back to the generic workflow stage."""
        stage = getattr(cls, name.upper().replace("-", "_"), None)
        return stage if isinstance(stage, Stage) else cls.WORKFLOW


def _details(fields: dict[str, Any]) -> str:
    if not fields:
        return ""
    joined = ", ".join(f"{key}={value}" for key, value in fields.items())
    return f" {_GRAY}[{joined}]{_RESET}"


class WorkflowLogger:
    """Stage-tagged logger for workflow steps.

    Usage:
        log = WorkflowLogger("WorkflowOrchestrator")
        with log.timed_step(WorkflowStage.APPROVE, "approve-refund: approve"):
            await gateway.approve(refund_id)
    """

    def __init__(self, name: str):
        self._logger = logging.getLogger(name)

    @staticmethod
    def _tag(stage: Stage, *, bold: bool = False) -> str:
        weight = _BOLD if bold else ""
        return f"{stage.color}{weight}{stage.icon} {stage.label}{_RESET}"

    def started(self, stage: Stage, message: str, **fields: Any) -> None:
        self._logger.info(
            "%s %s%s", self._tag(stage, bold=True), message, _details(fields)
        )

    def finished(self, stage: Stage, message: str, elapsed: float, **fields: Any) -> None:
        self._logger.info(
            "%s %s✓ %s%s %s(%.2fs)%s%s",
            self._tag(stage), _GREEN, message, _RESET, _GRAY, elapsed, _RESET,
            _details(fields),
        )

    def failed(self, stage: Stage, message: str, elapsed: float, error: BaseException) -> None:
        self._logger.error(
            "%s %s%s failed after %.2fs%s %s%s: %s%s",
            self._tag(stage, bold=True), _RED, message, elapsed, _RESET,
            _DIM, type(error).__name__, error, _RESET,
        )

    def detail(self, message: str, **fields: Any) -> None:
        self._logger.info("   %s└ %s%s%s", _GRAY, message, _RESET, _details(fields))

    @contextmanager
    def timed_step(self, stage: Stage, message: str, **fields: Any):
        """Log the step's start, then its duration on success or its error on failure."""
        self.started(stage, message, **fields)
        start = time.perf_counter()
        try:
            yield
        except Exception as e:
            self.failed(stage, message, time.perf_counter() - start, e)
            raise
        self.finished(stage, message, time.perf_counter() - start, **fields)
