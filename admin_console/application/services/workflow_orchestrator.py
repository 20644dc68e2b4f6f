"""Workflow orchestrator — user actions that take one or more backend calls.

Steps run strictly in order; a step only starts after the previous one
succeeded. There is no compensating action: when a later step fails, the
earlier steps stay applied on the server and WorkflowError.completed_steps
says how far the workflow got. Callers re-fetch to show that state.
"""

import logging
import re
from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from typing import Any

from pydantic import ValidationError

from admin_console.application.interfaces import CategoryGateway, RefundGateway, ResourceGateway
from admin_console.application.schemas import RefundRejection, first_error_message
from admin_console.domain.entities import Category, Subscription
from admin_console.domain.exceptions import DraftValidationError, WorkflowError
from admin_console.infrastructure.logging.colored_logger import WorkflowLogger, WorkflowStage

logger = logging.getLogger(__name__)

_OBJECT_ID = re.compile(r"^[0-9a-fA-F]{24}$")


@dataclass
class WorkflowStep:
    """One backend call of a workflow."""

    name: str
    action: Callable[[], Awaitable[Any]]


@dataclass
class WorkflowResult:
    workflow: str
    completed_steps: list[str]
    last_result: Any = None


def plan_change_payload(value: str) -> dict[str, str]:
    """{"planId": v} for a 24-hex object id, otherwise {"planCode": v}."""
    plan = (value or "").strip()
    if not plan:
        raise DraftValidationError("Select a plan to assign", field="plan")
    if _OBJECT_ID.match(plan):
        return {"planId": plan}
    return {"planCode": plan}


class WorkflowOrchestrator:
    """Sequences the backend calls behind single user actions."""

    def __init__(
        self,
        refunds: RefundGateway,
        subscriptions: ResourceGateway[Subscription],
    ):
        self._refunds = refunds
        self._subscriptions = subscriptions
        self._log = WorkflowLogger("WorkflowOrchestrator")

    async def run_steps(self, workflow: str, steps: list[WorkflowStep]) -> WorkflowResult:
        """Run steps in order; wrap the first failure in WorkflowError."""
        completed: list[str] = []
        last_result: Any = None
        for step in steps:
            try:
                with self._log.timed_step(
                    WorkflowStage.for_step(step.name), f"{workflow}: {step.name}"
                ):
                    last_result = await step.action()
            except Exception as e:
                if completed:
                    logger.warning(
                        "%s stopped at '%s' after %s; earlier steps are not rolled back",
                        workflow,
                        step.name,
                        ", ".join(completed),
                    )
                raise WorkflowError(workflow, step.name, completed, e) from e
            completed.append(step.name)
        return WorkflowResult(workflow, completed, last_result)

    async def approve_refund(self, refund_id: str, note: str | None = None) -> WorkflowResult:
        """Approve, then disburse. Process only runs if approve succeeded."""
        return await self.run_steps(
            "approve-refund",
            [
                WorkflowStep("approve", lambda: self._refunds.approve(refund_id, note)),
                WorkflowStep("process", lambda: self._refunds.process(refund_id)),
            ],
        )

    async def process_refund(self, refund_id: str) -> WorkflowResult:
        """Disburse an already approved refund (e.g. after a failed approval payout)."""
        return await self.run_steps(
            "process-refund",
            [WorkflowStep("process", lambda: self._refunds.process(refund_id))],
        )

    async def reject_refund(self, refund_id: str, note: str | None) -> WorkflowResult:
        try:
            rejection = RefundRejection(note=note)
        except ValidationError as e:
            message, field = first_error_message(e)
            raise DraftValidationError(message, field) from e
        return await self.run_steps(
            "reject-refund",
            [WorkflowStep("reject", lambda: self._refunds.reject(refund_id, rejection.note))],
        )

    async def reassign_plan(self, subscription_id: str, plan: str) -> WorkflowResult:
        payload = plan_change_payload(plan)
        self._log.detail("Reassigning plan", subscription=subscription_id, **payload)
        return await self.run_steps(
            "reassign-plan",
            [
                WorkflowStep(
                    "reassign",
                    lambda: self._subscriptions.update(subscription_id, payload),
                )
            ],
        )

    async def toggle_category(
        self, gateway: CategoryGateway, category: Category
    ) -> WorkflowResult:
        """Categories are flipped by the backend itself via their toggle endpoint."""
        return await self.run_steps(
            "toggle-categories",
            [WorkflowStep("toggle", lambda: gateway.toggle(category.id))],
        )

    async def toggle_active(self, gateway: ResourceGateway[Any], resource: Any) -> WorkflowResult:
        """Patch isActive to the negation of the resource's current flag."""
        payload = {"isActive": not resource.is_active}
        return await self.run_steps(
            f"toggle-{gateway.resource_name}",
            [WorkflowStep("toggle", lambda: gateway.update(resource.id, payload))],
        )
