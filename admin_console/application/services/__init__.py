from . import derived_views
from .collection_store import CollectionStore
from .workflow_orchestrator import (
    WorkflowOrchestrator,
    WorkflowResult,
    WorkflowStep,
    plan_change_payload,
)
from .screens import (
    AdminScreen,
    CategoryScreen,
    MunicipalityScreen,
    PlanScreen,
    RefundScreen,
    SubscriptionScreen,
)
from .modal_controller import ModalController
from .screen_context import ScreenContext

__all__ = [
    "derived_views",
    "CollectionStore",
    "WorkflowOrchestrator",
    "WorkflowResult",
    "WorkflowStep",
    "plan_change_payload",
    "AdminScreen",
    "CategoryScreen",
    "MunicipalityScreen",
    "PlanScreen",
    "RefundScreen",
    "SubscriptionScreen",
    "ModalController",
    "ScreenContext",
]
