from .base import AdminScreen, Operation
from .category_screen import CategoryScreen
from .municipality_screen import MunicipalityScreen
from .refund_screen import RefundScreen
from .plan_screen import PlanScreen
from .subscription_screen import SubscriptionScreen

__all__ = [
    "AdminScreen",
    "Operation",
    "CategoryScreen",
    "MunicipalityScreen",
    "RefundScreen",
    "PlanScreen",
    "SubscriptionScreen",
]
