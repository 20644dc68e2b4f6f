from ._validators import first_error_message
from .category import CategoryPayload
from .municipality import MunicipalityPayload
from .plan import PlanPayload
from .refund import RefundApproval, RefundRejection

__all__ = [
    "first_error_message",
    "CategoryPayload",
    "MunicipalityPayload",
    "PlanPayload",
    "RefundApproval",
    "RefundRejection",
]
