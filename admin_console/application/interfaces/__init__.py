from .resource_gateway import ResourceGateway
from .refund_gateway import RefundGateway
from .category_gateway import CategoryGateway
from .notifier import Notifier, Severity
from .credential_provider import CredentialProvider

__all__ = [
    "ResourceGateway",
    "RefundGateway",
    "CategoryGateway",
    "Notifier",
    "Severity",
    "CredentialProvider",
]
