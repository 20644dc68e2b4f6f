from .admin_api_client import AdminApiClient
from .credentials import StaticTokenProvider
from .http_category_gateway import HttpCategoryGateway
from .http_resource_gateway import HttpResourceGateway
from .http_refund_gateway import HttpRefundGateway

__all__ = [
    "AdminApiClient",
    "StaticTokenProvider",
    "HttpCategoryGateway",
    "HttpResourceGateway",
    "HttpRefundGateway",
]
