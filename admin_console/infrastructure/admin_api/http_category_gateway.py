"""HTTP implementation of the CategoryGateway port."""

from admin_console.application.interfaces import CategoryGateway
from admin_console.domain.entities import Category

from .admin_api_client import AdminApiClient
from .http_resource_gateway import HttpResourceGateway
from .mappers import category_from_payload


class HttpCategoryGateway(HttpResourceGateway[Category], CategoryGateway):
    """Category collection plus POST /<id>/toggle."""

    def __init__(self, client: AdminApiClient, path: str):
        super().__init__(
            client,
            path,
            category_from_payload,
            resource_name="categories",
            collection_key="categories",
        )

    async def toggle(self, category_id: str) -> Category:
        body = await self._send(
            "POST", self._item_path(category_id, "toggle"), json_body={}
        )
        return self._to_entity(body)
