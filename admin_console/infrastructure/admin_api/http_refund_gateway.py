"""HTTP implementation of the RefundGateway port."""

from admin_console.application.interfaces import RefundGateway
from admin_console.domain.entities import Refund

from .admin_api_client import AdminApiClient
from .http_resource_gateway import HttpResourceGateway
from .mappers import refund_from_payload


class HttpRefundGateway(HttpResourceGateway[Refund], RefundGateway):
    """Refund collection plus POST /<id>/approve, /process and /reject."""

    def __init__(self, client: AdminApiClient, path: str):
        super().__init__(
            client,
            path,
            refund_from_payload,
            resource_name="refunds",
            collection_key="refunds",
        )

    async def approve(self, refund_id: str, note: str | None = None) -> Refund:
        body = await self._send(
            "POST", self._item_path(refund_id, "approve"), json_body={"note": note}
        )
        return self._to_entity(body)

    async def process(self, refund_id: str) -> Refund:
        body = await self._send(
            "POST", self._item_path(refund_id, "process"), json_body={}
        )
        return self._to_entity(body)

    async def reject(self, refund_id: str, note: str) -> Refund:
        body = await self._send(
            "POST", self._item_path(refund_id, "reject"), json_body={"note": note}
        )
        return self._to_entity(body)
