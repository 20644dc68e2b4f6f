"""HTTP implementation of the ResourceGateway port."""

import logging
from collections.abc import Callable
from typing import Any, TypeVar

from admin_console.application.interfaces import ResourceGateway
from admin_console.domain.entities import Attachment
from admin_console.domain.exceptions import BackendError

from .admin_api_client import AdminApiClient

logger = logging.getLogger(__name__)

T = TypeVar("T")


class HttpResourceGateway(ResourceGateway[T]):
    """Maps collection operations onto GET/POST/PUT/DELETE under one path.

    The backend wraps payloads inconsistently: a bare list, {"data": ...},
    {"<collection_key>": [...]}, or {"data": {"<collection_key>": [...]}}.
    All of them are unwrapped here.
    """

    def __init__(
        self,
        client: AdminApiClient,
        path: str,
        mapper: Callable[[dict[str, Any]], T],
        *,
        resource_name: str,
        collection_key: str | None = None,
    ):
        self._client = client
        self._path = "/" + path.strip("/")
        self._mapper = mapper
        self._resource_name = resource_name
        self._collection_key = collection_key

    @property
    def resource_name(self) -> str:
        return self._resource_name

    def _item_path(self, resource_id: str, *suffix: str) -> str:
        return "/".join([self._path, resource_id, *suffix])

    async def _send(self, method: str, path: str, **kwargs: Any) -> Any:
        return await self._client.request(
            method, path, resource=self._resource_name, **kwargs
        )

    def _unwrap_list(self, body: Any) -> list[dict[str, Any]]:
        candidates = [body]
        if isinstance(body, dict):
            candidates = [body.get(self._collection_key or ""), body.get("data")]
            data = body.get("data")
            if isinstance(data, dict) and self._collection_key:
                candidates.append(data.get(self._collection_key))
        for candidate in candidates:
            if isinstance(candidate, list):
                return [item for item in candidate if isinstance(item, dict)]
        raise BackendError(
            self._resource_name, 200, "Unexpected response shape for collection"
        )

    @staticmethod
    def _unwrap_item(body: Any) -> dict[str, Any]:
        if isinstance(body, dict) and isinstance(body.get("data"), dict):
            return body["data"]
        if isinstance(body, dict):
            return body
        return {}

    def _to_entity(self, body: Any) -> T:
        return self._mapper(self._unwrap_item(body))

    async def fetch_all(self, filters: dict[str, Any] | None = None) -> list[T]:
        body = await self._send("GET", self._path, params=filters)
        items = self._unwrap_list(body)
        logger.debug("Fetched %d %s", len(items), self._resource_name)
        return [self._mapper(item) for item in items]

    async def fetch_one(self, resource_id: str) -> T:
        body = await self._send("GET", self._item_path(resource_id))
        return self._to_entity(body)

    async def create(
        self, payload: dict[str, Any], attachment: Attachment | None = None
    ) -> T:
        body = await self._send(
            "POST", self._path, json_body=payload, attachment=attachment
        )
        return self._to_entity(body)

    async def update(self, resource_id: str, payload: dict[str, Any]) -> T:
        body = await self._send("PUT", self._item_path(resource_id), json_body=payload)
        return self._to_entity(body)

    async def delete(self, resource_id: str) -> None:
        await self._send("DELETE", self._item_path(resource_id))
