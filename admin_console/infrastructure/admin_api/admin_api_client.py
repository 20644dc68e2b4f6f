"""Admin API client — thin httpx transport for the marketplace backend.

Every request carries the authorization header from the injected
CredentialProvider. Non-2xx responses and transport failures are turned
into BackendError / EntityNotFoundError so callers never see httpx types.
"""

import json
import logging
from typing import Any

import httpx

from admin_console.application.interfaces import CredentialProvider
from admin_console.domain.entities import Attachment
from admin_console.domain.exceptions import BackendError, EntityNotFoundError

logger = logging.getLogger(__name__)


class AdminApiClient:
    """Infrastructure adapter — connects to the marketplace admin API.

    Uses one pooled httpx.AsyncClient for the lifetime of the console; an
    injected client is never closed by this class.
    """

    def __init__(
        self,
        base_url: str,
        credentials: CredentialProvider,
        *,
        timeout: float = 30.0,
        http_client: httpx.AsyncClient | None = None,
    ):
        self._base_url = base_url.rstrip("/")
        self._credentials = credentials
        self._timeout = timeout
        self._http_client = http_client
        self._owns_client = http_client is None

    def _get_client(self) -> httpx.AsyncClient:
        """Return the injected client or lazily create an owned one."""
        if self._http_client is None:
            self._http_client = httpx.AsyncClient(timeout=self._timeout)
        return self._http_client

    def _get_headers(self) -> dict[str, str]:
        headers = {"Accept": "application/json"}
        headers.update(self._credentials.authorization_headers())
        return headers

    def _url(self, path: str) -> str:
        return f"{self._base_url}/{path.lstrip('/')}"

    async def request(
        self,
        method: str,
        path: str,
        *,
        resource: str,
        params: dict[str, Any] | None = None,
        json_body: dict[str, Any] | None = None,
        form: dict[str, Any] | None = None,
        attachment: Attachment | None = None,
        attachment_field: str = "image",
    ) -> Any:
        """Send one request and return the decoded JSON body (None when empty)."""
        client = self._get_client()
        kwargs: dict[str, Any] = {"headers": self._get_headers()}
        if params:
            kwargs["params"] = {k: v for k, v in params.items() if v is not None}
        if attachment is not None:
            kwargs["data"] = self._to_form_fields(form or json_body or {})
            kwargs["files"] = {
                attachment_field: (
                    attachment.filename,
                    attachment.content,
                    attachment.content_type,
                )
            }
        elif json_body is not None:
            kwargs["json"] = json_body

        url = self._url(path)
        logger.debug("%s %s", method, url)
        try:
            response = await client.request(method, url, **kwargs)
        except httpx.HTTPError as exc:
            logger.error("%s %s failed: %s", method, url, exc)
            raise BackendError(resource, 0, str(exc) or type(exc).__name__) from exc

        if response.status_code >= 400:
            self._raise_backend_error(resource, path, response)

        if response.status_code == 204 or not response.content:
            return None
        try:
            return response.json()
        except ValueError:
            return None

    @staticmethod
    def _to_form_fields(payload: dict[str, Any]) -> dict[str, str]:
        """Flatten a JSON payload into multipart form fields."""
        fields: dict[str, str] = {}
        for key, value in payload.items():
            if value is None:
                continue
            if isinstance(value, bool):
                fields[key] = "true" if value else "false"
            elif isinstance(value, (list, dict)):
                fields[key] = json.dumps(value)
            else:
                fields[key] = str(value)
        return fields

    @staticmethod
    def _error_message(response: httpx.Response) -> str:
        """Pull a readable message out of an error body."""
        try:
            data = response.json()
        except ValueError:
            return response.text or response.reason_phrase
        if isinstance(data, dict):
            error = data.get("error")
            if isinstance(error, dict) and error.get("message"):
                return str(error["message"])
            if isinstance(error, str) and error:
                return error
            if data.get("message"):
                return str(data["message"])
        return response.text or response.reason_phrase

    def _raise_backend_error(
        self, resource: str, path: str, response: httpx.Response
    ) -> None:
        message = self._error_message(response)
        logger.warning(
            "Backend rejected %s %s: %d %s",
            response.request.method,
            path,
            response.status_code,
            message,
        )
        if response.status_code == 404:
            raise EntityNotFoundError(resource, path.rstrip("/").rsplit("/", 1)[-1], message)
        raise BackendError(resource, response.status_code, message)

    async def aclose(self) -> None:
        """Close the owned HTTP client (an injected one is left open)."""
        if self._owns_client and self._http_client is not None:
            await self._http_client.aclose()
            self._http_client = None
