"""Abstract gateway interface (port) for one remote resource collection."""

from abc import ABC, abstractmethod
from typing import Any, Generic, TypeVar

from admin_console.domain.entities import Attachment

T = TypeVar("T")


class ResourceGateway(ABC, Generic[T]):
    """Port for a backend resource collection — implemented in the infrastructure layer."""

    @property
    @abstractmethod
    def resource_name(self) -> str:
        """Human-readable resource name used in errors and logs."""
        ...

    @abstractmethod
    async def fetch_all(self, filters: dict[str, Any] | None = None) -> list[T]:
        """Retrieve the full (optionally server-filtered) collection."""
        ...

    @abstractmethod
    async def fetch_one(self, resource_id: str) -> T:
        """Retrieve a single resource. Raises EntityNotFoundError if missing."""
        ...

    @abstractmethod
    async def create(
        self, payload: dict[str, Any], attachment: Attachment | None = None
    ) -> T:
        """Create a resource; multipart when an attachment is given."""
        ...

    @abstractmethod
    async def update(self, resource_id: str, payload: dict[str, Any]) -> T:
        """Apply a partial update to a resource."""
        ...

    @abstractmethod
    async def delete(self, resource_id: str) -> None:
        """Delete a resource by identifier."""
        ...
