"""Abstract gateway interface (port) for refund decisions."""

from abc import abstractmethod

from admin_console.domain.entities import Refund

from .resource_gateway import ResourceGateway


class RefundGateway(ResourceGateway[Refund]):
    """Refund collection port plus the refund-specific decision endpoints."""

    @abstractmethod
    async def approve(self, refund_id: str, note: str | None = None) -> Refund:
        """Move a refund to the approved state."""
        ...

    @abstractmethod
    async def process(self, refund_id: str) -> Refund:
        """Disburse funds for an approved refund."""
        ...

    @abstractmethod
    async def reject(self, refund_id: str, note: str) -> Refund:
        """Reject a refund with a reason."""
        ...
