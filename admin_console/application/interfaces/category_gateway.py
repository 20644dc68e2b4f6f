"""Abstract gateway interface (port) for categories."""

from abc import abstractmethod

from admin_console.domain.entities import Category

from .resource_gateway import ResourceGateway


class CategoryGateway(ResourceGateway[Category]):
    """Category collection port plus the server-side active flag toggle."""

    @abstractmethod
    async def toggle(self, category_id: str) -> Category:
        """Flip a category between active and inactive."""
        ...
