"""Domain entity for product categories."""

from dataclasses import dataclass
from datetime import datetime

from .reference import Identifier, Reference, reference_id


@dataclass
class Category:
    """A product category. Categories form a tree through their parent reference."""

    id: Identifier
    name: str
    description: str = ""
    parent: Reference | None = None
    is_active: bool = True
    image: str | None = None
    created_at: datetime | None = None

    @property
    def parent_id(self) -> Identifier | None:
        return reference_id(self.parent)

    @property
    def is_root(self) -> bool:
        return self.parent_id is None
