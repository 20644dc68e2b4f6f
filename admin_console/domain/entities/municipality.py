"""Domain entity for service municipalities."""

from dataclasses import dataclass
from datetime import datetime

from .reference import Identifier


@dataclass
class Municipality:
    """A municipality the marketplace delivers to."""

    id: Identifier
    name: str
    province: str = ""
    is_active: bool = True
    created_at: datetime | None = None
