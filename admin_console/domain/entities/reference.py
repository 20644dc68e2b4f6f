"""Foreign references that arrive either as bare identifiers or populated objects.

The backend may return a foreign key (parent category, order, customer,
seller, plan) as a plain identifier string or as an embedded document.
Both forms are kept as a tagged union and compared only through
reference_id().
"""

from dataclasses import dataclass, field
from typing import Any, Union

Identifier = str


@dataclass(frozen=True)
class PopulatedReference:
    """An embedded foreign document, reduced to its id plus display fields."""

    id: Identifier
    display: dict[str, Any] = field(default_factory=dict, compare=False, hash=False)

    def get(self, key: str, default: Any = None) -> Any:
        return self.display.get(key, default)


Reference = Union[Identifier, PopulatedReference]

# Keys tried, in order, when building a human label for a populated reference
_DISPLAY_KEYS = ("name", "shopName", "orderNumber", "code", "email")


def parse_reference(raw: Any) -> Reference | None:
    """Build a Reference from a wire value (str, embedded dict, or None)."""
    if raw is None or raw == "":
        return None
    if isinstance(raw, PopulatedReference):
        return raw
    if isinstance(raw, dict):
        ref_id = raw.get("_id") or raw.get("id")
        if not ref_id:
            return None
        display = {k: v for k, v in raw.items() if k not in ("_id", "id")}
        return PopulatedReference(id=str(ref_id), display=display)
    return str(raw)


def reference_id(ref: Any) -> Identifier | None:
    """Normalize any reference form to a comparable identifier."""
    if ref is None or ref == "":
        return None
    if isinstance(ref, PopulatedReference):
        return ref.id
    if isinstance(ref, dict):
        ref_id = ref.get("_id") or ref.get("id")
        return str(ref_id) if ref_id else None
    return str(ref)


def display_name(ref: Reference | None, default: str = "") -> str:
    """Human label for a reference; falls back to the identifier."""
    if ref is None:
        return default
    if isinstance(ref, PopulatedReference):
        for key in _DISPLAY_KEYS:
            value = ref.display.get(key)
            if value:
                return str(value)
        return ref.id
    return ref


def display_field(ref: Reference | None, key: str) -> str | None:
    """A single display field of a populated reference, if present."""
    if isinstance(ref, PopulatedReference):
        value = ref.display.get(key)
        return str(value) if value is not None else None
    return None
