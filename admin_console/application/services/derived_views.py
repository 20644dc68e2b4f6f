"""Derived views — pure functions over a collection and a filter state.

Nothing here performs I/O or mutates its inputs, so views can be recomputed
on every render.
"""

from collections import Counter
from collections.abc import Callable, Iterable, Sequence
from typing import Any, TypeVar

from admin_console.domain.entities import FilterState, Reference, display_field, reference_id

T = TypeVar("T")

SearchFields = Callable[[T], Iterable[str | None]]

ALL_STATUSES = "all"


def text_filter(items: Sequence[T], query: str, fields: SearchFields) -> list[T]:
    """Items where any searchable field contains the query, case-insensitively."""
    needle = (query or "").strip().casefold()
    if not needle:
        return list(items)
    return [
        item
        for item in items
        if any(value and needle in str(value).casefold() for value in fields(item))
    ]


def status_filter(items: Sequence[T], status: str | None, attr: str = "status") -> list[T]:
    """Items whose status equals the selected one; "all" keeps everything."""
    if not status or status == ALL_STATUSES:
        return list(items)
    return [item for item in items if _value(item, attr) == status]


def apply_filters(
    items: Sequence[T],
    state: FilterState,
    fields: SearchFields,
    status_of: Callable[[T], Any] | None = None,
) -> list[T]:
    """Status filter followed by the text filter."""
    if status_of is None or not state.status or state.status == ALL_STATUSES:
        selected = list(items)
    else:
        selected = [item for item in items if status_of(item) == state.status]
    return text_filter(selected, state.query, fields)


def count_by(items: Iterable[T], key: Callable[[T], Any]) -> Counter:
    return Counter(key(item) for item in items)


def sum_amount(
    items: Iterable[T],
    statuses: Iterable[str],
    attr: str = "amount",
    status_attr: str = "status",
) -> float:
    """Sum of amounts over items in the given statuses; missing amounts count as 0."""
    wanted = set(statuses)
    total = 0.0
    for item in items:
        if _value(item, status_attr) not in wanted:
            continue
        amount = _value(item, attr)
        if isinstance(amount, bool) or not isinstance(amount, (int, float)):
            continue
        total += amount
    return total


def root_items(items: Iterable[T], parent_attr: str = "parent") -> list[T]:
    """Items with no parent reference."""
    return [item for item in items if reference_id(_value(item, parent_attr)) is None]


def children_of(
    items: Iterable[T], parent_id: str | None, parent_attr: str = "parent"
) -> list[T]:
    """Items whose parent reference (bare or populated) points at parent_id."""
    if parent_id is None:
        return []
    target = reference_id(parent_id)
    return [
        item for item in items if reference_id(_value(item, parent_attr)) == target
    ]


def subcategory_count(
    items: Iterable[T], parent_id: str | None, parent_attr: str = "parent"
) -> int:
    return len(children_of(items, parent_id, parent_attr))


def format_order_reference(order: Reference | None) -> str:
    """"#<orderNumber>" or "#" plus the last 8 characters of the order id."""
    number = display_field(order, "orderNumber")
    if number:
        return f"#{number}"
    order_id = reference_id(order)
    if not order_id:
        return ""
    return f"#{order_id[-8:].upper()}"


def _value(item: Any, attr: str) -> Any:
    if isinstance(item, dict):
        return item.get(attr)
    return getattr(item, attr, None)
