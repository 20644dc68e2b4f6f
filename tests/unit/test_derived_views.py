"""Unit tests for the derived view helpers."""

from admin_console.application.services import derived_views
from admin_console.domain.entities import (
    Category,
    FilterState,
    PopulatedReference,
    parse_reference,
    reference_id,
)


def _categories() -> list[Category]:
    return [
        Category(id="root-1", name="Handicrafts", description="Woven goods"),
        Category(id="root-2", name="Food"),
        Category(id="c-1", name="Baskets", parent="root-1"),
        Category(
            id="c-2",
            name="Mats",
            parent=PopulatedReference(id="root-1", display={"name": "Handicrafts"}),
        ),
        Category(id="c-3", name="Dried Mangoes", parent="root-2", is_active=False),
    ]


def _name_fields(item: Category):
    return (item.name, item.description)


# ── References ──


def test_reference_id_normalizes_every_form():
    assert reference_id("abc") == "abc"
    assert reference_id(PopulatedReference(id="abc")) == "abc"
    assert reference_id({"_id": "abc", "name": "X"}) == "abc"
    assert reference_id({"id": "abc"}) == "abc"
    assert reference_id(None) is None
    assert reference_id("") is None


def test_parse_reference_keeps_display_fields():
    ref = parse_reference({"_id": "u1", "name": "Ana", "email": "ana@example.com"})
    assert isinstance(ref, PopulatedReference)
    assert ref.id == "u1"
    assert ref.get("email") == "ana@example.com"
    assert parse_reference("u1") == "u1"
    assert parse_reference(None) is None


# ── Filters ──


def test_text_filter_is_case_insensitive_substring():
    result = derived_views.text_filter(_categories(), "WOVEN", _name_fields)
    assert [c.id for c in result] == ["root-1"]


def test_text_filter_empty_query_returns_everything():
    items = _categories()
    assert derived_views.text_filter(items, "  ", _name_fields) == items


def test_filters_are_idempotent():
    items = _categories()
    state = FilterState(query="a", status="active")

    def status_of(c):
        return "active" if c.is_active else "inactive"

    once = derived_views.apply_filters(items, state, _name_fields, status_of)
    twice = derived_views.apply_filters(once, state, _name_fields, status_of)
    assert once == twice
    assert all(c.is_active for c in once)


def test_status_filter_all_keeps_everything():
    rows = [{"status": "pending"}, {"status": "approved"}]
    assert derived_views.status_filter(rows, "all") == rows
    assert derived_views.status_filter(rows, "approved") == [{"status": "approved"}]


def test_filters_do_not_mutate_input():
    items = _categories()
    snapshot = list(items)
    derived_views.apply_filters(items, FilterState(query="bask"), _name_fields)
    assert items == snapshot


# ── Category tree ──


def test_children_match_bare_and_populated_parents():
    items = _categories()
    children = derived_views.children_of(items, "root-1")
    assert {c.id for c in children} == {"c-1", "c-2"}
    assert derived_views.subcategory_count(items, "root-1") == 2


def test_root_items_have_no_parent():
    roots = derived_views.root_items(_categories())
    assert [c.id for c in roots] == ["root-1", "root-2"]


def test_children_of_none_is_empty():
    assert derived_views.children_of(_categories(), None) == []


# ── Aggregates ──


def test_sum_amount_over_refunded_statuses():
    rows = [
        {"status": "approved", "amount": 100},
        {"status": "processed", "amount": 50},
        {"status": "pending", "amount": 30},
        {"status": "processed"},
    ]
    assert derived_views.sum_amount(rows, {"approved", "processed"}) == 150


def test_sum_amount_skips_missing_amounts():
    rows = [
        {"status": "approved", "amount": 100},
        {"status": "pending", "amount": 50},
        {"status": "approved", "amount": None},
    ]
    assert derived_views.sum_amount(rows, {"approved", "processed"}) == 100


def test_sum_amount_ignores_non_numeric_amounts():
    rows = [
        {"status": "approved", "amount": "12"},
        {"status": "approved", "amount": True},
        {"status": "approved", "amount": 7.5},
    ]
    assert derived_views.sum_amount(rows, {"approved"}) == 7.5


def test_count_by_groups_statuses():
    rows = [{"status": "pending"}, {"status": "pending"}, {"status": "failed"}]
    counts = derived_views.count_by(rows, lambda r: r["status"])
    assert counts["pending"] == 2
    assert counts["failed"] == 1
    assert counts["approved"] == 0


# ── Formatting ──


def test_order_reference_prefers_order_number():
    order = PopulatedReference(id="64b7f0c2a1b2c3d4e5f60718", display={"orderNumber": "ORD-1001"})
    assert derived_views.format_order_reference(order) == "#ORD-1001"


def test_order_reference_falls_back_to_id_suffix():
    assert derived_views.format_order_reference("64b7f0c2a1b2c3d4e5f60718") == "#E5F60718"
    assert derived_views.format_order_reference(None) == ""
