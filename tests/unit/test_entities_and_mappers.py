"""Unit tests for domain entities and the payload mappers."""

from datetime import datetime, timedelta, timezone

from admin_console.domain.entities import Plan, PopulatedReference, Subscription, display_name
from admin_console.infrastructure.admin_api.mappers import (
    category_from_payload,
    plan_from_payload,
    refund_from_payload,
    subscription_from_payload,
)

NOW = datetime(2026, 3, 1, 12, 0, tzinfo=timezone.utc)


# ── Plan pricing ──


def test_final_price_applies_active_discount():
    plan = Plan(id="p1", code="pro", name="Pro", price=999, discount_percent=20)
    assert plan.final_price(NOW) == 799


def test_final_price_ignores_expired_discount():
    plan = Plan(
        id="p1", code="pro", name="Pro", price=999, discount_percent=20,
        discount_expires_at=NOW - timedelta(days=1),
    )
    assert plan.discount_active(NOW) is False
    assert plan.final_price(NOW) == 999


def test_final_price_never_below_one():
    plan = Plan(id="p1", code="promo", name="Promo", price=1, discount_percent=100)
    assert plan.final_price(NOW) == 1


# ── Subscription expiry ──


def test_days_until_expiry_rounds_up():
    sub = Subscription(
        id="s1", seller="x", plan="p1", current_period_end=NOW + timedelta(days=2, hours=1)
    )
    assert sub.days_until_expiry(NOW) == 3


def test_days_until_expiry_floors_at_zero():
    sub = Subscription(id="s1", seller="x", plan="p1", current_period_end=NOW - timedelta(days=4))
    assert sub.days_until_expiry(NOW) == 0


def test_days_until_expiry_without_end_date():
    assert Subscription(id="s1", seller="x", plan="p1").days_until_expiry(NOW) is None


# ── Mappers ──


def test_category_mapper_accepts_bare_parent():
    category = category_from_payload({"_id": "c1", "name": "Baskets", "parentCategory": "root"})
    assert category.parent == "root"
    assert category.is_root is False
    assert category.is_active is True


def test_refund_mapper_reads_populated_references():
    refund = refund_from_payload({
        "_id": "r1",
        "order": {"_id": "o1", "orderNumber": "ORD-7"},
        "user": {"_id": "u1", "name": "Ana", "email": "ana@example.com"},
        "seller": {"_id": "s1", "shopName": "Ana's Crafts"},
        "amount": "120.50",
        "status": "approved",
        "adminNotes": "verified",
        "createdAt": "2026-02-01T08:00:00.000Z",
    })
    assert isinstance(refund.customer, PopulatedReference)
    assert display_name(refund.customer) == "Ana"
    assert display_name(refund.seller) == "Ana's Crafts"
    assert refund.amount == 120.5
    assert refund.admin_note == "verified"
    assert refund.awaiting_payout is True
    assert refund.created_at == datetime(2026, 2, 1, 8, 0, tzinfo=timezone.utc)


def test_refund_mapper_defaults_to_pending():
    refund = refund_from_payload({"_id": "r1", "order": "o1", "customer": "u1"})
    assert refund.is_pending is True
    assert refund.amount is None


def test_plan_mapper_reads_discount_fields():
    plan = plan_from_payload({
        "_id": "p1",
        "code": "pro_monthly",
        "name": "Pro",
        "price": 499,
        "discountPercent": 10,
        "discountExpiresAt": "2030-01-01T00:00:00Z",
        "features": ["Unlimited listings"],
    })
    assert plan.discount_active(NOW) is True
    assert plan.final_price(NOW) == 449
    assert plan.features == ["Unlimited listings"]


def test_subscription_mapper_prefers_populated_ids():
    sub = subscription_from_payload({
        "_id": "s1",
        "sellerId": {"_id": "seller-1", "shopName": "Weaves"},
        "planId": {"_id": "p1", "code": "basic", "name": "Basic"},
        "currentPeriodEnd": "bad-date",
    })
    assert sub.plan.id == "p1"
    assert display_name(sub.seller) == "Weaves"
    assert sub.current_period_end is None
