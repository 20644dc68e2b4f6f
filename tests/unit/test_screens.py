"""Unit tests for resource screens and the ScreenContext."""

import pytest

from admin_console.application.services import (
    CollectionStore,
    ModalController,
    MunicipalityScreen,
    PlanScreen,
    RefundScreen,
    ScreenContext,
    SubscriptionScreen,
    WorkflowOrchestrator,
)
from admin_console.domain.exceptions import DraftValidationError
from admin_console.infrastructure.admin_api.mappers import (
    municipality_from_payload,
    plan_from_payload,
    subscription_from_payload,
)
from tests.fakes import FakeGateway, FakeRefundGateway, RecordingNotifier


def _context(screen, store, notifier) -> ScreenContext:
    return ScreenContext(screen=screen, store=store, modal=ModalController(screen, store, notifier))


def _refund_context() -> tuple[ScreenContext, FakeRefundGateway]:
    gateway = FakeRefundGateway([
        {
            "_id": "r1",
            "order": {"_id": "o1", "orderNumber": "ORD-1001"},
            "customer": {"_id": "u1", "name": "Ana Cruz", "email": "ana@example.com"},
            "amount": 100,
            "status": "approved",
        },
        {"_id": "r2", "order": "o2", "customer": "u2", "amount": 50, "status": "processed"},
        {"_id": "r3", "order": "o3", "customer": "u3", "amount": 30, "status": "pending"},
        {"_id": "r4", "order": "o4", "customer": "u4", "status": "processed"},
    ])
    notifier = RecordingNotifier()
    store = CollectionStore(gateway, notifier)
    orchestrator = WorkflowOrchestrator(gateway, FakeGateway(subscription_from_payload))
    return _context(RefundScreen(store, orchestrator), store, notifier), gateway


def _municipality_context() -> tuple[ScreenContext, FakeGateway, RecordingNotifier]:
    gateway = FakeGateway(municipality_from_payload, "municipalities", [
        {"_id": "m1", "name": "Dumaguete", "province": "Negros Oriental", "isActive": True},
        {"_id": "m2", "name": "Bais", "province": "Negros Oriental", "isActive": False},
        {"_id": "m3", "name": "Tagbilaran", "province": "Bohol", "isActive": True},
    ])
    notifier = RecordingNotifier()
    store = CollectionStore(gateway, notifier)
    orchestrator = WorkflowOrchestrator(FakeRefundGateway(), FakeGateway(subscription_from_payload))
    return _context(MunicipalityScreen(store, orchestrator, gateway), store, notifier), gateway, notifier


# ── ScreenContext ──


@pytest.mark.asyncio
async def test_text_search_never_fetches():
    context, gateway, _ = _municipality_context()
    await context.load()
    fetches = gateway.count("fetch_all")

    context.set_query("negros")

    assert [m.id for m in context.visible_items()] == ["m1", "m2"]
    assert gateway.count("fetch_all") == fetches


@pytest.mark.asyncio
async def test_local_status_filter_for_municipalities():
    context, gateway, _ = _municipality_context()
    await context.load()

    await context.set_status("inactive")

    assert [m.id for m in context.visible_items()] == ["m2"]
    assert gateway.calls[-1] == ("fetch_all", None)


@pytest.mark.asyncio
async def test_refund_status_filter_is_sent_to_backend():
    context, gateway = _refund_context()
    await context.load()
    assert gateway.calls[-1] == ("fetch_all", {})

    await context.set_status("pending")

    assert gateway.calls[-1] == ("fetch_all", {"status": "pending"})
    assert [r.id for r in context.store.items] == ["r3"]


@pytest.mark.asyncio
async def test_refund_search_matches_order_and_customer():
    context, _ = _refund_context()
    await context.load()

    context.set_query("ORD-1001")
    assert [r.id for r in context.visible_items()] == ["r1"]

    context.set_query("ana@EXAMPLE")
    assert [r.id for r in context.visible_items()] == ["r1"]


@pytest.mark.asyncio
async def test_refund_statistics():
    context, _ = _refund_context()
    await context.load()

    stats = context.statistics()

    assert stats["total"] == 4
    assert stats["processed"] == 2
    assert stats["pending"] == 1
    assert stats["rejected"] == 0
    assert stats["total_refunded"] == 150


@pytest.mark.asyncio
async def test_municipality_toggle_message_uses_name():
    context, gateway, notifier = _municipality_context()
    await context.load()

    context.modal.open_action(context.store.find("m2"), "toggle-status")
    assert await context.modal.submit() is True

    assert gateway.calls[-2] == ("update", ("m2", {"isActive": True}))
    assert context.store.find("m2").is_active is True
    assert notifier.of("success") == ["Bais activated"]


# ── Plans ──


def _plan_screen() -> PlanScreen:
    store = CollectionStore(FakeGateway(plan_from_payload, "plans"), RecordingNotifier())
    return PlanScreen(store)


def test_plan_payload_uses_wire_names():
    screen = _plan_screen()
    draft = screen.default_draft() | {
        "code": " pro_monthly ",
        "name": "Pro",
        "price": "",
        "features": "Unlimited listings\n\n Priority support ",
        "discount_percent": 15,
    }

    payload = screen.build_payload(draft)

    assert payload["code"] == "pro_monthly"
    assert payload["price"] == 0
    assert payload["features"] == ["Unlimited listings", "Priority support"]
    assert payload["discountPercent"] == 15
    assert payload["discountExpiresAt"] is None
    assert payload["isActive"] is True


def test_plan_payload_rejects_negative_price():
    screen = _plan_screen()
    draft = screen.default_draft() | {"code": "pro", "name": "Pro", "price": -1}

    with pytest.raises(DraftValidationError) as exc_info:
        screen.build_payload(draft)
    assert exc_info.value.field == "price"


def test_plan_payload_requires_code():
    screen = _plan_screen()
    with pytest.raises(DraftValidationError) as exc_info:
        screen.build_payload(screen.default_draft() | {"name": "Pro"})
    assert exc_info.value.message == "Plan code is required"


# ── Subscriptions ──


@pytest.mark.asyncio
async def test_change_plan_dispatches_by_identifier_shape():
    gateway = FakeGateway(subscription_from_payload, "subscriptions", [
        {"_id": "s1", "sellerId": {"_id": "x", "shopName": "Weaves"}, "planId": "p1"},
    ])
    notifier = RecordingNotifier()
    store = CollectionStore(gateway, notifier)
    screen = SubscriptionScreen(store, WorkflowOrchestrator(FakeRefundGateway(), gateway))
    context = _context(screen, store, notifier)
    await context.load()

    sub = store.find("s1")
    context.modal.open_action(sub, "change-plan")
    assert context.modal.draft == {"plan": "p1"}

    context.modal.update_draft(plan="507f1f77bcf86cd799439011")
    assert await context.modal.submit() is True

    assert ("update", ("s1", {"planId": "507f1f77bcf86cd799439011"})) in gateway.calls
    assert notifier.of("success") == ["Subscription plan updated"]


@pytest.mark.asyncio
async def test_change_plan_requires_selection():
    gateway = FakeGateway(subscription_from_payload, "subscriptions", [
        {"_id": "s1", "sellerId": "x", "planId": "p1"},
    ])
    notifier = RecordingNotifier()
    store = CollectionStore(gateway, notifier)
    screen = SubscriptionScreen(store, WorkflowOrchestrator(FakeRefundGateway(), gateway))
    context = _context(screen, store, notifier)
    await context.load()

    context.modal.open_action(store.find("s1"), "change-plan")
    context.modal.update_draft(plan="")

    assert await context.modal.submit() is False
    assert gateway.count("update") == 0
    assert notifier.of("error") == ["Select a plan to assign"]
