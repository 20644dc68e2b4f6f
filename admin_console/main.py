"""Console factory — builds every store and controller once at startup."""

import asyncio
import logging
from contextlib import asynccontextmanager
from collections.abc import AsyncIterator
from dataclasses import dataclass
from typing import Any

import httpx

from admin_console.application.interfaces import CredentialProvider, Notifier
from admin_console.application.services import (
    AdminScreen,
    CategoryScreen,
    CollectionStore,
    ModalController,
    MunicipalityScreen,
    PlanScreen,
    RefundScreen,
    ScreenContext,
    SubscriptionScreen,
    WorkflowOrchestrator,
)
from admin_console.config import Settings, get_settings
from admin_console.infrastructure.admin_api import (
    AdminApiClient,
    HttpCategoryGateway,
    HttpRefundGateway,
    HttpResourceGateway,
    StaticTokenProvider,
)
from admin_console.infrastructure.admin_api.mappers import (
    municipality_from_payload,
    plan_from_payload,
    subscription_from_payload,
)
from admin_console.infrastructure.logging.log_config import setup_logging
from admin_console.infrastructure.notifications.logging_notifier import LoggingNotifier

logger = logging.getLogger(__name__)


@dataclass
class AdminConsole:
    """Explicitly constructed console state, passed to the presentation layer by reference."""

    client: AdminApiClient
    notifier: Notifier
    orchestrator: WorkflowOrchestrator
    categories: ScreenContext
    municipalities: ScreenContext
    refunds: ScreenContext
    plans: ScreenContext
    subscriptions: ScreenContext

    @property
    def screens(self) -> dict[str, ScreenContext]:
        return {
            "categories": self.categories,
            "municipalities": self.municipalities,
            "refunds": self.refunds,
            "plans": self.plans,
            "subscriptions": self.subscriptions,
        }

    async def load_all(self) -> None:
        """Initial fetch of every screen. Failures are already notified per store."""
        await asyncio.gather(*(context.load() for context in self.screens.values()))

    async def aclose(self) -> None:
        await self.client.aclose()


def _context(screen: AdminScreen[Any], store: CollectionStore[Any], notifier: Notifier) -> ScreenContext:
    return ScreenContext(screen=screen, store=store, modal=ModalController(screen, store, notifier))


def build_console(
    settings: Settings | None = None,
    *,
    notifier: Notifier | None = None,
    credentials: CredentialProvider | None = None,
    http_client: httpx.AsyncClient | None = None,
) -> AdminConsole:
    """Wire gateways, stores, orchestrator and screens together."""
    settings = settings or get_settings()
    notifier = notifier or LoggingNotifier()
    credentials = credentials or StaticTokenProvider(settings.api_token)
    if not settings.api_token.strip() and isinstance(credentials, StaticTokenProvider):
        logger.warning("API_TOKEN is not configured; requests will be sent unauthenticated.")

    client = AdminApiClient(
        settings.api_base_url,
        credentials,
        timeout=settings.request_timeout_seconds,
        http_client=http_client,
    )

    category_gateway = HttpCategoryGateway(client, settings.categories_path)
    municipality_gateway = HttpResourceGateway(
        client, settings.municipalities_path, municipality_from_payload,
        resource_name="municipalities", collection_key="municipalities",
    )
    refund_gateway = HttpRefundGateway(client, settings.refunds_path)
    plan_gateway = HttpResourceGateway(
        client, settings.plans_path, plan_from_payload,
        resource_name="plans", collection_key="plans",
    )
    subscription_gateway = HttpResourceGateway(
        client, settings.subscriptions_path, subscription_from_payload,
        resource_name="subscriptions", collection_key="subscriptions",
    )

    orchestrator = WorkflowOrchestrator(refund_gateway, subscription_gateway)

    category_store = CollectionStore(category_gateway, notifier)
    municipality_store = CollectionStore(municipality_gateway, notifier)
    refund_store = CollectionStore(refund_gateway, notifier)
    plan_store = CollectionStore(plan_gateway, notifier)
    subscription_store = CollectionStore(subscription_gateway, notifier)

    return AdminConsole(
        client=client,
        notifier=notifier,
        orchestrator=orchestrator,
        categories=_context(
            CategoryScreen(category_store, orchestrator, category_gateway),
            category_store,
            notifier,
        ),
        municipalities=_context(
            MunicipalityScreen(municipality_store, orchestrator, municipality_gateway),
            municipality_store,
            notifier,
        ),
        refunds=_context(RefundScreen(refund_store, orchestrator), refund_store, notifier),
        plans=_context(PlanScreen(plan_store), plan_store, notifier),
        subscriptions=_context(
            SubscriptionScreen(subscription_store, orchestrator),
            subscription_store,
            notifier,
        ),
    )


@asynccontextmanager
async def open_console(
    settings: Settings | None = None,
    *,
    load: bool = True,
    **kwargs: Any,
) -> AsyncIterator[AdminConsole]:
    """Console lifespan — configure logging, build, load, and close on exit."""
    settings = settings or get_settings()
    setup_logging(settings)

    console = build_console(settings, **kwargs)
    logger.info("%s %s (%s) → %s", settings.app_title, settings.app_version, settings.app_env, settings.api_base_url)
    try:
        if load:
            await console.load_all()
        yield console
    finally:
        await console.aclose()
