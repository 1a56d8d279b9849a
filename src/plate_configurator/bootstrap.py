from __future__ import annotations

from dataclasses import dataclass

from fastapi import FastAPI

from plate_configurator.adapters.inbound.web.fastapi_app import create_app
from plate_configurator.adapters.outbound.catalog_seed import seed_catalog
from plate_configurator.adapters.outbound.in_memory_options import (
    build_option_repositories,
)
from plate_configurator.adapters.outbound.in_memory_orders import (
    InMemoryOrderRepository,
)
from plate_configurator.adapters.outbound.logging_events import LoggingEventPublisher
from plate_configurator.adapters.outbound.static_token_auth import (
    StaticTokenAuthenticator,
)
from plate_configurator.config import Settings
from plate_configurator.core.domain.service.catalog_service import (
    CatalogDeps,
    CatalogService,
)
from plate_configurator.core.domain.service.get_order_service import (
    GetOrderDeps,
    GetOrderService,
)
from plate_configurator.core.domain.service.list_orders_service import (
    ListOrdersDeps,
    ListOrdersService,
)
from plate_configurator.core.domain.service.place_order_service import (
    PlaceOrderDeps,
    PlaceOrderService,
)
from plate_configurator.core.domain.service.quote_service import (
    QuoteDeps,
    QuoteService,
)
from plate_configurator.core.ports.outbound.auth import AdminAuthenticator


@dataclass(frozen=True)
class UseCases:
    catalog: CatalogService
    quote: QuoteService
    place_order: PlaceOrderService
    get_order: GetOrderService
    list_orders: ListOrdersService
    authenticator: AdminAuthenticator


def build_usecases(settings: Settings) -> UseCases:
    orders = InMemoryOrderRepository()
    events = LoggingEventPublisher()

    catalog = CatalogService(CatalogDeps(repositories=build_option_repositories()))
    if settings.seed_catalog:
        seed_catalog(catalog)

    return UseCases(
        catalog=catalog,
        quote=QuoteService(QuoteDeps(catalog=catalog)),
        place_order=PlaceOrderService(
            PlaceOrderDeps(catalog=catalog, orders=orders, events=events)
        ),
        get_order=GetOrderService(GetOrderDeps(orders=orders)),
        list_orders=ListOrdersService(ListOrdersDeps(orders=orders)),
        authenticator=StaticTokenAuthenticator(expected_token=settings.admin_token),
    )


def build_app(settings: Settings | None = None) -> FastAPI:
    settings = settings or Settings.from_env()
    usecases = build_usecases(settings)
    return create_app(
        catalog_uc=usecases.catalog,
        quote_uc=usecases.quote,
        place_order_uc=usecases.place_order,
        get_order_uc=usecases.get_order,
        list_orders_uc=usecases.list_orders,
        authenticator=usecases.authenticator,
        currency=settings.currency,
    )
