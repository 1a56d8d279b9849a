from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

from returns.result import Failure, Result

from plate_configurator.core.domain.model.errors import (
    ConfiguratorError,
    ValidationError,
)
from plate_configurator.core.domain.model.order import Order, PaymentStatus
from plate_configurator.core.domain.model.price import sum_prices
from plate_configurator.core.ports.inbound.list_orders import (
    ListOrdersQuery,
    ListOrdersUseCase,
    OrderSummaryQuery,
    OrderSummaryView,
)
from plate_configurator.core.ports.outbound.orders import OrderRepository

MAX_LATEST = 100


@dataclass(frozen=True)
class ListOrdersDeps:
    orders: OrderRepository


@dataclass(frozen=True)
class ListOrdersService(ListOrdersUseCase):
    deps: ListOrdersDeps

    def list_orders(
        self, query: ListOrdersQuery
    ) -> Result[Sequence[Order], ConfiguratorError]:
        # a blank term lists everything
        term = (query.search or "").strip().lower() or None

        return self.deps.orders.list().map(
            lambda orders: tuple(o for o in orders if term is None or _matches(o, term))
        )

    def summarize(
        self, query: OrderSummaryQuery
    ) -> Result[OrderSummaryView, ConfiguratorError]:
        if query.latest <= 0:
            return Failure(ValidationError(message="latest must be > 0"))
        if query.latest > MAX_LATEST:
            return Failure(ValidationError(message=f"latest must be <= {MAX_LATEST}"))

        return self.deps.orders.list().bind(lambda orders: _summarize(orders, query.latest))


def _matches(order: Order, term: str) -> bool:
    return (
        term in str(order.order_id)
        or term in order.customization.registration_number.lower()
    )


def _summarize(
    orders: Sequence[Order], latest: int
) -> Result[OrderSummaryView, ConfiguratorError]:
    counts = {status: 0 for status in PaymentStatus}
    for o in orders:
        counts[o.payment_status] += 1

    newest = sorted(orders, key=lambda o: o.created_at, reverse=True)[:latest]
    return sum_prices(
        o.total_price for o in orders if o.payment_status is PaymentStatus.COMPLETED
    ).map(
        lambda revenue: OrderSummaryView(
            total_orders=len(orders),
            counts_by_status=counts,
            revenue=revenue,
            latest=tuple(newest),
        )
    )
