from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from typing import Mapping, Protocol, Sequence

from returns.result import Result

from plate_configurator.core.domain.model.errors import ConfiguratorError
from plate_configurator.core.domain.model.order import Order, PaymentStatus


@dataclass(frozen=True)
class ListOrdersQuery:
    search: str | None = None  # order id or registration number fragment


@dataclass(frozen=True)
class OrderSummaryQuery:
    latest: int = 5


@dataclass(frozen=True)
class OrderSummaryView:
    total_orders: int
    counts_by_status: Mapping[PaymentStatus, int]
    revenue: Decimal
    latest: Sequence[Order]


class ListOrdersUseCase(Protocol):
    def list_orders(
        self, query: ListOrdersQuery
    ) -> Result[Sequence[Order], ConfiguratorError]: ...

    def summarize(
        self, query: OrderSummaryQuery
    ) -> Result[OrderSummaryView, ConfiguratorError]: ...
