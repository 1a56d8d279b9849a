from __future__ import annotations

from dataclasses import dataclass

from returns.result import Failure, Result

from plate_configurator.core.domain.model.errors import (
    ConfiguratorError,
    OrderNotFound,
)
from plate_configurator.core.domain.model.order import Order
from plate_configurator.core.ports.inbound.get_order import (
    GetOrderQuery,
    GetOrderUseCase,
)
from plate_configurator.core.ports.outbound.orders import OrderRepository


@dataclass(frozen=True)
class GetOrderDeps:
    orders: OrderRepository


@dataclass(frozen=True)
class GetOrderService(GetOrderUseCase):
    deps: GetOrderDeps

    def get_order(self, query: GetOrderQuery) -> Result[Order, ConfiguratorError]:
        if query.order_id <= 0:
            return Failure(
                OrderNotFound(message="order not found", order_id=query.order_id)
            )
        return self.deps.orders.get(query.order_id)
