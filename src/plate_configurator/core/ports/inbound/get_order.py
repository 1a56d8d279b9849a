from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol

from returns.result import Result

from plate_configurator.core.domain.model.errors import ConfiguratorError
from plate_configurator.core.domain.model.order import Order


@dataclass(frozen=True)
class GetOrderQuery:
    order_id: int


class GetOrderUseCase(Protocol):
    def get_order(self, query: GetOrderQuery) -> Result[Order, ConfiguratorError]: ...
