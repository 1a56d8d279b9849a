from __future__ import annotations

from typing import Protocol, Sequence

from returns.result import Result

from plate_configurator.core.domain.model.errors import ConfiguratorError
from plate_configurator.core.domain.model.order import NewOrder, Order


class OrderRepository(Protocol):
    def save(self, order: NewOrder) -> Result[Order, ConfiguratorError]: ...

    def get(self, order_id: int) -> Result[Order, ConfiguratorError]: ...

    def list(self) -> Result[Sequence[Order], ConfiguratorError]: ...
