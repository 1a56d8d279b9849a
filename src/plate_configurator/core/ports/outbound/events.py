from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from typing import Protocol

from returns.result import Result

from plate_configurator.core.domain.model.errors import ConfiguratorError
from plate_configurator.core.domain.model.order import PaymentStatus


@dataclass(frozen=True)
class OrderPlaced:
    order_id: int
    total_price: Decimal
    payment_status: PaymentStatus


class EventPublisher(Protocol):
    def publish(self, event: OrderPlaced) -> Result[None, ConfiguratorError]: ...
