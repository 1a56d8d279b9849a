from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from typing import Protocol, Sequence

from returns.result import Result

from plate_configurator.core.domain.model.errors import ConfiguratorError
from plate_configurator.core.domain.model.order import (
    OrderItem,
    PaymentStatus,
    PlateCustomization,
)


@dataclass(frozen=True)
class PlaceOrderCommand:
    customization: PlateCustomization
    # what the client showed the customer; checked against the server price
    submitted_items: Sequence[OrderItem] | None = None
    submitted_total: Decimal | None = None
    payment_status: str | None = None
    payment_id: str | None = None


@dataclass(frozen=True)
class OrderReceipt:
    order_id: int
    total_price: Decimal
    payment_status: PaymentStatus


class PlaceOrderUseCase(Protocol):
    def place_order(
        self, command: PlaceOrderCommand
    ) -> Result[OrderReceipt, ConfiguratorError]: ...
