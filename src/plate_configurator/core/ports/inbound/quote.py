from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from typing import Protocol, Tuple

from returns.result import Result

from plate_configurator.core.domain.model.errors import ConfiguratorError
from plate_configurator.core.domain.model.order import OrderItem, PlateCustomization


@dataclass(frozen=True)
class Quote:
    items: Tuple[OrderItem, ...]
    total: Decimal


class QuoteUseCase(Protocol):
    def quote(
        self, customization: PlateCustomization
    ) -> Result[Quote, ConfiguratorError]: ...
