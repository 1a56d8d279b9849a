from __future__ import annotations

from dataclasses import dataclass
from functools import partial

from returns.result import Result

from plate_configurator.core.domain.model.errors import ConfiguratorError
from plate_configurator.core.domain.model.order import PlateCustomization
from plate_configurator.core.domain.service.pricing import price_customization
from plate_configurator.core.ports.inbound.catalog import CatalogUseCase
from plate_configurator.core.ports.inbound.quote import Quote, QuoteUseCase


@dataclass(frozen=True)
class QuoteDeps:
    catalog: CatalogUseCase


@dataclass(frozen=True)
class QuoteService(QuoteUseCase):
    deps: QuoteDeps

    def quote(
        self, customization: PlateCustomization
    ) -> Result[Quote, ConfiguratorError]:
        return self.deps.catalog.snapshot().bind(
            partial(price_customization, customization)
        )
