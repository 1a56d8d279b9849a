from __future__ import annotations

import logging
from dataclasses import dataclass

from returns.result import Failure, Result, Success

from plate_configurator.core.domain.model.errors import ConfiguratorError, PublishError
from plate_configurator.core.ports.outbound.events import EventPublisher, OrderPlaced

logger = logging.getLogger(__name__)


@dataclass
class LoggingEventPublisher(EventPublisher):
    fail: bool = False

    def publish(self, event: OrderPlaced) -> Result[None, ConfiguratorError]:
        if self.fail:
            return Failure(PublishError(message="publisher is down"))
        logger.info(
            "order_placed: id=%s total=%s payment_status=%s",
            event.order_id,
            event.total_price,
            event.payment_status.value,
        )
        return Success(None)
