from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from datetime import datetime
from typing import Callable, Sequence

from returns.pipeline import flow
from returns.pointfree import bind, map_
from returns.result import Failure, Result, Success

from plate_configurator.core.domain.model.errors import (
    ConfiguratorError,
    PriceMismatch,
    ValidationError,
)
from plate_configurator.core.domain.model.order import (
    NewOrder,
    Order,
    OrderItem,
    PaymentStatus,
    now_utc,
)
from plate_configurator.core.domain.model.price import (
    MAX_ORDER_TOTAL,
    MAX_PRICE,
    sum_prices,
    to_price,
)
from plate_configurator.core.domain.service.pricing import price_customization
from plate_configurator.core.domain.service.validation import validate_references
from plate_configurator.core.ports.inbound.catalog import CatalogUseCase
from plate_configurator.core.ports.inbound.place_order import (
    OrderReceipt,
    PlaceOrderCommand,
    PlaceOrderUseCase,
)
from plate_configurator.core.ports.inbound.quote import Quote
from plate_configurator.core.ports.outbound.events import EventPublisher, OrderPlaced
from plate_configurator.core.ports.outbound.orders import OrderRepository

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PlaceOrderDeps:
    catalog: CatalogUseCase
    orders: OrderRepository
    events: EventPublisher
    clock: Callable[[], datetime] = now_utc


@dataclass(frozen=True)
class PlaceOrderContext:
    command: PlaceOrderCommand
    payment_status: PaymentStatus
    payment_id: str | None
    quote: Quote | None = None


@dataclass(frozen=True)
class PlaceOrderService(PlaceOrderUseCase):
    """
    Checkout submission. The catalog, not the client, decides what the
    order costs: the submitted lines and total are only compared against
    the server price and the order is rejected when they disagree.
    """

    deps: PlaceOrderDeps

    def place_order(
        self, command: PlaceOrderCommand
    ) -> Result[OrderReceipt, ConfiguratorError]:
        return flow(
            command,
            _validate_command,
            bind(self._price),
            bind(_reconcile),
            bind(self._persist),
            bind(self._publish),
            map_(_to_receipt),
        )

    # ---- side effects ------------------------------------------------------

    def _price(
        self, ctx: PlaceOrderContext
    ) -> Result[PlaceOrderContext, ConfiguratorError]:
        customization = ctx.command.customization
        return self.deps.catalog.snapshot().bind(
            lambda catalog: validate_references(customization, catalog)
            .bind(lambda _: price_customization(customization, catalog))
            .map(lambda quote: replace(ctx, quote=quote))
        )

    def _persist(self, ctx: PlaceOrderContext) -> Result[Order, ConfiguratorError]:
        new_order = NewOrder(
            customization=ctx.command.customization,
            items=ctx.quote.items,
            total_price=ctx.quote.total,
            payment_status=ctx.payment_status,
            payment_id=ctx.payment_id,
            created_at=self.deps.clock(),
        )
        return self.deps.orders.save(new_order)

    def _publish(self, order: Order) -> Result[Order, ConfiguratorError]:
        event = OrderPlaced(
            order_id=order.order_id,
            total_price=order.total_price,
            payment_status=order.payment_status,
        )
        return self.deps.events.publish(event).map(lambda _: order)


# ---- pure helpers ----------------------------------------------------------


def _validate_command(
    cmd: PlaceOrderCommand,
) -> Result[PlaceOrderContext, ConfiguratorError]:
    if not cmd.customization.registration_number.strip():
        return Failure(ValidationError("registrationNumber is required"))

    raw_status = (cmd.payment_status or "").strip().lower()
    if not raw_status:
        status = PaymentStatus.PENDING
    else:
        try:
            status = PaymentStatus(raw_status)
        except ValueError:
            allowed = ", ".join(s.value for s in PaymentStatus)
            return Failure(
                ValidationError(f"paymentData.status must be one of: {allowed}")
            )

    total = cmd.submitted_total
    if total is not None and not (0 <= total <= MAX_ORDER_TOTAL):
        return Failure(
            ValidationError(f"totalPrice must be between 0 and {MAX_ORDER_TOTAL}")
        )
    for item in cmd.submitted_items or ():
        if not (0 <= item.price <= MAX_PRICE):
            return Failure(
                ValidationError(f"orderItems price must be between 0 and {MAX_PRICE}")
            )

    payment_id = (cmd.payment_id or "").strip() or None
    return Success(
        PlaceOrderContext(command=cmd, payment_status=status, payment_id=payment_id)
    )


def _reconcile(ctx: PlaceOrderContext) -> Result[PlaceOrderContext, ConfiguratorError]:
    quote = ctx.quote
    submitted_total = ctx.command.submitted_total
    if submitted_total is not None and to_price(submitted_total) != quote.total:
        logger.warning(
            "rejected order: submitted total %s, catalog total %s",
            submitted_total,
            quote.total,
        )
        return Failure(
            PriceMismatch(
                message="submitted total does not match current catalog prices",
                expected=quote.total,
                submitted=to_price(submitted_total),
            )
        )

    submitted_items = ctx.command.submitted_items
    if submitted_items is not None and _lines(submitted_items) != _lines(quote.items):
        logger.warning(
            "rejected order: submitted items %s, catalog items %s",
            _lines(submitted_items),
            _lines(quote.items),
        )
        return sum_prices(to_price(i.price) for i in submitted_items).bind(
            lambda submitted: Failure(
                PriceMismatch(
                    message="submitted order items do not match current catalog prices",
                    expected=quote.total,
                    submitted=submitted,
                )
            )
        )

    return Success(ctx)


def _lines(items: Sequence[OrderItem]) -> tuple[tuple[int, str, str], ...]:
    return tuple((i.id, i.name, str(to_price(i.price))) for i in items)


def _to_receipt(order: Order) -> OrderReceipt:
    return OrderReceipt(
        order_id=order.order_id,
        total_price=order.total_price,
        payment_status=order.payment_status,
    )
