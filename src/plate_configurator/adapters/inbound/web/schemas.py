from __future__ import annotations

from dataclasses import asdict, dataclass
from datetime import datetime
from decimal import Decimal
from typing import Annotated, Any, Literal

from pydantic import BaseModel, ConfigDict, Field, PlainSerializer
from pydantic.alias_generators import to_camel

from plate_configurator.core.domain.model.catalog import Option, OptionKind
from plate_configurator.core.domain.model.order import (
    Order,
    OrderItem,
    PlateCustomization,
)
from plate_configurator.core.domain.model.price import MAX_ORDER_TOTAL, MAX_PRICE

# Prices travel as JSON numbers, the way the storefront client expects them.
Price = Annotated[Decimal, PlainSerializer(float, return_type=float, when_used="json")]

HEX_PATTERN = r"^#[0-9A-Fa-f]{6}$"


class WireModel(BaseModel):
    """camelCase on the wire, snake_case in Python."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


# ---- catalog DTOs ----------------------------------------------------------


class PlateSelectionIn(WireModel):
    value: Literal["front", "rear", "both"]
    name: str = Field(min_length=1, examples=["Front Only"])
    price: Decimal = Field(default=Decimal("0"), ge=0, le=MAX_PRICE, examples=["19.99"])


class PlateSelectionPatch(WireModel):
    value: Literal["front", "rear", "both"] | None = None
    name: str | None = Field(default=None, min_length=1)
    price: Decimal | None = Field(default=None, ge=0, le=MAX_PRICE)


class PlateSelectionOut(WireModel):
    id: int
    value: str
    name: str
    price: Price


class StyledOptionIn(WireModel):
    style: str = Field(min_length=1, examples=["premium"])
    name: str = Field(min_length=1, examples=["Premium"])
    price: Decimal = Field(default=Decimal("0"), ge=0, le=MAX_PRICE, examples=["7.99"])


class StyledOptionPatch(WireModel):
    style: str | None = Field(default=None, min_length=1)
    name: str | None = Field(default=None, min_length=1)
    price: Decimal | None = Field(default=None, ge=0, le=MAX_PRICE)


class StyledOptionOut(WireModel):
    id: int
    style: str
    name: str
    price: Price


class BadgeIn(WireModel):
    code: str = Field(min_length=1, examples=["gb"])
    name: str = Field(min_length=1, examples=["GB Badge"])
    price: Decimal = Field(default=Decimal("0"), ge=0, le=MAX_PRICE, examples=["4.99"])
    image_url: str | None = None


class BadgePatch(WireModel):
    code: str | None = Field(default=None, min_length=1)
    name: str | None = Field(default=None, min_length=1)
    price: Decimal | None = Field(default=None, ge=0, le=MAX_PRICE)
    image_url: str | None = None


class BadgeOut(WireModel):
    id: int
    code: str
    name: str
    price: Price
    image_url: str | None = None


class ColorIn(WireModel):
    name: str = Field(min_length=1, examples=["Gold"])
    hex_code: str = Field(pattern=HEX_PATTERN, examples=["#FFD700"])


class ColorPatch(WireModel):
    name: str | None = Field(default=None, min_length=1)
    hex_code: str | None = Field(default=None, pattern=HEX_PATTERN)


class ColorOut(WireModel):
    id: int
    name: str
    hex_code: str


@dataclass(frozen=True)
class OptionSchemas:
    create: type[WireModel]
    patch: type[WireModel]
    out: type[WireModel]


OPTION_SCHEMAS: dict[OptionKind, OptionSchemas] = {
    OptionKind.PLATE_SELECTIONS: OptionSchemas(
        PlateSelectionIn, PlateSelectionPatch, PlateSelectionOut
    ),
    OptionKind.PLATE_TYPES: OptionSchemas(
        StyledOptionIn, StyledOptionPatch, StyledOptionOut
    ),
    OptionKind.BADGES: OptionSchemas(BadgeIn, BadgePatch, BadgeOut),
    OptionKind.BADGE_COLORS: OptionSchemas(ColorIn, ColorPatch, ColorOut),
    OptionKind.TEXT_STYLES: OptionSchemas(
        StyledOptionIn, StyledOptionPatch, StyledOptionOut
    ),
    OptionKind.BORDER_COLORS: OptionSchemas(ColorIn, ColorPatch, ColorOut),
    OptionKind.PLATE_SURROUNDS: OptionSchemas(
        StyledOptionIn, StyledOptionPatch, StyledOptionOut
    ),
}


# ---- order DTOs ------------------------------------------------------------


class CustomizationModel(WireModel):
    registration_number: str = Field(min_length=1, max_length=16, examples=["AB12 CDE"])
    plate_selection: str = Field(examples=["front"])
    plate_type: str = Field(examples=["standard"])
    badge: str = Field(examples=["gb"])
    badge_color: str = Field(examples=["#FFD700"])
    text_style: str = Field(examples=["standard"])
    border_color: str = Field(examples=["#212529"])
    plate_surround: str = Field(examples=["none"])


class OrderItemModel(WireModel):
    id: int
    name: str
    price: Price = Field(ge=0, le=MAX_PRICE)


class PaymentDataIn(WireModel):
    # the hosted payment widget may send more (e.g. "details"); it is ignored
    status: str | None = Field(default=None, examples=["completed"])
    payment_id: str | None = Field(default=None, examples=["8MC585209K746392H"])


class CreateOrderRequest(WireModel):
    customization: CustomizationModel
    order_items: list[OrderItemModel] | None = None
    total_price: Decimal | None = Field(
        default=None, ge=0, le=MAX_ORDER_TOTAL, examples=["24.98"]
    )
    payment_data: PaymentDataIn | None = None


class CreateOrderResponse(WireModel):
    success: bool = True
    order_id: int
    message: str


class OrderOut(WireModel):
    id: int
    customization: CustomizationModel
    order_items: list[OrderItemModel]
    total_price: Price
    payment_status: str
    payment_id: str | None
    created_at: datetime


class QuoteRequest(WireModel):
    customization: CustomizationModel


class QuoteResponse(WireModel):
    order_items: list[OrderItemModel]
    total_price: Price
    currency: str


class OrderSummaryResponse(WireModel):
    total_orders: int
    counts_by_status: dict[str, int]
    revenue: Price
    latest: list[OrderOut]


class ErrorResponse(BaseModel):
    success: bool = False
    type: str
    message: str
    details: list[dict[str, Any]] | None = None


# ---- mapping helpers -------------------------------------------------------


def option_to_wire(kind: OptionKind, option: Option) -> dict[str, Any]:
    out = OPTION_SCHEMAS[kind].out.model_validate(asdict(option))
    return out.model_dump(mode="json", by_alias=True)


def to_customization(model: CustomizationModel) -> PlateCustomization:
    return PlateCustomization(**model.model_dump())


def to_items(models: list[OrderItemModel]) -> tuple[OrderItem, ...]:
    return tuple(OrderItem(id=m.id, name=m.name, price=m.price) for m in models)


def items_to_wire(items: tuple[OrderItem, ...]) -> list[OrderItemModel]:
    return [OrderItemModel(id=i.id, name=i.name, price=i.price) for i in items]


def order_to_wire(order: Order) -> OrderOut:
    return OrderOut(
        id=order.order_id,
        customization=CustomizationModel.model_validate(asdict(order.customization)),
        order_items=items_to_wire(order.items),
        total_price=order.total_price,
        payment_status=order.payment_status.value,
        payment_id=order.payment_id,
        created_at=order.created_at,
    )
