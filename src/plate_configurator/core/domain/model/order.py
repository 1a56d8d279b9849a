from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timezone
from decimal import Decimal
from enum import Enum
from typing import Tuple


class PaymentStatus(str, Enum):
    PENDING = "pending"
    COMPLETED = "completed"
    FAILED = "failed"


@dataclass(frozen=True)
class PlateCustomization:
    registration_number: str
    plate_selection: str
    plate_type: str
    badge: str
    badge_color: str
    text_style: str
    border_color: str
    plate_surround: str


@dataclass(frozen=True)
class OrderItem:
    id: int
    name: str
    price: Decimal


@dataclass(frozen=True)
class NewOrder:
    customization: PlateCustomization
    items: Tuple[OrderItem, ...]
    total_price: Decimal
    payment_status: PaymentStatus
    payment_id: str | None
    created_at: datetime


@dataclass(frozen=True)
class Order:
    order_id: int
    customization: PlateCustomization
    items: Tuple[OrderItem, ...]
    total_price: Decimal
    payment_status: PaymentStatus
    payment_id: str | None
    created_at: datetime

    @staticmethod
    def from_new(order_id: int, new: NewOrder) -> "Order":
        return Order(
            order_id=order_id,
            customization=new.customization,
            items=new.items,
            total_price=new.total_price,
            payment_status=new.payment_status,
            payment_id=new.payment_id,
            created_at=new.created_at,
        )


def now_utc() -> datetime:
    return datetime.now(timezone.utc)
