from __future__ import annotations

import threading
from dataclasses import dataclass, field
from typing import Dict, Sequence

from returns.result import Failure, Result, Success

from plate_configurator.core.domain.model.errors import (
    ConfiguratorError,
    OrderNotFound,
)
from plate_configurator.core.domain.model.order import NewOrder, Order
from plate_configurator.core.ports.outbound.orders import OrderRepository


@dataclass
class InMemoryOrderRepository(OrderRepository):
    _store: Dict[int, Order] = field(default_factory=dict)
    _next_id: int = 1
    _lock: threading.Lock = field(default_factory=threading.Lock, repr=False)

    def save(self, order: NewOrder) -> Result[Order, ConfiguratorError]:
        with self._lock:
            stored = Order.from_new(self._next_id, order)
            self._next_id += 1
            self._store[stored.order_id] = stored
        return Success(stored)

    def get(self, order_id: int) -> Result[Order, ConfiguratorError]:
        with self._lock:
            found = self._store.get(order_id)
        if found is None:
            return Failure(OrderNotFound(message="order not found", order_id=order_id))
        return Success(found)

    def list(self) -> Result[Sequence[Order], ConfiguratorError]:
        with self._lock:
            return Success(tuple(self._store.values()))  # insertion order
