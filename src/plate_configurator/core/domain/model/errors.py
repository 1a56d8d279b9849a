from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal


@dataclass(eq=False)
class ConfiguratorError(Exception):
    message: str

    def __str__(self) -> str:
        return self.message


@dataclass(eq=False)
class ValidationError(ConfiguratorError):
    pass


@dataclass(eq=False)
class PriceMismatch(ValidationError):
    expected: Decimal
    submitted: Decimal

    def __str__(self) -> str:
        return f"price_mismatch: expected={self.expected} submitted={self.submitted} ({self.message})"


@dataclass(eq=False)
class Unauthorized(ConfiguratorError):
    pass


@dataclass(eq=False)
class PersistenceError(ConfiguratorError):
    pass


@dataclass(eq=False)
class OptionNotFound(PersistenceError):
    kind: str
    option_id: int

    def __str__(self) -> str:
        return f"option_not_found: {self.kind}/{self.option_id} ({self.message})"


@dataclass(eq=False)
class DuplicateOption(PersistenceError):
    kind: str
    discriminator: str

    def __str__(self) -> str:
        return f"duplicate_option: {self.kind}/{self.discriminator} ({self.message})"


@dataclass(eq=False)
class OrderNotFound(PersistenceError):
    order_id: int

    def __str__(self) -> str:
        return f"order_not_found: {self.order_id} ({self.message})"


@dataclass(eq=False)
class PublishError(ConfiguratorError):
    pass
