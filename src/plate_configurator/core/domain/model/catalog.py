from __future__ import annotations

from dataclasses import MISSING, dataclass, fields
from decimal import Decimal
from enum import Enum
from typing import Mapping, Union

from plate_configurator.core.domain.model.price import ZERO


@dataclass(frozen=True)
class PlateSelection:
    id: int
    value: str
    name: str
    price: Decimal = ZERO


@dataclass(frozen=True)
class PlateType:
    id: int
    style: str
    name: str
    price: Decimal = ZERO


@dataclass(frozen=True)
class Badge:
    id: int
    code: str
    name: str
    price: Decimal = ZERO
    image_url: str | None = None


@dataclass(frozen=True)
class BadgeColor:
    id: int
    hex_code: str
    name: str


@dataclass(frozen=True)
class TextStyle:
    id: int
    style: str
    name: str
    price: Decimal = ZERO


@dataclass(frozen=True)
class BorderColor:
    id: int
    hex_code: str
    name: str


@dataclass(frozen=True)
class PlateSurround:
    id: int
    style: str
    name: str
    price: Decimal = ZERO


Option = Union[
    PlateSelection, PlateType, Badge, BadgeColor, TextStyle, BorderColor, PlateSurround
]


class OptionKind(str, Enum):
    """The seven option collections, valued by their URL slug."""

    PLATE_SELECTIONS = "plate-selections"
    PLATE_TYPES = "plate-types"
    BADGES = "badges"
    BADGE_COLORS = "badge-colors"
    TEXT_STYLES = "text-styles"
    BORDER_COLORS = "border-colors"
    PLATE_SURROUNDS = "plate-surrounds"

    @property
    def record_type(self) -> type:
        return _RECORD_TYPES[self]

    @property
    def discriminator(self) -> str:
        """Attribute a customer selection refers to (value/code/style/hex_code)."""
        return _DISCRIMINATORS[self]

    @property
    def priced(self) -> bool:
        return "price" in self.field_names

    @property
    def label(self) -> str:
        return self.value.replace("-", " ")[:-1]

    @property
    def field_names(self) -> tuple[str, ...]:
        return tuple(f.name for f in fields(self.record_type) if f.name != "id")

    @property
    def required_fields(self) -> tuple[str, ...]:
        return tuple(
            f.name
            for f in fields(self.record_type)
            if f.name != "id" and f.default is MISSING
        )


_RECORD_TYPES: dict[OptionKind, type] = {
    OptionKind.PLATE_SELECTIONS: PlateSelection,
    OptionKind.PLATE_TYPES: PlateType,
    OptionKind.BADGES: Badge,
    OptionKind.BADGE_COLORS: BadgeColor,
    OptionKind.TEXT_STYLES: TextStyle,
    OptionKind.BORDER_COLORS: BorderColor,
    OptionKind.PLATE_SURROUNDS: PlateSurround,
}

_DISCRIMINATORS: dict[OptionKind, str] = {
    OptionKind.PLATE_SELECTIONS: "value",
    OptionKind.PLATE_TYPES: "style",
    OptionKind.BADGES: "code",
    OptionKind.BADGE_COLORS: "hex_code",
    OptionKind.TEXT_STYLES: "style",
    OptionKind.BORDER_COLORS: "hex_code",
    OptionKind.PLATE_SURROUNDS: "style",
}

PLATE_SELECTION_VALUES = frozenset({"front", "rear", "both"})
NO_BADGE = "none"


@dataclass(frozen=True)
class CatalogSnapshot:
    """Read-only view of every option collection at one point in time."""

    options: Mapping[OptionKind, tuple[Option, ...]]

    def find(self, kind: OptionKind, discriminator: str) -> Option | None:
        attr = kind.discriminator
        for opt in self.options.get(kind, ()):
            if _matches(getattr(opt, attr), discriminator, attr):
                return opt
        return None


def _matches(stored: str, wanted: str, attr: str) -> bool:
    if attr == "hex_code":
        return stored.upper() == wanted.upper()
    return stored == wanted
