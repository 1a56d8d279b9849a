from __future__ import annotations

from decimal import Decimal

from returns.result import Result

from plate_configurator.core.domain.model.catalog import (
    NO_BADGE,
    CatalogSnapshot,
    OptionKind,
)
from plate_configurator.core.domain.model.errors import ConfiguratorError
from plate_configurator.core.domain.model.order import OrderItem, PlateCustomization
from plate_configurator.core.domain.model.price import ZERO, sum_prices
from plate_configurator.core.ports.inbound.quote import Quote

# fixed line slots, so a re-priced customization yields the same item ids
PLATE_SELECTION_LINE = 1
PLATE_TYPE_LINE = 2
BADGE_LINE = 3
TEXT_STYLE_LINE = 4
SURROUND_LINE = 5


def price_customization(
    customization: PlateCustomization, catalog: CatalogSnapshot
) -> Result[Quote, ConfiguratorError]:
    """
    Billable lines and total for a customization.

    Selections missing from the catalog count as zero and produce no line.
    Badge and border colors are cosmetic and never priced. A total that
    cannot be represented is a ValidationError.
    """
    selection = catalog.find(OptionKind.PLATE_SELECTIONS, customization.plate_selection)
    plate_type = catalog.find(OptionKind.PLATE_TYPES, customization.plate_type)
    badge = (
        None
        if customization.badge == NO_BADGE
        else catalog.find(OptionKind.BADGES, customization.badge)
    )
    text_style = catalog.find(OptionKind.TEXT_STYLES, customization.text_style)
    surround = catalog.find(OptionKind.PLATE_SURROUNDS, customization.plate_surround)

    items: list[OrderItem] = []
    if selection is not None:
        items.append(OrderItem(PLATE_SELECTION_LINE, selection.name, selection.price))
    if plate_type is not None and plate_type.price > 0:
        items.append(OrderItem(PLATE_TYPE_LINE, plate_type.name, plate_type.price))
    if badge is not None and badge.price > 0:
        items.append(OrderItem(BADGE_LINE, _suffixed(badge.name, "Badge"), badge.price))
    if text_style is not None and text_style.price > 0:
        items.append(
            OrderItem(
                TEXT_STYLE_LINE, _suffixed(text_style.name, "Text Style"), text_style.price
            )
        )
    if surround is not None and surround.price > 0:
        items.append(
            OrderItem(SURROUND_LINE, _suffixed(surround.name, "Surround"), surround.price)
        )

    return sum_prices(
        _price_of(opt) for opt in (selection, plate_type, badge, text_style, surround)
    ).map(lambda total: Quote(items=tuple(items), total=total))


def _price_of(option) -> Decimal:
    return ZERO if option is None else option.price


def _suffixed(name: str, suffix: str) -> str:
    # "GB Badge" stays "GB Badge", "Premium" becomes "Premium Surround"
    if name.lower().endswith(suffix.lower()):
        return name
    return f"{name} {suffix}"
