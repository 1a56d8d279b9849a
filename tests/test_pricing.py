from __future__ import annotations

from dataclasses import replace
from decimal import Decimal

from returns.result import Failure

from plate_configurator.core.domain.model.catalog import (
    CatalogSnapshot,
    OptionKind,
    PlateSelection,
    PlateSurround,
    TextStyle,
)
from plate_configurator.core.domain.model.errors import ValidationError
from plate_configurator.core.domain.model.order import OrderItem, PlateCustomization
from plate_configurator.core.domain.model.price import sum_prices
from plate_configurator.core.domain.service.pricing import price_customization
from plate_configurator.core.ports.inbound.quote import Quote


def priced(customization, catalog) -> Quote:
    return price_customization(customization, catalog).unwrap()


def test_seed_catalog_standard_plate_with_gb_badge(seed_catalog, customization):
    quote = priced(customization, seed_catalog)

    assert quote.total == Decimal("24.98")
    assert quote.items == (
        OrderItem(id=1, name="Front Only", price=Decimal("19.99")),
        OrderItem(id=3, name="GB Badge", price=Decimal("4.99")),
    )


def test_premium_surround_adds_its_price_and_a_line(seed_catalog, customization):
    before = priced(customization, seed_catalog)
    after = priced(
        replace(customization, plate_surround="premium"), seed_catalog
    )

    assert after.total - before.total == Decimal("7.99")
    assert len(after.items) == len(before.items) + 1
    assert after.items[-1] == OrderItem(id=5, name="Premium Surround", price=Decimal("7.99"))


def test_no_badge_drops_badge_line_and_price(seed_catalog, customization):
    for color in ("#FFD700", "#0055AA", "#E63946"):
        quote = priced(
            replace(customization, badge="none", badge_color=color), seed_catalog
        )
        assert quote.total == Decimal("19.99")
        assert [i.name for i in quote.items] == ["Front Only"]


def test_priced_plate_type_and_text_style_are_listed(seed_catalog, customization):
    quote = priced(
        replace(customization, plate_type="show", text_style="3d", plate_selection="both"),
        seed_catalog,
    )

    assert [i.name for i in quote.items] == [
        "Both Plates",
        "Show Plate",
        "GB Badge",
        "3D Effect Text Style",
    ]
    assert quote.total == Decimal("34.99") + Decimal("7.99") + Decimal("4.99") + Decimal("7.99")


def test_colors_never_change_the_price(seed_catalog, customization):
    base = priced(customization, seed_catalog)
    recolored = priced(
        replace(customization, badge_color="#28A745", border_color="#CED4DA"), seed_catalog
    )
    assert recolored == base


def test_unknown_selections_count_as_zero(seed_catalog, customization):
    quote = priced(
        replace(customization, plate_selection="side", badge="xx", plate_surround="gold"),
        seed_catalog,
    )
    assert quote.total == Decimal("0.00")
    assert quote.items == ()


def test_empty_catalog_prices_nothing(customization):
    quote = priced(customization, CatalogSnapshot(options={}))
    assert quote.total == Decimal("0.00")
    assert quote.items == ()


def test_surround_name_gets_suffix_once():
    catalog = CatalogSnapshot(
        options={
            OptionKind.PLATE_SELECTIONS: (
                PlateSelection(id=1, value="rear", name="Rear Only", price=Decimal("19.99")),
            ),
            OptionKind.PLATE_SURROUNDS: (
                PlateSurround(id=1, style="carbon", name="Carbon Surround", price=Decimal("9.50")),
            ),
        }
    )
    quote = priced(
        PlateCustomization(
            registration_number="X1",
            plate_selection="rear",
            plate_type="standard",
            badge="none",
            badge_color="#FFD700",
            text_style="standard",
            border_color="#FFD700",
            plate_surround="carbon",
        ),
        catalog,
    )
    assert [i.name for i in quote.items] == ["Rear Only", "Carbon Surround"]
    assert quote.total == Decimal("29.49")


def test_sum_prices_adds_to_cents():
    assert sum_prices([Decimal("19.99"), Decimal("4.99")]).unwrap() == Decimal("24.98")
    assert sum_prices([]).unwrap() == Decimal("0.00")


def test_total_beyond_decimal_precision_is_a_validation_error(customization):
    huge = Decimal("9" * 26)
    catalog = CatalogSnapshot(
        options={
            OptionKind.PLATE_SELECTIONS: (
                PlateSelection(id=1, value="front", name="Front Only", price=huge),
            ),
            OptionKind.TEXT_STYLES: (
                TextStyle(id=1, style="standard", name="Standard", price=huge),
            ),
        }
    )

    result = price_customization(customization, catalog)

    assert isinstance(result, Failure)
    assert isinstance(result.failure(), ValidationError)
