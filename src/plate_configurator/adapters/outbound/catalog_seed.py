from __future__ import annotations

from decimal import Decimal
from typing import Any, Mapping, Sequence

from plate_configurator.core.domain.model.catalog import OptionKind
from plate_configurator.core.ports.inbound.catalog import CatalogUseCase

D = Decimal

DEFAULT_CATALOG: Mapping[OptionKind, Sequence[Mapping[str, Any]]] = {
    OptionKind.PLATE_SELECTIONS: (
        {"value": "front", "name": "Front Only", "price": D("19.99")},
        {"value": "rear", "name": "Rear Only", "price": D("19.99")},
        {"value": "both", "name": "Both Plates", "price": D("34.99")},
    ),
    OptionKind.BADGES: (
        {"code": "gb", "name": "GB Badge", "price": D("4.99"), "image_url": "/img/badges/gb_flag.svg"},
        {"code": "eu", "name": "EU Badge", "price": D("4.99"), "image_url": "/img/badges/eu_flag.svg"},
        {"code": "uk", "name": "UK Badge", "price": D("4.99"), "image_url": "/img/badges/uk_flag.svg"},
        {"code": "none", "name": "None", "price": D("0"), "image_url": ""},
    ),
    OptionKind.BADGE_COLORS: (
        {"name": "Gold", "hex_code": "#FFD700"},
        {"name": "Blue", "hex_code": "#0055AA"},
        {"name": "Red", "hex_code": "#E63946"},
        {"name": "Black", "hex_code": "#212529"},
        {"name": "Green", "hex_code": "#28A745"},
    ),
    OptionKind.TEXT_STYLES: (
        {"style": "standard", "name": "Standard", "price": D("0")},
        {"style": "3d", "name": "3D Effect", "price": D("7.99")},
        {"style": "carbon", "name": "Carbon", "price": D("9.99")},
    ),
    OptionKind.BORDER_COLORS: (
        {"name": "Yellow", "hex_code": "#FFD700"},
        {"name": "Blue", "hex_code": "#0055AA"},
        {"name": "Black", "hex_code": "#212529"},
        {"name": "Chrome", "hex_code": "#CED4DA"},
    ),
    OptionKind.PLATE_SURROUNDS: (
        {"style": "none", "name": "None", "price": D("0")},
        {"style": "standard", "name": "Standard", "price": D("5.99")},
        {"style": "premium", "name": "Premium", "price": D("7.99")},
    ),
    OptionKind.PLATE_TYPES: (
        {"style": "standard", "name": "Standard Plate", "price": D("0")},
        {"style": "electric", "name": "Electric Car Plate", "price": D("4.99")},
        {"style": "show", "name": "Show Plate", "price": D("7.99")},
    ),
}


def seed_catalog(
    catalog: CatalogUseCase,
    rows: Mapping[OptionKind, Sequence[Mapping[str, Any]]] = DEFAULT_CATALOG,
) -> None:
    # a seed row that fails validation is a programming error: unwrap() raises
    for kind, options in rows.items():
        for fields in options:
            catalog.create_option(kind, fields).unwrap()
