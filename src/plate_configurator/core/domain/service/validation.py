from __future__ import annotations

import re
from typing import Any, Mapping

from returns.result import Failure, Result, Success

from plate_configurator.core.domain.model.catalog import (
    NO_BADGE,
    PLATE_SELECTION_VALUES,
    CatalogSnapshot,
    OptionKind,
)
from plate_configurator.core.domain.model.errors import ConfiguratorError, ValidationError
from plate_configurator.core.domain.model.order import PlateCustomization
from plate_configurator.core.domain.model.price import MAX_PRICE, parse_exact_price

HEX_COLOR = re.compile(r"#[0-9A-Fa-f]{6}")

_TEXT_FIELDS = ("name", "value", "code", "style")


def validate_new_option(
    kind: OptionKind, fields: Mapping[str, Any]
) -> Result[dict[str, Any], ConfiguratorError]:
    unknown = _unknown_fields(kind, fields)
    if unknown:
        return Failure(ValidationError(f"unknown {kind.label} field: {unknown}"))
    for name in kind.required_fields:
        if fields.get(name) is None:
            return Failure(ValidationError(f"{name} is required"))
    return _normalize(kind, fields)


def validate_option_changes(
    kind: OptionKind, changes: Mapping[str, Any]
) -> Result[dict[str, Any], ConfiguratorError]:
    unknown = _unknown_fields(kind, changes)
    if unknown:
        return Failure(ValidationError(f"unknown {kind.label} field: {unknown}"))
    if not changes:
        return Failure(ValidationError("at least one field must be provided"))
    return _normalize(kind, changes)


def validate_references(
    customization: PlateCustomization, catalog: CatalogSnapshot
) -> Result[PlateCustomization, ConfiguratorError]:
    """Every selection must name an option that exists in the live catalog."""
    if not customization.registration_number.strip():
        return Failure(ValidationError("registrationNumber is required"))

    selections = (
        (OptionKind.PLATE_SELECTIONS, customization.plate_selection),
        (OptionKind.PLATE_TYPES, customization.plate_type),
        (OptionKind.BADGES, customization.badge),
        (OptionKind.BADGE_COLORS, customization.badge_color),
        (OptionKind.TEXT_STYLES, customization.text_style),
        (OptionKind.BORDER_COLORS, customization.border_color),
        (OptionKind.PLATE_SURROUNDS, customization.plate_surround),
    )
    for kind, selected in selections:
        if kind is OptionKind.BADGES and selected == NO_BADGE:
            continue
        if catalog.find(kind, selected) is None:
            return Failure(ValidationError(f"unknown {kind.label}: {selected!r}"))
    return Success(customization)


def _unknown_fields(kind: OptionKind, fields: Mapping[str, Any]) -> str | None:
    extra = sorted(set(fields) - set(kind.field_names))
    return ", ".join(extra) if extra else None


def _normalize(
    kind: OptionKind, fields: Mapping[str, Any]
) -> Result[dict[str, Any], ConfiguratorError]:
    out = dict(fields)

    for name in _TEXT_FIELDS:
        if name not in out:
            continue
        v = out[name]
        if not isinstance(v, str) or not v.strip():
            return Failure(ValidationError(f"{name} must be a non-empty string"))
        out[name] = v.strip()

    if "hex_code" in out:
        v = out["hex_code"]
        if not isinstance(v, str) or not HEX_COLOR.fullmatch(v.strip()):
            return Failure(ValidationError("hex_code must look like #RRGGBB"))
        out["hex_code"] = v.strip().upper()

    if kind is OptionKind.PLATE_SELECTIONS and "value" in out:
        if out["value"] not in PLATE_SELECTION_VALUES:
            allowed = ", ".join(sorted(PLATE_SELECTION_VALUES))
            return Failure(ValidationError(f"value must be one of: {allowed}"))

    if "price" in out:
        price = parse_exact_price(out["price"])
        if price is None:
            return Failure(
                ValidationError(
                    f"price must be between 0 and {MAX_PRICE} with at most two decimals"
                )
            )
        out["price"] = price

    if "image_url" in out and out["image_url"] is not None:
        if not isinstance(out["image_url"], str):
            return Failure(ValidationError("image_url must be a string"))

    return Success(out)

