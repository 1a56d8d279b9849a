from __future__ import annotations

from typing import Any, Mapping, Protocol, Sequence

from returns.result import Result

from plate_configurator.core.domain.model.catalog import (
    CatalogSnapshot,
    Option,
    OptionKind,
)
from plate_configurator.core.domain.model.errors import ConfiguratorError


class CatalogUseCase(Protocol):
    def list_options(
        self, kind: OptionKind
    ) -> Result[Sequence[Option], ConfiguratorError]: ...

    def create_option(
        self, kind: OptionKind, fields: Mapping[str, Any]
    ) -> Result[Option, ConfiguratorError]: ...

    def update_option(
        self, kind: OptionKind, option_id: int, changes: Mapping[str, Any]
    ) -> Result[Option, ConfiguratorError]: ...

    def snapshot(self) -> Result[CatalogSnapshot, ConfiguratorError]: ...
