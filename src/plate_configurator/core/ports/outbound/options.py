from __future__ import annotations

from typing import Any, Mapping, Protocol, Sequence

from returns.result import Result

from plate_configurator.core.domain.model.catalog import Option
from plate_configurator.core.domain.model.errors import ConfiguratorError


class OptionRepository(Protocol):
    """
    One collection of catalog options. Id assignment, the discriminator
    uniqueness check and the write happen as a single atomic step.
    """

    def list(self) -> Result[Sequence[Option], ConfiguratorError]: ...

    def get(self, option_id: int) -> Result[Option, ConfiguratorError]: ...

    def create(self, fields: Mapping[str, Any]) -> Result[Option, ConfiguratorError]: ...

    def update(
        self, option_id: int, changes: Mapping[str, Any]
    ) -> Result[Option, ConfiguratorError]:
        """Merge changes onto the stored record; the id never changes."""
        ...
