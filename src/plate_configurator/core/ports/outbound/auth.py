from __future__ import annotations

from typing import Protocol

from returns.result import Result

from plate_configurator.core.domain.model.errors import ConfiguratorError


class AdminAuthenticator(Protocol):
    def authenticate(self, token: str | None) -> Result[None, ConfiguratorError]: ...
