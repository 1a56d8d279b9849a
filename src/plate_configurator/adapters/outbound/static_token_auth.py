from __future__ import annotations

import hmac
import logging
from dataclasses import dataclass

from returns.result import Failure, Result, Success

from plate_configurator.core.domain.model.errors import ConfiguratorError, Unauthorized
from plate_configurator.core.ports.outbound.auth import AdminAuthenticator

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class StaticTokenAuthenticator(AdminAuthenticator):
    """Compares the presented bearer token with one configured secret.

    With no secret configured every admin request is refused.
    """

    expected_token: str | None = None

    def authenticate(self, token: str | None) -> Result[None, ConfiguratorError]:
        if not self.expected_token:
            logger.warning("admin request refused: no admin token configured")
            return Failure(Unauthorized(message="admin access is not configured"))
        if not token or not hmac.compare_digest(
            token.encode("utf-8"), self.expected_token.encode("utf-8")
        ):
            logger.warning("admin request refused: bad or missing token")
            return Failure(Unauthorized(message="invalid admin credentials"))
        return Success(None)
