from __future__ import annotations

import logging.config
import os
from dataclasses import dataclass
from typing import Mapping

ENV_PREFIX = "PLATE_CONFIGURATOR_"

_TRUTHY = {"1", "true", "yes", "on"}


@dataclass(frozen=True)
class Settings:
    host: str = "0.0.0.0"
    port: int = 8000
    log_level: str = "INFO"
    admin_token: str | None = None
    seed_catalog: bool = True
    currency: str = "GBP"

    @staticmethod
    def from_env(environ: Mapping[str, str] | None = None) -> "Settings":
        env = os.environ if environ is None else environ

        def get(name: str) -> str | None:
            value = env.get(ENV_PREFIX + name)
            return value.strip() if value is not None and value.strip() else None

        defaults = Settings()
        port = get("PORT")
        seed = get("SEED_CATALOG")
        return Settings(
            host=get("HOST") or defaults.host,
            port=int(port) if port else defaults.port,
            log_level=(get("LOG_LEVEL") or defaults.log_level).upper(),
            admin_token=get("ADMIN_TOKEN"),
            seed_catalog=seed.lower() in _TRUTHY if seed else defaults.seed_catalog,
            currency=(get("CURRENCY") or defaults.currency).upper(),
        )


def configure_logging(level: str = "INFO") -> None:
    logging.config.dictConfig(
        {
            "version": 1,
            "disable_existing_loggers": False,
            "formatters": {
                "default": {
                    "format": "%(asctime)s %(levelname)s %(name)s: %(message)s",
                },
            },
            "handlers": {
                "console": {
                    "class": "logging.StreamHandler",
                    "formatter": "default",
                },
            },
            "loggers": {
                "plate_configurator": {
                    "handlers": ["console"],
                    "level": level,
                    "propagate": False,
                },
            },
        }
    )
