from __future__ import annotations

from plate_configurator.bootstrap import build_app
from plate_configurator.config import Settings, configure_logging

settings = Settings.from_env()
configure_logging(settings.log_level)
app = build_app(settings)
