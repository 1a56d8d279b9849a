from __future__ import annotations

from plate_configurator.bootstrap import build_usecases
from plate_configurator.config import Settings
from plate_configurator.core.domain.model.catalog import OptionKind


def test_defaults_when_environment_is_empty():
    assert Settings.from_env({}) == Settings()


def test_reads_prefixed_variables():
    settings = Settings.from_env(
        {
            "PLATE_CONFIGURATOR_HOST": "127.0.0.1",
            "PLATE_CONFIGURATOR_PORT": "9000",
            "PLATE_CONFIGURATOR_LOG_LEVEL": "debug",
            "PLATE_CONFIGURATOR_ADMIN_TOKEN": " s3cret ",
            "PLATE_CONFIGURATOR_SEED_CATALOG": "no",
            "PLATE_CONFIGURATOR_CURRENCY": "eur",
        }
    )
    assert settings == Settings(
        host="127.0.0.1",
        port=9000,
        log_level="DEBUG",
        admin_token="s3cret",
        seed_catalog=False,
        currency="EUR",
    )


def test_blank_admin_token_means_unset():
    assert Settings.from_env({"PLATE_CONFIGURATOR_ADMIN_TOKEN": "   "}).admin_token is None


def test_unseeded_catalog_starts_empty():
    usecases = build_usecases(Settings(seed_catalog=False))
    for kind in OptionKind:
        assert list(usecases.catalog.list_options(kind).unwrap()) == []
