from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from plate_configurator.bootstrap import UseCases, build_app, build_usecases
from plate_configurator.config import Settings
from plate_configurator.core.domain.model.catalog import CatalogSnapshot
from plate_configurator.core.domain.model.order import PlateCustomization

ADMIN_TOKEN = "test-admin-token"


@pytest.fixture
def settings() -> Settings:
    return Settings(admin_token=ADMIN_TOKEN)


@pytest.fixture
def usecases(settings: Settings) -> UseCases:
    return build_usecases(settings)


@pytest.fixture
def seed_catalog(usecases: UseCases) -> CatalogSnapshot:
    return usecases.catalog.snapshot().unwrap()


@pytest.fixture
def client(settings: Settings) -> TestClient:
    return TestClient(build_app(settings))


@pytest.fixture
def admin_headers() -> dict[str, str]:
    return {"Authorization": f"Bearer {ADMIN_TOKEN}"}


@pytest.fixture
def customization() -> PlateCustomization:
    return PlateCustomization(
        registration_number="AB12 CDE",
        plate_selection="front",
        plate_type="standard",
        badge="gb",
        badge_color="#FFD700",
        text_style="standard",
        border_color="#212529",
        plate_surround="none",
    )


@pytest.fixture
def customization_json() -> dict[str, str]:
    return {
        "registrationNumber": "AB12 CDE",
        "plateSelection": "front",
        "plateType": "standard",
        "badge": "gb",
        "badgeColor": "#FFD700",
        "textStyle": "standard",
        "borderColor": "#212529",
        "plateSurround": "none",
    }
