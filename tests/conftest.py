"""
Shared pytest fixtures for device-catalog tests.
"""
from decimal import Decimal

import pytest

from core.domain.models import Device, RadioReceiver, Television


@pytest.fixture(autouse=True)
def isolated_settings(monkeypatch, tmp_path):
    """Keep settings away from any real .env files and disable the banner."""
    monkeypatch.chdir(tmp_path)
    for name in ("LANGUAGE", "SEED_DEFAULTS", "LOG_LEVEL", "LOG_FILE"):
        monkeypatch.delenv(f"DEVICE_CATALOG_{name}", raising=False)
    monkeypatch.setenv("DEVICE_CATALOG_SHOW_BANNER", "false")
    yield tmp_path


@pytest.fixture
def device():
    return Device(brand="Samsung", model="Galaxy", color="Blue", price=Decimal(50000))


@pytest.fixture
def tv():
    return Television(
        brand="Sony",
        model="Bravia",
        color="Black",
        price=Decimal(120000),
        screen_size_inches=55,
        resolution="4K",
        is_smart=True,
        panel_type="OLED",
    )


@pytest.fixture
def radio():
    return RadioReceiver(
        brand="Alpine",
        model="CDE-172BT",
        color="Black",
        price=Decimal(12000),
        band="AM/FM",
        min_frequency_mhz=87.5,
        max_frequency_mhz=108.0,
        has_rds=True,
    )
