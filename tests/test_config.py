from __future__ import annotations

import pytest

from pyvehicles.config import VehiclesConfig
from pyvehicles.exceptions import VehiclesConfigError

_ENV_KEYS = (
    "VEHICLES_PRICING_URL",
    "VEHICLES_MAPS_URL",
    "VEHICLES_CATALOG_SIZE",
    "VEHICLES_CURRENCY",
    "VEHICLES_REQUEST_TIMEOUT",
    "VEHICLES_CONCURRENT_LOOKUPS",
    "VEHICLES_API_TRACE_ENABLED",
)


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for key in _ENV_KEYS:
        monkeypatch.delenv(key, raising=False)


def test_defaults() -> None:
    config = VehiclesConfig.from_env()

    assert config == VehiclesConfig()
    assert config.pricing_base_url is None
    assert config.maps_base_url == "http://localhost:9191"
    assert config.catalog_size == 20
    assert config.currency == "USD"
    assert config.concurrent_lookups is False


def test_reads_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("VEHICLES_PRICING_URL", " http://pricing:8082/ ")
    monkeypatch.setenv("VEHICLES_MAPS_URL", "http://maps:9191/")
    monkeypatch.setenv("VEHICLES_CATALOG_SIZE", "50")
    monkeypatch.setenv("VEHICLES_CURRENCY", "EUR")
    monkeypatch.setenv("VEHICLES_REQUEST_TIMEOUT", "2.5")
    monkeypatch.setenv("VEHICLES_CONCURRENT_LOOKUPS", "yes")
    monkeypatch.setenv("VEHICLES_API_TRACE_ENABLED", "1")

    config = VehiclesConfig.from_env()

    assert config.pricing_base_url == "http://pricing:8082"
    assert config.maps_base_url == "http://maps:9191"
    assert config.catalog_size == 50
    assert config.currency == "EUR"
    assert config.request_timeout == 2.5
    assert config.concurrent_lookups is True
    assert config.api_trace_enabled is True


def test_currency_keeps_trailing_characters(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("VEHICLES_CURRENCY", " EUR/ ")
    monkeypatch.setenv("VEHICLES_MAPS_URL", "http://maps:9191//")

    config = VehiclesConfig.from_env()

    assert config.currency == "EUR/"
    assert config.maps_base_url == "http://maps:9191"


def test_overrides_win_over_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("VEHICLES_CATALOG_SIZE", "not-a-number")
    monkeypatch.setenv("VEHICLES_CONCURRENT_LOOKUPS", "true")

    config = VehiclesConfig.from_env(catalog_size=30, concurrent_lookups=False)

    assert config.catalog_size == 30
    assert config.concurrent_lookups is False


def test_unrecognised_bool_falls_back_to_default(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("VEHICLES_CONCURRENT_LOOKUPS", "maybe")

    assert VehiclesConfig.from_env().concurrent_lookups is False


@pytest.mark.parametrize(
    ("key", "value"),
    [("VEHICLES_CATALOG_SIZE", "twenty"), ("VEHICLES_REQUEST_TIMEOUT", "fast")],
)
def test_bad_numbers_rejected(monkeypatch: pytest.MonkeyPatch, key: str, value: str) -> None:
    monkeypatch.setenv(key, value)

    with pytest.raises(VehiclesConfigError, match=key):
        VehiclesConfig.from_env()


@pytest.mark.parametrize(
    "kwargs",
    [{"catalog_size": 1}, {"request_timeout": 0}, {"maps_base_url": ""}],
)
def test_invalid_values_rejected(kwargs: dict[str, object]) -> None:
    with pytest.raises(VehiclesConfigError):
        VehiclesConfig(**kwargs)  # type: ignore[arg-type]
