"""Runtime configuration for pyvehicles."""

from __future__ import annotations

import dataclasses
import os
from typing import Any

from pyvehicles._constants import CATALOG_SIZE, DEFAULT_CURRENCY, DEFAULT_MAPS_URL
from pyvehicles.exceptions import VehiclesConfigError


def _env_bool(value: str | None, default: bool) -> bool:
    if value is None:
        return default
    normalized = value.strip().lower()
    if normalized in {"1", "true", "yes", "y", "on"}:
        return True
    if normalized in {"0", "false", "no", "n", "off"}:
        return False
    return default


def _env_number(env_key: str, value: str, kind: type[int] | type[float]) -> int | float:
    try:
        return kind(value)
    except ValueError as exc:
        raise VehiclesConfigError(f"{env_key} must be a {kind.__name__}, got {value!r}") from exc


@dataclasses.dataclass(frozen=True)
class VehiclesConfig:
    """Runtime configuration.

    Parameters
    ----------
    pricing_base_url : str or None
        Base URL of a remote pricing service. When ``None`` prices are
        served by the in-process :class:`~pyvehicles.catalog.PriceCatalog`.
    maps_base_url : str
        Base URL of the maps (reverse geocoding) service.
    catalog_size : int
        Exclusive upper bound of the in-process catalog's id range.
    currency : str
        Currency code for catalog prices.
    request_timeout : float
        Total timeout in seconds for each HTTP request.
    concurrent_lookups : bool
        Run the price and location lookups of ``find_by_id`` concurrently.
    api_trace_enabled : bool
        Debug-log truncated response payloads in the transport.
    """

    pricing_base_url: str | None = None
    maps_base_url: str = DEFAULT_MAPS_URL
    catalog_size: int = CATALOG_SIZE
    currency: str = DEFAULT_CURRENCY
    request_timeout: float = 10.0
    concurrent_lookups: bool = False
    api_trace_enabled: bool = False

    def __post_init__(self) -> None:
        if self.catalog_size < 2:
            raise VehiclesConfigError(f"catalog_size must be at least 2, got {self.catalog_size}")
        if self.request_timeout <= 0:
            raise VehiclesConfigError(f"request_timeout must be positive, got {self.request_timeout}")
        if not self.maps_base_url:
            raise VehiclesConfigError("maps_base_url must be set")

    @classmethod
    def from_env(cls, **overrides: Any) -> VehiclesConfig:
        """Create configuration from ``VEHICLES_*`` environment variables.

        Explicit keyword arguments override environment values.
        """
        env = os.environ
        config_kwargs: dict[str, Any] = {}

        _ENV_URL_MAP = {
            "VEHICLES_PRICING_URL": "pricing_base_url",
            "VEHICLES_MAPS_URL": "maps_base_url",
        }
        for env_key, field_name in _ENV_URL_MAP.items():
            val = env.get(env_key)
            if val is not None and val.strip():
                config_kwargs[field_name] = val.strip().rstrip("/")

        currency_env = env.get("VEHICLES_CURRENCY")
        if currency_env is not None and currency_env.strip():
            config_kwargs["currency"] = currency_env.strip()

        size_env = env.get("VEHICLES_CATALOG_SIZE")
        if size_env is not None and "catalog_size" not in overrides:
            config_kwargs["catalog_size"] = _env_number("VEHICLES_CATALOG_SIZE", size_env, int)

        timeout_env = env.get("VEHICLES_REQUEST_TIMEOUT")
        if timeout_env is not None and "request_timeout" not in overrides:
            config_kwargs["request_timeout"] = _env_number("VEHICLES_REQUEST_TIMEOUT", timeout_env, float)

        if "concurrent_lookups" not in overrides:
            config_kwargs["concurrent_lookups"] = _env_bool(env.get("VEHICLES_CONCURRENT_LOOKUPS"), False)

        if "api_trace_enabled" not in overrides:
            config_kwargs["api_trace_enabled"] = _env_bool(env.get("VEHICLES_API_TRACE_ENABLED"), False)

        config_kwargs.update(overrides)

        return cls(**config_kwargs)
