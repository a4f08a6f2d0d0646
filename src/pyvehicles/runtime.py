"""Dependency wiring for the aggregation service."""

from __future__ import annotations

import logging
from typing import Any

import aiohttp

from pyvehicles._constants import CATALOG_SIZE, DEFAULT_CURRENCY
from pyvehicles._transport import HttpTransport
from pyvehicles.catalog import PriceCatalog, default_catalog
from pyvehicles.config import VehiclesConfig
from pyvehicles.exceptions import VehiclesError
from pyvehicles.service import VehicleAggregationService
from pyvehicles.sources import (
    CatalogPriceSource,
    LocationResolver,
    PriceSource,
    RemoteLocationResolver,
    RemotePriceSource,
)
from pyvehicles.store import InMemoryVehicleStore, VehicleStore

_logger = logging.getLogger(__name__)


class VehiclesRuntime:
    """Owns the HTTP session and builds a ready :class:`VehicleAggregationService`.

    Usage::

        async with VehiclesRuntime(VehiclesConfig.from_env()) as runtime:
            vehicles = await runtime.service.list()

    Any collaborator passed explicitly is used as-is; the rest are built
    from *config*. Prices come from the remote pricing service when
    ``config.pricing_base_url`` is set, otherwise from the in-process
    catalog.
    """

    def __init__(
        self,
        config: VehiclesConfig | None = None,
        *,
        session: aiohttp.ClientSession | None = None,
        store: VehicleStore | None = None,
        price_source: PriceSource | None = None,
        location_resolver: LocationResolver | None = None,
    ) -> None:
        self._config = config if config is not None else VehiclesConfig()
        self._external_session = session is not None
        self._http_session = session
        self._store: VehicleStore = store if store is not None else InMemoryVehicleStore()
        self._price_source = price_source
        self._location_resolver = location_resolver
        self._service: VehicleAggregationService | None = None

    # ------------------------------------------------------------------
    # Context manager lifecycle
    # ------------------------------------------------------------------

    async def __aenter__(self) -> VehiclesRuntime:
        if self._http_session is None:
            self._http_session = aiohttp.ClientSession()

        price_source = self._price_source or self._build_price_source(self._http_session)
        location_resolver = self._location_resolver or RemoteLocationResolver(
            self._transport(self._config.maps_base_url, self._http_session)
        )
        self._service = VehicleAggregationService(
            self._store,
            price_source,
            location_resolver,
            concurrent_lookups=self._config.concurrent_lookups,
        )
        _logger.debug(
            "Runtime ready: price_source=%s location_resolver=%s",
            type(price_source).__name__,
            type(location_resolver).__name__,
        )
        return self

    async def __aexit__(self, *exc: Any) -> None:
        if not self._external_session and self._http_session is not None:
            await self._http_session.close()
            self._http_session = None
        self._service = None

    # ------------------------------------------------------------------
    # Accessors
    # ------------------------------------------------------------------

    @property
    def config(self) -> VehiclesConfig:
        return self._config

    @property
    def store(self) -> VehicleStore:
        return self._store

    @property
    def service(self) -> VehicleAggregationService:
        if self._service is None:
            raise VehiclesError("Runtime not started. Use 'async with VehiclesRuntime(...) as runtime:'")
        return self._service

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    def _transport(self, base_url: str, session: aiohttp.ClientSession) -> HttpTransport:
        return HttpTransport(
            base_url,
            session,
            timeout=self._config.request_timeout,
            trace=self._config.api_trace_enabled,
        )

    def _build_price_source(self, session: aiohttp.ClientSession) -> PriceSource:
        if self._config.pricing_base_url:
            return RemotePriceSource(self._transport(self._config.pricing_base_url, session))
        if self._config.catalog_size == CATALOG_SIZE and self._config.currency == DEFAULT_CURRENCY:
            return CatalogPriceSource(default_catalog())
        return CatalogPriceSource(PriceCatalog(size=self._config.catalog_size, currency=self._config.currency))
