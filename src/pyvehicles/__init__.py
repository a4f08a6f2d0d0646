"""pyvehicles - vehicle records enriched with market price and location."""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("pyvehicles")
except PackageNotFoundError:
    __version__ = "0+local"
from pyvehicles.catalog import PriceCatalog, default_catalog
from pyvehicles.config import VehiclesConfig
from pyvehicles.exceptions import (
    CarNotFoundError,
    NotFoundError,
    PriceCatalogError,
    PriceNotFoundError,
    VehiclesConfigError,
    VehiclesError,
    VehiclesTransportError,
)
from pyvehicles.models import Condition, Details, Location, Manufacturer, Price, Vehicle
from pyvehicles.runtime import VehiclesRuntime
from pyvehicles.service import UPDATABLE_FIELDS, VehicleAggregationService
from pyvehicles.sources import (
    CatalogPriceSource,
    LocationResolver,
    PriceSource,
    RemoteLocationResolver,
    RemotePriceSource,
)
from pyvehicles.store import InMemoryVehicleStore, VehicleStore

__all__ = [
    "__version__",
    "CarNotFoundError",
    "CatalogPriceSource",
    "Condition",
    "Details",
    "InMemoryVehicleStore",
    "Location",
    "LocationResolver",
    "Manufacturer",
    "NotFoundError",
    "Price",
    "PriceCatalog",
    "PriceCatalogError",
    "PriceNotFoundError",
    "PriceSource",
    "RemoteLocationResolver",
    "RemotePriceSource",
    "UPDATABLE_FIELDS",
    "Vehicle",
    "VehicleAggregationService",
    "VehicleStore",
    "VehiclesConfig",
    "VehiclesConfigError",
    "VehiclesError",
    "VehiclesRuntime",
    "VehiclesTransportError",
    "default_catalog",
]
