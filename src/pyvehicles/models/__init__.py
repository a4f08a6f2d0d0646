"""Data models for vehicle records, prices and locations."""

from pyvehicles.models._base import Timestamp, VehiclesBaseModel, parse_timestamp
from pyvehicles.models.price import Price, round_price
from pyvehicles.models.vehicle import Condition, Details, Location, Manufacturer, Vehicle

__all__ = [
    "Condition",
    "Details",
    "Location",
    "Manufacturer",
    "Price",
    "Timestamp",
    "Vehicle",
    "VehiclesBaseModel",
    "parse_timestamp",
    "round_price",
]
