"""Price model."""

from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal

from pydantic import AliasChoices, Field, field_validator

from pyvehicles._constants import DEFAULT_CURRENCY, PRICE_QUANTUM
from pyvehicles.models._base import VehiclesBaseModel


def round_price(amount: Decimal) -> Decimal:
    """Round *amount* half-up to exactly two fractional digits."""
    return amount.quantize(PRICE_QUANTUM, rounding=ROUND_HALF_UP)


class Price(VehiclesBaseModel):
    """Market price for a single vehicle.

    Parses the pricing service payload
    ``{"currency": "USD", "price": 12345.67, "vehicleId": 1}``.
    ``amount`` is always positive and carries exactly two decimal places.
    """

    currency: str = DEFAULT_CURRENCY
    """ISO currency code."""
    amount: Decimal = Field(validation_alias=AliasChoices("amount", "price"))
    """Price amount, rounded half-up to cents."""
    vehicle_id: int | None = None
    """Id of the vehicle this price belongs to."""

    @field_validator("currency")
    @classmethod
    def _normalize_currency(cls, value: str) -> str:
        code = value.strip().upper()
        if not code:
            raise ValueError("currency must be non-empty")
        return code

    @field_validator("amount")
    @classmethod
    def _check_amount(cls, value: Decimal) -> Decimal:
        if not value.is_finite():
            raise ValueError("amount must be a finite number")
        rounded = round_price(value)
        if rounded <= 0:
            raise ValueError(f"amount must be positive, got {value}")
        return rounded

    def __str__(self) -> str:
        return f"{self.currency} {self.amount}"
