from __future__ import annotations

import random
from decimal import Decimal

import pytest

from pyvehicles.catalog import PriceCatalog, default_catalog, random_amount
from pyvehicles.exceptions import PriceCatalogError, PriceNotFoundError


def test_every_id_in_range_has_a_usd_price_within_bounds() -> None:
    catalog = PriceCatalog()

    assert len(catalog) == 19
    assert catalog.vehicle_ids() == list(range(1, 20))
    for vehicle_id in range(1, 20):
        price = catalog.get_price(vehicle_id)
        assert price.vehicle_id == vehicle_id
        assert price.currency == "USD"
        assert Decimal("5000") <= price.amount <= Decimal("25000")
        assert price.amount.as_tuple().exponent == -2


@pytest.mark.parametrize("vehicle_id", [0, 20, 21, 1000, -1])
def test_ids_outside_range_raise_price_not_found(vehicle_id: int) -> None:
    catalog = PriceCatalog()

    with pytest.raises(PriceNotFoundError) as exc_info:
        catalog.get_price(vehicle_id)

    assert exc_info.value.vehicle_id == vehicle_id
    assert vehicle_id not in catalog


def test_repeated_lookups_return_equal_prices() -> None:
    catalog = PriceCatalog()

    first = catalog.get_price(7)
    second = catalog.get_price(7)

    assert first == second
    assert first.amount == second.amount


def test_mapping_is_read_only() -> None:
    catalog = PriceCatalog()

    with pytest.raises(TypeError):
        catalog.prices[1] = catalog.get_price(2)  # type: ignore[index]


def test_seeded_catalogs_are_reproducible() -> None:
    first = PriceCatalog(rng=random.Random(42))
    second = PriceCatalog(rng=random.Random(42))

    assert dict(first.prices) == dict(second.prices)


def test_custom_size_and_currency() -> None:
    catalog = PriceCatalog(size=5, currency="eur")

    assert catalog.size == 5
    assert len(catalog) == 4
    assert catalog.vehicle_ids() == [1, 2, 3, 4]
    assert catalog.get_price(4).currency == "EUR"
    with pytest.raises(PriceNotFoundError):
        catalog.get_price(5)


@pytest.mark.parametrize("vehicle_id", [True, False])
def test_bool_ids_are_not_found(vehicle_id: bool) -> None:
    catalog = PriceCatalog()

    assert vehicle_id not in catalog
    with pytest.raises(PriceNotFoundError):
        catalog.get_price(vehicle_id)


def test_too_small_catalog_is_rejected() -> None:
    with pytest.raises(PriceCatalogError):
        PriceCatalog(size=1)


class _FixedRandom(random.Random):
    def __init__(self, value: float) -> None:
        super().__init__(0)
        self._value = value

    def random(self) -> float:
        return self._value


class TestRandomAmount:
    def test_lower_bound(self) -> None:
        assert random_amount(_FixedRandom(0.0)) == Decimal("5000.00")

    def test_half_up_rounding(self) -> None:
        # 1 + 0.25 * 4 = 2.0 exactly -> 10000.00
        assert random_amount(_FixedRandom(0.25)) == Decimal("10000.00")

    def test_upper_end_stays_below_limit(self) -> None:
        amount = random_amount(_FixedRandom(0.999999))
        assert amount < Decimal("25000")
        assert amount.as_tuple().exponent == -2


def test_default_catalog_is_built_once() -> None:
    assert default_catalog() is default_catalog()
