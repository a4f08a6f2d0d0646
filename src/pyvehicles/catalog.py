"""Fixed-size in-memory price catalog.

The catalog is a stand-in for a real pricing service. It manufactures
one price per vehicle id in ``1 .. size - 1`` when constructed and
never changes afterwards, so concurrent readers need no locking.

Lifecycle
---------
* Construction populates the full mapping before the instance is
  returned; a half-built catalog is never observable.
* After construction the mapping is exposed read-only.
* :func:`default_catalog` builds one process-wide instance on first use
  and returns that same instance for the lifetime of the process.
"""

from __future__ import annotations

import logging
import random
import threading
from collections.abc import Mapping
from decimal import Decimal
from types import MappingProxyType

from pyvehicles._constants import (
    CATALOG_SIZE,
    DEFAULT_CURRENCY,
    PRICE_FACTOR_MAX,
    PRICE_FACTOR_MIN,
    PRICE_MULTIPLIER,
)
from pyvehicles.exceptions import PriceCatalogError, PriceNotFoundError
from pyvehicles.models.price import Price, round_price

_logger = logging.getLogger(__name__)


def random_amount(rng: random.Random) -> Decimal:
    """Draw a price amount: ``uniform[1, 5) * 5000`` rounded half-up to cents."""
    factor = PRICE_FACTOR_MIN + rng.random() * (PRICE_FACTOR_MAX - PRICE_FACTOR_MIN)
    return round_price(Decimal(factor) * PRICE_MULTIPLIER)


class PriceCatalog:
    """Immutable mapping of vehicle id to :class:`Price`.

    Parameters
    ----------
    size : int
        Exclusive upper bound of the id range; ids ``1 .. size - 1`` are priced.
    currency : str
        Currency code stamped on every price.
    rng : random.Random or None
        Random source. Defaults to a fresh, non-deterministically seeded
        generator per catalog; inject a seeded one for reproducible tests.
    """

    def __init__(
        self,
        *,
        size: int = CATALOG_SIZE,
        currency: str = DEFAULT_CURRENCY,
        rng: random.Random | None = None,
    ) -> None:
        if size < 2:
            raise PriceCatalogError(f"catalog size must be at least 2, got {size}")
        source = rng if rng is not None else random.Random()

        prices: dict[int, Price] = {}
        for vehicle_id in range(1, size):
            price = Price(currency=currency, amount=random_amount(source), vehicle_id=vehicle_id)
            if price.vehicle_id in prices:
                raise PriceCatalogError(f"Duplicate vehicle id {price.vehicle_id} in price catalog")
            prices[vehicle_id] = price

        self._size = size
        self._prices: Mapping[int, Price] = MappingProxyType(prices)
        _logger.debug("Price catalog built: %d entries, currency=%s", len(prices), currency)

    @property
    def size(self) -> int:
        return self._size

    @property
    def prices(self) -> Mapping[int, Price]:
        """Read-only view of the full mapping."""
        return self._prices

    def vehicle_ids(self) -> list[int]:
        return sorted(self._prices)

    def get_price(self, vehicle_id: int) -> Price:
        """Return the price for *vehicle_id*.

        Raises
        ------
        PriceNotFoundError
            The id is outside the catalog range, or not an int.
        """
        price = None if isinstance(vehicle_id, bool) else self._prices.get(vehicle_id)
        if price is None:
            raise PriceNotFoundError(vehicle_id)
        return price

    def __len__(self) -> int:
        return len(self._prices)

    def __contains__(self, vehicle_id: object) -> bool:
        return not isinstance(vehicle_id, bool) and vehicle_id in self._prices


_default_catalog: PriceCatalog | None = None
_default_lock = threading.Lock()


def default_catalog() -> PriceCatalog:
    """Return the process-wide catalog, building it on first call."""
    global _default_catalog
    if _default_catalog is None:
        with _default_lock:
            if _default_catalog is None:
                _default_catalog = PriceCatalog()
    return _default_catalog
