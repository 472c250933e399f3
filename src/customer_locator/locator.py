"""Proximity queries over a buffered customer collection."""

from __future__ import annotations

from customer_locator.geo import Location
from customer_locator.models import CustomerCollection
from customer_locator.sources.base import CustomerSource
from customer_locator.units import Kilometers


class CustomerLocator:
    """Answers "which customers are within R of P" over loaded customers.

    The collection is loaded once and kept for the locator's lifetime;
    queries never touch the source again.
    """

    def __init__(self, customers: CustomerCollection):
        self._customers = customers

    @classmethod
    def from_source(cls, source: CustomerSource) -> CustomerLocator:
        """Load ``source`` once and buffer the result.

        Raises:
            SourceError: propagated unchanged from ``source.load()``.
        """
        return cls(source.load())

    @property
    def customers(self) -> CustomerCollection:
        return self._customers

    def __len__(self) -> int:
        return len(self._customers)

    def find_within(self, radius: Kilometers, origin: Location) -> CustomerCollection:
        """Customers at most ``radius`` from ``origin``, in load order.

        The boundary is inclusive.
        """
        if not isinstance(radius, Kilometers):
            raise TypeError(f"radius must be Kilometers, got {type(radius).__name__}")
        if not isinstance(origin, Location):
            raise TypeError(f"origin must be a Location, got {type(origin).__name__}")

        return self._customers.filter(lambda c: c.distance_to(origin) <= radius)
