"""Customer records and the ordered collection passed between components."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Iterable, Iterator, Union

from customer_locator.geo import Location
from customer_locator.units import Kilometers

CustomerId = Union[int, str]


@dataclass(frozen=True)
class Customer:
    """A customer as loaded from a record source."""

    user_id: CustomerId
    name: str
    location: Location

    def distance_to(self, origin: Location) -> Kilometers:
        return self.location.distance_to(origin)

    def __str__(self) -> str:
        return (
            f'Customer("{self.name}":{self.user_id}) located at '
            f"({self.location.latitude}, {self.location.longitude})"
        )


class CustomerCollection:
    """Ordered, immutable group of customers.

    Iteration follows insertion order. Operations that narrow or reorder the
    collection return a new one and leave this one untouched.
    """

    __slots__ = ("_customers",)

    def __init__(self, customers: Iterable[Customer] = ()):
        self._customers: tuple[Customer, ...] = tuple(customers)

    def __iter__(self) -> Iterator[Customer]:
        return iter(self._customers)

    def __len__(self) -> int:
        return len(self._customers)

    def __contains__(self, customer: object) -> bool:
        return customer in self._customers

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CustomerCollection):
            return NotImplemented
        return self._customers == other._customers

    def __hash__(self) -> int:
        return hash(self._customers)

    def __repr__(self) -> str:
        return f"CustomerCollection({list(self._customers)!r})"

    def filter(self, predicate: Callable[[Customer], bool]) -> CustomerCollection:
        """Customers matching ``predicate``, in their original order."""
        return CustomerCollection(c for c in self._customers if predicate(c))

    def sorted_by_user_id(self) -> CustomerCollection:
        """Customers ordered by id; integer ids come before string ids."""
        return CustomerCollection(
            sorted(self._customers, key=lambda c: (isinstance(c.user_id, str), c.user_id))
        )
