"""Find customers within a great-circle radius of a point."""

from customer_locator.geo import DUBLIN, Location, ValidationError
from customer_locator.locator import CustomerLocator
from customer_locator.models import Customer, CustomerCollection
from customer_locator.sources import CustomerSource, SourceError
from customer_locator.units import Kilometers

__all__ = [
    "Customer",
    "CustomerCollection",
    "CustomerLocator",
    "CustomerSource",
    "DUBLIN",
    "Kilometers",
    "Location",
    "SourceError",
    "ValidationError",
]
