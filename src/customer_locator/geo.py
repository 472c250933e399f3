"""Geographic points and great-circle distance."""

from __future__ import annotations

import math
from dataclasses import dataclass

from customer_locator.units import Kilometers

# Mean Earth radius. Results shift by a few meters per 100 km if this changes.
EARTH_RADIUS_KM = 6371.0


class ValidationError(Exception):
    """Raised when a coordinate fails validation."""

    def __init__(self, errors: list[str]):
        self.errors = errors
        super().__init__(f"Validation failed: {'; '.join(errors)}")


def haversine_km(lat1: float, lon1: float, lat2: float, lon2: float) -> float:
    """Great-circle distance between two points on Earth in kilometers.

    Uses the Haversine formula. Inputs are WGS84 decimal degrees.
    """
    rlat1, rlat2 = math.radians(lat1), math.radians(lat2)

    dlat = math.radians(lat2 - lat1)
    dlon = math.radians(lon2 - lon1)

    a = math.sin(dlat / 2) ** 2 + math.cos(rlat1) * math.cos(rlat2) * math.sin(dlon / 2) ** 2
    a = min(1.0, max(0.0, a))
    c = 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))

    return EARTH_RADIUS_KM * c


def _coordinate_errors(latitude, longitude) -> list[str]:
    errors: list[str] = []

    for name, value, bound in (("latitude", latitude, 90), ("longitude", longitude, 180)):
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            errors.append(f"{name} {value!r} is not a number")
        elif not -bound <= value <= bound:
            errors.append(f"{name} {value} out of range [-{bound}, {bound}]")

    return errors


@dataclass(frozen=True)
class Location:
    """Immutable point on the Earth's surface, in decimal degrees."""

    latitude: float
    longitude: float

    def __post_init__(self):
        errors = _coordinate_errors(self.latitude, self.longitude)
        if errors:
            raise ValidationError(errors)

    def distance_to(self, other: Location) -> Kilometers:
        """Great-circle distance from this point to ``other``."""
        return Kilometers(
            haversine_km(self.latitude, self.longitude, other.latitude, other.longitude)
        )

    @classmethod
    def parse(cls, text: str) -> Location:
        """Build a Location from a ``"latitude,longitude"`` string."""
        parts = [p.strip() for p in text.split(",")]
        if len(parts) != 2 or not all(parts):
            raise ValidationError([f"expected 'latitude,longitude', got {text!r}"])

        try:
            latitude, longitude = float(parts[0]), float(parts[1])
        except ValueError as exc:
            raise ValidationError([f"cannot parse location {text!r}: {exc}"]) from exc

        return cls(latitude, longitude)

    def __str__(self) -> str:
        return f"Location({self.latitude}, {self.longitude})"


# Default query origin.
DUBLIN = Location(53.339428, -6.257664)
