"""Runtime settings read from the environment."""

from __future__ import annotations

import math
import os
from dataclasses import dataclass

from customer_locator.geo import DUBLIN, Location, ValidationError
from customer_locator.units import Kilometers

DEFAULT_SOURCE = "data/customers.json"
DEFAULT_RADIUS_KM = 100.0
DEFAULT_HTTP_TIMEOUT = 15.0


@dataclass
class Settings:
    """Defaults for the CLI; every field can be overridden by an option."""

    source: str
    radius: Kilometers
    origin: Location
    http_timeout: float


def _float_env(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return float(raw)
    except ValueError as exc:
        raise ValueError(f"{name}={raw!r} is not a number") from exc


def load_settings() -> Settings:
    """Build Settings from CUSTOMER_LOCATOR_* environment variables."""
    radius_km = _float_env("CUSTOMER_LOCATOR_RADIUS_KM", DEFAULT_RADIUS_KM)
    try:
        radius = Kilometers(radius_km)
    except ValueError as exc:
        raise ValueError(f"CUSTOMER_LOCATOR_RADIUS_KM: {exc}") from exc

    origin_raw = os.getenv("CUSTOMER_LOCATOR_ORIGIN")
    origin = DUBLIN
    if origin_raw:
        try:
            origin = Location.parse(origin_raw)
        except ValidationError as exc:
            raise ValueError(f"CUSTOMER_LOCATOR_ORIGIN: {exc}") from exc

    timeout = _float_env("CUSTOMER_LOCATOR_HTTP_TIMEOUT", DEFAULT_HTTP_TIMEOUT)
    if not math.isfinite(timeout) or timeout <= 0:
        raise ValueError(f"CUSTOMER_LOCATOR_HTTP_TIMEOUT must be a positive number, got {timeout}")

    return Settings(
        source=os.getenv("CUSTOMER_LOCATOR_SOURCE") or DEFAULT_SOURCE,
        radius=radius,
        origin=origin,
        http_timeout=timeout,
    )
