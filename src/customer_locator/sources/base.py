"""Abstract customer source and the shared JSON record decoder."""

from __future__ import annotations

import abc
import re
from typing import Optional

from customer_locator.geo import Location, ValidationError
from customer_locator.models import Customer, CustomerCollection

# Plain decimal numbers only: no whitespace, exponents, nan or inf.
_DECIMAL_RE = re.compile(r"^[+-]?(?:\d+(?:\.\d*)?|\.\d+)$")


class SourceError(Exception):
    """Raised when a source cannot produce a complete customer collection."""

    def __init__(self, message: str, *, line: Optional[int] = None):
        self.line = line
        if line is not None:
            message = f"line {line}: {message}"
        super().__init__(message)


class CustomerSource(abc.ABC):
    """Anything that can produce a CustomerCollection."""

    @abc.abstractmethod
    def load(self) -> CustomerCollection:
        """Load every customer record.

        Returns:
            CustomerCollection in the source's natural record order.

        Raises:
            SourceError: if any record cannot be read, decoded or validated.
                Loading is all-or-nothing.
        """


def decode_customer(record) -> Customer:
    """Decode one JSON record into a Customer.

    Raises TypeError/ValueError for schema problems and ValidationError for
    out-of-range coordinates; callers wrap these in SourceError.
    """
    if not isinstance(record, dict):
        raise TypeError(f"expected a JSON object, got {type(record).__name__}")

    user_id = record["user_id"]
    if isinstance(user_id, bool) or not isinstance(user_id, (int, str)):
        raise TypeError(f"user_id must be an integer or string, got {user_id!r}")

    name = record["name"]
    if not isinstance(name, str):
        raise TypeError(f"name must be a string, got {name!r}")

    location = Location(
        _coerce_coordinate("latitude", record["latitude"]),
        _coerce_coordinate("longitude", record["longitude"]),
    )
    return Customer(user_id=user_id, name=name, location=location)


def _coerce_coordinate(field: str, val) -> float:
    if isinstance(val, bool):
        raise TypeError(f"{field} must be a number or numeric string, got {val!r}")
    if isinstance(val, (int, float)):
        return float(val)
    if isinstance(val, str):
        if not _DECIMAL_RE.match(val):
            raise ValueError(f"{field} {val!r} is not a decimal number")
        return float(val)
    raise TypeError(f"{field} must be a number or numeric string, got {val!r}")


def decode_records(records, origin: str) -> CustomerCollection:
    """Decode ``(line_number, record)`` pairs into a collection, failing fast."""
    return CustomerCollection(_decode_each(records, origin))


def _decode_each(records, origin: str):
    for line, record in records:
        try:
            yield decode_customer(record)
        except KeyError as exc:
            raise SourceError(f"{origin}: missing field {exc}", line=line) from exc
        except (TypeError, ValueError, ValidationError) as exc:
            raise SourceError(f"{origin}: {exc}", line=line) from exc
