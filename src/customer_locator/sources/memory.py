"""In-memory customer source for fixtures and embedding."""

from __future__ import annotations

from typing import Iterable

from customer_locator.models import CustomerCollection
from customer_locator.sources.base import CustomerSource, decode_records


class InMemorySource(CustomerSource):
    """Decode already-parsed JSON records (dicts) with the usual schema rules."""

    def __init__(self, records: Iterable[dict]):
        self.records = list(records)

    def load(self) -> CustomerCollection:
        return decode_records(enumerate(self.records, start=1), "<memory>")
