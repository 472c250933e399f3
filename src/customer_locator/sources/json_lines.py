"""Sources for JSON-lines customer data (one JSON object per line)."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Iterable, Iterator, Optional, Union

import httpx

from customer_locator.models import CustomerCollection
from customer_locator.sources.base import CustomerSource, SourceError, decode_records

logger = logging.getLogger(__name__)


def iter_json_lines(lines: Iterable[str], origin: str) -> Iterator[tuple[int, object]]:
    """Yield ``(line_number, record)`` for each non-blank line.

    Line numbers are 1-based and count blank lines, so they match an editor.
    """
    for lineno, line in enumerate(lines, start=1):
        if not line.strip():
            continue
        try:
            yield lineno, json.loads(line)
        except (json.JSONDecodeError, RecursionError) as exc:
            raise SourceError(f"{origin}: malformed JSON ({exc})", line=lineno) from exc


class JsonLinesFileSource(CustomerSource):
    """Load customers from a local JSON-lines file.

    The file is streamed line by line; only the decoded customers are kept.
    """

    def __init__(self, path: Union[str, Path], encoding: str = "utf-8"):
        self.path = Path(path)
        self.encoding = encoding

    def load(self) -> CustomerCollection:
        origin = str(self.path)
        try:
            with self.path.open("r", encoding=self.encoding) as fh:
                customers = decode_records(iter_json_lines(fh, origin), origin)
        except OSError as exc:
            raise SourceError(f"cannot read {origin}: {exc}") from exc
        except UnicodeDecodeError as exc:
            raise SourceError(f"{origin}: not valid {self.encoding} text ({exc})") from exc

        logger.debug("Loaded %d customer(s) from %s", len(customers), origin)
        return customers

    def __repr__(self) -> str:
        return f"JsonLinesFileSource({str(self.path)!r})"


class JsonLinesHttpSource(CustomerSource):
    """Load customers from a JSON-lines document served over HTTP.

    A single GET is made per load; failures are not retried.
    """

    def __init__(
        self,
        url: str,
        *,
        timeout: float = 15.0,
        client: Optional[httpx.Client] = None,
    ):
        self.url = url
        self.timeout = timeout
        self._client = client

    def _fetch(self) -> str:
        if self._client is not None:
            resp = self._client.get(self.url, timeout=self.timeout)
            resp.raise_for_status()
            return resp.text

        with httpx.Client(timeout=self.timeout) as client:
            resp = client.get(self.url)
            resp.raise_for_status()
            return resp.text

    def load(self) -> CustomerCollection:
        try:
            body = self._fetch()
        except (httpx.HTTPStatusError, httpx.RequestError) as exc:
            raise SourceError(f"cannot fetch {self.url}: {exc}") from exc

        customers = decode_records(iter_json_lines(body.splitlines(), self.url), self.url)
        logger.debug("Loaded %d customer(s) from %s", len(customers), self.url)
        return customers

    def __repr__(self) -> str:
        return f"JsonLinesHttpSource({self.url!r})"
