"""HTTP fetch interface.

Mirrors the platform ``fetch`` contract: a request always resolves to a
`Response` once the server answered, whatever the status code. Only
network-level failures (DNS, refused connection, timeout) raise
`FetchError`.
"""

import abc
import json
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class Request:
    """An outgoing HTTP request."""

    url: str
    method: str = "GET"
    headers: Mapping[str, str] = field(default_factory=dict)
    body: bytes | None = None
    timeout: float | None = None

    @classmethod
    def build(cls, url: str, init: Mapping[str, Any] | None = None) -> "Request":
        """Build a request from a URL and an optional ``init`` mapping.

        ``init`` accepts ``method``, ``headers``, ``body`` (str or bytes) and
        ``timeout`` (seconds). Unknown keys raise `TypeError`.
        """
        options = dict(init or {})
        body = options.pop("body", None)
        if isinstance(body, str):
            body = body.encode("utf-8")
        method = str(options.pop("method", "GET")).upper()
        headers = dict(options.pop("headers", None) or {})
        timeout = options.pop("timeout", None)
        if options:
            raise TypeError(f"Unknown fetch options: {', '.join(sorted(options))}")
        return cls(url=url, method=method, headers=headers, body=body, timeout=timeout)


@dataclass(frozen=True)
class Response:
    """A received HTTP response."""

    url: str
    status: int
    headers: Mapping[str, str] = field(default_factory=dict)
    body: bytes = b""

    @property
    def ok(self) -> bool:
        """True for 2xx statuses."""
        return 200 <= self.status <= 299

    def text(self, encoding: str = "utf-8") -> str:
        """Decode the body as text."""
        return self.body.decode(encoding)

    def json(self) -> Any:
        """Decode the body as JSON."""
        return json.loads(self.body)


class Fetcher(abc.ABC):
    """Contract for an HTTP client."""

    @abc.abstractmethod
    def fetch(self, request: Request) -> Response:
        """Perform ``request`` and return the response.

        Raises:
            FetchError: If no response could be obtained.
        """
