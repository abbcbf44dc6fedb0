"""Stand-ins for ``urllib`` responses used by fetcher and CLI tests."""

from __future__ import annotations

import io
from email.message import Message

# pylint: disable=too-few-public-methods


class FakeHTTPResponse(io.BytesIO):
    """Just enough of ``http.client.HTTPResponse`` for the fetcher."""

    def __init__(self, url: str, status: int, body: bytes, headers: dict[str, str]):
        super().__init__(body)
        self.url = url
        self.status = status
        self.headers = Message()
        for name, value in headers.items():
            self.headers[name] = value

    def geturl(self) -> str:
        return self.url
