"""Fetcher built on ``urllib.request``."""

import logging
import urllib.error
import urllib.parse
import urllib.request

from dashkit.interfaces.errors import FetchError
from dashkit.interfaces.fetcher import Fetcher, Request, Response

logger = logging.getLogger(__name__)

SUPPORTED_SCHEMES = ("http", "https")


class UrllibFetcher(Fetcher):
    """Perform requests with the standard library's ``urlopen``.

    HTTP error statuses (4xx/5xx) come back as a `Response`; failures to
    obtain any response raise `FetchError`. So do URLs that are malformed or
    not ``http``/``https``, which are rejected before any I/O.

    Args:
        timeout: Default timeout in seconds, used when the request sets none.
    """

    def __init__(self, timeout: float = 30.0) -> None:
        self.timeout = timeout

    def _build(self, request: Request) -> urllib.request.Request:
        try:
            scheme = urllib.parse.urlsplit(request.url).scheme.lower()
            if scheme not in SUPPORTED_SCHEMES:
                raise ValueError(f"unsupported URL scheme {scheme!r}")
            return urllib.request.Request(
                request.url,
                data=request.body,
                headers=dict(request.headers),
                method=request.method,
            )
        except ValueError as e:
            logger.error("Fetch of %s rejected: %s", request.url, e)
            raise FetchError(request.url, str(e)) from e

    def fetch(self, request: Request) -> Response:
        req = self._build(request)
        timeout = request.timeout if request.timeout is not None else self.timeout
        logger.debug("%s %s (timeout=%ss)", request.method, request.url, timeout)
        try:
            with urllib.request.urlopen(req, timeout=timeout) as resp:
                return Response(
                    url=resp.geturl(),
                    status=resp.status,
                    headers=dict(resp.headers.items()),
                    body=resp.read(),
                )
        except urllib.error.HTTPError as e:
            logger.debug("%s %s -> HTTP %s", request.method, request.url, e.code)
            return Response(
                url=request.url,
                status=e.code,
                headers=dict(e.headers.items()) if e.headers else {},
                body=e.read(),
            )
        except (OSError, ValueError) as e:  # URLError, timeouts, resets, bad hosts
            reason = getattr(e, "reason", e)
            logger.error("Fetch of %s failed: %s", request.url, reason)
            raise FetchError(request.url, str(reason)) from e
