"""HTTP fetch backends."""

from .urllib_fetcher import UrllibFetcher

__all__ = ["UrllibFetcher"]
