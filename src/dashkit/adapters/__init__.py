"""Adapters (concrete collaborators) for DASHKIT.

Implements the ports declared in `dashkit.interfaces`:

- ``cache``: `CacheStore` backends (dict, LRU, weak-key).
- ``timers``: `Timer` backends (threading, asyncio, manual virtual clock).
- ``document``: an in-memory `Document` tree with a CSS selector subset.
- ``fetcher``: a `Fetcher` built on ``urllib.request``.

Import rules:
- Adapters may import `dashkit.interfaces` but never `dashkit.toolkit` or
  `dashkit.bootstrap`.
"""
