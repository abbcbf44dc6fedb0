"""Bootstrap (composition root) for DASHKIT.

Assembles a `Toolkit` at runtime: picks concrete adapters for the document,
timer, cache store and fetcher (from explicit arguments or from
`dashkit.config`), and exposes the helper namespace bound to them.

Import rules:
- Entry points and applications import *this* package.
- This package may import: `dashkit.adapters`, `dashkit.toolkit`,
  `dashkit.interfaces`, and `dashkit.config`.
- Inner layers must not import `dashkit.bootstrap`.
"""

from .bootstrap import (
    Toolkit,
    bootstrap,
    build_cache_factory,
    build_fetcher,
    build_timer,
)

__all__ = [
    "Toolkit",
    "bootstrap",
    "build_cache_factory",
    "build_fetcher",
    "build_timer",
]
