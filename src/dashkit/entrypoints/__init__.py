"""Entry points (outer adapters) for DASHKIT.

Currently the only entry point is the ``dashkit`` command-line interface,
which wires logging, builds a `Toolkit` via `dashkit.bootstrap`, and exposes
the stateless helpers to the shell. Entry points import `dashkit.bootstrap`
and `dashkit.toolkit`, never adapters directly.
"""
