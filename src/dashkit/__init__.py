"""DASHKIT

A small client-side utility toolkit: a selector-based element wrapper with
``show``/``hide``/typed event registration, plus a namespace of helpers for
memoization with a pluggable cache, debounce/throttle rate limiting,
outside-click detection, object projection, shuffling and type predicates.
"""

__all__ = ["__version__"]
__version__ = "0.1.0"
