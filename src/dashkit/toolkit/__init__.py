"""Toolkit behaviour: memoization, rate limiting, element augmentation,
outside-click detection and stateless helpers.

Everything here talks to collaborators through `dashkit.interfaces` ports;
the default wiring lives in `dashkit.bootstrap`.
"""

from .click_outside import click_outside
from .element import AugmentedElement, augment
from .helpers import fetch, is_function, is_nil, is_null, is_number, omit, pick, shuffle
from .memoize import MemoizedFunction, memoize, memoized
from .rate_limit import Debounced, Throttled, debounce, throttle

__all__ = [
    "AugmentedElement",
    "Debounced",
    "MemoizedFunction",
    "Throttled",
    "augment",
    "click_outside",
    "debounce",
    "fetch",
    "is_function",
    "is_nil",
    "is_null",
    "is_number",
    "memoize",
    "memoized",
    "omit",
    "pick",
    "shuffle",
    "throttle",
]
