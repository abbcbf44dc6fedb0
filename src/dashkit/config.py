"""Configuration utilities for DASHKIT.

This module centralizes the environment variables that choose the default
collaborators wired by `dashkit.bootstrap`:

- ``DASHKIT_TIMER``: ``threading`` (default), ``asyncio`` or ``manual``.
- ``DASHKIT_CACHE``: ``dict`` (default), ``lru`` or ``weak``.
- ``DASHKIT_CACHE_MAXSIZE``: LRU capacity, positive int (default 128).
- ``DASHKIT_FETCH_TIMEOUT``: fetch timeout in seconds, positive (default 30).
"""

import os
from collections.abc import Mapping
from dataclasses import dataclass

from dashkit.interfaces.errors import DashkitError

TIMER_ENV = "DASHKIT_TIMER"  # pragma: no mutate
CACHE_ENV = "DASHKIT_CACHE"  # pragma: no mutate
CACHE_MAXSIZE_ENV = "DASHKIT_CACHE_MAXSIZE"  # pragma: no mutate
FETCH_TIMEOUT_ENV = "DASHKIT_FETCH_TIMEOUT"  # pragma: no mutate

TIMER_KINDS = ("threading", "asyncio", "manual")
CACHE_KINDS = ("dict", "lru", "weak")


class InvalidSettingError(DashkitError, ValueError):
    """Raised when an environment setting has an unusable value."""

    def __init__(self, name: str, value: str, reason: str) -> None:
        super().__init__(f"Invalid {name}={value!r}: {reason}")
        self.name = name
        self.value = value
        self.reason = reason


@dataclass(frozen=True)
class Settings:
    """Resolved configuration values."""

    timer: str = "threading"
    cache: str = "dict"
    cache_maxsize: int = 128
    fetch_timeout: float = 30.0


def _choice(
    environ: Mapping[str, str], name: str, choices: tuple[str, ...], default: str
) -> str:
    value = environ.get(name, "").strip().lower() or default
    if value not in choices:
        raise InvalidSettingError(name, value, f"expected one of {', '.join(choices)}")
    return value


def _positive_int(environ: Mapping[str, str], name: str, default: int) -> int:
    if not (raw := environ.get(name, "").strip()):
        return default
    try:
        value = int(raw)
    except ValueError as e:
        raise InvalidSettingError(name, raw, "expected an integer") from e
    if value < 1:
        raise InvalidSettingError(name, raw, "must be >= 1")
    return value


def _positive_float(environ: Mapping[str, str], name: str, default: float) -> float:
    if not (raw := environ.get(name, "").strip()):
        return default
    try:
        value = float(raw)
    except ValueError as e:
        raise InvalidSettingError(name, raw, "expected a number") from e
    if value <= 0:
        raise InvalidSettingError(name, raw, "must be > 0")
    return value


def load_settings(environ: Mapping[str, str] | None = None) -> Settings:
    """Read settings from the environment.

    Args:
        environ: Mapping to read instead of ``os.environ`` (handy in tests).

    Returns:
        Settings: Values from the environment, defaults for unset variables.

    Raises:
        InvalidSettingError: If a variable is set to an unusable value.
    """
    env = os.environ if environ is None else environ
    return Settings(
        timer=_choice(env, TIMER_ENV, TIMER_KINDS, "threading"),
        cache=_choice(env, CACHE_ENV, CACHE_KINDS, "dict"),
        cache_maxsize=_positive_int(env, CACHE_MAXSIZE_ENV, 128),
        fetch_timeout=_positive_float(env, FETCH_TIMEOUT_ENV, 30.0),
    )
