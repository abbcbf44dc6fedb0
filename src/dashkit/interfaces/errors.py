"""Errors shared across the toolkit and its adapters."""


class DashkitError(Exception):
    """Base class for all DASHKIT errors."""


class NotCallableError(DashkitError, TypeError):
    """Raised at wrap time when a callable argument is not callable."""

    def __init__(self, argument: str, value: object) -> None:
        super().__init__("Expected a function")
        self.argument = argument
        self.value = value


class ElementNotFoundError(DashkitError, LookupError):
    """Raised when a selector did not match any element."""

    def __init__(self, selector: str) -> None:
        super().__init__(f"No element matches selector {selector!r}")
        self.selector = selector


class InvalidSelectorError(DashkitError, ValueError):
    """Raised when a document cannot parse a selector."""

    def __init__(self, selector: str, reason: str) -> None:
        super().__init__(f"Invalid selector {selector!r}: {reason}")
        self.selector = selector
        self.reason = reason


class FetchError(DashkitError):
    """Raised when a fetch fails at the network level (no response)."""

    def __init__(self, url: str, reason: str) -> None:
        super().__init__(f"Fetch of {url} failed: {reason}")
        self.url = url
        self.reason = reason
