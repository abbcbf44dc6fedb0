"""Selector-based element wrapper.

`augment` looks up at most one element and returns an `AugmentedElement`
bearing ``show``, ``hide`` and ``add_event``. The underlying element is
never modified beyond what those capabilities do (inline ``visibility``
style and event listeners).

Lookup misses
-------------
A selector that matches nothing is an expected outcome, not an error: by
default `augment` returns a falsy `AugmentedElement` whose capabilities all
raise `ElementNotFoundError` when invoked. Pass ``strict=True`` to get the
`ElementNotFoundError` immediately instead.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any

from dashkit.interfaces.document import Document, Element, Event, Node
from dashkit.interfaces.errors import ElementNotFoundError

logger = logging.getLogger(__name__)

VISIBLE = "visible"
HIDDEN = "hidden"


class AugmentedElement:
    """A located element plus the ``show``/``hide``/``add_event`` capabilities.

    Two wrappers built from the same selector are independent objects
    around the same node.

    Attributes:
        selector: The selector used for the lookup.
        element: The matched element, or None on a lookup miss.
    """

    __slots__ = ("selector", "element")

    def __init__(self, selector: str, element: Element | None) -> None:
        self.selector = selector
        self.element = element

    def __repr__(self) -> str:
        return f"AugmentedElement({self.selector!r}, {self.element!r})"

    def __bool__(self) -> bool:
        return self.element is not None

    @property
    def found(self) -> bool:
        """True if the selector matched an element."""
        return self.element is not None

    def _require(self) -> Element:
        if self.element is None:
            raise ElementNotFoundError(self.selector)
        return self.element

    def show(self) -> None:
        """Make the element visible."""
        self._require().style["visibility"] = VISIBLE

    def hide(self) -> None:
        """Hide the element (it keeps its layout space)."""
        self._require().style["visibility"] = HIDDEN

    @property
    def visible(self) -> bool:
        """False only when the element was explicitly hidden."""
        return self._require().style.get("visibility") != HIDDEN

    def add_event(self, event_name: str, handler: Callable[[Event], Any]) -> None:
        """Register ``handler`` for ``event_name`` events on the element.

        The handler receives the event class registered for the name in
        `dashkit.interfaces.document.EVENT_TYPES` (e.g. ``"keydown"`` delivers
        a `KeyboardEvent`).
        """
        self._require().add_event_listener(event_name, handler)

    def contains(self, node: Node | None) -> bool:
        """Inclusive subtree containment (False on a lookup miss)."""
        return self.element is not None and self.element.contains(node)


def augment(
    selector: str | None, *, document: Document, strict: bool = False
) -> AugmentedElement | None:
    """Locate the first element matching ``selector`` and wrap it.

    Args:
        selector: CSS selector. Empty or None returns None without querying.
        document: Document to query.
        strict: Raise on a lookup miss instead of returning a falsy wrapper.

    Returns:
        AugmentedElement | None: The wrapper, or None for an empty selector.

    Raises:
        ElementNotFoundError: On a lookup miss when ``strict`` is True.
        InvalidSelectorError: If the document cannot parse ``selector``.
    """
    if not selector:
        return None

    element = document.query_selector(selector)
    if element is None:
        logger.debug("Selector %r matched nothing", selector)
        if strict:
            raise ElementNotFoundError(selector)
    return AugmentedElement(selector, element)
