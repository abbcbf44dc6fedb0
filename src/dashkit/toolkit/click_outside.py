"""Outside-click detection."""

import logging
from collections.abc import Callable
from typing import Any

from dashkit.interfaces.document import Document, Element, Event

from .element import AugmentedElement

logger = logging.getLogger(__name__)


def click_outside(
    element: Element | AugmentedElement,
    callback: Callable[[Event], Any],
    *,
    document: Document,
) -> None:
    """Call ``callback(event)`` for every document click outside ``element``.

    A click on ``element`` itself or on any of its descendants is ignored.
    Each call registers a new, independent listener; there is no removal.

    Args:
        element: The element (or augmented wrapper) defining "inside".
        callback: Called with the click event.
        document: Document whose clicks are observed.
    """

    def on_click(event: Event) -> None:
        if not element.contains(event.target):
            logger.debug("Click on %r is outside %r", event.target, element)
            callback(event)

    document.add_event_listener("click", on_click)
