"""In-memory document backend.

A dependency-free element tree for tests, demos and headless use. Elements
carry a tag, an optional id, class names, an inline style mapping and event
listeners; the document resolves selectors (see `selectors`) and dispatches
events with target-then-bubble semantics.

Typical usage
-------------
    document = MemoryDocument()
    app = document.create_element("div", id="app")
    button = document.create_element("button", classes=["primary"], parent=app)
    document.query_selector("#app .primary") is button  # True
    document.click(button)
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator, MutableMapping, Sequence
from typing import Any

from dashkit.interfaces.document import (
    Document,
    Element,
    Event,
    EventHandler,
    Node,
    make_event,
)

from .selectors import parse_selector

logger = logging.getLogger(__name__)

__all__ = ["MemoryDocument", "MemoryElement"]


class _ListenerMixin:
    """Per-node listener registry keyed by event name."""

    def _init_listeners(self) -> None:
        self._listeners: dict[str, list[EventHandler]] = {}

    def add_event_listener(self, event_name: str, handler: EventHandler) -> None:
        self._listeners.setdefault(event_name, []).append(handler)

    def listeners_for(self, event_name: str) -> list[EventHandler]:
        """Return a snapshot of the handlers registered for ``event_name``."""
        return list(self._listeners.get(event_name, ()))


class MemoryElement(_ListenerMixin, Element):
    """An element living in a `MemoryDocument` tree (or detached)."""

    def __init__(
        self,
        tag: str,
        *,
        id: str | None = None,  # pylint: disable=redefined-builtin
        classes: Iterable[str] = (),
    ) -> None:
        self._init_listeners()
        self._tag = tag.lower()
        self._id = id
        self._classes = list(classes)
        self._style: dict[str, str] = {}
        self._children: list[MemoryElement] = []
        self._parent: Node | None = None

    def __repr__(self) -> str:
        ident = f"#{self._id}" if self._id else ""
        classes = "".join(f".{name}" for name in self._classes)
        return f"<{self._tag}{ident}{classes}>"

    @property
    def parent(self) -> Node | None:
        return self._parent

    @property
    def tag(self) -> str:
        return self._tag

    @property
    def id(self) -> str | None:
        return self._id

    @property
    def classes(self) -> Sequence[str]:
        return tuple(self._classes)

    @property
    def style(self) -> MutableMapping[str, str]:
        return self._style

    @property
    def children(self) -> Sequence[MemoryElement]:
        return tuple(self._children)

    def append(self, child: MemoryElement) -> MemoryElement:
        """Append ``child`` as the last child, moving it if already attached."""
        if child.contains(self):
            raise ValueError(f"cannot append {child!r} inside its own subtree")
        child.detach()
        child._parent = self  # pylint: disable=protected-access
        self._children.append(child)
        return child

    def detach(self) -> None:
        """Remove this element from its parent (no-op when detached)."""
        if isinstance(self._parent, MemoryElement):
            self._parent._children.remove(self)  # pylint: disable=protected-access
        self._parent = None

    def iter_descendants(self) -> Iterator[MemoryElement]:
        """Yield descendants in document (pre-)order, excluding self."""
        for child in self._children:
            yield child
            yield from child.iter_descendants()


class MemoryDocument(_ListenerMixin, Document):
    """An in-memory document whose single root element is ``body``."""

    def __init__(self) -> None:
        self._init_listeners()
        self.body = MemoryElement("body")
        self.body._parent = self  # pylint: disable=protected-access

    def __repr__(self) -> str:
        return "<MemoryDocument>"

    def create_element(
        self,
        tag: str,
        *,
        id: str | None = None,  # pylint: disable=redefined-builtin
        classes: Iterable[str] = (),
        parent: MemoryElement | None = None,
    ) -> MemoryElement:
        """Create an element and append it to ``parent`` (default: ``body``)."""
        element = MemoryElement(tag, id=id, classes=classes)
        (parent or self.body).append(element)
        return element

    def iter_elements(self) -> Iterator[MemoryElement]:
        """Yield every attached element in document order, ``body`` first."""
        yield self.body
        yield from self.body.iter_descendants()

    def query_selector(self, selector: str) -> MemoryElement | None:
        selector_list = parse_selector(selector)
        return next(
            (el for el in self.iter_elements() if selector_list.matches(el)), None
        )

    def query_selector_all(self, selector: str) -> list[MemoryElement]:
        """Return every element matching ``selector`` in document order."""
        selector_list = parse_selector(selector)
        return [el for el in self.iter_elements() if selector_list.matches(el)]

    def dispatch_event(self, event: Event) -> None:
        """Run listeners on the target, then on each ancestor if the event bubbles.

        A listener that raises aborts the dispatch; the error is logged and
        re-raised to the dispatcher.
        """
        node: Node | None = event.target
        while node is not None:
            event.current_target = node
            for handler in self._handlers_of(node, event.type):
                try:
                    handler(event)
                except Exception:  # pylint: disable=broad-except
                    logger.exception(
                        "Listener %r failed for %s on %r", handler, event.type, node
                    )
                    raise
            if not event.bubbles or event.propagation_stopped:
                break
            node = node.parent
        event.current_target = None

    def fire(self, event_name: str, target: Node, **fields: Any) -> Event:
        """Build an event of the right class for ``event_name`` and dispatch it."""
        event = make_event(event_name, target, **fields)
        logger.debug("Dispatching %s on %r", event_name, target)
        self.dispatch_event(event)
        return event

    def click(self, target: Node, **fields: Any) -> Event:
        """Simulate a click on ``target``."""
        return self.fire("click", target, **fields)

    @staticmethod
    def _handlers_of(node: Node, event_name: str) -> list[EventHandler]:
        if isinstance(node, _ListenerMixin):
            return node.listeners_for(event_name)
        return []
