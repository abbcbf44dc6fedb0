"""Document, element and event interfaces.

This module defines:
- The `Event` DTO family (`MouseEvent`, `KeyboardEvent`, ...) and the
  `EVENT_TYPES` registry mapping standard event names to their event class.
- The `Node`, `Element` and `Document` ports used by the element augmenter
  and the outside-click notifier.

Contract overview
-----------------
Lookup:
- `Document.query_selector(selector)` returns the first matching element in
  document order, or None. Unparseable selectors raise `InvalidSelectorError`.

Events:
- `Node.add_event_listener(name, handler)` registers ``handler``; the same
  handler may be registered several times and is then called several times.
- `Document.dispatch_event(event)` runs listeners on ``event.target`` first,
  then (when ``event.bubbles``) on each ancestor up to the document.

Containment:
- `Node.contains(other)` is inclusive ancestor containment: a node contains
  itself and every descendant.
"""

from __future__ import annotations

import abc
from collections.abc import Callable, MutableMapping, Sequence
from dataclasses import dataclass, field
from typing import Any

# ============================================================================
#                                 Events
# ============================================================================


@dataclass
class Event:
    """A dispatched event.

    `current_target` is updated by the document while the event travels
    from its target to the root.
    """

    type: str
    target: Node | None = None
    bubbles: bool = True
    current_target: Node | None = field(default=None, compare=False)
    propagation_stopped: bool = field(default=False, compare=False)

    def stop_propagation(self) -> None:
        """Prevent the event from reaching further ancestors."""
        self.propagation_stopped = True


@dataclass
class MouseEvent(Event):
    """Pointer-device button and movement events."""

    client_x: float = 0
    client_y: float = 0
    button: int = 0


@dataclass
class PointerEvent(MouseEvent):
    """Unified pointer (mouse, pen, touch) events."""

    pointer_id: int = 1
    pointer_type: str = "mouse"


@dataclass
class WheelEvent(MouseEvent):
    """Scroll wheel events."""

    delta_x: float = 0
    delta_y: float = 0


@dataclass
class KeyboardEvent(Event):
    """Key press and release events."""

    key: str = ""
    code: str = ""


@dataclass
class FocusEvent(Event):
    """Focus gain and loss events."""

    related_target: Node | None = None


@dataclass
class InputEvent(Event):
    """Editable content change events."""

    data: str | None = None


EventHandler = Callable[[Event], Any]

_MOUSE = (
    "click",
    "dblclick",
    "auxclick",
    "contextmenu",
    "mousedown",
    "mouseup",
    "mousemove",
    "mouseover",
    "mouseout",
    "mouseenter",
    "mouseleave",
)
_POINTER = (
    "pointerdown",
    "pointerup",
    "pointermove",
    "pointerover",
    "pointerout",
    "pointerenter",
    "pointerleave",
    "pointercancel",
    "gotpointercapture",
    "lostpointercapture",
)
_KEYBOARD = ("keydown", "keyup", "keypress")
_FOCUS = ("focus", "blur", "focusin", "focusout")
_INPUT = ("input", "beforeinput")

EVENT_TYPES: dict[str, type[Event]] = {
    **{name: MouseEvent for name in _MOUSE},
    **{name: PointerEvent for name in _POINTER},
    **{name: KeyboardEvent for name in _KEYBOARD},
    **{name: FocusEvent for name in _FOCUS},
    **{name: InputEvent for name in _INPUT},
    "wheel": WheelEvent,
    **{
        name: Event
        for name in (
            "change",
            "submit",
            "reset",
            "scroll",
            "load",
            "error",
            "resize",
            "select",
            "toggle",
        )
    },
}

# Events the platform never bubbles.
NON_BUBBLING = frozenset(
    {
        "mouseenter",
        "mouseleave",
        "pointerenter",
        "pointerleave",
        "focus",
        "blur",
        "load",
        "error",
        "scroll",
        "resize",
        "toggle",
        "gotpointercapture",
        "lostpointercapture",
    }
)


def event_class_for(name: str) -> type[Event]:
    """Return the event class for ``name`` (plain `Event` for unknown names)."""
    return EVENT_TYPES.get(name, Event)


def make_event(name: str, target: Node | None = None, **fields: Any) -> Event:
    """Build an event of the class registered for ``name``.

    ``bubbles`` defaults to the platform behaviour for ``name`` unless given.
    """
    fields.setdefault("bubbles", name not in NON_BUBBLING)
    return event_class_for(name)(type=name, target=target, **fields)


# ============================================================================
#                                 Nodes
# ============================================================================


class Node(abc.ABC):
    """A node in a document tree that can receive event listeners."""

    @property
    @abc.abstractmethod
    def parent(self) -> Node | None:
        """Return the parent node, or None for the root or a detached node."""

    @abc.abstractmethod
    def add_event_listener(self, event_name: str, handler: EventHandler) -> None:
        """Register ``handler`` for events named ``event_name`` on this node."""

    def contains(self, other: Node | None) -> bool:
        """Return True if ``other`` is this node or one of its descendants."""
        node = other
        while node is not None:
            if node is self:
                return True
            node = node.parent
        return False


class Element(Node):
    """An element node addressable by selectors."""

    @property
    @abc.abstractmethod
    def tag(self) -> str:
        """Lower-case tag name."""

    @property
    @abc.abstractmethod
    def id(self) -> str | None:
        """Element id, if any."""

    @property
    @abc.abstractmethod
    def classes(self) -> Sequence[str]:
        """Class names in declaration order."""

    @property
    @abc.abstractmethod
    def style(self) -> MutableMapping[str, str]:
        """Inline style properties (e.g. ``visibility``)."""

    @property
    @abc.abstractmethod
    def children(self) -> Sequence[Element]:
        """Child elements in document order."""


class Document(Node):
    """The document root: selector lookup and event dispatch."""

    @property
    def parent(self) -> Node | None:
        return None

    @abc.abstractmethod
    def query_selector(self, selector: str) -> Element | None:
        """Return the first element matching ``selector`` in document order.

        Raises:
            InvalidSelectorError: If ``selector`` cannot be parsed.
        """

    @abc.abstractmethod
    def dispatch_event(self, event: Event) -> None:
        """Deliver ``event`` to its target and, if it bubbles, its ancestors."""
