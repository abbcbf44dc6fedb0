"""Unit tests for `MemoryDocument` / `MemoryElement` tree and dispatch."""

import logging

import pytest

from dashkit.adapters.document import MemoryDocument, MemoryElement
from dashkit.interfaces.document import Event, FocusEvent


def test_create_element_appends_to_body_by_default():
    """Elements without a parent land in body."""
    doc = MemoryDocument()
    el = doc.create_element("div", id="x")
    assert el.parent is doc.body
    assert doc.body.children == (el,)
    assert doc.body.parent is doc


def test_append_moves_an_attached_element():
    """Appending an attached element detaches it from its old parent first."""
    doc = MemoryDocument()
    a = doc.create_element("div")
    b = doc.create_element("div")
    child = doc.create_element("span", parent=a)

    b.append(child)

    assert a.children == ()
    assert b.children == (child,)
    assert child.parent is b


def test_append_into_own_subtree_is_rejected():
    """An element cannot become its own descendant."""
    doc = MemoryDocument()
    outer = doc.create_element("div")
    inner = doc.create_element("div", parent=outer)
    with pytest.raises(ValueError):
        inner.append(outer)


def test_detached_elements_are_not_queried():
    """Detaching removes an element from lookups."""
    doc = MemoryDocument()
    el = doc.create_element("div", id="gone")
    el.detach()
    assert doc.query_selector("#gone") is None
    assert el.parent is None


def test_contains_is_inclusive_ancestor_containment():
    """A node contains itself and its descendants, not its ancestors or siblings."""
    doc = MemoryDocument()
    outer = doc.create_element("div")
    inner = doc.create_element("span", parent=outer)
    sibling = doc.create_element("div")

    assert outer.contains(outer)
    assert outer.contains(inner)
    assert not inner.contains(outer)
    assert not outer.contains(sibling)
    assert not outer.contains(None)
    assert doc.contains(inner)


def test_click_bubbles_from_target_to_document():
    """Listeners run on the target first, then each ancestor, then the document."""
    doc = MemoryDocument()
    outer = doc.create_element("div")
    inner = doc.create_element("button", parent=outer)
    order: list[object] = []
    for node in (doc, doc.body, outer, inner):
        node.add_event_listener("click", lambda event: order.append(event.current_target))

    event = doc.click(inner)

    assert order == [inner, outer, doc.body, doc]
    assert event.current_target is None


def test_non_bubbling_events_stay_on_target():
    """focus does not bubble; its event class is FocusEvent."""
    doc = MemoryDocument()
    field = doc.create_element("input")
    seen: list[Event] = []
    doc.add_event_listener("focus", seen.append)
    field.add_event_listener("focus", seen.append)

    doc.fire("focus", field)

    assert len(seen) == 1
    assert isinstance(seen[0], FocusEvent)


def test_same_handler_registered_twice_runs_twice():
    """Registrations are not deduplicated."""
    doc = MemoryDocument()
    el = doc.create_element("div")
    calls: list[Event] = []
    el.add_event_listener("click", calls.append)
    el.add_event_listener("click", calls.append)

    doc.click(el)

    assert len(calls) == 2


def test_listener_error_is_logged_and_reraised(caplog):
    """A failing listener aborts dispatch and surfaces to the dispatcher."""
    doc = MemoryDocument()
    el = doc.create_element("div")
    reached: list[Event] = []

    def boom(event):
        raise RuntimeError("listener failed")

    el.add_event_listener("click", boom)
    doc.add_event_listener("click", reached.append)

    with caplog.at_level(logging.ERROR), pytest.raises(RuntimeError):
        doc.click(el)

    assert reached == []
    assert any("failed for click" in rec.getMessage() for rec in caplog.records)


def test_repr_shows_tag_id_and_classes():
    """The element repr reads like a selector."""
    assert repr(MemoryElement("DIV", id="a", classes=["b", "c"])) == "<div#a.b.c>"
