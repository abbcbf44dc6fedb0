"""A small CSS selector engine for the in-memory document.

Supported syntax
----------------
- Type and universal selectors: ``div``, ``*``
- Id and class selectors, alone or compounded: ``#main``, ``.card``,
  ``button.primary#save``
- Descendant combinator: ``#app .item``
- Child combinator: ``ul > li``
- Selector lists: ``h1, h2``

Attribute selectors, pseudo-classes and sibling combinators are rejected
with `InvalidSelectorError`.
"""

from __future__ import annotations

import functools
import re
from dataclasses import dataclass

from dashkit.interfaces.document import Element, Node
from dashkit.interfaces.errors import InvalidSelectorError

_COMPOUND = re.compile(r"(?P<tag>[A-Za-z][\w-]*|\*)?(?P<rest>(?:[#.][\w-]+)*)")
_SIMPLE = re.compile(r"([#.])([\w-]+)")
_COMBINATOR_SPLIT = re.compile(r"\s*(>)\s*|\s+")

DESCENDANT = " "
CHILD = ">"


@dataclass(frozen=True)
class Compound:
    """A sequence of simple selectors applying to one element."""

    tag: str | None = None
    ids: tuple[str, ...] = ()
    classes: tuple[str, ...] = ()

    def matches(self, element: Element) -> bool:
        """Return True if ``element`` satisfies every simple selector."""
        if self.tag not in (None, "*") and element.tag != self.tag:
            return False
        if any(element.id != id_ for id_ in self.ids):
            return False
        return all(name in element.classes for name in self.classes)


@dataclass(frozen=True)
class ComplexSelector:
    """Compounds joined by combinators, read right to left when matching.

    ``combinators[i]`` joins ``compounds[i]`` and ``compounds[i + 1]``.
    """

    compounds: tuple[Compound, ...]
    combinators: tuple[str, ...]

    def matches(self, element: Element) -> bool:
        """Return True if ``element`` is the subject of this selector."""
        return self._match_at(element, len(self.compounds) - 1)

    def _match_at(self, element: Element, index: int) -> bool:
        if not self.compounds[index].matches(element):
            return False
        if index == 0:
            return True
        if self.combinators[index - 1] == CHILD:
            parent = element.parent
            return isinstance(parent, Element) and self._match_at(parent, index - 1)
        ancestor: Node | None = element.parent
        while isinstance(ancestor, Element):
            if self._match_at(ancestor, index - 1):
                return True
            ancestor = ancestor.parent
        return False


@dataclass(frozen=True)
class SelectorList:
    """A comma-separated group of selectors; matches if any member does."""

    selectors: tuple[ComplexSelector, ...]

    def matches(self, element: Element) -> bool:
        return any(selector.matches(element) for selector in self.selectors)


def _parse_compound(text: str, selector: str) -> Compound:
    match = _COMPOUND.fullmatch(text)
    if not text or match is None:
        raise InvalidSelectorError(selector, f"unsupported token {text!r}")
    ids = tuple(name for kind, name in _SIMPLE.findall(match["rest"]) if kind == "#")
    classes = tuple(
        name for kind, name in _SIMPLE.findall(match["rest"]) if kind == "."
    )
    tag = match["tag"].lower() if match["tag"] else None
    return Compound(tag=tag, ids=ids, classes=classes)


def _parse_complex(text: str, selector: str) -> ComplexSelector:
    # "ul > li a" -> ["ul", ">", "li", None, "a"]
    parts = _COMBINATOR_SPLIT.split(text.strip())
    compounds = tuple(_parse_compound(part, selector) for part in parts[::2])
    combinators = tuple(CHILD if part == CHILD else DESCENDANT for part in parts[1::2])
    return ComplexSelector(compounds=compounds, combinators=combinators)


@functools.lru_cache(maxsize=256)
def parse_selector(selector: str) -> SelectorList:
    """Parse ``selector`` into a `SelectorList`.

    Raises:
        InvalidSelectorError: If the selector is empty or uses syntax
            outside the supported subset.
    """
    if not selector or not selector.strip():
        raise InvalidSelectorError(selector, "empty selector")
    groups = selector.split(",")
    if any(not group.strip() for group in groups):
        raise InvalidSelectorError(selector, "empty selector in list")
    return SelectorList(tuple(_parse_complex(group, selector) for group in groups))
