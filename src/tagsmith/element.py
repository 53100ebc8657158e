"""Declarative elements.

An Element bundles a tag, attributes and children for deferred rendering.
It is Renderable, so elements nest as children of other elements, of
``Builder.element`` calls and of fragments.

Example:
    >>> from tagsmith import DOCTYPE, E, F, Raw
    >>> page = F(
    ...     Raw(DOCTYPE),
    ...     E("html", [("lang", "en")],
    ...         E("head", None, E("meta", [("charset", "utf-8")])),
    ...         E("body", None, E("h1", [("class", "title")], "mock markup")),
    ...     ),
    ... )
    >>> page.build()
    '<!doctype html><html lang="en"><head><meta charset="utf-8"></head><body><h1 class="title">mock markup</h1></body></html>'

An element with an empty tag renders nothing, which makes conditionally
absent elements easy to express:

    >>> F(E("p" if False else "", None, "hidden")).build()
    ''

"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, replace
from typing import Any

from tagsmith.attributes import EMPTY_ATTRS, Attrs
from tagsmith.builder import AttrsArg, Builder
from tagsmith.markup import Renderable

_EXHAUSTED = object()


@dataclass(frozen=True, slots=True)
class Element:
    """HTML/XML element value.

    Sequence and iterator children are flattened into a tuple when the
    element is created, so a generator child renders the same on every
    render. Attributes given as a mapping or pairs are coerced to Attrs.

    Attributes:
        tag: Tag name; empty means "render nothing"
        attrs: Attributes in output order
        child: Child payload, any shape accepted by ``tagsmith.encoding``

    """

    tag: str
    attrs: Attrs = EMPTY_ATTRS
    child: Any = None

    def __post_init__(self) -> None:
        if not isinstance(self.attrs, Attrs):
            object.__setattr__(self, "attrs", Attrs.coerce(self.attrs))
        if _is_nested(self.child):
            object.__setattr__(self, "child", _flatten(self.child))

    def render(self, builder: Builder) -> None:
        """Write this element into ``builder``. No-op for an empty tag."""
        if self.tag:
            builder.element(self.tag, self.attrs, self.child)

    def attr_set(self, name: str, value: str) -> Element:
        """Return a copy with attribute ``name`` set to ``value``."""
        return replace(self, attrs=self.attrs.set(name, value))

    def attr_add(self, name: str, value: str) -> Element:
        """Return a copy with ``value`` appended to attribute ``name``."""
        return replace(self, attrs=self.attrs.add(name, value))

    def __str__(self) -> str:
        """Rendered markup, using the active config."""
        return F(self).build()

    def __repr__(self) -> str:
        """Represent as the ``E(...)`` call that builds this element."""
        parts = [repr(self.tag), repr(self.attrs)]
        parts.extend(_repr_children(self.child))
        return f"E({', '.join(parts)})"


def _is_nested(value: Any) -> bool:
    match value:
        case list() | tuple():
            return True
        case type() | Renderable():
            return False
        case Iterator():
            return True
    return False


def _flatten(value: Any) -> tuple[Any, ...] | None:
    """Materialize nested sequences and iterators into a flat tuple.

    Mirrors the walk order of ``write_child``; ``None`` items are dropped.
    """
    items: list[Any] = []
    stack: list[Iterator[Any]] = [iter(value)]
    while stack:
        item = next(stack[-1], _EXHAUSTED)
        if item is _EXHAUSTED:
            stack.pop()
        elif _is_nested(item):
            stack.append(iter(item))
        elif item is not None:
            items.append(item)
    return tuple(items) or None


def _repr_children(value: Any) -> list[str]:
    if value is None:
        return []
    if isinstance(value, tuple):
        return [repr(item) for item in value]
    return [repr(value)]


def E(tag: str, attrs: AttrsArg = None, *children: Any) -> Element:
    """Create an Element. Children are rendered later, on every render.

    Example:
        >>> E("a", {"href": "/posts"}, "posts")
        E('a', Attrs([Attr(name='href', value='/posts')]), 'posts')
    """
    return Element(tag, Attrs.coerce(attrs), children or None)


def F(*children: Any) -> Builder:
    """Render children with no enclosing tag into a new Builder.

    Example:
        >>> F("a", 1, E("br")).build()
        'a1<br>'
    """
    builder = Builder()
    builder.fragment(*children)
    return builder


__all__ = ["E", "Element", "F"]
