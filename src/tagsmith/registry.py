"""Known-name registries.

A NameSet holds tag or attribute names that receive special treatment
during encoding: boolean attributes and void elements. Unlike the
immutable registries used elsewhere, a NameSet is mutable so callers can
extend the HTML defaults for custom elements.

Thread Safety:
NameSet performs no locking. Finish mutating a shared set before
rendering from several threads, or give each context its own set via
MarkupConfig.

Example:
    >>> void = NameSet(["br", "img"], label="void element")
    >>> void.add("x-spacer")
    NameSet(label='void element', names=['br', 'img', 'x-spacer'])
    >>> "x-spacer" in void
    True
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator

from tagsmith.utils.logger import get_logger

logger = get_logger(__name__)

# https://www.w3.org/TR/html52/infrastructure.html#boolean-attribute
HTML_BOOLEAN_ATTRIBUTES: tuple[str, ...] = (
    "allowfullscreen",
    "allowpaymentrequest",
    "async",
    "autofocus",
    "autoplay",
    "checked",
    "controls",
    "default",
    "disabled",
    "formnovalidate",
    "hidden",
    "ismap",
    "itemscope",
    "loop",
    "multiple",
    "muted",
    "nomodule",
    "novalidate",
    "open",
    "playsinline",
    "readonly",
    "required",
    "reversed",
    "selected",
    "truespeed",
)

# https://www.w3.org/TR/html52/syntax.html#writing-html-documents-elements
HTML_VOID_ELEMENTS: tuple[str, ...] = (
    "area",
    "base",
    "br",
    "col",
    "embed",
    "hr",
    "img",
    "input",
    "link",
    "meta",
    "param",
    "source",
    "track",
    "wbr",
)


class NameSet:
    """Mutable set of names with add/remove/has operations.

    Usage:
        >>> bools = NameSet(HTML_BOOLEAN_ATTRIBUTES, label="boolean attribute")
        >>> bools.has("checked")
        True
        >>> bools.remove("checked").has("checked")
        False
    """

    __slots__ = ("_names", "_label")

    def __init__(self, names: Iterable[str] = (), *, label: str = "name") -> None:
        """Initialize set.

        Args:
            names: Initial names
            label: Human-readable kind of name, used in logs and repr
        """
        self._names: set[str] = set(names)
        self._label = label

    @property
    def label(self) -> str:
        return self._label

    def add(self, name: str) -> NameSet:
        """Add a name. Returns self for chaining."""
        if name not in self._names:
            self._names.add(name)
            logger.debug("Registered %s %r", self._label, name)
        return self

    def remove(self, name: str) -> NameSet:
        """Remove a name if present. Missing names are ignored.

        Returns:
            self for chaining
        """
        if name in self._names:
            self._names.discard(name)
            logger.debug("Unregistered %s %r", self._label, name)
        return self

    def has(self, name: str) -> bool:
        """Check if name is registered."""
        return name in self._names

    def copy(self) -> NameSet:
        """Return an independent copy with the same names and label."""
        return NameSet(self._names, label=self._label)

    @property
    def names(self) -> frozenset[str]:
        """Snapshot of all registered names."""
        return frozenset(self._names)

    def __contains__(self, name: object) -> bool:
        """Support 'name in nameset' syntax."""
        return name in self._names

    def __iter__(self) -> Iterator[str]:
        return iter(sorted(self._names))

    def __len__(self) -> int:
        return len(self._names)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, NameSet):
            return self._names == other._names
        return NotImplemented

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"NameSet(label={self._label!r}, names={sorted(self._names)!r})"


__all__ = ["HTML_BOOLEAN_ATTRIBUTES", "HTML_VOID_ELEMENTS", "NameSet"]
