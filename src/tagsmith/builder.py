"""Markup builder.

Builder is an append-only output buffer with methods for writing tags,
attributes and children. Its methods are plain calls; nesting comes from
passing children, which may be callbacks that call back into the builder.

Usage:
    >>> b = Builder(DOCTYPE)
    >>> E = b.element
    >>> E("html", [("lang", "en")], lambda: (
    ...     E("head", None, lambda: E("meta", [("charset", "utf-8")])),
    ...     E("body", None, lambda: E("h1", [("class", "title")], "mock markup")),
    ... ))
    >>> b.build()
    '<!doctype html><html lang="en"><head><meta charset="utf-8"></head><body><h1 class="title">mock markup</h1></body></html>'

Thread Safety:
A Builder is owned by the code constructing it. Appends are not safe
for concurrent use.

"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Mapping
from typing import Any

from tagsmith.attributes import Attr, Attrs, as_attr
from tagsmith.config import MarkupConfig, get_markup_config
from tagsmith.encoding import write_child, write_children, write_unknown
from tagsmith.validation import validate_tag
from tagsmith.writers import AttrWriter, RawWriter, TextWriter

DOCTYPE = "<!doctype html>"

AttrsArg = Attrs | Mapping[str, str] | Iterable[Any] | None


class Builder:
    """Append-only HTML/XML output buffer.

    Usage:
        >>> b = Builder()
        >>> b.element("p", {"class": "note"}, "1 < 2")
        >>> str(b)
        '<p class="note">1 &lt; 2</p>'

    When passed as a child, a Builder writes its content as-is (it already
    holds escaped markup).
    """

    __slots__ = ("_parts", "_raw", "_attr", "_text", "_config")

    def __init__(
        self,
        prefix: str | bytes = "",
        *,
        config: MarkupConfig | None = None,
    ) -> None:
        """Initialize builder.

        Args:
            prefix: Raw markup to start with, e.g. ``DOCTYPE``
            config: Registries for boolean attributes and void elements;
                defaults to the config active in the current context
        """
        self._parts: list[str] = []
        self._raw = RawWriter(self._parts)
        self._attr = AttrWriter(self._parts)
        self._text = TextWriter(self._parts)
        self._config = config if config is not None else get_markup_config()
        if isinstance(prefix, str):
            self._raw.write_raw(prefix)
        else:
            self._raw.write_bytes(prefix)

    @classmethod
    def build_with(
        cls,
        fun: Callable[[Callable[..., None]], Any],
        prefix: str | bytes = "",
        *,
        config: MarkupConfig | None = None,
    ) -> Builder:
        """Create a builder, pass its ``element`` method to ``fun``, return it.

        Example:
            >>> Builder.build_with(lambda E: E("span", [("aria-hidden", "true")], "x")).build()
            '<span aria-hidden="true">x</span>'
        """
        return cls(prefix, config=config).with_(fun)

    @property
    def config(self) -> MarkupConfig:
        return self._config

    # =========================================================================
    # Elements
    # =========================================================================

    def element(self, tag: str, attrs: AttrsArg = None, *children: Any) -> None:
        """Write a complete element: opening tag, children, closing tag.

        Children follow the rules in ``tagsmith.encoding``. Void elements
        get no closing tag; their children, if any, are still written.

        Raises:
            InvalidNameError: If the tag or an attribute name is invalid
            RenderError: If a child cannot be rendered
        """
        self.begin(tag, attrs)
        write_children(self, children)
        self.end(tag)

    e = element

    def begin(self, tag: str, attrs: AttrsArg = None) -> None:
        """Write an opening tag with attributes.

        Raises:
            InvalidNameError: If the tag or an attribute name is invalid
        """
        validate_tag(tag)
        raw = self._raw
        raw.write_raw("<")
        raw.write_raw(tag)
        if attrs is not None:
            Attrs.coerce(attrs).write_to(self._attr, self._config.boolean_attrs)
        raw.write_raw(">")

    def end(self, tag: str) -> None:
        """Write a closing tag, unless ``tag`` is a void element.

        Raises:
            InvalidNameError: If the tag is invalid
        """
        validate_tag(tag)
        if tag not in self._config.void_elements:
            raw = self._raw
            raw.write_raw("</")
            raw.write_raw(tag)
            raw.write_raw(">")

    def attr(self, attr: Attr | tuple[str, str]) -> None:
        """Write one attribute, preceded by a space."""
        as_attr(attr).write_to(self._attr, self._config.boolean_attrs)

    def attrs(self, *attrs: Attr | tuple[str, str]) -> None:
        """Write several attributes. See ``attr``."""
        for attr in attrs:
            self.attr(attr)

    # =========================================================================
    # Children
    # =========================================================================

    def fragment(self, *children: Any) -> None:
        """Write children with no enclosing tag."""
        write_children(self, children)

    f = fragment

    def child(self, value: Any) -> None:
        """Write a single child. See ``tagsmith.encoding``."""
        write_child(self, value)

    c = child

    def unknown(self, value: Any) -> None:
        """Stringify ``value`` and write it escaped, ignoring shape rules."""
        write_unknown(self, value)

    # =========================================================================
    # Low-level writes
    # =========================================================================

    def write_raw(self, s: str) -> None:
        """Write text without escaping."""
        self._raw.write_raw(s)

    def write_raw_bytes(self, data: bytes | bytearray | memoryview) -> None:
        """Write UTF-8 bytes without escaping."""
        self._raw.write_bytes(data)

    def write_text(self, s: str) -> None:
        """Write text escaped for element content."""
        self._text.write_str(s)

    t = write_text

    def write_text_bytes(self, data: bytes | bytearray | memoryview) -> None:
        """Write UTF-8 bytes escaped for element content."""
        self._text.write_bytes(data)

    def with_(self, fun: Callable[[Callable[..., None]], Any]) -> Builder:
        """Call ``fun(self.element)`` and return self."""
        fun(self.element)
        return self

    # =========================================================================
    # Output
    # =========================================================================

    def render(self, builder: Builder) -> None:
        """Append this builder's markup to ``builder`` without escaping."""
        builder.write_raw(self.build())

    def build(self) -> str:
        """Return the accumulated markup."""
        return self._raw.build()

    def to_bytes(self) -> bytes:
        """Return the accumulated markup encoded as UTF-8."""
        return self._raw.to_bytes()

    def __str__(self) -> str:
        return self.build()

    def __bytes__(self) -> bytes:
        return self.to_bytes()

    def __len__(self) -> int:
        """Return number of characters written."""
        return len(self._raw)

    def __bool__(self) -> bool:
        return bool(self._parts)

    def __repr__(self) -> str:
        return f"Builder({self.build()!r})"


__all__ = ["DOCTYPE", "AttrsArg", "Builder"]
