"""Append-only writers with context-specific escaping.

All writers accumulate string parts in a list and join once on readout,
the StringBuilder pattern: O(n) total vs O(n²) for repeated string
concatenation. Several writers may share one parts list, which is how a
Builder interleaves raw and escaped output into a single buffer.

Escaping rules follow the HTML serialization algorithm:

    https://www.w3.org/TR/html52/syntax.html#escaping-a-string

- RawWriter: no escaping.
- AttrWriter: for text inside a double-quoted attribute value. Escapes
  ``&``, U+00A0 and ``"``; ``<`` and ``>`` pass through.
- TextWriter: for text between tags. Escapes ``&``, U+00A0, ``<`` and
  ``>``; ``"`` passes through.

Escaping is not idempotent: writing ``&amp;`` through an escaping writer
yields ``&amp;amp;``.

Thread Safety:
Writers are single-owner accumulators. Do not share one across threads.

"""

from __future__ import annotations

from typing import ClassVar

_ATTR_TABLE: dict[int, str] = {
    ord("&"): "&amp;",
    0xA0: "&nbsp;",
    ord('"'): "&quot;",
}

_TEXT_TABLE: dict[int, str] = {
    ord("&"): "&amp;",
    0xA0: "&nbsp;",
    ord("<"): "&lt;",
    ord(">"): "&gt;",
}


def decode_utf8(data: bytes | bytearray | memoryview) -> str:
    """Decode UTF-8, replacing invalid sequences with U+FFFD."""
    return bytes(data).decode("utf-8", "replace")


def escape_attr(s: str) -> str:
    """Escape text for use inside a double-quoted attribute value.

    Examples:
        >>> escape_attr('<one>&"</one>')
        '<one>&amp;&quot;</one>'
    """
    return s.translate(_ATTR_TABLE)


def escape_text(s: str) -> str:
    """Escape text for use as element content.

    Examples:
        >>> escape_text('<one>&"</one>')
        '&lt;one&gt;&amp;"&lt;/one&gt;'
    """
    return s.translate(_TEXT_TABLE)


class RawWriter:
    """Non-escaping writer.

    Usage:
        >>> w = RawWriter()
        >>> w.write_str("<b>")
        3
        >>> w.write_char("é")
        1
        >>> w.build()
        '<b>é'

    Subclasses set ``_table`` to a ``str.translate`` table to escape
    everything written through ``write_str``, ``write_bytes`` and
    ``write_char``. ``write_raw`` never escapes.
    """

    __slots__ = ("_parts",)

    _table: ClassVar[dict[int, str] | None] = None

    def __init__(self, parts: list[str] | None = None) -> None:
        """Initialize writer.

        Args:
            parts: Existing parts list to append to. Writers created over the
                same list write into the same buffer.
        """
        self._parts: list[str] = parts if parts is not None else []

    def write_str(self, s: str) -> int:
        """Write text, escaping per this writer's rules.

        Returns:
            Number of characters appended (may exceed ``len(s)``)
        """
        if not s:
            return 0
        if self._table is not None:
            s = s.translate(self._table)
        self._parts.append(s)
        return len(s)

    def write_bytes(self, data: bytes | bytearray | memoryview) -> int:
        """Write UTF-8 encoded bytes, escaping per this writer's rules."""
        if not data:
            return 0
        return self.write_str(decode_utf8(data))

    def write_char(self, ch: str) -> int:
        """Write a single character, escaping per this writer's rules.

        Raises:
            ValueError: If ``ch`` is not exactly one character
        """
        if len(ch) != 1:
            raise ValueError(f"write_char() expects a single character, got {ch!r}")
        return self.write_str(ch)

    def write_raw(self, s: str) -> int:
        """Write text verbatim, bypassing escaping."""
        if s:
            self._parts.append(s)
        return len(s)

    def build(self) -> str:
        """Join all parts into the final string.

        The joined result replaces the parts, so repeated readouts of an
        unchanged buffer do not re-join.
        """
        parts = self._parts
        if not parts:
            return ""
        if len(parts) > 1:
            parts[:] = ["".join(parts)]
        return parts[0]

    def to_bytes(self) -> bytes:
        """Return the accumulated text encoded as UTF-8."""
        return self.build().encode("utf-8")

    def clear(self) -> None:
        """Discard all accumulated output."""
        self._parts.clear()

    def __str__(self) -> str:
        return self.build()

    def __bytes__(self) -> bytes:
        return self.to_bytes()

    def __len__(self) -> int:
        """Return number of characters written."""
        return sum(len(p) for p in self._parts)

    def __bool__(self) -> bool:
        return bool(self._parts)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.build()!r})"


class AttrWriter(RawWriter):
    """Writer for double-quoted attribute values.

    Usage:
        >>> w = AttrWriter()
        >>> w.write_str('A&B\\u00a0C"D<E>F')
        25
        >>> w.build()
        'A&amp;B&nbsp;C&quot;D<E>F'
    """

    __slots__ = ()

    _table = _ATTR_TABLE


class TextWriter(RawWriter):
    """Writer for element text content.

    Usage:
        >>> w = TextWriter()
        >>> w.write_str('A&B\\u00a0C"D<E>F')
        26
        >>> w.build()
        'A&amp;B&nbsp;C"D&lt;E&gt;F'
    """

    __slots__ = ()

    _table = _TEXT_TABLE


__all__ = [
    "AttrWriter",
    "RawWriter",
    "TextWriter",
    "decode_utf8",
    "escape_attr",
    "escape_text",
]
