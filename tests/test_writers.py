"""Tests for the escaping writers."""

import pytest

from tagsmith.writers import (
    AttrWriter,
    RawWriter,
    TextWriter,
    decode_utf8,
    escape_attr,
    escape_text,
)

SAMPLE = 'A&B\u00a0C"D<E>F'


class TestRawWriter:
    """Tests for the non-escaping writer."""

    def test_write_str_verbatim(self) -> None:
        w = RawWriter()
        w.write_str(SAMPLE)
        assert w.build() == SAMPLE

    def test_write_bytes_verbatim(self) -> None:
        w = RawWriter()
        w.write_bytes(SAMPLE.encode("utf-8"))
        assert w.build() == SAMPLE

    def test_write_char_multibyte(self) -> None:
        """Non-ASCII characters are encoded correctly in byte output."""
        w = RawWriter()
        w.write_char("é")
        w.write_char("🔥")
        assert w.build() == "é🔥"
        assert w.to_bytes() == "é🔥".encode("utf-8")

    def test_write_char_rejects_strings(self) -> None:
        w = RawWriter()
        with pytest.raises(ValueError, match="single character"):
            w.write_char("ab")
        with pytest.raises(ValueError):
            w.write_char("")

    def test_returns_count(self) -> None:
        w = RawWriter()
        assert w.write_str("abc") == 3
        assert w.write_str("") == 0
        assert w.write_bytes(b"") == 0

    def test_invalid_utf8_replaced(self) -> None:
        w = RawWriter()
        w.write_bytes(b"a\xffb")
        assert w.build() == "a�b"

    def test_len_counts_characters(self) -> None:
        w = RawWriter()
        w.write_str("ab")
        w.write_str("cde")
        assert len(w) == 5

    def test_repeated_build_is_stable(self) -> None:
        w = RawWriter()
        w.write_str("a")
        w.write_str("b")
        assert w.build() == "ab"
        w.write_str("c")
        assert w.build() == "abc"
        assert w.build() == "abc"
        assert str(w) == "abc"
        assert bytes(w) == b"abc"

    def test_clear(self) -> None:
        w = RawWriter()
        w.write_str("abc")
        w.clear()
        assert not w
        assert w.build() == ""

    def test_shared_parts(self) -> None:
        """Writers over one parts list write into the same buffer."""
        parts: list[str] = []
        raw = RawWriter(parts)
        text = TextWriter(parts)
        raw.write_str("<p>")
        text.write_str("<&>")
        raw.write_str("</p>")
        assert raw.build() == "<p>&lt;&amp;&gt;</p>"
        assert text.build() == "<p>&lt;&amp;&gt;</p>"


class TestAttrWriter:
    """Tests for attribute-context escaping."""

    def test_write_str(self) -> None:
        w = AttrWriter()
        w.write_str(SAMPLE)
        assert w.build() == "A&amp;B&nbsp;C&quot;D<E>F"

    def test_write_bytes(self) -> None:
        w = AttrWriter()
        w.write_bytes(SAMPLE.encode("utf-8"))
        assert w.build() == "A&amp;B&nbsp;C&quot;D<E>F"

    def test_write_char_sequence(self) -> None:
        """Each character is escaped independently, accumulating output."""
        w = AttrWriter()
        expected = [
            ("A", "A"),
            ("&", "A&amp;"),
            ("B", "A&amp;B"),
            ("\u00a0", "A&amp;B&nbsp;"),
            ("C", "A&amp;B&nbsp;C"),
            ('"', "A&amp;B&nbsp;C&quot;"),
            ("D", "A&amp;B&nbsp;C&quot;D"),
            ("<", "A&amp;B&nbsp;C&quot;D<"),
            ("E", "A&amp;B&nbsp;C&quot;D<E"),
            (">", "A&amp;B&nbsp;C&quot;D<E>"),
            ("F", "A&amp;B&nbsp;C&quot;D<E>F"),
        ]
        for ch, out in expected:
            w.write_char(ch)
            assert w.build() == out

    def test_write_raw_bypasses_escaping(self) -> None:
        w = AttrWriter()
        w.write_raw('="')
        assert w.build() == '="'

    def test_double_escapes(self) -> None:
        """Already-escaped input is escaped again."""
        once = escape_attr('a&"b')
        assert once == "a&amp;&quot;b"
        assert escape_attr(once) == "a&amp;amp;&amp;quot;b"


class TestTextWriter:
    """Tests for element-text escaping."""

    def test_write_str(self) -> None:
        w = TextWriter()
        w.write_str(SAMPLE)
        assert w.build() == 'A&amp;B&nbsp;C"D&lt;E&gt;F'

    def test_write_bytes(self) -> None:
        w = TextWriter()
        w.write_bytes(bytearray(SAMPLE.encode("utf-8")))
        assert w.build() == 'A&amp;B&nbsp;C"D&lt;E&gt;F'

    def test_write_char_sequence(self) -> None:
        w = TextWriter()
        for ch in SAMPLE:
            w.write_char(ch)
        assert w.build() == 'A&amp;B&nbsp;C"D&lt;E&gt;F'

    def test_returns_escaped_count(self) -> None:
        w = TextWriter()
        assert w.write_str("<") == 4


class TestHelpers:
    def test_escape_text(self) -> None:
        assert escape_text('<one>&"</one>') == '&lt;one&gt;&amp;"&lt;/one&gt;'

    def test_escape_attr(self) -> None:
        assert escape_attr('<one>&"</one>') == "<one>&amp;&quot;</one>"

    def test_decode_utf8_memoryview(self) -> None:
        assert decode_utf8(memoryview("ü".encode("utf-8"))) == "ü"
