"""Tests for the Builder facade."""

import pytest

from tagsmith import (
    DOCTYPE,
    Attr,
    Attrs,
    Builder,
    E,
    InvalidNameError,
    MarkupConfig,
    markup_config_context,
)


class TestBuilderElement:
    """Tests for Builder.element and its callback-driven nesting."""

    def test_document(self) -> None:
        """Full document built with nested callbacks."""
        b = Builder(DOCTYPE)
        e = b.element

        e("html", [("lang", "en")], lambda: (
            e("head", None, lambda: (
                e("meta", [("charset", "utf-8")]),
                e("meta", [("http-equiv", "X-UA-Compatible"), ("content", "IE=edge")]),
                e("meta", [("name", "viewport"), ("content", "width=device-width, initial-scale=1")]),
                e("link", [("rel", "icon"), ("href", "data:;base64,=")]),
                e("title", None, "test markup"),
            )),
            e("body", [("class", "stretch-to-viewport")], lambda: (
                e("h1", [("class", "title")], "mock markup"),
                e("div", [("class", "main")], "hello world!"),
            )),
        ))

        assert b.build() == (
            '<!doctype html><html lang="en"><head><meta charset="utf-8">'
            '<meta http-equiv="X-UA-Compatible" content="IE=edge">'
            '<meta name="viewport" content="width=device-width, initial-scale=1">'
            '<link rel="icon" href="data:;base64,="><title>test markup</title></head>'
            '<body class="stretch-to-viewport"><h1 class="title">mock markup</h1>'
            '<div class="main">hello world!</div></body></html>'
        )

    def test_loops_and_conditionals(self) -> None:
        title = "Posts"
        posts = ["Post0", "Post1"]
        b = Builder(DOCTYPE)
        e = b.element

        def head() -> None:
            e("meta", {"charset": "utf-8"})
            e("title", None, title if title else "test markup")

        def body() -> None:
            e("h1", {"class": "title"}, "Posts")
            for post in posts:
                e("h2", None, post)

        e("html", {"lang": "en"}, lambda: (e("head", None, head), e("body", None, body)))

        assert b.build() == (
            '<!doctype html><html lang="en"><head><meta charset="utf-8"><title>Posts</title>'
            '</head><body><h1 class="title">Posts</h1><h2>Post0</h2><h2>Post1</h2></body></html>'
        )

    def test_multiple_children(self) -> None:
        b = Builder()
        b.element("p", None, "a", 1, None, ["b", 2.5], E("br"))
        assert b.build() == "<p>a1b2.5<br></p>"

    def test_no_whitespace_inserted(self) -> None:
        b = Builder()
        b.element("ul", None, E("li", None, " a "), E("li", None, "b"))
        assert b.build() == "<ul><li> a </li><li>b</li></ul>"

    def test_aliases(self) -> None:
        b = Builder()
        b.e("b", None, "x")
        b.f("y", 1)
        b.c("z")
        b.t("<")
        assert b.build() == "<b>x</b>y1z&lt;"


class TestVoidElements:
    """Void elements never receive a closing tag."""

    @pytest.mark.parametrize("tag", ["area", "base", "br", "col", "embed", "hr", "img", "input",
                                     "link", "meta", "param", "source", "track", "wbr"])
    def test_default_void(self, tag: str) -> None:
        b = Builder()
        b.element(tag, [("class", "x")])
        assert b.build() == f'<{tag} class="x">'

    def test_void_with_children_still_unclosed(self) -> None:
        b = Builder()
        b.element("br", None, "text")
        assert b.build() == "<br>text"

    def test_explicit_end_is_noop(self) -> None:
        b = Builder()
        b.end("img")
        assert b.build() == ""

    def test_custom_void_registry(self) -> None:
        config = MarkupConfig.html5()
        config.void_elements.add("x-icon").remove("br")
        b = Builder(config=config)
        b.element("x-icon")
        b.element("br")
        assert b.build() == "<x-icon><br></br>"


class TestBeginEnd:
    def test_begin_end(self) -> None:
        b = Builder()
        b.begin("div", [("id", "main")])
        b.write_text("x")
        b.end("div")
        assert b.build() == '<div id="main">x</div>'

    def test_begin_without_attrs(self) -> None:
        b = Builder()
        b.begin("svg")
        assert b.build() == "<svg>"

    @pytest.mark.parametrize("tag", ["a b", "a<", "a>", 'a"', "a=", "a\n", "a\t"])
    def test_invalid_tag_raises(self, tag: str) -> None:
        with pytest.raises(InvalidNameError, match="invalid tag name") as exc_info:
            Builder().begin(tag)
        assert exc_info.value.kind == "tag"
        assert exc_info.value.name == tag
        with pytest.raises(InvalidNameError):
            Builder().end(tag)

    def test_invalid_attribute_in_element(self) -> None:
        with pytest.raises(InvalidNameError, match="invalid attribute name"):
            Builder().element("div", [("on click", "x")])

    def test_non_ascii_tag_allowed(self) -> None:
        b = Builder()
        b.element("книга", None, "x")
        assert b.build() == "<книга>x</книга>"


class TestAttributes:
    def test_attr(self) -> None:
        b = Builder()
        b.attr(Attr("class", '<one>&"</one>'))
        assert b.build() == ' class="<one>&amp;&quot;</one>"'

    def test_attrs(self) -> None:
        b = Builder()
        b.attrs(Attr("class", '<one>&"</one>'), ("style", '<two>&"</two>'))
        assert b.build() == ' class="<one>&amp;&quot;</one>" style="<two>&amp;&quot;</two>"'

    def test_boolean_attributes(self) -> None:
        b = Builder()
        b.element("button", Attrs([("disabled", "false"), ("type", "submit")]), "Go")
        b.element("button", Attrs([("disabled", "true")]), "Stop")
        assert b.build() == '<button type="submit">Go</button><button disabled="">Stop</button>'

    def test_mapping_attrs(self) -> None:
        b = Builder()
        b.element("a", {"href": "/a?x=1&y=2"}, "link")
        assert b.build() == '<a href="/a?x=1&amp;y=2">link</a>'

    def test_single_pair_attrs(self) -> None:
        b = Builder()
        b.element("a", ("href", "/x"), "home")
        assert b.build() == '<a href="/x">home</a>'


class TestLowLevelWrites:
    def test_escape_and_raw(self) -> None:
        b = Builder()
        b.write_text('<one>&"</one>')
        b.write_raw("<hr>")
        b.write_text_bytes(b'<one>&"</one>')
        b.write_raw_bytes(b"<br>")
        assert b.build() == (
            '&lt;one&gt;&amp;"&lt;/one&gt;<hr>&lt;one&gt;&amp;"&lt;/one&gt;<br>'
        )


class TestOutput:
    def test_prefix(self) -> None:
        assert Builder(DOCTYPE).build() == "<!doctype html>"
        assert Builder(b"<?xml?>").build() == "<?xml?>"

    def test_str_and_bytes(self) -> None:
        b = Builder()
        b.element("div", None, "hello world!")
        assert str(b) == "<div>hello world!</div>"
        assert bytes(b) == b"<div>hello world!</div>"
        assert b.to_bytes() == b"<div>hello world!</div>"

    def test_utf8_output(self) -> None:
        b = Builder()
        b.element("span", [("aria-hidden", "true")], "🔥")
        assert b.to_bytes() == '<span aria-hidden="true">🔥</span>'.encode("utf-8")

    def test_len(self) -> None:
        b = Builder()
        assert len(b) == 0
        assert not b
        b.element("p")
        assert len(b) == len("<p></p>")
        assert b

    def test_render_into_other_builder(self) -> None:
        inner = Builder()
        inner.element("b", None, "x")
        outer = Builder()
        outer.element("p", None, inner)
        assert outer.build() == "<p><b>x</b></p>"

    def test_repr(self) -> None:
        b = Builder()
        b.element("i")
        assert repr(b) == "Builder('<i></i>')"


class TestWith:
    def test_with(self) -> None:
        b = Builder(DOCTYPE).with_(lambda e: e("html", [("lang", "en")]))
        assert b.build() == '<!doctype html><html lang="en"></html>'

    def test_build_with(self) -> None:
        b = Builder.build_with(lambda e: e("span", [("aria-hidden", "true")], "x"))
        assert b.build() == '<span aria-hidden="true">x</span>'


class TestConfigSelection:
    def test_defaults_to_context_config(self) -> None:
        config = MarkupConfig.html5()
        with markup_config_context(config):
            b = Builder()
        assert b.config is config

    def test_explicit_config_wins(self) -> None:
        config = MarkupConfig.html5()
        with markup_config_context(MarkupConfig.html5()):
            b = Builder(config=config)
        assert b.config is config

    def test_config_fixed_at_construction(self) -> None:
        """Leaving a config context does not change an existing builder."""
        config = MarkupConfig.from_dict({"void_elements": []})
        with markup_config_context(config):
            b = Builder()
        b.element("br")
        assert b.build() == "<br></br>"
