"""
tagsmith — HTML/XML markup as plain Python calls

Write markup with ordinary Python: conditionals, loops and functions
instead of a template language. Output is escaped by context (attribute
values vs element text), boolean attributes are normalized, void elements
never get a closing tag. Zero runtime dependencies.

Quick Start:
    >>> from tagsmith import DOCTYPE, Builder
    >>> b = Builder(DOCTYPE)
    >>> E = b.element
    >>> posts = ["Post0", "Post1"]
    >>> E("html", {"lang": "en"}, lambda: E("body", None, lambda: [
    ...     E("h2", None, post) for post in posts
    ... ]))
    >>> print(b)
    <!doctype html><html lang="en"><body><h2>Post0</h2><h2>Post1</h2></body></html>

    >>> # Or build a tree of Element values and render it later
    >>> from tagsmith import E, F
    >>> F(E("input", {"type": "checkbox", "checked": "true"})).build()
    '<input type="checkbox" checked="">'

Pre-escaped markup:
    >>> from tagsmith import Raw
    >>> F(E("div", None, Raw("<script>alert('hacked!')</script>"))).build()
    "<div><script>alert('hacked!')</script></div>"

Registries:
    ``BOOL`` and ``VOID`` are the process-wide boolean-attribute and
    void-element sets. Use ``MarkupConfig`` with ``markup_config_context``
    or ``Builder(config=...)`` for isolated registries.
"""

from tagsmith.attributes import EMPTY_ATTRS, Attr, Attrs, attrs
from tagsmith.builder import DOCTYPE, Builder
from tagsmith.config import (
    BOOL,
    VOID,
    MarkupConfig,
    get_default_config,
    get_markup_config,
    markup_config_context,
    reset_markup_config,
    set_markup_config,
)
from tagsmith.element import E, Element, F
from tagsmith.encoding import format_scalar, write_child
from tagsmith.errors import AttrPairsError, InvalidNameError, RenderError, TagsmithError
from tagsmith.markup import Raw, RawBytes, Renderable
from tagsmith.registry import HTML_BOOLEAN_ATTRIBUTES, HTML_VOID_ELEMENTS, NameSet
from tagsmith.validation import is_valid_name
from tagsmith.writers import AttrWriter, RawWriter, TextWriter, escape_attr, escape_text

__version__ = "0.1.0"

__all__ = [
    # Builder
    "DOCTYPE",
    "Builder",
    "E",
    "Element",
    "F",
    # Attributes
    "EMPTY_ATTRS",
    "Attr",
    "Attrs",
    "attrs",
    # Children
    "Raw",
    "RawBytes",
    "Renderable",
    "format_scalar",
    "write_child",
    # Writers
    "AttrWriter",
    "RawWriter",
    "TextWriter",
    "escape_attr",
    "escape_text",
    # Configuration
    "BOOL",
    "VOID",
    "HTML_BOOLEAN_ATTRIBUTES",
    "HTML_VOID_ELEMENTS",
    "MarkupConfig",
    "NameSet",
    "get_default_config",
    "get_markup_config",
    "markup_config_context",
    "reset_markup_config",
    "set_markup_config",
    "is_valid_name",
    # Errors
    "AttrPairsError",
    "InvalidNameError",
    "RenderError",
    "TagsmithError",
    # Metadata
    "__version__",
]
