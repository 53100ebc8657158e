"""Attribute model.

Attr is a frozen name/value pair; Attrs is an immutable ordered collection
of them. Both are values: every modifier returns a new object.

Encoding rules (see ``Attr.write_to``):

- ``Attr("", "")`` is the absent sentinel and produces no output.
- The name is validated; an invalid name raises InvalidNameError.
- Boolean attributes (``MarkupConfig.boolean_attrs``): a value of
  ``"false"`` omits the attribute, any other value renders ``name=""``.
- Otherwise the output is `` name="value"`` with the value escaped for
  attribute context.

Example:
    >>> a = Attrs([("class", "btn")]).add("class", "primary").set("id", "go")
    >>> str(a)
    ' class="btn primary" id="go"'

"""

from __future__ import annotations

from collections.abc import Container, Iterable, Mapping
from dataclasses import dataclass, replace
from typing import Any, SupportsIndex

from tagsmith.config import get_markup_config
from tagsmith.errors import AttrPairsError
from tagsmith.validation import validate_attr_name
from tagsmith.writers import AttrWriter


@dataclass(frozen=True, slots=True)
class Attr:
    """Single HTML/XML attribute.

    Attributes:
        name: Attribute name, validated when encoded
        value: Attribute value, escaped and quoted when encoded

    """

    name: str = ""
    value: str = ""

    def is_empty(self) -> bool:
        """True for the absent sentinel ``Attr("", "")``."""
        return not self.name and not self.value

    def with_name(self, name: str) -> Attr:
        """Return a copy with a different name."""
        return replace(self, name=name)

    def with_value(self, value: str) -> Attr:
        """Return a copy with a different value."""
        return replace(self, value=value)

    def add(self, value: str) -> Attr:
        """Return a copy with ``value`` appended, space-separated.

        An empty ``value`` leaves the attribute unchanged; an empty
        existing value is replaced outright.
        """
        if not value:
            return self
        if not self.value:
            return replace(self, value=value)
        return replace(self, value=f"{self.value} {value}")

    def write_to(self, out: AttrWriter, boolean_attrs: Container[str]) -> None:
        """Encode as `` name="value"`` into ``out``.

        Args:
            out: Attribute-context writer receiving the output
            boolean_attrs: Names treated as boolean attributes

        Raises:
            InvalidNameError: If the name contains forbidden characters
        """
        if self.is_empty():
            return

        name, value = self.name, self.value
        validate_attr_name(name)

        if name in boolean_attrs:
            if value == "false":
                return
            value = ""

        out.write_raw(" ")
        out.write_raw(name)
        out.write_raw('="')
        out.write_str(value)
        out.write_raw('"')

    def __str__(self) -> str:
        """Encoded form, for debugging. Uses the active config."""
        out = AttrWriter()
        self.write_to(out, get_markup_config().boolean_attrs)
        return out.build()


def as_attr(item: Attr | tuple[str, str]) -> Attr:
    """Return ``item`` as an Attr, converting a ``(name, value)`` pair.

    Raises:
        TypeError: If ``item`` is neither an Attr nor a two-item pair
    """
    if isinstance(item, Attr):
        return item
    if isinstance(item, (str, bytes)):
        raise TypeError(f"expected an Attr or a (name, value) pair, got {item!r}")
    try:
        name, value = item
    except (TypeError, ValueError):
        raise TypeError(f"expected an Attr or a (name, value) pair, got {item!r}") from None
    return Attr(name, value)


def _is_pair(value: Any) -> bool:
    return (
        isinstance(value, tuple)
        and len(value) == 2
        and isinstance(value[0], str)
        and isinstance(value[1], str)
    )


class Attrs(tuple[Attr, ...]):
    """Ordered, immutable collection of attributes.

    Items may be given as Attr instances or ``(name, value)`` pairs.
    Order is output order; duplicate names are kept unless ``set`` or
    ``add`` is used.

    Usage:
        >>> Attrs([("lang", "en")])
        Attrs([Attr(name='lang', value='en')])
        >>> Attrs.from_pairs("charset", "utf-8")
        Attrs([Attr(name='charset', value='utf-8')])
    """

    __slots__ = ()

    def __new__(cls, items: Iterable[Attr | tuple[str, str]] = ()) -> Attrs:
        return super().__new__(cls, (as_attr(item) for item in items))

    @classmethod
    def from_pairs(cls, *pairs: str) -> Attrs:
        """Build from a flat list of strings: name, value, name, value...

        Raises:
            AttrPairsError: If an odd number of strings is given
        """
        if len(pairs) % 2:
            raise AttrPairsError(len(pairs))
        return cls(zip(pairs[::2], pairs[1::2]))

    @classmethod
    def from_mapping(cls, mapping: Mapping[str, str]) -> Attrs:
        """Build from a mapping, in its iteration order."""
        return cls(mapping.items())

    @classmethod
    def coerce(cls, value: Attrs | Mapping[str, str] | Iterable[Any] | None) -> Attrs:
        """Convert anything accepted as an ``attrs`` argument into Attrs.

        A lone ``(name, value)`` tuple of strings is taken as one attribute.
        """
        if value is None:
            return EMPTY_ATTRS
        if isinstance(value, Attrs):
            return value
        if isinstance(value, Attr):
            return cls((value,))
        if _is_pair(value):
            return cls((value,))
        if isinstance(value, Mapping):
            return cls.from_mapping(value)
        return cls(value)

    def append(self, attr: Attr | tuple[str, str]) -> Attrs:
        """Return a copy with ``attr`` appended."""
        return Attrs((*self, as_attr(attr)))

    def set(self, name: str, value: str) -> Attrs:
        """Return a copy where every attribute named ``name`` has ``value``.

        Appends a new attribute if none matched. An empty name is a no-op.
        """
        return self._apply(name, value, Attr.with_value)

    def add(self, name: str, value: str) -> Attrs:
        """Return a copy where ``value`` is appended to every ``name`` match.

        Values are joined with a space, which suits ``class`` and other
        token-list attributes. Appends a new attribute if none matched.
        An empty name is a no-op.
        """
        return self._apply(name, value, Attr.add)

    def _apply(self, name: str, value: str, op) -> Attrs:
        if not name:
            return self
        found = False
        items: list[Attr] = []
        for attr in self:
            if attr.name == name:
                attr = op(attr, value)
                found = True
            items.append(attr)
        if not found:
            items.append(Attr(name, value))
        return Attrs(items)

    def get(self, name: str, default: str | None = None) -> str | None:
        """Value of the first attribute named ``name``."""
        for attr in self:
            if attr.name == name:
                return attr.value
        return default

    def write_to(self, out: AttrWriter, boolean_attrs: Container[str]) -> None:
        """Encode every attribute in order. See ``Attr.write_to``."""
        for attr in self:
            attr.write_to(out, boolean_attrs)

    def __add__(self, other: Iterable[Attr | tuple[str, str]]) -> Attrs:  # type: ignore[override]
        return Attrs((*self, *(as_attr(item) for item in other)))

    def __getitem__(self, index: SupportsIndex | slice) -> Any:  # type: ignore[override]
        result = super().__getitem__(index)
        if isinstance(index, slice):
            return Attrs(result)
        return result

    def __str__(self) -> str:
        """Encoded form, for debugging. Uses the active config."""
        out = AttrWriter()
        self.write_to(out, get_markup_config().boolean_attrs)
        return out.build()

    def __repr__(self) -> str:
        return f"Attrs({list(self)!r})"


EMPTY_ATTRS = Attrs()


def attrs(*pairs: str) -> Attrs:
    """Shortcut for ``Attrs.from_pairs``.

    Example:
        >>> attrs("type", "checkbox", "checked", "")
        Attrs([Attr(name='type', value='checkbox'), Attr(name='checked', value='')])
    """
    return Attrs.from_pairs(*pairs)


__all__ = ["EMPTY_ATTRS", "Attr", "Attrs", "as_attr", "attrs"]
