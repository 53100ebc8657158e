"""Pre-escaped markers and the Renderable protocol.

``Raw`` and ``RawBytes`` wrap markup that is already safe. When passed as
children they are written as-is, without escaping:

    >>> from tagsmith import F, Raw
    >>> F("<b>", Raw("<b>")).build()
    '&lt;b&gt;<b>'

Anything with a ``render(builder)`` method is Renderable and may be passed
as a child; the engine calls ``render`` with the active builder. Element
and Builder are both Renderable.

"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from tagsmith.builder import Builder


class Raw(str):
    """Pre-escaped markup text. Written without escaping."""

    __slots__ = ()

    def __repr__(self) -> str:
        return f"Raw({str.__repr__(self)})"


class RawBytes(bytes):
    """Pre-escaped UTF-8 markup bytes. Written without escaping."""

    __slots__ = ()

    def __repr__(self) -> str:
        return f"RawBytes({bytes.__repr__(self)})"


@runtime_checkable
class Renderable(Protocol):
    """Protocol for values that render themselves into a builder.

    Example:
        >>> class Badge:
        ...     def __init__(self, label: str) -> None:
        ...         self.label = label
        ...     def render(self, builder: Builder) -> None:
        ...         builder.element("span", [("class", "badge")], self.label)
        >>> F(Badge("new")).build()
        '<span class="badge">new</span>'

    """

    def render(self, builder: Builder) -> None:
        """Write this value's markup into ``builder``."""
        ...


__all__ = ["Raw", "RawBytes", "Renderable"]
