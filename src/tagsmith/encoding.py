"""Child encoding engine.

Turns an arbitrary child value into builder writes. The accepted shapes,
checked in this order:

=========================================  ==================================
Child                                      Output
=========================================  ==================================
``None``                                   nothing
``Raw`` / ``RawBytes``                     written as-is
``str``                                    escaped as element text
``bytes`` / ``bytearray`` / ``memoryview`` decoded as UTF-8, escaped
``bool``                                   ``true`` / ``false``
``int`` / ``float``                        canonical decimal form, escaped
``list`` / ``tuple``                       each item, in order
class                                      RenderError
Renderable (``Element``, ``Builder``...)   ``value.render(builder)``
iterator / generator                       each item, in order
``fn()``                                   called; a non-None result is
                                           encoded as a child
``fn(builder)``                            called with the builder; a
                                           non-None result is encoded
other callables                            RenderError
anything else                              ``str(value)``, escaped
=========================================  ==================================

Nested sequences flatten depth-first, left to right, to any depth, and
``None`` items are skipped anywhere in the tree:

    >>> F([10, None, "str", [None, 20]]).build()
    '10str20'

"""

from __future__ import annotations

import inspect
from collections.abc import Callable, Iterator
from typing import TYPE_CHECKING, Any, NoReturn

from tagsmith.errors import RenderError
from tagsmith.markup import Raw, RawBytes, Renderable
from tagsmith.utils.logger import get_logger

if TYPE_CHECKING:
    from tagsmith.builder import Builder

logger = get_logger(__name__)

_EXHAUSTED = object()

_POSITIONAL = (
    inspect.Parameter.POSITIONAL_ONLY,
    inspect.Parameter.POSITIONAL_OR_KEYWORD,
)


def format_scalar(value: bool | int | float) -> str:
    """Canonical minimal text for a number or boolean.

    Booleans render lowercase, integers as plain decimal, floats in their
    shortest round-trip form without a redundant ``.0``.

    Examples:
        >>> format_scalar(True)
        'true'
        >>> format_scalar(2.50)
        '2.5'
        >>> format_scalar(3.0)
        '3'
        >>> format_scalar(1e22)
        '1e+22'
    """
    if value is True:
        return "true"
    if value is False:
        return "false"
    if isinstance(value, int):
        # int.__repr__ keeps IntEnum members numeric.
        return int.__repr__(value)
    text = float.__repr__(value)
    if text.endswith(".0"):
        return text[:-2]
    return text


def callback_arity(fn: Callable[..., Any]) -> int | None:
    """Number of required positional parameters of ``fn``.

    Returns None when the signature cannot be inspected or has required
    keyword-only parameters, neither of which the engine can satisfy.
    """
    try:
        sig = inspect.signature(fn)
    except (TypeError, ValueError):
        return None

    required = 0
    for param in sig.parameters.values():
        if param.default is not inspect.Parameter.empty:
            continue
        if param.kind in _POSITIONAL:
            required += 1
        elif param.kind is inspect.Parameter.KEYWORD_ONLY:
            return None
    return required


def write_child(builder: Builder, value: Any) -> None:
    """Encode one child value into ``builder``.

    Sequences and iterators are walked with an explicit stack, so nesting
    depth is not bounded by the interpreter's recursion limit.

    Raises:
        RenderError: For classes and callables with an unsupported signature
    """
    stack: list[Iterator[Any]] = [iter((value,))]
    while stack:
        value = next(stack[-1], _EXHAUSTED)
        if value is _EXHAUSTED:
            stack.pop()
            continue
        match value:
            case None:
                pass
            case Raw():
                builder.write_raw(value)
            case RawBytes():
                builder.write_raw_bytes(value)
            case str():
                builder.write_text(value)
            case bytes() | bytearray() | memoryview():
                builder.write_text_bytes(value)
            case bool() | int() | float():
                builder.write_text(format_scalar(value))
            case list() | tuple():
                stack.append(iter(value))
            case type():
                _reject(value, "classes are not renderable")
            case Renderable():
                value.render(builder)
            case Iterator():
                stack.append(value)
            case _ if callable(value):
                _write_callback(builder, value)
            case _:
                write_unknown(builder, value)


def write_children(builder: Builder, values: Iterator[Any] | tuple[Any, ...] | list[Any]) -> None:
    """Encode several children in order."""
    for value in values:
        write_child(builder, value)


def write_unknown(builder: Builder, value: Any) -> None:
    """Stringify ``value`` and write it escaped, bypassing the shape rules.

    ``None`` is skipped. Classes and callables have no meaningful text form
    and raise RenderError.
    """
    if value is None:
        return
    if isinstance(value, type) or callable(value):
        _reject(value, "callables and classes have no text form")
    logger.debug("Stringifying unrecognized child of type %s", type(value).__name__)
    builder.write_text(str(value))


def _write_callback(builder: Builder, fn: Callable[..., Any]) -> None:
    arity = callback_arity(fn)
    if arity == 0:
        result = fn()
    elif arity == 1:
        result = fn(builder)
    else:
        _reject(fn, "expected a callable taking no arguments or the builder")
    if result is not None:
        write_child(builder, result)


def _reject(value: Any, reason: str) -> NoReturn:
    logger.debug("Rejecting child of type %s: %s", type(value).__name__, reason)
    raise RenderError(value, reason)


__all__ = [
    "callback_arity",
    "format_scalar",
    "write_child",
    "write_children",
    "write_unknown",
]
