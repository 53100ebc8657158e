"""Exception classes for tagsmith.

All of these signal programming errors in the calling code: a bad tag or
attribute name, a child value that cannot be rendered, or a malformed
attribute pair list. They are raised out of the encoder as-is; a builder
that raised mid-render holds partial output and should be discarded.
"""

from __future__ import annotations

from typing import Any


class TagsmithError(Exception):
    """Base exception for all tagsmith errors.
    
    Subclass this for specific error categories.
    """

    pass


class InvalidNameError(TagsmithError, ValueError):
    """Tag or attribute name contains forbidden characters.
    
    Raised while encoding, when a name contains whitespace or any of
    ``<``, ``>``, ``"``, ``=``.
    """

    def __init__(self, kind: str, name: str) -> None:
        """Initialize invalid name error.
        
        Args:
            kind: What was being named ("tag" or "attribute")
            name: The rejected name
        """
        self.kind = kind
        self.name = name
        super().__init__(f"invalid {kind} name {name!r}")


class RenderError(TagsmithError, TypeError):
    """Child value that cannot be rendered.
    
    Raised for classes and for callables whose signature matches neither
    a zero-argument callback nor a callback taking the builder.
    """

    def __init__(self, value: Any, reason: str | None = None) -> None:
        """Initialize render error.
        
        Args:
            value: The offending child value
            reason: Optional detail appended to the message
        """
        self.value = value
        message = f"can't render {type(value).__name__} {value!r}"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)


class AttrPairsError(TagsmithError, ValueError):
    """Flat attribute list with an odd number of strings."""

    def __init__(self, count: int) -> None:
        self.count = count
        super().__init__(
            f"expected an even number of attribute name/value strings, got {count}"
        )
