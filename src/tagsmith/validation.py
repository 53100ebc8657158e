"""Tag and attribute name sanity checks.

Extremely permissive on purpose: names are rejected only when they contain
characters that would break the surrounding markup (whitespace, ``<``,
``>``, ``"`` or ``=``). Non-ASCII names are allowed so XML vocabularies
work unchanged.

Reference:
    https://www.w3.org/TR/html52/syntax.html#tag-name
"""

from __future__ import annotations

import re
from functools import lru_cache

from tagsmith.errors import InvalidNameError

_FORBIDDEN_RE = re.compile(r'[ \t\n\r\v<>"=]')


@lru_cache(maxsize=1024)
def is_valid_name(name: str) -> bool:
    """Return True if ``name`` may be used as a tag or attribute name."""
    return _FORBIDDEN_RE.search(name) is None


def validate_tag(tag: str) -> None:
    """Raise InvalidNameError if ``tag`` is not a usable tag name."""
    if not is_valid_name(tag):
        raise InvalidNameError("tag", tag)


def validate_attr_name(name: str) -> None:
    """Raise InvalidNameError if ``name`` is not a usable attribute name."""
    if not is_valid_name(name):
        raise InvalidNameError("attribute", name)


__all__ = ["is_valid_name", "validate_attr_name", "validate_tag"]
