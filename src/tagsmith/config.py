"""ContextVar-based markup configuration for tagsmith.

MarkupConfig bundles the registries consulted while encoding: which
attributes are boolean and which elements are void. A Builder takes its
config at construction; when none is given it uses the config active in
the current context.

The default config holds the process-wide registries ``BOOL`` and ``VOID``.
Mutating them affects every builder that uses the default config.

Thread Safety:
    ContextVars are thread-local by design. Each thread (and asyncio task)
    sees its own active config. The NameSets inside a config are mutable and
    unsynchronized; finish customizing them before concurrent use.

Usage:
    # Register a custom element globally
    from tagsmith.config import VOID
    VOID.add("x-icon")

    # Isolated registries for one render
    config = MarkupConfig.html5()
    config.void_elements.add("x-icon")
    with markup_config_context(config):
        html = F(E("x-icon", None)).build()

"""

from collections.abc import Iterable, Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass, field

from tagsmith.registry import HTML_BOOLEAN_ATTRIBUTES, HTML_VOID_ELEMENTS, NameSet


def _default_boolean_attrs() -> NameSet:
    return NameSet(HTML_BOOLEAN_ATTRIBUTES, label="boolean attribute")


def _default_void_elements() -> NameSet:
    return NameSet(HTML_VOID_ELEMENTS, label="void element")


@dataclass(frozen=True, slots=True)
class MarkupConfig:
    """Registries consulted during encoding.

    The dataclass is frozen, so a config always refers to the same two
    NameSets; the sets themselves may be extended or trimmed.

    Attributes:
        boolean_attrs: Attribute names whose value is normalized; a value
            of ``"false"`` drops the attribute, anything else renders
            ``name=""``
        void_elements: Tag names that never receive a closing tag

    """

    boolean_attrs: NameSet = field(default_factory=_default_boolean_attrs)
    void_elements: NameSet = field(default_factory=_default_void_elements)

    @classmethod
    def html5(cls) -> "MarkupConfig":
        """Create a config with fresh copies of the HTML5 default registries."""
        return cls()

    @classmethod
    def from_dict(cls, config_dict: dict) -> "MarkupConfig":
        """Create MarkupConfig from dictionary.

        Values may be NameSet instances or any iterable of names. Unknown
        keys are silently ignored.

        Args:
            config_dict: Dictionary keyed by MarkupConfig attribute names.

        Returns:
            New MarkupConfig instance.

        Example:
            >>> config = MarkupConfig.from_dict({
            ...     "void_elements": ["br", "hr"],
            ...     "unknown_key": "ignored",
            ... })
            >>> config.void_elements.has("img")
            False

        """
        labels = {
            "boolean_attrs": "boolean attribute",
            "void_elements": "void element",
        }
        filtered: dict[str, NameSet] = {}
        for key, label in labels.items():
            if key not in config_dict:
                continue
            value = config_dict[key]
            if not isinstance(value, NameSet):
                value = NameSet(_iter_names(value), label=label)
            filtered[key] = value
        return cls(**filtered)

    def copy(self) -> "MarkupConfig":
        """Return a config with independent copies of both registries."""
        return MarkupConfig(
            boolean_attrs=self.boolean_attrs.copy(),
            void_elements=self.void_elements.copy(),
        )


def _iter_names(value: Iterable[str] | str) -> Iterable[str]:
    # A bare string would otherwise register each of its characters.
    if isinstance(value, str):
        return (value,)
    return value


# Process-wide registries, shared by the default config.
BOOL: NameSet = _default_boolean_attrs()
VOID: NameSet = _default_void_elements()

_DEFAULT_CONFIG: MarkupConfig = MarkupConfig(boolean_attrs=BOOL, void_elements=VOID)

_markup_config: ContextVar[MarkupConfig] = ContextVar(
    "markup_config",
    default=_DEFAULT_CONFIG,
)


def get_default_config() -> MarkupConfig:
    """Return the process-wide default config (holding ``BOOL`` and ``VOID``)."""
    return _DEFAULT_CONFIG


def get_markup_config() -> MarkupConfig:
    """Get current markup configuration (thread-local).

    Returns:
        The active MarkupConfig for this thread/context.

    """
    return _markup_config.get()


def set_markup_config(config: MarkupConfig) -> None:
    """Set markup configuration for current context.

    Args:
        config: MarkupConfig instance to use for this context.

    """
    _markup_config.set(config)


def reset_markup_config() -> None:
    """Reset the current context to the process-wide default config."""
    _markup_config.set(_DEFAULT_CONFIG)


@contextmanager
def markup_config_context(config: MarkupConfig) -> Iterator[None]:
    """Context manager for temporary config changes.

    Builders created inside the block pick up ``config``. Restores the
    previous config on exit, even if an exception is raised.

    Args:
        config: MarkupConfig to use within the context.

    Yields:
        None

    """
    previous = _markup_config.get()
    _markup_config.set(config)
    try:
        yield
    finally:
        _markup_config.set(previous)


__all__ = [
    "BOOL",
    "VOID",
    "MarkupConfig",
    "get_default_config",
    "get_markup_config",
    "markup_config_context",
    "reset_markup_config",
    "set_markup_config",
]
