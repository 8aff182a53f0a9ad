"""ContextVar-based format configuration for rustgen.

Provides context-local configuration using Python's ContextVars (PEP 567).
A Formatter snapshots the active config when it is created, so a config
change never affects a render that is already in progress.

Thread Safety:
    ContextVars are thread-local by design. Each thread has independent storage,
    so no locks are needed and race conditions are impossible.

Usage:
    # Explicit config for one render
    from rustgen import FormatConfig, to_string

    source = to_string(scope, config=FormatConfig(indent=2))

    # Or use the context manager
    with format_config_context(FormatConfig(indent=2)):
        source = to_string(scope)

"""

from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass

# Spaces added per nesting level.
DEFAULT_INDENT = 4


@dataclass(frozen=True, slots=True)
class FormatConfig:
    """Immutable format configuration.

    Attributes:
        indent: Number of spaces per indentation level

    """

    indent: int = DEFAULT_INDENT

    def __post_init__(self) -> None:
        if self.indent < 0:
            raise ValueError(f"indent must be non-negative, got {self.indent}")

    @classmethod
    def from_dict(cls, config_dict: dict) -> "FormatConfig":
        """Create FormatConfig from dictionary.

        Only includes keys that are valid FormatConfig fields; unknown keys
        are silently ignored.

        Args:
            config_dict: Dictionary with config values. Keys should match
                FormatConfig attribute names.

        Returns:
            New FormatConfig instance with values from dict.

        Example:
            >>> config = FormatConfig.from_dict({"indent": 2, "unknown_key": 1})
            >>> config.indent
            2

        """
        valid_fields = {f.name for f in cls.__dataclass_fields__.values()}
        filtered = {k: v for k, v in config_dict.items() if k in valid_fields}
        return cls(**filtered)


# Module-level default config (reused, never recreated)
_DEFAULT_CONFIG: FormatConfig = FormatConfig()

_format_config: ContextVar[FormatConfig] = ContextVar(
    "format_config",
    default=_DEFAULT_CONFIG,
)


def get_format_config() -> FormatConfig:
    """Get current format configuration (context-local)."""
    return _format_config.get()


def set_format_config(config: FormatConfig) -> None:
    """Set format configuration for current context.

    Args:
        config: FormatConfig instance to use for this context.

    """
    _format_config.set(config)


def reset_format_config() -> None:
    """Reset to default configuration."""
    _format_config.set(_DEFAULT_CONFIG)


@contextmanager
def format_config_context(config: FormatConfig) -> Iterator[None]:
    """Context manager for temporary config changes.

    Args:
        config: FormatConfig to use within the context.

    Yields:
        None

    Example:
        >>> with format_config_context(FormatConfig(indent=2)):
        ...     source = to_string(scope)
        >>> # Automatically reset to previous config

    Thread Safety:
        Only affects the current thread's context. Properly restores previous
        config even if an exception is raised.

    """
    previous = _format_config.get()
    _format_config.set(config)
    try:
        yield
    finally:
        _format_config.set(previous)


__all__ = [
    "DEFAULT_INDENT",
    "FormatConfig",
    "format_config_context",
    "get_format_config",
    "reset_format_config",
    "set_format_config",
]
