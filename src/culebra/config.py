"""ContextVar-based conversion configuration for Culebra.

Provides context-local configuration using Python's ContextVars (PEP 567).
Config is usually passed explicitly to ``convert()`` or ``Converter``; when it
is not, the config active in the current context is used.

Thread Safety:
    ContextVars are thread-local by design. Each thread has independent storage,
    so no locks are needed and two conversions never share configuration state.

Usage:
    # Explicit
    from culebra import convert, ConvertConfig

    convert("let x = 1", config=ConvertConfig(indent_unit="    "))

    # Or use the context manager
    with convert_config_context(ConvertConfig(strict=True)):
        convert("let ok = true")  # raises UnsupportedConstruct

"""

from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass
from typing import Literal, TypeAlias

SourceType: TypeAlias = Literal["script", "module"]


@dataclass(frozen=True, slots=True)
class ConvertConfig:
    """Immutable conversion configuration.

    Frozen dataclass ensures thread-safety (immutable after creation).

    Attributes:
        indent_unit: Text of one indentation level in the output
        source_type: Parse the input as a classic script or as an ES module
        strict: Raise on literals and operators outside the portable subset
            instead of forwarding them verbatim with a warning
        source_file: Name used in error locations (optional)

    """

    indent_unit: str = "  "
    source_type: SourceType = "script"
    strict: bool = False
    source_file: str | None = None

    def __post_init__(self) -> None:
        if not self.indent_unit or self.indent_unit.strip(" \t"):
            msg = f"indent_unit must be non-empty whitespace, got {self.indent_unit!r}"
            raise ValueError(msg)
        if self.source_type not in ("script", "module"):
            msg = f"source_type must be 'script' or 'module', got {self.source_type!r}"
            raise ValueError(msg)

    @classmethod
    def from_dict(cls, config_dict: dict) -> "ConvertConfig":
        """Create ConvertConfig from dictionary.

        Only includes keys that are valid ConvertConfig fields; unknown keys
        are silently ignored.

        Args:
            config_dict: Dictionary with config values. Keys should match
                ConvertConfig attribute names.

        Returns:
            New ConvertConfig instance with values from dict.

        Example:
            >>> config = ConvertConfig.from_dict({
            ...     "strict": True,
            ...     "unknown_key": "ignored",
            ... })
            >>> config.strict
            True

        """
        valid_fields = {f.name for f in cls.__dataclass_fields__.values()}
        filtered = {k: v for k, v in config_dict.items() if k in valid_fields}
        return cls(**filtered)


# Module-level default config (reused, never recreated)
_DEFAULT_CONFIG: ConvertConfig = ConvertConfig()

_convert_config: ContextVar[ConvertConfig] = ContextVar(
    "convert_config",
    default=_DEFAULT_CONFIG,
)


def get_convert_config() -> ConvertConfig:
    """Get current conversion configuration (context-local)."""
    return _convert_config.get()


def set_convert_config(config: ConvertConfig) -> None:
    """Set conversion configuration for current context.

    Only affects the current thread's context. Other threads are unaffected.

    """
    _convert_config.set(config)


def reset_convert_config() -> None:
    """Reset to default configuration."""
    _convert_config.set(_DEFAULT_CONFIG)


@contextmanager
def convert_config_context(config: ConvertConfig) -> Iterator[None]:
    """Context manager for temporary config changes.

    Useful for tests and isolated conversions. Restores the previous
    config even if an exception is raised.

    Example:
        >>> with convert_config_context(ConvertConfig(indent_unit="    ")):
        ...     text = convert("if (a) { b() }")
        >>> # Automatically reset to previous config

    """
    previous = _convert_config.get()
    _convert_config.set(config)
    try:
        yield
    finally:
        _convert_config.set(previous)


__all__ = [
    "ConvertConfig",
    "SourceType",
    "get_convert_config",
    "set_convert_config",
    "reset_convert_config",
    "convert_config_context",
]
