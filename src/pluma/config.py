"""ContextVar-based parse configuration for Pluma.

Provides context-local configuration using Python's ContextVars (PEP 567).
Config is set once per parse() call and read by the lexer and parser.

Thread Safety:
    ContextVars are context-local by design. Each thread has independent
    storage, so concurrent parses never see each other's configuration.

Usage:
    from pluma.config import ParseConfig, parse_config_context
    from pluma.parser import Parser

    with parse_config_context(ParseConfig(source_file="notes.md")):
        doc = Parser().parse(source)

"""

from collections.abc import Callable, Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class ParseConfig:
    """Immutable parse configuration.

    Attributes:
        text_transformer: Optional callback applied to plain paragraph lines
            before they are split into words
        source_file: Optional source path, used in error messages

    """

    text_transformer: Callable[[str], str] | None = None
    source_file: str | None = None

    @classmethod
    def from_dict(cls, config_dict: dict) -> "ParseConfig":
        """Create ParseConfig from dictionary.

        Only includes keys that are valid ParseConfig fields; unknown keys
        are silently ignored.

        Example:
            >>> config = ParseConfig.from_dict({
            ...     "source_file": "README.md",
            ...     "unknown_key": "ignored",
            ... })
            >>> config.source_file
            'README.md'

        """
        valid_fields = {f.name for f in cls.__dataclass_fields__.values()}
        filtered = {k: v for k, v in config_dict.items() if k in valid_fields}
        return cls(**filtered)


_DEFAULT_CONFIG: ParseConfig = ParseConfig()

_parse_config: ContextVar[ParseConfig] = ContextVar(
    "pluma_parse_config",
    default=_DEFAULT_CONFIG,
)


def get_parse_config() -> ParseConfig:
    """Get current parse configuration (context-local)."""
    return _parse_config.get()


def set_parse_config(config: ParseConfig) -> None:
    """Set parse configuration for current context."""
    _parse_config.set(config)


def reset_parse_config() -> None:
    """Reset to default configuration.

    Reuses the module-level _DEFAULT_CONFIG singleton.
    """
    _parse_config.set(_DEFAULT_CONFIG)


@contextmanager
def parse_config_context(config: ParseConfig) -> Iterator[None]:
    """Context manager for temporary config changes.

    Restores the previous config even if an exception is raised.

    Example:
        >>> with parse_config_context(ParseConfig(source_file="a.md")):
        ...     get_parse_config().source_file
        'a.md'

    """
    previous = _parse_config.get()
    _parse_config.set(config)
    try:
        yield
    finally:
        _parse_config.set(previous)


__all__ = [
    "ParseConfig",
    "get_parse_config",
    "set_parse_config",
    "reset_parse_config",
    "parse_config_context",
]
