"""ContextVar-based scan configuration for mdscan.

Provides thread-local configuration using Python's ContextVars (PEP 567).
Only the entity codec reads configuration; the cursor scanners have no
tunable behavior.

Usage:
    from mdscan.config import ScanConfig, scan_config_context
    from mdscan.entities import unescape

    with scan_config_context(ScanConfig(strict_entities=True)):
        unescape(text)  # raises MalformedEntityError on "&#xZZ;"

"""

from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class ScanConfig:
    """Immutable scan configuration.

    Attributes:
        strict_entities: Raise MalformedEntityError for numeric references
            whose payload is not a valid code point, instead of leaving the
            span untouched
        keep_unknown_entities: Pass unrecognized named entities through
            unchanged instead of dropping them

    """

    strict_entities: bool = False
    keep_unknown_entities: bool = False

    @classmethod
    def from_dict(cls, config_dict: dict) -> "ScanConfig":
        """Create ScanConfig from dictionary.

        Only includes keys that are valid ScanConfig fields; unknown keys
        are silently ignored.

        Example:
            >>> config = ScanConfig.from_dict({
            ...     "strict_entities": True,
            ...     "unknown_key": "ignored",
            ... })
            >>> config.strict_entities
            True

        """
        valid_fields = {f.name for f in cls.__dataclass_fields__.values()}
        filtered = {k: v for k, v in config_dict.items() if k in valid_fields}
        return cls(**filtered)


# Module-level default config (reused, never recreated)
_DEFAULT_CONFIG: ScanConfig = ScanConfig()

_scan_config: ContextVar[ScanConfig] = ContextVar(
    "scan_config",
    default=_DEFAULT_CONFIG,
)


def get_scan_config() -> ScanConfig:
    """Get current scan configuration (thread-local)."""
    return _scan_config.get()


def set_scan_config(config: ScanConfig) -> None:
    """Set scan configuration for current context."""
    _scan_config.set(config)


def reset_scan_config() -> None:
    """Reset to the module-level default configuration."""
    _scan_config.set(_DEFAULT_CONFIG)


@contextmanager
def scan_config_context(config: ScanConfig) -> Iterator[None]:
    """Context manager for temporary config changes.

    Properly restores the previous config even if an exception is raised.

    Example:
        >>> from mdscan.entities import unescape
        >>> with scan_config_context(ScanConfig(keep_unknown_entities=True)):
        ...     unescape("&nbsp;")
        '&nbsp;'

    """
    previous = _scan_config.get()
    _scan_config.set(config)
    try:
        yield
    finally:
        _scan_config.set(previous)


__all__ = [
    "ScanConfig",
    "get_scan_config",
    "set_scan_config",
    "reset_scan_config",
    "scan_config_context",
]
