"""Library configuration: CopyMode, RustypeConfig, and initialization."""

from __future__ import annotations

import os
from dataclasses import dataclass
from enum import Enum

from rustype._logging import configure_logging, emit

__all__ = [
    'COPY_MODE_ENV',
    'CopyMode',
    'RustypeConfig',
    'get_config',
    'init',
    'reset',
]

COPY_MODE_ENV = 'RUSTYPE_COPY_MODE'


class CopyMode(Enum):
    """How contained values are copied before they reach caller code."""

    DEEP = 'deep'
    SHALLOW = 'shallow'
    NONE = 'none'


@dataclass(frozen=True)
class RustypeConfig:
    """Configuration for rustype.

    Attributes:
        copy_mode: Copy applied to every payload handed out by a combinator.
        log_level: Logging level (e.g., "DEBUG", "INFO"). None = leave logging alone.
    """

    copy_mode: CopyMode = CopyMode.DEEP
    log_level: str | None = None


_config: RustypeConfig | None = None


def _detect_copy_mode() -> CopyMode:
    """Read the copy mode from RUSTYPE_COPY_MODE, defaulting to DEEP."""
    env_mode = os.environ.get(COPY_MODE_ENV, '').strip().lower()
    if not env_mode:
        return CopyMode.DEEP
    try:
        return CopyMode(env_mode)
    except ValueError:
        emit(__name__, 'warning', 'config.unknown_copy_mode', env=COPY_MODE_ENV, value=env_mode, fallback='deep')
        return CopyMode.DEEP


def init(
    copy_mode: CopyMode | str | None = None,
    log_level: str | None = None,
) -> RustypeConfig:
    """Initialize rustype with the given configuration.

    Args:
        copy_mode: Copy strategy for payloads. Read from the environment if None.
            Can be CopyMode enum or string ("deep", "shallow", "none").
        log_level: Logging level ("DEBUG", "INFO", etc.). None = leave logging alone.

    Returns:
        The RustypeConfig that was set.

    Raises:
        ValueError: If ``copy_mode`` is a string that names no CopyMode.

    Example:
        ```python
        from rustype import init, CopyMode

        init()
        init(copy_mode=CopyMode.SHALLOW, log_level="DEBUG")
        ```
    """
    global _config  # noqa: PLW0603

    if copy_mode is None:
        resolved_mode = _detect_copy_mode()
    elif isinstance(copy_mode, str):
        resolved_mode = CopyMode(copy_mode.lower())
    else:
        resolved_mode = copy_mode

    _config = RustypeConfig(copy_mode=resolved_mode, log_level=log_level)

    if log_level is not None:
        configure_logging(log_level)
    emit(__name__, 'debug', 'config.initialized', copy_mode=resolved_mode.value, log_level=log_level)

    return _config


def get_config() -> RustypeConfig:
    """Get the current configuration, initializing from the environment on first use."""
    if _config is None:
        return init()
    return _config


def reset() -> None:
    """Forget the current configuration; the next get_config() re-reads the environment."""
    global _config  # noqa: PLW0603
    _config = None
