"""Library events and their structured logging.

rustype reports a handful of events (see :data:`EVENTS`). Every event is
handed to the registered event hooks. Once :func:`configure_logging` has
run it is also logged through structlog on the ``rustype`` stdlib logger,
which gets its own handler so the host application's root logging is left
alone. Before that, only warnings are written, through plain stdlib logging.

Example:
    ```python
    from rustype import add_event_hook, safe

    caught = []
    add_event_hook(caught.append)

    @safe
    def parse(text: str) -> int:
        return int(text)

    parse('x')
    caught[-1]['event']  # 'safe.caught'
    ```
"""

from __future__ import annotations

import logging
import sys
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from collections.abc import Callable

__all__ = [
    'EVENTS',
    'LIBRARY_LOGGER',
    'add_event_hook',
    'clear_event_hooks',
    'configure_logging',
    'emit',
    'get_logger',
    'remove_event_hook',
    'reset_logging',
]

LIBRARY_LOGGER = 'rustype'

EVENTS: frozenset[str] = frozenset({
    'clone.fallback',
    'config.initialized',
    'config.unknown_copy_mode',
    'safe.caught',
})

type EventHook = Callable[[dict[str, Any]], None]

_event_hooks: list[EventHook] = []
_handler: logging.Handler | None = None


def _pre_chain() -> list[Any]:
    import structlog

    return [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt='iso'),
    ]


def _renderer(json_output: bool) -> Any:
    import structlog

    if json_output:
        return structlog.processors.JSONRenderer(sort_keys=True)
    return structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())


def configure_logging(level: str = 'INFO', *, json_output: bool = True) -> None:
    """Log rustype's events to stderr at ``level`` and above.

    Calling it again replaces the handler installed by the previous call.

    Args:
        level: Logging level ("DEBUG", "INFO", "WARNING", ...). Library
            events other than warnings are emitted at debug level.
        json_output: One JSON object per line if True, else console output.
    """
    import structlog

    global _handler  # noqa: PLW0603

    structlog.configure(
        processors=[*_pre_chain(), structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            foreign_pre_chain=_pre_chain(),
            processors=[structlog.stdlib.ProcessorFormatter.remove_processors_meta, _renderer(json_output)],
        )
    )

    library_logger = logging.getLogger(LIBRARY_LOGGER)
    if _handler is not None:
        library_logger.removeHandler(_handler)
    library_logger.addHandler(handler)
    library_logger.setLevel(logging.getLevelNamesMapping().get(level.upper(), logging.INFO))
    library_logger.propagate = False
    _handler = handler


def reset_logging() -> None:
    """Undo :func:`configure_logging`; events go back to hooks and stdlib warnings only."""
    global _handler  # noqa: PLW0603

    library_logger = logging.getLogger(LIBRARY_LOGGER)
    if _handler is not None:
        library_logger.removeHandler(_handler)
        _handler = None
    library_logger.setLevel(logging.NOTSET)
    library_logger.propagate = True


def get_logger(name: str | None = None) -> Any:
    """Get a structlog logger; pass a ``rustype.*`` name to share the library's handler."""
    import structlog

    return structlog.get_logger(name)


def add_event_hook(hook: EventHook) -> None:
    """Call ``hook`` with a fresh dict for every library event.

    The dict holds ``event``, ``level`` and the event's own fields. Hooks run
    whether or not logging is configured; one that raises is reported on
    stderr and skipped.
    """
    _event_hooks.append(hook)


def remove_event_hook(hook: EventHook) -> None:
    if hook in _event_hooks:
        _event_hooks.remove(hook)


def clear_event_hooks() -> None:
    _event_hooks.clear()


def emit(name: str, level: str, event: str, **fields: Any) -> None:
    """Report a library event from module ``name``.

    Args:
        name: Logger name, normally the emitting module's ``__name__``.
        level: "debug", "info", "warning" or "error".
        event: One of :data:`EVENTS`.
        **fields: Structured context for the event.
    """
    for hook in tuple(_event_hooks):
        try:
            hook({'event': event, 'level': level, **fields})
        except Exception:  # noqa: BLE001
            sys.stderr.write(f'rustype: event hook {hook!r} failed on {event}\n')

    if _handler is not None:
        getattr(get_logger(name), level)(event, **fields)
    elif logging.getLevelNamesMapping()[level.upper()] >= logging.WARNING:
        logging.getLogger(name).log(logging.getLevelNamesMapping()[level.upper()], '%s %r', event, fields)
