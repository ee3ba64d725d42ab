"""Defensive copying of contained values.

Python shares compound values by reference, so a list pulled out of a
``Some`` and mutated would corrupt the wrapped original. Every payload that
leaves an Option or Result goes through :func:`clone_value` first.
"""

from __future__ import annotations

import copy
from collections.abc import Callable

from rustype._config import CopyMode, get_config
from rustype._logging import emit

__all__ = ['clone_value', 'cloned']


def clone_value[T](value: T) -> T:
    """Copy ``value`` according to the configured :class:`CopyMode`.

    Exceptions are handed out as they are: they are what ``@safe`` stores in
    ``Err`` and many cannot be rebuilt from their ``args``. A value that
    cannot be copied (locks, sockets, objects whose ``__reduce__`` raises) is
    also handed out uncopied, and a ``clone.fallback`` event is emitted at
    debug level. Cyclic structures are handled by ``copy.deepcopy``'s memo.
    """
    mode = get_config().copy_mode
    if mode is CopyMode.NONE or isinstance(value, BaseException):
        return value
    try:
        if mode is CopyMode.SHALLOW:
            return copy.copy(value)
        return copy.deepcopy(value)
    except (TypeError, copy.Error) as e:
        emit(__name__, 'debug', 'clone.fallback', type=type(value).__qualname__, mode=mode.value, error=repr(e))
        return value


def cloned[T, U](f: Callable[[T], U]) -> Callable[[T], U]:
    """Wrap a one-argument function so it receives a copy of its argument."""

    def call(value: T) -> U:
        return f(clone_value(value))

    return call
