"""Small function helpers shared by Option and Result."""

from __future__ import annotations

from typing import NoReturn

__all__ = ['identity', 'raise_']


def identity[T](value: T) -> T:
    return value


def raise_(error: BaseException) -> NoReturn:
    """Raise ``error``; usable where only an expression is allowed."""
    raise error
