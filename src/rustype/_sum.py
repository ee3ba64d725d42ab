"""Two-variant tagged union that Option and Result are built on."""

from __future__ import annotations

from collections.abc import Callable
from enum import Enum
from typing import Any

import msgspec

__all__ = ['Left', 'Right', 'Side', 'Sum']


class Side(Enum):
    LEFT = 'left'
    RIGHT = 'right'


class Sum[A, B](msgspec.Struct, frozen=True):
    """Exactly one of ``Left(A)`` or ``Right(B)``.

    The tag and payload are plain fields, but nothing outside this module
    reads them: :meth:`either` is the only way to get at the payload.
    """

    side: Side
    payload: Any

    def either[C](self, on_left: Callable[[A], C], on_right: Callable[[B], C]) -> C:
        """Apply the handler for the populated side to its payload and return the result."""
        match self.side:
            case Side.LEFT:
                return on_left(self.payload)
            case Side.RIGHT:
                return on_right(self.payload)


def Left[A](value: A) -> Sum[A, Any]:  # noqa: N802
    """Build the left variant."""
    return Sum(Side.LEFT, value)


def Right[B](value: B) -> Sum[Any, B]:  # noqa: N802
    """Build the right variant."""
    return Sum(Side.RIGHT, value)
