"""Error types raised when an Option or Result is used against its contract.

None of these are caught inside the library. They are programmer errors
(calling ``unwrap()`` without checking, building ``Some(None)``) rather than
expected runtime conditions, which should be modelled as ``Nothing``/``Err``.
"""

from __future__ import annotations

from typing import Any

__all__ = [
    'ConstructionError',
    'ExpectationError',
    'Panic',
    'RustypeError',
    'TransposeShapeError',
    'TypeConstraintError',
    'UnwrapOnEmptyError',
]

_MISSING: Any = object()


class RustypeError(Exception):
    """Base exception class for rustype errors.

    Attributes:
        message (str): A human-readable description of the error.
        code (str | None): An optional error code for programmatic error handling.

    Example:
        ```python
        from rustype import Nothing, RustypeError

        try:
            Nothing.unwrap()
        except RustypeError as e:
            print(e.code)  # 'unwrap'
        ```
    """

    def __init__(self, message: str, code: str | None = None) -> None:
        super().__init__(message)
        self.message: str = message
        self.code: str | None = code

    def __str__(self) -> str:
        """Return a string representation of the error."""
        if self.code:
            return f'[{self.code}] {self.message}'
        return self.message


class ConstructionError(RustypeError, TypeError):
    """Raised by ``Some(x)`` when ``x`` is ``None``.

    Also a ``TypeError`` so callers guarding against bad arguments catch it.
    """

    def __init__(self, message: str = 'cannot wrap `None` in `Some`') -> None:
        super().__init__(message, code='construction')


TypeConstraintError = ConstructionError


class Panic(RustypeError):
    """An unrecoverable contract violation on an Option or Result.

    Attributes:
        payload: The value held by the variant that was active, if any.
    """

    default_code: str | None = None

    def __init__(self, message: str, payload: Any = _MISSING) -> None:
        super().__init__(message, code=self.default_code)
        self._payload = payload

    @property
    def has_payload(self) -> bool:
        """True if the panic carries the offending payload."""
        return self._payload is not _MISSING

    @property
    def payload(self) -> Any:
        """The offending payload, or None when the empty variant panicked."""
        return None if self._payload is _MISSING else self._payload

    def __str__(self) -> str:
        # Fixed-format messages; the code is for programmatic checks only.
        return self.message


class UnwrapOnEmptyError(Panic):
    """Raised by ``unwrap``/``unwrap_err`` when the other variant is active."""

    default_code = 'unwrap'


class ExpectationError(Panic):
    """Raised by ``expect``/``expect_err`` with the caller's message."""

    default_code = 'expect'


class TransposeShapeError(Panic):
    """Raised by ``transpose`` when the contained value is not the nested type."""

    default_code = 'transpose'
