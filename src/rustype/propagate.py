"""Propagate exception for the .bail() mechanism."""

from typing import Any


class Propagate(Exception):  # noqa: N818
    """Exception raised by .bail() to carry Err/Nothing up the call stack.

    Caught by the @result decorator, which returns the carried value. The
    name does not end in "Error": this is control flow, not a failure.
    """

    __slots__ = ('_value',)

    def __init__(self, value: Any) -> None:
        self._value = value
        super().__init__(f'Propagate({value!r})')

    @property
    def value(self) -> Any:
        """The Err or Nothing being propagated."""
        return self._value
