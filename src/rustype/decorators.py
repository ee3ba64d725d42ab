"""@safe and @result decorators bridging exceptions and Result values."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, overload

import wrapt

from rustype._logging import emit
from rustype.option import Option
from rustype.propagate import Propagate
from rustype.result import Err, Ok, Result

__all__ = ['result', 'safe']


@overload
def safe[**P, T](func: Callable[P, T]) -> Callable[P, Result[T, Exception]]: ...


@overload
def safe[**P, T](
    func: None = None,
    *,
    exceptions: tuple[type[BaseException], ...] | None = None,
) -> Callable[[Callable[P, T]], Callable[P, Result[T, Any]]]: ...


def safe[**P, T](
    func: Callable[P, T] | None = None,
    *,
    exceptions: tuple[type[BaseException], ...] | None = None,
) -> Any:
    """Decorator that catches exceptions and returns Err.

    Wraps a function so that it returns Ok(value) on success and
    Err(exception) if one of ``exceptions`` is raised. Anything else
    propagates as usual.

    Can be used with or without arguments:
        @safe
        def risky(): ...

        @safe(exceptions=(ValueError, TypeError))
        def specific(): ...

    Args:
        func: The function to wrap (when used without parentheses).
        exceptions: Tuple of exception types to catch. Defaults to (Exception,).

    Example:
        ```python
        @safe
        def divide(a: int, b: int) -> float:
            return a / b

        divide(10, 2)  # Ok(5.0)
        divide(10, 0)  # Err(ZeroDivisionError('division by zero'))
        ```
    """
    catch = exceptions if exceptions is not None else (Exception,)

    @wrapt.decorator
    def wrapper(
        wrapped: Callable[P, T],
        instance: Any,
        args: tuple[Any, ...],
        kwargs: dict[str, Any],
    ) -> Result[T, Any]:
        try:
            value = wrapped(*args, **kwargs)
        except catch as e:
            emit(
                __name__, 'debug', 'safe.caught', function=getattr(wrapped, '__qualname__', repr(wrapped)), error=repr(e)
            )
            return Err(e)
        return Ok(value)

    if func is not None:
        return wrapper(func)
    return wrapper


def result[**P, R: Result[Any, Any] | Option[Any]](func: Callable[P, R]) -> Callable[P, R]:
    """Decorator that turns ``.bail()`` on an Err/Nothing into an early return.

    Example:
        ```python
        @result
        def process(x: int) -> Result[int, str]:
            value = parse(x).bail()  # returns the Err early if parse fails
            return Ok(value * 2)
        ```
    """

    @wrapt.decorator
    def wrapper(
        wrapped: Callable[P, R],
        instance: Any,
        args: tuple[Any, ...],
        kwargs: dict[str, Any],
    ) -> R:
        try:
            return wrapped(*args, **kwargs)
        except Propagate as p:
            return p.value

    return wrapper(func)
