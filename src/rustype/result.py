"""Result type: Ok(value) | Err(error) for explicit error handling.

``Result[T, E]`` is the type used for returning and propagating errors:
``Ok(T)`` represents success and holds a value, ``Err(E)`` represents
failure and holds an error value. Unlike ``Some``, either side may hold
``None``.

Example:
    ```python
    from rustype import Err, Ok, Result

    Ok(25).and_then(lambda x: Ok(x * x)).and_then(lambda x: Ok(x + 5)).unwrap()
    # 630

    Err('boom').map(lambda x: x * 2)
    # Err('boom')

    Result.transpose(Ok(Some(5)))
    # Some(Ok(5))
    ```
"""

from __future__ import annotations

import copy
from collections.abc import Callable, Iterable
from typing import Any

import msgspec

from rustype._clone import cloned
from rustype._fn import identity, raise_
from rustype._sum import Left, Right, Sum
from rustype.display import display
from rustype.errors import ExpectationError, TransposeShapeError, UnwrapOnEmptyError
from rustype.option import Nothing, Option, Some
from rustype.propagate import Propagate

__all__ = ['Err', 'Ok', 'Result', 'collect']


class Result[T, E](msgspec.Struct, eq=False):
    """Success (``Ok``) or failure (``Err``).

    Build instances with :func:`Ok` and :func:`Err`. As with Option, every
    payload handed to a callback or returned is a copy.
    """

    inner: Sum[E, T]

    def either[C](self, if_err: Callable[[E], C], if_ok: Callable[[T], C]) -> C:
        """Call the handler for the active variant with a copy of its payload.

        Args:
            if_err: Called with the error when this is ``Err``.
            if_ok: Called with the value when this is ``Ok``.

        Returns:
            Whatever the called handler returns.
        """
        return self.inner.either(cloned(if_err), cloned(if_ok))

    def match[A](self, *, ok: Callable[[T], A], err: Callable[[E], A]) -> A:
        """Pattern match on the result; both handlers are required.

        Example:
            ```python
            Ok('ok').match(ok=len, err=lambda _: 0)  # 2
            Err({'code': 404}).match(ok=lambda _: 200, err=lambda e: e['code'])  # 404
            ```
        """
        return self.either(err, ok)

    # -----------------------------------------------------------------
    # Querying
    # -----------------------------------------------------------------

    def is_ok(self) -> bool:
        """Return True if the result is ``Ok``."""
        return self.inner.either(lambda _: False, lambda _: True)

    def is_err(self) -> bool:
        """Return True if the result is ``Err``."""
        return not self.is_ok()

    def is_ok_and(self, pred: Callable[[T], bool]) -> bool:
        """Return True if the result is ``Ok`` and the value satisfies ``pred``."""
        return self.either(lambda _: False, lambda value: bool(pred(value)))

    def is_err_and(self, pred: Callable[[E], bool]) -> bool:
        """Return True if the result is ``Err`` and the error satisfies ``pred``."""
        return self.either(lambda error: bool(pred(error)), lambda _: False)

    # -----------------------------------------------------------------
    # Extracting
    # -----------------------------------------------------------------

    def expect(self, msg: str) -> T:
        """Return the ``Ok`` value.

        Raises:
            ExpectationError: ``"{msg}: {error}"`` if this is ``Err``.
        """
        return self.either(lambda error: raise_(ExpectationError(f'{msg}: {display(error)}', error)), identity)

    def expect_err(self, msg: str) -> E:
        """Return the ``Err`` value.

        Raises:
            ExpectationError: ``"{msg}: {value}"`` if this is ``Ok``.
        """
        return self.either(identity, lambda value: raise_(ExpectationError(f'{msg}: {display(value)}', value)))

    def unwrap(self) -> T:
        """Return the ``Ok`` value.

        Because this may raise, prefer :meth:`match`, :meth:`unwrap_or` or
        :meth:`unwrap_or_else` unless the ``Err`` case is a bug.

        Raises:
            UnwrapOnEmptyError: If this is ``Err``; the message embeds the error.
        """
        return self.either(
            lambda error: raise_(
                UnwrapOnEmptyError(f'called `Result.unwrap()` on an `Err` value: {display(error)}', error)
            ),
            identity,
        )

    def unwrap_err(self) -> E:
        """Return the ``Err`` value.

        Raises:
            UnwrapOnEmptyError: If this is ``Ok``; the message embeds the value.
        """
        return self.either(
            identity,
            lambda value: raise_(
                UnwrapOnEmptyError(f'called `Result.unwrap_err()` on an `Ok` value: {display(value)}', value)
            ),
        )

    def unwrap_or(self, default: T) -> T:
        """Return the ``Ok`` value or ``default`` (eagerly evaluated)."""
        return self.either(lambda _: default, identity)

    def unwrap_or_else(self, f: Callable[[], T]) -> T:
        """Return the ``Ok`` value or compute one with ``f()``, called only on ``Err``."""
        return self.either(lambda _: f(), identity)

    def bail(self) -> T:
        """Return the ``Ok`` value, or raise :class:`Propagate` carrying this ``Err``."""
        return self.either(lambda _: raise_(Propagate(self)), identity)

    # -----------------------------------------------------------------
    # Converting to Option
    # -----------------------------------------------------------------

    def ok(self) -> Option[T]:
        """Convert to ``Option[T]``, discarding the error.

        An ``Ok(None)`` becomes ``Nothing``, since ``Some`` cannot hold ``None``.
        """
        return self.either(lambda _: Nothing, Option.from_optional)

    def err(self) -> Option[E]:
        """Convert to ``Option[E]``, discarding the success value.

        An ``Err(None)`` becomes ``Nothing``.
        """
        return self.either(Option.from_optional, lambda _: Nothing)

    # -----------------------------------------------------------------
    # Transforming
    # -----------------------------------------------------------------

    def map[U](self, f: Callable[[T], U]) -> Result[U, E]:
        """Map ``Ok(x)`` to ``Ok(f(x))``, leaving an ``Err`` untouched (``f`` is not called)."""
        return self.either(Err, lambda value: Ok(f(value)))

    def map_err[F](self, f: Callable[[E], F]) -> Result[T, F]:
        """Map ``Err(e)`` to ``Err(f(e))``, leaving an ``Ok`` untouched (``f`` is not called).

        Example:
            ```python
            Err(13).map_err(lambda x: f'error code: {x}')  # Err('error code: 13')
            ```
        """
        return self.either(lambda error: Err(f(error)), Ok)

    def map_or[U](self, default: U, f: Callable[[T], U]) -> U:
        """Apply ``f`` to the ``Ok`` value, or return ``default``."""
        return self.either(lambda _: default, f)

    def map_or_else[U](self, default: Callable[[E], U], f: Callable[[T], U]) -> U:
        """Apply ``f`` to the ``Ok`` value, or ``default`` to the ``Err`` value.

        Example:
            ```python
            Ok('fOo').map_or_else(str.lower, str.upper)  # 'FOO'
            Err('BaR').map_or_else(str.lower, str.upper)  # 'bar'
            ```
        """
        return self.either(default, f)

    def and_then[U](self, f: Callable[[T], Result[U, E]]) -> Result[U, E]:
        """Call ``f`` with the ``Ok`` value; an ``Err`` short-circuits.

        Laws:
            left identity:   ``Ok(x).and_then(f) == f(x)``
            right identity:  ``m.and_then(Ok) == m``
            associativity:   ``m.and_then(f).and_then(g) == m.and_then(lambda x: f(x).and_then(g))``
        """
        return self.either(Err, f)

    def filter(self, predicate: Callable[[T], bool], err: E) -> Result[T, E]:
        """Keep ``Ok(x)`` if ``predicate(x)`` holds, otherwise ``Err(err)``; an ``Err`` passes through."""
        return self.either(Err, lambda value: Ok(value) if predicate(value) else Err(err))

    def replace[U](self, value: U) -> Result[U, E]:
        """Return ``Ok(value)`` if this is ``Ok``; an ``Err`` is returned unchanged.

        Unlike :meth:`Option.replace`, this builds a new result and leaves
        self alone.
        """
        return self.either(Err, lambda _: Ok(value))

    def clone(self) -> Result[T, E]:
        """Return a result holding a copy of the payload."""
        return self.either(Err, Ok)

    # -----------------------------------------------------------------
    # Combining
    # -----------------------------------------------------------------

    def zip[U](self, other: Result[U, E]) -> Result[tuple[T, U], E]:
        """Return ``Ok((x, y))`` if both are ``Ok``, otherwise the first ``Err`` from the left."""
        return self.and_then(lambda x: other.map(lambda y: (x, y)))

    def ap[U](self, fn: Result[Callable[[T], U], E]) -> Result[U, E]:
        """Apply the function held by ``fn`` to the ``Ok`` value of self.

        If self is ``Err`` that error wins; otherwise an ``Err`` in ``fn`` is returned.
        """
        return self.and_then(lambda value: fn.map(lambda f: f(value)))

    def map2[U, A](self, other: Result[U, E], f: Callable[[T, U], A]) -> Result[A, E]:
        """Return ``Ok(f(x, y))`` if both are ``Ok``, otherwise the first ``Err``."""
        return self.zip(other).map(lambda pair: f(*pair))

    def and_[U](self, other: Result[U, E]) -> Result[U, E]:
        """Return ``other`` if self is ``Ok``, otherwise self's ``Err``."""
        return self.either(Err, lambda _: other)

    def or_[F](self, other: Result[T, F]) -> Result[T, F]:
        """Return self if ``Ok``, otherwise ``other``."""
        return self.inner.either(lambda _: other, lambda _: self)

    def or_else[F](self, f: Callable[[E], Result[T, F]]) -> Result[T, F]:
        """Return self if ``Ok``, otherwise call ``f`` with the error to recover."""
        return self.either(f, Ok)

    # -----------------------------------------------------------------
    # Static conversions
    # -----------------------------------------------------------------

    @staticmethod
    def flatten(result: Result[Result[T, E], E] | Result[T, E]) -> Result[T, E]:
        """Convert ``Result[Result[T, E], E]`` to ``Result[T, E]``.

        Example:
            ```python
            Result.flatten(Ok(Ok(50)))       # Ok(50)
            Result.flatten(Ok(Err('Error')))  # Err('Error')
            Result.flatten(Err('Error'))      # Err('Error')
            ```
        """
        return result.either(Err, lambda value: value if isinstance(value, Result) else Ok(value))

    @staticmethod
    def transpose(result: Result[Option[T], E]) -> Option[Result[T, E]]:
        """Transpose a Result of an Option into an Option of a Result.

        ``Ok(Nothing)`` maps to ``Nothing``; ``Ok(Some(x))`` to ``Some(Ok(x))``;
        ``Err(e)`` to ``Some(Err(e))``. ``Option.transpose`` undoes this.

        Raises:
            TransposeShapeError: If the ``Ok`` value is not an Option.
        """

        def shape(value: Any) -> Option[Result[T, E]]:
            if not isinstance(value, Option):
                raise TransposeShapeError(
                    f'called `Result.transpose()` on an `Ok` value that is not an `Option`: {display(value)}',
                    value,
                )
            return value.maybe(lambda: Nothing, lambda inner: Some(Ok(inner)))

        return result.either(lambda error: Some(Err(error)), shape)

    @staticmethod
    def swap(result: Result[T, E]) -> Result[E, T]:
        """Turn ``Ok(x)`` into ``Err(x)`` and ``Err(e)`` into ``Ok(e)``."""
        return result.either(Ok, Err)

    @staticmethod
    def collect(results: Iterable[Result[T, E]]) -> Result[list[T], E]:
        """See :func:`collect`."""
        return collect(results)

    # -----------------------------------------------------------------
    # Dunder protocols, all routed through the eliminator
    # -----------------------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Result):
            return NotImplemented
        return self.inner.either(
            lambda mine: other.inner.either(lambda theirs: bool(mine == theirs), lambda _: False),
            lambda mine: other.inner.either(lambda _: False, lambda theirs: bool(mine == theirs)),
        )

    def __ne__(self, other: object) -> bool:
        equal = self.__eq__(other)
        return equal if equal is NotImplemented else not equal

    def __hash__(self) -> int:
        return self.inner.either(lambda error: hash(('Err', error)), lambda value: hash(('Ok', value)))

    def __str__(self) -> str:
        return self.inner.either(lambda error: f'Err({display(error)})', lambda value: f'Ok({display(value)})')

    def __repr__(self) -> str:
        return self.inner.either(lambda error: f'Err({error!r})', lambda value: f'Ok({value!r})')

    def __copy__(self) -> Result[T, E]:
        return Result(self.inner)

    def __deepcopy__(self, memo: dict[int, Any]) -> Result[T, E]:
        return self.inner.either(
            lambda error: Result(Left(copy.deepcopy(error, memo))),
            lambda value: Result(Right(copy.deepcopy(value, memo))),
        )


def Ok[T](value: T) -> Result[T, Any]:  # noqa: N802
    """Wrap a success value."""
    return Result(Right(value))


def Err[E](error: E) -> Result[Any, E]:  # noqa: N802
    """Wrap an error value."""
    return Result(Left(error))


def collect[T, E](results: Iterable[Result[T, E]]) -> Result[list[T], E]:
    """Collect an iterable of Results into a Result of list.

    Short-circuits on the first Err encountered.

    Examples:
        >>> collect([Ok(1), Ok(2), Ok(3)])
        Ok([1, 2, 3])
        >>> collect([Ok(1), Err('fail'), Ok(3)])
        Err('fail')
    """
    values: list[T] = []
    for result in results:
        if result.is_err():
            return result.clone()
        values.append(result.unwrap())
    return Ok(values)
