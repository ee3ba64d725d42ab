"""Option type: Some(value) | Nothing for optional values.

Every ``Option`` is either ``Some`` and holds a value, or ``Nothing`` and
does not. Both are the same :class:`Option` class over a two-variant
:class:`~rustype._sum.Sum`; :meth:`Option.maybe` is the single eliminator
every other method is written in terms of.

Example:
    ```python
    from rustype import Nothing, Some

    Some(25).and_then(lambda x: Some(x * x)).map(lambda x: x + 5)
    # Some(630)

    Some(199).filter(lambda v: v == 200).unwrap_or(500)
    # 500

    str(Nothing)
    # 'None'
    ```
"""

from __future__ import annotations

import copy
from collections.abc import Callable, Iterable
from typing import TYPE_CHECKING, Any

import msgspec

from rustype._clone import cloned
from rustype._fn import identity, raise_
from rustype._sum import Left, Right, Sum
from rustype.display import display
from rustype.errors import ConstructionError, ExpectationError, TransposeShapeError, UnwrapOnEmptyError
from rustype.propagate import Propagate

if TYPE_CHECKING:
    from rustype.result import Result

__all__ = ['Nothing', 'Option', 'Some']


class Option[T](msgspec.Struct, eq=False):
    """An optional value: ``Some(value)`` or ``Nothing``.

    Build instances with :func:`Some` and the :data:`Nothing` singleton, not
    by calling the class. Values handed to callbacks or returned by methods
    are copies (see :class:`~rustype.CopyMode`), so mutating them never
    changes the option they came from.

    The one method that mutates is :meth:`replace`.
    """

    inner: Sum[None, T]

    # -----------------------------------------------------------------
    # Construction
    # -----------------------------------------------------------------

    @staticmethod
    def nothing() -> Option[Any]:
        """Return the empty option."""
        return Nothing

    @staticmethod
    def make_default() -> Option[Any]:
        """Return the "default value" for an Option, which is ``Nothing``."""
        return Nothing

    @staticmethod
    def from_optional(value: T | None) -> Option[T]:
        """Return ``Nothing`` for ``None``, otherwise ``Some(value)``.

        Example:
            ```python
            Option.from_optional(os.environ.get('HOME'))
            ```
        """
        return Nothing if value is None else Some(value)

    # -----------------------------------------------------------------
    # Elimination
    # -----------------------------------------------------------------

    def maybe[A](self, if_none: Callable[[], A], if_some: Callable[[T], A]) -> A:
        """Call ``if_none()`` or ``if_some(value)`` and return what it returns.

        Args:
            if_none: Called with no arguments when the option is empty.
            if_some: Called with a copy of the contained value.

        Returns:
            The result of whichever handler ran.
        """
        return self.inner.either(lambda _: if_none(), cloned(if_some))

    def match[A](self, *, some: Callable[[T], A], none: Callable[[], A]) -> A:
        """Pattern match on the option; both handlers are required.

        Example:
            ```python
            Some('ok').match(some=len, none=lambda: 0)  # 2
            Nothing.match(some=lambda _: 200, none=lambda: 404)  # 404
            ```
        """
        return self.maybe(none, some)

    # -----------------------------------------------------------------
    # Querying
    # -----------------------------------------------------------------

    def is_some(self) -> bool:
        """Return True if the option is a ``Some`` value."""
        return self.inner.either(lambda _: False, lambda _: True)

    def is_none(self) -> bool:
        """Return True if the option is ``Nothing``."""
        return not self.is_some()

    def is_some_and(self, pred: Callable[[T], bool]) -> bool:
        """Return True if the option is ``Some`` and the value satisfies ``pred``."""
        return self.maybe(lambda: False, lambda value: bool(pred(value)))

    # -----------------------------------------------------------------
    # Extracting
    # -----------------------------------------------------------------

    def expect(self, msg: str) -> T:
        """Return the contained value.

        Raises:
            ExpectationError: With ``msg`` as its message if the option is ``Nothing``.
        """
        return self.maybe(lambda: raise_(ExpectationError(msg)), identity)

    def unwrap(self) -> T:
        """Return the contained value.

        Raises:
            UnwrapOnEmptyError: If the option is ``Nothing``.
        """
        return self.maybe(
            lambda: raise_(UnwrapOnEmptyError('called `Option.unwrap()` on a `None` value')),
            identity,
        )

    def unwrap_or(self, default: T) -> T:
        """Return the contained value or ``default``.

        ``default`` is evaluated by the caller before the call; use
        :meth:`unwrap_or_else` when building it is expensive.
        """
        return self.maybe(lambda: default, identity)

    def unwrap_or_else(self, f: Callable[[], T]) -> T:
        """Return the contained value or compute one with ``f()``, called only when empty."""
        return self.maybe(f, identity)

    def bail(self) -> T:
        """Return the contained value, or raise :class:`Propagate` carrying ``Nothing``.

        This is the equivalent of Rust's ``?`` operator inside a function
        decorated with :func:`rustype.decorators.result`.
        """
        return self.maybe(lambda: raise_(Propagate(self)), identity)

    # -----------------------------------------------------------------
    # Transforming
    # -----------------------------------------------------------------

    def map[U](self, f: Callable[[T], U]) -> Option[U]:
        """Map ``Some(x)`` to ``Some(f(x))``; ``Nothing`` stays ``Nothing``.

        Raises:
            ConstructionError: If ``f`` returns ``None``.
        """
        return self.maybe(lambda: Nothing, lambda value: Some(f(value)))

    def map_or[U](self, default: U, f: Callable[[T], U]) -> U:
        """Apply ``f`` to the contained value, or return ``default`` (eagerly evaluated)."""
        return self.maybe(lambda: default, f)

    def map_or_else[U](self, default: Callable[[], U], f: Callable[[T], U]) -> U:
        """Apply ``f`` to the contained value, or compute a default with ``default()``."""
        return self.maybe(default, f)

    def filter(self, predicate: Callable[[T], bool]) -> Option[T]:
        """Keep ``Some(x)`` only if ``predicate(x)`` is true.

        Example:
            ```python
            Some(200).filter(lambda v: v == 200).unwrap_or(500)  # 200
            ```
        """
        return self.maybe(lambda: Nothing, lambda value: Some(value) if predicate(value) else Nothing)

    def and_then[U](self, f: Callable[[T], Option[U]]) -> Option[U]:
        """Return ``Nothing`` if empty, otherwise ``f(value)``.

        Also known as flatmap or bind: ``x.and_then(f) == Option.flatten(x.map(f))``.
        """
        return self.maybe(lambda: Nothing, f)

    def ok_or[E](self, err: E) -> Result[T, E]:
        """Transform into a Result, mapping ``Some(v)`` to ``Ok(v)`` and ``Nothing`` to ``Err(err)``."""
        from rustype.result import Err, Ok

        return self.maybe(lambda: Err(err), Ok)

    def ok_or_else[E](self, f: Callable[[], E]) -> Result[T, E]:
        """Like :meth:`ok_or`, but the error is only built (``f()``) when empty."""
        from rustype.result import Err, Ok

        return self.maybe(lambda: Err(f()), Ok)

    # -----------------------------------------------------------------
    # Combining
    # -----------------------------------------------------------------

    def zip[U](self, other: Option[U]) -> Option[tuple[T, U]]:
        """Return ``Some((x, y))`` when both are ``Some``, else ``Nothing``."""
        return self.and_then(lambda x: other.map(lambda y: (x, y)))

    def ap[U](self, fn: Option[Callable[[T], U]]) -> Option[U]:
        """Apply the function held by ``fn`` to the value held by ``self``.

        Laws:
            identity:      ``x.ap(Some(lambda v: v)) == x``
            homomorphism:  ``Some(x).ap(Some(f)) == Some(f(x))``
            interchange:   ``Some(x).ap(u) == u.ap(Some(lambda f: f(x)))``
            composition:   ``w.ap(v.ap(u.ap(Some(compose)))) == w.ap(v).ap(u)``
        """
        return self.and_then(lambda value: fn.map(lambda f: f(value)))

    def map2[U, A](self, other: Option[U], f: Callable[[T, U], A]) -> Option[A]:
        """Return ``Some(f(x, y))`` when both are ``Some``, else ``Nothing``."""
        return self.zip(other).map(lambda pair: f(*pair))

    def and_[U](self, other: Option[U]) -> Option[U]:
        """Return ``Nothing`` if self is empty, otherwise ``other``."""
        return self.maybe(lambda: Nothing, lambda _: other)

    def or_(self, other: Option[T]) -> Option[T]:
        """Return self if it is ``Some``, otherwise ``other``."""
        return self.inner.either(lambda _: other, lambda _: self)

    def or_else(self, f: Callable[[], Option[T]]) -> Option[T]:
        """Return self if it is ``Some``, otherwise call ``f()``."""
        return self.inner.either(lambda _: f(), lambda _: self)

    # -----------------------------------------------------------------
    # Mutation and copies
    # -----------------------------------------------------------------

    def replace(self, value: T) -> Option[T]:
        """Swap the held value for ``value`` in place and return the old one.

        This is the only method that mutates an Option. ``Nothing`` has no
        slot to swap: replacing on it returns ``Nothing`` and changes nothing.

        Example:
            ```python
            some = Some(50)
            some.replace(250)  # Some(50)
            some               # Some(250)
            ```

        Raises:
            ConstructionError: If ``value`` is None and self is ``Some``.
        """

        def swap(previous: T) -> Option[T]:
            if value is None:
                raise ConstructionError()
            self.inner = Right(value)
            return Some(previous)

        return self.inner.either(lambda _: Nothing, swap)

    def clone(self) -> Option[T]:
        """Return an option holding a copy of the value."""
        return self.maybe(lambda: Nothing, Some)

    # -----------------------------------------------------------------
    # Nested options
    # -----------------------------------------------------------------

    @staticmethod
    def flatten(option: Option[Option[T]] | Option[T]) -> Option[T]:
        """Convert ``Option[Option[T]]`` to ``Option[T]``.

        Only one level is removed. An option whose value is not itself an
        option is returned as an equal option.

        Example:
            ```python
            Option.flatten(Some(Some(50)))  # Some(50)
            Option.flatten(Some(Nothing))   # Nothing
            Option.flatten(Some(50))        # Some(50)
            ```
        """
        return option.maybe(lambda: Nothing, lambda value: value if isinstance(value, Option) else Some(value))

    @staticmethod
    def transpose[E](option: Option[Result[T, E]]) -> Result[Option[T], E]:
        """Transpose an Option of a Result into a Result of an Option.

        ``Nothing`` maps to ``Ok(Nothing)``; ``Some(Ok(x))`` to ``Ok(Some(x))``;
        ``Some(Err(e))`` to ``Err(e)``.

        Raises:
            TransposeShapeError: If the option holds something other than a Result.
        """
        from rustype.result import Err, Ok, Result

        def shape(value: Any) -> Result[Option[T], E]:
            if not isinstance(value, Result):
                raise TransposeShapeError(
                    f'called `Option.transpose()` on a `Some` value that is not a `Result`: {display(value)}',
                    value,
                )
            return value.either(Err, lambda inner: Ok(Some(inner)))

        return option.maybe(lambda: Ok(Nothing), shape)

    @staticmethod
    def collect(options: Iterable[Option[T]]) -> Option[list[T]]:
        """Collect an iterable of Options into an Option of list.

        Short-circuits on the first ``Nothing``.
        """
        values: list[T] = []
        for option in options:
            if option.is_none():
                return Nothing
            values.append(option.unwrap())
        return Some(values)

    # -----------------------------------------------------------------
    # Dunder protocols, all routed through the eliminator
    # -----------------------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Option):
            return NotImplemented
        return self.inner.either(
            lambda _: other.is_none(),
            lambda mine: other.inner.either(lambda _: False, lambda theirs: bool(mine == theirs)),
        )

    def __ne__(self, other: object) -> bool:
        equal = self.__eq__(other)
        return equal if equal is NotImplemented else not equal

    def __hash__(self) -> int:
        return self.inner.either(lambda _: hash(('Nothing',)), lambda value: hash(('Some', value)))

    def __str__(self) -> str:
        return self.inner.either(lambda _: 'None', lambda value: f'Some({display(value)})')

    def __repr__(self) -> str:
        return self.inner.either(lambda _: 'Nothing', lambda value: f'Some({value!r})')

    def __copy__(self) -> Option[T]:
        return self.inner.either(lambda _: Nothing, lambda value: Option(Right(value)))

    def __deepcopy__(self, memo: dict[int, Any]) -> Option[T]:
        return self.inner.either(lambda _: Nothing, lambda value: Option(Right(copy.deepcopy(value, memo))))


def Some[T](value: T) -> Option[T]:  # noqa: N802
    """Wrap a value in an Option.

    Raises:
        ConstructionError: If ``value`` is None. Use ``Nothing`` or
            :meth:`Option.from_optional` for possibly-absent values.
    """
    if value is None:
        raise ConstructionError()
    return Option(Right(value))


Nothing: Option[Any] = Option(Left(None))
"""Singleton instance representing the absence of a value."""
