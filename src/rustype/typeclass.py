"""@typeclass decorator and dispatch mechanism.

Ad-hoc polymorphism keyed on the type of the first argument, used by
:mod:`rustype.display` so callers can teach rustype how to print their
own payload types.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, Generic, TypeVar

import wrapt

__all__ = ['NoInstanceError', 'TypeClass', 'typeclass']

F = TypeVar('F', bound=Callable[..., Any])


class NoInstanceError(TypeError):
    """Raised when no typeclass instance is registered for a type."""

    def __init__(self, typeclass_name: str, value_type: type) -> None:
        self.typeclass_name = typeclass_name
        self.value_type = value_type
        super().__init__(f"No instance of '{typeclass_name}' for type '{value_type.__name__}'")


class TypeClass(wrapt.ObjectProxy, Generic[F]):
    """A polymorphic function with per-type implementations.

    The wrapped function is the fallback when no registered type matches.
    Lookup walks the MRO of the first argument, so an instance registered
    for a base class also serves its subclasses.

    Example:
        ```python
        @typeclass
        def show(value) -> str:
            return str(value)

        @show.instance(bool)
        def show_bool(value: bool) -> str:
            return 'yes' if value else 'no'

        show(True)  # 'yes'
        show(3)     # '3'
        ```
    """

    def __init__(self, default_fn: F, *, has_default: bool = True) -> None:
        super().__init__(default_fn)
        self._self_name = default_fn.__name__
        self._self_default: F | None = default_fn if has_default else None
        self._self_instances: dict[type, Callable[..., Any]] = {}

    def instance(self, type_: type) -> Callable[[Callable[..., Any]], Callable[..., Any]]:
        """Register the decorated function as the implementation for ``type_``."""

        def decorator(fn: Callable[..., Any]) -> Callable[..., Any]:
            self._self_instances[type_] = fn
            return fn

        return decorator

    def _find_instance(self, value: Any) -> Callable[..., Any] | None:
        for base in type(value).__mro__:
            if base in self._self_instances:
                return self._self_instances[base]
        return None

    def __call__(self, *args: Any, **kwargs: Any) -> Any:
        """Dispatch to the appropriate instance based on first argument."""
        if not args:
            raise TypeError(f'{self._self_name}() requires at least one argument')

        instance_fn = self._find_instance(args[0])
        if instance_fn is not None:
            return instance_fn(*args, **kwargs)

        if self._self_default is not None:
            return self._self_default(*args, **kwargs)

        raise NoInstanceError(self._self_name, type(args[0]))

    def __repr__(self) -> str:
        return f'<typeclass {self._self_name} with {len(self._self_instances)} instances>'


def typeclass(fn: F | None = None, *, default: bool = True) -> Any:
    """Decorator to create a typeclass from a function.

    Args:
        fn: The function used as fallback implementation and signature.
        default: If False, the body is ignored and unmatched types raise
            :class:`NoInstanceError`.

    Returns:
        A TypeClass that dispatches to registered instances.
    """
    if fn is None:
        return lambda f: TypeClass(f, has_default=default)
    return TypeClass(fn, has_default=default)
