"""Display strings for contained values.

``str(Some(x))`` renders ``x`` through :func:`display`. Register an
instance to change how a payload type prints inside ``Some(...)``,
``Ok(...)`` and ``Err(...)``:

    @display.instance(Money)
    def display_money(value: Money) -> str:
        return f'{value.amount:.2f} {value.currency}'
"""

from __future__ import annotations

from typing import Any

from rustype.typeclass import typeclass

__all__ = ['display']


@typeclass
def display(value: Any) -> str:
    """Render a value for a human; falls back to ``str``."""
    return str(value)


@display.instance(str)
def _display_str(value: str) -> str:
    return value


@display.instance(tuple)
def _display_tuple(value: tuple[Any, ...]) -> str:
    if len(value) == 1:
        return f'({display(value[0])},)'
    return '(' + ', '.join(display(item) for item in value) + ')'


@display.instance(list)
def _display_list(value: list[Any]) -> str:
    return '[' + ', '.join(display(item) for item in value) + ']'


@display.instance(dict)
def _display_dict(value: dict[Any, Any]) -> str:
    return '{' + ', '.join(f'{display(k)}: {display(v)}' for k, v in value.items()) + '}'
