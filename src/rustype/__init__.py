"""rustype: Type-safe Option and Result values for Python 3.13+.

Flat imports (preferred):
    from rustype import Option, Some, Nothing, Result, Ok, Err
    from rustype import safe, result, display, init

Submodule imports (for organization):
    from rustype.option import Option, Some, Nothing
    from rustype.result import Result, Ok, Err, collect
    from rustype.errors import UnwrapOnEmptyError
"""

from rustype._config import CopyMode, RustypeConfig, get_config, init
from rustype._logging import EVENTS, add_event_hook, clear_event_hooks, configure_logging, get_logger, remove_event_hook
from rustype.decorators import result, safe
from rustype.display import display
from rustype.errors import (
    ConstructionError,
    ExpectationError,
    Panic,
    RustypeError,
    TransposeShapeError,
    TypeConstraintError,
    UnwrapOnEmptyError,
)
from rustype.option import Nothing, Option, Some
from rustype.propagate import Propagate
from rustype.result import Err, Ok, Result, collect
from rustype.typeclass import typeclass

__all__ = [
    # Logging
    'EVENTS',
    # Errors
    'ConstructionError',
    # Config
    'CopyMode',
    # Result
    'Err',
    'ExpectationError',
    # Option
    'Nothing',
    'Ok',
    'Option',
    'Panic',
    # Propagation
    'Propagate',
    'Result',
    'RustypeConfig',
    'RustypeError',
    'Some',
    'TransposeShapeError',
    'TypeConstraintError',
    'UnwrapOnEmptyError',
    'add_event_hook',
    'clear_event_hooks',
    'collect',
    'configure_logging',
    # Display
    'display',
    'get_config',
    'get_logger',
    'init',
    'remove_event_hook',
    # Decorators
    'result',
    'safe',
    'typeclass',
]
