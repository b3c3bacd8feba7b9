"""fprelude: functional building blocks for Python 3.13+.

Option, Result and discriminated Union types, Unit, pipeline helpers,
accumulating validation, and async counterparts of every combinator.

Flat imports (preferred):
    from fprelude import Option, Some, Nothing, Result, Success, Failure
    from fprelude import pipe, tap, effect, match, cons, safe, Deferred

Submodule imports (for organization):
    from fprelude.option import Some, Nothing, Option
    from fprelude.result import Success, Failure, Result, bind_all
    from fprelude.async_ import map_async, Deferred
    from fprelude.validation import bind_validation, match_default
"""

# Configuration
from fprelude._config import PreludeConfig, get_config, init
from fprelude._logging import configure_logging, get_logger

# Async
from fprelude.async_ import (
    Deferred,
    bind_all_async,
    bind_async,
    effect_async,
    effect_failure_async,
    effect_none_async,
    effect_some_async,
    effect_success_async,
    filter_async,
    ignore_async,
    map_async,
    map_failure_async,
    match_async,
    optional_async,
    perform_async,
    pipe_async,
    reduce_async,
    run_sequential,
    tap_async,
    tap_failure_async,
    tap_none_async,
    tap_some_async,
    tap_success_async,
    unwrap_async,
    unwrap_failure_async,
)

# Decorators
from fprelude.decorators import (
    attempt,
    attempt_async,
    inner_exception_message,
    safe,
    safe_async,
    try_bind,
    try_bind_async,
    try_map,
    try_map_async,
)
from fprelude.errors import (
    AmbiguousUnionError,
    InvalidStateError,
    OptionUnwrapError,
    ResultUnwrapError,
    ResultUnwrapFailureError,
    UnwrapError,
)
from fprelude.option import (
    Nothing,
    NothingType,
    Option,
    Some,
    collect_some,
    filter_options,
    none,
    optional,
    some,
)

# Prelude combinators
from fprelude.prelude import (
    Seq,
    append,
    cons,
    effect,
    ignore,
    match,
    perform,
    pipe,
    tap,
    to_async,
)
from fprelude.result import (
    Failure,
    Result,
    Success,
    bind_all,
    failure,
    success,
)
from fprelude.union import (
    Union2,
    Union3,
    Union4,
    Union5,
    Union6,
    Union7,
    Union8,
    Union9,
    UnionBase,
)
from fprelude.unit import Unit, unit
from fprelude.validation import (
    ValidationFailure,
    ValidationResult,
    ValidationSuccess,
    as_validation_result,
    bind_validation,
    match_default,
    validation_failure,
    validation_success,
)

__all__ = [
    # Errors
    'AmbiguousUnionError',
    # Async
    'Deferred',
    # Result types
    'Failure',
    'InvalidStateError',
    # Option types
    'Nothing',
    'NothingType',
    'Option',
    'OptionUnwrapError',
    # Configuration
    'PreludeConfig',
    'Result',
    'ResultUnwrapError',
    'ResultUnwrapFailureError',
    'Seq',
    'Some',
    'Success',
    # Union types
    'Union2',
    'Union3',
    'Union4',
    'Union5',
    'Union6',
    'Union7',
    'Union8',
    'Union9',
    'UnionBase',
    'Unit',
    'UnwrapError',
    # Validation
    'ValidationFailure',
    'ValidationResult',
    'ValidationSuccess',
    'append',
    'as_validation_result',
    'attempt',
    'attempt_async',
    'bind_all',
    'bind_all_async',
    'bind_async',
    'bind_validation',
    'collect_some',
    'configure_logging',
    'cons',
    'effect',
    'effect_async',
    'effect_failure_async',
    'effect_none_async',
    'effect_some_async',
    'effect_success_async',
    'failure',
    'filter_async',
    'filter_options',
    'get_config',
    'get_logger',
    'ignore',
    'ignore_async',
    'init',
    'inner_exception_message',
    'map_async',
    'map_failure_async',
    'match',
    'match_async',
    'match_default',
    'none',
    'optional',
    'optional_async',
    'perform',
    'perform_async',
    'pipe',
    'pipe_async',
    'reduce_async',
    'run_sequential',
    'safe',
    'safe_async',
    'some',
    'success',
    'tap',
    'tap_async',
    'tap_failure_async',
    'tap_none_async',
    'tap_some_async',
    'tap_success_async',
    'to_async',
    'try_bind',
    'try_bind_async',
    'try_map',
    'try_map_async',
    'unit',
    'unwrap_async',
    'unwrap_failure_async',
    'validation_failure',
    'validation_success',
]
