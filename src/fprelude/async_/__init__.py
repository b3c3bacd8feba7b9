"""Async combinators and the Deferred chain wrapper."""

from fprelude.async_.combinators import (
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
from fprelude.async_.deferred import Deferred

__all__ = [
    'Deferred',
    'bind_all_async',
    'bind_async',
    'effect_async',
    'effect_failure_async',
    'effect_none_async',
    'effect_some_async',
    'effect_success_async',
    'filter_async',
    'ignore_async',
    'map_async',
    'map_failure_async',
    'match_async',
    'optional_async',
    'perform_async',
    'pipe_async',
    'reduce_async',
    'run_sequential',
    'tap_async',
    'tap_failure_async',
    'tap_none_async',
    'tap_some_async',
    'tap_success_async',
    'unwrap_async',
    'unwrap_failure_async',
]
