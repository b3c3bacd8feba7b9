"""Decorators and helpers that bridge exception-raising code into Result values."""

from fprelude.decorators.safe import (
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

__all__ = [
    'attempt',
    'attempt_async',
    'inner_exception_message',
    'safe',
    'safe_async',
    'try_bind',
    'try_bind_async',
    'try_map',
    'try_map_async',
]
