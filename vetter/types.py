"""
Type definitions for vetter.

Provides the Result type (Success/Failure), the NO_VALUE sentinel and
helpers for building and transforming results.
"""

from __future__ import annotations

import inspect
from dataclasses import dataclass
from enum import Enum
from typing import Any, Awaitable, Callable, Generic, TypeVar, overload

T = TypeVar("T")
U = TypeVar("U")


class _NoValue(Enum):
    """
    Sentinel for "no value provided".

    Distinct from None: None is an explicit null, NO_VALUE means the value
    was never supplied (a missing dict key, a short tuple, an omitted argument).
    """

    NO_VALUE = 0

    def __repr__(self) -> str:
        return "NO_VALUE"

    def __bool__(self) -> bool:
        return False


NO_VALUE = _NoValue.NO_VALUE


class ValidationFailed(Exception):
    """Raised by Failure.unwrap()."""

    def __init__(self, message: str, code: str | int | None = None):
        super().__init__(message)
        self.message = message
        self.code = code


@dataclass(frozen=True, slots=True)
class Success(Generic[T]):
    """Successful result carrying the validated data."""

    data: T

    def is_success(self) -> bool:
        return True

    def is_failure(self) -> bool:
        return False

    def unwrap(self) -> T:
        return self.data


@dataclass(frozen=True, slots=True)
class Failure:
    """Failed result with a human-readable message and optional machine code."""

    message: str
    code: str | int | None = None

    def is_success(self) -> bool:
        return False

    def is_failure(self) -> bool:
        return True

    def unwrap(self) -> Any:
        raise ValidationFailed(self.message, self.code)


Result = Success[T] | Failure


def success(data: Any = NO_VALUE) -> Success[Any]:
    """Build a Success. Called without data it carries NO_VALUE."""
    return Success(data)


def failed(message: str, code: str | int | None = None) -> Failure:
    """Build a Failure."""
    return Failure(message, code)


@overload
def map_success(
    result: Success[T] | Failure, fn: Callable[[T], U]
) -> Success[U] | Failure: ...


@overload
def map_success(
    result: Awaitable[Success[T] | Failure], fn: Callable[[T], U]
) -> Awaitable[Success[U] | Failure]: ...


def map_success(result, fn):
    """
    Apply fn to the data of a Success; return a Failure unchanged.

    Accepts an awaitable result as well, in which case a coroutine is
    returned that awaits it and maps the outcome.

    Usage:
        map_success(success(2), lambda x: x * 10)        # Success(20)
        map_success(failed("bad"), lambda x: x * 10)     # Failure("bad")
        await map_success(fetch_result(), str.upper)
    """
    if inspect.isawaitable(result):
        return _map_awaitable(result, fn)
    if isinstance(result, Success):
        return Success(fn(result.data))
    return result


async def _map_awaitable(result: Awaitable[Any], fn: Callable[[Any], Any]) -> Any:
    return map_success(await result, fn)
