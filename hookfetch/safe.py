"""
Run a computation and hand back its outcome as a value instead of raising.
"""

import inspect
import json
from typing import Any, Awaitable, Callable, Generic, TypeVar, Union

import httpx

T = TypeVar("T")


class SafeSuccess(Generic[T]):
    """The computation returned normally."""

    __slots__ = ("value",)

    def __init__(self, value: T):
        self.value = value

    @property
    def success(self) -> bool:
        return True

    def unwrap(self) -> T:
        return self.value

    def __eq__(self, other) -> bool:
        return isinstance(other, SafeSuccess) and other.value == self.value

    def __repr__(self) -> str:
        return f"SafeSuccess(value={self.value!r})"


class SafeFailure:
    """The computation raised; the exception is kept in ``error``."""

    __slots__ = ("error",)

    def __init__(self, error: Exception):
        self.error = error

    @property
    def success(self) -> bool:
        return False

    @property
    def message(self) -> str:
        """Describe the failure, naming the usual httpx and decoding errors."""
        error = self.error
        if isinstance(error, httpx.TimeoutException):
            return f"Timeout: {error}"
        if isinstance(error, httpx.ConnectError):
            return f"Connection error: {error}"
        if isinstance(error, httpx.TransportError):
            return f"Transport error: {error}"
        if isinstance(error, json.JSONDecodeError):
            return f"Invalid JSON body: {error}"
        return f"Unexpected error: {type(error).__name__}: {error}"

    def unwrap(self):
        """Re-raise the captured exception."""
        raise self.error

    def __repr__(self) -> str:
        return f"SafeFailure(error={self.error!r})"


SafeResult = Union[SafeSuccess[T], SafeFailure]


async def safe(thunk: Callable[[], Union[T, Awaitable[T]]]) -> "SafeResult[T]":
    """Call ``thunk`` and return its result wrapped in SafeSuccess.

    Coroutine results are awaited. Any ``Exception`` raised while calling or
    awaiting is returned as SafeFailure. Cancellation and other
    BaseException subclasses still propagate.
    """
    try:
        result: Any = thunk()
        if inspect.isawaitable(result):
            result = await result
        return SafeSuccess(result)
    except Exception as e:
        return SafeFailure(e)
