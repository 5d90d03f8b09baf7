"""
Tagged result wrapper for callers that prefer explicit error handling
over try/except around every device call
"""

from dataclasses import dataclass
from typing import Awaitable, Generic, Optional, TypeVar

from .exceptions import WebSwitchError

T = TypeVar("T")


@dataclass(frozen=True)
class Result(Generic[T]):
    """Either a value or the WebSwitchError that prevented it"""
    value: Optional[T] = None
    error: Optional[WebSwitchError] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> T:
        """Return the value, re-raising the stored error if there is one"""
        if self.error is not None:
            raise self.error
        return self.value


async def capture(operation: Awaitable[T]) -> "Result[T]":
    """
    Await a client operation and wrap its outcome.
    Only WebSwitchError kinds are captured; transport errors still propagate.
    """
    try:
        return Result(value=await operation)
    except WebSwitchError as e:
        return Result(error=e)
