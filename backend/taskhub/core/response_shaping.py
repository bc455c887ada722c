"""Response Shaping — tagged success/failure result for every dispatch.

Invariants:
    - Exactly two variants: Success (payload + status 200) and Failure
    - Failure always wraps an EngineFailureError (one generic shape)
    - Shaping is identical for all kinds and operations

Design Decisions:
    - One generic wrapper replaces per-endpoint response types
    - unwrap() raises Failure's error so the global GatewayError handler
      renders it; routes never build error bodies themselves
"""

from dataclasses import dataclass
from typing import Generic, TypeVar, Union

from taskhub.core.errors import EngineError, EngineFailureError, ErrorContext

T = TypeVar("T")

SUCCESS_STATUS = 200


@dataclass(frozen=True)
class Success(Generic[T]):
    payload: T
    status: int = SUCCESS_STATUS


@dataclass(frozen=True)
class Failure:
    error: EngineFailureError


OperationResult = Union[Success[T], Failure]


def shape_success(payload: T) -> Success[T]:
    return Success(payload=payload)


def shape_failure(cause: EngineError, context: ErrorContext | None = None) -> Failure:
    """Collapse any engine error into the generic failure variant."""
    return Failure(error=EngineFailureError(cause, context))


def unwrap(result: "OperationResult[T]") -> T:
    """Payload of a Success; raises the wrapped error of a Failure."""
    if isinstance(result, Failure):
        raise result.error
    return result.payload
