"""Kernel – framework-agnostic building blocks."""

from mp_middleware.kernel.contracts import Response
from mp_middleware.kernel.errors import (
    ApplicationError,
    BaseError,
    ContractViolationError,
    DispatchError,
    InvalidHandlerError,
)

__all__ = [
    "ApplicationError",
    "BaseError",
    "ContractViolationError",
    "DispatchError",
    "InvalidHandlerError",
    "Response",
]
