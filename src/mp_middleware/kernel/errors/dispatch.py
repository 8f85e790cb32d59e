"""Dispatch errors — contract violations detected while walking a chain."""

from __future__ import annotations

from collections.abc import Hashable
from typing import Any

from mp_middleware.kernel.errors.application import ApplicationError


def _type_name(value: object) -> str:
    return type(value).__qualname__


class DispatchError(ApplicationError):
    """A middleware chain could not be completed.

    ``key`` is the queue key of the offending entry (list index or name).
    """

    default_code = "dispatch_error"

    def __init__(self, message: str, *, key: Hashable, **kwargs: Any) -> None:
        super().__init__(message, **kwargs)
        self.key = key


class InvalidHandlerError(DispatchError):
    """Queue entry is not callable after optional resolution."""

    default_code = "invalid_handler"

    def __init__(self, key: Hashable, entry: object = None) -> None:
        super().__init__(
            f"Given middleware at key {key!r} is not callable",
            key=key,
            detail={"key": key, "entry_type": _type_name(entry)},
        )
        self.entry = entry


class ContractViolationError(DispatchError):
    """Handler returned something that is not a response."""

    default_code = "contract_violation"

    def __init__(
        self,
        key: Hashable,
        result: object = None,
        expected: type | tuple[type, ...] | None = None,
    ) -> None:
        if isinstance(expected, tuple):
            expected_name = " | ".join(t.__qualname__ for t in expected)
        else:
            expected_name = expected.__qualname__ if expected is not None else None
        super().__init__(
            f"Given middleware at key {key!r} did not return a response",
            key=key,
            detail={
                "key": key,
                "result_type": _type_name(result),
                "expected": expected_name,
            },
        )
        self.result = result


__all__ = ["ContractViolationError", "DispatchError", "InvalidHandlerError"]
