"""Kernel contracts – Response capability tag."""
from __future__ import annotations

import abc


class Response(abc.ABC):
    """Marker for values a middleware may hand back as its result.

    The dispatcher never looks inside a response; it only checks that a
    handler returned one.  Response types from other libraries join the
    contract without inheriting from it::

        Response.register(starlette.responses.Response)
    """


def is_response(value: object, response_type: type | tuple[type, ...] = Response) -> bool:
    """Return ``True`` if *value* satisfies the response capability."""
    if value is None:
        return False
    return isinstance(value, response_type)


__all__ = ["Response", "is_response"]
