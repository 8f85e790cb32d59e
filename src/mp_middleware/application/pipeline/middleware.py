"""Application pipeline – handler types and queue entries."""
from __future__ import annotations

import abc
import dataclasses
from collections.abc import Callable, Hashable, Iterable, Mapping
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from mp_middleware.application.pipeline.dispatcher import Next

Handler = Callable[[Any, Any, Callable[[Any, Any], Any]], Any]
Resolver = Callable[[Any, Hashable], Any]


class Middleware(abc.ABC):
    """Class-based handler.

    Receives the request, the current response and the continuation; must
    return a response and may call ``next_(request, response)`` to run the
    rest of the chain.
    """

    @abc.abstractmethod
    def __call__(self, request: Any, response: Any, next_: Next) -> Any: ...


@dataclasses.dataclass(frozen=True)
class Direct:
    """Entry that is already a handler; the resolver is never consulted."""

    handler: Handler


@dataclasses.dataclass(frozen=True)
class Resolvable:
    """Entry that only the resolver can turn into a handler."""

    value: Any


HandlerEntry = Direct | Resolvable | Handler | Any


def normalize_queue(queue: Any) -> list[tuple[Hashable, HandlerEntry]]:
    """Turn *queue* into an ordered list of ``(key, entry)`` pairs.

    Mappings keep their keys, other collections are keyed by position, and
    any single value (a handler, an identifier, ``None``) becomes a
    one-element queue under key ``0``.
    """
    if isinstance(queue, Mapping):
        return list(queue.items())
    if (
        isinstance(queue, Iterable)
        and not isinstance(queue, (str, bytes))
        and not callable(queue)
    ):
        return list(enumerate(queue))
    return [(0, queue)]


__all__ = [
    "Direct",
    "Handler",
    "HandlerEntry",
    "Middleware",
    "Resolvable",
    "Resolver",
    "normalize_queue",
]
