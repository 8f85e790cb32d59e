"""Application pipeline – Dispatcher and the bound ``next`` continuation.

Every :meth:`Dispatcher.dispatch` call owns a fresh :class:`DispatchState`
(remaining queue, resolver, attribute bag).  The :class:`Next` continuation
handed to handlers is bound to that state, so nested or concurrent dispatches
never see each other's queue.

Usage::

    def auth(request, response, next_):
        if not request.headers.get("authorization"):
            return response.with_status(403)
        next_.attributes["user"] = "alice"
        return next_(request, response)

    def hello(request, response, next_):
        response = response.with_body(f"hello {next_.attributes['user']}")
        return next_(request, response)

    response = Dispatcher().dispatch(request, response, [auth, hello])
"""
from __future__ import annotations

import collections
import dataclasses
import enum
from collections.abc import Hashable, Mapping
from typing import Any

from mp_middleware.application.pipeline.middleware import (
    Direct,
    Handler,
    HandlerEntry,
    Resolvable,
    Resolver,
    normalize_queue,
)
from mp_middleware.config.settings import DispatcherSettings, EnvSettingsLoader
from mp_middleware.kernel.contracts import Response, is_response
from mp_middleware.kernel.errors import ContractViolationError, InvalidHandlerError
from mp_middleware.observability.logging import Logger, get_logger


class DispatchStatus(enum.Enum):
    """Lifecycle states of one dispatch call."""

    PENDING = "pending"
    """Entries remain; the next ``next_`` call runs one of them."""

    TERMINAL = "terminal"
    """Queue exhausted; ``next_`` returns the response it is given."""


@dataclasses.dataclass
class _Invocation:
    """A handler currently on the call stack."""

    key: Hashable
    advanced: bool = False


@dataclasses.dataclass
class DispatchState:
    """Mutable state of a single dispatch call."""

    queue: collections.deque[tuple[Hashable, HandlerEntry]]
    resolver: Resolver | None = None
    attributes: dict[str, Any] = dataclasses.field(default_factory=dict)
    steps: int = 0
    active: list[_Invocation] = dataclasses.field(default_factory=list)

    @property
    def status(self) -> DispatchStatus:
        return DispatchStatus.PENDING if self.queue else DispatchStatus.TERMINAL


class Next:
    """Continuation passed to every handler of one dispatch call.

    ``next_(request, response)`` runs the next queue entry and returns its
    response.  Once the queue is exhausted it hands *response* back
    unchanged, however often it is called.

    A handler may call it more than once; each call re-enters the already
    shortened queue.  This is allowed but discouraged and is logged as
    ``middleware.reentry`` unless disabled in :class:`DispatcherSettings`.

    Each handler in the chain adds two frames (the handler and this
    ``__call__``), so a chain of pass-through handlers is bounded by roughly
    half of :func:`sys.getrecursionlimit`.
    """

    __slots__ = ("_dispatcher", "_state")

    def __init__(self, dispatcher: Dispatcher, state: DispatchState) -> None:
        self._dispatcher = dispatcher
        self._state = state

    @property
    def attributes(self) -> dict[str, Any]:
        """Attribute bag shared by every handler of this dispatch call."""
        return self._state.attributes

    @property
    def remaining(self) -> int:
        return len(self._state.queue)

    @property
    def status(self) -> DispatchStatus:
        return self._state.status

    @property
    def steps(self) -> int:
        return self._state.steps

    def __call__(self, request: Any, response: Any) -> Any:
        state = self._state
        dispatcher = self._dispatcher
        log = dispatcher.logger

        if state.active:
            caller = state.active[-1]
            if caller.advanced and dispatcher.settings.warn_on_reentry:
                log.warning("middleware.reentry", key=caller.key, remaining=len(state.queue))
            caller.advanced = True

        if not state.queue:
            return response

        key, entry = state.queue.popleft()
        handler = dispatcher._resolve(state, key, entry)  # noqa: SLF001
        state.steps += 1
        if dispatcher.settings.log_steps:
            log.debug("middleware.step", key=key, step=state.steps, remaining=len(state.queue))

        state.active.append(_Invocation(key))
        try:
            result = handler(request, response, self)
        finally:
            state.active.pop()

        if not is_response(result, dispatcher.response_type):
            log.warning(
                "middleware.contract_violation",
                key=key,
                result_type=type(result).__qualname__,
            )
            raise ContractViolationError(key, result, dispatcher.response_type)
        return result

    def __repr__(self) -> str:
        return f"Next(status={self.status.value!r}, remaining={self.remaining})"


class Dispatcher:
    """Walks a queue of handlers, one step per ``next_`` call.

    Parameters
    ----------
    resolver:
        Optional ``(entry, key) -> handler`` applied to every plain or
        :class:`Resolvable` entry before it is called.
    response_type:
        Class (or tuple of classes) a handler's return value must be an
        instance of.  Defaults to the :class:`Response` tag.
    settings:
        Logging switches; defaults to :class:`DispatcherSettings`.  Its
        ``log_level`` filters the module's structlog logger.
    logger:
        Logger to use instead of the module's structlog logger.  Used as
        given; ``log_level`` is not applied to it.
    """

    def __init__(
        self,
        resolver: Resolver | None = None,
        *,
        response_type: type | tuple[type, ...] = Response,
        settings: DispatcherSettings | None = None,
        logger: Logger | None = None,
    ) -> None:
        self._resolver = resolver
        self._response_type = response_type
        self._settings = settings or DispatcherSettings()
        self._log: Logger = logger or get_logger(__name__, level=self._settings.level)

    @classmethod
    def from_env(cls, resolver: Resolver | None = None, **kwargs: Any) -> Dispatcher:
        """Build a dispatcher configured from ``MIDDLEWARE_*`` variables."""
        if "settings" in kwargs:
            raise TypeError(
                "from_env() loads settings from the environment; "
                "pass settings to Dispatcher() instead"
            )
        settings = EnvSettingsLoader().load(DispatcherSettings)
        return cls(resolver, settings=settings, **kwargs)

    @property
    def logger(self) -> Logger:
        return self._log

    @property
    def resolver(self) -> Resolver | None:
        return self._resolver

    @property
    def response_type(self) -> type | tuple[type, ...]:
        return self._response_type

    @property
    def settings(self) -> DispatcherSettings:
        return self._settings

    def dispatch(
        self,
        request: Any,
        response: Any,
        queue: Any,
        *,
        attributes: Mapping[str, Any] | None = None,
    ) -> Any:
        """Run *queue* against *request* and return the final response.

        *queue* is a handler, a list of entries or a mapping of named
        entries.  *attributes* seeds the attribute bag of this call.
        """
        state = DispatchState(
            queue=collections.deque(normalize_queue(queue)),
            resolver=self._resolver,
            attributes=dict(attributes or {}),
        )
        next_ = Next(self, state)
        self._log.debug("middleware.dispatch.started", queue_size=len(state.queue))
        result = next_(request, response)
        self._log.debug("middleware.dispatch.completed", steps=state.steps)
        return result

    def _resolve(self, state: DispatchState, key: Hashable, entry: HandlerEntry) -> Handler:
        if isinstance(entry, Direct):
            handler = entry.handler
        elif isinstance(entry, Resolvable):
            if state.resolver is None:
                self._log.warning("middleware.invalid_handler", key=key, reason="no resolver")
                raise InvalidHandlerError(key, entry.value)
            handler = state.resolver(entry.value, key)
        elif state.resolver is not None:
            handler = state.resolver(entry, key)
        else:
            handler = entry

        if not callable(handler):
            self._log.warning(
                "middleware.invalid_handler", key=key, entry_type=type(handler).__qualname__
            )
            raise InvalidHandlerError(key, handler)
        return handler


def dispatch(
    request: Any,
    response: Any,
    queue: Any,
    resolver: Resolver | None = None,
    *,
    response_type: type | tuple[type, ...] = Response,
    attributes: Mapping[str, Any] | None = None,
) -> Any:
    """Dispatch *queue* with a default-configured :class:`Dispatcher`."""
    return Dispatcher(resolver, response_type=response_type).dispatch(
        request, response, queue, attributes=attributes
    )


__all__ = ["DispatchState", "DispatchStatus", "Dispatcher", "Next", "dispatch"]
