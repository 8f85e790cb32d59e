"""Application pipeline – Pipeline class."""
from __future__ import annotations

from collections.abc import Hashable, Mapping
from typing import Any

from mp_middleware.application.pipeline.dispatcher import Dispatcher
from mp_middleware.application.pipeline.middleware import HandlerEntry, Resolver
from mp_middleware.config.settings import DispatcherSettings
from mp_middleware.kernel.contracts import Response
from mp_middleware.observability.logging import Logger


class Pipeline:
    """Ordered, reusable collection of middleware entries.

    Entries added without a key are numbered by position; named entries keep
    their name, which shows up in resolver calls and dispatch errors::

        pipeline = (
            Pipeline(resolver=container.get)
            .add(cors)
            .add("auth", key="auth")
            .add(router)
        )
        response = pipeline.execute(request, response)
    """

    def __init__(
        self,
        resolver: Resolver | None = None,
        *,
        response_type: type | tuple[type, ...] = Response,
        settings: DispatcherSettings | None = None,
        logger: Logger | None = None,
    ) -> None:
        self._dispatcher = Dispatcher(
            resolver, response_type=response_type, settings=settings, logger=logger
        )
        self._entries: dict[Hashable, HandlerEntry] = {}
        self._positional = 0

    def add(self, entry: HandlerEntry, key: Hashable | None = None) -> Pipeline:
        """Append an entry (fluent API)."""
        if key is None:
            key = self._positional
            self._positional += 1
        if key in self._entries:
            raise ValueError(f"Duplicate middleware key {key!r}")
        self._entries[key] = entry
        return self

    def keys(self) -> list[Hashable]:
        return list(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def execute(
        self,
        request: Any,
        response: Any,
        *,
        attributes: Mapping[str, Any] | None = None,
    ) -> Any:
        """Run every entry against *request*, starting from *response*."""
        return self._dispatcher.dispatch(
            request, response, dict(self._entries), attributes=attributes
        )


__all__ = ["Pipeline"]
