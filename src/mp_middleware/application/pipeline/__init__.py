"""Application pipeline – sequential middleware dispatch."""
from mp_middleware.application.pipeline.middleware import (
    Direct,
    Handler,
    HandlerEntry,
    Middleware,
    Resolvable,
    Resolver,
    normalize_queue,
)
from mp_middleware.application.pipeline.dispatcher import (
    DispatchState,
    DispatchStatus,
    Dispatcher,
    Next,
    dispatch,
)
from mp_middleware.application.pipeline.pipeline import Pipeline

__all__ = [
    "Direct",
    "DispatchState",
    "DispatchStatus",
    "Dispatcher",
    "Handler",
    "HandlerEntry",
    "Middleware",
    "Next",
    "Pipeline",
    "Resolvable",
    "Resolver",
    "dispatch",
    "normalize_queue",
]
