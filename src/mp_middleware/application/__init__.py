"""Application – request/response middleware dispatch."""

from mp_middleware.application.pipeline import (
    Direct,
    Dispatcher,
    Middleware,
    Next,
    Pipeline,
    Resolvable,
    dispatch,
)

__all__ = [
    "Direct",
    "Dispatcher",
    "Middleware",
    "Next",
    "Pipeline",
    "Resolvable",
    "dispatch",
]
