"""Observability – get_logger helper."""
from __future__ import annotations

from typing import Any

import structlog


def get_logger(name: str | None = None, *, level: int | None = None, **initial_values: Any) -> Any:
    """Return a bound structlog logger.

    Parameters
    ----------
    name:
        Logger name (typically ``__name__`` of the calling module).
    level:
        Minimum stdlib level (``logging.INFO`` ...).  Calls below it become
        no-ops before any processor runs.  ``None`` keeps the configured
        wrapper class.
    **initial_values:
        Key-value pairs to bind on the returned logger.
    """
    if level is None:
        logger = structlog.get_logger(name)
        if initial_values:
            logger = logger.bind(**initial_values)
        return logger

    return structlog.wrap_logger(
        None,
        wrapper_class=structlog.make_filtering_bound_logger(level),
        logger_factory_args=(name,) if name is not None else (),
        **initial_values,
    )


__all__ = ["get_logger"]
