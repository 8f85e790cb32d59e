"""Observability – structured logging ports and helpers."""
from mp_middleware.observability.logging.factory import JsonLoggerFactory
from mp_middleware.observability.logging.processors import get_logger
from mp_middleware.observability.logging.protocol import Logger

__all__ = ["JsonLoggerFactory", "Logger", "get_logger"]
