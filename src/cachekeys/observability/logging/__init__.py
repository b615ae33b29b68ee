"""Observability – structured logging helpers."""
from cachekeys.observability.logging.factory import JsonLoggerFactory, get_logger

__all__ = ["JsonLoggerFactory", "get_logger"]
