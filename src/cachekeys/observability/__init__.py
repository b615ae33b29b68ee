"""Observability – structlog-based logging."""
from cachekeys.observability.logging import JsonLoggerFactory, get_logger

__all__ = ["JsonLoggerFactory", "get_logger"]
