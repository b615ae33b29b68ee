"""Kernel – framework-agnostic building blocks."""

from cachekeys.kernel.errors import (
    ApplicationError,
    BaseError,
    ConfigError,
    UnsupportedAlgorithmError,
)
from cachekeys.kernel.types import TypeLabel

__all__ = [
    "ApplicationError",
    "BaseError",
    "ConfigError",
    "TypeLabel",
    "UnsupportedAlgorithmError",
]
