"""Application – use-case building blocks (framework-agnostic)."""

from cachekeys.application.cache import CacheKeyFactory, HashAlgorithm

__all__ = ["CacheKeyFactory", "HashAlgorithm"]
