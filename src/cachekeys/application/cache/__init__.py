"""Application cache – deterministic cache key derivation."""
from cachekeys.application.cache.canonical import DEFAULT_SEPARATOR, canonicalize, render_value
from cachekeys.application.cache.hashing import HashAlgorithm, HasherCache, digest, encode_key
from cachekeys.application.cache.keys import CacheKeyFactory

__all__ = [
    "DEFAULT_SEPARATOR",
    "CacheKeyFactory",
    "HashAlgorithm",
    "HasherCache",
    "canonicalize",
    "digest",
    "encode_key",
    "render_value",
]
