"""
cachekeys – deterministic cache key derivation.

Import path convention::

    from cachekeys import CacheKeyFactory, HashAlgorithm, TypeLabel
    from cachekeys.kernel.errors import UnsupportedAlgorithmError
    from cachekeys.config import CacheKeySettings, EnvSettingsLoader
"""

from cachekeys.application.cache import CacheKeyFactory, HashAlgorithm
from cachekeys.kernel.errors import UnsupportedAlgorithmError
from cachekeys.kernel.types import TypeLabel

__version__ = "0.1.0"
__all__ = [
    "CacheKeyFactory",
    "HashAlgorithm",
    "TypeLabel",
    "UnsupportedAlgorithmError",
    "__version__",
]
