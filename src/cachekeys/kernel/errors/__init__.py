"""Kernel error hierarchy — public re-export surface.

Hierarchy::

    BaseError
    └── ApplicationError
        ├── UnsupportedAlgorithmError
        └── ConfigError
            ├── MissingRequiredSettingError
            └── InvalidSettingValueError
"""

from cachekeys.kernel.errors.hierarchy import (
    ApplicationError,
    BaseError,
    ConfigError,
    InvalidSettingValueError,
    MissingRequiredSettingError,
    UnsupportedAlgorithmError,
)

__all__ = [
    "ApplicationError",
    "BaseError",
    "ConfigError",
    "InvalidSettingValueError",
    "MissingRequiredSettingError",
    "UnsupportedAlgorithmError",
]
