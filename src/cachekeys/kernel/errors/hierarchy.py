"""Errors raised while configuring or running key derivation."""

from __future__ import annotations

import json
from typing import Any


class BaseError(Exception):
    """Root of every cachekeys error.

    Each error carries a machine-readable ``code`` (``default_code`` unless
    overridden) and a JSON-safe ``detail`` mapping, so it can be logged as a
    single structured event. ``cause`` is chained as ``__cause__``.
    """

    default_code: str = "base_error"

    def __init__(
        self,
        message: str,
        *,
        code: str | None = None,
        detail: dict[str, Any] | None = None,
        cause: BaseException | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.code = code if code is not None else self.default_code
        self.detail: dict[str, Any] = dict(detail) if detail else {}
        self.cause = cause
        if cause is not None:
            self.__cause__ = cause

    def to_dict(self) -> dict[str, Any]:
        payload: dict[str, Any] = {"code": self.code, "message": self.message, "detail": self.detail}
        if self.cause is not None:
            payload["cause"] = repr(self.cause)
        return payload

    def __str__(self) -> str:
        return json.dumps(self.to_dict(), ensure_ascii=False, default=str)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(code={self.code!r}, message={self.message!r})"


class ApplicationError(BaseError):
    """Failure surfaced to the code calling into cachekeys."""

    default_code = "application_error"


class UnsupportedAlgorithmError(ApplicationError):
    """A digest was requested with an algorithm that cannot be instantiated.

    ``algorithm`` holds the identifier exactly as the caller passed it.
    """

    default_code = "unsupported_algorithm"

    def __init__(
        self,
        algorithm: object,
        message: str | None = None,
        **kwargs: Any,
    ) -> None:
        kwargs.setdefault("detail", {"algorithm": str(algorithm)})
        super().__init__(message or f"Unsupported hash algorithm {algorithm!r}", **kwargs)
        self.algorithm = algorithm


# ---------------------------------------------------------------------------
# Configuration
# ---------------------------------------------------------------------------


class ConfigError(ApplicationError):
    """Cache key settings could not be loaded or are inconsistent."""

    default_code = "config_error"


class MissingRequiredSettingError(ConfigError):
    default_code = "missing_required_setting"

    def __init__(self, setting_name: str) -> None:
        super().__init__(
            f"Required setting '{setting_name}' is missing",
            detail={"setting": setting_name},
        )
        self.setting_name = setting_name


class InvalidSettingValueError(ConfigError):
    """A separator, encoding or algorithm value was present but unusable."""

    default_code = "invalid_setting_value"

    def __init__(self, setting_name: str, value: object, reason: str) -> None:
        super().__init__(
            f"Setting '{setting_name}' has invalid value {value!r}: {reason}",
            detail={"setting": setting_name, "reason": reason},
        )
        self.setting_name = setting_name
        self.value = value
        self.reason = reason


__all__ = [
    "ApplicationError",
    "BaseError",
    "ConfigError",
    "InvalidSettingValueError",
    "MissingRequiredSettingError",
    "UnsupportedAlgorithmError",
]
