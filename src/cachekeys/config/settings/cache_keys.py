"""Config settings – CacheKeySettings."""
from __future__ import annotations

import codecs
import dataclasses

from cachekeys.application.cache.canonical import DEFAULT_SEPARATOR
from cachekeys.application.cache.hashing import HashAlgorithm
from cachekeys.config.settings.loaders import Settings
from cachekeys.kernel.errors import InvalidSettingValueError, UnsupportedAlgorithmError


@dataclasses.dataclass
class CacheKeySettings(Settings):
    """Configuration for :class:`~cachekeys.application.cache.keys.CacheKeyFactory`.

    Environment variables: ``CACHEKEYS_SEPARATOR``, ``CACHEKEYS_ENCODING``,
    ``CACHEKEYS_ALGORITHM``.
    """

    _prefix: dataclasses.ClassVar[str] = "CACHEKEYS"

    separator: str = DEFAULT_SEPARATOR
    encoding: str = "utf-8"
    algorithm: str = HashAlgorithm.SHA1.value

    def _validate(self) -> None:
        try:
            codecs.lookup(self.encoding)
        except LookupError as exc:
            raise InvalidSettingValueError("encoding", self.encoding, "unknown text encoding") from exc
        try:
            HashAlgorithm.parse(self.algorithm)
        except UnsupportedAlgorithmError as exc:
            raise InvalidSettingValueError("algorithm", self.algorithm, "unsupported hash algorithm") from exc


__all__ = ["CacheKeySettings"]
