"""Application cache – CacheKeyFactory.

Derives deterministic cache keys from an ordered list of inputs, optionally
prefixed by a type label and optionally hashed::

    factory = CacheKeyFactory()
    factory.derive_key(["Hello", 123])                   # "Hello~123"
    factory.derive_key_for(Widget, [123, "Hello"])       # "Widget~123~Hello"
    factory.derive_key_hash(["Hello"], algorithm="SHA-256")

Every method accepts ``inputs=None``. Without a label that yields ``None``
("no key"); with a label the label alone is used.
"""
from __future__ import annotations

import codecs
from typing import TYPE_CHECKING, Sequence

from cachekeys.application.cache.canonical import DEFAULT_SEPARATOR, canonicalize
from cachekeys.application.cache.hashing import HashAlgorithm, HasherCache, digest, encode_key
from cachekeys.kernel.errors import InvalidSettingValueError
from cachekeys.kernel.types import TypeLabel

if TYPE_CHECKING:
    from cachekeys.config.settings import CacheKeySettings

__all__ = ["CacheKeyFactory"]


class CacheKeyFactory:
    """Factory for deterministic cache keys.

    Parameters
    ----------
    separator:
        Token placed between rendered inputs. Defaults to ``"~"``.
    encoding:
        Codec used to turn keys into bytes for hashing and for the
        ``derive_byte_*`` methods. Defaults to UTF-8.
    algorithm:
        Hash algorithm used when a ``*_hash`` method is not given one.
        Defaults to SHA-1.

    Raises
    ------
    InvalidSettingValueError
        When *encoding* is not a known codec.
    UnsupportedAlgorithmError
        When *algorithm* names no known hash algorithm.
    """

    def __init__(
        self,
        separator: str = DEFAULT_SEPARATOR,
        encoding: str = "utf-8",
        algorithm: HashAlgorithm | str = HashAlgorithm.SHA1,
    ) -> None:
        try:
            codecs.lookup(encoding)
        except LookupError as exc:
            raise InvalidSettingValueError("encoding", encoding, "unknown text encoding") from exc
        self._separator = separator
        self._encoding = encoding
        self._algorithm = HashAlgorithm.parse(algorithm)
        self._hashers = HasherCache()

    @classmethod
    def from_settings(cls, settings: "CacheKeySettings") -> "CacheKeyFactory":
        return cls(
            separator=settings.separator,
            encoding=settings.encoding,
            algorithm=settings.algorithm,
        )

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(separator={self._separator!r}, "
            f"encoding={self._encoding!r}, algorithm={self._algorithm.value!r})"
        )

    @property
    def separator(self) -> str:
        return self._separator

    @property
    def encoding(self) -> str:
        return self._encoding

    @property
    def default_algorithm(self) -> HashAlgorithm:
        return self._algorithm

    @property
    def cached_algorithms(self) -> frozenset[HashAlgorithm]:
        """Algorithms whose hash objects this factory has created so far."""
        return self._hashers.algorithms

    # ------------------------------------------------------------------
    # String keys
    # ------------------------------------------------------------------

    def derive_key(self, inputs: Sequence[object] | None) -> str | None:
        """Join *inputs* into a key; ``None`` when *inputs* is ``None``."""
        return canonicalize(inputs, self._separator)

    def derive_key_for(
        self,
        label: TypeLabel | type | str,
        inputs: Sequence[object] | None = None,
        *,
        qualified: bool = False,
    ) -> str:
        """Join *inputs* into a key led by *label*.

        *qualified* picks the label's fully-qualified form over its short one.
        """
        return canonicalize(inputs, self._separator, self._label_text(label, qualified))  # type: ignore[return-value]

    # ------------------------------------------------------------------
    # Hash keys
    # ------------------------------------------------------------------

    def derive_key_hash(
        self,
        inputs: Sequence[object] | None,
        *,
        algorithm: HashAlgorithm | str | None = None,
    ) -> str | None:
        """Uppercase hex digest of :meth:`derive_key`; ``None`` passes through."""
        return self._digest(self.derive_key(inputs), algorithm)

    def derive_key_hash_for(
        self,
        label: TypeLabel | type | str,
        inputs: Sequence[object] | None = None,
        *,
        algorithm: HashAlgorithm | str | None = None,
        qualified: bool = False,
    ) -> str:
        """Uppercase hex digest of :meth:`derive_key_for`."""
        return self._digest(self.derive_key_for(label, inputs, qualified=qualified), algorithm)  # type: ignore[return-value]

    # ------------------------------------------------------------------
    # Byte keys
    # ------------------------------------------------------------------

    def derive_byte_key(self, inputs: Sequence[object] | None) -> bytes | None:
        return self._encode(self.derive_key(inputs))

    def derive_byte_key_for(
        self,
        label: TypeLabel | type | str,
        inputs: Sequence[object] | None = None,
        *,
        qualified: bool = False,
    ) -> bytes:
        return self._encode(self.derive_key_for(label, inputs, qualified=qualified))  # type: ignore[return-value]

    def derive_byte_key_hash(
        self,
        inputs: Sequence[object] | None,
        *,
        algorithm: HashAlgorithm | str | None = None,
    ) -> bytes | None:
        return self._encode(self.derive_key_hash(inputs, algorithm=algorithm))

    def derive_byte_key_hash_for(
        self,
        label: TypeLabel | type | str,
        inputs: Sequence[object] | None = None,
        *,
        algorithm: HashAlgorithm | str | None = None,
        qualified: bool = False,
    ) -> bytes:
        return self._encode(  # type: ignore[return-value]
            self.derive_key_hash_for(label, inputs, algorithm=algorithm, qualified=qualified)
        )

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    @staticmethod
    def _label_text(label: TypeLabel | type | str, qualified: bool) -> str:
        return TypeLabel.coerce(label).select(qualified)

    def _digest(self, key: str | None, algorithm: HashAlgorithm | str | None) -> str | None:
        return digest(
            key,
            self._algorithm if algorithm is None else algorithm,
            encoding=self._encoding,
            cache=self._hashers,
        )

    def _encode(self, key: str | None) -> bytes | None:
        if key is None:
            return None
        return encode_key(key, self._encoding)
