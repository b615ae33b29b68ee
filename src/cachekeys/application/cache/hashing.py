"""Application cache – hex digests of canonical keys.

Digests are rendered as uppercase hexadecimal, two characters per byte, in
byte order. Hash objects are created once per algorithm by
:class:`HasherCache` and copied for every digest.
"""
from __future__ import annotations

import hashlib
import threading
from enum import Enum
from typing import Any

from cachekeys.kernel.errors import UnsupportedAlgorithmError
from cachekeys.observability.logging import get_logger

logger = get_logger(__name__)


class HashAlgorithm(str, Enum):
    MD5 = "md5"
    SHA1 = "sha1"
    SHA224 = "sha224"
    SHA256 = "sha256"
    SHA384 = "sha384"
    SHA512 = "sha512"
    SHA3_256 = "sha3_256"
    SHA3_512 = "sha3_512"
    BLAKE2B = "blake2b"
    BLAKE2S = "blake2s"

    @classmethod
    def parse(cls, identifier: "HashAlgorithm | str") -> "HashAlgorithm":
        """Resolve *identifier* to a member.

        Strings are matched case-insensitively with ``-`` and ``_`` ignored, so
        ``"SHA-1"``, ``"sha1"`` and ``"Sha_1"`` all name :attr:`SHA1`.

        Raises
        ------
        UnsupportedAlgorithmError
            When *identifier* names no known algorithm.
        """
        if isinstance(identifier, cls):
            return identifier
        if isinstance(identifier, str):
            member = _ALIASES.get(_normalise(identifier))
            if member is not None:
                return member
        raise UnsupportedAlgorithmError(identifier)


def _normalise(identifier: str) -> str:
    return identifier.replace("-", "").replace("_", "").strip().lower()


_ALIASES: dict[str, HashAlgorithm] = {_normalise(m.value): m for m in HashAlgorithm}


def encode_key(text: str, encoding: str = "utf-8") -> bytes:
    """Encode *text* with *encoding*, substituting characters the codec cannot represent.

    Lone surrogates under UTF-8 and non-ASCII characters under ASCII become ``?``
    instead of raising :class:`UnicodeEncodeError`.
    """
    return text.encode(encoding, errors="replace")


def _create_hasher(algorithm: HashAlgorithm) -> Any:
    try:
        # non-security use; MD5/SHA-1 must still load on FIPS builds
        return hashlib.new(algorithm.value, usedforsecurity=False)
    except ValueError as exc:
        logger.warning("cache_key.unsupported_algorithm", algorithm=algorithm.value)
        raise UnsupportedAlgorithmError(algorithm.value, cause=exc) from exc


class HasherCache:
    """Lazily-populated map of algorithm → pristine hash object.

    The first request for an algorithm constructs its hash object under a lock;
    later requests reuse it. :meth:`get` hands out a ``copy()`` so callers never
    share mutable hash state.
    """

    def __init__(self) -> None:
        self._prototypes: dict[HashAlgorithm, Any] = {}
        self._lock = threading.Lock()

    def __contains__(self, algorithm: object) -> bool:
        return algorithm in self._prototypes

    def __len__(self) -> int:
        return len(self._prototypes)

    @property
    def algorithms(self) -> frozenset[HashAlgorithm]:
        return frozenset(self._prototypes)

    def get(self, algorithm: HashAlgorithm) -> Any:
        """Return a fresh hash object for *algorithm*."""
        prototype = self._prototypes.get(algorithm)
        if prototype is None:
            with self._lock:
                prototype = self._prototypes.get(algorithm)
                if prototype is None:
                    prototype = _create_hasher(algorithm)
                    self._prototypes[algorithm] = prototype
                    logger.debug(
                        "cache_key.algorithm_created",
                        algorithm=algorithm.value,
                        digest_size=prototype.digest_size,
                    )
        return prototype.copy()


def digest(
    text: str | None,
    algorithm: HashAlgorithm | str = HashAlgorithm.SHA1,
    *,
    encoding: str = "utf-8",
    cache: HasherCache | None = None,
) -> str | None:
    """Hash *text* and return the uppercase hex digest.

    ``None`` passes straight through without resolving the algorithm or
    touching *cache*. Without a *cache* a throwaway one is used.

    Raises
    ------
    UnsupportedAlgorithmError
        When *algorithm* is unknown or cannot be instantiated.
    """
    if text is None:
        return None
    try:
        resolved = HashAlgorithm.parse(algorithm)
    except UnsupportedAlgorithmError:
        logger.warning("cache_key.unsupported_algorithm", algorithm=str(algorithm))
        raise
    hasher = (cache if cache is not None else HasherCache()).get(resolved)
    hasher.update(encode_key(text, encoding))
    return hasher.hexdigest().upper()


__all__ = ["HashAlgorithm", "HasherCache", "digest", "encode_key"]
