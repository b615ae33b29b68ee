"""Unit tests for hex digests and the per-factory hasher cache."""
from __future__ import annotations

import hashlib
import threading

import pytest
from structlog.testing import capture_logs

from cachekeys.application.cache import HashAlgorithm, HasherCache, digest, encode_key
from cachekeys.application.cache import hashing
from cachekeys.kernel.errors import UnsupportedAlgorithmError

_HEX = set("0123456789ABCDEF")


# ---------------------------------------------------------------------------
# HashAlgorithm
# ---------------------------------------------------------------------------


class TestHashAlgorithm:
    @pytest.mark.parametrize("identifier", ["SHA1", "sha1", "SHA-1", "Sha_1", " sha-1 "])
    def test_parse_sha1_spellings(self, identifier: str) -> None:
        assert HashAlgorithm.parse(identifier) is HashAlgorithm.SHA1

    def test_parse_member_passthrough(self) -> None:
        assert HashAlgorithm.parse(HashAlgorithm.SHA384) is HashAlgorithm.SHA384

    def test_parse_sha3(self) -> None:
        assert HashAlgorithm.parse("SHA3-256") is HashAlgorithm.SHA3_256

    def test_parse_unknown_raises(self) -> None:
        with pytest.raises(UnsupportedAlgorithmError) as exc_info:
            HashAlgorithm.parse("crc32")
        assert exc_info.value.algorithm == "crc32"
        assert exc_info.value.code == "unsupported_algorithm"

    def test_parse_non_string_raises(self) -> None:
        with pytest.raises(UnsupportedAlgorithmError):
            HashAlgorithm.parse(42)  # type: ignore[arg-type]

    def test_parse_unknown_is_silent(self) -> None:
        with capture_logs() as logs:
            with pytest.raises(UnsupportedAlgorithmError):
                HashAlgorithm.parse("whirlpool")
        assert logs == []


# ---------------------------------------------------------------------------
# digest()
# ---------------------------------------------------------------------------


class TestDigest:
    def test_sha1_hello(self) -> None:
        assert digest("Hello", HashAlgorithm.SHA1) == "F7FF9E8B7BB2E09B70935A5D785E0CC5D9D0ABF0"

    def test_md5_hello(self) -> None:
        assert digest("Hello", "MD5") == "8B1A9953C4611296A827ABF8C47804D7"

    def test_sha256_hello(self) -> None:
        assert (
            digest("Hello", "SHA-256")
            == "185F8DB32271FE25F561A6FC938B2E264306EC304EDA518007D1764826381969"
        )

    def test_empty_text(self) -> None:
        assert digest("", HashAlgorithm.SHA1) == "DA39A3EE5E6B4B0D3255BFEF95601890AFD80709"

    def test_default_algorithm_is_sha1(self) -> None:
        assert digest("Hello") == digest("Hello", HashAlgorithm.SHA1)

    @pytest.mark.parametrize("algorithm", list(HashAlgorithm))
    def test_length_and_alphabet(self, algorithm: HashAlgorithm) -> None:
        result = digest("cache-key", algorithm)
        assert result is not None
        assert len(result) == hashlib.new(algorithm.value).digest_size * 2
        assert set(result) <= _HEX

    @pytest.mark.parametrize("algorithm", list(HashAlgorithm))
    def test_none_passes_through(self, algorithm: HashAlgorithm) -> None:
        cache = HasherCache()
        assert digest(None, algorithm, cache=cache) is None
        assert len(cache) == 0

    def test_none_does_not_resolve_algorithm(self) -> None:
        assert digest(None, "not-a-hash") is None

    def test_unknown_algorithm(self) -> None:
        with pytest.raises(UnsupportedAlgorithmError):
            digest("Hello", "rot13")

    def test_encoding_changes_bytes(self) -> None:
        assert digest("é", encoding="utf-8") == "BF15BE717AC1B080B4F1C456692825891FF5073D"
        assert digest("é", encoding="latin-1") == "1599E9FA41EC68C80230491902786BEE889F5BCB"

    def test_deterministic(self) -> None:
        cache = HasherCache()
        assert digest("x", cache=cache) == digest("x", cache=cache)

    def test_unknown_algorithm_logs_warning(self) -> None:
        with capture_logs() as logs:
            with pytest.raises(UnsupportedAlgorithmError):
                digest("Hello", "whirlpool")
        assert logs[0]["event"] == "cache_key.unsupported_algorithm"
        assert logs[0]["algorithm"] == "whirlpool"
        assert logs[0]["log_level"] == "warning"

    def test_lone_surrogate_is_replaced(self) -> None:
        assert digest("\ud800") == "5BAB61EB53176449E25C2C82F172B82CB13FFB9D"

    def test_unencodable_character_is_replaced(self) -> None:
        assert digest("caf\u00e9", encoding="ascii") == "FA273DF572023FBE97FDF4D56071B702204F5B3B"


# ---------------------------------------------------------------------------
# encode_key
# ---------------------------------------------------------------------------


class TestEncodeKey:
    def test_plain_text(self) -> None:
        assert encode_key("Hello~123") == b"Hello~123"

    def test_lone_surrogate_under_utf8(self) -> None:
        assert encode_key("a\ud800b") == b"a?b"

    def test_non_ascii_under_ascii(self) -> None:
        assert encode_key("caf\u00e9", "ascii") == b"caf?"

    def test_latin1_keeps_its_range(self) -> None:
        assert encode_key("caf\u00e9\u20ac", "latin-1") == b"caf\xe9?"


# ---------------------------------------------------------------------------
# HasherCache
# ---------------------------------------------------------------------------


class TestHasherCache:
    def test_starts_empty(self) -> None:
        cache = HasherCache()
        assert len(cache) == 0
        assert cache.algorithms == frozenset()

    def test_populated_lazily(self) -> None:
        cache = HasherCache()
        cache.get(HashAlgorithm.MD5)
        assert HashAlgorithm.MD5 in cache
        assert HashAlgorithm.SHA1 not in cache
        assert cache.algorithms == frozenset({HashAlgorithm.MD5})

    def test_returns_independent_copies(self) -> None:
        cache = HasherCache()
        first = cache.get(HashAlgorithm.SHA1)
        first.update(b"dirty")
        second = cache.get(HashAlgorithm.SHA1)
        assert first is not second
        assert second.hexdigest() == hashlib.sha1(b"").hexdigest()

    def test_created_once(self, monkeypatch: pytest.MonkeyPatch) -> None:
        calls: list[HashAlgorithm] = []
        original = hashing._create_hasher

        def counting(algorithm: HashAlgorithm):
            calls.append(algorithm)
            return original(algorithm)

        monkeypatch.setattr(hashing, "_create_hasher", counting)
        cache = HasherCache()
        for _ in range(5):
            cache.get(HashAlgorithm.SHA256)
        assert calls == [HashAlgorithm.SHA256]

    def test_concurrent_first_use_creates_once(self, monkeypatch: pytest.MonkeyPatch) -> None:
        calls: list[HashAlgorithm] = []
        original = hashing._create_hasher
        workers = 16
        barrier = threading.Barrier(workers)

        def slow(algorithm: HashAlgorithm):
            calls.append(algorithm)
            threading.Event().wait(0.01)
            return original(algorithm)

        monkeypatch.setattr(hashing, "_create_hasher", slow)
        cache = HasherCache()
        results: list[str | None] = []
        results_lock = threading.Lock()

        def worker() -> None:
            barrier.wait()
            value = digest("Hello", HashAlgorithm.SHA1, cache=cache)
            with results_lock:
                results.append(value)

        threads = [threading.Thread(target=worker) for _ in range(workers)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        assert calls == [HashAlgorithm.SHA1]
        assert results == ["F7FF9E8B7BB2E09B70935A5D785E0CC5D9D0ABF0"] * workers

    def test_instantiation_failure_is_unsupported(self, monkeypatch: pytest.MonkeyPatch) -> None:
        def refuse(name: str, *args, **kwargs):
            raise ValueError(f"unsupported hash type {name}")

        monkeypatch.setattr(hashing.hashlib, "new", refuse)
        cache = HasherCache()
        with pytest.raises(UnsupportedAlgorithmError) as exc_info:
            cache.get(HashAlgorithm.MD5)
        assert isinstance(exc_info.value.__cause__, ValueError)
        assert len(cache) == 0

    def test_creation_logged_at_debug(self) -> None:
        cache = HasherCache()
        with capture_logs() as logs:
            cache.get(HashAlgorithm.SHA512)
            cache.get(HashAlgorithm.SHA512)
        created = [e for e in logs if e["event"] == "cache_key.algorithm_created"]
        assert len(created) == 1
        assert created[0]["algorithm"] == "sha512"
        assert created[0]["digest_size"] == 64
        assert created[0]["log_level"] == "debug"
