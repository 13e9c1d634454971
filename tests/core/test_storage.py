"""Tests for core.storage — LocalStorage, MemoryStorage + compression utilities."""

import pytest

from ticklist.core.config import Config
from ticklist.core.exceptions import ConfigurationError
from ticklist.core.storage import (
    CompressionType,
    LocalStorage,
    MemoryStorage,
    StorageKeyError,
    StoragePermissionError,
    StorageUnavailableError,
    compress_bytes,
    decode_json,
    decompress_bytes,
    encode_json,
    open_storage,
)

# ── Compression utilities ───────────────────────────────────────────


class TestCompression:
    def test_gzip_roundtrip(self):
        data = b"hello world" * 100
        compressed = compress_bytes(data, CompressionType.GZIP)
        assert compressed != data
        assert decompress_bytes(compressed, CompressionType.GZIP) == data

    def test_none_passthrough(self):
        data = b"untouched"
        assert compress_bytes(data, CompressionType.NONE) is data
        assert decompress_bytes(data, CompressionType.NONE) is data

    def test_json_compressed(self):
        obj = [{"description": "x", "status": "New"}]
        assert decode_json(encode_json(obj, CompressionType.GZIP), CompressionType.GZIP) == obj


# ── LocalStorage ────────────────────────────────────────────────────


class TestLocalStorage:
    @pytest.fixture
    def storage(self, tmp_path):
        return LocalStorage(base_path=str(tmp_path / "store"))

    def test_set_and_get(self, storage):
        storage.set("ticklist.entries", b"[]")
        assert storage.get("ticklist.entries") == b"[]"

    def test_overwrite(self, storage):
        storage.set("k", b"one")
        storage.set("k", b"two")
        assert storage.get("k") == b"two"

    def test_compressed_file(self, tmp_path):
        storage = LocalStorage(base_path=str(tmp_path), compress=True)
        data = b"repeated " * 500
        storage.set("big", data)
        assert (tmp_path / "big.gz").exists()
        assert not (tmp_path / "big").exists()
        assert storage.get("big") == data

    def test_switching_compression_drops_stale_copy(self, tmp_path):
        LocalStorage(base_path=str(tmp_path), compress=True).set("k", b"old")
        plain = LocalStorage(base_path=str(tmp_path))
        plain.set("k", b"new")
        assert not (tmp_path / "k.gz").exists()
        assert plain.get("k") == b"new"

    def test_exists(self, storage):
        assert not storage.exists("missing")
        storage.set("present", b"hi")
        assert storage.exists("present")

    def test_delete(self, storage):
        storage.set("to_delete", b"bye")
        assert storage.delete("to_delete")
        assert not storage.exists("to_delete")
        assert not storage.delete("to_delete")  # already gone

    def test_keys(self, storage):
        storage.set("a/1", b"a1")
        storage.set("a/2", b"a2")
        storage.set("b/1", b"b1")
        assert len(list(storage.keys())) == 3
        assert sorted(storage.keys(prefix="a/")) == ["a/1", "a/2"]

    def test_get_missing_raises(self, storage):
        with pytest.raises(StorageKeyError, match="not found"):
            storage.get("no_such_key")

    @pytest.mark.parametrize("key", ["", "   ", "../escape", "/etc/passwd", "~/x", "a\\b", "a\x00b"])
    def test_unsafe_keys_rejected(self, storage, key):
        with pytest.raises(StoragePermissionError):
            storage.set(key, b"x")

    def test_unavailable_base_path(self, tmp_path):
        blocker = tmp_path / "file"
        blocker.write_text("not a directory")
        with pytest.raises(StorageUnavailableError):
            LocalStorage(base_path=str(blocker / "sub"))


# ── MemoryStorage ───────────────────────────────────────────────────


class TestMemoryStorage:
    def test_roundtrip_and_delete(self):
        storage = MemoryStorage()
        storage.set("k", b"v")
        assert storage.get("k") == b"v"
        assert list(storage.keys()) == ["k"]
        assert storage.delete("k")
        assert not storage.delete("k")

    def test_missing_key(self):
        with pytest.raises(StorageKeyError):
            MemoryStorage().get("k")


# ── open_storage ────────────────────────────────────────────────────


class TestOpenStorage:
    def test_local(self, tmp_dir):
        storage = open_storage(Config(data_dir=tmp_dir))
        assert isinstance(storage, LocalStorage)
        assert str(storage.base_path).endswith("storage")

    def test_memory(self, tmp_dir):
        config = Config(data_dir=tmp_dir, defaults={"storage": {"backend": "memory"}})
        assert isinstance(open_storage(config), MemoryStorage)

    def test_compress_from_env(self, tmp_dir, monkeypatch):
        monkeypatch.setenv("TICKLIST_STORAGE__COMPRESS", "true")
        storage = open_storage(Config(data_dir=tmp_dir))
        assert storage.compress is True

    def test_unknown_backend(self, tmp_dir):
        config = Config(data_dir=tmp_dir, defaults={"storage": {"backend": "s3"}})
        with pytest.raises(ConfigurationError, match="Unknown storage backend"):
            open_storage(config)
