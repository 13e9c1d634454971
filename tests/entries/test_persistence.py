"""Tests for the persistence gateway."""

import gzip
import json

import pytest

from ticklist.core.config import DEFAULT_STORAGE_KEY
from ticklist.core.storage import LocalStorage, MemoryStorage, StoragePermissionError
from ticklist.entries import Entry, EntryStatus, PersistenceGateway
from ticklist.entries.placeholders import ANIMALS, generate


@pytest.fixture
def sample(make_entries):
    return make_entries(
        "Buy milk",
        ("Walk dog", EntryStatus.COMPLETED),
        ("Call mom", EntryStatus.EDITING),
        "",
    )


class TestSaveLoad:
    def test_roundtrip(self, gateway, sample):
        gateway.save(sample)
        assert gateway.load() == sample

    def test_roundtrip_local_compressed(self, tmp_path, sample):
        gateway = PersistenceGateway(LocalStorage(base_path=str(tmp_path), compress=True))
        gateway.save(sample)
        assert PersistenceGateway(LocalStorage(base_path=str(tmp_path))).load() == sample

    def test_save_overwrites(self, gateway, sample):
        gateway.save(sample)
        gateway.save(sample[:1])
        assert gateway.load() == sample[:1]

    def test_layout(self, memory_storage, gateway):
        gateway.save([Entry("Buy milk")])
        blob = json.loads(memory_storage.get(DEFAULT_STORAGE_KEY))
        assert blob == [{"description": "Buy milk", "status": "New"}]

    def test_custom_key(self, memory_storage):
        gateway = PersistenceGateway(memory_storage, key="other")
        gateway.save([Entry("x")])
        assert memory_storage.exists("other")
        assert not memory_storage.exists(DEFAULT_STORAGE_KEY)

    def test_unicode(self, gateway):
        gateway.save([Entry("Café ☕")])
        assert gateway.load()[0].description == "Café ☕"


class TestLoadFailures:
    def test_missing_slot(self, gateway):
        assert gateway.load() is None

    @pytest.mark.parametrize(
        "blob",
        [
            b"not json",
            b"\xff\xfe",
            b'{"description": "x", "status": "New"}',
            b'[{"description": "x", "status": "Archived"}]',
            b'[{"text": "x", "status": "New"}]',
            b'["x"]',
        ],
    )
    def test_malformed_returns_none(self, memory_storage, gateway, blob):
        memory_storage.set(DEFAULT_STORAGE_KEY, blob)
        assert gateway.load() is None

    @pytest.mark.parametrize(
        "blob",
        [
            b"not gzip at all",
            gzip.compress(b'[{"description": "x", "status": "New"}]')[:-12],
            b"\x1f\x8b\x08\x00\x00\x00\x00\x00\x00\x03garbage-deflate",
        ],
    )
    def test_corrupt_compressed_slot_falls_back(self, tmp_path, blob):
        (tmp_path / f"{DEFAULT_STORAGE_KEY}.gz").write_bytes(blob)
        gateway = PersistenceGateway(LocalStorage(base_path=str(tmp_path), compress=True))
        assert gateway.load() is None
        assert gateway.load_or_default() == []

    def test_permission_error_propagates(self):
        class LockedStorage(MemoryStorage):
            def get(self, key):
                raise StoragePermissionError(f"Cannot read {key}")

        with pytest.raises(StoragePermissionError):
            PersistenceGateway(LockedStorage()).load()


class TestLoadOrDefault:
    def test_prefers_saved(self, gateway, sample):
        gateway.save(sample)
        assert gateway.load_or_default(placeholder_count=5) == sample

    def test_empty_when_nothing_saved(self, gateway):
        assert gateway.load_or_default() == []

    def test_placeholders_when_nothing_saved(self, gateway):
        entries = gateway.load_or_default(placeholder_count=5)
        assert len(entries) == 5
        assert all(e.status == EntryStatus.NEW for e in entries)

    def test_corrupt_falls_back(self, memory_storage, gateway):
        memory_storage.set(DEFAULT_STORAGE_KEY, b"[[[")
        assert gateway.load_or_default() == []


class TestPlaceholders:
    def test_generate(self):
        import random

        entries = generate(20, rng=random.Random(7))
        assert len(entries) == 20
        assert all(e.description in ANIMALS for e in entries)

    def test_generate_zero(self):
        assert generate(0) == []
        assert generate(-3) == []

    def test_memory_storage_isolated(self):
        assert PersistenceGateway(MemoryStorage()).load() is None
