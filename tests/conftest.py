"""Shared test fixtures for ticklist."""

import os
import tempfile

import pytest

from ticklist.core.storage import MemoryStorage
from ticklist.entries import Entry, EntryStatus, EntryStore, PersistenceGateway


@pytest.fixture
def tmp_dir():
    """Provide a temporary directory that is cleaned up after the test."""
    with tempfile.TemporaryDirectory() as d:
        yield d


@pytest.fixture
def tmp_config_file(tmp_dir):
    """Create a temporary YAML config file pointing storage into tmp_dir."""
    import yaml

    config_data = {
        "paths": {"data_dir": tmp_dir},
        "storage": {"backend": "local", "path": os.path.join(tmp_dir, "storage")},
    }
    config_path = os.path.join(tmp_dir, "config.yaml")
    with open(config_path, "w") as f:
        yaml.dump(config_data, f)
    return config_path


@pytest.fixture(autouse=True)
def _isolate_env(monkeypatch):
    """Keep a developer's TICKLIST_* variables out of the tests."""
    for key in list(os.environ):
        if key.startswith("TICKLIST_"):
            monkeypatch.delenv(key)
    yield


@pytest.fixture
def memory_storage():
    return MemoryStorage()


@pytest.fixture
def gateway(memory_storage):
    return PersistenceGateway(memory_storage)


def _make_entries(*specs):
    """Build entries from ``"text"`` or ``("text", EntryStatus)`` specs."""
    entries = []
    for spec in specs:
        if isinstance(spec, tuple):
            entries.append(Entry(spec[0], spec[1]))
        else:
            entries.append(Entry(spec))
    return entries


@pytest.fixture
def store(gateway):
    return EntryStore(
        _make_entries(
            "Buy milk",
            ("Walk dog", EntryStatus.COMPLETED),
            ("Call mom", EntryStatus.EDITING),
            "Pay rent",
        ),
        gateway=gateway,
    )


@pytest.fixture
def make_entries():
    return _make_entries
