"""Tests for the on-disk JSON store."""

import json

import pytest

from wow_regional_api import CacheError
from wow_regional_api.core.protocols import JSONStoreProtocol
from wow_regional_api.infrastructure.cache import JSONFileStore


class TestJSONFileStore:
    """Tests for JSONFileStore."""

    @pytest.fixture
    def store(self):
        return JSONFileStore()

    def test_implements_protocol(self, store):
        assert isinstance(store, JSONStoreProtocol)

    def test_write_and_read(self, store, tmp_path):
        path = tmp_path / "regions.json"

        store.write_json(path, {"eu": {"name": "Europe", "realms": {"aerie-peak": "Aerie Peak"}}})

        assert store.exists(path)
        assert store.read_json(path)["eu"]["realms"] == {"aerie-peak": "Aerie Peak"}

    def test_write_keeps_unicode(self, store, tmp_path):
        path = tmp_path / "realm.json"

        store.write_json(path, {"name": "Aggra (Português)"})

        assert "Português" in path.read_text(encoding="utf-8")

    def test_overwrite_leaves_no_temp_files(self, store, tmp_path):
        path = tmp_path / "character.json"

        store.write_json(path, {"cacheTime": 1})
        store.write_json(path, {"cacheTime": 2})

        assert [p.name for p in tmp_path.iterdir()] == ["character.json"]
        assert json.loads(path.read_text(encoding="utf-8")) == {"cacheTime": 2}

    def test_write_bytes(self, store, tmp_path):
        path = tmp_path / "icon.jpg"

        store.write_bytes(path, b"\x00\x01")

        assert path.read_bytes() == b"\x00\x01"

    def test_write_into_missing_directory(self, store, tmp_path):
        path = tmp_path / "missing" / "file.json"

        with pytest.raises(CacheError) as exc_info:
            store.write_json(path, {})

        assert exc_info.value.path == str(path)

    def test_unserializable_value(self, store, tmp_path):
        with pytest.raises(CacheError):
            store.write_json(tmp_path / "bad.json", {"value": object()})

    def test_read_missing_file(self, store, tmp_path):
        with pytest.raises(CacheError):
            store.read_json(tmp_path / "missing.json")

    def test_read_invalid_json(self, store, tmp_path):
        path = tmp_path / "broken.json"
        path.write_text("{", encoding="utf-8")

        with pytest.raises(CacheError, match="Invalid JSON"):
            store.read_json(path)

    def test_ensure_directory(self, store, tmp_path):
        directory = store.ensure_directory(tmp_path / "characters" / "eu-draenor")

        assert directory.is_dir()
        # Existing directories are fine
        assert store.ensure_directory(directory) == directory

    def test_exists_ignores_directories(self, store, tmp_path):
        assert not store.exists(tmp_path)
