"""Tests for the JSON store and storage backends."""

import json

import pytest

from lemma_decks.exceptions import StoreCorruptedError, StoreError
from lemma_decks.services.json_store import FileStorage, JsonStore, MemoryStorage


class TestLoad:
    def test_absent_returns_default(self):
        store = JsonStore(MemoryStorage())
        default = []
        assert store.load(default, "meanings.json") is default

    def test_loads_list(self):
        store = JsonStore(MemoryStorage({"m.json": '[{"w": "a"}]'}))
        assert store.load([], "m.json") == [{"w": "a"}]

    def test_loads_dict(self):
        store = JsonStore(MemoryStorage({"i.json": '{"the-det": "ðə"}'}))
        assert store.load({}, "i.json") == {"the-det": "ðə"}

    def test_empty_document_returns_default(self):
        store = JsonStore(MemoryStorage({"m.json": "  \n"}))
        assert store.load([], "m.json") == []

    def test_malformed_raises(self):
        store = JsonStore(MemoryStorage({"m.json": "[{not json"}))
        with pytest.raises(StoreCorruptedError):
            store.load([], "m.json")

    def test_invalid_utf8_file_raises(self, tmp_path):
        (tmp_path / "meanings.json").write_bytes(b'[{"w": "caf\xe9"}]')
        store = JsonStore(FileStorage(tmp_path))
        with pytest.raises(StoreCorruptedError, match="UTF-8"):
            store.load([], "meanings.json")

    def test_shape_mismatch_raises(self):
        store = JsonStore(MemoryStorage({"i.json": "[]"}))
        with pytest.raises(StoreCorruptedError, match="expected dict"):
            store.load({}, "i.json")


class TestSave:
    def test_overwrites_whole_document(self):
        backend = MemoryStorage({"m.json": "[1, 2, 3]"})
        JsonStore(backend).save([4], "m.json")
        assert json.loads(backend.documents["m.json"]) == [4]

    def test_tab_indent_and_unicode(self):
        backend = MemoryStorage()
        JsonStore(backend).save({"the-det": "ðə"}, "i.json")
        text = backend.documents["i.json"]
        assert "\t" in text
        assert "ðə" in text

    def test_dict_keys_sorted(self):
        backend = MemoryStorage()
        JsonStore(backend).save({"b": "1", "a": "2"}, "i.json")
        text = backend.documents["i.json"]
        assert text.index('"a"') < text.index('"b"')

    def test_unencodable_value(self):
        with pytest.raises(StoreError):
            JsonStore(MemoryStorage()).save({"x": object()}, "i.json")

    def test_write_failure_wraps_oserror(self):
        class BrokenStorage(MemoryStorage):
            def write_text(self, name, text):
                raise OSError("disk full")

        with pytest.raises(StoreError, match="disk full"):
            JsonStore(BrokenStorage()).save([], "m.json")


class TestFileStorage:
    def test_missing_file_reads_none(self, tmp_path):
        assert FileStorage(tmp_path).read_text("none.json") is None

    def test_write_creates_directory(self, tmp_path):
        storage = FileStorage(tmp_path / "input")
        storage.write_text("m.json", "[]")
        assert (tmp_path / "input" / "m.json").read_text(encoding="utf-8") == "[]"

    def test_store_on_files(self, tmp_path):
        store = JsonStore(FileStorage(tmp_path))
        store.save([{"w": "the"}], "m.json")
        assert store.load([], "m.json") == [{"w": "the"}]
