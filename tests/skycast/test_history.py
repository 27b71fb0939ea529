"""Tests for the JSON-file search history."""

from __future__ import annotations

import json
import os
from pathlib import Path

import pytest

from skycast import HistoryStore
from skycast.exceptions import HistoryStoreError


@pytest.fixture
def store(tmp_path: Path) -> HistoryStore:
    return HistoryStore(tmp_path / "data" / "searchHistory.json")


def test_missing_file_reads_empty(store: HistoryStore) -> None:
    assert store.list_cities() == []
    assert not store.path.exists()


def test_empty_file_reads_empty(store: HistoryStore) -> None:
    store.path.parent.mkdir(parents=True)
    store.path.write_text("  \n", encoding="utf-8")
    assert store.list_cities() == []


def test_add_city_persists(store: HistoryStore) -> None:
    entry = store.add_city("Boston")
    assert entry.name == "Boston"
    assert entry.id
    rows = json.loads(store.path.read_text(encoding="utf-8"))
    assert rows == [{"id": entry.id, "name": "Boston"}]


def test_list_in_insertion_order(store: HistoryStore) -> None:
    store.add_city("Boston")
    store.add_city("Denver")
    store.add_city("Austin")
    assert [e.name for e in store.list_cities()] == ["Boston", "Denver", "Austin"]


def test_duplicates_allowed(store: HistoryStore) -> None:
    first = store.add_city("Boston")
    second = store.add_city("Boston")
    assert first.id != second.id
    assert [e.name for e in store.list_cities()] == ["Boston", "Boston"]


def test_remove_city(store: HistoryStore) -> None:
    boston = store.add_city("Boston")
    denver = store.add_city("Denver")
    deleted = store.remove_city(boston.id)
    assert deleted == boston
    assert store.list_cities() == [denver]


def test_remove_only_matching_duplicate(store: HistoryStore) -> None:
    first = store.add_city("Boston")
    second = store.add_city("Boston")
    store.remove_city(second.id)
    assert store.list_cities() == [first]


def test_remove_unknown_id(store: HistoryStore) -> None:
    store.add_city("Boston")
    before = store.path.read_text(encoding="utf-8")
    assert store.remove_city("does-not-exist") is None
    assert store.path.read_text(encoding="utf-8") == before


def test_reopen_sees_entries(tmp_path: Path) -> None:
    path = tmp_path / "history.json"
    HistoryStore(path).add_city("Boston")
    assert [e.name for e in HistoryStore(path).list_cities()] == ["Boston"]


def test_malformed_file(store: HistoryStore) -> None:
    store.path.parent.mkdir(parents=True)
    store.path.write_text("{not json", encoding="utf-8")
    with pytest.raises(HistoryStoreError):
        store.list_cities()


def test_wrong_shape(store: HistoryStore) -> None:
    store.path.parent.mkdir(parents=True)
    store.path.write_text(json.dumps([{"city": "Boston"}]), encoding="utf-8")
    with pytest.raises(HistoryStoreError):
        store.add_city("Denver")


def test_unwritable_location(tmp_path: Path) -> None:
    blocker = tmp_path / "not-a-dir"
    blocker.write_text("", encoding="utf-8")
    store = HistoryStore(blocker / "history.json")
    with pytest.raises(HistoryStoreError):
        store.add_city("Boston")


def test_failed_replace_keeps_file_and_removes_tmp(store: HistoryStore, monkeypatch) -> None:
    boston = store.add_city("Boston")
    before = store.path.read_text(encoding="utf-8")

    def _fail(src, dst):
        raise PermissionError("read-only filesystem")

    monkeypatch.setattr(os, "replace", _fail)
    with pytest.raises(HistoryStoreError, match="read-only filesystem"):
        store.remove_city(boston.id)
    monkeypatch.undo()

    assert store.path.read_text(encoding="utf-8") == before
    assert not store.path.with_suffix(".json.tmp").exists()
