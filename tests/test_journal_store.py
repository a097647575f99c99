"""
JournalStoreのテスト
"""

import asyncio
import json

import pytest

from src.journal.exceptions import CorruptStateError, PersistenceError
from src.journal.models import Entry, JournalDocument
from src.journal.store import JournalStore


@pytest.fixture
def journal_path(tmp_path):
    return tmp_path / "journals" / "journals.json"


def test_load_missing_file_returns_empty_document(journal_path):
    store = JournalStore(journal_path)
    document = asyncio.run(store.load())

    assert document == JournalDocument()
    assert not journal_path.exists()


def test_load_empty_file_returns_empty_document(journal_path):
    journal_path.parent.mkdir(parents=True)
    journal_path.write_text("", encoding="utf-8")

    document = asyncio.run(JournalStore(journal_path).load())
    assert document.prompts == []


def test_load_invalid_json_raises_corrupt_state(journal_path):
    journal_path.parent.mkdir(parents=True)
    journal_path.write_text("{not json", encoding="utf-8")
    store = JournalStore(journal_path)

    with pytest.raises(CorruptStateError):
        asyncio.run(store.load())
    assert store.cached is None


def test_load_non_utf8_file_raises_corrupt_state(journal_path):
    journal_path.parent.mkdir(parents=True)
    journal_path.write_bytes(b'{"prompts":[{"id":"a","prompt":"\xff\xfe"}]}')
    store = JournalStore(journal_path)

    with pytest.raises(CorruptStateError):
        asyncio.run(store.load())
    assert store.cached is None


def test_save_and_reload_roundtrip(journal_path):
    document = JournalDocument(
        prompts=[
            Entry(id="a1", date="2024-01-01", prompt="Hello", story="Someone said hello."),
            Entry(id="b2", date="2024-01-02", prompt="日本語の日記"),
        ]
    )
    asyncio.run(JournalStore(journal_path).save(document))

    reloaded = asyncio.run(JournalStore(journal_path).load())
    assert reloaded == document

    raw = json.loads(journal_path.read_text(encoding="utf-8"))
    assert raw["prompts"][1] == {"id": "b2", "date": "2024-01-02", "prompt": "日本語の日記"}
    assert "日本語" in journal_path.read_text(encoding="utf-8")


def test_save_creates_missing_directories(tmp_path):
    path = tmp_path / "a" / "b" / "journals.json"
    asyncio.run(JournalStore(path).save(JournalDocument()))

    assert json.loads(path.read_text(encoding="utf-8")) == {"prompts": []}
    assert [p.name for p in path.parent.iterdir()] == ["journals.json"]


def test_load_uses_cache_until_forced(journal_path):
    store = JournalStore(journal_path)
    asyncio.run(store.save(JournalDocument(prompts=[Entry(id="a", date="", prompt="p")])))

    journal_path.write_text(json.dumps({"prompts": []}), encoding="utf-8")

    assert len(asyncio.run(store.load()).prompts) == 1
    assert asyncio.run(store.load(force=True)).prompts == []


def test_save_failure_keeps_cached_document(tmp_path):
    blocker = tmp_path / "blocker"
    blocker.write_text("not a directory", encoding="utf-8")
    store = JournalStore(tmp_path / "ok" / "journals.json")
    original = asyncio.run(store.load())

    store.journal_path = blocker / "journals.json"
    new_document = JournalDocument(prompts=[Entry(id="a", date="", prompt="p")])

    with pytest.raises(PersistenceError):
        asyncio.run(store.save(new_document))
    assert store.cached is original


def test_path_from_environment(tmp_path, monkeypatch):
    env_path = tmp_path / "env" / "journals.json"
    monkeypatch.setenv("STORY_JOURNAL_DATA_PATH", str(env_path))

    assert JournalStore().journal_path == env_path
    assert JournalStore(tmp_path / "explicit.json").journal_path == tmp_path / "explicit.json"
