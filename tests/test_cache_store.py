import json

from advising import JsonCacheStore, MemoryCacheStore, OfferingsCache


def test_missing_file_reads_as_absent(tmp_path):
    assert JsonCacheStore(tmp_path / "nope.json").read() is None


def test_write_creates_directory_and_round_trips(tmp_path):
    path = tmp_path / "data" / "cache.json"
    store = JsonCacheStore(path)
    cache = OfferingsCache(last_updated="2024-09-01T00:00:00.000Z",
                           semesters={"2024-fall": ["CMPT 225", "MATH 240"]})

    assert store.write(cache) is True
    doc = json.loads(path.read_text(encoding="utf-8"))
    assert doc == {
        "lastUpdated": "2024-09-01T00:00:00.000Z",
        "semesters": {"2024-fall": ["CMPT 225", "MATH 240"]},
    }
    assert store.read() == cache


def test_unreadable_storage_reads_as_absent(tmp_path, monkeypatch, caplog):
    path = tmp_path / "locked" / "cache.json"

    def denied(*args, **kwargs):
        raise PermissionError(13, "Permission denied")

    monkeypatch.setattr("pathlib.Path.exists", denied)
    monkeypatch.setattr("builtins.open", denied)
    with caplog.at_level("WARNING"):
        assert JsonCacheStore(path).read() is None
    assert any(getattr(r, "event", None) == "cache_read_failed" for r in caplog.records)


def test_unparseable_document_reads_as_absent(tmp_path):
    path = tmp_path / "cache.json"
    path.write_text("{not json", encoding="utf-8")
    assert JsonCacheStore(path).read() is None


def test_document_without_semesters_reads_as_absent(tmp_path):
    path = tmp_path / "cache.json"
    path.write_text(json.dumps({"lastUpdated": "x"}), encoding="utf-8")
    assert JsonCacheStore(path).read() is None

    path.write_text(json.dumps({"semesters": ["2024-fall"]}), encoding="utf-8")
    assert JsonCacheStore(path).read() is None

    path.write_text(json.dumps([1, 2, 3]), encoding="utf-8")
    assert JsonCacheStore(path).read() is None


def test_malformed_entries_are_dropped(tmp_path):
    path = tmp_path / "cache.json"
    path.write_text(json.dumps({
        "lastUpdated": "2024-09-01T00:00:00.000Z",
        "semesters": {"2024-fall": ["CMPT 225", 7], "2024-summer": "CMPT 120", "2024-spring": []},
    }), encoding="utf-8")
    cache = JsonCacheStore(path).read()
    assert cache.semesters == {"2024-fall": ["CMPT 225"], "2024-spring": []}


def test_write_failure_is_swallowed(tmp_path, caplog):
    # Parent "directory" is a regular file, so mkdir fails
    blocker = tmp_path / "blocker"
    blocker.write_text("", encoding="utf-8")
    store = JsonCacheStore(blocker / "cache.json")

    with caplog.at_level("WARNING"):
        assert store.write(OfferingsCache()) is False
    assert any(getattr(r, "event", None) == "cache_write_failed" for r in caplog.records)


def test_write_failure_on_open_is_swallowed(tmp_path, monkeypatch):
    store = JsonCacheStore(tmp_path / "cache.json")

    def read_only(*args, **kwargs):
        raise PermissionError("read-only file system")

    monkeypatch.setattr("builtins.open", read_only)
    assert store.write(OfferingsCache()) is False


def test_memory_store_hands_out_copies():
    store = MemoryCacheStore()
    assert store.read() is None

    cache = OfferingsCache(semesters={"2024-fall": ["CMPT 225"]})
    store.write(cache)
    cache.semesters["2024-fall"].append("CMPT 999")

    assert store.read().semesters == {"2024-fall": ["CMPT 225"]}
    assert store.writes == 1
