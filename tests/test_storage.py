import json
import threading

import pytest

from mailing_lists_api.app.core.errors import StorageCorruptError, StorageUnavailableError
from mailing_lists_api.app.core.storage import InMemoryStore, JsonFileStore, init_storage


def test_round_trip(tmp_path):
    collection = [
        {"name": "team", "members": ["a@e.com", "b@e.com"]},
        {"name": "ops", "members": []},
        {"members": ["orphan@e.com"]},
    ]
    store = JsonFileStore(tmp_path / "lists.json")
    store.save(collection)
    store.save(store.load())
    assert store.load() == collection


def test_missing_file_is_unavailable(tmp_path):
    store = JsonFileStore(tmp_path / "absent.json")
    with pytest.raises(StorageUnavailableError):
        store.load()


@pytest.mark.parametrize("content", ["", "{not json", '{"name": "team"}', "42"])
def test_corrupt_file(tmp_path, content):
    path = tmp_path / "lists.json"
    path.write_text(content, encoding="utf-8")
    with pytest.raises(StorageCorruptError):
        JsonFileStore(path).load()


def test_save_into_missing_directory_is_unavailable(tmp_path):
    store = JsonFileStore(tmp_path / "nowhere" / "lists.json")
    with pytest.raises(StorageUnavailableError):
        store.save([])


def test_save_leaves_no_temporary_files(tmp_path):
    path = tmp_path / "lists.json"
    store = JsonFileStore(path)
    store.save([{"name": "team", "members": ["a@e.com"]}])
    store.save([{"name": "team", "members": ["a@e.com", "b@e.com"]}])
    assert [p.name for p in tmp_path.iterdir()] == ["lists.json"]
    assert json.loads(path.read_text(encoding="utf-8")) == [
        {"name": "team", "members": ["a@e.com", "b@e.com"]}
    ]


def test_save_is_compact_unless_indented(tmp_path):
    path = tmp_path / "lists.json"
    JsonFileStore(path).save([{"name": "team", "members": []}])
    assert path.read_text(encoding="utf-8") == '[{"name": "team", "members": []}]'

    JsonFileStore(path, indent=2).save([{"name": "team", "members": []}])
    assert "\n" in path.read_text(encoding="utf-8")


def test_init_storage_creates_empty_file(tmp_path):
    path = tmp_path / "data" / "lists.json"
    init_storage(path)
    assert JsonFileStore(path).load() == []


def test_init_storage_keeps_existing_file(tmp_path):
    path = tmp_path / "lists.json"
    path.write_text('[{"name": "team", "members": []}]', encoding="utf-8")
    init_storage(path)
    assert JsonFileStore(path).load() == [{"name": "team", "members": []}]


def test_in_memory_store_does_not_share_objects():
    store = InMemoryStore([{"name": "team", "members": ["a@e.com"]}])
    loaded = store.load()
    loaded[0]["members"].append("b@e.com")
    assert store.load() == [{"name": "team", "members": ["a@e.com"]}]

    store.save(loaded)
    loaded[0]["members"].clear()
    assert store.load() == [{"name": "team", "members": ["a@e.com", "b@e.com"]}]


def test_transaction_serializes_writers(tmp_path):
    path = tmp_path / "lists.json"
    store = JsonFileStore(path)
    store.save([{"name": "team", "members": []}])

    def add(email):
        with store.transaction():
            collection = store.load()
            collection[0]["members"].append(email)
            store.save(collection)

    threads = [threading.Thread(target=add, args=(f"user{i}@e.com",)) for i in range(20)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    members = store.load()[0]["members"]
    assert sorted(members) == sorted(f"user{i}@e.com" for i in range(20))
