from __future__ import annotations

import json

import pytest

from hrtoolbox.exceptions import ValidationError
from hrtoolbox.models import Participant
from hrtoolbox.roster import SAMPLE_NAMES, RosterStore, parse_csv_names, parse_names
from hrtoolbox.storage import JsonFileStorage, MemoryStorage, RosterRepository


def test_parse_names_splits_on_newlines_and_commas() -> None:
    assert parse_names("Alice, Bob\nChen,,\n  \nDana") == ["Alice", "Bob", "Chen", "Dana"]
    assert parse_names("") == []


def test_parse_csv_names_drops_header_and_bom() -> None:
    body = "\ufeffName\r\nAlice\r\nBob,Chen\r\n\r\n"
    assert parse_csv_names(body) == ["Alice", "Bob", "Chen"]


def test_participant_rejects_blank_names() -> None:
    with pytest.raises(ValidationError):
        Participant("   ")
    assert Participant("  Ann ").name == "Ann"


def test_add_and_remove_notify_subscribers() -> None:
    store = RosterStore()
    seen: list[tuple] = []
    store.subscribe(seen.append)

    added = store.add_from_text("Alice\nBob")
    assert [p.name for p in store.get()] == ["Alice", "Bob"]
    assert len({p.id for p in added}) == 2

    before = store.get()
    store.remove(added[0].id)
    assert [p.name for p in store.get()] == ["Bob"]
    assert store.get() is not before
    assert len(seen) == 2

    store.add_from_text("  ,\n")
    store.remove("missing")
    assert len(seen) == 2


def test_duplicates_are_flagged_and_removed_on_request() -> None:
    store = RosterStore()
    store.add_names(["Sam", "Kim", "Sam", "Lee", "Kim"])

    assert store.duplicate_names() == {"Sam", "Kim"}
    assert len(store) == 5

    assert store.dedupe_by_name() == 2
    assert [p.name for p in store.get()] == ["Sam", "Kim", "Lee"]
    assert store.duplicate_names() == set()


def test_sample_roster_contains_duplicates() -> None:
    store = RosterStore()
    store.add_names(["Old"])
    store.load_sample()
    assert len(store) == len(SAMPLE_NAMES)
    assert store.duplicate_names()


def test_clear_requires_confirmation() -> None:
    store = RosterStore()
    store.add_names(["A", "B"])
    store.clear(confirm=lambda: False)
    assert len(store) == 2
    store.clear()
    assert store.get() == ()


def test_roster_persists_on_every_change() -> None:
    storage = MemoryStorage()
    store = RosterStore(RosterRepository(storage))
    store.add_names(["Alice", "Bob"])

    stored = json.loads(storage.get("hr-toolbox-participants"))
    assert [record["name"] for record in stored] == ["Alice", "Bob"]
    assert set(stored[0]) == {"id", "name"}

    reloaded = RosterStore(RosterRepository(storage))
    assert reloaded.get() == store.get()


@pytest.mark.parametrize("raw", ["not json", '{"id": 1}', '[{"id": "a"}]', '[{"id": "a", "name": ""}]'])
def test_corrupt_storage_loads_empty(raw: str) -> None:
    storage = MemoryStorage({"hr-toolbox-participants": raw})
    assert RosterRepository(storage).load() == []


def test_json_file_storage(tmp_path) -> None:
    path = tmp_path / "nested" / "store.json"
    storage = JsonFileStorage(path)
    assert storage.get("missing") is None

    repo = RosterRepository(storage, key="roster")
    repo.save([Participant("陳小明", id="x1")])

    assert "陳小明" in path.read_text(encoding="utf-8")
    assert repo.load() == [Participant("陳小明", id="x1")]

    path.write_text("{broken", encoding="utf-8")
    assert repo.load() == []
