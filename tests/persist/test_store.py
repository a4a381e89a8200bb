# tests/persist/test_store.py

import json
from pathlib import Path

import pytest

from finsim.persist.models import GameSnapshot
from finsim.simulation.state import HistoryEntry, Job, Player

# Subject under test
from finsim.persist.store import FileStateStore, InMemoryStateStore

# Fixtures


@pytest.fixture
def snapshot_instance() -> GameSnapshot:
    """Provides a valid GameSnapshot of a player a few months into a job."""
    player = Player(
        location="Suburb",
        job=Job(title="Retail", salary=28875, months_worked=4),
        history=[HistoryEntry(month=1, year=1, entry="Got a job as Retail with annual salary of $28,875")],
    )
    player.finance.savings = -120.5
    player.expenses.housing = 1200
    return GameSnapshot(player=player, month=5, year=1, difficulty="normal")


@pytest.fixture
def store(tmp_path: Path) -> FileStateStore:
    """Provides a FileStateStore instance using a temporary directory."""
    return FileStateStore(file_path=tmp_path / "saves" / "game.json")


# Test Cases


def test_save_creates_file_and_directories(store: FileStateStore, snapshot_instance: GameSnapshot):
    store.save(snapshot_instance)

    assert store.file_path.is_file()
    assert json.loads(store.file_path.read_text())["month"] == 5


def test_save_and_load_successful_roundtrip(store: FileStateStore, snapshot_instance: GameSnapshot):
    store.save(snapshot_instance)

    loaded = store.load()

    assert isinstance(loaded, GameSnapshot)
    assert loaded.model_dump() == snapshot_instance.model_dump()
    assert loaded.player.finance.savings == -120.5
    assert loaded.player.job.months_worked == 4


def test_save_replaces_previous_game_without_leftovers(store: FileStateStore, snapshot_instance: GameSnapshot):
    store.save(snapshot_instance)
    later = snapshot_instance.model_copy(update={"month": 6})

    store.save(later)

    assert store.load().month == 6
    assert [p.name for p in store.file_path.parent.iterdir()] == ["game.json"]


def test_load_raises_file_not_found(store: FileStateStore):
    with pytest.raises(FileNotFoundError):
        store.load()


def test_load_raises_value_error_for_malformed_json(store: FileStateStore):
    store.file_path.parent.mkdir(parents=True)
    store.file_path.write_text("{'player': None}")

    with pytest.raises(ValueError, match="Data validation error"):
        store.load()


def test_load_raises_value_error_for_invalid_schema(store: FileStateStore):
    store.file_path.parent.mkdir(parents=True)
    store.file_path.write_text(json.dumps({"gameMonth": 3, "gameYear": 1}))

    with pytest.raises(ValueError, match="Data validation error"):
        store.load()


def test_in_memory_store_roundtrip_is_detached(snapshot_instance: GameSnapshot):
    """The memory store keeps its own copy, so later edits to either side do not leak."""
    memory_store = InMemoryStateStore()
    memory_store.save(snapshot_instance)
    snapshot_instance.player.skills.education = 9

    loaded = memory_store.load()
    loaded.player.skills.networking = 9

    assert loaded.player.skills.education == 1
    assert memory_store.load().player.skills.networking == 1


def test_in_memory_store_load_before_save():
    with pytest.raises(LookupError):
        InMemoryStateStore().load()
