import pytest
from dice_roller.models.dice import DiceGroupSpec, DiceKind
from dice_roller.models.preset import NamedRollPreset
from dice_roller.services.named_roll_service import NamedRollStore
from dice_roller.storage.key_value_store import (
    CUSTOM_ROLLS_KEY,
    LocalKeyValueStore,
    MemoryKeyValueStore,
)


class ReadOnlyStore(MemoryKeyValueStore):
    def set(self, key, value):
        raise OSError("read-only")


@pytest.fixture
def store():
    return NamedRollStore(MemoryKeyValueStore())


def preset(name, kind=DiceKind.D8, count=1, modifier=0, description=None):
    return NamedRollPreset(
        name=name,
        dice=[DiceGroupSpec(kind=kind, count=count)],
        modifier=modifier,
        description=description,
    )


def test_empty_by_default(store):
    assert store.list() == []


def test_save_appends_in_order(store):
    a, b = preset("Flame Blade", DiceKind.D6, 3), preset("Hex", DiceKind.D6, 1)
    assert store.save(a)
    assert store.save(b)
    assert store.list() == [a, b]


def test_save_then_delete_restores_previous_list(store):
    existing = preset("Smite")
    store.save(existing)
    before = store.list()

    store.save(preset("Hunter's Mark", DiceKind.D6, 1, description="per hit"))
    store.delete("Hunter's Mark")

    assert store.list() == before


def test_duplicate_names_coexist_and_delete_removes_all(store):
    store.save(preset("Hex", DiceKind.D6))
    store.save(preset("Hex", DiceKind.D8))
    store.save(preset("Other"))

    assert [p.name for p in store.list()] == ["Hex", "Hex", "Other"]

    store.delete("Hex")
    assert [p.name for p in store.list()] == ["Other"]


def test_delete_unknown_name_is_harmless(store):
    store.save(preset("A"))
    store.delete("B")
    assert [p.name for p in store.list()] == ["A"]


def test_malformed_payload_reads_as_empty():
    kv = MemoryKeyValueStore()
    kv.set(CUSTOM_ROLLS_KEY, "not json at all")
    assert NamedRollStore(kv).list() == []

    kv.set(CUSTOM_ROLLS_KEY, '{"name": "x"}')
    assert NamedRollStore(kv).list() == []


def test_clear(store):
    store.save(preset("A"))
    assert store.clear()
    assert store.list() == []


def test_write_failure_returns_false():
    store = NamedRollStore(ReadOnlyStore())
    assert store.save(preset("A")) is False
    assert store.list() == []


def test_persists_on_disk(tmp_path):
    NamedRollStore(LocalKeyValueStore(tmp_path)).save(preset("Disk", modifier=2))
    loaded = NamedRollStore(LocalKeyValueStore(tmp_path)).list()
    assert loaded == [preset("Disk", modifier=2)]
    assert (tmp_path / f"{CUSTOM_ROLLS_KEY}.json").exists()


def test_undecodable_file_reads_as_empty(tmp_path):
    (tmp_path / f"{CUSTOM_ROLLS_KEY}.json").write_bytes(b"\xff\xfe[bad")
    store = NamedRollStore(LocalKeyValueStore(tmp_path))

    assert store.list() == []
    assert store.save(preset("Recovered"))
    assert [p.name for p in store.list()] == ["Recovered"]
