"""Tests for SaveManager."""

import json

import pytest

from npcforge.database.models.save_slot import SaveSlot, SlotKind
from npcforge.managers.save_manager import SaveManager
from npcforge.schemas.save import SaveFormatError, SavePayload
from npcforge.world.population import PopulationDirectory
from tests.factories import create_pipeline, populate


@pytest.fixture
def manager(db_session):
    return SaveManager(db_session)


class TestSaveAndLoad:
    """Tests for slot writes and reads."""

    def test_save_creates_slot(self, db_session, manager, directory):
        populate(directory, [(0, 0), (1, 1)])

        slot = manager.save_directory("alpha", directory, description="first island")

        stored = db_session.query(SaveSlot).filter_by(slot_name="alpha").one()
        assert stored is slot
        assert stored.character_count == 2
        assert stored.kind == SlotKind.MANUAL
        assert stored.world_seed == "12345"
        assert stored.description == "first island"
        assert set(stored.payload) == {"characters", "usedNames"}

    def test_explicit_world_seed(self, manager, directory):
        manager.save_directory("alpha", directory, world_seed="island-9")
        assert manager.get_world_seed("alpha") == "island-9"

    def test_save_overwrites(self, db_session, manager, directory):
        populate(directory, [(0, 0)])
        manager.save_directory("alpha", directory)
        populate(directory, [(1, 0)])
        manager.save_directory("alpha", directory, kind=SlotKind.AUTO)

        assert db_session.query(SaveSlot).count() == 1
        assert manager.list_slots()[0].character_count == 2
        assert manager.list_slots()[0].kind == SlotKind.AUTO

    def test_load_round_trip(self, manager, directory):
        populate(directory, [(0, 0), (2, -1)], faction="mercenary")
        manager.save_directory("alpha", directory)

        restored = PopulationDirectory(create_pipeline(1))
        assert manager.load_into("alpha", restored) == 2
        for record in directory:
            assert restored.get(record.id) == record
        assert restored.pipeline.names.used_names() == directory.pipeline.names.used_names()

    def test_load_missing(self, manager):
        assert manager.load("missing") is None
        assert manager.load_into("missing", PopulationDirectory(create_pipeline())) is None
        assert manager.get_world_seed("missing") is None

    def test_load_malformed_raises(self, db_session, manager):
        db_session.add(SaveSlot(slot_name="broken", payload={"characters": [{"nope": 1}]}))
        db_session.flush()

        with pytest.raises(SaveFormatError):
            manager.load("broken")


class TestSlotManagement:
    """Tests for listing and deleting slots."""

    def test_list_slots(self, manager):
        manager.save("one", SavePayload())
        manager.save("two", SavePayload(), world_seed=7)

        slots = {info.slot_name: info for info in manager.list_slots()}
        assert set(slots) == {"one", "two"}
        assert slots["two"].world_seed == "7"
        assert slots["one"].character_count == 0

    def test_delete(self, manager):
        manager.save("one", SavePayload())
        assert manager.delete("one") is True
        assert manager.list_slots() == []
        assert manager.delete("one") is False


class TestFiles:
    """Tests for JSON export and import."""

    def test_export_then_import(self, manager, directory, tmp_path):
        populate(directory, [(0, 0)], faction="native")
        manager.save_directory("alpha", directory)
        path = tmp_path / "alpha.json"

        assert manager.export_slot("alpha", path) is True
        data = json.loads(path.read_text(encoding="utf-8"))
        assert len(data["characters"]) == 1

        slot = manager.import_file(path, "beta")
        assert slot.character_count == 1
        assert manager.load("beta") == manager.load("alpha")

    def test_export_missing(self, manager, tmp_path):
        assert manager.export_slot("missing", tmp_path / "x.json") is False

    def test_import_invalid_json(self, manager, tmp_path):
        path = tmp_path / "bad.json"
        path.write_text("{not json", encoding="utf-8")
        with pytest.raises(SaveFormatError):
            manager.import_file(path, "bad")

    def test_import_wrong_shape(self, manager, tmp_path):
        path = tmp_path / "bad.json"
        path.write_text(json.dumps({"characters": "lots"}), encoding="utf-8")
        with pytest.raises(SaveFormatError):
            manager.import_file(path, "bad")

    def test_import_undecodable_bytes(self, manager, tmp_path):
        path = tmp_path / "bad.json"
        path.write_bytes(b"\xff\xfe\x00garbage")
        with pytest.raises(SaveFormatError):
            manager.import_file(path, "bad")
