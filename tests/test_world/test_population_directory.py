"""Tests for the population directory."""

from unittest.mock import AsyncMock, MagicMock

import pytest

from npcforge.data.factions import Faction
from npcforge.schemas.save import SaveFormatError
from npcforge.schemas.template import GenerationTemplate, Tile
from npcforge.services.enrichment import NPCEnricher
from npcforge.world.population import PopulationDirectory
from tests.factories import FakeTextService, create_pipeline, populate


class TestSpawn:
    """Tests for spawning into the directory."""

    @pytest.mark.asyncio
    async def test_spawn_indexes_record(self, directory):
        record = await directory.spawn(GenerationTemplate(faction="native", tile=Tile(q=1, r=2)))
        assert record is not None
        assert directory.get(record.id) is record
        assert directory.at_tile(Tile(q=1, r=2)) == [record]
        assert directory.in_faction(Faction.NATIVE) == [record]
        assert directory.in_faction("natives_clan1") == [record]

    @pytest.mark.asyncio
    async def test_cap_rejects_extra_spawn(self, directory):
        """The 51st spawn against a cap of 50 is rejected."""
        for _ in range(50):
            assert await directory.spawn() is not None
        assert directory.is_full

        assert await directory.spawn() is None
        assert len(directory) == 50

    @pytest.mark.asyncio
    async def test_enrich_on_spawn(self):
        enricher = MagicMock()
        enricher.enrich = AsyncMock(return_value=True)
        directory = PopulationDirectory(create_pipeline(), enricher=enricher)

        record = await directory.spawn(enrich=True)

        enricher.enrich.assert_awaited_once_with(record)

    @pytest.mark.asyncio
    async def test_enrichment_error_still_spawns(self):
        """A text service failure during enrichment leaves a plain record."""
        enricher = NPCEnricher(FakeTextService([TypeError("no auth")]))
        directory = PopulationDirectory(create_pipeline(), enricher=enricher)

        record = await directory.spawn(enrich=True)

        assert directory.get(record.id) is record
        assert record.meta.generated_by_ai is False

    @pytest.mark.asyncio
    async def test_no_enrich_by_default(self):
        enricher = MagicMock()
        enricher.enrich = AsyncMock(return_value=True)
        directory = PopulationDirectory(create_pipeline(), enricher=enricher)

        await directory.spawn()

        enricher.enrich.assert_not_awaited()


class TestAdd:
    """Tests for add and id collisions."""

    def test_colliding_ids_get_suffix(self, directory):
        first = create_pipeline(1).generate(GenerationTemplate(faction="castaway"))
        second = create_pipeline(1).generate(GenerationTemplate(faction="castaway"))
        third = create_pipeline(1).generate(GenerationTemplate(faction="castaway"))
        base = first.id

        directory.add(first)
        directory.add(second)
        directory.add(third)

        assert directory.ids() == [base, f"{base}_2", f"{base}_3"]
        assert second.identity.id == f"{base}_2"


class TestMutations:
    """Tests for despawn, move and mark_dead."""

    def test_despawn_removes_from_indices(self, directory):
        record, other = populate(directory, [(0, 0), (0, 0)])
        assert directory.despawn(record.id) is record
        assert record.id not in directory
        assert directory.at_tile(Tile()) == [other]
        assert record.id not in directory.faction_index()[Faction.CASTAWAY]

    def test_despawn_last_on_tile_drops_key(self, directory):
        (record,) = populate(directory, [(3, 3)])
        directory.despawn(record.id)
        assert (3, 3) not in directory.tile_index()
        assert Faction.CASTAWAY not in directory.faction_index()

    def test_despawn_unknown(self, directory):
        assert directory.despawn("nobody") is None

    def test_move_reindexes(self, directory):
        (record,) = populate(directory, [(0, 0)])
        assert directory.move(record.id, Tile(q=5, r=-1))
        assert directory.at_tile(Tile()) == []
        assert directory.at_tile(Tile(q=5, r=-1)) == [record]
        assert record.location.current_tile == Tile(q=5, r=-1)
        assert record.location.home_location == Tile()

    def test_move_unknown(self, directory):
        assert directory.move("nobody", Tile()) is False

    def test_mark_dead_keeps_record(self, directory):
        (record,) = populate(directory, [(0, 0)])
        assert directory.mark_dead(record.id)
        assert record.state.is_alive is False
        assert directory.get(record.id) is record

    def test_indices_consistent(self, directory):
        records = populate(directory, [(0, 0), (1, 0), (1, 0)], faction="mercenary")
        populate(directory, [(2, 2)], faction="native")
        directory.move(records[0].id, Tile(q=1, r=0))
        directory.despawn(records[1].id)

        for key, ids in directory.tile_index().items():
            for npc_id in ids:
                assert directory.get(npc_id).tile.key == key
        for faction, ids in directory.faction_index().items():
            for npc_id in ids:
                assert directory.get(npc_id).faction == faction
        assert sum(len(ids) for ids in directory.tile_index().values()) == len(directory)


class TestPersistence:
    """Tests for payload snapshots."""

    def test_round_trip(self, directory):
        populate(directory, [(0, 0), (1, -1)], faction="native")
        payload = directory.to_payload()

        restored = PopulationDirectory(create_pipeline(999))
        assert restored.load_payload(payload.to_json_dict()) == 2

        assert restored.ids() == directory.ids()
        for record in directory:
            assert restored.get(record.id) == record
        assert restored.tile_index() == directory.tile_index()
        assert restored.pipeline.names.used_names() == directory.pipeline.names.used_names()

    def test_snapshot_is_a_copy(self, directory):
        (record,) = populate(directory, [(0, 0)])
        payload = directory.to_payload()
        record.state.mood = "joyful"
        assert payload.characters[0].state.mood != "joyful"

    def test_malformed_payload_leaves_directory(self, directory):
        populate(directory, [(0, 0)])
        with pytest.raises(SaveFormatError):
            directory.load_payload({"characters": [{"bad": True}]})
        assert len(directory) == 1

    def test_loaded_names_not_reissued(self, directory):
        populate(directory, [(0, 0)] * 5)
        restored = PopulationDirectory(create_pipeline(12345))
        restored.load_payload(directory.to_payload())
        # Same seed would replay the same names without the used-name set.
        new = restored.pipeline.generate(GenerationTemplate())
        assert new.name not in {r.name for r in directory}
