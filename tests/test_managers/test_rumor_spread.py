"""Tests for RumorManager."""

import pytest

from npcforge.llm.exceptions import ProviderError
from npcforge.managers.rumor_manager import RumorManager
from tests.factories import FakeTextService, populate


class TestSpreadRumor:
    """Tests for spread_rumor."""

    @pytest.mark.asyncio
    async def test_violent_rumor_within_range(self, directory, clock):
        """Characters within range hear a violent rumor and think less of the player."""
        witness, near, edge, far = populate(directory, [(0, 0), (1, 0), (1, 1), (2, 1)])
        service = FakeTextService(["They say the stranger attacked old Tom at the well."])
        manager = RumorManager(directory, service, clock=clock)

        result = await manager.spread_rumor("The player attacked a villager", witness.id, spread_range=2)

        assert result.violent is True
        assert result.generated is True
        assert set(result.hearer_ids) == {near.id, edge.id}
        for hearer in (near, edge):
            assert hearer.relationships.player.opinion == 40
            assert hearer.relationships.player.fear == 5
            event = hearer.memory.events[-1]
            assert event.content == f"Heard rumor: {result.rumor_text}"
            assert event.importance == 3
            assert hearer.memory.heard_rumors == [result.rumor_text]

        assert far.memory.events == []
        assert far.relationships.player.opinion == 50
        assert witness.memory.heard_rumors == []

    @pytest.mark.asyncio
    async def test_request_parameters(self, directory, clock):
        (witness,) = populate(directory, [(0, 0)])
        service = FakeTextService(["Gossip."])

        await RumorManager(directory, service, clock=clock).spread_rumor("A ship was seen", witness.id)

        call = service.calls[0]
        assert call["temperature"] == 0.7
        assert call["max_tokens"] == 50
        assert witness.name in call["prompt"]

    @pytest.mark.asyncio
    async def test_non_violent_leaves_relationships(self, directory, clock):
        witness, hearer = populate(directory, [(0, 0), (0, 1)])
        manager = RumorManager(directory, FakeTextService(["The stranger shared fish."]), clock=clock)

        result = await manager.spread_rumor("The player gave away food", witness.id)

        assert result.violent is False
        assert result.hearer_ids == [hearer.id]
        assert hearer.relationships.player.opinion == 50
        assert hearer.relationships.player.fear == 0

    @pytest.mark.asyncio
    async def test_failure_falls_back_to_event(self, directory, clock):
        witness, hearer = populate(directory, [(0, 0), (1, 0)])
        manager = RumorManager(directory, FakeTextService([ProviderError("down")]), clock=clock)

        result = await manager.spread_rumor("The player killed a boar", witness.id)

        assert result.generated is False
        assert result.rumor_text == "The player killed a boar"
        assert hearer.memory.heard_rumors == ["The player killed a boar"]
        assert result.violent is True

    @pytest.mark.asyncio
    async def test_unexpected_error_falls_back_to_event(self, directory, clock):
        witness, hearer = populate(directory, [(0, 0), (1, 0)])
        manager = RumorManager(directory, FakeTextService([TypeError("no auth")]), clock=clock)

        result = await manager.spread_rumor("Smoke on the ridge", witness.id)

        assert result.generated is False
        assert result.hearer_ids == [hearer.id]
        assert hearer.memory.heard_rumors == ["Smoke on the ridge"]

    @pytest.mark.asyncio
    async def test_empty_text_falls_back_to_event(self, directory, clock):
        witness, _ = populate(directory, [(0, 0), (1, 0)])
        manager = RumorManager(directory, FakeTextService(["   "]), clock=clock)

        result = await manager.spread_rumor("Smoke on the ridge", witness.id)

        assert result.rumor_text == "Smoke on the ridge"
        assert result.generated is False

    @pytest.mark.asyncio
    async def test_unknown_witness(self, directory, clock):
        populate(directory, [(0, 0)])
        service = FakeTextService()
        result = await RumorManager(directory, service, clock=clock).spread_rumor("x", "nobody")

        assert result.witness_found is False
        assert result.hearer_ids == []
        assert service.calls == []

    @pytest.mark.asyncio
    async def test_range_zero_reaches_same_tile(self, directory, clock):
        witness, same, other = populate(directory, [(2, 2), (2, 2), (2, 3)])
        manager = RumorManager(directory, FakeTextService(["Psst."]), clock=clock)

        result = await manager.spread_rumor("Lights in the jungle", witness.id, spread_range=0)

        assert result.hearer_ids == [same.id]

    @pytest.mark.parametrize(
        "event,expected",
        [
            ("someone was KILLED", True),
            ("an attack at dawn", True),
            ("a quiet night", False),
        ],
    )
    def test_is_violent(self, event, expected):
        assert RumorManager.is_violent(event) is expected
