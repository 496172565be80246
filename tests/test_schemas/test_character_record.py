"""Tests for the character record models."""

import pytest
from pydantic import ValidationError

from npcforge.schemas.background import CastawayBackground, MercenaryBackground, NativeBackground
from npcforge.schemas.character import CharacterRecord, Relationship
from npcforge.schemas.memory import ConversationPhase
from npcforge.schemas.template import GenerationTemplate, Tile
from tests.factories import create_record


class TestCharacterRecordSerialization:
    """Tests for camelCase payload serialization."""

    def test_payload_uses_camel_case(self):
        payload = create_record().to_payload()
        assert "firstName" in payload["identity"]
        assert "distinctiveFeatures" in payload["appearance"]
        assert "currentTile" in payload["location"]
        assert "generatedByAI" in payload["meta"]
        assert "conversationPhase" in payload["memory"]

    def test_known_npcs_serialized_as_pairs(self):
        """knownNPCs is stored as an ordered list of [id, relationship] pairs."""
        record = create_record()
        record.relationships.known_npcs["native_kai_reef"] = Relationship(opinion=10)
        payload = record.to_payload()
        pairs = payload["relationships"]["knownNPCs"]
        assert pairs[0][0] == "native_kai_reef"
        assert pairs[0][1]["opinion"] == 10

    def test_round_trip_preserves_record(self):
        record = create_record(faction="mercenary")
        record.relationships.known_npcs["x"] = Relationship(trust=70)
        restored = CharacterRecord.model_validate(record.to_payload())
        assert restored == record

    def test_background_variant_restored(self):
        for faction, variant in [
            ("castaway", CastawayBackground),
            ("native", NativeBackground),
            ("mercenary", MercenaryBackground),
        ]:
            record = create_record(faction=faction)
            restored = CharacterRecord.model_validate(record.to_payload())
            assert isinstance(restored.background, variant)

    def test_snake_case_accepted(self):
        """Models accept python field names as well as aliases."""
        rel = Relationship(interaction_count=3)
        assert rel.interaction_count == 3


class TestRecordAccessors:
    """Tests for convenience properties."""

    def test_properties_mirror_identity(self):
        record = create_record(tile=(2, -1))
        assert record.id == record.identity.id
        assert record.name == record.identity.name
        assert record.faction == record.identity.faction
        assert record.tile == Tile(q=2, r=-1)

    def test_defaults(self):
        record = create_record()
        assert record.state.is_alive is True
        assert record.memory.conversation_phase == ConversationPhase.EARLY
        assert record.relationships.player.opinion == 50
        assert record.relationships.player.trust == 20


class TestRelationshipBounds:
    """Tests for relationship scalar validation."""

    def test_opinion_signed(self):
        assert Relationship(opinion=-100).opinion == -100
        with pytest.raises(ValidationError):
            Relationship(opinion=-101)

    def test_other_scalars_non_negative(self):
        with pytest.raises(ValidationError):
            Relationship(fear=-1)
        with pytest.raises(ValidationError):
            Relationship(trust=101)


class TestTemplates:
    """Tests for tiles and generation templates."""

    def test_tile_key_and_str(self):
        tile = Tile(q=3, r=-2)
        assert tile.key == (3, -2)
        assert str(tile) == "3,-2"

    def test_tile_hashable(self):
        assert {Tile(q=1, r=1), Tile(q=1, r=1)} == {Tile(q=1, r=1)}

    def test_template_all_optional(self):
        template = GenerationTemplate()
        assert template.faction is None
        assert template.tile is None

    def test_template_age_bounds(self):
        with pytest.raises(ValidationError):
            GenerationTemplate(age=-1)
