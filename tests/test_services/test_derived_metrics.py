"""Tests for derived character metrics."""

import pytest

from npcforge.schemas.character import Relationship
from npcforge.schemas.memory import ConversationPhase
from npcforge.services.derived_metrics import (
    calculate_aggression,
    calculate_courage,
    calculate_mood,
    conversation_phase_for,
    personality_summary,
    relationship_tone,
    would_be_hostile,
)
from tests.factories import create_record


class TestAggressionAndCourage:
    """Tests for behavior scalars derived from personality."""

    def test_aggression_formula(self):
        personality = create_record().personality
        personality.traits.agreeableness = 20
        personality.traits.neuroticism = 80
        personality.values.honor = 50
        # 0.4*80 + 0.3*80 + 0.3*50
        assert calculate_aggression(personality) == 71

    def test_courage_formula(self):
        personality = create_record().personality
        personality.traits.neuroticism = 40
        # 0.5*60 + 0.25*50 + 0.25*50
        assert calculate_courage(personality) == 55

    def test_aggression_rounds_half_up(self):
        personality = create_record().personality
        personality.traits.agreeableness = 50
        personality.traits.neuroticism = 55
        personality.values.honor = 100
        # 20 + 16.5 + 0 = 36.5
        assert calculate_aggression(personality) == 37

    def test_courage_rounds_half_up(self):
        personality = create_record().personality
        personality.traits.neuroticism = 55
        personality.values.honor = 50
        personality.values.loyalty = 54
        # 22.5 + 12.5 + 13.5 = 48.5
        assert calculate_courage(personality) == 49


class TestMood:
    """Tests for calculate_mood precedence."""

    def test_physical_state_first(self):
        record = create_record()
        record.stats.health = 10
        record.relationships.player.fear = 90
        assert calculate_mood(record) == "suffering"

    def test_hunger_before_fear(self):
        record = create_record()
        record.stats.thirst = 10
        record.relationships.player.fear = 90
        assert calculate_mood(record) == "desperate"

    @pytest.mark.parametrize("fear,expected", [(75, "terrified"), (50, "afraid")])
    def test_fear(self, fear, expected):
        record = create_record()
        record.relationships.player.fear = fear
        assert calculate_mood(record) == expected

    @pytest.mark.parametrize(
        "opinion,trust,expected",
        [
            (100, 100, "joyful"),
            (80, 60, "friendly"),
            (50, 40, "neutral"),
            (30, 20, "wary"),
            (-50, 0, "hostile"),
        ],
    )
    def test_regard_for_player(self, opinion, trust, expected):
        record = create_record()
        record.relationships.player.opinion = opinion
        record.relationships.player.trust = trust
        assert calculate_mood(record) == expected

    def test_default_relationship_is_wary(self):
        """Opinion 50 and trust 20 average to 35."""
        assert calculate_mood(create_record()) == "wary"


class TestConversationPhase:
    """Tests for conversation_phase_for."""

    def test_thresholds(self):
        assert conversation_phase_for(Relationship(opinion=50, trust=20, romantic=0)) == ConversationPhase.EARLY
        assert conversation_phase_for(Relationship(opinion=80, trust=60, romantic=0)) == ConversationPhase.FAMILIAR
        assert conversation_phase_for(Relationship(opinion=90, trust=80, romantic=50)) == ConversationPhase.INTIMATE

    def test_boundaries_are_exclusive(self):
        # average exactly 40 stays early, exactly 70 stays familiar
        assert conversation_phase_for(Relationship(opinion=60, trust=60, romantic=0)) == ConversationPhase.EARLY
        assert conversation_phase_for(Relationship(opinion=100, trust=100, romantic=10)) == ConversationPhase.FAMILIAR


class TestRelationshipTone:
    """Tests for relationship_tone."""

    @pytest.mark.parametrize(
        "kwargs,expected",
        [
            ({}, "neutral"),
            ({"opinion": 60}, "friendly"),
            ({"opinion": 80}, "warm"),
            ({"opinion": -60}, "hostile"),
            ({"opinion": 80, "romantic": 70}, "flirtatious"),
            ({"opinion": 80, "romantic": 70, "fear": 80}, "fearful"),
        ],
    )
    def test_tone(self, kwargs, expected):
        assert relationship_tone(Relationship(**kwargs)) == expected


class TestHostility:
    """Tests for would_be_hostile."""

    def test_low_opinion_is_hostile(self):
        record = create_record()
        record.relationships.player.opinion = -60
        assert would_be_hostile(record) is True

    def test_cowardly_and_afraid_backs_down(self):
        record = create_record()
        record.state.is_hostile = True
        record.relationships.player.fear = 90
        record.ai.courage = 10
        assert would_be_hostile(record) is False

    def test_falls_back_to_state(self):
        record = create_record()
        assert would_be_hostile(record) is False
        record.state.is_hostile = True
        assert would_be_hostile(record) is True


class TestPersonalitySummary:
    """Tests for personality_summary."""

    def test_extreme_traits_described(self):
        personality = create_record().personality
        for name in ("openness", "conscientiousness", "extraversion", "agreeableness", "neuroticism"):
            setattr(personality.traits, name, 50)
        personality.traits.openness = 90
        personality.traits.extraversion = 10
        summary = personality_summary(personality)
        assert "curious and creative" in summary.traits
        assert "reserved and quiet" in summary.traits
        assert "disciplined" not in summary.traits

    def test_top_three_values(self):
        personality = create_record().personality
        personality.values.honor = 90
        personality.values.loyalty = 80
        personality.values.ambition = 70
        summary = personality_summary(personality)
        assert summary.values == "honor (90), loyalty (80), ambition (70)"
        assert "values honor (90)" in str(summary)
