"""Tests for the appearance, personality, background and role generators."""

import pytest

from npcforge.data.appearance import AGE_RANGES, DISTINCTIVE_FEATURES, HEIGHT_RANGES, generate_appearance
from npcforge.data.background import TRIBES, generate_background
from npcforge.data.factions import Faction, lookup_gender, normalize_faction
from npcforge.data.personality import DESIRES, FEARS, QUIRKS, TRAIT_NAMES, TRAIT_RANGES, generate_personality
from npcforge.data.roles import DEFAULT_ROLES, TITLES, pick_role, pick_title, starting_skills
from npcforge.sampling import SeededRandom
from npcforge.schemas.background import (
    AMNESIA,
    BLACKSTEEL,
    CastawayBackground,
    MercenaryBackground,
    NativeBackground,
)


class TestFactionNormalization:
    """Tests for normalize_faction and lookup_gender."""

    @pytest.mark.parametrize(
        "raw,expected",
        [
            ("castaway", Faction.CASTAWAY),
            ("natives_clan1", Faction.NATIVE),
            ("natives_clan2", Faction.NATIVE),
            ("mercenaries", Faction.MERCENARY),
            ("MERCENARY", Faction.MERCENARY),
            ("tourist", Faction.CASTAWAY),
            (None, Faction.CASTAWAY),
            ("", Faction.CASTAWAY),
        ],
    )
    def test_normalize(self, raw, expected):
        assert normalize_faction(raw) == expected

    def test_lookup_gender(self):
        assert lookup_gender("male") == "male"
        assert lookup_gender("Male") == "male"
        assert lookup_gender("female") == "female"
        assert lookup_gender("two-spirit") == "female"
        assert lookup_gender(None) == "female"


class TestAppearance:
    """Tests for generate_appearance."""

    @pytest.mark.parametrize("faction", list(Faction))
    def test_ranges_respected(self, faction):
        rng = SeededRandom(31)
        for _ in range(50):
            appearance = generate_appearance(faction, "male", rng)
            low, high = AGE_RANGES[faction]
            assert low <= appearance.age <= high
            h_low, h_high = HEIGHT_RANGES["male"]
            assert h_low <= appearance.height <= h_high

    @pytest.mark.parametrize("faction", list(Faction))
    def test_distinctive_features_unique_from_pool(self, faction):
        rng = SeededRandom(32)
        for _ in range(50):
            features = generate_appearance(faction, "female", rng).distinctive_features
            assert 2 <= len(features) <= 3
            assert len(features) == len(set(features))
            assert set(features) <= set(DISTINCTIVE_FEATURES[faction])

    def test_custom_gender_preserved(self):
        """The record keeps the given gender while pools use the female set."""
        appearance = generate_appearance("native", "nonbinary", SeededRandom(1))
        assert appearance.gender == "nonbinary"
        low, high = HEIGHT_RANGES["female"]
        assert low <= appearance.height <= high

    def test_portrait_unset(self):
        assert generate_appearance("castaway", "male", SeededRandom(1)).portrait is None


class TestPersonality:
    """Tests for generate_personality."""

    @pytest.mark.parametrize("faction", list(Faction))
    def test_trait_ranges(self, faction):
        rng = SeededRandom(41)
        for _ in range(50):
            traits = generate_personality(faction, rng).traits
            for name in TRAIT_NAMES:
                low, high = TRAIT_RANGES[faction][name]
                assert low <= getattr(traits, name) <= high

    def test_lists_drawn_from_faction_pools(self):
        rng = SeededRandom(42)
        for _ in range(30):
            personality = generate_personality("mercenaries", rng)
            assert 2 <= len(personality.quirks) <= 3
            assert set(personality.quirks) <= set(QUIRKS[Faction.MERCENARY])
            assert set(personality.fears) <= set(FEARS[Faction.MERCENARY])
            assert set(personality.desires) <= set(DESIRES[Faction.MERCENARY])
            assert 2 <= len(personality.sexuality.interests) <= 4

    def test_values_neutral(self):
        values = generate_personality("native", SeededRandom(1)).values
        assert values.honor == 50
        assert values.tradition == 50


class TestBackground:
    """Tests for generate_background."""

    def test_castaway_has_amnesia(self):
        bg = generate_background("castaway", "survivor", SeededRandom(1))
        assert isinstance(bg, CastawayBackground)
        assert bg.birthplace == AMNESIA
        assert bg.occupation == AMNESIA
        assert bg.mysterious_skill

    def test_native_tribal_fields(self):
        bg = generate_background("natives_clan1", "hunter", SeededRandom(1))
        assert isinstance(bg, NativeBackground)
        assert bg.tribe in TRIBES
        assert bg.birthplace in TRIBES
        assert bg.education == "traditional tribal knowledge"

    def test_mercenary_employer(self):
        bg = generate_background("mercenary", "soldier", SeededRandom(1))
        assert isinstance(bg, MercenaryBackground)
        assert bg.employer == BLACKSTEEL
        assert bg.rank


class TestRoles:
    """Tests for roles, titles and starting skills."""

    def test_pick_role_from_faction(self):
        rng = SeededRandom(6)
        for faction in Faction:
            assert pick_role(faction, rng) in DEFAULT_ROLES[faction]

    def test_pick_title_from_faction(self):
        rng = SeededRandom(6)
        for faction in Faction:
            assert pick_title(faction, rng) in TITLES[faction]

    def test_starting_skills_for_known_role(self):
        skills = starting_skills("Hunter")
        assert skills.hunting == 50
        assert skills.survival == 30

    def test_unknown_role_untrained(self):
        skills = starting_skills("poet")
        assert skills.combat == 0
        assert skills.diplomacy == 0
