"""Tests for faction name pools and the name allocator."""

import logging

from npcforge.data.factions import Faction
from npcforge.data.names import NAME_POOLS, NameAllocator
from npcforge.sampling import SeededRandom


class TestNameAllocator:
    """Tests for NameAllocator.generate_name."""

    def test_name_from_faction_pools(self):
        """First and last names come from the faction's pools."""
        allocator = NameAllocator()
        name = allocator.generate_name(Faction.MERCENARY, "male", SeededRandom(1))
        pools = NAME_POOLS[Faction.MERCENARY]
        assert name.first_name in pools["male"]
        assert name.last_name in pools["last"]
        assert name.full_name == f"{name.first_name} {name.last_name}"

    def test_non_male_gender_reads_female_pool(self):
        """Custom genders draw from the female pool."""
        allocator = NameAllocator()
        name = allocator.generate_name(Faction.NATIVE, "nonbinary", SeededRandom(2))
        assert name.first_name in NAME_POOLS[Faction.NATIVE]["female"]

    def test_unique_within_session(self):
        """A session never repeats a full name for a faction."""
        allocator = NameAllocator()
        rng = SeededRandom(3)
        names = [allocator.generate_name("castaway", "female", rng).full_name for _ in range(100)]
        assert len(names) == len(set(names))

    def test_marks_name_used(self):
        allocator = NameAllocator()
        name = allocator.generate_name("native", "male", SeededRandom(4))
        assert allocator.is_used("native", name.full_name)
        assert allocator.is_used("natives_clan1", name.full_name)
        assert not allocator.is_used("mercenary", name.full_name)

    def test_same_name_allowed_across_factions(self):
        """Uniqueness is per faction."""
        allocator = NameAllocator()
        allocator.mark_used("castaway", "Alex Smith")
        assert not allocator.is_used("mercenary", "Alex Smith")

    def test_deterministic_for_seed(self):
        a = NameAllocator().generate_name("castaway", "male", SeededRandom(9))
        b = NameAllocator().generate_name("castaway", "male", SeededRandom(9))
        assert a == b

    def test_used_names_round_trip(self):
        """used_names() output restores the same set."""
        allocator = NameAllocator()
        rng = SeededRandom(5)
        for _ in range(10):
            allocator.generate_name("mercenary", "female", rng)

        restored = NameAllocator()
        restored.load_used_names(allocator.used_names())
        assert restored.used_names() == allocator.used_names()
        assert len(restored) == 10

    def test_used_names_keys_are_prefixed(self):
        allocator = NameAllocator()
        allocator.mark_used("natives_clan2", "Kai Reef")
        assert allocator.used_names() == ["native:Kai Reef"]

    def test_clear(self):
        allocator = NameAllocator(["castaway:A B"])
        allocator.clear()
        assert len(allocator) == 0


class TestNameExhaustion:
    """Tests for generate_name once every combination is taken."""

    def _exhaust(self, allocator: NameAllocator, faction: Faction, gender: str) -> None:
        pools = NAME_POOLS[faction]
        for first in pools[gender]:
            for last in pools["last"]:
                allocator.mark_used(faction, f"{first} {last}")

    def test_returns_duplicate_instead_of_failing(self):
        """An exhausted name space still yields a name."""
        allocator = NameAllocator()
        self._exhaust(allocator, Faction.NATIVE, "male")
        used_before = allocator.used_names()

        name = allocator.generate_name(Faction.NATIVE, "male", SeededRandom(4))

        assert name.first_name in NAME_POOLS[Faction.NATIVE]["male"]
        assert allocator.is_used(Faction.NATIVE, name.full_name)
        assert allocator.used_names() == used_before

    def test_logs_exhaustion_warning(self, caplog):
        allocator = NameAllocator()
        self._exhaust(allocator, Faction.MERCENARY, "female")

        with caplog.at_level(logging.WARNING, logger="npcforge.data.names"):
            allocator.generate_name("mercenaries", "female", SeededRandom(5))

        assert "exhausted" in caplog.text
        assert "mercenary" in caplog.text

    def test_other_faction_unaffected(self, caplog):
        """Exhausting one faction leaves the others issuing fresh names."""
        allocator = NameAllocator()
        self._exhaust(allocator, Faction.NATIVE, "male")

        with caplog.at_level(logging.WARNING, logger="npcforge.data.names"):
            name = allocator.generate_name(Faction.CASTAWAY, "male", SeededRandom(6))

        assert "exhausted" not in caplog.text
        assert allocator.is_used(Faction.CASTAWAY, name.full_name)


class TestNameStats:
    """Tests for name-space statistics."""

    def test_combination_counts(self):
        pools = NAME_POOLS[Faction.CASTAWAY]
        stats = NameAllocator().stats("castaway")
        assert stats.male_combinations == len(pools["male"]) * len(pools["last"])
        assert stats.female_combinations == len(pools["female"]) * len(pools["last"])
        assert stats.total_combinations == stats.male_combinations + stats.female_combinations
        assert stats.used == 0
        assert stats.available == stats.total_combinations

    def test_counts_only_own_faction(self):
        allocator = NameAllocator()
        allocator.mark_used("castaway", "A B")
        allocator.mark_used("mercenary", "C D")
        stats = allocator.stats("castaway")
        assert stats.used == 1
        assert stats.available == stats.total_combinations - 1

    def test_all_stats_covers_factions(self):
        assert set(NameAllocator().all_stats()) == set(Faction)
