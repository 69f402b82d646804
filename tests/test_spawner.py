"""
Tests for the object spawner RNG.
"""

import pytest

from dog_pacman.pacman_core.rng import ObjectSpawner, SPAWN_OUTCOMES

from tests.conftest import ScriptedRng


class TestObjectSpawner:
    """Test spawn gating and kind selection."""

    def test_deterministic_with_seed(self, config):
        """Same seed should produce the same spawn sequence."""
        s1 = ObjectSpawner(config, seed=42)
        s2 = ObjectSpawner(config, seed=42)

        seq1 = [s1.maybe_spawn(0, 1) for _ in range(100)]
        seq2 = [s2.maybe_spawn(0, 1) for _ in range(100)]

        assert [o.kind_id if o else None for o in seq1] == [o.kind_id if o else None for o in seq2]

    def test_different_seeds_differ(self, config):
        """Different seeds should produce different sequences."""
        s1 = ObjectSpawner(config, seed=42)
        s2 = ObjectSpawner(config, seed=123)

        seq1 = [s1.maybe_spawn(0, 1) for _ in range(100)]
        seq2 = [s2.maybe_spawn(0, 1) for _ in range(100)]

        assert [o.kind_id if o else None for o in seq1] != [o.kind_id if o else None for o in seq2]

    def test_only_valid_kinds(self, config):
        """Spawned kinds are always catalog ids, and every kind shows up."""
        spawner = ObjectSpawner(config, seed=7)
        kinds = set()

        for _ in range(500):
            obj = spawner.maybe_spawn(0, 1)
            if obj is not None:
                assert 0 <= obj.kind_id < config.num_object_kinds
                kinds.add(obj.kind_id)

        assert kinds == set(range(config.num_object_kinds))

    def test_attempt_success_rate(self, config):
        """About two attempts in three spawn something."""
        spawner = ObjectSpawner(config, seed=1)
        attempts = 3000

        spawned = sum(1 for _ in range(attempts) if spawner.maybe_spawn(0, 1) is not None)

        assert spawned == spawner.spawned
        assert 0.62 < spawned / attempts < 0.71

    def test_spawns_at_screen_width(self, config):
        """New objects enter at the right edge of the field."""
        spawner = ObjectSpawner(config, rng=ScriptedRng([2, 0]))

        obj = spawner.maybe_spawn(0, 25)

        assert obj.kind_id == 0
        assert obj.x == config.screen_width

    def test_resized_field_moves_spawn_column(self, config):
        """The spawn column follows the configured width."""
        wide = config.with_screen_width(120)
        spawner = ObjectSpawner(wide, rng=ScriptedRng([1, 3]))

        assert spawner.maybe_spawn(0, 25).x == 120

    @pytest.mark.parametrize("tick,rate,expected", [
        (0, 25, True),
        (24, 25, False),
        (25, 25, True),
        (50, 25, True),
        (51, 25, False),
        (30, 10, True),
    ])
    def test_attempt_ticks(self, tick, rate, expected):
        assert ObjectSpawner.is_attempt_tick(tick, rate) is expected

    def test_no_randomness_off_interval(self, config):
        """Ticks that are not attempt ticks draw nothing from the source."""
        rng = ScriptedRng()
        spawner = ObjectSpawner(config, rng=rng)

        for tick in range(1, 25):
            assert spawner.maybe_spawn(tick, 25) is None

        assert rng.calls == []

    def test_no_spawn_outcome_draws_once(self, config):
        """A failed attempt consumes one draw and no kind draw."""
        rng = ScriptedRng([0])
        spawner = ObjectSpawner(config, rng=rng)

        assert spawner.maybe_spawn(0, 25) is None
        assert rng.calls == [SPAWN_OUTCOMES]

    def test_successful_attempt_draws_kind(self, config):
        """A successful attempt draws the kind over all kinds."""
        rng = ScriptedRng([2, 1])
        spawner = ObjectSpawner(config, rng=rng)

        obj = spawner.maybe_spawn(0, 25)

        assert obj.kind_id == 1
        assert rng.calls == [SPAWN_OUTCOMES, config.num_object_kinds]

    def test_reset_with_seed_replays(self, config):
        """Reset with a seed restarts the sequence."""
        spawner = ObjectSpawner(config, seed=99)
        first = [spawner.maybe_spawn(0, 1) for _ in range(50)]

        spawner.reset(seed=99)
        again = [spawner.maybe_spawn(0, 1) for _ in range(50)]

        assert [o.kind_id if o else None for o in first] == [o.kind_id if o else None for o in again]
        assert spawner.spawned == sum(1 for o in again if o is not None)
