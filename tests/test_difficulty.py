"""
Tests for the score -> difficulty mapping.
"""

import pytest

from dog_pacman.pacman_core.difficulty import DifficultyModel, level_for


@pytest.fixture
def model(config):
    return DifficultyModel(config)


class TestDifficultyModel:
    """Test speed and spawn-rate curves."""

    def test_base_level_at_zero(self, model, config):
        level = model.level_for(0)

        assert level.level == 0
        assert level.object_speed == config.difficulty.base_object_speed
        assert level.spawn_rate == config.difficulty.base_spawn_rate

    @pytest.mark.parametrize("score,speed,rate", [
        (9, 1, 25),
        (10, 2, 24),
        (19, 2, 24),
        (20, 3, 23),
        (40, 5, 21),
        (50, 5, 20),
        (150, 5, 10),
        (10000, 5, 10),
    ])
    def test_known_scores(self, model, score, speed, rate):
        """One step per ten points, each clamped to its bound."""
        level = model.level_for(score)

        assert level.object_speed == speed
        assert level.spawn_rate == rate

    def test_bounds_and_monotonic(self, model, config):
        """Speed never falls and spawn rate never rises as score grows."""
        d = config.difficulty
        previous = model.level_for(0)

        for score in range(1, 1001):
            level = model.level_for(score)
            assert d.base_object_speed <= level.object_speed <= d.max_speed
            assert d.min_spawn_rate <= level.spawn_rate <= d.base_spawn_rate
            assert level.object_speed >= previous.object_speed
            assert level.spawn_rate <= previous.spawn_rate
            previous = level

    def test_points_per_level_configurable(self, config):
        """A smaller step speeds the curve up."""
        from dataclasses import replace

        fast = replace(config, difficulty=replace(config.difficulty, points_per_level=5))
        model = DifficultyModel(fast)

        assert model.level_for(5).object_speed == 2
        assert model.level_index(12) == 2

    def test_module_helper(self, config):
        assert level_for(30, config) == DifficultyModel(config).level_for(30)
