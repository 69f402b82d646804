"""
Tests for Gymnasium environment API.
"""

from dataclasses import replace

import pytest
import numpy as np

from dog_pacman.pacman_core.env_gym import DogPacmanEnv, ACTION_NOOP, ACTION_OPEN_MOUTH


@pytest.fixture
def env():
    env = DogPacmanEnv()
    yield env
    env.close()


class TestDogPacmanEnv:
    """Test single environment API."""

    def test_reset_returns_obs_and_info(self, env):
        """Reset should return (observation, info) tuple."""
        result = env.reset(seed=42)

        assert isinstance(result, tuple)
        assert len(result) == 2

        obs, info = result
        assert isinstance(obs, dict)
        assert isinstance(info, dict)

    def test_initial_state(self, env, config):
        obs, info = env.reset(seed=42)

        assert int(obs["lives"]) == config.player.initial_lives
        assert int(obs["score"]) == 0
        assert int(obs["tick"]) == 0
        assert int(obs["objects_count"]) == 0
        assert info["delta_score"] == 0
        assert info["delta_lives"] == 0

    def test_observation_structure(self, env, config):
        """Observation should have expected keys and shapes."""
        obs, _ = env.reset(seed=42)
        max_obj = config.caps.max_objects

        for key in ("mouth_open", "mouth_ticks_remaining", "lives", "score", "tick",
                    "object_speed", "spawn_rate", "objects_count"):
            assert key in obs
            assert obs[key].shape == ()

        for key in ("obj_kind_id", "obj_x", "obj_width", "obj_edible", "obj_mask"):
            assert obs[key].shape == (max_obj,)

        assert (obs["obj_kind_id"] == -1).all()
        assert (obs["obj_mask"] == 0).all()

    def test_observation_in_space(self, env):
        obs, _ = env.reset(seed=3)
        assert env.observation_space.contains(obs)

        for _ in range(200):
            obs, _, terminated, truncated, _ = env.step(ACTION_NOOP)
            assert env.observation_space.contains(obs)
            if terminated or truncated:
                break

    def test_step_returns_correct_tuple(self, env):
        """Step should return 5-tuple with zero reward."""
        env.reset(seed=42)

        obs, reward, terminated, truncated, info = env.step(ACTION_NOOP)

        assert isinstance(obs, dict)
        assert reward == 0.0
        assert isinstance(terminated, bool)
        assert isinstance(truncated, bool)
        assert int(obs["tick"]) == 1
        assert "delta_score" in info
        assert "collisions" in info

    def test_open_mouth_action(self, env, config):
        env.reset(seed=42)

        obs, _, _, _, _ = env.step(ACTION_OPEN_MOUTH)

        # Opened, then one tick of the timer elapsed
        assert int(obs["mouth_open"]) == 1
        assert int(obs["mouth_ticks_remaining"]) == config.player.mouth_open_duration - 1

    def test_numpy_action(self, env):
        env.reset(seed=42)
        obs, _, _, _, _ = env.step(np.array(ACTION_OPEN_MOUTH))

        assert int(obs["mouth_open"]) == 1

    @pytest.mark.parametrize("action", [-1, 2, 7])
    def test_invalid_action(self, env, action):
        env.reset(seed=42)

        with pytest.raises(ValueError):
            env.step(action)

    def test_determinism(self):
        """Same seed and actions give the same trajectory."""
        env1 = DogPacmanEnv()
        env2 = DogPacmanEnv()
        obs1, _ = env1.reset(seed=11)
        obs2, _ = env2.reset(seed=11)

        for i in range(500):
            action = ACTION_OPEN_MOUTH if i % 9 == 0 else ACTION_NOOP
            obs1, _, term1, trunc1, info1 = env1.step(action)
            obs2, _, term2, trunc2, info2 = env2.step(action)
            for key in obs1:
                np.testing.assert_array_equal(obs1[key], obs2[key])
            assert info1 == info2
            if term1 or trunc1:
                break

    def test_episode_ends(self, env, config):
        """A passive agent loses every edible object and the game ends."""
        env.reset(seed=0)

        done = False
        for _ in range(config.caps.max_ticks + 1):
            _, _, terminated, truncated, info = env.step(ACTION_NOOP)
            if terminated or truncated:
                done = True
                break

        assert done
        if terminated:
            assert info["lives"] == 0

    def test_truncation_at_tick_cap(self, config):
        short = replace(config, caps=replace(config.caps, max_ticks=10))
        env = DogPacmanEnv(config=short)
        env.reset(seed=0)

        results = [env.step(ACTION_NOOP) for _ in range(10)]

        assert not any(r[3] for r in results[:-1])
        assert results[-1][3] is True
        assert results[-1][2] is False

    def test_ansi_render(self, config):
        env = DogPacmanEnv(render_mode="ansi")
        env.reset(seed=1)

        frame = env.render()

        assert isinstance(frame, str)
        assert frame.splitlines()[0].startswith("Lives: 5")

    def test_headless_render_returns_none(self, env):
        env.reset(seed=1)
        assert env.render() is None

    def test_unsupported_render_mode(self):
        with pytest.raises(ValueError):
            DogPacmanEnv(render_mode="human")
