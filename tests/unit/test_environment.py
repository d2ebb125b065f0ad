"""
Unit tests for the Gymnasium environment wrapper.
"""
import numpy as np
import pytest
from minesweeper import MEDIUM, BoardConfig, MinesweeperEnv, Phase


@pytest.fixture
def env() -> MinesweeperEnv:
    """Create an environment on the default EASY board."""
    return MinesweeperEnv()


@pytest.fixture
def empty_env() -> MinesweeperEnv:
    """Create an environment on a mine-free 5x5 board."""
    return MinesweeperEnv(BoardConfig(5, 5, 0))


# ============================================================================
# Space Tests
# ============================================================================

class TestSpaces:
    """Test observation and action spaces."""

    def test_action_space_has_one_action_per_tile(self, env: MinesweeperEnv) -> None:
        assert env.action_space.n == 64

    def test_observation_space_matches_board(self, env: MinesweeperEnv) -> None:
        assert env.observation_space.shape == (8, 8)
        assert env.observation_space.dtype == np.int8

    def test_reset_observation_is_all_concealed(self, env: MinesweeperEnv) -> None:
        obs, info = env.reset(seed=0)
        assert np.all(obs == -1)
        assert env.observation_space.contains(obs)
        assert info["phase"] == Phase.FIRST_MOVE.name
        assert info["moves"] == 0


# ============================================================================
# Step Tests
# ============================================================================

class TestStep:
    """Test rewards and termination."""

    def test_first_step_is_safe(self, env: MinesweeperEnv) -> None:
        env.reset(seed=3)
        obs, reward, terminated, truncated, info = env.step(27)
        assert reward == 1.0
        assert terminated is False
        assert truncated is False
        assert obs[3, 3] >= 0
        assert info["revealed"] >= 1

    def test_clearing_board_wins(self, empty_env: MinesweeperEnv) -> None:
        empty_env.reset(seed=0)
        _, reward, terminated, _, info = empty_env.step(12)
        assert reward == 10.0
        assert terminated is True
        assert info["phase"] == Phase.WON.name

    def test_repeated_action_is_penalised(self, env: MinesweeperEnv) -> None:
        env.reset(seed=3)
        env.step(27)
        _, reward, _, _, _ = env.step(27)
        assert reward == pytest.approx(-0.1)

    def test_action_mask_tracks_revealed_tiles(self, env: MinesweeperEnv) -> None:
        env.reset(seed=3)
        assert env.get_action_mask().all()
        env.step(27)
        mask = env.get_action_mask()
        assert mask[27] == False  # noqa: E712
        assert mask.sum() == 64 - env.engine.revealed_count

    def test_same_seed_gives_same_layout(self) -> None:
        first, second = MinesweeperEnv(), MinesweeperEnv()
        first.reset(seed=42)
        second.reset(seed=42)
        obs_a, *_ = first.step(10)
        obs_b, *_ = second.step(10)
        assert np.array_equal(obs_a, obs_b)
        assert [t.is_mine for t in first.engine.tiles()] == [
            t.is_mine for t in second.engine.tiles()
        ]

    def test_reset_options_switch_difficulty(self, env: MinesweeperEnv) -> None:
        obs, info = env.reset(seed=1, options={"config": MEDIUM})
        assert obs.shape == (16, 16)
        assert env.action_space.n == 256
        assert env.get_action_mask().shape == (256,)
        assert info["safe_tiles"] == 216
