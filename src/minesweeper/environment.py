"""
Gymnasium adapter for the Minesweeper engine.

Each episode is one game. An action is the row-major index of the tile
to reveal; flags are not part of the action space.
"""
import random
from typing import Any, Dict, Optional, Tuple, SupportsFloat

import gymnasium as gym
import numpy as np
from gymnasium import spaces

from .board import EASY, BoardConfig
from .engine import Engine
from .tile import OBS_FLAGGED, OBS_MINE

REWARD_SAFE = 1.0
REWARD_WIN = 10.0
REWARD_MINE = -10.0
REWARD_NO_OP = -0.1


class MinesweeperEnv(gym.Env):
    """
    Engine-backed Minesweeper environment.

    Observations come straight from Engine.observation(). Revealing a
    tile that is already revealed or flagged costs REWARD_NO_OP and
    leaves the game unchanged.

    Passing options={"config": BoardConfig(...)} to reset() switches
    difficulty; spaces are rebuilt to match.
    """

    metadata = {"render_modes": []}

    def __init__(self, config: Optional[BoardConfig] = None) -> None:
        super().__init__()
        self._moves = 0
        self._use_config(config or EASY)
        self.engine = Engine(self.config)

    def _use_config(self, config: BoardConfig) -> None:
        self.config = config
        self.observation_space = spaces.Box(
            low=OBS_FLAGGED,
            high=OBS_MINE,
            shape=(config.height, config.width),
            dtype=np.int8,
        )
        self.action_space = spaces.Discrete(config.size)

    def reset(
        self,
        *,
        seed: Optional[int] = None,
        options: Optional[Dict[str, Any]] = None,
    ) -> Tuple[np.ndarray, Dict[str, Any]]:
        """
        Start a new game.

        Mine placement uses a stdlib Random drawn from np_random, so the
        same seed gives the same layout for the same first move.
        """
        super().reset(seed=seed)
        config = (options or {}).get("config")
        if config is not None and config != self.config:
            self._use_config(config)

        placement_rng = random.Random(int(self.np_random.integers(2**32)))
        self.engine = Engine(self.config, rng=placement_rng)
        self._moves = 0
        return self.engine.observation(), self._info()

    def step(
        self, action: int
    ) -> Tuple[np.ndarray, SupportsFloat, bool, bool, Dict[str, Any]]:
        self._moves += 1
        if not self.engine.reveal(int(action)):
            reward = REWARD_NO_OP
        elif self.engine.is_lost:
            reward = REWARD_MINE
        elif self.engine.is_won:
            reward = REWARD_WIN
        else:
            reward = REWARD_SAFE
        return (
            self.engine.observation(),
            reward,
            self.engine.is_over,
            False,
            self._info(),
        )

    def _info(self) -> Dict[str, Any]:
        return {
            "moves": self._moves,
            "phase": self.engine.phase.name,
            "revealed": self.engine.revealed_count,
            "safe_tiles": self.config.size - self.config.num_mines,
            "mines_left": self.engine.mines_left,
        }

    def get_action_mask(self) -> np.ndarray:
        """Boolean mask over actions; True where a reveal would do something."""
        mask = np.zeros(self.config.size, dtype=bool)
        mask[self.engine.valid_actions()] = True
        return mask
