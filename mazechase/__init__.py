"""Maze chase simulation core: maze model, movement scheduling, hunter AI and scoring."""

from .config import DEFAULT_CONFIG, SimulationConfig
from .errors import (
    ConfigError, InvalidDirectionError, InvalidTransitionError, MazeChaseError, MazeError
)
from .events import GameEvent, GhostCaptured, ItemCollected, LevelCleared, LivesExhausted, SeekerCaught
from .maze import Cell, Maze
from .models import Direction, GameSnapshot, GameStatus, HunterMode, Position
from .behaviors import BehaviorVariant
from .simulation import Simulation

__all__ = [
    "BehaviorVariant", "Cell", "ConfigError", "DEFAULT_CONFIG", "Direction", "GameEvent",
    "GameSnapshot", "GameStatus", "GhostCaptured", "HunterMode", "InvalidDirectionError",
    "InvalidTransitionError", "ItemCollected", "LevelCleared", "LivesExhausted", "Maze",
    "MazeChaseError", "MazeError", "Position", "SeekerCaught", "Simulation", "SimulationConfig",
]
