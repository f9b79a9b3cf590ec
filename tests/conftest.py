import random

import pytest

from mazechase.behaviors import BehaviorVariant
from mazechase.config import SimulationConfig
from mazechase.hunter import Hunter
from mazechase.maze import Maze
from mazechase.models import Direction, HunterMode, Position, SeekerSnapshot


# ---------------------------------------------------------------------------
# Layouts
# ---------------------------------------------------------------------------

# 7x7 room, open interior 5x5
OPEN_ROOM = [
    "#######",
    "#S....#",
    "#.....#",
    "#.....#",
    "#.....#",
    "#....H#",
    "#######",
]

# single vertical corridor at x=5
VERTICAL_CORRIDOR = [
    "###########",
    "#####S#####",
    "#####.#####",
    "#####.#####",
    "#####.#####",
    "#####H#####",
    "#####.#####",
    "#####.#####",
    "#####.#####",
    "#####.#####",
    "###########",
]

# one winding corridor without branches, dead ends at both extremities
WINDING_CORRIDOR = [
    "##########",
    "#S.....###",
    "######.###",
    "######.###",
    "#H.....###",
    "#.########",
    "#........#",
    "##########",
]


@pytest.fixture
def config():
    return SimulationConfig()


@pytest.fixture
def rng():
    return random.Random(1234)


@pytest.fixture
def open_room():
    return Maze.from_rows(OPEN_ROOM)


@pytest.fixture
def vertical_corridor():
    return Maze.from_rows(VERTICAL_CORRIDOR)


@pytest.fixture
def winding_corridor():
    return Maze.from_rows(WINDING_CORRIDOR)


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def seeker_at(x: int, y: int, direction: Direction = Direction.RIGHT,
              power_active: bool = False) -> SeekerSnapshot:
    return SeekerSnapshot(Position(x, y), direction, power_active, 1.0 if power_active else 0.0)


def make_hunter(maze: Maze, config: SimulationConfig, rng: random.Random,
                position: Position | None = None,
                behavior: BehaviorVariant = BehaviorVariant.AGGRESSIVE,
                mode: HunterMode = HunterMode.SCATTER,
                direction: Direction = Direction.LEFT,
                identity: int = 0) -> Hunter:
    """Hunter started from the maze's first hunter cell, then placed as requested."""
    _, hunter_starts = maze.start_positions()
    hunter = Hunter(identity, hunter_starts[0], behavior, maze, config, rng)
    if position is not None:
        hunter.position = position
    hunter.mode = mode
    hunter.direction = direction
    if mode == HunterMode.FRIGHTENED:
        hunter.frightened_remaining = config.frightened_duration
    return hunter
