"""Lightweight value types shared by the simulation and the front-end."""

from __future__ import annotations

from dataclasses import dataclass, asdict
from enum import Enum

from .errors import InvalidDirectionError


class Direction(Enum):
    """
    One of the four grid headings.

    Declaration order (UP, DOWN, LEFT, RIGHT) is the tie-break order used
    whenever several directions score the same.
    """
    UP = (0, -1)
    DOWN = (0, 1)
    LEFT = (-1, 0)
    RIGHT = (1, 0)

    @property
    def delta(self) -> tuple[int, int]:
        return self.value

    @property
    def opposite(self) -> Direction:
        return _OPPOSITES[self]

    @classmethod
    def parse(cls, value: Direction | str) -> Direction:
        """
        Validate an external turn request.

        Parameters
        ----------
        value : Direction | str
            A ``Direction`` member or its case-insensitive name ("up", "LEFT").

        Raises
        ------
        InvalidDirectionError
            If ``value`` does not name one of the four directions.
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            try:
                return cls[value.strip().upper()]
            except KeyError:
                pass
        raise InvalidDirectionError(f"Not a direction: {value!r}")


_OPPOSITES = {
    Direction.UP: Direction.DOWN,
    Direction.DOWN: Direction.UP,
    Direction.LEFT: Direction.RIGHT,
    Direction.RIGHT: Direction.LEFT,
}


@dataclass(frozen=True)
class Position:
    """
    An integer grid cell. Equality is exact on both components.

    Attributes
    ----------
    x : int
        Column, growing to the right.
    y : int
        Row, growing downward.
    """
    x: int
    y: int

    def step(self, direction: Direction, n: int = 1) -> Position:
        """Return the cell ``n`` steps away along ``direction`` (no bounds check)."""
        dx, dy = direction.delta
        return Position(self.x + dx * n, self.y + dy * n)

    def manhattan(self, other: Position) -> int:
        return abs(self.x - other.x) + abs(self.y - other.y)

    def to_dict(self) -> dict:
        return {"x": self.x, "y": self.y}


class HunterMode(Enum):
    SCATTER = "scatter"
    CHASE = "chase"
    FRIGHTENED = "frightened"
    EATEN = "eaten"


class ItemKind(Enum):
    DOT = "dot"
    POWER = "power"


class GameStatus(Enum):
    PLAYING = "playing"
    PAUSED = "paused"
    GAME_OVER = "game_over"


class HoldReason(Enum):
    """Why gameplay is frozen for a countdown."""
    CAUGHT = "caught"
    LEVEL_CLEAR = "level_clear"


@dataclass(frozen=True)
class Pickup:
    """An item removed from the maze by the seeker."""
    position: Position
    kind: ItemKind
    points: int


@dataclass(frozen=True)
class SeekerSnapshot:
    position: Position
    direction: Direction
    power_active: bool
    power_fraction: float


@dataclass(frozen=True)
class HunterSnapshot:
    identity: int
    position: Position
    direction: Direction
    mode: HunterMode
    behavior: str
    frightened_fraction: float


@dataclass(frozen=True)
class GameSnapshot:
    """
    Read-only view of one simulation instant, for rendering or saving.

    Built from plain values only, so two snapshots taken without a tick in
    between compare equal.
    """
    seeker: SeekerSnapshot
    hunters: tuple[HunterSnapshot, ...]
    score: int
    lives: int
    level: int
    remaining_items: int
    status: GameStatus
    hold_reason: HoldReason | None
    hold_remaining: float

    def to_dict(self) -> dict:
        """Convert to plain dicts, lists and strings (JSON friendly)."""
        data = asdict(self)
        data["seeker"]["direction"] = self.seeker.direction.name
        data["hunters"] = [
            dict(h, direction=hunter.direction.name, mode=hunter.mode.value)
            for h, hunter in zip(data["hunters"], self.hunters)
        ]
        data["status"] = self.status.value
        data["hold_reason"] = self.hold_reason.value if self.hold_reason else None
        return data
