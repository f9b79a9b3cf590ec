"""The player-controlled seeker and its power-mode timer."""

from __future__ import annotations

from .config import SimulationConfig
from .maze import Maze
from .models import Direction, Position, SeekerSnapshot
from .scheduler import MoveTimer


class PowerMode:
    """
    Seeker-side countdown that, while active, makes every hunter flee.

    Arming always restarts the full duration; it never stacks with time
    left over from an earlier power item.
    """

    def __init__(self, duration: float) -> None:
        self.duration = duration
        self.active = False
        self.remaining = 0.0

    def arm(self) -> None:
        self.active = True
        self.remaining = self.duration

    def update(self, elapsed: float) -> None:
        if not self.active:
            return
        self.remaining -= elapsed
        if self.remaining <= 0:
            self.remaining = 0.0
            self.active = False

    def clear(self) -> None:
        self.active = False
        self.remaining = 0.0

    @property
    def fraction(self) -> float:
        """Remaining share of the duration (0 when inactive)."""
        if not self.active:
            return 0.0
        return self.remaining / self.duration


class Seeker:
    """
    The maze runner steered by queued turn requests.

    A queued turn is applied at the next step where the cell in that
    direction is walkable, then cleared. Until then the seeker keeps moving
    along its current heading, holding position when a wall is ahead.
    """

    def __init__(self, start: Position, config: SimulationConfig) -> None:
        self.start = start
        self.config = config
        self.timer = MoveTimer(config.seeker_interval)
        self.power = PowerMode(config.power_duration)
        self.reset()

    def reset(self) -> None:
        """Back to the start cell facing right, with no queued turn and power off."""
        self.position = self.start
        self.direction = Direction.RIGHT
        self.pending_direction: Direction | None = None
        self.timer.reset()
        self.power.clear()

    def queue_direction(self, direction: Direction) -> None:
        self.pending_direction = direction

    def update(self, elapsed: float, maze: Maze) -> bool:
        """Advance the move timer and step if due. Returns True if a step was taken."""
        if not self.timer.advance(elapsed):
            return False
        self.step(maze)
        return True

    def step(self, maze: Maze) -> None:
        if self.pending_direction is not None:
            if maze.is_walkable(self.position.step(self.pending_direction)):
                self.direction = self.pending_direction
                self.pending_direction = None

        target = self.position.step(self.direction)
        if maze.is_walkable(target):
            self.position = target

    def snapshot(self) -> SeekerSnapshot:
        return SeekerSnapshot(
            position=self.position,
            direction=self.direction,
            power_active=self.power.active,
            power_fraction=self.power.fraction,
        )
