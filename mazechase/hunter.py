from __future__ import annotations

import random

from .behaviors import BehaviorVariant
from .config import SimulationConfig
from .errors import InvalidTransitionError
from .maze import Maze
from .models import Direction, HunterMode, HunterSnapshot, Position, SeekerSnapshot
from .scheduler import MoveTimer


class Hunter:
    """
    One autonomous pursuer.

    Lifecycle:
    - SCATTER:      initial mode; heads for its home corner.
    - CHASE:        steers towards the target picked by its behavior variant.
    - FRIGHTENED:   entered whenever the seeker's power mode is active; flees
                    the seeker at a slower cadence until its countdown ends.
    - EATEN:        captured while frightened; holds still until the respawn
                    countdown ends, then reappears at its start in SCATTER.

    SCATTER and CHASE alternate on a phase timer that only runs in those two
    modes. All timings are driven by the elapsed time handed to ``update``
    (frame-rate independent).
    """

    def __init__(self, identity: int, start: Position, behavior: BehaviorVariant,
                 maze: Maze, config: SimulationConfig, rng: random.Random) -> None:
        self.identity = identity
        self.start = start
        self.behavior = behavior
        self.maze = maze
        self.config = config
        self.rng = rng
        self.timer = MoveTimer(config.hunter_interval)
        self.reset()

    def reset(self) -> None:
        """Reinitialize at the start cell in SCATTER with a random heading."""
        self.position = self.start
        self.direction = self.rng.choice(list(Direction))
        self.mode = HunterMode.SCATTER
        self.phase_elapsed = 0.0
        self.frightened_remaining = 0.0
        self.respawn_remaining = 0.0
        self.timer.reset()
        self.timer.interval = self.config.hunter_interval
        self.home_corner = self.resolve_home_corner()

    def resolve_home_corner(self) -> Position:
        corners = self.maze.corners()
        return corners[self.identity % len(corners)]

    # ------------------------------- Update & State ----------------------------------

    def update(self, elapsed: float, seeker: SeekerSnapshot, power_active: bool) -> bool:
        """
        Run the mode machine, then the movement scheduler.

        Returns
        -------
        bool
            True if the hunter took a movement step this tick.
        """
        self.update_mode(elapsed, power_active)
        return self.update_movement(elapsed, seeker)

    def update_mode(self, elapsed: float, power_active: bool) -> None:
        if power_active and self.mode in (HunterMode.SCATTER, HunterMode.CHASE):
            self.frighten()
            return

        if self.mode == HunterMode.FRIGHTENED:
            self.frightened_remaining -= elapsed
            if self.frightened_remaining <= 0:
                self.frightened_remaining = 0.0
                self.mode = HunterMode.CHASE
                self.phase_elapsed = 0.0
            return

        if self.mode == HunterMode.EATEN:
            self.respawn_remaining -= elapsed
            if self.respawn_remaining <= 0:
                self.respawn()
            return

        # SCATTER / CHASE alternation
        self.phase_elapsed += elapsed
        if self.mode == HunterMode.SCATTER and self.phase_elapsed >= self.config.scatter_duration:
            self.mode = HunterMode.CHASE
            self.phase_elapsed = 0.0
        elif self.mode == HunterMode.CHASE and self.phase_elapsed >= self.config.chase_duration:
            self.mode = HunterMode.SCATTER
            self.phase_elapsed = 0.0
            self.home_corner = self.resolve_home_corner()

    def frighten(self) -> None:
        """Enter FRIGHTENED with a full countdown and turn around on the spot."""
        if self.mode not in (HunterMode.SCATTER, HunterMode.CHASE):
            return
        self.mode = HunterMode.FRIGHTENED
        self.frightened_remaining = self.config.frightened_duration
        self.direction = self.direction.opposite

    def capture(self) -> None:
        """Called by the collision resolver when the seeker catches this hunter."""
        if self.mode != HunterMode.FRIGHTENED:
            raise InvalidTransitionError(f"Hunter {self.identity} cannot be eaten while {self.mode.value}")
        self.mode = HunterMode.EATEN
        self.frightened_remaining = 0.0
        self.respawn_remaining = self.config.respawn_delay

    def respawn(self) -> None:
        self.position = self.start
        self.mode = HunterMode.SCATTER
        self.phase_elapsed = 0.0
        self.respawn_remaining = 0.0
        self.timer.reset()
        self.timer.interval = self.config.hunter_interval

    def update_movement(self, elapsed: float, seeker: SeekerSnapshot) -> bool:
        if self.mode == HunterMode.EATEN:
            return False
        if not self.timer.advance(elapsed):
            return False

        self.move(seeker)

        # frightened hunters crawl; the new cadence applies from the next cycle
        if self.mode == HunterMode.FRIGHTENED:
            self.timer.interval = self.config.frightened_interval
        else:
            self.timer.interval = self.config.hunter_interval
        return True

    # ------------------------------- Direction choice --------------------------------

    def candidate_directions(self) -> list[Direction]:
        """Walkable directions without the U-turn, unless the U-turn is the only way out."""
        valid = set(self.maze.valid_directions(self.position))
        ordered = [d for d in Direction if d in valid]
        forward = [d for d in ordered if d != self.direction.opposite]
        return forward if forward else ordered

    def move(self, seeker: SeekerSnapshot) -> None:
        candidates = self.candidate_directions()
        if not candidates:
            return

        if self.mode == HunterMode.CHASE:
            target = self.behavior.select_target(seeker, self.config.ambush_lookahead)
            chosen = self.choose_closest(candidates, target)
        elif self.mode == HunterMode.SCATTER:
            chosen = self.choose_closest(candidates, self.home_corner)
        else:
            chosen = self.choose_frightened(candidates, seeker.position)

        self.direction = chosen
        target_cell = self.position.step(chosen)
        if self.maze.is_walkable(target_cell):
            self.position = target_cell

    def choose_closest(self, candidates: list[Direction], target: Position) -> Direction:
        """First candidate whose resulting cell is nearest ``target`` (Manhattan)."""
        return min(candidates, key=lambda d: self.position.step(d).manhattan(target))

    def choose_frightened(self, candidates: list[Direction], threat: Position) -> Direction:
        """
        Flee: first candidate whose resulting cell is farthest from ``threat``,
        replaced by a uniform random candidate with the configured probability.
        """
        best = max(candidates, key=lambda d: self.position.step(d).manhattan(threat))
        if self.rng.random() < self.config.frightened_random_chance:
            return self.rng.choice(candidates)
        return best

    # ------------------------------- Queries -----------------------------------------

    @property
    def frightened_fraction(self) -> float:
        if self.mode != HunterMode.FRIGHTENED:
            return 0.0
        return self.frightened_remaining / self.config.frightened_duration

    def snapshot(self) -> HunterSnapshot:
        return HunterSnapshot(
            identity=self.identity,
            position=self.position,
            direction=self.direction,
            mode=self.mode,
            behavior=self.behavior.value,
            frightened_fraction=self.frightened_fraction,
        )
