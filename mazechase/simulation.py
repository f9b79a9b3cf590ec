"""Simulation core: one synchronous ``tick`` drives every entity."""

from __future__ import annotations

import random
from typing import Callable

from .config import DEFAULT_CONFIG, SimulationConfig
from .events import GameEvent, ItemCollected, LevelCleared
from .hunter import Hunter
from .maze import Maze
from .models import (
    Direction, GameSnapshot, GameStatus, HoldReason, ItemKind, SeekerSnapshot
)
from .resolver import CollisionResolver, Scoreboard
from .seeker import Seeker

EventListener = Callable[[GameEvent], None]


class Simulation:
    """
    Owns the maze, the seeker, the hunters and the score.

    The whole game advances only through ``tick(elapsed)``; there are no
    timers or callbacks. Delays (the grace period after a catch, the pause
    after a cleared level) are countdown fields checked on later ticks, so
    the simulation can be stepped deterministically from a test.

    Parameters
    ----------
    maze : Maze
        Level layout. Its item set is mutated as the seeker collects items.
    config : SimulationConfig, optional
        Timing and scoring; defaults to ``DEFAULT_CONFIG``.
    rng : random.Random, optional
        Source for hunter headings and frightened randomness. Pass a seeded
        instance for reproducible runs.
    """

    def __init__(self, maze: Maze, config: SimulationConfig | None = None,
                 rng: random.Random | None = None) -> None:
        self.maze = maze
        self.config = config or DEFAULT_CONFIG
        self.rng = rng or random.Random()
        self.resolver = CollisionResolver(self.config)
        self.listeners: list[EventListener] = []

        seeker_start, hunter_starts = maze.start_positions()
        self.seeker = Seeker(seeker_start, self.config)
        self.hunters: list[Hunter] = []
        behaviors = self.config.hunter_behaviors
        for i, start in enumerate(hunter_starts[:self.config.max_hunters]):
            self.hunters.append(
                Hunter(i, start, behaviors[i % len(behaviors)], maze, self.config, self.rng)
            )

        self.scoreboard = Scoreboard()
        self.restart()

    # --------------------------------- Control --------------------------------------

    def restart(self) -> None:
        """Start over at level 1: full lives, zero score, fresh maze, no pending countdown."""
        self.scoreboard.score = 0
        self.scoreboard.lives = self.config.initial_lives
        self.scoreboard.level = 1
        self.status = GameStatus.PLAYING
        self.hold_reason: HoldReason | None = None
        self.hold_remaining = 0.0
        self.maze.reset()
        self.reset_positions()

    def reset_positions(self) -> None:
        self.seeker.reset()
        for hunter in self.hunters:
            hunter.reset()

    def toggle_pause(self) -> None:
        if self.status == GameStatus.PLAYING:
            self.status = GameStatus.PAUSED
        elif self.status == GameStatus.PAUSED:
            self.status = GameStatus.PLAYING

    def queue_direction(self, direction: Direction | str) -> None:
        """
        Queue a turn for the seeker.

        Raises
        ------
        InvalidDirectionError
            If ``direction`` is not one of the four directions.
        """
        self.seeker.queue_direction(Direction.parse(direction))

    def subscribe(self, listener: EventListener) -> None:
        """Register ``listener`` to receive every event emitted by ``tick``."""
        self.listeners.append(listener)

    # --------------------------------- Tick -----------------------------------------

    def tick(self, elapsed: float) -> list[GameEvent]:
        """
        Advance the game by ``elapsed`` time units.

        Order within a tick: hold countdown, seeker step and item pickup,
        each hunter in creation order, collision resolution, power-mode
        countdown, level-clear check.

        Returns
        -------
        list[GameEvent]
            Events produced by this tick, also delivered to subscribers.
        """
        if elapsed < 0:
            raise ValueError(f"elapsed time must not be negative, got {elapsed}")
        if self.status != GameStatus.PLAYING:
            return []

        if self.hold_reason is not None:
            self.hold_remaining -= elapsed
            if self.hold_remaining <= 0:
                self.hold_reason = None
                self.hold_remaining = 0.0
            return []

        events: list[GameEvent] = []

        self.seeker.update(elapsed, self.maze)
        pickup = self.maze.collect_item_at(self.seeker.position)
        if pickup is not None:
            self.scoreboard.score += pickup.points
            events.append(ItemCollected(pickup.position, pickup.points, pickup.kind))
            if pickup.kind == ItemKind.POWER:
                self.seeker.power.arm()

        seeker_view = self.seeker.snapshot()
        for hunter in self.hunters:
            hunter.update(elapsed, seeker_view, self.seeker.power.active)

        resolution = self.resolver.resolve(self.seeker, self.hunters, self.scoreboard)
        events.extend(resolution.events)
        if resolution.lives_exhausted:
            self.status = GameStatus.GAME_OVER
        elif resolution.caught:
            self.reset_positions()
            self.hold(HoldReason.CAUGHT, self.config.caught_grace)

        self.seeker.power.update(elapsed)

        if self.status == GameStatus.PLAYING and self.maze.remaining_item_count() == 0:
            events.append(self.advance_level())

        for event in events:
            for listener in self.listeners:
                listener(event)
        return events

    def hold(self, reason: HoldReason, duration: float) -> None:
        """Freeze gameplay for ``duration``; replaces any countdown already pending."""
        if duration <= 0:
            self.hold_reason = None
            self.hold_remaining = 0.0
            return
        self.hold_reason = reason
        self.hold_remaining = duration

    def advance_level(self) -> LevelCleared:
        self.scoreboard.score += self.config.level_bonus
        self.scoreboard.level += 1
        self.maze.reset()
        self.reset_positions()
        self.hold(HoldReason.LEVEL_CLEAR, self.config.level_clear_delay)
        return LevelCleared(self.scoreboard.level, self.config.level_bonus)

    # --------------------------------- Queries --------------------------------------

    @property
    def score(self) -> int:
        return self.scoreboard.score

    @property
    def lives(self) -> int:
        return self.scoreboard.lives

    @property
    def level(self) -> int:
        return self.scoreboard.level

    def seeker_snapshot(self) -> SeekerSnapshot:
        return self.seeker.snapshot()

    def snapshot(self) -> GameSnapshot:
        return GameSnapshot(
            seeker=self.seeker.snapshot(),
            hunters=tuple(h.snapshot() for h in self.hunters),
            score=self.scoreboard.score,
            lives=self.scoreboard.lives,
            level=self.scoreboard.level,
            remaining_items=self.maze.remaining_item_count(),
            status=self.status,
            hold_reason=self.hold_reason,
            hold_remaining=self.hold_remaining,
        )
