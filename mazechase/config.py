"""Immutable tuning passed to a ``Simulation`` at construction."""

from __future__ import annotations

from dataclasses import dataclass, replace

from .behaviors import BehaviorVariant
from .constants import (
    SEEKER_INTERVAL_MS, HUNTER_INTERVAL_MS, FRIGHTENED_SLOWDOWN,
    SCATTER_DURATION_MS, CHASE_DURATION_MS, FRIGHTENED_DURATION_MS, RESPAWN_DELAY_MS,
    FRIGHTENED_RANDOM_CHANCE, AMBUSH_LOOKAHEAD, MAX_HUNTERS, POWER_DURATION_MS,
    CAPTURE_SCORE, LEVEL_BONUS,
    INITIAL_LIVES, CAUGHT_GRACE_MS, LEVEL_CLEAR_DELAY_MS
)
from .errors import ConfigError


@dataclass(frozen=True)
class SimulationConfig:
    """
    Every timing and scoring knob of the simulation.

    Defaults come from ``mazechase.constants``. Instances are frozen so
    several simulations with different tuning can run side by side; use
    ``with_overrides`` to derive a variant.

    Times are in milliseconds (any unit works as long as ``tick`` is fed the
    same unit).
    """
    seeker_interval: float = SEEKER_INTERVAL_MS
    hunter_interval: float = HUNTER_INTERVAL_MS
    frightened_slowdown: float = FRIGHTENED_SLOWDOWN
    scatter_duration: float = SCATTER_DURATION_MS
    chase_duration: float = CHASE_DURATION_MS
    frightened_duration: float = FRIGHTENED_DURATION_MS
    respawn_delay: float = RESPAWN_DELAY_MS
    frightened_random_chance: float = FRIGHTENED_RANDOM_CHANCE
    ambush_lookahead: int = AMBUSH_LOOKAHEAD
    power_duration: float = POWER_DURATION_MS
    capture_score: int = CAPTURE_SCORE
    level_bonus: int = LEVEL_BONUS
    initial_lives: int = INITIAL_LIVES
    caught_grace: float = CAUGHT_GRACE_MS
    level_clear_delay: float = LEVEL_CLEAR_DELAY_MS
    max_hunters: int = MAX_HUNTERS
    hunter_behaviors: tuple[BehaviorVariant, ...] = (
        BehaviorVariant.AGGRESSIVE,
        BehaviorVariant.AMBUSH,
        BehaviorVariant.PATROL,
    )

    def __post_init__(self) -> None:
        for name in ("seeker_interval", "hunter_interval", "scatter_duration", "chase_duration",
                     "frightened_duration", "power_duration"):
            if getattr(self, name) <= 0:
                raise ConfigError(f"{name} must be positive, got {getattr(self, name)}")
        for name in ("respawn_delay", "caught_grace", "level_clear_delay"):
            if getattr(self, name) < 0:
                raise ConfigError(f"{name} must not be negative, got {getattr(self, name)}")
        if self.frightened_slowdown <= 1:
            raise ConfigError("frightened_slowdown must be greater than 1 (frightened hunters are slower)")
        if not 0.0 <= self.frightened_random_chance <= 1.0:
            raise ConfigError("frightened_random_chance must be within [0, 1]")
        if self.initial_lives < 1:
            raise ConfigError("initial_lives must be at least 1")
        if self.max_hunters < 0:
            raise ConfigError("max_hunters must not be negative")
        if not self.hunter_behaviors:
            raise ConfigError("hunter_behaviors must name at least one behavior")

    @property
    def frightened_interval(self) -> float:
        return self.hunter_interval * self.frightened_slowdown

    def with_overrides(self, **changes) -> SimulationConfig:
        """Return a copy with ``changes`` applied (validated again)."""
        return replace(self, **changes)


DEFAULT_CONFIG = SimulationConfig()
