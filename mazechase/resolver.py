"""Per-tick reconciliation of seeker and hunter positions."""

from __future__ import annotations

from dataclasses import dataclass, field

from .config import SimulationConfig
from .events import GameEvent, GhostCaptured, LivesExhausted, SeekerCaught
from .hunter import Hunter
from .models import HunterMode
from .seeker import Seeker


@dataclass
class Scoreboard:
    score: int = 0
    lives: int = 0
    level: int = 1


@dataclass
class Resolution:
    """
    Outcome of one collision pass.

    Attributes
    ----------
    events : list[GameEvent]
        Capture / catch events in the order they happened.
    caught : bool
        The seeker was caught by a hunter this tick.
    lives_exhausted : bool
        The catch used up the last life.
    """
    events: list[GameEvent] = field(default_factory=list)
    caught: bool = False
    lives_exhausted: bool = False


class CollisionResolver:
    """
    Checks every hunter sharing the seeker's cell.

    A frightened hunter is captured for points; a scattering or chasing one
    catches the seeker and costs a life; an eaten one is ignored. Only exact
    cell equality counts as a collision.
    """

    def __init__(self, config: SimulationConfig) -> None:
        self.config = config

    def resolve(self, seeker: Seeker, hunters: list[Hunter], scoreboard: Scoreboard) -> Resolution:
        result = Resolution()
        for hunter in hunters:
            if hunter.position != seeker.position:
                continue

            if hunter.mode == HunterMode.FRIGHTENED:
                hunter.capture()
                scoreboard.score += self.config.capture_score
                result.events.append(GhostCaptured(hunter.position, self.config.capture_score))
            elif hunter.mode != HunterMode.EATEN:
                scoreboard.lives = max(0, scoreboard.lives - 1)
                result.caught = True
                result.events.append(SeekerCaught(scoreboard.lives))
                if scoreboard.lives == 0:
                    result.lives_exhausted = True
                    result.events.append(LivesExhausted(scoreboard.score))
                # positions are about to be reset; later hunters cannot collide this tick
                break
        return result
