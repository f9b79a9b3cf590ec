"""Events emitted by ``Simulation.tick`` for the presentation layer."""

from __future__ import annotations

from dataclasses import dataclass

from .models import ItemKind, Position


@dataclass(frozen=True)
class GameEvent:
    """Base class; ``name`` is the short label used in logs."""

    @property
    def name(self) -> str:
        return type(self).__name__

    def details(self) -> str:
        return ""


@dataclass(frozen=True)
class ItemCollected(GameEvent):
    position: Position
    points: int
    kind: ItemKind = ItemKind.DOT

    def details(self) -> str:
        return f"{self.kind.value} at ({self.position.x}, {self.position.y}) +{self.points}"


@dataclass(frozen=True)
class GhostCaptured(GameEvent):
    position: Position
    points: int

    def details(self) -> str:
        return f"hunter at ({self.position.x}, {self.position.y}) +{self.points}"


@dataclass(frozen=True)
class SeekerCaught(GameEvent):
    lives_left: int

    def details(self) -> str:
        return f"{self.lives_left} lives left"


@dataclass(frozen=True)
class LevelCleared(GameEvent):
    level: int
    bonus: int

    def details(self) -> str:
        return f"advanced to level {self.level} +{self.bonus}"


@dataclass(frozen=True)
class LivesExhausted(GameEvent):
    score: int

    def details(self) -> str:
        return f"final score {self.score}"
