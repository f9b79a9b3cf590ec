"""Chase-mode targeting, one pure strategy per hunter behavior variant."""

from __future__ import annotations

from enum import Enum
from typing import Callable

from .constants import AMBUSH_LOOKAHEAD
from .models import Position, SeekerSnapshot


def _target_seeker(seeker: SeekerSnapshot, lookahead: int) -> Position:
    return seeker.position


def _target_ahead_of_seeker(seeker: SeekerSnapshot, lookahead: int) -> Position:
    # may land inside a wall or off the grid; only distances are taken from it
    return seeker.position.step(seeker.direction, lookahead)


def _target_patrol(seeker: SeekerSnapshot, lookahead: int) -> Position:
    # TODO: aim between the seeker and the nearest other hunter once hunters
    # can see each other; until then patrol pursues the seeker cell
    return seeker.position


class BehaviorVariant(Enum):
    """
    A hunter's fixed target-selection strategy, assigned at creation.

    Each member maps to a pure function of the seeker's state, called
    through ``select_target`` while the hunter is in Chase mode.
    """
    AGGRESSIVE = "aggressive"
    AMBUSH = "ambush"
    PATROL = "patrol"
    RANDOM = "random"

    def select_target(self, seeker: SeekerSnapshot, lookahead: int = AMBUSH_LOOKAHEAD) -> Position:
        """
        Cell this behavior steers towards during Chase.

        Parameters
        ----------
        seeker : SeekerSnapshot
            Current seeker state (position and heading are used).
        lookahead : int, optional
            Cells ahead of the seeker for ``AMBUSH``.
        """
        return _TARGETING[self](seeker, lookahead)


_TARGETING: dict[BehaviorVariant, Callable[[SeekerSnapshot, int], Position]] = {
    BehaviorVariant.AGGRESSIVE: _target_seeker,
    BehaviorVariant.AMBUSH: _target_ahead_of_seeker,
    BehaviorVariant.PATROL: _target_patrol,
    BehaviorVariant.RANDOM: _target_seeker,
}
