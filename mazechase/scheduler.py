"""Fixed-cadence movement timing, independent of the render frame rate."""


class MoveTimer:
    """
    Converts elapsed wall-clock time into discrete one-cell steps.

    Elapsed time accumulates across ticks; once it reaches ``interval`` the
    timer fires once and the accumulator drops back to zero. Overshoot past
    the threshold is discarded rather than carried into the next cycle, so
    an entity never takes two steps in one tick.

    Parameters
    ----------
    interval : float
        Time between steps. May be changed at any point; the new value is
        compared against on the next ``advance``.
    """

    def __init__(self, interval: float) -> None:
        self.interval = interval
        self.elapsed = 0.0

    def advance(self, elapsed: float) -> bool:
        """Accumulate ``elapsed``; return True if a step is due now."""
        self.elapsed += elapsed
        if self.elapsed >= self.interval:
            self.elapsed = 0.0
            return True
        return False

    def reset(self) -> None:
        self.elapsed = 0.0

    @property
    def progress(self) -> float:
        """Fraction of the current interval already accumulated (0-1)."""
        return min(1.0, self.elapsed / self.interval)
