"""Exceptions raised by the simulation core."""


class MazeChaseError(Exception):
    """Base class for every error raised by the ``mazechase`` package."""


class MazeError(MazeChaseError):
    """The maze layout is inconsistent (ragged rows, missing or walled-in starts)."""


class ConfigError(MazeChaseError):
    """A ``SimulationConfig`` field is out of range."""


class InvalidDirectionError(MazeChaseError, ValueError):
    """A turn request that is not one of the four directions."""


class InvalidTransitionError(MazeChaseError):
    """A hunter was asked to enter a mode it cannot reach from its current one."""
