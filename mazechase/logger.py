"""Markdown logger for gameplay events (pickups, captures, catches, level-ups)."""

import datetime

from .events import GameEvent


class GameLogger:
    """Handles logging of game events to markdown file."""

    def __init__(self, log_file: str):
        """
        Initialize the game logger.

        Parameters
        ----------
        log_file : str
            Path to the log file
        """
        self.log_file = log_file
        self.setup_log()

    def setup_log(self) -> None:
        """Initialize the log file with headers."""
        try:
            with open(self.log_file, 'w', encoding='utf-8') as f:
                f.write("# Maze Chase Game Log\n\n")
                f.write(f"Log started at: {datetime.datetime.now().strftime('%Y-%m-%d %H:%M:%S')}\n\n")
                f.write("## Game Events\n\n")
                f.write("| Timestamp | Game time (ms) | Event | Details |\n")
                f.write("|-----------|----------------|-------|---------|\n")
        except Exception as e:
            print(f"Failed to initialize log file: {e}")

    def _write_row(self, game_time: str, event: str, details: str) -> None:
        timestamp = datetime.datetime.now().strftime('%H:%M:%S.%f')[:-3]  # Include milliseconds
        with open(self.log_file, 'a', encoding='utf-8') as f:
            f.write(f"| {timestamp} | {game_time} | {event} | {details} |\n")

    def log_event(self, event: GameEvent, game_time_ms: int = 0) -> None:
        """
        Log an event emitted by the simulation.

        Parameters
        ----------
        event : GameEvent
            The emitted event
        game_time_ms : int, optional
            Pause-aware game time at which the event happened
        """
        try:
            self._write_row(str(game_time_ms), event.name, event.details())
        except Exception as e:
            print(f"Failed to log event: {e}")

    def log_level_up(self, level: int) -> None:
        """
        Log a level up event.

        Parameters
        ----------
        level : int
            New level reached
        """
        try:
            self._write_row("-", "LEVEL UP", f"Reached level {level}")
        except Exception as e:
            print(f"Failed to log level up: {e}")

    def log_game_over(self, score: int) -> None:
        try:
            self._write_row("-", "GAME OVER", f"Final score {score}")
        except Exception as e:
            print(f"Failed to log game over: {e}")
