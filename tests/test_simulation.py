"""End-to-end tick tests for the simulation core."""

import random

import pytest

from mazechase.behaviors import BehaviorVariant
from mazechase.config import SimulationConfig
from mazechase.errors import InvalidDirectionError
from mazechase.events import (
    GhostCaptured, ItemCollected, LevelCleared, LivesExhausted, SeekerCaught
)
from mazechase.maze import Maze
from mazechase.models import Direction, GameStatus, HoldReason, HunterMode, ItemKind, Position
from mazechase.simulation import Simulation

FAST = SimulationConfig(seeker_interval=100, hunter_interval=100)

# power item right next to the seeker, two hunters far away
POWER_ROOM = [
    "##########",
    "#So.....H#",
    "#.######.#",
    "#.......H#",
    "##########",
]

# hunter one cell beyond an empty cell in front of the seeker
HEAD_ON = [
    "######",
    "#S H.#",
    "######",
]

# one dot, nothing else
LAST_DOT = [
    "#####",
    "#S. #",
    "#####",
]


def make_sim(rows, config=FAST, seed=1):
    return Simulation(Maze.from_rows(rows), config, random.Random(seed))


# ---------------------------------------------------------------------------
# Construction & control
# ---------------------------------------------------------------------------

def test_hunters_cycle_through_behaviors():
    sim = Simulation(Maze.generate(30, 20), rng=random.Random(0))
    assert [h.identity for h in sim.hunters] == [0, 1, 2]
    assert [h.behavior for h in sim.hunters] == [
        BehaviorVariant.AGGRESSIVE, BehaviorVariant.AMBUSH, BehaviorVariant.PATROL,
    ]
    assert sim.lives == 3
    assert sim.score == 0
    assert sim.level == 1
    assert sim.status == GameStatus.PLAYING


def test_max_hunters_caps_the_roster():
    sim = Simulation(Maze.generate(30, 20), SimulationConfig(max_hunters=2), random.Random(0))
    assert len(sim.hunters) == 2


def test_maze_without_hunters_is_playable():
    sim = make_sim(LAST_DOT)
    assert sim.hunters == []
    sim.tick(100)
    assert sim.seeker.position == Position(1, 1)  # level was cleared and positions reset


def test_queue_direction_accepts_names():
    sim = make_sim(POWER_ROOM)
    sim.queue_direction("down")
    assert sim.seeker.pending_direction == Direction.DOWN
    sim.queue_direction(Direction.UP)
    assert sim.seeker.pending_direction == Direction.UP


@pytest.mark.parametrize("bad", ["north", "", 3, None])
def test_queue_direction_rejects_garbage(bad):
    sim = make_sim(POWER_ROOM)
    with pytest.raises(InvalidDirectionError):
        sim.queue_direction(bad)
    assert sim.seeker.pending_direction is None


def test_negative_elapsed_is_rejected():
    sim = make_sim(POWER_ROOM)
    with pytest.raises(ValueError):
        sim.tick(-1)


def test_pause_freezes_everything():
    sim = make_sim(POWER_ROOM)
    sim.toggle_pause()
    assert sim.status == GameStatus.PAUSED

    before = sim.snapshot()
    assert sim.tick(1000) == []
    assert sim.snapshot() == before

    sim.toggle_pause()
    assert sim.status == GameStatus.PLAYING
    sim.tick(100)
    assert sim.seeker.position == Position(2, 1)


def test_zero_elapsed_changes_nothing():
    sim = make_sim(POWER_ROOM)
    before = sim.snapshot()
    assert sim.tick(0) == []
    assert sim.snapshot() == before


# ---------------------------------------------------------------------------
# Items & power mode
# ---------------------------------------------------------------------------

def test_power_item_frightens_every_active_hunter():
    sim = make_sim(POWER_ROOM, SimulationConfig(seeker_interval=100, hunter_interval=1000))
    sim.hunters[1].mode = HunterMode.FRIGHTENED
    sim.hunters[1].capture()
    headings = [h.direction for h in sim.hunters]

    events = sim.tick(100)

    assert events == [ItemCollected(Position(2, 1), 50, ItemKind.POWER)]
    assert sim.score == 50
    first, second = sim.hunters
    assert first.mode == HunterMode.FRIGHTENED
    assert first.frightened_remaining == sim.config.frightened_duration
    assert first.direction == headings[0].opposite
    assert second.mode == HunterMode.EATEN
    assert second.direction == headings[1]

    seeker = sim.seeker_snapshot()
    assert seeker.power_active is True
    assert seeker.power_fraction == pytest.approx(0.99)


def test_power_mode_expires():
    config = SimulationConfig(seeker_interval=100, hunter_interval=1000, power_duration=500)
    sim = make_sim(POWER_ROOM, config)
    sim.tick(100)
    assert sim.seeker.power.active
    for _ in range(4):
        sim.tick(100)
    assert not sim.seeker.power.active
    assert sim.seeker_snapshot().power_fraction == 0.0


def test_dots_score_and_disappear():
    sim = make_sim(POWER_ROOM)
    sim.tick(100)
    sim.queue_direction(Direction.RIGHT)
    events = sim.tick(100)
    assert events == [ItemCollected(Position(3, 1), 10, ItemKind.DOT)]
    assert sim.score == 60
    assert Position(3, 1) not in sim.maze.items()


def test_seeker_captures_frightened_hunter():
    # o at (2, 1), hunter at (4, 1), a spare dot keeps the level going
    rows = [
        "########",
        "#So H .#",
        "########",
    ]
    sim = make_sim(rows, FAST.with_overrides(frightened_random_chance=0.0))
    # reversed on frighten, so it walks left into the seeker
    sim.hunters[0].direction = Direction.RIGHT

    sim.tick(100)
    hunter = sim.hunters[0]
    assert hunter.mode == HunterMode.FRIGHTENED
    assert hunter.position == Position(3, 1)
    assert hunter.timer.interval == pytest.approx(150)

    events = sim.tick(100)
    assert events == [GhostCaptured(Position(3, 1), 200)]
    assert hunter.mode == HunterMode.EATEN
    assert sim.score == 250
    assert sim.lives == 3


# ---------------------------------------------------------------------------
# Catches, lives and holds
# ---------------------------------------------------------------------------

def test_catch_costs_a_life_and_resets_positions():
    sim = make_sim(HEAD_ON)
    sim.hunters[0].direction = Direction.LEFT

    events = sim.tick(100)

    assert events == [SeekerCaught(2)]
    assert sim.lives == 2
    assert sim.seeker.position == Position(1, 1)
    assert sim.hunters[0].position == Position(3, 1)
    snap = sim.snapshot()
    assert snap.hold_reason == HoldReason.CAUGHT
    assert snap.hold_remaining == FAST.caught_grace
    assert snap.status == GameStatus.PLAYING


def test_grace_period_then_play_resumes():
    sim = make_sim(HEAD_ON)
    sim.hunters[0].direction = Direction.LEFT
    sim.tick(100)

    assert sim.tick(FAST.caught_grace - 1) == []
    assert sim.seeker.position == Position(1, 1)
    assert sim.snapshot().hold_reason == HoldReason.CAUGHT

    sim.tick(1)
    assert sim.snapshot().hold_reason is None
    assert sim.seeker.position == Position(1, 1)

    sim.hunters[0].direction = Direction.RIGHT
    sim.tick(100)
    assert sim.seeker.position == Position(2, 1)
    assert sim.hunters[0].position == Position(4, 1)
    assert sim.lives == 2


def test_losing_the_last_life_ends_the_game():
    sim = make_sim(HEAD_ON, FAST.with_overrides(initial_lives=1))
    sim.hunters[0].direction = Direction.LEFT

    events = sim.tick(100)

    assert events == [SeekerCaught(0), LivesExhausted(0)]
    assert sim.status == GameStatus.GAME_OVER
    assert sim.lives == 0
    assert sim.tick(100) == []

    sim.toggle_pause()
    assert sim.status == GameStatus.GAME_OVER


def test_restart_after_game_over():
    sim = make_sim(HEAD_ON, FAST.with_overrides(initial_lives=1))
    sim.hunters[0].direction = Direction.LEFT
    sim.tick(100)

    sim.restart()

    snap = sim.snapshot()
    assert snap.status == GameStatus.PLAYING
    assert snap.lives == 1
    assert snap.score == 0
    assert snap.level == 1
    assert snap.hold_reason is None
    assert snap.seeker.position == Position(1, 1)


# ---------------------------------------------------------------------------
# Level clear
# ---------------------------------------------------------------------------

def test_collecting_last_item_clears_level():
    sim = make_sim(LAST_DOT)

    events = sim.tick(100)

    assert events == [ItemCollected(Position(2, 1), 10, ItemKind.DOT), LevelCleared(2, 1000)]
    assert sim.score == 1010
    assert sim.level == 2
    snap = sim.snapshot()
    assert snap.remaining_items == 1
    assert snap.seeker.position == Position(1, 1)
    assert snap.hold_reason == HoldReason.LEVEL_CLEAR
    assert snap.hold_remaining == FAST.level_clear_delay


def test_next_level_plays_after_the_delay():
    sim = make_sim(LAST_DOT)
    sim.tick(100)
    assert sim.tick(FAST.level_clear_delay) == []
    assert sim.snapshot().hold_reason is None

    events = sim.tick(100)
    assert events[-1] == LevelCleared(3, 1000)
    assert sim.score == 2020


def test_restart_clears_a_pending_hold():
    sim = make_sim(LAST_DOT)
    sim.tick(100)
    sim.restart()
    snap = sim.snapshot()
    assert snap.hold_reason is None
    assert snap.hold_remaining == 0
    assert snap.level == 1
    assert snap.score == 0
    assert snap.remaining_items == 1


# ---------------------------------------------------------------------------
# Observation
# ---------------------------------------------------------------------------

def test_subscribers_receive_tick_events():
    sim = make_sim(LAST_DOT)
    received = []
    sim.subscribe(received.append)

    events = sim.tick(100)

    assert received == events
    assert [e.name for e in received] == ["ItemCollected", "LevelCleared"]


def test_snapshot_is_idempotent():
    sim = make_sim(POWER_ROOM)
    sim.tick(250)
    assert sim.snapshot() == sim.snapshot()


def test_snapshot_to_dict():
    sim = make_sim(POWER_ROOM)
    data = sim.snapshot().to_dict()

    assert data["seeker"]["position"] == {"x": 1, "y": 1}
    assert data["seeker"]["direction"] == "RIGHT"
    assert data["status"] == "playing"
    assert data["hold_reason"] is None
    assert [h["mode"] for h in data["hunters"]] == ["scatter", "scatter"]
    assert data["remaining_items"] == 15


def test_seeded_runs_are_identical():
    def run(seed):
        sim = Simulation(Maze.generate(30, 20), rng=random.Random(seed))
        turns = [Direction.DOWN, Direction.RIGHT, Direction.UP, Direction.LEFT]
        frames = []
        for frame in range(600):
            if frame % 40 == 0:
                sim.queue_direction(turns[(frame // 40) % 4])
            sim.tick(16)
            frames.append(sim.snapshot())
        return frames

    assert run(42) == run(42)
