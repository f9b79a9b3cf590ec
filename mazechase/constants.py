"""
Screen dimensions, colors, font sizes, timing and scoring defaults for the
simulation, asset paths, and logging configuration.
"""

import os

CELL_SIZE = 20
GRID_COLS, GRID_ROWS = 30, 20
HUD_HEIGHT = 48
WIDTH, HEIGHT = GRID_COLS * CELL_SIZE, GRID_ROWS * CELL_SIZE + HUD_HEIGHT
FPS = 60
MAX_FRAME_MS = 100                 # longest elapsed time fed to a single tick

BG_COLOR = (0, 0, 0)
TEXT_COLOR = (235, 235, 235)
WALL_COLOR = (0, 0, 255)
DOT_COLOR = (255, 255, 0)
POWER_COLOR = (255, 255, 255)
SEEKER_COLOR = (255, 255, 0)
FRIGHTENED_COLOR = (0, 0, 255)
FRIGHTENED_FLASH_COLOR = (255, 255, 255)
HUNTER_COLORS = [
    (255, 0, 0),        # red
    (255, 105, 180),    # pink
    (0, 255, 255),      # cyan
    (255, 165, 0),      # orange
]
HUD_PADDING = 12
FONT_NAME = "freesansbold.ttf"

# Font Size Constants
FONT_SIZE_SMALL = 14
FONT_SIZE_MEDIUM = 16
FONT_SIZE_LARGE = 22

# Movement cadence (ms per grid step)
SEEKER_INTERVAL_MS = 300
HUNTER_INTERVAL_MS = 350
FRIGHTENED_SLOWDOWN = 1.5

# Hunter mode timings
SCATTER_DURATION_MS = 7000
CHASE_DURATION_MS = 20000
FRIGHTENED_DURATION_MS = 8000
RESPAWN_DELAY_MS = 3000
FRIGHTENED_RANDOM_CHANCE = 0.3
AMBUSH_LOOKAHEAD = 4
MAX_HUNTERS = 4

# Power mode
POWER_DURATION_MS = 10000
FLASH_BELOW_FRACTION = 0.3         # frightened hunters / power aura blink below this

# Scores
DOT_SCORE = 10
POWER_SCORE = 50
CAPTURE_SCORE = 200
LEVEL_BONUS = 1000

# Game Settings
INITIAL_LIVES = 3
CAUGHT_GRACE_MS = 2000
LEVEL_CLEAR_DELAY_MS = 3000
SCORE_POPUP_MS = 1000

# Log file settings
LOG_FILE = os.path.join(os.path.dirname(os.path.dirname(__file__)), "log.md")
ASSETS_DIR = os.path.join(os.path.dirname(os.path.dirname(__file__)), "assets")
MUSIC_PATH = os.path.join(ASSETS_DIR, "bg_music.mp3")
CHOMP_SFX_PATH = os.path.join(ASSETS_DIR, "chomp.wav")
CAPTURE_SFX_PATH = os.path.join(ASSETS_DIR, "capture.wav")
DEATH_SFX_PATH = os.path.join(ASSETS_DIR, "death.wav")
LEVEL_UP_SFX_PATH = os.path.join(ASSETS_DIR, "level_up.wav")
