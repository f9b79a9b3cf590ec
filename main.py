"""Game entry point"""

from __future__ import annotations

import math
import os
import pygame

from mazechase.constants import *
from mazechase.config import SimulationConfig
from mazechase.events import (
    GameEvent, GhostCaptured, ItemCollected, LevelCleared, LivesExhausted, SeekerCaught
)
from mazechase.logger import GameLogger
from mazechase.maze import Maze
from mazechase.models import Direction, GameSnapshot, GameStatus, HunterMode, ItemKind, Position
from mazechase.simulation import Simulation
from ui import HUD, Banner, GameOverScreen

KEY_DIRECTIONS = {
    pygame.K_UP: Direction.UP, pygame.K_w: Direction.UP,
    pygame.K_DOWN: Direction.DOWN, pygame.K_s: Direction.DOWN,
    pygame.K_LEFT: Direction.LEFT, pygame.K_a: Direction.LEFT,
    pygame.K_RIGHT: Direction.RIGHT, pygame.K_d: Direction.RIGHT,
}

MOUTH_ANGLES = {
    Direction.RIGHT: 0.0,
    Direction.DOWN: math.pi / 2,
    Direction.LEFT: math.pi,
    Direction.UP: -math.pi / 2,
}


class Game:
    """
    Main game controller: owns the pygame window, feeds elapsed frame time to
    the simulation, maps keys to turn requests, and draws the frame.
    """

    def __init__(self) -> None:
        """Initialize subsystems, build the maze and simulation, and load assets."""
        pygame.init()
        pygame.display.set_caption("Maze Chase")

        self.screen = pygame.display.set_mode((WIDTH, HEIGHT))
        self.clock = pygame.time.Clock()
        self.font_small = pygame.font.Font(FONT_NAME, FONT_SIZE_MEDIUM)
        self.font_big = pygame.font.Font(FONT_NAME, FONT_SIZE_LARGE)

        self.maze = Maze.generate(GRID_COLS, GRID_ROWS)
        self.sim = Simulation(self.maze, SimulationConfig())
        self.logger = GameLogger(LOG_FILE)
        self.sim.subscribe(self.on_event)

        self.show_fps = False
        self.fps_samples = []
        self.game_time = 0              # Pause-aware time fed to the simulation (in ms)
        self.mouth_open = True
        self.mouth_timer = 0
        self.score_popups = []          # Floating "+points" texts for captures

        # Audio
        self.sfx_volume = 0.7
        self.muted = False
        self.sounds: dict[str, pygame.mixer.Sound | None] = {}
        self.init_audio()

        self.hud = HUD(self.font_small)
        self.banner = Banner(self.font_big, self.font_small)
        self.game_over_screen = GameOverScreen(self.font_big, self.font_small)

    # --------------------------------- Setup ----------------------------------------

    def init_audio(self) -> None:
        """
        Initialize audio & load optional sound effects.
        """
        try:
            pygame.mixer.init(frequency=22050, size=-16, channels=2, buffer=512)
        except Exception as e:
            print(f"Audio unavailable: {e}")
            return

        if os.path.exists(MUSIC_PATH):
            try:
                pygame.mixer.music.load(MUSIC_PATH)
                pygame.mixer.music.set_volume(0.5)
                pygame.mixer.music.play(-1)
            except Exception as e:
                print(f"Failed to load background music: {e}")

        for name, path in [("chomp", CHOMP_SFX_PATH), ("capture", CAPTURE_SFX_PATH),
                           ("death", DEATH_SFX_PATH), ("level_up", LEVEL_UP_SFX_PATH)]:
            self.sounds[name] = None
            if not os.path.exists(path):
                print(f"Sound effect file not found: {path}")
                continue
            try:
                sound = pygame.mixer.Sound(path)
                sound.set_volume(self.sfx_volume)
                self.sounds[name] = sound
            except Exception as e:
                print(f"Failed to load {name} sound effect: {e}")

    def play(self, name: str) -> None:
        sound = self.sounds.get(name)
        if sound and not self.muted:
            sound.play()

    # --------------------------------- Events ---------------------------------------

    def on_event(self, event: GameEvent) -> None:
        """Simulation listener: log every event and drive sound/visual feedback."""
        self.logger.log_event(event, self.game_time)

        if isinstance(event, ItemCollected):
            self.play("chomp")
        elif isinstance(event, GhostCaptured):
            self.play("capture")
            self.score_popups.append({'pos': event.position, 'points': event.points, 'age': 0})
        elif isinstance(event, SeekerCaught):
            self.play("death")
        elif isinstance(event, LevelCleared):
            self.play("level_up")
            self.logger.log_level_up(event.level)
        elif isinstance(event, LivesExhausted):
            self.logger.log_game_over(event.score)

    # --------------------------------- Loop -----------------------------------------

    def run(self) -> None:
        """Main game loop: process events, tick the simulation, render; exits on quit request."""
        running = True
        while running:
            elapsed = self.clock.tick(FPS)

            current_fps = self.clock.get_fps()
            self.fps_samples.append(current_fps)
            if len(self.fps_samples) > 10:
                self.fps_samples.pop(0)
            avg_fps = sum(self.fps_samples) / len(self.fps_samples) if self.fps_samples else 0

            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.KEYDOWN:
                    if event.key == pygame.K_ESCAPE:
                        running = False
                    elif event.key in KEY_DIRECTIONS:
                        self.sim.queue_direction(KEY_DIRECTIONS[event.key])
                    elif event.key in (pygame.K_p, pygame.K_SPACE):
                        self.sim.toggle_pause()
                    elif event.key == pygame.K_r:
                        self.restart()
                    elif event.key == pygame.K_m:
                        self.toggle_mute()
                    elif event.key == pygame.K_f:
                        self.show_fps = not self.show_fps

            # Long stalls (window drag, breakpoint) are clamped so entities never jump
            step_ms = min(elapsed, MAX_FRAME_MS)
            if self.sim.status == GameStatus.PLAYING:
                self.game_time += step_ms
                self.update_animation(step_ms)
            self.sim.tick(step_ms)
            self.update_score_popups(elapsed)

            self.draw(avg_fps)

        pygame.quit()

    def restart(self) -> None:
        self.sim.restart()
        self.score_popups.clear()
        self.logger.setup_log()
        self.game_time = 0

    def toggle_mute(self) -> None:
        self.muted = not self.muted
        if pygame.mixer.get_init():
            pygame.mixer.music.set_volume(0.0 if self.muted else 0.5)

    def update_animation(self, elapsed: int) -> None:
        """Open/close the seeker's mouth every 500ms."""
        self.mouth_timer += elapsed
        if self.mouth_timer >= 500:
            self.mouth_open = not self.mouth_open
            self.mouth_timer = 0

    def update_score_popups(self, elapsed: int) -> None:
        for popup in self.score_popups[:]:
            popup['age'] += elapsed
            if popup['age'] >= SCORE_POPUP_MS:
                self.score_popups.remove(popup)

    # --------------------------------- Rendering ------------------------------------

    @staticmethod
    def cell_center(pos: Position) -> tuple[int, int]:
        return (pos.x * CELL_SIZE + CELL_SIZE // 2,
                HUD_HEIGHT + pos.y * CELL_SIZE + CELL_SIZE // 2)

    def blinking(self) -> bool:
        return (pygame.time.get_ticks() // 200) % 2 == 0

    def draw_maze(self, surf: pygame.Surface) -> None:
        for y in range(self.maze.rows):
            for x in range(self.maze.cols):
                if not self.maze.is_walkable(Position(x, y)):
                    rect = pygame.Rect(x * CELL_SIZE, HUD_HEIGHT + y * CELL_SIZE, CELL_SIZE, CELL_SIZE)
                    pygame.draw.rect(surf, WALL_COLOR, rect)

        for pos, kind in self.maze.items().items():
            if kind == ItemKind.POWER:
                pygame.draw.circle(surf, POWER_COLOR, self.cell_center(pos), 8)
            else:
                pygame.draw.circle(surf, DOT_COLOR, self.cell_center(pos), 3)

    def draw_seeker(self, surf: pygame.Surface, snap: GameSnapshot) -> None:
        seeker = snap.seeker
        cx, cy = self.cell_center(seeker.position)
        radius = CELL_SIZE // 2 - 2

        pygame.draw.circle(surf, (255, 255, 255) if seeker.power_active else SEEKER_COLOR, (cx, cy), radius)

        if self.mouth_open:
            angle = MOUTH_ANGLES[seeker.direction]
            points = [(cx, cy)]
            for step in range(-4, 5):
                a = angle + step * (math.pi / 16)
                points.append((cx + radius * math.cos(a), cy + radius * math.sin(a)))
            pygame.draw.polygon(surf, BG_COLOR, points)

        # Aura while powered; blinks out when about to expire
        if seeker.power_active and not (seeker.power_fraction < FLASH_BELOW_FRACTION and self.blinking()):
            pygame.draw.circle(surf, (255, 255, 0), (cx, cy), CELL_SIZE // 2 + 5, 3)

    def draw_hunters(self, surf: pygame.Surface, snap: GameSnapshot) -> None:
        size = CELL_SIZE - 4
        for hunter in snap.hunters:
            if hunter.mode == HunterMode.EATEN:
                continue
            cx, cy = self.cell_center(hunter.position)

            color = HUNTER_COLORS[hunter.identity % len(HUNTER_COLORS)]
            if hunter.mode == HunterMode.FRIGHTENED:
                if hunter.frightened_fraction < FLASH_BELOW_FRACTION and self.blinking():
                    color = FRIGHTENED_FLASH_COLOR
                else:
                    color = FRIGHTENED_COLOR
            pygame.draw.rect(surf, color, pygame.Rect(cx - size // 2, cy - size // 2, size, size))

            # Eyes look along the heading
            dx, dy = hunter.direction.delta
            for ex in (cx - 4, cx + 4):
                pygame.draw.rect(surf, (255, 255, 255), pygame.Rect(ex - 2, cy - 5, 4, 4))
                pygame.draw.rect(surf, (0, 0, 0), pygame.Rect(ex - 1 + dx, cy - 4 + dy, 2, 2))

    def draw_score_popups(self, surf: pygame.Surface) -> None:
        for popup in self.score_popups:
            progress = popup['age'] / SCORE_POPUP_MS
            cx, cy = self.cell_center(popup['pos'])
            text = self.font_small.render(f"+{popup['points']}", True, (255, 255, 0))
            text.set_alpha(int(255 * (1.0 - progress)))
            surf.blit(text, text.get_rect(center=(cx, cy - int(progress * 30))))

    def draw(self, fps: float) -> None:
        """
        Compose the frame: maze → seeker → hunters → popups → HUD → overlays.

        Parameters
        ----------
        fps : float
            Current frames per second for display
        """
        snap = self.sim.snapshot()
        self.screen.fill(BG_COLOR)

        self.draw_maze(self.screen)
        self.draw_seeker(self.screen, snap)
        self.draw_hunters(self.screen, snap)
        self.draw_score_popups(self.screen)

        self.hud.draw(self.screen, snap, self.show_fps, fps, self.muted)

        if snap.status == GameStatus.GAME_OVER:
            self.game_over_screen.draw(self.screen, snap)
        else:
            self.banner.draw_for(self.screen, snap)

        pygame.display.flip()


def main() -> None:
    Game().run()


if __name__ == "__main__":
    main()
