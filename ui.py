"""HUD, pause/level-clear banners and Game Over screen"""

import pygame

from mazechase.constants import (
    HUD_PADDING, HUD_HEIGHT, TEXT_COLOR, FONT_NAME, FONT_SIZE_SMALL, SEEKER_COLOR
)
from mazechase.models import GameSnapshot, GameStatus, HoldReason


class HUD:
    """Heads-Up Display band above the maze with left/right split layout."""

    def __init__(self, font: pygame.font.Font) -> None:
        self.font = font
        self.small_font = pygame.font.Font(FONT_NAME, FONT_SIZE_SMALL)

    def draw(self, surf: pygame.Surface, snap: GameSnapshot, show_fps: bool = False,
             fps: float = 0.0, muted: bool = False) -> None:
        """Render score and items on the left, lives/level and indicators on the right."""
        current_width = surf.get_width()
        pygame.draw.rect(surf, (10, 10, 30), pygame.Rect(0, 0, current_width, HUD_HEIGHT))

        # LEFT SIDE: Score and items left
        left_x = HUD_PADDING
        score_text = self.font.render(f"Score: {snap.score}", True, TEXT_COLOR)
        surf.blit(score_text, (left_x, 6))
        items_text = self.small_font.render(f"Items left: {snap.remaining_items}", True, TEXT_COLOR)
        surf.blit(items_text, (left_x, 8 + score_text.get_height()))

        # RIGHT SIDE: Level and optional indicators
        right_stats = [f"Level: {snap.level}"]
        if show_fps:
            right_stats.append(f"FPS: {fps:.1f}")
        if muted:
            right_stats.append("MUTED")
        right_y = 6
        for line in right_stats:
            text_surf = self.small_font.render(line, True, TEXT_COLOR)
            surf.blit(text_surf, (current_width - text_surf.get_width() - HUD_PADDING, right_y))
            right_y += text_surf.get_height() + 2

        # CENTER: one seeker icon per life
        for i in range(snap.lives):
            center = (current_width // 2 - 30 + i * 22, HUD_HEIGHT // 2)
            pygame.draw.circle(surf, SEEKER_COLOR, center, 8)

        if snap.seeker.power_active:
            bar_w = int(120 * snap.seeker.power_fraction)
            pygame.draw.rect(surf, (255, 255, 255), pygame.Rect(left_x + 160, 14, 120, 8), 1)
            pygame.draw.rect(surf, (255, 255, 255), pygame.Rect(left_x + 160, 14, bar_w, 8))


class Banner:
    """Centered message over a translucent strip (pause, level clear, get ready)."""

    def __init__(self, font_big: pygame.font.Font, font_small: pygame.font.Font) -> None:
        self.font_big = font_big
        self.font_small = font_small

    def draw(self, surf: pygame.Surface, title: str, subtitle: str = "",
             color: tuple[int, int, int] = (255, 255, 100)) -> None:
        current_width = surf.get_width()
        current_height = surf.get_height()

        title_surf = self.font_big.render(title, True, color)
        text_rect = title_surf.get_rect(center=(current_width // 2, current_height // 2))
        bg_rect = text_rect.inflate(40, 50 if subtitle else 20)
        bg_surf = pygame.Surface(bg_rect.size, pygame.SRCALPHA)
        bg_surf.fill((0, 0, 0, 170))
        surf.blit(bg_surf, bg_rect)
        surf.blit(title_surf, text_rect)

        if subtitle:
            sub_surf = self.font_small.render(subtitle, True, TEXT_COLOR)
            sub_rect = sub_surf.get_rect(center=(current_width // 2, text_rect.bottom + 14))
            surf.blit(sub_surf, sub_rect)

    def draw_for(self, surf: pygame.Surface, snap: GameSnapshot) -> None:
        """Pick the banner matching the snapshot's pause/hold state, if any."""
        if snap.status == GameStatus.PAUSED:
            self.draw(surf, "PAUSED", "Press P or Space to resume")
        elif snap.hold_reason == HoldReason.LEVEL_CLEAR:
            self.draw(surf, f"LEVEL {snap.level - 1} CLEAR!", f"Score: {snap.score}")
        elif snap.hold_reason == HoldReason.CAUGHT:
            self.draw(surf, "READY!", f"Lives left: {snap.lives}", color=SEEKER_COLOR)


class GameOverScreen:
    """Game over screen with final stats and restart option."""
    def __init__(self, font_big: pygame.font.Font, font_small: pygame.font.Font):
        self.font_big = font_big
        self.font_small = font_small

    def draw(self, surf: pygame.Surface, snap: GameSnapshot) -> None:
        """
        Draw game over screen.
        """
        current_width = surf.get_width()
        current_height = surf.get_height()

        # Semi-transparent overlay
        overlay = pygame.Surface((current_width, current_height), pygame.SRCALPHA)
        overlay.fill((0, 0, 0, 180))
        surf.blit(overlay, (0, 0))

        game_over_text = self.font_big.render("GAME OVER", True, (255, 100, 100))
        title_y = max(80, int(current_height * 0.3))
        game_over_rect = game_over_text.get_rect(center=(current_width//2, title_y))
        surf.blit(game_over_text, game_over_rect)

        stats_lines = [
            f"Final Score: {snap.score}",
            f"Level reached: {snap.level}",
            f"Items left: {snap.remaining_items}",
        ]

        y_offset = title_y + 50
        for line in stats_lines:
            text_surf = self.font_small.render(line, True, TEXT_COLOR)
            text_rect = text_surf.get_rect(center=(current_width // 2, y_offset))
            surf.blit(text_surf, text_rect)
            y_offset += 30

        inst_text = self.font_small.render("Press R to restart or ESC to quit", True, (150, 150, 150))
        inst_rect = inst_text.get_rect(center=(current_width // 2, y_offset + 30))
        surf.blit(inst_text, inst_rect)
