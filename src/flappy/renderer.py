"""
renderer.py: Draws the game state and overlays onto a pygame surface.

Rendering only reads the game; it can be called any number of times.
"""

import math
from typing import Dict, Optional, Tuple

import pygame

from .constants import RENDER_X
from .data_models import Building, Cloud, GamePhase, GameState, Hero, Pipe
from .scaling import ScalingContext
from .screens import ScreenController

SKY_TOP = (110, 180, 235)
SKY_BOTTOM = (200, 230, 250)
WHITE = (255, 255, 255)
HERO_SHADOW = (0, 0, 0, 51)
PIPE_SHADOW = (0, 0, 0, 76)
PIPE_BODY = (50, 205, 50)
PIPE_DARK = (0, 100, 0)
PIPE_CAP = (60, 179, 113)
HERO_BODY = (255, 213, 79)
HERO_OUTLINE = (255, 143, 0)
BEAK = (255, 112, 67)
WINDOW_LIGHT = (255, 236, 150)
HIGHLIGHT = (0, 255, 0)
OVERLAY = (0, 0, 0, 150)

MAX_UP_TILT = -0.5
MAX_DOWN_TILT = 0.8
TILT_VELOCITY = 300


def hero_tilt(hero: Hero) -> float:
    """Rotation in radians; positive tilts the nose down."""
    return max(MAX_UP_TILT, min(MAX_DOWN_TILT, hero.vel.y / TILT_VELOCITY * MAX_DOWN_TILT))


class Renderer:
    def __init__(self, scaling: ScalingContext, screens: Optional[ScreenController] = None):
        self.scaling = scaling
        self.screens = screens
        self._fonts: Dict[int, pygame.font.Font] = {}
        if not pygame.font.get_init():
            pygame.font.init()

    def _font(self, base_size: int) -> pygame.font.Font:
        size = max(8, int(base_size * self.scaling.min_scale))
        if size not in self._fonts:
            self._fonts[size] = pygame.font.Font(None, size)
        return self._fonts[size]

    def render(self, game: GameState, surface: pygame.Surface):
        self._draw_sky(surface)

        for building in game.skyline:
            self._draw_building(surface, building)
        for cloud in game.clouds:
            self._draw_cloud(surface, cloud)

        if game.state == GamePhase.PLAYING:
            self._draw_hero(surface, game.hero)
            for pipe in game.pipes:
                self._draw_pipe(surface, pipe, game.hero.pos.x)
            self._draw_score(surface, game.score)
            if game.pause:
                self._draw_banner(surface, "PAUSED", "Press P to resume")

        # Foreground clouds sit on top of everything in the world
        for cloud in game.foreground_clouds:
            self._draw_cloud(surface, cloud)

        self._draw_overlay(surface, game)

    # ---------- World ----------

    def _draw_sky(self, surface: pygame.Surface):
        height = surface.get_height()
        width = surface.get_width()
        for y in range(height):
            t = y / max(1, height - 1)
            color = tuple(int(a + (b - a) * t) for a, b in zip(SKY_TOP, SKY_BOTTOM))
            pygame.draw.line(surface, color, (0, y), (width, y))

    def _draw_building(self, surface: pygame.Surface, building: Building):
        x, y = building.pos.x, building.pos.y
        w, h = building.size.width, building.size.height
        rect = pygame.Rect(int(x), int(y), max(1, int(w)), max(1, int(h)))
        pygame.draw.rect(surface, pygame.Color(building.color), rect)

        sx, sy = self.scaling.scale_x, self.scaling.scale_y
        if building.windows and w > 20 * sx:
            win_w = max(2, int(4 * sx))
            win_h = max(2, int(5 * sy))
            step_x = max(win_w * 2, int(10 * sx))
            step_y = max(win_h * 2, int(12 * sy))
            for wy in range(int(y + 6 * sy), int(y + h - win_h), step_y):
                for wx in range(int(x + 5 * sx), int(x + w - win_w), step_x):
                    pygame.draw.rect(surface, WINDOW_LIGHT, (wx, wy, win_w, win_h))

        if building.antenna:
            top = (int(x + w / 2), int(y - 15 * sy))
            pygame.draw.line(surface, pygame.Color(building.color), (top[0], int(y)), top, max(1, int(sx)))

    def _draw_cloud(self, surface: pygame.Surface, cloud: Cloud):
        size = max(1.0, cloud.size)
        span_w = int(size * cloud.stretch * 2) + 2
        span_h = int(size * cloud.puffiness * 1.5) + 2
        puff = pygame.Surface((span_w * 2, span_h * 2), pygame.SRCALPHA)

        color = pygame.Color(cloud.color)
        color.a = int(255 * cloud.opacity)
        cx, cy = span_w, span_h
        radius = max(1, int(size * cloud.puffiness * 0.6))
        offsets = ((-0.6, 0.1), (0.0, -0.2), (0.6, 0.1), (-0.25, 0.25), (0.3, 0.25))
        for dx, dy in offsets:
            pygame.draw.circle(puff, color,
                               (int(cx + dx * size * cloud.stretch), int(cy + dy * size)),
                               radius)

        surface.blit(puff, (int(cloud.pos.x - cx), int(cloud.pos.y - cy)))

    def _shade(self, surface: pygame.Surface, rect):
        rect = pygame.Rect(rect)
        if rect.width <= 0 or rect.height <= 0:
            return
        shade = pygame.Surface(rect.size, pygame.SRCALPHA)
        shade.fill(PIPE_SHADOW)
        surface.blit(shade, rect.topleft)

    def _draw_pipe(self, surface: pygame.Surface, pipe: Pipe, hero_x: float):
        x = pipe.pos.x - (hero_x - RENDER_X * self.scaling.scale_x)
        y = pipe.pos.y
        w = pipe.size.width
        h = pipe.size.height

        is_top = y == 0
        draw_y = 0 if is_top else y
        draw_h = y + h if is_top else surface.get_height() - y
        if draw_h <= 0 or x + w < 0 or x > surface.get_width():
            return

        self._shade(surface, (x + 3, draw_y + 2, w - 4, draw_h))
        pygame.draw.rect(surface, PIPE_BODY, (int(x + 2), int(draw_y), int(w - 4), int(draw_h)))
        for i in range(3):
            line_x = int(x + w * (0.25 + i * 0.25))
            pygame.draw.line(surface, PIPE_DARK, (line_x, int(draw_y)), (line_x, int(draw_y + draw_h)))

        cap_h = min(25, h * 0.25)
        cap_y = y + h - cap_h if is_top else y
        cap = pygame.Rect(int(x - 4), int(cap_y), int(w + 8), max(1, int(cap_h)))
        self._shade(surface, cap.move(2, 2))
        pygame.draw.rect(surface, PIPE_CAP, cap)
        pygame.draw.rect(surface, PIPE_DARK, cap, 2)

    def _draw_hero(self, surface: pygame.Surface, hero: Hero):
        w = max(2, int(hero.size.width))
        h = max(2, int(hero.size.height))
        radius = min(w, h) // 2
        sprite = pygame.Surface((w * 2, h * 2), pygame.SRCALPHA)
        cx, cy = w, h

        pygame.draw.circle(sprite, HERO_SHADOW, (cx + 3, cy + 3), int(radius * 1.1))
        pygame.draw.circle(sprite, HERO_BODY, (cx, cy), radius)
        pygame.draw.circle(sprite, HERO_OUTLINE, (cx, cy), radius, 2)
        pygame.draw.polygon(sprite, BEAK, [
            (cx + radius * 0.6, cy - radius * 0.15),
            (cx + radius * 1.1, cy),
            (cx + radius * 0.6, cy + radius * 0.15),
        ])
        eye = (int(cx + radius * 0.2), int(cy - radius * 0.25))
        pygame.draw.circle(sprite, WHITE, eye, max(1, int(radius * 0.25)))
        pygame.draw.circle(sprite, (0, 0, 0), eye, max(1, int(radius * 0.1)))

        # pygame rotates counter-clockwise
        rotated = pygame.transform.rotate(sprite, -math.degrees(hero_tilt(hero)))
        center = (RENDER_X * self.scaling.scale_x + hero.size.width / 2,
                  hero.pos.y + hero.size.height / 2)
        surface.blit(rotated, rotated.get_rect(center=(int(center[0]), int(center[1]))))

    # ---------- HUD and overlays ----------

    def _text(self, surface: pygame.Surface, text: str, base_size: int,
              center: Tuple[float, float], color=WHITE):
        rendered = self._font(base_size).render(text, True, color)
        surface.blit(rendered, rendered.get_rect(center=(int(center[0]), int(center[1]))))

    def _draw_score(self, surface: pygame.Surface, score: int):
        rendered = self._font(48).render(str(score), True, WHITE)
        margin = int(20 * self.scaling.min_scale)
        surface.blit(rendered, (surface.get_width() - rendered.get_width() - margin, margin))

    def _dim(self, surface: pygame.Surface):
        shade = pygame.Surface(surface.get_size(), pygame.SRCALPHA)
        shade.fill(OVERLAY)
        surface.blit(shade, (0, 0))

    def _draw_banner(self, surface: pygame.Surface, title: str, subtitle: str):
        cx, cy = surface.get_width() / 2, surface.get_height() / 2
        self._text(surface, title, 32, (cx, cy - 12 * self.scaling.min_scale))
        self._text(surface, subtitle, 14, (cx, cy + 12 * self.scaling.min_scale))

    def _draw_overlay(self, surface: pygame.Surface, game: GameState):
        if game.state == GamePhase.PLAYING:
            return

        self._dim(surface)
        cx = surface.get_width() / 2
        row = 18 * self.scaling.scale_y
        top = surface.get_height() * 0.15

        if game.state == GamePhase.TITLE:
            self._text(surface, "FLAPPY", 48, (cx, top + row))
            if self.screens is not None:
                best = self.screens.top_score
                self._text(surface, f"High score {best.score} {best.initials}", 16, (cx, top + row * 3))
            self._text(surface, "ENTER to start   I for instructions", 16, (cx, top + row * 5))

        elif game.state == GamePhase.INSTRUCTIONS:
            self._text(surface, "How to play", 24, (cx, top))
            lines = (
                "SPACE, click or tap to flap",
                "Fly through the gaps between the pipes",
                "P pauses the game",
                "ESC or ENTER to go back",
            )
            for i, line in enumerate(lines):
                self._text(surface, line, 16, (cx, top + row * (i + 2)))

        elif game.state == GamePhase.GAMEOVER:
            self._draw_game_over(surface, game, cx, top, row)

    def _draw_game_over(self, surface: pygame.Surface, game: GameState, cx: float, top: float, row: float):
        self._text(surface, "GAME OVER", 28, (cx, top))
        self._text(surface, f"Score {game.score}", 18, (cx, top + row * 1.5))
        if self.screens is None:
            return

        if self.screens.awaiting_initials:
            self._text(surface, "New high score!", 18, (cx, top + row * 3), HIGHLIGHT)
            self._text(surface, "Enter your initials", 16, (cx, top + row * 4))
            self._text(surface, (self.screens.initials_buffer or "") + "_", 24, (cx, top + row * 5.5))
            self._text(surface, "ENTER to save   ESC to skip", 14, (cx, top + row * 7))
            return

        self._text(surface, "High Scores", 14, (cx, top + row * 3))
        for i, entry in enumerate(self.screens.scoreboard):
            color = HIGHLIGHT if entry.highlighted else WHITE
            if entry.ellipsis:
                text = "..."
            else:
                text = f"{entry.score} - {entry.initials}" + (" <" if entry.highlighted else "")
            self._text(surface, text, 12, (cx, top + row * (4 + i * 0.8)), color)
        self._text(surface, "ENTER to play again", 16, (cx, surface.get_height() - row * 2))
