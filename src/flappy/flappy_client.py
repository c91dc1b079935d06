#!/usr/bin/env python3
"""
flappy_client.py

Desktop client: pygame window, input pump and the frame loop feeding
the FrameScheduler.
"""

import logging
from typing import Optional

import pygame

from .audio import SoundEffects
from .event_handlers import handle_event
from .game_engine import GameEngine
from .highscores import HighScoreStore
from .renderer import Renderer
from .scaling import ScalingContext
from .scheduler import FrameCallback, FrameScheduler
from .screens import ScreenController
from .settings import Settings, get_settings
from .worldgen import populate_world

logger = logging.getLogger(__name__)


class FlappyClient:
    def __init__(self, settings: Optional[Settings] = None):
        self.settings = settings or get_settings()
        pygame.init()

        self.flags = pygame.RESIZABLE if self.settings.resizable else 0
        width, height = self.settings.window_width, self.settings.window_height
        self.screen = pygame.display.set_mode((width, height), self.flags)
        pygame.display.set_caption("Flappy")

        # --- Game Logic ---
        self.audio = SoundEffects(muted=self.settings.muted)
        self.scores = HighScoreStore(self.settings.highscore_db)
        self.engine = GameEngine(scaling=ScalingContext(width, height), audio=self.audio)
        self.game = self.engine.new_game()
        populate_world(self.game, self.engine.scaling, self.engine.rng)

        self.screens = ScreenController(self.engine, self.scores, self.audio)
        self.renderer = Renderer(self.engine.scaling, self.screens)

        # --- Frame scheduling ---
        self.clock = pygame.time.Clock()
        self._pending_frame: Optional[FrameCallback] = None
        self.scheduler = FrameScheduler(
            self.game, self.engine.tick, self.renderer.render, self.screen, self._request_frame)

    def _request_frame(self, callback: FrameCallback):
        self._pending_frame = callback

    def _resize(self, width: int, height: int):
        self.screen = pygame.display.get_surface()
        self.engine.resize(self.game, width, height)
        self.scheduler.surface = self.screen
        self.scheduler.request_render()

    def run(self):
        """The main client execution loop."""
        self.screens.show_title_screen(self.game)
        self._request_frame(self.scheduler)

        running = True
        while running:
            self.clock.tick(self.settings.fps)

            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.VIDEORESIZE:
                    self._resize(event.w, event.h)
                else:
                    handle_event(self.game, event, self.screens)

            frame, self._pending_frame = self._pending_frame, None
            if frame is None:
                break
            frame(pygame.time.get_ticks())
            pygame.display.flip()

        self.scores.close()
        pygame.quit()


def main():
    settings = get_settings()
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(name)s %(levelname)s: %(message)s",
    )
    FlappyClient(settings).run()


if __name__ == "__main__":
    main()
