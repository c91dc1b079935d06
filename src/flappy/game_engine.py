"""
game_engine.py: The authoritative single-player simulation.

Owns the ScalingContext and mutates the one GameState passed to it:
pipe buffer, scoring, state flags and the per-frame tick.
"""

import logging
import math
import random
from dataclasses import dataclass, field
from typing import Any, Callable, List, Optional, Protocol

from .constants import (
    HERO_START_X, HERO_START_Y, HOLE_HEIGHT_FACTOR, MAX_HOLE_ATTEMPTS,
    PIPE_BUF, PIPE_PAD, PIPE_START_X, PIPE_WID, TOP
)
from .data_models import GamePhase, GameState, Hero, Pipe, Size, Vector2
from .physics_core import PhysicsCore, collides, is_out_of_bounds
from .worldgen import populate_world, update_world

logger = logging.getLogger(__name__)

GameOverListener = Callable[[GameState], None]


class SoundPlayer(Protocol):
    """The two sounds the simulation triggers."""

    def play_bounce_sound(self) -> None: ...

    def play_game_over_sound(self) -> None: ...


@dataclass
class GameEngine(PhysicsCore):
    """
    The simulation core. Inherits hero physics from PhysicsCore.
    """
    audio: Optional[SoundPlayer] = None
    rng: Any = random
    _game_over_listeners: List[GameOverListener] = field(default_factory=list, init=False, repr=False)

    def add_game_over_listener(self, callback: GameOverListener):
        self._game_over_listeners.append(callback)

    # ---------- Lifecycle ----------

    def _place_hero(self, hero: Hero):
        hero.pos = Vector2(HERO_START_X * self.scaling.scale_x, HERO_START_Y * self.scaling.scale_y)
        hero.size = self.scaling.hero_size()
        hero.vel = Vector2(self.scaled_hero_speed, 0)

    def new_game(self) -> GameState:
        """A fresh game on the title screen. World arrays are left for the caller."""
        hero = Hero()
        self._place_hero(hero)
        return GameState(hero=hero)

    def reset_game_state(self, game: GameState) -> GameState:
        """Soft reset for a new play; keeps the object identity."""
        game.state = GamePhase.PLAYING
        game.is_game_over = False
        game.pause = False
        game.jump_requested = False
        game.score = 0
        game.pipes = []
        game.last_hole = None
        self._place_hero(game.hero)
        populate_world(game, self.scaling, self.rng)
        return game

    def set_game_over(self, game: GameState) -> GameState:
        game.is_game_over = True
        game.state = GamePhase.GAMEOVER
        return game

    def toggle_pause(self, game: GameState) -> bool:
        if game.state == GamePhase.PLAYING:
            game.pause = not game.pause
        return game.pause

    def process_jump(self, game: GameState) -> bool:
        if not game.is_game_over and game.state == GamePhase.PLAYING and not game.pause:
            self.flap(game.hero)
            return True
        return False

    # ---------- Collisions ----------

    def is_game_over(self, game: GameState) -> bool:
        if is_out_of_bounds(game.hero, self.scaling.bottom):
            return True
        return any(collides(game.hero, pipe) for pipe in game.pipes)

    # ---------- Pipes ----------

    def new_pipes(self, game: GameState) -> List[Pipe]:
        """Generates one top/bottom pair after the last pipe in the buffer."""
        pipe_width = PIPE_WID * self.scaling.scale_x
        pipe_pad = PIPE_PAD * self.scaling.scale_x
        hole_height = game.hero.size.height * HOLE_HEIGHT_FACTOR

        min_hole = hole_height
        max_hole = self.scaling.bottom - hole_height

        # Avoid repeating the previous gap, but never loop forever
        attempts = 0
        while True:
            hole = math.floor(self.rng.random() * (max_hole - min_hole)) + min_hole
            attempts += 1
            if (game.last_hole is None
                    or abs(hole - game.last_hole) >= hole_height * 0.5
                    or attempts >= MAX_HOLE_ATTEMPTS):
                break
        game.last_hole = hole

        min_x = game.hero.pos.x + PIPE_START_X * self.scaling.scale_x
        x = game.pipes[-1].pos.x + pipe_pad if game.pipes else min_x
        x = max(x, min_x)

        half = hole_height / 2
        top = Pipe(
            pos=Vector2(x, TOP),
            size=Size(pipe_width, hole - half),
        )
        bottom = Pipe(
            pos=Vector2(x, hole + half),
            size=Size(pipe_width, self.scaling.bottom - (hole + half)),
        )
        return [top, bottom]

    def cleanup_pipes(self, game: GameState):
        """Drops pipes from the front once they are behind the hero."""
        hero = game.hero
        while game.pipes and game.pipes[0].pos.x + game.pipes[0].size.width < hero.pos.x - hero.size.width:
            del game.pipes[0]

    def add_pipes(self, game: GameState):
        while len(game.pipes) < PIPE_BUF:
            game.pipes.extend(self.new_pipes(game))

    def check_score(self, game: GameState):
        hero_right = game.hero.pos.x + game.hero.size.width

        for i in range(0, len(game.pipes), 2):
            top = game.pipes[i]
            bottom = game.pipes[i + 1] if i + 1 < len(game.pipes) else None

            if not top.passed and hero_right > top.pos.x + top.size.width:
                top.passed = True
                if bottom is not None:
                    bottom.passed = True
                game.score += 1

    def handle_pipes(self, game: GameState):
        self.cleanup_pipes(game)
        self.add_pipes(game)
        self.check_score(game)

    # ---------- Resize ----------

    def resize(self, game: GameState, width: float, height: float):
        """Rescales the world to a new viewport size. Empty viewports are ignored."""
        if width <= 0 or height <= 0:
            logger.debug(f"Ignoring resize to {width}x{height}")
            return

        old_scale_x = self.scaling.scale_x
        old_scale_y = self.scaling.scale_y
        self.scaling.update(width, height)
        ratio_x = self.scaling.scale_x / old_scale_x
        ratio_y = self.scaling.scale_y / old_scale_y
        logger.debug(f"Resized to {width}x{height} (ratio {ratio_x:.3f}, {ratio_y:.3f})")

        game.hero.size = self.scaling.hero_size()
        game.hero.vel.x = self.scaled_hero_speed

        for pipe in game.pipes:
            pipe.pos.x *= ratio_x
            pipe.pos.y *= ratio_y
            pipe.size.width *= ratio_x
            pipe.size.height *= ratio_y

        populate_world(game, self.scaling, self.rng)

    # ---------- Tick ----------

    def _emit_game_over(self, game: GameState):
        logger.info(f"Game over with score {game.score}")
        if self.audio is not None:
            self.audio.play_game_over_sound()
        for listener in self._game_over_listeners:
            listener(game)

    def tick(self, game: GameState, delta: float):
        """
        Advances the game by delta seconds.

        The background scrolls first (it freezes itself outside active
        play). No physics runs on the frame a collision is first found.
        """
        update_world(game, delta, self.scaling, self.rng)

        if game.state != GamePhase.PLAYING:
            return
        if game.pause or game.is_game_over:
            return
        if self.is_game_over(game):
            game.is_game_over = True
            self._emit_game_over(game)
            return

        if game.jump_requested:
            self.flap(game.hero)
            if self.audio is not None:
                self.audio.play_bounce_sound()
            game.jump_requested = False

        self.integrate(game.hero, delta)
        self.handle_pipes(game)
