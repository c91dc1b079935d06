"""
scheduler.py: Self re-arming frame callback driving tick and render.
"""

from typing import Any, Callable, Optional

from .data_models import GameState

FrameCallback = Callable[[float], None]


class FrameScheduler:
    """
    Called once per frame with a millisecond timestamp.

    Each call ticks the game by the elapsed time, renders when the game is
    running (or pause just toggled, or a render was requested) and then
    re-registers itself through ``request_frame``.
    """

    def __init__(
        self,
        game: GameState,
        tick: Callable[[GameState, float], None],
        render: Callable[[GameState, Any], None],
        surface: Any,
        request_frame: Callable[[FrameCallback], None],
    ):
        self.game = game
        self.tick = tick
        self.render = render
        self.surface = surface
        self.request_frame = request_frame

        self.last_timestamp: Optional[float] = None
        self.needs_render = True
        self.last_pause = False

    def request_render(self):
        """Forces one render on the next frame, even while paused."""
        self.needs_render = True

    def __call__(self, timestamp: float):
        last = self.last_timestamp if self.last_timestamp is not None else timestamp
        elapsed = (timestamp - last) / 1000.0

        pause_changed = self.game.pause != self.last_pause
        self.last_pause = self.game.pause

        self.tick(self.game, elapsed)

        if not self.game.pause or pause_changed or self.needs_render:
            self.render(self.game, self.surface)
            self.needs_render = False

        self.last_timestamp = timestamp
        self.request_frame(self)
