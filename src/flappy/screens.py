"""
screens.py: Screen flow between title, instructions, play and game over.

States:
    TITLE: Title overlay with the best score
    INSTRUCTIONS: Help overlay
    PLAYING: No overlay, simulation running
    GAMEOVER: Game over overlay, optionally prompting for initials
"""

import logging
from typing import List, Optional

from .audio import SoundEffects
from .constants import DEFAULT_INITIALS, MAX_INITIALS
from .data_models import GamePhase, GameState, HighScore
from .game_engine import GameEngine
from .highscores import HighScoreStore, ScoreRow

logger = logging.getLogger(__name__)


class ScreenController:
    """
    Applies screen transitions to the game and tracks what the overlays show.

    Only the transitions listed in VALID_TRANSITIONS are performed; anything
    else is logged and refused.
    """

    VALID_TRANSITIONS = {
        (GamePhase.TITLE, GamePhase.INSTRUCTIONS),
        (GamePhase.INSTRUCTIONS, GamePhase.TITLE),
        (GamePhase.TITLE, GamePhase.PLAYING),
        (GamePhase.GAMEOVER, GamePhase.PLAYING),
        (GamePhase.PLAYING, GamePhase.GAMEOVER),
        (GamePhase.PLAYING, GamePhase.TITLE),
        (GamePhase.GAMEOVER, GamePhase.TITLE),
    }

    def __init__(
        self,
        engine: GameEngine,
        scores: HighScoreStore,
        audio: Optional[SoundEffects] = None,
    ):
        self.engine = engine
        self.scores = scores
        self.audio = audio

        self.top_score: HighScore = scores.get_top_score()
        self.scoreboard: List[ScoreRow] = []
        self.new_high_score = False
        self.awaiting_initials = False
        self.initials_buffer = ""

        engine.add_game_over_listener(self.show_game_over)

    def can_transition(self, game: GameState, to_state: GamePhase) -> bool:
        # Re-entering play would soft-reset a running game
        if game.state == to_state:
            return to_state != GamePhase.PLAYING
        return (game.state, to_state) in self.VALID_TRANSITIONS

    def _transition(self, game: GameState, to_state: GamePhase) -> bool:
        if not self.can_transition(game, to_state):
            logger.warning(f"Invalid transition: {game.state.value} -> {to_state.value}")
            return False
        if game.state != to_state:
            logger.info(f"Screen transition: {game.state.value} -> {to_state.value}")
        game.state = to_state
        return True

    def show_title_screen(self, game: GameState) -> bool:
        if not self._transition(game, GamePhase.TITLE):
            return False
        self.awaiting_initials = False
        self.top_score = self.scores.get_top_score()
        return True

    def show_instructions(self, game: GameState) -> bool:
        return self._transition(game, GamePhase.INSTRUCTIONS)

    def show_game_over(self, game: GameState) -> bool:
        if not self._transition(game, GamePhase.GAMEOVER):
            return False
        game.is_game_over = True

        self.new_high_score = self.scores.is_new_high_score(game.score)
        if self.new_high_score:
            self.awaiting_initials = True
            self.initials_buffer = ""
        else:
            self.awaiting_initials = False
            self.top_score = self.scores.get_top_score()
        self.scoreboard = self.scores.scoreboard(game.score, "")
        return True

    def start_game(self, game: GameState) -> bool:
        """Full soft reset into play from the title or game over screen."""
        if not self._transition(game, GamePhase.PLAYING):
            return False
        self.engine.reset_game_state(game)
        self.awaiting_initials = False
        self.new_high_score = False
        if self.audio is not None:
            self.audio.init_audio()
        return True

    # ---------- Initials prompt ----------

    def type_initial(self, char: str):
        if self.awaiting_initials and char.isprintable() and len(self.initials_buffer) < MAX_INITIALS:
            self.initials_buffer += char.upper()

    def erase_initial(self):
        if self.awaiting_initials:
            self.initials_buffer = self.initials_buffer[:-1]

    def submit_initials(self, game: GameState, initials: Optional[str] = None):
        if not self.awaiting_initials:
            return
        if initials is None:
            initials = self.initials_buffer
        initials = initials.strip()[:MAX_INITIALS] or DEFAULT_INITIALS

        self.awaiting_initials = False
        self.scores.save_high_score(game.score, initials)
        self.top_score = self.scores.get_top_score()
        self.scoreboard = self.scores.scoreboard(game.score, initials)

    def skip_initials(self, game: GameState):
        self.submit_initials(game, DEFAULT_INITIALS)
