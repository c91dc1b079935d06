"""
event_handlers.py: Maps pygame input events onto game flags and screen changes.

Handlers only set flags (jump_requested, pause) or switch screens; physics
and drawing happen in the next frame.
"""

import pygame

from .data_models import GamePhase, GameState
from .screens import ScreenController

ENTER_KEYS = (pygame.K_RETURN, pygame.K_KP_ENTER)


def request_jump(game: GameState) -> bool:
    if game.state == GamePhase.PLAYING and not game.is_game_over:
        game.jump_requested = True
        return True
    return False


def _handle_initials_key(game: GameState, event: pygame.event.Event, screens: ScreenController):
    if event.key in ENTER_KEYS:
        screens.submit_initials(game)
    elif event.key == pygame.K_ESCAPE:
        screens.skip_initials(game)
    elif event.key == pygame.K_BACKSPACE:
        screens.erase_initial()
    else:
        char = getattr(event, "unicode", "")
        if char and not char.isspace():
            screens.type_initial(char)


def _handle_key(game: GameState, event: pygame.event.Event, screens: ScreenController) -> bool:
    # The initials prompt swallows every key, including the Enter shortcut
    if screens.awaiting_initials:
        _handle_initials_key(game, event, screens)
        return True

    if event.key in ENTER_KEYS:
        if game.state in (GamePhase.TITLE, GamePhase.GAMEOVER):
            return screens.start_game(game)
        if game.state == GamePhase.INSTRUCTIONS:
            return screens.show_title_screen(game)
        return False

    if game.state == GamePhase.TITLE and event.key == pygame.K_i:
        return screens.show_instructions(game)

    if game.state == GamePhase.INSTRUCTIONS and event.key == pygame.K_ESCAPE:
        return screens.show_title_screen(game)

    if game.state == GamePhase.PLAYING:
        if event.key == pygame.K_p:
            screens.engine.toggle_pause(game)
            return True
        if event.key == pygame.K_SPACE:
            return request_jump(game)

    return False


def handle_event(game: GameState, event: pygame.event.Event, screens: ScreenController) -> bool:
    """Returns True if the event was consumed."""
    if event.type == pygame.KEYDOWN:
        return _handle_key(game, event, screens)
    if event.type in (pygame.MOUSEBUTTONDOWN, pygame.FINGERDOWN):
        return request_jump(game)
    return False
