# controls.py
from __future__ import annotations
from enum import Enum
from typing import Optional, Set, Tuple, Union

import pygame  # type: ignore

from .config import DOWN, LEFT, RIGHT, UP


class Command(Enum):
    START = "start"
    PAUSE = "pause"
    TOGGLE_MODE = "toggle-mode"
    MENU = "menu"
    QUIT = "quit"


Intent = Union[Tuple[int, int], Command]

KEY_DIRECTIONS = {
    pygame.K_UP: UP,    pygame.K_w: UP,
    pygame.K_DOWN: DOWN, pygame.K_s: DOWN,
    pygame.K_LEFT: LEFT, pygame.K_a: LEFT,
    pygame.K_RIGHT: RIGHT, pygame.K_d: RIGHT,
}

KEY_COMMANDS = {
    pygame.K_RETURN: Command.START,
    pygame.K_KP_ENTER: Command.START,
    pygame.K_p: Command.PAUSE,
    pygame.K_m: Command.TOGGLE_MODE,
    pygame.K_ESCAPE: Command.MENU,
}


class InputRouter:
    """Turns key events into direction intents or session commands.

    Only the first key-down of a press counts; auto-repeat while the key is
    held is dropped until the matching key-up arrives.
    """

    def __init__(self) -> None:
        self.held: Set[int] = set()

    def key_down(self, key: int) -> Optional[Intent]:
        if key in self.held:
            return None
        self.held.add(key)
        if key in KEY_DIRECTIONS:
            return KEY_DIRECTIONS[key]
        return KEY_COMMANDS.get(key)

    def key_up(self, key: int) -> None:
        self.held.discard(key)

    def route(self, event) -> Optional[Intent]:
        if event.type == pygame.QUIT:
            return Command.QUIT
        if event.type == pygame.KEYDOWN:
            return self.key_down(event.key)
        if event.type == pygame.KEYUP:
            self.key_up(event.key)
        elif event.type == pygame.WINDOWFOCUSLOST:
            # key-ups get lost with the focus
            self.held.clear()
        return None
