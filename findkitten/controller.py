"""
controller.py — Keyboard input for findkitten.

Turns raw keystrokes from a blessed Terminal into the handful of
actions the game understands.  Anything else is thrown away.
"""

from __future__ import annotations

import logging
from enum import Enum

from findkitten.entities import Direction
from findkitten.errors import TerminalError

logger = logging.getLogger(__name__)


class Action(Enum):
    MOVE_LEFT  = "move_left"
    MOVE_UP    = "move_up"
    MOVE_RIGHT = "move_right"
    MOVE_DOWN  = "move_down"
    QUIT       = "quit"

    @property
    def direction(self) -> Direction | None:
        """The direction of a move action; None for QUIT."""
        return _ACTION_DIRECTIONS.get(self)


_ACTION_DIRECTIONS = {
    Action.MOVE_LEFT:  Direction.LEFT,
    Action.MOVE_UP:    Direction.UP,
    Action.MOVE_RIGHT: Direction.RIGHT,
    Action.MOVE_DOWN:  Direction.DOWN,
}

# Multi-byte keys, matched by blessed's Keystroke.name.
SEQUENCE_ACTIONS = {
    "KEY_LEFT":   Action.MOVE_LEFT,
    "KEY_UP":     Action.MOVE_UP,
    "KEY_RIGHT":  Action.MOVE_RIGHT,
    "KEY_DOWN":   Action.MOVE_DOWN,
    "KEY_ESCAPE": Action.QUIT,
}

# Plain characters.  vi-style: j is down, k is up.
CHAR_ACTIONS = {
    "h": Action.MOVE_LEFT,
    "k": Action.MOVE_UP,
    "l": Action.MOVE_RIGHT,
    "j": Action.MOVE_DOWN,
    "q": Action.QUIT,
}


def translate(key) -> Action | None:
    """Map one blessed Keystroke to an Action, or None if it means nothing."""
    if key.is_sequence:
        return SEQUENCE_ACTIONS.get(key.name)
    return CHAR_ACTIONS.get(str(key))


class Controller:
    """
    Blocking reader of game actions.

    *term* is anything with a blessed-style ``inkey()``; the real thing
    is a ``blessed.Terminal`` held in raw mode by the renderer.
    """

    def __init__(self, term):
        self.term = term

    def wait_for_action(self) -> Action:
        """Block until a recognised key arrives and return its action."""
        while True:
            try:
                key = self.term.inkey()
            except OSError as exc:
                raise TerminalError(f"Unable to read from the keyboard: {exc}") from exc

            action = translate(key)
            if action is not None:
                return action
            logger.debug("Ignoring key %r", str(key))
