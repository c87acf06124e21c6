"""
session.py — The game loop for findkitten.

    INIT ──render_full──▶ PLAYING ──kitten──▶ ANIMATING ──▶ DONE
                            │  ▲                             ▲
                            └──┘ move / bump                 │
                            └─────────── quit ───────────────┘

Run from the repository root with ``python main.py`` or, once
installed, ``findkitten``.
"""

from __future__ import annotations

import logging
import sys
from enum import Enum

from blessed import Terminal

from findkitten.constants import GRID_SIZE
from findkitten.controller import Action, Controller
from findkitten.entities import GameObject, Point
from findkitten.errors import FindKittenError, TerminalError
from findkitten.renderer import Renderer
from findkitten.world import World

logger = logging.getLogger(__name__)


class State(Enum):
    INIT      = "init"
    PLAYING   = "playing"
    ANIMATING = "animating"
    DONE      = "done"


class Session:
    """
    One game, from first frame to last.

    Parameters
    ----------
    world      : World
    renderer   : Renderer    – already holding the terminal.
    controller : Controller  – source of actions.

    Attributes
    ----------
    state : State
    found : GameObject or None  – the kitten, once it has been found.
    """

    def __init__(self, world: World, renderer: Renderer, controller: Controller):
        self.world      = world
        self.renderer   = renderer
        self.controller = controller
        self.state      = State.INIT
        self.found: GameObject | None = None

    def _transition(self, state: State):
        logger.debug("Session %s -> %s", self.state.value, state.value)
        self.state = state

    def start(self):
        """Draw the first frame and begin play."""
        self.renderer.render_full(self.world)
        self._transition(State.PLAYING)

    def step(self, action: Action) -> State:
        """Apply one action while PLAYING and return the resulting state."""
        if action is Action.QUIT:
            self._transition(State.DONE)
            return self.state

        found = self.world.move_player(action.direction)
        self.renderer.render_incremental(self.world)
        if found is not None and found.is_goal:
            self.found = found
            self._transition(State.ANIMATING)
        return self.state

    def run(self) -> GameObject | None:
        """
        Play until the player quits or finds the kitten.

        Returns the kitten if it was found, otherwise None.
        """
        if self.state is State.INIT:
            self.start()
        while self.state is State.PLAYING:
            self.step(self.controller.wait_for_action())
        if self.state is State.ANIMATING:
            self.renderer.play_goal_animation(self.found)
            self._transition(State.DONE)
        return self.found


def play(term: Terminal) -> GameObject | None:
    """Build a fresh world on *term* and play it to the end."""
    world = World(Point(*GRID_SIZE))
    with Renderer(world, term) as renderer:
        return Session(world, renderer, Controller(term)).run()


def main() -> int:
    logging.basicConfig(level=logging.WARNING,
                        format="findkitten: %(message)s",
                        stream=sys.stderr)
    term = Terminal()
    try:
        if not (sys.stdin.isatty() and term.is_a_tty):
            raise TerminalError("findkitten needs an interactive terminal.")
        play(term)
    except FindKittenError as exc:
        logger.error("%s", exc)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
