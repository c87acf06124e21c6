"""
renderer.py — Terminal rendering for findkitten.

Draws the bordered playfield with a blessed Terminal, then keeps it up
to date by touching only the player's cell and the two header lines.

Screen layout (display space, (0, 0) is the top-left of the terminal):

    row 0                  ******************  frame
    row 1                  * instructions   *
    row 2                  * status         *
    row HEADER_HEIGHT      ******************  top border
    rows below             * playfield      *
    HEADER + border.y      ******************  bottom border
    HEADER + border.y + 1  cursor parks here

A grid point (x, y) lands on column x + 1, row y + 1 + HEADER_HEIGHT.
"""

from __future__ import annotations

import logging
import time
from contextlib import ExitStack
from dataclasses import dataclass

from blessed import Terminal

from findkitten.constants import (
    ANIM_COLUMN, ANIM_DELAY, ANIM_ITERATIONS, ANIM_ROW, BORDER_CHAR,
    BORDER_MARGIN, COLOR_INDEX_MAX, COLOR_SPEC_PREFIX, HEADER_HEIGHT,
    INSTRUCTIONS, INSTRUCTION_ROW, PLAYER_SYMBOL, STATUS_ROW, TEXT_COLUMN,
)
from findkitten.entities import GameObject, Point
from findkitten.errors import InvariantError, TerminalError
from findkitten.world import World

logger = logging.getLogger(__name__)


# ═══════════════════════════════════════════════════════════════════════════
#  COORDINATES & COLOURS
# ═══════════════════════════════════════════════════════════════════════════

@dataclass(frozen=True)
class DisplayPoint:
    """A terminal (column, row).  Never negative."""

    x: int
    y: int

    def __post_init__(self):
        if self.x < 0 or self.y < 0:
            raise InvariantError(f"Negative display point ({self.x}, {self.y}).")


def to_display(point: Point) -> DisplayPoint:
    """Map a grid point to the screen cell it is drawn on."""
    if point.x < 0 or point.y < 0:
        raise InvariantError(f"Negative point to display: {point}.")
    return DisplayPoint(point.x + 1, point.y + 1 + HEADER_HEIGHT)


def to_grid(display: DisplayPoint) -> Point:
    """Inverse of to_display()."""
    return Point(display.x - 1, display.y - 1 - HEADER_HEIGHT)


def parse_color_spec(spec: str) -> int:
    """
    Extract the palette index from an ANSI-256 selector like ``"5;12"``.

    Raises InvariantError for anything that is not exactly that shape
    with an index in [0, 255].
    """
    prefix, _, index = spec.partition(";")
    if prefix + ";" != COLOR_SPEC_PREFIX or not index.isdigit():
        raise InvariantError(f"Malformed colour spec {spec!r}.")
    value = int(index)
    if value > COLOR_INDEX_MAX:
        raise InvariantError(f"Colour index {value} out of range.")
    return value


# ═══════════════════════════════════════════════════════════════════════════
#  RENDERER
# ═══════════════════════════════════════════════════════════════════════════

class Renderer:
    """
    Owns the terminal for the length of a game.

    Use it as a context manager: entering puts the terminal into raw
    mode (keys arrive one at a time, unechoed, and Ctrl-C is just another
    key) and leaving restores the previous mode, whatever way the block
    is left.

    Output is queued and only reaches the terminal on _flush(), so each
    frame appears in one write.  Frames can only be drawn while the
    renderer holds the terminal.
    """

    # Only one renderer may hold the terminal at a time.
    _terminal_held = False

    def __init__(self, world: World, term: Terminal | None = None):
        border = world.bounds + Point(*BORDER_MARGIN)
        if border.x < 0 or border.y < 0:
            raise InvariantError(f"Negative border {border}.")

        self.term          = term if term is not None else Terminal()
        self.border        = DisplayPoint(border.x, border.y)
        self.header_height = HEADER_HEIGHT
        self.top_string    = INSTRUCTIONS
        self.player_display_position: DisplayPoint | None = None
        self._pending: list[str] = []
        self._modes = ExitStack()
        self._holding = False

    # ── Terminal ownership ─────────────────────────────────────────────

    def __enter__(self) -> Renderer:
        if Renderer._terminal_held:
            raise TerminalError("The terminal is already held by another renderer.")
        if self.term.is_a_tty:
            self._check_size()

        self._modes.enter_context(self.term.raw())
        Renderer._terminal_held = True
        self._holding = True
        logger.debug("Terminal in raw mode")
        return self

    def __exit__(self, exc_type, exc, tb):
        try:
            self._modes.close()
        finally:
            Renderer._terminal_held = False
            self._holding = False
            logger.debug("Terminal mode restored")
        return False

    def _check_size(self):
        need_width  = self.border.x + 1
        need_height = self._parked_row() + 1
        if self.term.width < need_width or self.term.height < need_height:
            raise TerminalError(
                f"Terminal too small: {self.term.width}x{self.term.height}, "
                f"need {need_width}x{need_height}.")

    # ── Low-level output ───────────────────────────────────────────────

    def _queue(self, *parts: str):
        self._pending.extend(parts)

    def _flush(self):
        if not self._holding:
            raise TerminalError("Renderer is drawing without holding the terminal.")
        frame = "".join(self._pending)
        self._pending.clear()
        try:
            self.term.stream.write(frame)
            self.term.stream.flush()
        except OSError as exc:
            raise TerminalError(f"Unable to write to the terminal: {exc}") from exc

    def _move(self, x: int, y: int):
        self._queue(self.term.move_xy(x, y))

    def _parked_row(self) -> int:
        return self.header_height + self.border.y + 1

    def _park_cursor(self):
        self._move(0, self._parked_row())

    # ── Drawing pieces ─────────────────────────────────────────────────

    def _symbol(self, obj: GameObject) -> str:
        color = parse_color_spec(obj.ansi_color_spec)
        return self.term.color(color)(obj.symbol)

    def _draw_object_in_its_place(self, obj: GameObject) -> DisplayPoint:
        dp = to_display(obj.coordinate)
        self._move(dp.x, dp.y)
        self._queue(self._symbol(obj))
        return dp

    def _draw_player(self, world: World):
        self.player_display_position = self._draw_object_in_its_place(
            world.player.object)

    def _clear_cell(self, dp: DisplayPoint):
        self._move(dp.x, dp.y)
        self._queue(" ")

    def _draw_border(self):
        star = self.term.green(BORDER_CHAR)
        last_row = self.header_height + self.border.y
        for y in range(last_row + 1):
            for x in range(self.border.x + 1):
                if (y in (0, self.header_height, last_row) or
                        x in (0, self.border.x)):
                    self._move(x, y)
                    self._queue(star)

    def _print_status_string(self, row: int, text: str):
        """Rewrite a whole header row: bracket, text, closing bracket."""
        star = self.term.green(BORDER_CHAR)
        self._move(0, row)
        self._queue(self.term.clear_eol, star)
        self._move(TEXT_COLUMN, row)
        self._queue(text)
        if len(text) < self.border.x:
            self._move(self.border.x, row)
            self._queue(star)

    def _print_header(self, world: World):
        self._print_status_string(INSTRUCTION_ROW, self.top_string)
        self._print_status_string(STATUS_ROW, world.status)

    # ── Frames ─────────────────────────────────────────────────────────

    def render_full(self, world: World):
        """Clear the screen and draw everything: border, objects, player, header."""
        self._queue(self.term.clear)
        self._draw_border()
        for obj in world.objects:
            self._draw_object_in_its_place(obj)
        self._draw_player(world)
        self._print_header(world)
        self._park_cursor()
        self._flush()

    def render_incremental(self, world: World,
                           previous: DisplayPoint | None = None):
        """
        Redraw only what a move can change.

        Blanks the cell the player was last drawn on (*previous*, or the
        position remembered from the last frame), draws the player at
        its current cell and rewrites both header lines.
        """
        previous = previous or self.player_display_position
        if previous is not None:
            self._clear_cell(previous)
        self._draw_player(world)
        self._print_header(world)
        self._park_cursor()
        self._flush()

    @staticmethod
    def compose_meeting_paddings(step: int, out_of: int) -> tuple[str, str]:
        """
        Spacing for one animation frame.

        Returns (outer, inner): *step* spaces outside each marker and
        ``out_of - step`` spaces on each side of the gap between them.
        """
        return " " * step, " " * (out_of - step)

    def play_goal_animation(self, obj: GameObject):
        """
        Walk the robot and *obj* towards each other along the status row.

        Blocks for ANIM_ITERATIONS * ANIM_DELAY seconds and ignores the
        keyboard meanwhile.
        """
        for i in range(ANIM_ITERATIONS):
            time.sleep(ANIM_DELAY)
            outer, inner = self.compose_meeting_paddings(i + 1, ANIM_ITERATIONS)
            self._move(ANIM_COLUMN, ANIM_ROW)
            self._queue(outer, PLAYER_SYMBOL, inner, inner,
                        self._symbol(obj), outer)
            self._park_cursor()
            self._flush()
