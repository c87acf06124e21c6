"""
entities.py — Game entity classes for findkitten.

Everything here lives in *grid space*: origin at the top-left corner of
the playfield, x growing to the right and y growing downwards.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum

from findkitten.constants import (
    COLOR_SPEC_PREFIX, DIR_DELTA, PLAYER_COLOR, PLAYER_SYMBOL,
)


@dataclass(frozen=True)
class Point:
    """An (x, y) grid coordinate.  May go negative while a move is checked."""

    x: int
    y: int

    def __add__(self, other: Point) -> Point:
        return Point(self.x + other.x, self.y + other.y)

    def __floordiv__(self, divisor: int) -> Point:
        return Point(self.x // divisor, self.y // divisor)


class Direction(Enum):
    LEFT  = "left"
    UP    = "up"
    RIGHT = "right"
    DOWN  = "down"

    @property
    def delta(self) -> Point:
        """Unit vector for one step in this direction."""
        return Point(*DIR_DELTA[self.value])


@dataclass(frozen=True)
class GameObject:
    """
    Something standing on the grid.

    Attributes
    ----------
    symbol      : str    – single printable character.
    description : str    – shown on the status line when bumped into.
    coordinate  : Point  – where it stands.
    fg_color    : int    – ANSI-256 palette index.
    is_goal     : bool   – True for the kitten only.
    """

    symbol: str
    description: str
    coordinate: Point
    fg_color: int
    is_goal: bool = False

    @property
    def ansi_color_spec(self) -> str:
        """Foreground colour as an ANSI-256 selector, e.g. ``"5;12"``."""
        return f"{COLOR_SPEC_PREFIX}{self.fg_color}"


class Player:
    """
    The controllable robot.

    Wraps a GameObject; only its coordinate ever changes.  Objects are
    frozen, so moving swaps in a copy at the new coordinate.
    """

    def __init__(self, coordinate: Point):
        self.object = GameObject(
            symbol=PLAYER_SYMBOL,
            description="",
            coordinate=coordinate,
            fg_color=PLAYER_COLOR,
        )

    @property
    def coordinate(self) -> Point:
        return self.object.coordinate

    @coordinate.setter
    def coordinate(self, point: Point):
        self.object = replace(self.object, coordinate=point)
