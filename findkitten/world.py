"""
world.py — The playfield model for findkitten.

Owns the bounds, the player, every object on the grid and the status
line.  No I/O or rendering happens here; the renderer only reads.
"""

from __future__ import annotations

import logging
import random

from findkitten.constants import (
    COLOR_FIRST, COLOR_LAST, OBJECT_DENSITY, SYMBOL_FIRST, SYMBOL_LAST,
)
from findkitten.descriptions import DESCRIPTIONS, GOAL_INDEX
from findkitten.entities import Direction, GameObject, Player, Point
from findkitten.errors import InvariantError

logger = logging.getLogger(__name__)


class World:
    """
    A bounded grid with a player, some junk and one kitten.

    Parameters
    ----------
    bounds : Point
        Inclusive lower-right corner; the playfield spans
        ``[0, bounds.x] x [0, bounds.y]``.
    rng : random.Random or None
        Source of randomness for the layout.  Pass a seeded instance for
        a reproducible world.

    Attributes
    ----------
    bounds  : Point
    player  : Player            – starts at ``bounds // 2``.
    objects : list[GameObject]  – random objects, then the goal, in
                                  insertion order.  Never changes.
    status  : str               – description of the last object bumped.
    """

    def __init__(self, bounds: Point, rng: random.Random | None = None):
        # Objects are sampled from [1, bound - 1], which needs bound >= 2.
        if bounds.x < 2 or bounds.y < 2:
            raise InvariantError(
                f"World bounds {bounds} are too small to place objects.")

        self.bounds  = bounds
        self._rng    = rng or random.Random()
        self.player  = Player(bounds // 2)
        self.objects: list[GameObject] = []
        self.status  = ""

        obj_count = (bounds.x * bounds.y) // OBJECT_DENSITY
        for _ in range(obj_count):
            self.objects.append(self._random_object())

        kitten = self._random_object(
            description=DESCRIPTIONS[GOAL_INDEX], is_goal=True)
        self.objects.append(kitten)

        logger.debug("Generated %d objects in %s; kitten at %s",
                     obj_count, bounds, kitten.coordinate)

    # ── Generation ─────────────────────────────────────────────────────

    def _random_object(self, description: str | None = None,
                       is_goal: bool = False) -> GameObject:
        """
        Build one object at a random spot.

        Coordinates come from ``[1, bound - 1]`` on each axis, so the
        outer ring of the grid stays empty.  Overlaps with other objects
        or the player's start are allowed.
        """
        rng = self._rng
        x = rng.randint(1, self.bounds.x - 1)
        y = rng.randint(1, self.bounds.y - 1)
        symbol = chr(rng.randint(ord(SYMBOL_FIRST), ord(SYMBOL_LAST)))
        fg_color = rng.randint(COLOR_FIRST, COLOR_LAST)
        if description is None:
            description = DESCRIPTIONS[rng.randrange(1, len(DESCRIPTIONS))]
        return GameObject(symbol, description, Point(x, y), fg_color, is_goal)

    # ── Queries ────────────────────────────────────────────────────────

    @property
    def goal(self) -> GameObject:
        return next(obj for obj in self.objects if obj.is_goal)

    def in_bounds(self, point: Point) -> bool:
        """True if *point* lies within ``[0, bounds]`` on both axes."""
        return (0 <= point.x <= self.bounds.x and
                0 <= point.y <= self.bounds.y)

    def object_at(self, point: Point) -> GameObject | None:
        """The first object (in insertion order) standing on *point*."""
        for obj in self.objects:
            if obj.coordinate == point:
                return obj
        return None

    # ── Movement ───────────────────────────────────────────────────────

    def move_player(self, direction: Direction) -> GameObject | None:
        """
        Try to step the player one cell in *direction*.

        Returns
        -------
        None        – the step left the grid (nothing changes) or the
                      target cell was free (the player moved there).
        GameObject  – the object occupying the target cell.  The player
                      stays put and the status line shows its
                      description.
        """
        target = self.player.coordinate + direction.delta
        if not self.in_bounds(target):
            return None

        found = self.object_at(target)
        if found is not None:
            logger.debug("Blocked at %s by %r", target, found.symbol)
            self.status = found.description
        else:
            self.player.coordinate = target
        return found
