"""
constants.py — Shared constants for findkitten.

Grid dimensions, glyphs, the colour palette, header layout and timing
values live here so every other module can import them from a single
authoritative source.  There is no runtime configuration: changing the
game means changing this file.
"""

# ═══════════════════════════════════════════════════════════════════════════
#  WORLD
# ═══════════════════════════════════════════════════════════════════════════

# Inclusive lower-right corner of the playfield, anchored at (0, 0).
GRID_SIZE = (40, 20)

# One random object for every OBJECT_DENSITY cells of playfield.
OBJECT_DENSITY = 50

# ═══════════════════════════════════════════════════════════════════════════
#  GLYPHS & COLOURS
# ═══════════════════════════════════════════════════════════════════════════

PLAYER_SYMBOL = "#"
PLAYER_COLOR  = 15

# Random objects pick a symbol from this printable range (inclusive).
# '#' is in range, so an object can look just like the player.
SYMBOL_FIRST = "!"
SYMBOL_LAST  = "~"

# Random objects pick a colour index from [COLOR_FIRST, COLOR_LAST].
COLOR_FIRST = 1
COLOR_LAST  = 15

# ANSI-256 foreground selector, e.g. "5;196".
COLOR_SPEC_PREFIX = "5;"
COLOR_INDEX_MAX   = 255

BORDER_CHAR = "*"

# ═══════════════════════════════════════════════════════════════════════════
#  SCREEN LAYOUT
# ═══════════════════════════════════════════════════════════════════════════

# Border rectangle = world bounds + BORDER_MARGIN.
BORDER_MARGIN = (2, 2)

# Rows reserved above the playfield: frame line, instructions, status.
HEADER_HEIGHT = 3
INSTRUCTION_ROW = 1
STATUS_ROW      = 2

# Column where the header text starts (after the "* " bracket).
TEXT_COLUMN = 2

INSTRUCTIONS = "Use 'hjkl' to move; 'q' to quit"

# ═══════════════════════════════════════════════════════════════════════════
#  DIRECTIONAL DATA
# ═══════════════════════════════════════════════════════════════════════════

# (dx, dy) unit vectors; y grows downwards.
DIR_DELTA = {
    "left":  (-1,  0),
    "up":    ( 0, -1),
    "right": ( 1,  0),
    "down":  ( 0,  1),
}

# ═══════════════════════════════════════════════════════════════════════════
#  TIMING
# ═══════════════════════════════════════════════════════════════════════════

# The goal animation: ANIM_ITERATIONS frames, ANIM_DELAY seconds apart.
ANIM_ITERATIONS = 5
ANIM_DELAY      = 1.0
ANIM_ROW        = STATUS_ROW
ANIM_COLUMN     = TEXT_COLUMN
