"""
findkitten — A robot wanders a terminal grid looking for a kitten.

Modules:

  constants     – grid size, glyphs, palette, layout, timing.
  descriptions  – flavor text for the objects on the grid.
  errors        – FindKittenError, TerminalError, InvariantError.
  entities      – Point, Direction, GameObject, Player.
  world         – World: bounds, objects, player movement.
  controller    – Action, Controller: keystrokes to actions.
  renderer      – Renderer: full and incremental terminal drawing.
  session       – Session state machine and the main() entry point.
"""

__version__ = "0.1.0"
