"""
errors.py — Exception hierarchy for findkitten.

Only two things can go wrong: the terminal misbehaves, or a coordinate
that should never be negative on screen is.  Rejected and blocked moves
are ordinary game flow and never raise.
"""


class FindKittenError(Exception):
    """Base class for every fatal error the game reports."""


class TerminalError(FindKittenError):
    """The terminal (keyboard or screen) cannot be used."""


class InvariantError(FindKittenError, ValueError):
    """A value that the game's own construction guarantees is violated."""
