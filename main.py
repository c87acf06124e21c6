#!/usr/bin/env python3
"""
main.py — Entry point for findkitten.

Run from the repository root:
    python main.py

Move the robot (#) with the arrow keys or h/j/k/l, bump into things to
see what they are, and find the kitten.  Press q or Escape to give up.
"""

import sys

from findkitten.session import main


if __name__ == "__main__":
    sys.exit(main())
