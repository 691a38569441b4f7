"""A tile-based puzzle game: collect every coin, then reach the exit.

Includes map parsing and validation, the game session logic, a pygame
renderer and command, and small text, byte-buffer and linked-list helpers.
"""

__version__ = "1.0.0"