"""Game session state: key handling and player movement."""

from __future__ import annotations

from enum import Enum, IntEnum
from typing import Optional

from .gamemap import GameMap, Position, Tile, _count
from .output import put_str, put_nbr


class Key(IntEnum):
    """Key codes the game reacts to."""

    KEY_W = 119
    KEY_A = 97
    KEY_S = 115
    KEY_D = 100
    UP = 65362
    DOWN = 65364
    LEFT = 65361
    RIGHT = 65363
    ESC = 65307


class Move(Enum):
    """A step on the grid as (dx, dy)."""

    UP = (0, -1)
    DOWN = (0, 1)
    LEFT = (-1, 0)
    RIGHT = (1, 0)


_KEY_MOVES = {
    Key.KEY_W: Move.UP,
    Key.UP: Move.UP,
    Key.KEY_S: Move.DOWN,
    Key.DOWN: Move.DOWN,
    Key.KEY_A: Move.LEFT,
    Key.LEFT: Move.LEFT,
    Key.KEY_D: Move.RIGHT,
    Key.RIGHT: Move.RIGHT,
}


class Session:
    """A running game on one validated map."""

    def __init__(self, game_map: GameMap, start: Position) -> None:
        self.map = game_map
        self.current_pos = start
        self.target_pos = start
        self.collectibles = _count(game_map, Tile.COIN)
        self.collected = 0
        self.move_count = 0
        self.finished = False
        self.won = False
        self._previous_tile = Tile.SPACE.value

    def handle_key(self, keycode: int) -> Optional[Move]:
        """Set the target from a key press; ESC ends the session.

        Returns the move the key stands for, or None.
        """
        if keycode == Key.ESC:
            self.finished = True
            return None
        move = _KEY_MOVES.get(keycode)
        if move is not None:
            dx, dy = move.value
            self.target_pos = Position(self.current_pos.x + dx, self.current_pos.y + dy)
        return move

    def is_valid_move(self) -> bool:
        """True when a target other than the current square is not a wall."""
        if self.target_pos == self.current_pos:
            return False
        try:
            return self.map.tile_at(self.target_pos) != Tile.WALL
        except IndexError:
            return False

    def _step(self) -> list[Position]:
        old, target = self.current_pos, self.target_pos
        self.map.set_tile(old, self._previous_tile)
        next_tile = self.map.tile_at(target)
        if next_tile == Tile.COIN:
            self.collected += 1
            self._previous_tile = Tile.SPACE.value
        else:
            self._previous_tile = next_tile
        self.map.set_tile(target, Tile.PLAYER)
        self.current_pos = target
        self.move_count += 1
        return [old, target]

    def update(self) -> list[Position]:
        """Carry out a pending move, report it, and return the changed squares."""
        if self.finished or not self.is_valid_move():
            return []
        winning = (
            self.map.tile_at(self.target_pos) == Tile.EXIT
            and self.collected == self.collectibles
        )
        changed = self._step()
        if winning:
            self.won = True
            self.finished = True
            put_str("You won! Total moves: ")
        else:
            put_str("Moves: ")
        put_nbr(self.move_count)
        put_str("\n")
        return changed