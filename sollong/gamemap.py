"""Map grids: parsing from text, loading from files and validation."""

from __future__ import annotations

import os
from collections import deque
from dataclasses import dataclass, field
from enum import Enum
from typing import Iterator, Union

from .textutil import split

MAP_SUFFIX = ".ber"
VALID_TILES = "10PEC"


class Tile(str, Enum):
    """The characters a map is made of."""

    WALL = "1"
    SPACE = "0"
    PLAYER = "P"
    EXIT = "E"
    COIN = "C"


@dataclass(frozen=True)
class Position:
    """A column (x) and row (y) on the map."""

    x: int
    y: int


class MapError(Exception):
    """Raised when a map file or map grid cannot be used."""


@dataclass
class GameMap:
    """A grid of tile characters, one list per row."""

    rows: list[list[str]] = field(default_factory=list)

    @classmethod
    def from_text(cls, text: str) -> "GameMap":
        """Build a map from text, one row per line; empty lines are dropped."""
        return cls([list(line) for line in split(text, "\n")])

    @property
    def height(self) -> int:
        return len(self.rows)

    @property
    def width(self) -> int:
        return len(self.rows[0]) if self.rows else 0

    def _contains(self, pos: Position) -> bool:
        return 0 <= pos.y < len(self.rows) and 0 <= pos.x < len(self.rows[pos.y])

    def tile_at(self, pos: Position) -> str:
        """Return the tile character at pos; IndexError when off the map."""
        if not self._contains(pos):
            raise IndexError(f"{pos} is outside the map")
        return self.rows[pos.y][pos.x]

    def set_tile(self, pos: Position, tile: Union[Tile, str]) -> None:
        """Place a tile at pos; ValueError for an unknown tile."""
        if not self._contains(pos):
            raise IndexError(f"{pos} is outside the map")
        self.rows[pos.y][pos.x] = Tile(tile).value

    def __str__(self) -> str:
        return "\n".join("".join(row) for row in self.rows)


def _positions(game_map: GameMap, tile: Tile) -> Iterator[Position]:
    for y, row in enumerate(game_map.rows):
        for x, ch in enumerate(row):
            if ch == tile:
                yield Position(x, y)


def _count(game_map: GameMap, tile: Tile) -> int:
    return sum(row.count(tile.value) for row in game_map.rows)


def _neighbours(pos: Position) -> tuple[Position, ...]:
    return (
        Position(pos.x, pos.y + 1),
        Position(pos.x, pos.y - 1),
        Position(pos.x + 1, pos.y),
        Position(pos.x - 1, pos.y),
    )


def validate_filename(path: Union[str, os.PathLike]) -> str:
    """Check that a map path is long enough and ends in '.ber'; return it."""
    name = os.fspath(path)
    if len(name) < len(MAP_SUFFIX) + 1:
        raise MapError("Invalid filename")
    if not name.endswith(MAP_SUFFIX):
        raise MapError("Invalid file extension")
    return name


def load_map(path: Union[str, os.PathLike]) -> GameMap:
    """Read a map file into a GameMap without validating it."""
    try:
        with open(path, "rb") as handle:
            data = handle.read()
    except IsADirectoryError as exc:
        raise MapError("Failed to read file") from exc
    except OSError as exc:
        raise MapError("Cannot open map file") from exc
    return GameMap.from_text(data.decode("latin-1"))


def path_is_valid(game_map: GameMap, start: Position) -> bool:
    """True when every coin and the exit can be reached from start."""

    def walkable(pos: Position) -> bool:
        return game_map._contains(pos) and game_map.tile_at(pos) != Tile.WALL

    if not walkable(start):
        return False
    seen = {start}
    queue = deque([start])
    coins = 0
    exit_found = False
    while queue:
        pos = queue.popleft()
        tile = game_map.tile_at(pos)
        if tile == Tile.COIN:
            coins += 1
        elif tile == Tile.EXIT:
            exit_found = True
        for nxt in _neighbours(pos):
            if nxt not in seen and walkable(nxt):
                seen.add(nxt)
                queue.append(nxt)
    return exit_found and coins == _count(game_map, Tile.COIN)


def validate_map(game_map: GameMap) -> Position:
    """Check every rule a playable map must meet; return the player's position."""
    rows = game_map.rows
    if not rows:
        raise MapError("Map is empty")
    width = len(rows[0])
    if any(len(row) != width for row in rows):
        raise MapError("Map must be rectangular")
    if (
        any(row[0] != Tile.WALL or row[-1] != Tile.WALL for row in rows)
        or any(ch != Tile.WALL for ch in rows[0])
        or any(ch != Tile.WALL for ch in rows[-1])
    ):
        raise MapError("Map must be surrounded by walls")
    if any(ch not in VALID_TILES for row in rows for ch in row) or not (
        _count(game_map, Tile.PLAYER) == 1
        and _count(game_map, Tile.EXIT) == 1
        and _count(game_map, Tile.COIN) >= 1
    ):
        raise MapError("Invalid map tiles or object count")
    start = next(_positions(game_map, Tile.PLAYER))
    if not path_is_valid(game_map, start):
        raise MapError("No valid path to exit")
    return start