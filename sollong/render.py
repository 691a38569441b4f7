"""Drawing a map into a window, one texture per tile."""

from __future__ import annotations

import os
from enum import IntEnum
from pathlib import Path
from typing import Optional, Union

os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

import pygame  # noqa: E402

from .gamemap import GameMap, Position, Tile  # noqa: E402

TILE_SIZE = 32
TITLE = "so_long"
ASSET_DIR = Path("assets") / "img"


class TextureId(IntEnum):
    """The textures a map is drawn with, in loading order."""

    WALL = 0
    SPACE = 1
    PLAYER = 2
    EXIT = 3
    COIN = 4

    @property
    def filename(self) -> str:
        return f"{self.name.lower()}.xpm"


class TextureError(Exception):
    """Raised when a texture image cannot be loaded."""


_TILE_TEXTURES = {
    Tile.WALL: TextureId.WALL,
    Tile.SPACE: TextureId.SPACE,
    Tile.PLAYER: TextureId.PLAYER,
    Tile.EXIT: TextureId.EXIT,
    Tile.COIN: TextureId.COIN,
}


def texture_for(tile: Union[Tile, str]) -> TextureId:
    """Return the texture a tile is drawn with; ValueError for an unknown tile."""
    return _TILE_TEXTURES[Tile(tile)]


class Renderer:
    """A window showing a map, with the textures it is drawn from."""

    def __init__(
        self, game_map: GameMap, asset_dir: Union[str, os.PathLike] = ASSET_DIR
    ) -> None:
        self.map = game_map
        self.asset_dir = Path(asset_dir)
        self.textures: dict[TextureId, pygame.Surface] = {}
        self.screen: Optional[pygame.Surface] = None
        try:
            pygame.display.init()
        except pygame.error as exc:
            raise RuntimeError("Failed to initialize display") from exc
        try:
            self.screen = pygame.display.set_mode(
                (game_map.width * TILE_SIZE, game_map.height * TILE_SIZE)
            )
            pygame.display.set_caption(TITLE)
        except pygame.error as exc:
            self.close()
            raise RuntimeError("Failed to create window") from exc
        try:
            for texture_id in TextureId:
                self.textures[texture_id] = self._load(texture_id)
        except TextureError:
            self.close()
            raise

    def _load(self, texture_id: TextureId) -> pygame.Surface:
        path = self.asset_dir / texture_id.filename
        try:
            return pygame.image.load(str(path))
        except (OSError, pygame.error) as exc:
            raise TextureError("Failed to load texture") from exc

    def _blit(self, pos: Position) -> pygame.Rect:
        if self.screen is None:
            raise RuntimeError("renderer is closed")
        surface = self.textures[texture_for(self.map.tile_at(pos))]
        width, height = surface.get_size()
        return self.screen.blit(surface, (width * pos.x, height * pos.y))

    def draw_tile(self, pos: Position) -> pygame.Rect:
        """Draw the tile at pos and show it; return the area drawn."""
        rect = self._blit(pos)
        pygame.display.update(rect)
        return rect

    def draw_map(self) -> None:
        """Draw every tile of the map and show the result."""
        for y, row in enumerate(self.map.rows):
            for x in range(len(row)):
                self._blit(Position(x, y))
        pygame.display.flip()

    def close(self) -> None:
        """Release the textures and the window; safe to call twice."""
        self.textures.clear()
        self.screen = None
        if pygame.display.get_init():
            pygame.display.quit()

    def __enter__(self) -> "Renderer":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()