"""Command entry point: load a map and play it in a window."""

from __future__ import annotations

import os
import sys
from typing import Optional, Sequence, Union

from .game import Key, Session
from .gamemap import MapError, load_map, validate_filename, validate_map
from .render import Renderer, TextureError, pygame

FPS = 60

_KEYMAP = {
    pygame.K_w: Key.KEY_W,
    pygame.K_a: Key.KEY_A,
    pygame.K_s: Key.KEY_S,
    pygame.K_d: Key.KEY_D,
    pygame.K_UP: Key.UP,
    pygame.K_DOWN: Key.DOWN,
    pygame.K_LEFT: Key.LEFT,
    pygame.K_RIGHT: Key.RIGHT,
    pygame.K_ESCAPE: Key.ESC,
}


def run(path: Union[str, os.PathLike]) -> int:
    """Validate and play the map at path until the game ends; return 0."""
    name = validate_filename(path)
    game_map = load_map(name)
    start = validate_map(game_map)
    session = Session(game_map, start)
    with Renderer(game_map) as renderer:
        renderer.draw_map()
        clock = pygame.time.Clock()
        while not session.finished:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    session.finished = True
                elif event.type == pygame.KEYDOWN:
                    keycode = _KEYMAP.get(event.key)
                    if keycode is not None:
                        session.handle_key(keycode)
            for pos in session.update():
                renderer.draw_tile(pos)
            clock.tick(FPS)
    return 0


def _fail(message: str) -> int:
    sys.stderr.write(f"Error: {message}\n")
    return 1


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the game on the one map path given; report errors on stderr."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) != 1:
        return _fail("Invalid input")
    try:
        return run(args[0])
    except (MapError, TextureError, RuntimeError) as exc:
        return _fail(str(exc))