# sollong

A small top-down puzzle game played on a grid read from a `.ber` map file.
You walk the player around the map, pick up every coin, then step onto the
exit. Each move is counted and printed. When you win, the game prints the
total and ends.

## Installing

```
pip install .
```

The game window is drawn with pygame.

## Playing

```
sollong path/to/level.ber
```

Controls:

| Key               | Action      |
|-------------------|-------------|
| `W` / Up arrow    | move up     |
| `S` / Down arrow  | move down   |
| `A` / Left arrow  | move left   |
| `D` / Right arrow | move right  |
| `Esc`             | quit        |

Closing the window also quits. Every move prints `Moves: N` to standard
output. Reaching the exit with all coins collected prints
`You won! Total moves: N`, and the game ends.

The exit only counts once every coin has been taken. Until then you can walk
over it like an empty floor tile.

If something goes wrong, the command prints `Error: <reason>` on standard
error and exits with status 1. This happens when:

- the number of arguments is wrong (`Invalid input`);
- the file name is bad;
- the map is unreadable or invalid;
- the display cannot be opened;
- a texture fails to load.

## Map files

A map is a plain text file whose name ends in `.ber`. The name must also be
at least five characters long. Each line is one row of tiles, and empty lines
are ignored.

| Character | Tile         |
|-----------|--------------|
| `1`       | wall         |
| `0`       | empty floor  |
| `P`       | player start |
| `C`       | coin         |
| `E`       | exit         |

Example:

```
1111111
1P0C0E1
1111111
```

A map is accepted only if:

- it is not empty (`Map is empty`);
- every row has the same length (`Map must be rectangular`);
- it is enclosed by walls on all four sides (`Map must be surrounded by walls`);
- it uses only the characters above, with exactly one `P`, exactly one `E`
  and at least one `C` (`Invalid map tiles or object count`);
- every coin and the exit can be reached from the start (`No valid path to exit`).

## Textures

The package ships no images. The game loads five files from `assets/img`,
relative to the directory it is started in:

- `wall.xpm`
- `space.xpm`
- `player.xpm`
- `exit.xpm`
- `coin.xpm`

The window is 32 pixels per tile in each direction. Each tile is placed
according to the size of its image, so the images should be 32 × 32 pixels.

## Using it as a library

The map and game logic work without a display:

```python
from sollong.gamemap import GameMap, validate_map
from sollong.game import Session, Key

game_map = GameMap.from_text("1111111\n1P0C0E1\n1111111\n")
start = validate_map(game_map)       # Position(x=1, y=1)
session = Session(game_map, start)
session.handle_key(Key.RIGHT)
changed = session.update()           # prints "Moves: 1"
```

### `sollong.gamemap`

- `Tile`: the tile characters.
- `Position`: an `x`/`y` pair.
- `GameMap`: provides `from_text`, `tile_at`, `set_tile`, `width` and `height`.
- `validate_filename`: checks a map file name.
- `load_map`: reads a map file without validating it.
- `validate_map`: raises `MapError` with the messages listed above, and
  returns the player's start position.
- `path_is_valid`: the reachability check.

### `sollong.game`

`Session` holds the state of one game:

- `handle_key` takes a `Key` code and returns the `Move` it stands for, or
  `None`.
- `is_valid_move` reports whether the pending move can be made.
- `update` carries out the pending move, prints the move count, and returns
  the squares that changed.
- `collected`, `move_count`, `finished` and `won` record progress.

### `sollong.render`

`Renderer` opens a pygame window for a map:

- `draw_tile` draws one square.
- `draw_map` draws the whole map.
- `close` releases the window; a `Renderer` can also be used in a `with` block.
- `texture_for` maps a tile to its `TextureId`.
- A missing image raises `TextureError`.

### `sollong.cli`

- `run(path)` plays one map file.
- `main(argv=None)` is the `sollong` command.

### Supporting modules

- `sollong.chars`: character classification and case conversion, with
  `atoi` and `itoa`.
- `sollong.memory`: byte-buffer operations on `bytearray`, such as `memset`,
  `memcpy`, `memmove`, `memchr`, `memcmp` and `calloc`.
- `sollong.textutil`: string helpers with C-library semantics that return
  indices, such as `strchr`, `strnstr`, `strlcpy`, `split` and `strtrim`.
- `sollong.output`: `put_char`, `put_str`, `put_endl` and `put_nbr`, which
  write to a text stream (standard output by default).
- `sollong.linkedlist`: a singly linked `LinkedList` of `Node`s.

## Running the tests

```
pip install .[test]
pytest
```