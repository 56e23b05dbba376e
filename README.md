# solong

A small top-down 2D game. You walk a character around a walled tile map,
pick up every coin and then leave through the exit door. The door stays
closed, and blocks your way, until all coins have been collected.

## Installing

```
pip install .
```

This installs `pygame`, used for the window, input and image loading, and
`numpy`, used for the pixel canvas.

## Playing

```
solong maps/level.ber
solong --bonus maps/level.ber
```

The command takes exactly one map path, which must end in `.ber`. With no
path, more than one path, or a name without the `.ber` ending, it prints an
error and exits with status 12. The `--bonus` flag may appear anywhere on
the command line and turns on the bonus game.

Controls:

| Key                         | Action     |
|-----------------------------|------------|
| `W` / Up arrow              | move up    |
| `A` / Left arrow            | move left  |
| `S` / Down arrow            | move down  |
| `D` / Right arrow           | move right |
| `Esc` or closing the window | quit       |

The player moves 12 map pixels per key press. Every press that moves the
player counts as a move. The standard game prints the running total in the
terminal; the bonus game draws it in the top-left corner of the window.

Textures are read from `./textures/` relative to the directory the game is
started in:

- `textures/background/background.xpm`, `textures/background/wall.xpm`
- `textures/player/player_to_right.xpm`, `textures/player/player_to_left.xpm`
- `textures/exit/closed_door.xpm`, `textures/exit/open_door.xpm`
- `textures/collectibles/coin00.xpm` … `coin05.xpm` (the standard game uses
  `coin00.xpm` only)
- bonus game only: `textures/numbers/0.xpm` … `9.xpm` and
  `textures/enemy/enemy00.xpm` … `enemy07.xpm`

A texture that cannot be loaded ends the game with status 2.

## Map files

A map is plain text with one row of tiles per line:

| Char | Tile                        |
|------|-----------------------------|
| `1`  | wall                        |
| `0`  | floor                       |
| `P`  | player start (exactly one)  |
| `E`  | exit (exactly one)          |
| `C`  | coin (at least one)         |
| `N`  | enemy (bonus game only)     |

A map is rejected with a message and an exit status when:

| Status | Reason                                                      |
|--------|-------------------------------------------------------------|
| 2      | the file cannot be opened                                   |
| 3      | the file is empty                                           |
| 4      | the rows are not all the same length                        |
| 5      | it holds a character not listed above                       |
| 6      | it is not enclosed in walls                                 |
| 7      | it does not have exactly one player and one exit            |
| 8      | it has no coin                                              |
| 9      | a coin or the exit cannot be reached from the player        |
| 10     | it is more than 20 tiles wide (window wider than 1920 px)   |
| 11     | it is more than 10 tiles tall (window taller than 1000 px)  |

Example:

```
1111111111
1P00C0C001
1011110101
1C0000E001
1111111111
```

Winning or quitting exits with status 0. In the bonus game enemies are
animated, count as walls when the map's paths are checked, and touching one
ends the game with status 1.

## Using it as a library

The map and game logic work without a window:

```python
from solong.mapfile import read_map
from solong.validation import parse_map
from solong.game import Game, GameOver, Key

tilemap = read_map("maps/level.ber")
summary = parse_map(tilemap, bonus=False)
game = Game(tilemap, summary, bonus=False)
try:
    message = game.press(Key.RIGHT)
except GameOver as over:
    print(over.status, over.message)
```

- `solong.mapfile`: `read_map`, `check_arguments`, `has_map_extension`,
  `TileMap` and `MapError` (with `status` and `message`).
- `solong.validation`: `parse_map`, which runs every check in the order of
  the table above and returns a `MapSummary`, plus the single checks
  `is_rectangular`, `scan_tiles`, `enclosed_in_walls`,
  `has_one_exit_and_player` and `reachable`.
- `solong.game`: `Game` with `press`, `check_collision`, `close` and `tick`;
  `Key`, `Rect`, `overlaps`, `tile_shape` and `GameOver`.
- `solong.render`: `Canvas`, `Sprite`, `SpriteSet`, `draw_scene` and
  `draw_move_count`, which compose a frame as a numpy array of 0x00RRGGBB
  pixels.
- `solong.textures`: `load_sprite`, `load_sprites` and `sprite_from_surface`.
- `solong.app`: `main`, `run`, `render_frame` and `key_from_pygame`.