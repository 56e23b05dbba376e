"""Reading ``.ber`` map files and checking the command line that names them."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field

TILE_SIZE = 48
TILE_SCALE = 2
MAP_EXTENSION = ".ber"


class MapError(Exception):
    """A map could not be loaded or is not playable.

    ``status`` is the exit status the program ends with for this error.
    """

    def __init__(self, status: int, message: str) -> None:
        super().__init__(message)
        self.status = status
        self.message = message


@dataclass
class TileMap:
    """The grid of tiles of a level, one string per row."""

    rows: list[str] = field(default_factory=list)

    @property
    def width(self) -> int:
        """Width in tiles, taken from the first row."""
        return len(self.rows[0]) if self.rows else 0

    @property
    def height(self) -> int:
        """Height in tiles."""
        return len(self.rows)

    @property
    def pixel_width(self) -> int:
        return self.width * TILE_SIZE

    @property
    def pixel_height(self) -> int:
        return self.height * TILE_SIZE

    def tile(self, x: int, y: int) -> str:
        """Return the tile in column ``x`` of row ``y``."""
        return self.rows[y][x]

    def replace(self, x: int, y: int, tile: str) -> None:
        """Put ``tile`` in column ``x`` of row ``y``."""
        row = self.rows[y]
        self.rows[y] = row[:x] + tile + row[x + 1:]

    def copy(self) -> TileMap:
        return TileMap(list(self.rows))


def line_length(line: str) -> int:
    """Number of characters before the first newline."""
    end = line.find("\n")
    return len(line) if end < 0 else end


def has_map_extension(path: str) -> bool:
    """Whether ``path`` names a ``.ber`` file."""
    return path.endswith(MAP_EXTENSION)


def check_arguments(args: Sequence[str]) -> str:
    """Check the command-line arguments and return the map path they name."""
    if not args:
        raise MapError(12, "No map specified!")
    if len(args) > 1:
        raise MapError(12, "Too many arguments!")
    path = args[0]
    if not has_map_extension(path):
        raise MapError(12, "Wrong file extension! Make sure it ends with .ber")
    return path


def read_map(path: str) -> TileMap:
    """Read the map file at ``path`` into a :class:`TileMap`."""
    try:
        with open(path, encoding="latin-1", newline="") as handle:
            text = handle.read()
    except OSError as exc:
        raise MapError(2, "The map file doesn't exist!") from exc
    lines = text.split("\n")
    if lines[-1] == "":
        lines.pop()
    if not lines or line_length(lines[0]) == 0:
        raise MapError(3, "The map file is empty!")
    return TileMap(lines)