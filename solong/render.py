"""Composing the scaled frame: sprites pasted onto a pixel canvas."""

from __future__ import annotations

from dataclasses import dataclass, field

import numpy as np

from solong.game import Game
from solong.mapfile import TILE_SCALE, TILE_SIZE

TRANSPARENT = 0xFF000000


@dataclass
class Sprite:
    """An image as a (height, width) array of 32-bit pixels."""

    pixels: np.ndarray

    def __post_init__(self) -> None:
        self.pixels = np.asarray(self.pixels, dtype=np.uint32)
        if self.pixels.ndim != 2:
            raise ValueError("sprite pixels must be a 2-D array")

    @property
    def width(self) -> int:
        return int(self.pixels.shape[1])

    @property
    def height(self) -> int:
        return int(self.pixels.shape[0])


@dataclass
class SpriteSet:
    """Every image the game draws."""

    background: Sprite
    wall: Sprite
    player_right: Sprite
    player_left: Sprite
    exit: Sprite
    open_door: Sprite
    collectible: Sprite | None = None
    digits: list[Sprite] = field(default_factory=list)
    coins: list[Sprite] = field(default_factory=list)
    enemy: list[Sprite] = field(default_factory=list)


class Canvas:
    """The frame being drawn, in screen pixels."""

    def __init__(self, width: int, height: int) -> None:
        self.width = width
        self.height = height
        self.pixels = np.zeros((height, width), dtype=np.uint32)

    def put_pixel(self, x: int, y: int, color: int) -> None:
        """Set one pixel; transparent colours and points off the canvas are ignored."""
        color &= 0xFFFFFFFF
        if color == TRANSPARENT:
            return
        if 0 <= x < self.width and 0 <= y < self.height:
            self.pixels[y, x] = color

    def _paste(self, block: np.ndarray, left: int, top: int) -> None:
        height, width = block.shape
        x0, y0 = max(left, 0), max(top, 0)
        x1, y1 = min(left + width, self.width), min(top + height, self.height)
        if x0 >= x1 or y0 >= y1:
            return
        part = block[y0 - top:y1 - top, x0 - left:x1 - left]
        target = self.pixels[y0:y1, x0:x1]
        opaque = part != TRANSPARENT
        target[opaque] = part[opaque]

    def blit(self, sprite: Sprite, x: int, y: int) -> None:
        """Draw ``sprite`` with its corner at map pixel (x, y), at the tile scale."""
        self.blit_scaled(sprite, x, y, TILE_SCALE, TILE_SCALE)

    def blit_scaled(self, sprite: Sprite, x: int, y: int, scale_x: int, scale_y: int) -> None:
        """Draw ``sprite`` enlarged by (scale_x, scale_y), its corner at (x*scale_x, y*scale_y)."""
        block = np.repeat(np.repeat(sprite.pixels, scale_y, axis=0), scale_x, axis=1)
        self._paste(block, x * scale_x, y * scale_y)


def draw_scene(canvas: Canvas, game: Game, sprites: SpriteSet) -> None:
    """Draw the floor, every tile and then the player."""
    for row, line in enumerate(game.tilemap.rows):
        for col, tile in enumerate(line):
            canvas.blit(sprites.background, col * TILE_SIZE, row * TILE_SIZE)
            if tile == "1":
                canvas.blit(sprites.wall, col * TILE_SIZE, row * TILE_SIZE)
            elif tile == "E":
                door = sprites.open_door if game.exit_open else sprites.exit
                canvas.blit(door, col * TILE_SIZE, row * TILE_SIZE)
            elif tile == "C":
                coin = sprites.coins[game.coin_frame] if game.bonus else sprites.collectible
                if coin is None:
                    raise ValueError("no collectible sprite loaded")
                reference = sprites.coins[0] if game.bonus else coin
                scale = 3 * TILE_SCALE
                canvas.blit_scaled(
                    coin, col * reference.width, row * reference.height, scale, scale
                )
            elif tile == "N" and game.bonus:
                enemy = sprites.enemy[game.enemy_frame]
                reference = sprites.enemy[0]
                scale = 2 * TILE_SCALE
                canvas.blit_scaled(
                    enemy, col * reference.width, row * reference.height, scale, scale
                )
    player = sprites.player_left if game.facing_left else sprites.player_right
    canvas.blit(player, game.x, game.y)


def draw_move_count(canvas: Canvas, moves: int, digits: list[Sprite]) -> None:
    """Draw the move counter in the top-left corner with the digit sprites."""
    scale = 3 * TILE_SCALE
    for index, char in enumerate(str(moves)):
        digit = digits[int(char)]
        x = int(index * digit.width + digit.width * 0.5)
        y = int(digit.height * 0.25)
        canvas.blit_scaled(digit, x, y, scale, scale)