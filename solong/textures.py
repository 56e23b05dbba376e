"""Loading the game's images from disk into sprites."""

from __future__ import annotations

from os import PathLike
from pathlib import Path

import numpy as np
import pygame

from solong.game import GameOver
from solong.render import TRANSPARENT, Sprite, SpriteSet

BACKGROUND = "textures/background/background.xpm"
WALL = "textures/background/wall.xpm"
PLAYER_TO_RIGHT = "textures/player/player_to_right.xpm"
PLAYER_TO_LEFT = "textures/player/player_to_left.xpm"
EXIT = "textures/exit/closed_door.xpm"
OPEN_DOOR = "textures/exit/open_door.xpm"
DIGITS = tuple(f"textures/numbers/{digit}.xpm" for digit in range(10))
COINS = tuple(f"textures/collectibles/coin{frame:02d}.xpm" for frame in range(6))
ENEMY = tuple(f"textures/enemy/enemy{frame:02d}.xpm" for frame in range(8))
COLLECTIBLE = COINS[0]


def sprite_from_surface(surface: pygame.Surface) -> Sprite:
    """Turn a pygame surface into a sprite of 0x00RRGGBB pixels.

    Fully transparent pixels, and pixels of the surface's colour key,
    become the transparent colour.
    """
    width, height = surface.get_size()
    raw = pygame.image.tobytes(surface, "RGBA")
    rgba = np.frombuffer(raw, dtype=np.uint8).reshape(height, width, 4).astype(np.uint32)
    red, green, blue, alpha = rgba[..., 0], rgba[..., 1], rgba[..., 2], rgba[..., 3]
    pixels = (red << 16) | (green << 8) | blue
    hidden = alpha == 0
    key = surface.get_colorkey()
    if key is not None:
        hidden |= (red == key[0]) & (green == key[1]) & (blue == key[2])
    pixels[hidden] = TRANSPARENT
    return Sprite(pixels)


def load_sprite(path: str | PathLike[str]) -> Sprite:
    """Load the image file at ``path``; a missing or unreadable file ends the game."""
    try:
        surface = pygame.image.load(str(path))
    except (OSError, pygame.error) as exc:
        raise GameOver(2, f"The file [{path}] doesn't exist!") from exc
    return sprite_from_surface(surface)


def load_sprites(bonus: bool = False, root: str | PathLike[str] = ".") -> SpriteSet:
    """Load every image the game needs from the ``textures`` tree under ``root``."""
    base = Path(root)

    def load(relative: str) -> Sprite:
        return load_sprite(base / relative)

    background = load(BACKGROUND)
    wall = load(WALL)
    player_right = load(PLAYER_TO_RIGHT)
    player_left = load(PLAYER_TO_LEFT)
    if not bonus:
        collectible = load(COLLECTIBLE)
        return SpriteSet(
            background=background,
            wall=wall,
            player_right=player_right,
            player_left=player_left,
            collectible=collectible,
            exit=load(EXIT),
            open_door=load(OPEN_DOOR),
        )
    exit_door = load(EXIT)
    open_door = load(OPEN_DOOR)
    digits = [load(path) for path in DIGITS]
    coins = [load(path) for path in COINS]
    enemy = [load(path) for path in ENEMY]
    return SpriteSet(
        background=background,
        wall=wall,
        player_right=player_right,
        player_left=player_left,
        exit=exit_door,
        open_door=open_door,
        digits=digits,
        coins=coins,
        enemy=enemy,
    )