"""Game objects of the delivery world: cities, sprites and packages."""

from __future__ import annotations

from collections.abc import MutableMapping
from dataclasses import dataclass

# Size of the visible screen, in pixels.
SCREEN_WIDTH = 256
SCREEN_HEIGHT = 224
SCREEN_WIDTH_HALF = SCREEN_WIDTH // 2
SCREEN_HEIGHT_HALF = SCREEN_HEIGHT // 2

# Size of the world tilemap.
WORLD_SIZE = 512
TILE_SIZE = 16
WORLD_TILE_LENGTH = WORLD_SIZE // TILE_SIZE
WORLD_TILE_SIZE = WORLD_TILE_LENGTH * WORLD_TILE_LENGTH

# Furthest the camera may scroll.
CANVAS_MAX_X = WORLD_SIZE - SCREEN_WIDTH
CANVAS_MAX_Y = WORLD_SIZE - SCREEN_HEIGHT

# On-screen position of the player sprite while the camera follows it.
PLAYER_MID_X = SCREEN_WIDTH_HALF - TILE_SIZE
PLAYER_MID_Y = SCREEN_HEIGHT_HALF - TILE_SIZE

U8_MAX = 255

WELCOME_PREFIX = "Welcome in "


@dataclass
class City:
    """A city on the world grid, given in tile coordinates."""

    name: str
    x: int
    y: int
    available_packages: int = 1

    def welcome_text(self) -> str:
        """The greeting shown when the player arrives."""
        return WELCOME_PREFIX + self.name


@dataclass
class Entity:
    """A sprite with an object slot and a screen position."""

    id: int
    x: int
    y: int

    def draw(self, sprites: MutableMapping[int, tuple[int, int]]) -> None:
        """Place the sprite into its slot of the sprite table."""
        sprites[self.id] = (self.x, self.y)


@dataclass(frozen=True)
class Package:
    """A package travelling between two cities, given by city index."""

    source: int
    destination: int