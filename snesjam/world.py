"""The overworld: walking the map, entering cities and the city menu."""

from __future__ import annotations

import enum

from snesjam.entities import (
    CANVAS_MAX_X,
    CANVAS_MAX_Y,
    PLAYER_MID_X,
    PLAYER_MID_Y,
    SCREEN_HEIGHT_HALF,
    SCREEN_WIDTH_HALF,
    TILE_SIZE,
    U8_MAX,
    WORLD_SIZE,
    WORLD_TILE_LENGTH,
    City,
    Entity,
    Package,
)

PLAYER_SPEED_TREE = 1
PLAYER_SPEED_GRASS = 2
PLAYER_SPEED_ROAD = 5
CITY_TILE = U8_MAX

CITY_COUNT = 5
CITY_SITES = (
    ("Aenra", 1, 12),
    ("Bear", 10, 1),
    ("Soorn", 4, 30),
    ("Dekrak", 30, 1),
    ("Trek Vaek", 30, 12),
)

CONSOLE_COLUMNS = 32
CONSOLE_ROWS = 32

MENU_COLUMN = 10
MENU_ROWS = (20, 22, 24)
CITY_NAME_ROW = 6
DEBUG_COLUMN = 1
DEBUG_ROWS = (20, 22, 24, 26)
_BLANK = " " * 33

# 0 road, 1 grass, 3 water, 4 city, 6 trees.
_COLLISION_ROWS = (
    "11111111100011111113331166111000",
    "11111661004011111113331166111040",
    "11111661000011111113331666110000",
    "11116661000116111133331666110000",
    "11116661000166611133331666110000",
    "11166611000166661133331661110000",
    "16666111000666661133331661110001",
    "16666110000666661133331661100011",
    "66661110000666661133331111100011",
    "66111110000166661133311110000000",
    "11111110000166611333310000000000",
    "00000000000000000333300000000000",
    "04000000000000000333300000000040",
    "00000000000000000333300000000000",
    "11111000000000000333310000000000",
    "66111000111000001333311111111111",
    "66611000111666111333311166611111",
    "66611000166666661333311666666111",
    "66610000116666611333311616666611",
    "66110000116666613333111666666611",
    "66110000116666613333111666666611",
    "66110000111666613333111666666661",
    "11100000111666113333111166666661",
    "11100001111666113333111166666661",
    "11100001111111113333111166666661",
    "11100001111611113331111116666661",
    "66100011116611113331111111666611",
    "66100011166611113331111661166111",
    "66100011166661113331116661111111",
    "11100011166661113331116666111111",
    "11004011166661133331116666611111",
    "11000011166661133331116666611111",
)
_COLLISIONS = tuple(int(cell) for row in _COLLISION_ROWS for cell in row)

_TERRAIN_SPEED = {
    0: PLAYER_SPEED_ROAD,
    1: PLAYER_SPEED_GRASS,
    6: PLAYER_SPEED_TREE,
    4: CITY_TILE,
}


class Keys(enum.IntFlag):
    """Joypad buttons."""

    A = 0x0080
    RIGHT = 0x0100
    LEFT = 0x0200
    DOWN = 0x0400
    UP = 0x0800


def get_speed(arr_x: int, arr_y: int) -> int:
    """Walking speed on a tile; 0 means blocked, CITY_TILE means a city."""
    if not (0 <= arr_x < WORLD_TILE_LENGTH and 0 <= arr_y < WORLD_TILE_LENGTH):
        raise ValueError(f"tile ({arr_x}, {arr_y}) is outside the world")
    terrain = _COLLISIONS[arr_y * WORLD_TILE_LENGTH + arr_x]
    return _TERRAIN_SPEED.get(terrain, 0)


class Console:
    """A fixed grid of text cells."""

    def __init__(self, columns: int = CONSOLE_COLUMNS, rows: int = CONSOLE_ROWS) -> None:
        self.columns = columns
        self.rows = rows
        self._cells = [[" "] * columns for _ in range(rows)]

    def _check(self, x: int, y: int) -> None:
        if not (0 <= x < self.columns and 0 <= y < self.rows):
            raise ValueError(f"cell ({x}, {y}) is outside the console")

    def draw_text(self, x: int, y: int, text: str) -> None:
        """Write text from a cell rightwards, cut at the right edge."""
        self._check(x, y)
        row = self._cells[y]
        for column, char in enumerate(text[: self.columns - x], start=x):
            row[column] = char

    def text_at(self, x: int, y: int) -> str:
        """Text from a cell to the end of its row, without trailing blanks."""
        self._check(x, y)
        return "".join(self._cells[y][x:]).rstrip()


def _follow(position: int, half: int, limit: int, middle: int) -> tuple[int, int]:
    """Camera offset and on-screen sprite position along one axis."""
    camera = position - half
    if camera < 0:
        return 0, middle + camera
    if camera > limit:
        return limit, middle + camera - limit
    return camera, middle


class World:
    """The state of the overworld and its city menu, advanced one frame at a time."""

    def __init__(self, console: Console | None = None) -> None:
        self.console = console if console is not None else Console()
        start = WORLD_SIZE // 2
        self.player_x = start
        self.player_y = start
        self.player = Entity(0, start, start)
        self.cities = [City(name, x, y) for name, x, y in CITY_SITES]
        self.player_speed = PLAYER_SPEED_ROAD
        self.current_city: int | None = None
        self.menu_index = 0
        self.last_pad = 0
        self.current_package: Package | None = None
        self.can_get_package = True
        self.can_deliver_package = True
        self.scroll = (0, 0)
        self.sprites: dict[int, tuple[int, int]] = {}

    def set_scroll(self, pad: int, force_render: bool = False) -> None:
        """Advance one frame with the given pad state."""
        pad = int(pad)
        if self.current_city is not None:
            self._render_menu(pad)
            return

        last_x, last_y = self.player_x, self.player_y
        speed = self.player_speed
        moved = False

        if pad & Keys.UP:
            self.player_y = max(self.player_y - speed, TILE_SIZE)
            moved = True
        elif pad & Keys.DOWN:
            self.player_y = min(self.player_y + speed, WORLD_SIZE - 1)
            moved = True
        if pad & Keys.RIGHT:
            self.player_x = min(self.player_x + speed, WORLD_SIZE - 1)
            moved = True
        elif pad & Keys.LEFT:
            self.player_x = max(self.player_x - speed, TILE_SIZE)
            moved = True

        if not moved and not force_render:
            return

        arr_x = self.player_x // TILE_SIZE
        arr_y = self.player_y // TILE_SIZE
        new_speed = get_speed(arr_x, arr_y)

        if new_speed == CITY_TILE:
            self._enter_city(arr_x, arr_y)
            self.player_x, self.player_y = last_x, last_y
            for row in DEBUG_ROWS:
                self.console.draw_text(DEBUG_COLUMN, row, _BLANK)
            return
        if new_speed == 0:
            self.player_x, self.player_y = last_x, last_y
            return

        self.player_speed = new_speed

        camera_x, self.player.x = _follow(
            self.player_x, SCREEN_WIDTH_HALF, CANVAS_MAX_X, PLAYER_MID_X
        )
        camera_y, self.player.y = _follow(
            self.player_y, SCREEN_HEIGHT_HALF, CANVAS_MAX_Y, PLAYER_MID_Y
        )

        lines = (
            f"Global: {self.player_x} ; {self.player_y}     ",
            f"Local: {self.player.x} ; {self.player.y}     ",
            f"Camera: {camera_x} ; {camera_y}     ",
            f"Grid: {arr_x} ; {arr_y}     ",
        )
        for row, line in zip(DEBUG_ROWS, lines):
            self.console.draw_text(DEBUG_COLUMN, row, line)

        self.scroll = (camera_x, camera_y)
        self.player.draw(self.sprites)

    def _enter_city(self, arr_x: int, arr_y: int) -> None:
        for index, city in enumerate(self.cities):
            if (city.x, city.y) == (arr_x, arr_y):
                self.console.draw_text(MENU_COLUMN, CITY_NAME_ROW, city.welcome_text())
                self.current_city = index
                self.menu_index = 0
                self.last_pad = 0
                return
        self.console.draw_text(MENU_COLUMN, CITY_NAME_ROW, "Unknown city found")

    def _clear_menu(self) -> None:
        for row in (*MENU_ROWS, CITY_NAME_ROW):
            self.console.draw_text(MENU_COLUMN, row, _BLANK)

    def _render_menu(self, pad: int) -> None:
        pressed = pad & ~self.last_pad
        if pressed & Keys.DOWN:
            self.menu_index = (self.menu_index + 1) % 3
        elif pressed & Keys.UP:
            self.menu_index = (self.menu_index - 1) % 3
        elif pressed & Keys.A:
            if self.menu_index == 0 and self.can_get_package:
                self.current_package = Package(
                    self.current_city, (self.player_x * self.player_y) % CITY_COUNT
                )
                self._clear_menu()
            elif self.menu_index == 2:
                self._clear_menu()
                self.current_city = None
                return
        self.last_pad = pad

        marks = [">" if entry == self.menu_index else " " for entry in range(3)]
        city = self.cities[self.current_city]
        package = self.current_package

        if city.available_packages == 0:
            line = f"{marks[0]}No package available"
            self.can_get_package = False
        elif package is not None:
            line = f"{marks[0]}Already have package"
            self.can_get_package = False
        else:
            line = f"{marks[0]}Get a package"
            self.can_get_package = True
        self.console.draw_text(MENU_COLUMN, MENU_ROWS[0], line)

        if package is None:
            line = f"{marks[1]}Nothing to deliver"
            self.can_deliver_package = False
        elif package.destination != self.current_city:
            target = self.cities[package.destination]
            line = f"{marks[1]}Deliver to {target.name}"
            self.can_deliver_package = False
        else:
            line = f"{marks[1]}Deliver a package"
            self.can_deliver_package = True
        self.console.draw_text(MENU_COLUMN, MENU_ROWS[1], line)

        self.console.draw_text(MENU_COLUMN, MENU_ROWS[2], f"{marks[2]}Leave")