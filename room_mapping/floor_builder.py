"""
Drawing helpers for schematic floor grids.

Rectangles use half-open ranges: rows [r0, r1) and columns [c0, c1).
Writes that fall outside the grid are clipped.
"""

import numpy as np
from typing import Any, Dict, List, Optional, Tuple


def create_grid(rows: int, cols: int) -> np.ndarray:
    """Create an empty floor grid (every cell None)."""
    return np.full((rows, cols), None, dtype=object)


def _clip(lo: int, hi: int, size: int) -> slice:
    return slice(max(lo, 0), max(min(hi, size), 0))


def in_bounds(grid: np.ndarray, r: int, c: int) -> bool:
    rows, cols = grid.shape
    return 0 <= r < rows and 0 <= c < cols


def set_cell(grid: np.ndarray, r: int, c: int, value: Optional[str]) -> None:
    if in_bounds(grid, r, c):
        grid[r, c] = value


def fill_rect(grid: np.ndarray, r0: int, r1: int, c0: int, c1: int, value: Optional[str]) -> None:
    """Fill every cell of the rectangle."""
    rows, cols = grid.shape
    grid[_clip(r0, r1, rows), _clip(c0, c1, cols)] = value


def stroke_rect(grid: np.ndarray, r0: int, r1: int, c0: int, c1: int, value: Optional[str]) -> None:
    """Draw the one-cell outline of the rectangle."""
    for c in range(c0, c1):
        set_cell(grid, r0, c, value)
        set_cell(grid, r1 - 1, c, value)
    for r in range(r0, r1):
        set_cell(grid, r, c0, value)
        set_cell(grid, r, c1 - 1, value)


def add_room(
    grid: np.ndarray,
    r0: int,
    r1: int,
    c0: int,
    c1: int,
    room_type: str,
    wall: str = "B"
) -> None:
    """Draw a room: a wall ring around an interior of `room_type` cells."""
    stroke_rect(grid, r0, r1, c0, c1, wall)
    fill_rect(grid, r0 + 1, r1 - 1, c0 + 1, c1 - 1, room_type)


def carve_door(grid: np.ndarray, r: int, c: int, value: str = "G") -> None:
    """Open a wall cell into circulation space."""
    set_cell(grid, r, c, value)


def draw_shell(grid: np.ndarray, fill: str = "G", wall: str = "W") -> None:
    """Fill the whole floor with circulation and wrap it in an exterior wall."""
    rows, cols = grid.shape
    fill_rect(grid, 0, rows, 0, cols, fill)
    stroke_rect(grid, 0, rows, 0, cols, wall)


DEMO_ROWS = 40
DEMO_COLS = 60


def build_demo_floors() -> List[Dict[str, Any]]:
    """
    Build a small two-floor schematic building.

    Level 01 holds a classroom, a lab, three offices along the south wall and
    a stair. Level 02 holds a strip of four small offices, a conference room,
    an admin suite and the same stair. Every room opens onto one corridor.

    Returns:
        Floors in the {"label", "grid"} form read by the grid loader
    """
    first = create_grid(DEMO_ROWS, DEMO_COLS)
    draw_shell(first)
    add_room(first, 2, 12, 2, 20, "C")
    carve_door(first, 11, 10)
    add_room(first, 2, 12, 24, 44, "L")
    carve_door(first, 11, 33)
    for i in range(3):
        c0 = 2 + 12 * i
        add_room(first, 28, 38, c0, c0 + 12, "O")
        carve_door(first, 28, c0 + 6)
    add_room(first, 28, 34, 48, 56, "R")
    carve_door(first, 28, 52)

    second = create_grid(DEMO_ROWS, DEMO_COLS)
    draw_shell(second)
    for i in range(4):
        c0 = 2 + 8 * i
        add_room(second, 2, 8, c0, c0 + 8, "O")
        carve_door(second, 7, c0 + 4)
    add_room(second, 2, 12, 40, 56, "C")
    carve_door(second, 11, 48)
    add_room(second, 28, 38, 2, 20, "A")
    carve_door(second, 28, 10)
    add_room(second, 28, 34, 48, 56, "R")
    carve_door(second, 28, 52)

    return [
        {"label": "Level 01", "grid": first.tolist()},
        {"label": "Level 02", "grid": second.tolist()},
    ]


SC_ROWS = 120
SC_COLS = 150

# Row bands shared by the office wings
WEST_BANDS = [(24, 34), (34, 44), (44, 54), (54, 64)]
EAST_BANDS = [(74, 84), (84, 94), (94, 104)]


def add_office_band(
    grid: np.ndarray,
    bands: List[Tuple[int, int]],
    c0: int,
    c1: int,
    room_type: str = "O"
) -> None:
    """Stack rooms over the given row bands, each with a door in its east wall."""
    for r0, r1 in bands:
        add_room(grid, r0, r1, c0, c1, room_type)
        carve_door(grid, (r0 + r1) // 2, c1 - 1)


def draw_sc_footprint(grid: np.ndarray) -> None:
    """L-shaped shell: a west wing and a south wing with circulation spines."""
    fill_rect(grid, 16, 110, 16, 64, "G")
    fill_rect(grid, 62, 110, 16, 138, "G")
    stroke_rect(grid, 16, 110, 16, 64, "W")
    stroke_rect(grid, 62, 110, 16, 138, "W")

    fill_rect(grid, 64, 72, 20, 132, "G")
    fill_rect(grid, 20, 104, 36, 46, "G")
    fill_rect(grid, 52, 72, 46, 64, "G")


def add_sc_core(grid: np.ndarray) -> None:
    """Stairs at the north and south ends of the west wing and at the crossing."""
    add_room(grid, 22, 30, 24, 32, "R")
    add_room(grid, 92, 102, 24, 32, "R")
    add_room(grid, 66, 76, 52, 60, "R")
    carve_door(grid, 25, 32)
    carve_door(grid, 96, 32)
    carve_door(grid, 71, 52)


def _sc_floor() -> np.ndarray:
    grid = create_grid(SC_ROWS, SC_COLS)
    draw_sc_footprint(grid)
    add_sc_core(grid)
    return grid


def build_sc_basement() -> np.ndarray:
    grid = _sc_floor()

    # Auditorium 405 and lecture halls 401, 407, 409
    add_room(grid, 74, 108, 90, 134, "C")
    add_room(grid, 74, 92, 68, 88, "C")
    add_room(grid, 92, 108, 68, 88, "C")
    add_room(grid, 92, 108, 50, 66, "C")

    # Teaching labs 224-232
    add_room(grid, 30, 44, 18, 34, "L")
    add_room(grid, 44, 58, 18, 34, "L")
    add_room(grid, 30, 44, 46, 62, "L")
    add_room(grid, 44, 58, 46, 62, "L")
    add_room(grid, 58, 72, 46, 62, "L")

    # Server rooms
    add_room(grid, 74, 84, 20, 34, "A")
    add_room(grid, 84, 94, 20, 34, "A")
    add_room(grid, 74, 94, 34, 46, "A")

    return grid


def build_sc_first_floor() -> np.ndarray:
    grid = _sc_floor()

    add_room(grid, 76, 108, 94, 134, "C")
    add_room(grid, 76, 98, 70, 92, "C")
    add_room(grid, 84, 106, 20, 44, "C")

    # Student lounge and admin beside the lobby
    add_room(grid, 56, 74, 74, 92, "S")
    add_room(grid, 56, 74, 60, 74, "A")

    add_office_band(grid, WEST_BANDS, 18, 34)
    add_office_band(grid, WEST_BANDS, 46, 62)

    # Open lobby
    fill_rect(grid, 62, 76, 58, 86, "G")

    return grid


def build_sc_second_floor() -> np.ndarray:
    grid = _sc_floor()

    add_room(grid, 74, 98, 100, 126, "C")
    add_room(grid, 74, 88, 78, 98, "C")
    add_room(grid, 88, 102, 78, 98, "C")

    bands = WEST_BANDS + [(64, 74)]
    add_office_band(grid, bands, 18, 34)
    add_office_band(grid, bands, 46, 62)
    add_office_band(grid, EAST_BANDS, 126, 138)

    add_room(grid, 52, 66, 60, 74, "A")

    return grid


def build_sc_third_floor() -> np.ndarray:
    grid = _sc_floor()

    # Atrium, open to below
    fill_rect(grid, 62, 86, 56, 82, None)
    stroke_rect(grid, 62, 86, 56, 82, "B")

    bands = WEST_BANDS + [(86, 96), (96, 106)]
    add_office_band(grid, bands, 18, 34)
    add_office_band(grid, bands, 46, 62)
    add_office_band(grid, EAST_BANDS, 126, 138)
    add_room(grid, 74, 92, 98, 124, "C")

    return grid


def build_sc_fourth_floor() -> np.ndarray:
    grid = _sc_floor()

    bands = WEST_BANDS + [(64, 74), (86, 96), (96, 106)]
    add_office_band(grid, bands, 18, 34)
    add_office_band(grid, bands, 46, 62)
    add_office_band(grid, EAST_BANDS, 126, 138)

    add_room(grid, 74, 90, 98, 124, "C")
    add_room(grid, 90, 106, 98, 124, "C")

    return grid


SC_FLOORS = [
    ("Basement", build_sc_basement),
    ("First Floor", build_sc_first_floor),
    ("Second Floor", build_sc_second_floor),
    ("Third Floor", build_sc_third_floor),
    ("Fourth Floor", build_sc_fourth_floor),
]


def build_sc_floors() -> List[Dict[str, Any]]:
    """
    Build the five schematic Siebel Center floors (Basement to Fourth Floor).

    Every floor shares the L-shaped shell and the three stair cores; later
    rooms are drawn over earlier ones, so some stairs are cut down to a
    sliver by the office bands.

    Returns:
        Floors in the {"label", "grid"} form read by the grid loader
    """
    return [{"label": label, "grid": build().tolist()} for label, build in SC_FLOORS]
