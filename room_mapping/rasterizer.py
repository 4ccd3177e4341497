"""
Rasterization of bound rooms into per-cell room-id grids.
"""

import numpy as np
from typing import Any, Dict, List, Optional, Tuple

from .types import FloorRooms, RasterizeError, Room, RoomOverlapError
from .assigner import warn


def rasterize_rooms(
    rooms: List[Room],
    grid_size: Tuple[int, int],
    on_overlap: str = "error"
) -> np.ndarray:
    """
    Paint room ids onto an empty grid.

    Args:
        rooms: Bound rooms for one floor, each carrying its cells
        grid_size: (rows, cols) of the source floor
        on_overlap: "error" raises RoomOverlapError when a cell is claimed by
            two different rooms; "warn" prints a warning and the later room wins

    Returns:
        2D object array holding a room id or None per cell
    """
    rows, cols = grid_size
    grid = np.full((rows, cols), None, dtype=object)

    for room in rooms:
        clashes = set()
        for r, c in room.cells:
            if r < 0 or r >= rows or c < 0 or c >= cols:
                raise RasterizeError(
                    f"Room {room.id} cell ({r}, {c}) is outside the {rows}x{cols} grid"
                )
            owner = grid[r, c]
            if owner is not None and owner != room.id:
                if on_overlap == "error":
                    raise RoomOverlapError(
                        f"Room {room.id} overlaps room {owner} at cell ({r}, {c})"
                    )
                clashes.add(owner)
            grid[r, c] = room.id

        if clashes:
            warn(f"room {room.id} overwrote cells of {', '.join(sorted(clashes))}")

    return grid


def rasterize_floors(
    floors: List[FloorRooms],
    on_overlap: str = "error"
) -> List[np.ndarray]:
    """Rasterize every floor, keeping floor order."""
    return [rasterize_rooms(floor.rooms, floor.grid_size, on_overlap) for floor in floors]


def room_at(grid: np.ndarray, row: int, col: int) -> Optional[str]:
    """Room id covering a cell, or None for unassigned or out-of-range cells."""
    rows, cols = grid.shape
    if row < 0 or row >= rows or col < 0 or col >= cols:
        return None
    return grid[row, col]


def room_map_to_json(floors: List[FloorRooms]) -> Dict[str, Any]:
    """Room metadata artifact. Cell lists are left out."""
    return {
        "floors": [{
            "label": floor.label,
            "rooms": [room.to_dict() for room in floor.rooms],
        } for floor in floors]
    }


def room_ids_to_json(grids: List[np.ndarray]) -> Dict[str, Any]:
    """Room-id lookup artifact, index-aligned with the room map floors."""
    return {"roomGrids": [grid.tolist() for grid in grids]}
