"""
Floor grid loading for JSON floor sources.
"""

import json
import numpy as np
from typing import Any, Dict, List, Optional, Tuple
from pathlib import Path

from .types import GridFormatError


class FloorGrid:
    """Container for one floor's immutable grid of type codes."""

    def __init__(self, label: str, cells: np.ndarray):
        """
        Initialize FloorGrid.

        Args:
            label: Display name of the floor (e.g. "Level 01")
            cells: 2D object array holding a type code or None per cell
        """
        if cells.ndim != 2:
            raise GridFormatError(f"Floor '{label}': grid must be 2D, got {cells.ndim}D")
        self.label = label
        self.cells = cells
        self.cells.flags.writeable = False

    @property
    def shape(self) -> Tuple[int, int]:
        """Grid dimensions as (rows, cols)."""
        return (int(self.cells.shape[0]), int(self.cells.shape[1]))

    def cell(self, row: int, col: int) -> Optional[str]:
        """Get the type code at a cell, or None when the cell is empty."""
        return self.cells[row, col]

    def to_dict(self) -> Dict[str, Any]:
        return {"label": self.label, "grid": self.cells.tolist()}


def grid_from_rows(rows: List[List[Optional[str]]], label: str = "") -> np.ndarray:
    """
    Convert nested row lists into a 2D object array.

    Raises:
        GridFormatError: If rows are not lists, have unequal lengths or hold
            values other than strings and None
    """
    if not isinstance(rows, list):
        raise GridFormatError(f"Floor '{label}': grid must be a list of rows")

    n_rows = len(rows)
    n_cols = len(rows[0]) if n_rows > 0 and isinstance(rows[0], list) else 0

    cells = np.empty((n_rows, n_cols), dtype=object)

    for r, row in enumerate(rows):
        if not isinstance(row, list):
            raise GridFormatError(f"Floor '{label}': row {r} is not a list")
        if len(row) != n_cols:
            raise GridFormatError(
                f"Floor '{label}': row {r} has {len(row)} cells, expected {n_cols}"
            )
        for c, value in enumerate(row):
            if value is not None and not isinstance(value, str):
                raise GridFormatError(
                    f"Floor '{label}': cell ({r}, {c}) holds {value!r}, "
                    f"expected a type code or null"
                )
            cells[r, c] = value

    return cells


def parse_floor_grids(data: Any) -> List[FloorGrid]:
    """
    Build FloorGrid objects from a decoded floors document.

    Args:
        data: Decoded JSON of the form {"floors": [{"label", "grid"}, ...]}

    Returns:
        List of FloorGrid in document order
    """
    if not isinstance(data, dict) or not isinstance(data.get("floors"), list):
        raise GridFormatError("Floor source must be an object with a 'floors' list")

    floors = []
    for index, floor in enumerate(data["floors"]):
        if not isinstance(floor, dict) or "grid" not in floor:
            raise GridFormatError(f"Floor {index} has no 'grid'")
        label = str(floor.get("label", f"Floor {index}"))
        floors.append(FloorGrid(label, grid_from_rows(floor["grid"], label)))

    return floors


def load_floor_grids(floors_path: str, verbose: bool = True) -> List[FloorGrid]:
    """
    Load a floors JSON file and return one FloorGrid per floor.

    Args:
        floors_path: Path to the floors JSON file
        verbose: Print a per-floor summary

    Returns:
        List of FloorGrid in file order
    """
    path = Path(floors_path)
    if not path.exists():
        raise GridFormatError(f"Floor file not found: {floors_path}")

    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        raise GridFormatError(f"Could not read floor file {floors_path}: {e}") from e

    floors = parse_floor_grids(data)

    if verbose:
        print(f"Loaded {len(floors)} floor(s) from {path.name}")
        for floor in floors:
            rows, cols = floor.shape
            print(f"  {floor.label}: {rows}x{cols} grid")

    return floors
