"""
Flood fill algorithm for region segmentation.

This module implements connected-component labeling over a floor grid:
1. Scans cells in row-major order
2. Skips visited cells and boundary codes (walls, outlines, empty cells)
3. Grows each remaining cell into a maximal same-type region using an
   iterative 4-connected flood fill
4. Computes cell count, centroid and bounding box per region
5. Sorts regions top-to-bottom, left-to-right by centroid
"""

import math
import numpy as np
from typing import Iterable, List, Optional, Set, Tuple, Union

from .types import BBox, Cell, GridFormatError, Region
from .grid_loader import FloorGrid


# Up, down, left, right. No diagonal merging.
NEIGHBOR_OFFSETS = ((-1, 0), (1, 0), (0, -1), (0, 1))

DEFAULT_BOUNDARY_CODES = ("W", "B", None)

CENTROID_DECIMALS = 1


def round_half_up(value: float, decimals: int = CENTROID_DECIMALS) -> float:
    """Round to a fixed number of decimals with halves going up."""
    factor = 10 ** decimals
    return math.floor(value * factor + 0.5) / factor


def _as_cell_array(grid: Union[FloorGrid, np.ndarray]) -> np.ndarray:
    if isinstance(grid, FloorGrid):
        return grid.cells
    cells = np.asarray(grid, dtype=object)
    if cells.size == 0:
        return np.empty((0, 0), dtype=object)
    if cells.ndim != 2:
        raise GridFormatError(f"Grid must be 2D, got shape {cells.shape}")
    return cells


def flood_fill_region(
    cells: np.ndarray,
    visited: np.ndarray,
    start_r: int,
    start_c: int
) -> Tuple[str, List[Cell]]:
    """
    Collect every cell 4-connected to the start cell that shares its type.

    Marks each collected cell in `visited`. Cells are returned in the order
    they are popped from the stack.

    Args:
        cells: 2D object array of type codes
        visited: Boolean array of the same shape, updated in place
        start_r: Row of the seed cell
        start_c: Column of the seed cell

    Returns:
        Tuple of (type code, list of (row, col) cells)
    """
    rows, cols = cells.shape
    cell_type = cells[start_r, start_c]

    region_cells = []
    stack = [(start_r, start_c)]
    visited[start_r, start_c] = True

    while stack:
        r, c = stack.pop()
        region_cells.append((r, c))

        for dr, dc in NEIGHBOR_OFFSETS:
            nr, nc = r + dr, c + dc
            if nr < 0 or nr >= rows or nc < 0 or nc >= cols:
                continue
            if visited[nr, nc]:
                continue
            if cells[nr, nc] != cell_type:
                continue
            visited[nr, nc] = True
            stack.append((nr, nc))

    return cell_type, region_cells


def summarize_region(cell_type: str, region_cells: List[Cell]) -> Region:
    """
    Compute centroid and bounding box for a list of cells.

    The centroid is the mean row and mean column, each rounded to one decimal.
    """
    coords = np.array(region_cells, dtype=np.int64)

    mean_r, mean_c = coords.mean(axis=0)
    min_r, min_c = coords.min(axis=0)
    max_r, max_c = coords.max(axis=0)

    return Region(
        type=cell_type,
        cells=region_cells,
        centroid=(round_half_up(float(mean_r)), round_half_up(float(mean_c))),
        bbox=BBox(min_r=int(min_r), max_r=int(max_r), min_c=int(min_c), max_c=int(max_c)),
    )


def sort_regions(regions: List[Region]) -> List[Region]:
    """Order regions by centroid row, then column. Stable for equal centroids."""
    return sorted(regions, key=lambda reg: (reg.centroid[0], reg.centroid[1]))


def segment_floor(
    grid: Union[FloorGrid, np.ndarray],
    boundary_codes: Optional[Iterable[Optional[str]]] = None
) -> List[Region]:
    """
    Partition every non-boundary cell of a floor into maximal same-type regions.

    Args:
        grid: FloorGrid or 2D array of type codes
        boundary_codes: Codes that never form regions (defaults to wall,
            outline and empty)

    Returns:
        List of Region sorted by centroid (row, then column)
    """
    cells = _as_cell_array(grid)
    boundary: Set[Optional[str]] = set(
        DEFAULT_BOUNDARY_CODES if boundary_codes is None else boundary_codes
    )

    rows, cols = cells.shape
    visited = np.zeros((rows, cols), dtype=bool)

    regions = []

    for r in range(rows):
        for c in range(cols):
            if visited[r, c]:
                continue
            if cells[r, c] in boundary:
                visited[r, c] = True
                continue

            cell_type, region_cells = flood_fill_region(cells, visited, r, c)
            regions.append(summarize_region(cell_type, region_cells))

    return sort_regions(regions)
