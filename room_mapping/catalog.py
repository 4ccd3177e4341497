"""
Region catalog: per-floor segmentation results and their JSON form.
"""

import json
from typing import Any, List, Optional
from pathlib import Path

from .types import CatalogFormatError, FloorRegions, Region
from .config import RoomMappingConfig
from .grid_loader import FloorGrid
from .flood_fill import segment_floor


def build_catalog(
    floors: List[FloorGrid],
    config: Optional[RoomMappingConfig] = None,
    verbose: bool = True
) -> List[FloorRegions]:
    """
    Segment every floor in order.

    Args:
        floors: Loaded floor grids
        config: Room mapping configuration (uses defaults if None)
        verbose: Print a region summary per floor

    Returns:
        One FloorRegions per floor, index-aligned with `floors`
    """
    if config is None:
        config = RoomMappingConfig()

    catalog = []

    for floor in floors:
        regions = segment_floor(floor, config.boundary_codes)
        catalog.append(FloorRegions(
            label=floor.label,
            grid_size=floor.shape,
            regions=regions
        ))

        if verbose:
            print(f"{floor.label}: {len(regions)} regions")
            for reg in regions:
                b = reg.bbox
                print(f"  {reg.type} cells={reg.cell_count} "
                      f"centroid=[{reg.centroid[0]},{reg.centroid[1]}] "
                      f"bbox=[{b.min_r}-{b.max_r}, {b.min_c}-{b.max_c}]")

    return catalog


def catalog_to_json(catalog: List[FloorRegions]) -> List[dict]:
    """Serialize the catalog; `floor` is the position of the floor in the source."""
    return [{
        "floor": index,
        "label": floor.label,
        "gridSize": [floor.grid_size[0], floor.grid_size[1]],
        "regionCount": floor.region_count,
        "regions": [reg.to_dict() for reg in floor.regions],
    } for index, floor in enumerate(catalog)]


def catalog_from_json(data: Any) -> List[FloorRegions]:
    """
    Parse a serialized catalog back into FloorRegions.

    Region order is kept as written.

    Raises:
        CatalogFormatError: If an entry is missing fields or malformed
    """
    if not isinstance(data, list):
        raise CatalogFormatError("Region catalog must be a list of floors")

    catalog = []

    for index, entry in enumerate(data):
        try:
            rows, cols = entry["gridSize"]
            regions = [Region.from_dict(reg) for reg in entry["regions"]]
            floor = FloorRegions(
                label=str(entry.get("label", f"Floor {index}")),
                grid_size=(int(rows), int(cols)),
                regions=regions
            )
        except (KeyError, TypeError, ValueError) as e:
            raise CatalogFormatError(f"Catalog floor {index} is malformed: {e}") from e

        if "regionCount" in entry and entry["regionCount"] != floor.region_count:
            raise CatalogFormatError(
                f"Catalog floor {index}: regionCount {entry['regionCount']} "
                f"does not match {floor.region_count} regions"
            )

        catalog.append(floor)

    return catalog


def load_catalog(regions_path: str) -> List[FloorRegions]:
    """Read a region catalog file written by the identify stage."""
    path = Path(regions_path)
    if not path.exists():
        raise CatalogFormatError(f"Region catalog not found: {regions_path}")

    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        raise CatalogFormatError(f"Could not read region catalog {regions_path}: {e}") from e

    return catalog_from_json(data)
