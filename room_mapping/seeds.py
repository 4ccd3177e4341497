"""
Room seed files.

Seeds are hand-curated and kept as data rather than code. A seed file looks
like:

    {
      "floors": [
        {
          "label": "First Floor",
          "rooms": [
            {"id": "1404", "name": "Lecture Hall", "type": "C",
             "centroid": [92, 112], "minCells": 600},
            {"name": "Research Office", "type": "G",
             "bbox": {"minR": 0, "maxR": 25, "minC": 95, "maxC": 180},
             "minCells": 5, "maxCells": 100, "idSequence": ["2038", "2040"]}
          ]
        }
      ]
    }

Entries with a "bbox" are area seeds; all others are single-room seeds.
"ids" is accepted in place of "idSequence", and "name" may be omitted.
Floors line up with the region catalog by position.
"""

import json
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional
from pathlib import Path

from .types import AreaSeed, BBox, RoomSeed, SeedEntry, SeedFormatError
from .config import RoomMappingConfig
from .assigner import AREA_ORDERS


@dataclass
class FloorSeeds:
    """Ordered seed entries for one floor."""
    label: Optional[str] = None
    entries: List[SeedEntry] = field(default_factory=list)


def _require(entry: Dict[str, Any], key: str, where: str) -> Any:
    if key not in entry:
        raise SeedFormatError(f"{where}: missing '{key}'")
    return entry[key]


def _parse_point(value: Any, where: str):
    if not isinstance(value, (list, tuple)) or len(value) != 2:
        raise SeedFormatError(f"{where}: centroid must be [row, col]")
    try:
        return (float(value[0]), float(value[1]))
    except (TypeError, ValueError) as e:
        raise SeedFormatError(f"{where}: centroid must be numeric") from e


def _parse_bbox(value: Any, where: str) -> BBox:
    if not isinstance(value, dict):
        raise SeedFormatError(f"{where}: bbox must be an object")
    try:
        bbox = BBox(
            min_r=float(value["minR"]),
            max_r=float(value["maxR"]),
            min_c=float(value["minC"]),
            max_c=float(value["maxC"]),
        )
    except KeyError as e:
        raise SeedFormatError(f"{where}: bbox is missing {e}") from e
    except (TypeError, ValueError) as e:
        raise SeedFormatError(f"{where}: bbox values must be numeric") from e

    # Single-row or single-column windows are allowed; edges are inclusive
    if bbox.min_r > bbox.max_r or bbox.min_c > bbox.max_c:
        raise SeedFormatError(f"{where}: bbox must have minR <= maxR and minC <= maxC")
    return bbox


def parse_room_seed(entry: Dict[str, Any], config: RoomMappingConfig, where: str) -> RoomSeed:
    seed = RoomSeed(
        id=str(_require(entry, "id", where)),
        name=str(entry.get("name", "")),
        type=str(_require(entry, "type", where)),
        centroid=_parse_point(_require(entry, "centroid", where), where),
        min_cells=int(entry.get("minCells", config.default_min_cells)),
        max_dist=float(entry.get("maxDist", config.default_max_dist)),
    )
    if seed.min_cells < 1:
        raise SeedFormatError(f"{where}: minCells must be at least 1")
    if seed.max_dist < 0:
        raise SeedFormatError(f"{where}: maxDist must be non-negative")
    return seed


def parse_area_seed(entry: Dict[str, Any], config: RoomMappingConfig, where: str) -> AreaSeed:
    key = "idSequence" if "idSequence" in entry or "ids" not in entry else "ids"
    ids = _require(entry, key, where)
    if not isinstance(ids, list) or not ids:
        raise SeedFormatError(f"{where}: {key} must be a non-empty list")

    max_cells = entry.get("maxCells")
    seed = AreaSeed(
        name=str(entry.get("name", "")),
        type=str(_require(entry, "type", where)),
        bbox=_parse_bbox(entry["bbox"], where),
        ids=[str(room_id) for room_id in ids],
        min_cells=int(entry.get("minCells", config.area_min_cells)),
        max_cells=None if max_cells is None else int(max_cells),
        order=str(entry.get("order", "col")),
    )
    if seed.order not in AREA_ORDERS:
        raise SeedFormatError(f"{where}: order must be one of {AREA_ORDERS}")
    if seed.max_cells is not None and seed.max_cells < seed.min_cells:
        raise SeedFormatError(f"{where}: maxCells is below minCells")
    return seed


def parse_seed_file(
    data: Any,
    config: Optional[RoomMappingConfig] = None
) -> List[FloorSeeds]:
    """
    Build per-floor seed lists from a decoded seed document.

    Raises:
        SeedFormatError: On missing keys or invalid values
    """
    if config is None:
        config = RoomMappingConfig()

    if not isinstance(data, dict) or not isinstance(data.get("floors"), list):
        raise SeedFormatError("Seed file must be an object with a 'floors' list")

    floors = []
    for fi, floor in enumerate(data["floors"]):
        if not isinstance(floor, dict) or not isinstance(floor.get("rooms", []), list):
            raise SeedFormatError(f"Seed floor {fi} must be an object with a 'rooms' list")

        entries = []
        for ri, entry in enumerate(floor.get("rooms", [])):
            where = f"floor {fi} entry {ri}"
            if not isinstance(entry, dict):
                raise SeedFormatError(f"{where}: must be an object")
            try:
                if "bbox" in entry:
                    entries.append(parse_area_seed(entry, config, where))
                else:
                    entries.append(parse_room_seed(entry, config, where))
            except (TypeError, ValueError) as e:
                raise SeedFormatError(f"{where}: {e}") from e

        label = floor.get("label")
        floors.append(FloorSeeds(label=None if label is None else str(label), entries=entries))

    return floors


def load_seed_file(
    seeds_path: str,
    config: Optional[RoomMappingConfig] = None
) -> List[FloorSeeds]:
    """Read and parse a seed JSON file."""
    path = Path(seeds_path)
    if not path.exists():
        raise SeedFormatError(f"Seed file not found: {seeds_path}")

    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        raise SeedFormatError(f"Could not read seed file {seeds_path}: {e}") from e

    return parse_seed_file(data, config)
