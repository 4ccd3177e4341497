"""
Room mapping pipeline - main algorithm entry point.

This module provides the high-level functions that run the two stages:
identify (floor grids -> region catalog) and map (region catalog + room
seeds -> room map and room-id grids). Outputs are written only after every
floor has been computed.
"""

from dataclasses import dataclass, field
from typing import List, Optional
from pathlib import Path
import time

import numpy as np

from .types import FloorRegions, FloorRooms, SeedFormatError
from .config import RoomMappingConfig
from .grid_loader import load_floor_grids
from .catalog import build_catalog, catalog_to_json, load_catalog
from .seeds import FloorSeeds, load_seed_file
from .assigner import assign_floor
from .rasterizer import rasterize_floors, room_ids_to_json, room_map_to_json
from .export import write_artifacts


REGIONS_FILENAME = "room-regions.json"
ROOM_MAP_FILENAME = "room-map.json"
ROOM_IDS_FILENAME = "room-ids.json"


@dataclass
class MappingResult:
    """Everything a full run produces, floor-index-aligned."""
    catalog: List[FloorRegions] = field(default_factory=list)
    floors: List[FloorRooms] = field(default_factory=list)
    room_grids: List[np.ndarray] = field(default_factory=list)

    @property
    def room_count(self) -> int:
        return sum(len(floor.rooms) for floor in self.floors)


def _banner(title: str) -> None:
    print(f"\n{'='*60}")
    print(title)
    print(f"{'='*60}")


def assign_rooms(
    catalog: List[FloorRegions],
    seeds: List[FloorSeeds],
    config: Optional[RoomMappingConfig] = None,
    verbose: bool = True
) -> MappingResult:
    """
    Bind seeds to regions floor by floor and rasterize the result.

    Seed floors line up with catalog floors by position. Catalog floors
    without seeds produce empty room lists so all outputs stay aligned.

    Raises:
        SeedFormatError: If there are more seed floors than catalog floors
        RoomOverlapError: If two rooms claim a cell and on_overlap is "error"
    """
    if config is None:
        config = RoomMappingConfig()

    if len(seeds) > len(catalog):
        raise SeedFormatError(
            f"Seed file has {len(seeds)} floors but the catalog has {len(catalog)}"
        )

    floors = []
    for index, floor_regions in enumerate(catalog):
        floor_seeds = seeds[index] if index < len(seeds) else FloorSeeds()
        floors.append(assign_floor(
            floor_regions,
            floor_seeds.entries,
            label=floor_seeds.label,
            verbose=verbose
        ))

    room_grids = rasterize_floors(floors, config.on_overlap)

    return MappingResult(catalog=catalog, floors=floors, room_grids=room_grids)


def identify_regions(
    floors_path: str,
    regions_path: Optional[str] = None,
    config: Optional[RoomMappingConfig] = None,
    verbose: bool = True
) -> List[FloorRegions]:
    """
    Segment a floors file into a region catalog.

    Args:
        floors_path: Floors JSON ({"floors": [{"label", "grid"}]})
        regions_path: Where to write the catalog (skipped if None)
        config: Room mapping configuration (uses defaults if None)
        verbose: Print progress information

    Returns:
        Region catalog, one entry per floor
    """
    if config is None:
        config = RoomMappingConfig()

    start_time = time.time()

    if verbose:
        _banner("Region Identification")
        print(f"\nStep 1: Loading floor grids...")

    floors = load_floor_grids(floors_path, verbose=verbose)

    if verbose:
        print(f"\nStep 2: Flood filling regions...")

    catalog = build_catalog(floors, config, verbose=verbose)

    if regions_path is not None:
        write_artifacts(
            [(regions_path, catalog_to_json(catalog), config.catalog_indent)],
            verbose=verbose
        )

    if verbose:
        elapsed = time.time() - start_time
        total = sum(floor.region_count for floor in catalog)
        print(f"\nIdentified {total} region(s) on {len(catalog)} floor(s) in {elapsed:.2f}s")

    return catalog


def map_rooms(
    regions_path: str,
    seeds_path: str,
    room_map_path: Optional[str] = None,
    room_ids_path: Optional[str] = None,
    config: Optional[RoomMappingConfig] = None,
    verbose: bool = True
) -> MappingResult:
    """
    Bind room seeds to a stored region catalog and write the room artifacts.

    Args:
        regions_path: Region catalog written by identify_regions()
        seeds_path: Room seed JSON file
        room_map_path: Where to write room metadata (skipped if None)
        room_ids_path: Where to write the room-id grids (skipped if None)
        config: Room mapping configuration
        verbose: Print progress information

    Returns:
        MappingResult with bound rooms and rasterized grids
    """
    if config is None:
        config = RoomMappingConfig()

    start_time = time.time()

    if verbose:
        _banner("Room Mapping")
        print(f"\nStep 1: Loading region catalog and seeds...")

    catalog = load_catalog(regions_path)
    seeds = load_seed_file(seeds_path, config)

    if verbose:
        print(f"  {len(catalog)} catalog floor(s), {len(seeds)} seed floor(s)")
        print(f"\nStep 2: Assigning rooms...")

    result = assign_rooms(catalog, seeds, config, verbose=verbose)

    artifacts = []
    if room_map_path is not None:
        artifacts.append((room_map_path, room_map_to_json(result.floors), None))
    if room_ids_path is not None:
        artifacts.append((room_ids_path, room_ids_to_json(result.room_grids), None))
    write_artifacts(artifacts, verbose=verbose)

    if verbose:
        elapsed = time.time() - start_time
        print(f"\nMapped {result.room_count} room(s) in {elapsed:.2f}s")

    return result


def run_pipeline(
    floors_path: str,
    seeds_path: str,
    out_dir: str,
    config: Optional[RoomMappingConfig] = None,
    verbose: bool = True
) -> MappingResult:
    """
    Run both stages and write all three artifacts into `out_dir`.

    Nothing is written unless both stages succeed.
    """
    if config is None:
        config = RoomMappingConfig()

    catalog = identify_regions(floors_path, None, config, verbose=verbose)
    seeds = load_seed_file(seeds_path, config)

    if verbose:
        _banner("Room Mapping")

    result = assign_rooms(catalog, seeds, config, verbose=verbose)

    out = Path(out_dir)
    write_artifacts([
        (out / REGIONS_FILENAME, catalog_to_json(result.catalog), config.catalog_indent),
        (out / ROOM_MAP_FILENAME, room_map_to_json(result.floors), None),
        (out / ROOM_IDS_FILENAME, room_ids_to_json(result.room_grids), None),
    ], verbose=verbose)

    if verbose:
        print(f"\nMapped {result.room_count} room(s) on {len(result.floors)} floor(s)")

    return result
