"""
Room Mapping Package

Extract architectural regions from rasterized floor grids and bind them to
real-world room identifiers.
"""

from .types import (
    BBox,
    Region,
    FloorRegions,
    RoomSeed,
    AreaSeed,
    Room,
    FloorRooms,
    RoomMappingError,
    GridFormatError,
    CatalogFormatError,
    SeedFormatError,
    RasterizeError,
    RoomOverlapError,
)
from .config import RoomMappingConfig
from .grid_loader import FloorGrid, load_floor_grids, parse_floor_grids
from .flood_fill import (
    segment_floor,
    flood_fill_region,
    sort_regions,
)
from .catalog import (
    build_catalog,
    catalog_to_json,
    catalog_from_json,
    load_catalog,
)
from .assigner import (
    AssignmentSession,
    area_window,
    assign_floor,
    centroid_distance,
)
from .rasterizer import (
    rasterize_rooms,
    rasterize_floors,
    room_at,
    room_map_to_json,
    room_ids_to_json,
)
from .seeds import FloorSeeds, load_seed_file, parse_seed_file
from .floor_builder import build_demo_floors, build_sc_floors
from .pipeline import (
    MappingResult,
    assign_rooms,
    identify_regions,
    map_rooms,
    run_pipeline,
)

__all__ = [
    # Types
    'BBox',
    'Region',
    'FloorRegions',
    'RoomSeed',
    'AreaSeed',
    'Room',
    'FloorRooms',
    'RoomMappingConfig',
    # Errors
    'RoomMappingError',
    'GridFormatError',
    'CatalogFormatError',
    'SeedFormatError',
    'RasterizeError',
    'RoomOverlapError',
    # Grid loading
    'FloorGrid',
    'load_floor_grids',
    'parse_floor_grids',
    # Flood fill / segmentation
    'segment_floor',
    'flood_fill_region',
    'sort_regions',
    # Catalog
    'build_catalog',
    'catalog_to_json',
    'catalog_from_json',
    'load_catalog',
    # Assignment
    'AssignmentSession',
    'area_window',
    'assign_floor',
    'centroid_distance',
    # Rasterization
    'rasterize_rooms',
    'rasterize_floors',
    'room_at',
    'room_map_to_json',
    'room_ids_to_json',
    # Seeds
    'FloorSeeds',
    'load_seed_file',
    'parse_seed_file',
    # Schematic floors
    'build_demo_floors',
    'build_sc_floors',
    # Pipeline
    'MappingResult',
    'assign_rooms',
    'identify_regions',
    'map_rooms',
    'run_pipeline',
]
