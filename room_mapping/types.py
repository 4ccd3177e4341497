"""
Data types for floor-plan region extraction and room assignment.
"""

from dataclasses import dataclass, field
from typing import List, Optional, Tuple, Dict, Any, Union


# (row, col) grid coordinate
Cell = Tuple[int, int]


class RoomMappingError(Exception):
    """Base class for fatal errors raised by the mapping pipeline."""


class GridFormatError(RoomMappingError):
    """Floor grid source is unreadable or not rectangular."""


class CatalogFormatError(RoomMappingError):
    """Region catalog artifact could not be parsed."""


class SeedFormatError(RoomMappingError):
    """Room seed file is missing fields or holds bad values."""


class RasterizeError(RoomMappingError):
    """A room cell falls outside its floor grid."""


class RoomOverlapError(RoomMappingError):
    """Two rooms tried to claim the same grid cell."""


@dataclass(frozen=True)
class BBox:
    """Inclusive bounding box in grid coordinates."""
    min_r: float
    max_r: float
    min_c: float
    max_c: float

    def to_dict(self) -> Dict[str, float]:
        return {
            "minR": self.min_r,
            "maxR": self.max_r,
            "minC": self.min_c,
            "maxC": self.max_c,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "BBox":
        return cls(
            min_r=data["minR"],
            max_r=data["maxR"],
            min_c=data["minC"],
            max_c=data["maxC"],
        )


@dataclass
class Region:
    """A maximal 4-connected group of same-type cells."""
    type: str
    cells: List[Cell]                # Discovery order of the flood fill
    centroid: Tuple[float, float]    # (row, col), rounded to 1 decimal
    bbox: BBox

    @property
    def cell_count(self) -> int:
        return len(self.cells)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "type": self.type,
            "cellCount": self.cell_count,
            "centroid": [self.centroid[0], self.centroid[1]],
            "bbox": self.bbox.to_dict(),
            "cells": [[r, c] for r, c in self.cells],
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Region":
        cells = [(int(r), int(c)) for r, c in data["cells"]]
        if "cellCount" in data and int(data["cellCount"]) != len(cells):
            raise ValueError(
                f"cellCount {data['cellCount']} does not match {len(cells)} cells"
            )
        row, col = data["centroid"]
        return cls(
            type=data["type"],
            cells=cells,
            centroid=(float(row), float(col)),
            bbox=BBox.from_dict(data["bbox"]),
        )


@dataclass
class FloorRegions:
    """All regions discovered on one floor, in catalog order."""
    label: str
    grid_size: Tuple[int, int]  # (rows, cols)
    regions: List[Region] = field(default_factory=list)

    @property
    def region_count(self) -> int:
        return len(self.regions)


@dataclass
class RoomSeed:
    """Hand-authored description of one expected room."""
    id: str
    name: str
    type: str
    centroid: Tuple[float, float]  # Approximate (row, col)
    min_cells: int = 15
    max_dist: float = 80.0


@dataclass
class AreaSeed:
    """Binds every matching region inside a window to a sequence of ids."""
    name: str
    type: str
    bbox: BBox
    ids: List[str]
    min_cells: int = 1
    max_cells: Optional[int] = None  # None means unbounded
    order: str = "col"               # "col" or "col-row"


SeedEntry = Union[RoomSeed, AreaSeed]


@dataclass
class Room:
    """A room seed bound to exactly one region."""
    id: str
    name: str
    centroid: Tuple[float, float]
    cell_count: int
    cells: List[Cell] = field(default_factory=list, repr=False)

    def to_dict(self) -> Dict[str, Any]:
        """Metadata form; cells are carried by the room-id grid instead."""
        return {
            "id": self.id,
            "name": self.name,
            "centroid": [self.centroid[0], self.centroid[1]],
            "cellCount": self.cell_count,
        }


@dataclass
class FloorRooms:
    """Rooms bound on one floor, in binding order."""
    label: str
    grid_size: Tuple[int, int]
    rooms: List[Room] = field(default_factory=list)
