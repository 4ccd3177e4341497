"""
Room assignment: binds room seeds to catalog regions.

Each floor gets its own AssignmentSession that owns the set of regions
already bound on that floor, so a region is never handed to two rooms.
"""

import sys
import numpy as np
from typing import Iterator, List, Optional, Sequence, Set, Tuple
from shapely.geometry import LineString, Point, box

from .types import AreaSeed, BBox, FloorRegions, FloorRooms, Region, Room, RoomSeed, SeedEntry


AREA_ORDERS = ("col", "col-row")


def centroid_distance(a: Sequence[float], b: Sequence[float]) -> float:
    """Euclidean distance between two (row, col) points."""
    return float(np.hypot(a[0] - b[0], a[1] - b[1]))


def warn(message: str) -> None:
    """Print a non-fatal diagnostic to stderr."""
    print(f"WARN: {message}", file=sys.stderr)


def room_from_region(room_id: str, name: str, region: Region) -> Room:
    return Room(
        id=room_id,
        name=name,
        centroid=region.centroid,
        cell_count=region.cell_count,
        cells=list(region.cells)
    )


def area_window(bbox: BBox):
    """
    Window geometry in (col, row) space. A bbox that is flat in one axis
    collapses to a segment, and flat in both to a point.
    """
    if bbox.min_r == bbox.max_r and bbox.min_c == bbox.max_c:
        return Point(bbox.min_c, bbox.min_r)
    if bbox.min_r == bbox.max_r or bbox.min_c == bbox.max_c:
        return LineString([(bbox.min_c, bbox.min_r), (bbox.max_c, bbox.max_r)])
    return box(bbox.min_c, bbox.min_r, bbox.max_c, bbox.max_r)


class AssignmentSession:
    """Matching state for one floor's assignment pass."""

    def __init__(self, floor: FloorRegions):
        """
        Initialize AssignmentSession.

        Args:
            floor: Catalog entry whose regions are the candidate pool
        """
        self.floor = floor
        self.used: Set[int] = set()

    @property
    def label(self) -> str:
        return self.floor.label

    def available(self) -> Iterator[Tuple[int, Region]]:
        """Yield (catalog index, region) for regions not yet bound, in catalog order."""
        for index, region in enumerate(self.floor.regions):
            if index not in self.used:
                yield index, region

    def find(self, seed: RoomSeed) -> Optional[Tuple[int, Region]]:
        """
        Find the nearest eligible unused region for a seed without binding it.

        Candidates must share the seed's type, have at least `min_cells`
        cells and lie within `max_dist` of the seed centroid. Among equal
        distances the first candidate in catalog order wins.
        """
        best = None
        best_dist = float("inf")

        for index, region in self.available():
            if region.type != seed.type:
                continue
            if region.cell_count < seed.min_cells:
                continue

            dist = centroid_distance(region.centroid, seed.centroid)
            if dist <= seed.max_dist and dist < best_dist:
                best = (index, region)
                best_dist = dist

        return best

    def pick(self, seed: RoomSeed) -> Optional[Room]:
        """
        Bind a seed to its nearest eligible region.

        Returns:
            The bound Room, or None when no region qualifies (a warning is
            printed and the seed is dropped)
        """
        match = self.find(seed)
        if match is None:
            warn(f"could not map {seed.id} on floor {self.label}")
            return None

        index, region = match
        self.used.add(index)
        return room_from_region(seed.id, seed.name, region)

    def find_area(self, seed: AreaSeed) -> List[Tuple[int, Region]]:
        """
        Find unused regions of the seed's type and size whose centroid lies
        inside the seed window (edges included), in binding order.
        """
        window = area_window(seed.bbox)
        max_cells = float("inf") if seed.max_cells is None else seed.max_cells

        matches = []
        for index, region in self.available():
            if region.type != seed.type:
                continue
            if region.cell_count < seed.min_cells or region.cell_count > max_cells:
                continue
            row, col = region.centroid
            if window.covers(Point(col, row)):
                matches.append((index, region))

        if seed.order == "col-row":
            matches.sort(key=lambda m: (m[1].centroid[1], m[1].centroid[0]))
        else:
            matches.sort(key=lambda m: m[1].centroid[1])

        return matches

    def pick_area(self, seed: AreaSeed) -> List[Room]:
        """
        Bind the regions inside the seed window to the seed's ids, in order.

        Extra ids stay unused; extra regions stay unbound and available.
        """
        matches = self.find_area(seed)

        rooms = []
        for room_id, (index, region) in zip(seed.ids, matches):
            self.used.add(index)
            rooms.append(room_from_region(room_id, seed.name, region))

        if not matches:
            warn(f"no {seed.type} regions in area for {seed.ids[0]}..{seed.ids[-1]} on floor {self.label}")

        return rooms

    def apply(self, entry: SeedEntry) -> List[Room]:
        """Run a single or area seed and return the rooms it bound."""
        if isinstance(entry, AreaSeed):
            return self.pick_area(entry)
        room = self.pick(entry)
        return [] if room is None else [room]


def assign_floor(
    floor: FloorRegions,
    entries: Sequence[SeedEntry],
    label: Optional[str] = None,
    verbose: bool = True
) -> FloorRooms:
    """
    Run an ordered list of seeds against one floor's catalog.

    Seeds are applied in list order, so earlier seeds get first claim on
    regions.

    Args:
        floor: Catalog entry for the floor
        entries: Room and area seeds for the floor
        label: Display label for the output (defaults to the catalog label)
        verbose: Print the bound rooms

    Returns:
        FloorRooms with rooms in binding order
    """
    session = AssignmentSession(floor)

    rooms = []
    for entry in entries:
        rooms.extend(session.apply(entry))

    result = FloorRooms(
        label=floor.label if label is None else label,
        grid_size=floor.grid_size,
        rooms=rooms
    )

    if verbose:
        print(f"{result.label}: {len(rooms)} rooms mapped")
        for room in rooms:
            print(f"  {room.id} - {room.name} ({room.cell_count} cells)")

    return result
