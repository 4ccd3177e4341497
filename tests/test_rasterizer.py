import io
import os
import sys
import unittest
from contextlib import redirect_stderr

THIS_DIR = os.path.dirname(__file__)
ROOT_DIR = os.path.dirname(THIS_DIR)
if ROOT_DIR not in sys.path:
    sys.path.insert(0, ROOT_DIR)

from room_mapping.assigner import AssignmentSession
from room_mapping.flood_fill import segment_floor
from room_mapping.floor_builder import create_grid, fill_rect
from room_mapping.rasterizer import (
    rasterize_floors,
    rasterize_rooms,
    room_at,
    room_ids_to_json,
    room_map_to_json,
)
from room_mapping.types import (
    FloorRegions,
    FloorRooms,
    RasterizeError,
    Room,
    RoomOverlapError,
    RoomSeed,
)


def room(room_id, cells):
    return Room(id=room_id, name=f"Room {room_id}", centroid=(0.0, 0.0),
                cell_count=len(cells), cells=cells)


class ExampleScenarioTests(unittest.TestCase):
    def test_single_classroom_end_to_end(self):
        grid = create_grid(10, 10)
        fill_rect(grid, 2, 3, 2, 6, "C")
        floor = FloorRegions(label="Floor", grid_size=(10, 10), regions=segment_floor(grid))

        bound = AssignmentSession(floor).pick(
            RoomSeed(id="101", name="Classroom", type="C", centroid=(2, 3),
                     min_cells=1, max_dist=5))
        lookup = rasterize_rooms([bound], (10, 10))

        self.assertEqual(bound.to_dict(), {
            "id": "101", "name": "Classroom", "centroid": [2.0, 3.5], "cellCount": 4,
        })
        for r in range(10):
            for c in range(10):
                expected = "101" if r == 2 and 2 <= c <= 5 else None
                self.assertEqual(lookup[r, c], expected)


class RasterizeTests(unittest.TestCase):
    def test_every_room_cell_maps_to_its_id(self):
        rooms = [room("A", [(0, 0), (0, 1)]), room("B", [(2, 2)])]

        grid = rasterize_rooms(rooms, (3, 3))

        for rm in rooms:
            for r, c in rm.cells:
                self.assertEqual(grid[r, c], rm.id)
        ids = {v for v in grid.ravel() if v is not None}
        self.assertEqual(ids, {"A", "B"})
        self.assertEqual(sum(v is not None for v in grid.ravel()), 3)

    def test_overlap_raises_by_default(self):
        rooms = [room("A", [(0, 0), (0, 1)]), room("B", [(0, 1)])]
        with self.assertRaises(RoomOverlapError):
            rasterize_rooms(rooms, (2, 2))

    def test_overlap_warn_keeps_last_write(self):
        rooms = [room("A", [(0, 0), (0, 1)]), room("B", [(0, 1)])]

        with redirect_stderr(io.StringIO()) as err:
            grid = rasterize_rooms(rooms, (2, 2), on_overlap="warn")

        self.assertEqual(grid[0, 0], "A")
        self.assertEqual(grid[0, 1], "B")
        self.assertIn("room B overwrote cells of A", err.getvalue())

    def test_same_id_on_two_rooms_is_not_an_overlap(self):
        rooms = [room("STAIR", [(0, 0)]), room("STAIR", [(0, 0), (1, 0)])]
        grid = rasterize_rooms(rooms, (2, 1))
        self.assertEqual(grid.tolist(), [["STAIR"], ["STAIR"]])

    def test_cell_outside_grid(self):
        with self.assertRaises(RasterizeError):
            rasterize_rooms([room("A", [(5, 0)])], (2, 2))

    def test_rasterize_floors_keeps_order_and_shape(self):
        floors = [
            FloorRooms(label="One", grid_size=(2, 3), rooms=[room("1", [(0, 0)])]),
            FloorRooms(label="Two", grid_size=(4, 1), rooms=[]),
        ]

        grids = rasterize_floors(floors)

        self.assertEqual([g.shape for g in grids], [(2, 3), (4, 1)])
        self.assertEqual(grids[0][0, 0], "1")
        self.assertTrue(all(v is None for v in grids[1].ravel()))

    def test_room_at(self):
        grid = rasterize_rooms([room("A", [(1, 1)])], (3, 3))
        self.assertEqual(room_at(grid, 1, 1), "A")
        self.assertIsNone(room_at(grid, 0, 0))
        self.assertIsNone(room_at(grid, -1, 0))
        self.assertIsNone(room_at(grid, 3, 3))


class ArtifactTests(unittest.TestCase):
    def test_room_map_strips_cells(self):
        floors = [FloorRooms(label="Basement", grid_size=(2, 2),
                             rooms=[Room(id="405", name="Auditorium", centroid=(1.0, 0.5),
                                         cell_count=2, cells=[(1, 0), (1, 1)])])]

        payload = room_map_to_json(floors)

        self.assertEqual(payload, {"floors": [{
            "label": "Basement",
            "rooms": [{"id": "405", "name": "Auditorium",
                       "centroid": [1.0, 0.5], "cellCount": 2}],
        }]})

    def test_room_ids_payload(self):
        grids = [rasterize_rooms([room("A", [(0, 1)])], (1, 2))]
        self.assertEqual(room_ids_to_json(grids), {"roomGrids": [[[None, "A"]]]})


if __name__ == "__main__":
    unittest.main()
