import json
import os
import sys
import tempfile
import unittest

THIS_DIR = os.path.dirname(__file__)
ROOT_DIR = os.path.dirname(THIS_DIR)
if ROOT_DIR not in sys.path:
    sys.path.insert(0, ROOT_DIR)

from room_mapping.config import RoomMappingConfig
from room_mapping.seeds import load_seed_file, parse_seed_file
from room_mapping.types import AreaSeed, BBox, RoomSeed, SeedFormatError


DEMO_SEEDS = os.path.join(ROOT_DIR, "data", "demo-seeds.json")


class ParseSeedFileTests(unittest.TestCase):
    def test_room_seed(self):
        floors = parse_seed_file({"floors": [{"label": "Basement", "rooms": [
            {"id": 405, "name": "Auditorium", "type": "C", "centroid": [90, 112],
             "minCells": 600, "maxDist": 20},
        ]}]})

        self.assertEqual(floors[0].label, "Basement")
        self.assertEqual(floors[0].entries, [
            RoomSeed(id="405", name="Auditorium", type="C", centroid=(90.0, 112.0),
                     min_cells=600, max_dist=20.0),
        ])

    def test_defaults_come_from_config(self):
        config = RoomMappingConfig(default_min_cells=7, default_max_dist=12.5)
        floors = parse_seed_file({"floors": [{"rooms": [
            {"id": "S1", "name": "Stair", "type": "R", "centroid": [1, 2]},
        ]}]}, config)

        seed = floors[0].entries[0]
        self.assertIsNone(floors[0].label)
        self.assertEqual((seed.min_cells, seed.max_dist), (7, 12.5))

    def test_area_seed(self):
        floors = parse_seed_file({"floors": [{"rooms": [
            {"name": "Research Office", "type": "G",
             "bbox": {"minR": 0, "maxR": 25, "minC": 95, "maxC": 180},
             "minCells": 5, "maxCells": 100, "ids": ["2038", 2040], "order": "col-row"},
        ]}]})

        self.assertEqual(floors[0].entries, [AreaSeed(
            name="Research Office", type="G",
            bbox=BBox(min_r=0.0, max_r=25.0, min_c=95.0, max_c=180.0),
            ids=["2038", "2040"], min_cells=5, max_cells=100, order="col-row",
        )])

    def test_area_seed_defaults(self):
        seed = parse_seed_file({"floors": [{"rooms": [
            {"name": "Office", "type": "O",
             "bbox": {"minR": 0, "maxR": 1, "minC": 0, "maxC": 1}, "ids": ["1"]},
        ]}]})[0].entries[0]

        self.assertEqual((seed.min_cells, seed.max_cells, seed.order), (1, None, "col"))

    def test_area_descriptor_with_id_sequence(self):
        floors = parse_seed_file({"floors": [{"rooms": [
            {"type": "O", "bbox": {"minR": 0, "maxR": 20, "minC": 0, "maxC": 100},
             "minCells": 1, "maxCells": 9, "idSequence": ["201", "203"]},
        ]}]})

        self.assertEqual(floors[0].entries, [AreaSeed(
            name="", type="O",
            bbox=BBox(min_r=0.0, max_r=20.0, min_c=0.0, max_c=100.0),
            ids=["201", "203"], min_cells=1, max_cells=9,
        )])

    def test_id_sequence_wins_over_ids(self):
        seed = parse_seed_file({"floors": [{"rooms": [
            {"type": "O", "bbox": {"minR": 0, "maxR": 1, "minC": 0, "maxC": 1},
             "idSequence": ["1"], "ids": ["2"]},
        ]}]})[0].entries[0]

        self.assertEqual(seed.ids, ["1"])

    def test_flat_bbox_is_accepted(self):
        seed = parse_seed_file({"floors": [{"rooms": [
            {"type": "O", "bbox": {"minR": 2, "maxR": 2, "minC": 0, "maxC": 9},
             "idSequence": ["1"]},
        ]}]})[0].entries[0]

        self.assertEqual(seed.bbox, BBox(min_r=2.0, max_r=2.0, min_c=0.0, max_c=9.0))

    def test_room_seed_without_name(self):
        seed = parse_seed_file({"floors": [{"rooms": [
            {"id": "101", "type": "C", "centroid": [2, 3], "minCells": 1, "maxDist": 5},
        ]}]})[0].entries[0]

        self.assertEqual(seed, RoomSeed(id="101", name="", type="C", centroid=(2.0, 3.0),
                                        min_cells=1, max_dist=5.0))

    def test_floor_without_rooms_is_empty(self):
        floors = parse_seed_file({"floors": [{"label": "Roof"}]})
        self.assertEqual(floors[0].entries, [])

    def test_errors(self):
        bad_documents = [
            [],
            {"floors": "nope"},
            {"floors": [{"rooms": [{"name": "X", "type": "C", "centroid": [1, 2]}]}]},
            {"floors": [{"rooms": [{"id": "1", "name": "X", "type": "C", "centroid": [1]}]}]},
            {"floors": [{"rooms": [{"id": "1", "name": "X", "type": "C",
                                    "centroid": [1, 2], "minCells": 0}]}]},
            {"floors": [{"rooms": [{"id": "1", "name": "X", "type": "C",
                                    "centroid": [1, 2], "minCells": "many"}]}]},
            {"floors": [{"rooms": [{"name": "X", "type": "O", "idSequence": [],
                                    "bbox": {"minR": 0, "maxR": 1, "minC": 0, "maxC": 1}}]}]},
            {"floors": [{"rooms": [{"name": "X", "type": "O", "ids": ["1"],
                                    "bbox": {"minR": 0, "maxR": 1, "minC": 0}}]}]},
            {"floors": [{"rooms": [{"name": "X", "type": "O", "ids": ["1"],
                                    "bbox": {"minR": 5, "maxR": 1, "minC": 0, "maxC": 1}}]}]},
            {"floors": [{"rooms": [{"name": "X", "type": "O", "ids": ["1"], "order": "row",
                                    "bbox": {"minR": 0, "maxR": 1, "minC": 0, "maxC": 1}}]}]},
            {"floors": [{"rooms": [{"name": "X", "type": "O", "ids": ["1"],
                                    "minCells": 10, "maxCells": 2,
                                    "bbox": {"minR": 0, "maxR": 1, "minC": 0, "maxC": 1}}]}]},
            {"floors": [{"rooms": [{"name": "X", "type": "O",
                                    "bbox": {"minR": 0, "maxR": 1, "minC": 0, "maxC": 1}}]}]},
            {"floors": [{"rooms": ["not an object"]}]},
        ]
        for doc in bad_documents:
            with self.subTest(doc=doc):
                with self.assertRaises(SeedFormatError):
                    parse_seed_file(doc)


class LoadSeedFileTests(unittest.TestCase):
    def test_demo_seed_file(self):
        floors = load_seed_file(DEMO_SEEDS)

        self.assertEqual([f.label for f in floors], ["Level 01", "Level 02"])
        self.assertEqual(len(floors[0].entries), 8)
        self.assertIsInstance(floors[1].entries[0], AreaSeed)
        self.assertEqual(floors[1].entries[0].ids, ["201", "203", "205"])

    def test_sc_seed_file(self):
        floors = load_seed_file(os.path.join(ROOT_DIR, "data", "sc-seeds.json"))

        self.assertEqual([len(f.entries) for f in floors], [14, 11, 14, 10, 12])
        self.assertTrue(all(isinstance(e, RoomSeed) for f in floors for e in f.entries))

    def test_eceb_seed_file(self):
        floors = load_seed_file(os.path.join(ROOT_DIR, "data", "eceb-seeds.json"))

        self.assertEqual([f.label for f in floors],
                         ["Level 01", "Level 02", "Level 03", "Level 04", "Level 05"])
        strips = [e for f in floors for e in f.entries if isinstance(e, AreaSeed)]
        self.assertEqual([len(s.ids) for s in strips], [16, 14, 16, 15])
        self.assertEqual([s.order for s in strips], ["col", "col", "col-row", "col"])
        self.assertEqual(strips[0].ids[0], "2038")
        self.assertEqual(floors[0].entries[0].max_dist, 30.0)

    def test_missing_file(self):
        with self.assertRaises(SeedFormatError):
            load_seed_file("/nonexistent/seeds.json")

    def test_invalid_json(self):
        with tempfile.TemporaryDirectory() as tmp:
            path = os.path.join(tmp, "seeds.json")
            with open(path, "w", encoding="utf-8") as f:
                f.write("[")
            with self.assertRaises(SeedFormatError):
                load_seed_file(path)

    def test_round_trip_through_file(self):
        doc = {"floors": [{"rooms": [
            {"id": "1", "name": "Room", "type": "C", "centroid": [3, 4]},
        ]}]}
        with tempfile.TemporaryDirectory() as tmp:
            path = os.path.join(tmp, "seeds.json")
            with open(path, "w", encoding="utf-8") as f:
                json.dump(doc, f)
            self.assertEqual(load_seed_file(path), parse_seed_file(doc))


if __name__ == "__main__":
    unittest.main()
