#!/usr/bin/env python3
"""
Main entry point for floor-plan region extraction and room mapping.

Usage:
    python main.py identify public/floors.json -o scripts/room-regions.json
    python main.py map scripts/room-regions.json data/demo-seeds.json \\
        --room-map public/room-map.json --room-ids public/room-ids.json
    python main.py run public/floors.json data/demo-seeds.json -o public/
    python main.py generate-demo public/floors.json
    python main.py generate-sc public/floors-sc.json
    python main.py run public/floors-sc.json data/sc-seeds.json -o public/
"""

import sys
import argparse
from pathlib import Path
from typing import List, Optional

from room_mapping import (
    RoomMappingConfig,
    RoomMappingError,
    build_demo_floors,
    build_sc_floors,
    identify_regions,
    map_rooms,
    run_pipeline,
)
from room_mapping.export import write_artifacts


GENERATORS = {
    "generate-demo": build_demo_floors,
    "generate-sc": build_sc_floors,
}


def parse_boundary_code(value: str) -> Optional[str]:
    """'null' on the command line stands for an empty cell."""
    return None if value.lower() in ("null", "none") else value


def parse_args(argv: Optional[List[str]] = None):
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Extract floor-plan regions and map them to room ids",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python main.py identify public/floors.json -o scripts/room-regions.json
  python main.py map scripts/room-regions.json data/demo-seeds.json \\
      --room-map public/room-map.json --room-ids public/room-ids.json
  python main.py run public/floors.json data/demo-seeds.json -o public/
  python main.py generate-demo public/floors.json
  python main.py generate-sc public/floors-sc.json
  python main.py run public/floors-sc.json data/sc-seeds.json -o public/
        """
    )

    parser.add_argument(
        "--quiet",
        action="store_true",
        help="Suppress progress output"
    )

    parser.add_argument(
        "--boundary",
        action="append",
        type=parse_boundary_code,
        metavar="CODE",
        help="Boundary type code, repeatable; 'null' means empty "
             "(default: W, B and null)"
    )

    parser.add_argument(
        "--min-cells",
        type=int,
        default=15,
        help="Minimum region size for seeds that omit minCells (default: 15)"
    )

    parser.add_argument(
        "--max-dist",
        type=float,
        default=80.0,
        help="Maximum centroid distance for seeds that omit maxDist (default: 80.0)"
    )

    parser.add_argument(
        "--on-overlap",
        choices=["error", "warn"],
        default="error",
        help="What to do when two rooms claim the same cell (default: error)"
    )

    sub = parser.add_subparsers(dest="command", required=True)

    identify = sub.add_parser("identify", help="Flood fill floors into a region catalog")
    identify.add_argument("floors", type=str, help="Floors JSON file")
    identify.add_argument(
        "-o", "--output",
        type=str,
        default="room-regions.json",
        help="Region catalog output (default: room-regions.json)"
    )

    mapping = sub.add_parser("map", help="Bind room seeds to a region catalog")
    mapping.add_argument("regions", type=str, help="Region catalog JSON file")
    mapping.add_argument("seeds", type=str, help="Room seed JSON file")
    mapping.add_argument(
        "--room-map",
        type=str,
        default="room-map.json",
        help="Room metadata output (default: room-map.json)"
    )
    mapping.add_argument(
        "--room-ids",
        type=str,
        default="room-ids.json",
        help="Room-id grid output (default: room-ids.json)"
    )

    run = sub.add_parser("run", help="Identify regions and map rooms in one pass")
    run.add_argument("floors", type=str, help="Floors JSON file")
    run.add_argument("seeds", type=str, help="Room seed JSON file")
    run.add_argument(
        "-o", "--out-dir",
        type=str,
        default=".",
        help="Directory for all three artifacts (default: current directory)"
    )

    demo = sub.add_parser("generate-demo", help="Write a schematic two-floor building")
    demo.add_argument("output", type=str, help="Floors JSON output")

    sc = sub.add_parser("generate-sc", help="Write the schematic five-floor Siebel Center")
    sc.add_argument("output", type=str, help="Floors JSON output")

    return parser.parse_args(argv)


def build_config(args) -> RoomMappingConfig:
    """Build configuration from arguments."""
    kwargs = {}
    if args.boundary:
        kwargs["boundary_codes"] = args.boundary
    return RoomMappingConfig(
        default_min_cells=args.min_cells,
        default_max_dist=args.max_dist,
        on_overlap=args.on_overlap,
        **kwargs
    )


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    args = parse_args(argv)
    verbose = not args.quiet

    try:
        config = build_config(args)
    except ValueError as e:
        print(f"Error: {e}")
        return 1

    try:
        if args.command == "identify":
            identify_regions(args.floors, args.output, config, verbose=verbose)
        elif args.command == "map":
            map_rooms(
                args.regions,
                args.seeds,
                room_map_path=args.room_map,
                room_ids_path=args.room_ids,
                config=config,
                verbose=verbose
            )
        elif args.command == "run":
            run_pipeline(args.floors, args.seeds, args.out_dir, config, verbose=verbose)
        elif args.command in GENERATORS:
            floors = GENERATORS[args.command]()
            write_artifacts([(Path(args.output), {"floors": floors}, None)], verbose=verbose)
    except RoomMappingError as e:
        print(f"Error: {e}")
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
