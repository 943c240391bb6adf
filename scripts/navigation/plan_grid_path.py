#!/usr/bin/env python3
"""
Plan a path on an occupancy grid with Dijkstra or A* and save the result.

Loads a map (or builds the sample map), runs one or both planners, writes
an image of each result and optionally streams the search to Rerun.
"""

import argparse
import logging
import sys
from pathlib import Path
import rerun as rr

# Add project root to path for imports
project_root = Path(__file__).parent.parent.parent
sys.path.insert(0, str(project_root))

from gridplan.config import (
    DEFAULT_RENDER_CONFIG,
    PlannerConfig,
    RenderConfig,
    get_image_path,
    get_output_dir,
    get_result_path,
)
from gridplan.errors import PlanningError
from gridplan.heuristics import HEURISTICS
from gridplan.io_utils import load_grid, save_plan_result
from gridplan.maps import build_sample_map
from gridplan.planners import PLANNERS, make_planner
from gridplan.rendering import log_plan, render_plan, setup_planning_blueprint


def build_parser():
    parser = argparse.ArgumentParser(
        description="Plan a path on an occupancy grid",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # A* on the built-in sample map
  python plan_grid_path.py

  # Compare both planners on a map file
  python plan_grid_path.py --map maps/warehouse.json --algorithm both

  # Export the path and watch the search in Rerun
  python plan_grid_path.py --json --rerun
        """
    )

    parser.add_argument("--map", type=Path,
                        help="Map JSON file (default: built-in sample map)")
    parser.add_argument("--algorithm", choices=sorted(PLANNERS) + ["both"], default="astar",
                        help="Planner to run (default: astar)")
    parser.add_argument("--heuristic", choices=sorted(HEURISTICS), default="euclidean",
                        help="A* heuristic (default: euclidean)")
    parser.add_argument("-o", "--output-dir", type=Path,
                        help="Directory for images and JSON (default: results/planning)")
    parser.add_argument("--size", nargs=2, type=int, metavar=("WIDTH", "HEIGHT"),
                        default=list(DEFAULT_RENDER_CONFIG.output_size),
                        help="Image size in pixels (default: 200 200)")
    parser.add_argument("--json", action="store_true",
                        help="Also write each result as JSON")
    parser.add_argument("--rerun", action="store_true",
                        help="Stream the search to a Rerun viewer")
    parser.add_argument("-v", "--verbose", action="store_true",
                        help="Log every expanded cell")
    return parser


def main(argv=None):
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if args.map is not None and not args.map.exists():
        print(f"Error: {args.map} does not exist")
        return 1

    try:
        if args.map is not None:
            print(f"Loading map from {args.map}...")
            grid = load_grid(args.map, heuristic=args.heuristic)
        else:
            print("Building sample map...")
            grid = build_sample_map(heuristic=args.heuristic)
    except PlanningError as e:
        print(f"Error: {e}")
        return 1

    print(f"  Grid size: {grid.width}x{grid.height}")
    print(f"  Start: {grid.start}  Goal: {grid.goal}")

    names = sorted(PLANNERS) if args.algorithm == "both" else [args.algorithm]
    output_dir = args.output_dir or get_output_dir(Path("results"))
    render_config = RenderConfig(output_size=tuple(args.size))

    if args.rerun:
        rr.init("Grid Path Planning", spawn=True)
        rr.send_blueprint(setup_planning_blueprint(names))

    for name in names:
        print(f"\nPlanning with {name}...")
        grid.clear_annotations()
        try:
            result = make_planner(PlannerConfig(algorithm=name, heuristic=args.heuristic)).search(grid)
        except PlanningError as e:
            print(f"Error: {e}")
            return 1

        if result.found:
            print(f"  ✓ Found path with {len(result.path)} cells, cost {result.cost:.3f}")
        else:
            print("  ✗ No path found (goal unreachable)")
        print(f"  Expanded {len(result.expanded):,} cells, created {result.nodes_created:,} nodes")

        image_path = get_image_path(output_dir, name)
        if render_plan(grid, result, image_path, render_config):
            print(f"  Saved image to {image_path}")

        if args.json:
            json_path = get_result_path(output_dir, name)
            if save_plan_result(result, json_path):
                print(f"  Exported result to {json_path}")

        if args.rerun:
            log_plan(grid, result, config=render_config)

    return 0


if __name__ == "__main__":
    sys.exit(main())
