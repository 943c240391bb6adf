#!/usr/bin/env python3
"""
Example: Comparing Dijkstra and A* on the sample map.

This demonstrates how to build a grid, run both planners and
inspect the results in Rerun.
"""

import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from gridplan import build_sample_map, get_planner, PLANNERS
from gridplan.rendering import setup_planning_blueprint, log_plan
import rerun as rr


def planning_example(heuristic: str = "euclidean"):
    """Run every planner on the sample map and log the searches."""
    grid = build_sample_map(heuristic=heuristic)
    print(f"Built {grid}")

    rr.init("Planning Example", spawn=True)
    rr.send_blueprint(setup_planning_blueprint(sorted(PLANNERS)))

    for name in sorted(PLANNERS):
        grid.clear_annotations()
        result = get_planner(name).search(grid)
        if result.found:
            print(f"{name}: {len(result.path)} cells, cost {result.cost:.3f}, "
                  f"{len(result.expanded):,} cells expanded")
        else:
            print(f"{name}: no path")
        log_plan(grid, result)

    print("Planning results ready! Close the window when done.")


if __name__ == "__main__":
    import argparse

    parser = argparse.ArgumentParser(description="Planning example")
    parser.add_argument("--heuristic", default="euclidean",
                        help="A* heuristic (default: euclidean)")
    args = parser.parse_args()

    planning_example(args.heuristic)
