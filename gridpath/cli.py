# gridpath/cli.py
#!/usr/bin/env python3
"""
Command line demo: build (or load) a grid, print it, search from its start
to its goal and print the maze again with the path drawn in.

    gridpath                       # 30x15 maze from seed 4
    gridpath --seed 7 --budget 50
    gridpath --map gridpath/maps/01_gap_wall.json
    gridpath --view                # open the pygame viewer instead

Exit code: 0 path found, 1 no path / budget exceeded, 2 invalid input.
"""

import argparse
import logging
import sys
from typing import List, Optional

from gridpath.config import Settings
from gridpath.core.astar import find_path
from gridpath.core.errors import InvalidInput
from gridpath.core.frontier import FRONTIERS
from gridpath.core.maps import load_map
from gridpath.core.maze import generate_maze
from gridpath.core.render import render_text

log = logging.getLogger("gridpath")


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="gridpath", description="A* shortest path on an occupancy grid")
    p.add_argument("--width", type=int, help="maze width (default 30)")
    p.add_argument("--height", type=int, help="maze height (default 15)")
    p.add_argument("--seed", type=int, help="maze random seed (default 4)")
    p.add_argument("--wall-chance", type=int, help="percent chance of a wall per inner cell (default 25)")
    p.add_argument("--budget", type=int, help="max expansions before bailing out (default 9999)")
    p.add_argument("--frontier", choices=sorted(FRONTIERS), help="open set implementation (default heap)")
    p.add_argument("--map", help="JSON map file instead of a generated maze")
    p.add_argument("--log-level", help="DEBUG, INFO, WARNING, ... (default INFO)")
    p.add_argument("--view", action="store_true", help="open the pygame viewer")
    return p


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    try:
        settings = Settings.from_env().merged(
            width=args.width, height=args.height, seed=args.seed,
            wall_chance=args.wall_chance, step_budget=args.budget,
            frontier=args.frontier, log_level=args.log_level.upper() if args.log_level else None,
        )
    except InvalidInput as ex:
        print(f"Invalid settings: {ex}", file=sys.stderr)
        return 2

    logging.basicConfig(level=settings.log_level, format="%(levelname)s %(name)s: %(message)s")

    if args.view:
        from gridpath.app.viewer import main as viewer_main  # pygame only needed here
        viewer_main(settings)
        return 0

    try:
        if args.map:
            grid = load_map(args.map)
        else:
            grid = generate_maze(settings.width, settings.height, settings.seed, settings.wall_chance)
    except (InvalidInput, OSError) as ex:
        log.error("Failed to build grid: %s", ex)
        return 2

    print(render_text(grid))
    print()

    res = find_path(grid, grid.start, grid.goal, settings.step_budget, settings.frontier)
    if res.status == "invalid_input":
        log.error("%s", res)
        return 2
    if not res.found:
        log.error("Failed to find a path: %s", res)
        return 1

    log.info("Found a path to the goal: %s", res)
    print(render_text(grid, res.path))
    return 0


if __name__ == "__main__":
    sys.exit(main())
