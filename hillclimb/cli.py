"""
Command line driver.

Usage::

    python -m hillclimb solve input.txt [--plot]
    python -m hillclimb serve --port 8081
"""

import argparse
import logging
import sys
from typing import List, Optional

from hillclimb.config import DEFAULT_HOST, DEFAULT_PORT, LOG_DATEFMT, LOG_FORMAT
from hillclimb.errors import FormatError, UnreachableError
from hillclimb.reader import read_rows
from hillclimb.solver import solve

logger = logging.getLogger(__name__)


def setup_logging(level: int = logging.INFO) -> None:
    """Configure the root logger with timestamped output."""
    logging.basicConfig(level=level, format=LOG_FORMAT, datefmt=LOG_DATEFMT, force=True)


def _plot(rows: List[str]) -> None:
    from hillclimb.graph import build_adjacency
    from hillclimb.grid import load_heightmap
    from hillclimb.search import search
    from hillclimb.viz import show_search_heatmap

    hmap, start, end = load_heightmap(rows)
    res = search(build_adjacency(hmap), start.node, end.node)
    show_search_heatmap(hmap, res, start, end, title="S → E")


def cmd_solve(args: argparse.Namespace) -> int:
    try:
        rows = read_rows(args.path)
        sol = solve(rows)
    except FormatError as e:
        logger.error("Malformed heightmap %s: %s", args.path, e)
        return 1
    except UnreachableError as e:
        logger.error("%s", e)
        return 2

    print(f"Part one: {sol.from_start}")
    print(f"Part two: {sol.from_lowest}")
    if args.plot:
        _plot(rows)
    return 0


def cmd_serve(args: argparse.Namespace) -> int:
    from hillclimb.app import create_app

    create_app().run(host=args.host, port=args.port, threaded=True)
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="hillclimb",
        description="Fewest steps up a heightmap under the climb-one rule.",
    )
    parser.add_argument("--log-level", default="WARNING",
                        choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    sub = parser.add_subparsers(dest="command", required=True)

    p_solve = sub.add_parser("solve", help="Print both step counts for a map file.")
    p_solve.add_argument("path", help="Heightmap text file, one row per line.")
    p_solve.add_argument("--plot", action="store_true",
                         help="Show the S → E search heatmap (matplotlib).")
    p_solve.set_defaults(func=cmd_solve)

    p_serve = sub.add_parser("serve", help="Run the HTTP API.")
    p_serve.add_argument("--host", default=DEFAULT_HOST)
    p_serve.add_argument("--port", type=int, default=DEFAULT_PORT)
    p_serve.set_defaults(func=cmd_serve)

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging(getattr(logging, args.log_level))
    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
