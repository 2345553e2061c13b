# region Imports
import logging
from typing import Iterable, NamedTuple
from hillclimb.errors import UnreachableError
from hillclimb.graph import build_adjacency
from hillclimb.grid import load_heightmap
from hillclimb.query import lowest_nodes, min_distance_from_any
from hillclimb.search import shortest_path
# endregion

logger = logging.getLogger(__name__)


class Solution(NamedTuple):
    from_start: int
    from_lowest: int


def solve(rows: Iterable[str]) -> Solution:
    """Steps from S to E, then the fewest steps to E from any lowest cell."""
    hmap, start, end = load_heightmap(rows)
    adj = build_adjacency(hmap)

    p1 = shortest_path(adj, start.node, end.node)
    if p1 is None:
        raise UnreachableError(start, end)

    p2 = min_distance_from_any(adj, lowest_nodes(hmap), end.node)
    logger.info("Solved %dx%d heightmap: from_start=%d from_lowest=%d", hmap.H, hmap.W, p1, p2)
    return Solution(p1, p2)
