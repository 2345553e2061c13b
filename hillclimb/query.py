# region Imports
import logging
from typing import Iterable, List
from hillclimb.config import MIN_ELEVATION
from hillclimb.errors import UnreachableError
from hillclimb.models import AdjacencyList, HeightMap
from hillclimb.search import shortest_path
# endregion

logger = logging.getLogger(__name__)

# region Candidate Sources
def lowest_nodes(hmap: HeightMap) -> List[int]:
    """Node ids of every cell at the minimum elevation, start marker included."""
    return [loc.node for loc in hmap.find_targets(MIN_ELEVATION)]
# endregion

# region Multi-source Minimum
def min_distance_from_any(adj: AdjacencyList, sources: Iterable[int], target: int) -> int:
    """
    Run an independent search from each source and keep the cheapest
    one that reaches ``target``. Raises UnreachableError if none does.
    """
    sources = list(sources)
    best = None
    reached = 0
    for s in sources:
        d = shortest_path(adj, s, target)
        if d is None:
            continue
        reached += 1
        if best is None or d < best:
            best = d

    if best is None:
        raise UnreachableError(
            sources, target,
            f"None of {len(sources)} candidate starts can reach {target}",
        )
    logger.debug("%d/%d candidate starts reach %d, best=%d", reached, len(sources), target, best)
    return best
# endregion
