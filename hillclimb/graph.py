# region Imports
import logging
from typing import Callable, Optional, Tuple
from hillclimb.costs import climb_cost_factory
from hillclimb.models import AdjacencyList, Edge, HeightMap
# endregion

logger = logging.getLogger(__name__)

# region Neighbor Generation
def neighbors_4(u, H, W):
    r, c = u
    for dr, dc in ((-1, 0), (1, 0), (0, -1), (0, 1)):
        rr, cc = r + dr, c + dc
        if 0 <= rr < H and 0 <= cc < W:
            yield (rr, cc)
# endregion

# region Adjacency Construction
def build_adjacency(
    hmap: HeightMap,
    edge_cost_fn: Optional[Callable[[Tuple[int, int], Tuple[int, int]], Optional[int]]] = None,
) -> AdjacencyList:
    """
    Entry i holds the outgoing edges of node i. By default an edge exists
    when the neighbor is at most one unit higher (see climb_cost_factory).
    """
    if edge_cost_fn is None:
        edge_cost_fn = climb_cost_factory(hmap)

    H, W = hmap.shape
    nodes = hmap.nodes
    adj: AdjacencyList = []
    n_edges = 0
    for r in range(H):
        for c in range(W):
            out = []
            for v in neighbors_4((r, c), H, W):
                cost = edge_cost_fn((r, c), v)
                if cost is None:
                    continue
                out.append(Edge(int(nodes[v]), cost))
            n_edges += len(out)
            adj.append(out)

    logger.debug("Built adjacency: %d nodes, %d edges", len(adj), n_edges)
    return adj
# endregion
