# region Imports and Typing
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional, Tuple
import heapq, logging

from hillclimb.models import AdjacencyList
# endregion

logger = logging.getLogger(__name__)

INF = float("inf")

# region Node State
class NodeState(Enum):
    UNVISITED = "unvisited"
    FRONTIER = "frontier"
    SETTLED = "settled"


class DistanceTable:
    """
    Best known cost per node plus a state tag per node.

    Nodes move UNVISITED -> FRONTIER -> SETTLED. Once settled a node's
    distance is final; relaxing it again raises RuntimeError.
    """

    def __init__(self, n: int):
        self.dist: List[float] = [INF] * n
        self.state: List[NodeState] = [NodeState.UNVISITED] * n

    def __len__(self):
        return len(self.dist)

    def __getitem__(self, node: int) -> float:
        return self.dist[node]

    def relax(self, node: int, cost: int) -> bool:
        """Record ``cost`` if it improves on the current best. Returns True if it did."""
        if self.state[node] is NodeState.SETTLED:
            raise RuntimeError(f"node {node} is settled at {self.dist[node]}, cannot relax to {cost}")
        if cost < self.dist[node]:
            self.dist[node] = cost
            self.state[node] = NodeState.FRONTIER
            return True
        return False

    def settle(self, node: int) -> None:
        if self.state[node] is not NodeState.FRONTIER:
            raise RuntimeError(f"node {node} is {self.state[node].value}, cannot settle")
        self.state[node] = NodeState.SETTLED

    def is_settled(self, node: int) -> bool:
        return self.state[node] is NodeState.SETTLED

    def count(self, state: NodeState) -> int:
        return sum(1 for s in self.state if s is state)
# endregion

# region Search Result
@dataclass
class SearchResult:
    start: int
    target: int
    cost: Optional[int]
    expansions: int
    settled_order: List[int] = field(default_factory=list)
    table: Optional[DistanceTable] = None

    @property
    def found(self) -> bool:
        return self.cost is not None
# endregion

# region Uniform-cost Search
def search(adj: AdjacencyList, start: int, target: int) -> SearchResult:
    """
    Dijkstra over a non-negative cost graph with early exit at ``target``.

    Heap entries are (cost, node) so ties pop in ascending node order.
    Entries whose cost exceeds the table's best for that node are stale
    and skipped. ``cost`` is None when the heap drains without reaching
    the target.
    """
    n = len(adj)
    for name, node in (("start", start), ("target", target)):
        if not 0 <= node < n:
            raise IndexError(f"{name} node {node} outside graph of {n} nodes")

    table = DistanceTable(n)
    table.relax(start, 0)
    openh: List[Tuple[int, int]] = [(0, start)]
    settled_order: List[int] = []

    while openh:
        cost, u = heapq.heappop(openh)

        if cost > table[u]:
            continue

        table.settle(u)
        settled_order.append(u)

        if u == target:
            logger.debug("Reached %d from %d at cost %d after %d expansions",
                         target, start, cost, len(settled_order))
            return SearchResult(start, target, cost, len(settled_order), settled_order, table)

        # region Edge Relaxation
        for edge in adj[u]:
            v = edge.node
            if table.is_settled(v):
                continue
            alt = cost + edge.cost
            if table.relax(v, alt):
                heapq.heappush(openh, (alt, v))
        # endregion

    logger.debug("No path from %d to %d (%d nodes settled)", start, target, len(settled_order))
    return SearchResult(start, target, None, len(settled_order), settled_order, table)


def shortest_path(adj: AdjacencyList, start: int, target: int) -> Optional[int]:
    """Minimum step cost from ``start`` to ``target``, or None if unreachable."""
    return search(adj, start, target).cost
# endregion
