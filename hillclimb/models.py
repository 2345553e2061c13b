# models.py
from dataclasses import dataclass
from typing import List, Tuple
import numpy as np

@dataclass(frozen=True)
class Location:
    node: int
    row: int
    col: int

    @property
    def rc(self) -> Tuple[int, int]:
        return (self.row, self.col)

@dataclass(frozen=True)
class Edge:
    node: int
    cost: int = 1

AdjacencyList = List[List[Edge]]

def rc_to_idx(r: int, c: int, W: int) -> int:
    return r * W + c

def idx_to_rc(i: int, W: int) -> Tuple[int, int]:
    return (i // W, i % W)

# eq=False: ndarray fields have no scalar truth value
@dataclass(frozen=True, eq=False)
class HeightMap:
    elevation: np.ndarray   # (H,W) int8, read-only
    nodes: np.ndarray       # (H,W) node id lookup, read-only

    @property
    def shape(self) -> Tuple[int, int]:
        return self.elevation.shape

    @property
    def H(self) -> int:
        return self.elevation.shape[0]

    @property
    def W(self) -> int:
        return self.elevation.shape[1]

    @property
    def size(self) -> int:
        return int(self.elevation.size)

    def location(self, row: int, col: int) -> Location:
        return Location(int(self.nodes[row, col]), row, col)

    def locate(self, node: int) -> Location:
        if not 0 <= node < self.size:
            raise IndexError(f"node {node} outside grid of {self.size} cells")
        row, col = idx_to_rc(node, self.W)
        return Location(node, row, col)

    def elevation_of(self, node: int) -> int:
        loc = self.locate(node)
        return int(self.elevation[loc.row, loc.col])

    def find_targets(self, elevation: int) -> List[Location]:
        """All locations at ``elevation``, in node order."""
        rows, cols = np.nonzero(self.elevation == elevation)
        return [self.location(int(r), int(c)) for r, c in zip(rows, cols)]
