# region Imports
from typing import Optional, Tuple
from hillclimb.config import MAX_CLIMB, STEP_COST
from hillclimb.models import HeightMap
# endregion

# region Edge Cost Factory
def climb_cost_factory(hmap: HeightMap, max_climb: int = MAX_CLIMB):
    elev = hmap.elevation

    # region Edge‑cost Function
    def edge_cost(u: Tuple[int, int], v: Tuple[int, int]) -> Optional[int]:
        r0, c0 = u
        r1, c1 = v
        # int() first: int8 subtraction must not wrap
        dh = int(elev[r1, c1]) - int(elev[r0, c0])
        if dh > max_climb:
            return None
        return STEP_COST
    # endregion

    return edge_cost
# endregion
