# region Imports
import logging
from typing import Iterable, List, Optional, Tuple
import numpy as np

from hillclimb.config import (
    END_MARKER,
    HIGHEST_MARKER,
    LOWEST_MARKER,
    MAX_ELEVATION,
    MIN_ELEVATION,
    START_MARKER,
)
from hillclimb.errors import FormatError
from hillclimb.models import HeightMap, Location, rc_to_idx
# endregion

logger = logging.getLogger(__name__)

# region Cell Decoding
def elevation_of_char(ch: str) -> int:
    """Map one grid character to its elevation, normalizing the markers."""
    if not (ch.isascii() and ch.isalpha()):
        raise FormatError(f"Expected all ASCII alphabetic characters, got {ch!r}", ch)
    if ch == START_MARKER:
        ch = LOWEST_MARKER
    elif ch == END_MARKER:
        ch = HIGHEST_MARKER

    h = ord(ch) - ord(LOWEST_MARKER)
    if not MIN_ELEVATION <= h <= MAX_ELEVATION:
        raise FormatError(
            f"Character {ch!r} maps outside elevation range "
            f"[{MIN_ELEVATION}, {MAX_ELEVATION}]",
            ch,
        )
    return h
# endregion

# region Heightmap Loader
def load_heightmap(rows: Iterable[str]) -> Tuple[HeightMap, Location, Location]:
    """
    Turn text rows into a HeightMap plus the start and end locations.

    Node ids are assigned row-major from 0. Raises FormatError on a
    non-letter, an out-of-range letter, a missing or repeated marker,
    an empty grid or rows of unequal width.
    """
    grid: List[List[int]] = []
    start: Optional[Location] = None
    end: Optional[Location] = None
    W = None

    for r, line in enumerate(rows):
        if W is None:
            W = len(line)
        elif len(line) != W:
            raise FormatError(
                f"Row {r} has width {len(line)}, expected {W}", line
            )

        row = []
        for c, ch in enumerate(line):
            row.append(elevation_of_char(ch))
            if ch == START_MARKER:
                if start is not None:
                    raise FormatError(f"Second start marker at {(r, c)}", ch)
                start = Location(rc_to_idx(r, c, W), r, c)
            elif ch == END_MARKER:
                if end is not None:
                    raise FormatError(f"Second end marker at {(r, c)}", ch)
                end = Location(rc_to_idx(r, c, W), r, c)
        grid.append(row)

    if not grid or not W:
        raise FormatError("Heightmap is empty", "")
    if start is None:
        raise FormatError(f"Missing start marker {START_MARKER!r}", START_MARKER)
    if end is None:
        raise FormatError(f"Missing end marker {END_MARKER!r}", END_MARKER)

    H = len(grid)
    elevation = np.array(grid, dtype=np.int8)
    nodes = np.arange(H * W, dtype=np.int64).reshape(H, W)
    elevation.setflags(write=False)
    nodes.setflags(write=False)

    logger.debug("Loaded %dx%d heightmap, start=%s end=%s", H, W, start, end)
    return HeightMap(elevation=elevation, nodes=nodes), start, end
# endregion
