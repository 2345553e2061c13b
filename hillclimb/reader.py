# region Imports
import logging
from typing import List
from hillclimb.errors import FormatError
# endregion

logger = logging.getLogger(__name__)

# region Text Input
def read_rows(path: str) -> List[str]:
    """Lines of a heightmap file, line endings stripped, blank lines dropped."""
    try:
        with open(path, "r", encoding="utf-8") as f:
            rows = [line.rstrip("\r\n") for line in f]
    except UnicodeDecodeError as e:
        bad = e.object[e.start:e.end]
        raise FormatError(f"{path} is not valid UTF-8 at byte {e.start}: {bad!r}", bad) from e
    rows = [r for r in rows if r]
    logger.debug("Read %d rows from %s", len(rows), path)
    return rows
# endregion
