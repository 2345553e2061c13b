# region Imports
from typing import Any, Optional
# endregion


class HeightmapError(Exception):
    """Base class for errors raised while loading or searching a heightmap."""


# region Loader Errors
class FormatError(HeightmapError, ValueError):
    """Input rows do not describe a valid heightmap.

    ``token`` is the offending character, marker or row.
    """

    def __init__(self, message: str, token: Any = None):
        super().__init__(message)
        self.token = token
# endregion


# region Search Errors
class UnreachableError(HeightmapError):
    """No directed path exists between ``start`` and ``end``."""

    def __init__(self, start: Any, end: Any, message: Optional[str] = None):
        if message is None:
            message = f"No path found between {start} and {end}"
        super().__init__(message)
        self.start = start
        self.end = end
# endregion
