# config.py
START_MARKER = "S"
END_MARKER = "E"
LOWEST_MARKER = "a"   # elevation the start marker is normalized to
HIGHEST_MARKER = "z"  # elevation the end marker is normalized to

MIN_ELEVATION = 0
MAX_ELEVATION = 25

# A step may climb at most this many units; descending is unbounded
MAX_CLIMB = 1
STEP_COST = 1

DEFAULT_HOST = "0.0.0.0"
DEFAULT_PORT = 8081

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
LOG_DATEFMT = "%Y-%m-%dT%H:%M:%S%z"
