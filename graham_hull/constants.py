from enum import Enum

SAMPLE_POINTS = ((0, 3), (2, 2), (1, 1), (2, 1), (3, 0), (0, 0), (3, 3))

MIN_HULL_POINTS = 3
DEFAULT_CHUNKSIZE = 16
DEFAULT_LOG_LEVEL = "INFO"
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


class Turn(int, Enum):
    # sign of convex_hull.orientation with y pointing up
    CLOCKWISE = 1
    COLLINEAR = 0
    COUNTER_CLOCKWISE = -1
