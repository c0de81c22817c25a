# IN THIS FILE: ALL CONSTANTS (TABLE, MESSAGES, SERVER)

from simulator.utils.enums import Direction

# -----------------------------------------------------------------------------
# 1. TABLE DIMENSIONS
# -----------------------------------------------------------------------------
# (0, 0) is the SOUTH WEST corner. Valid cells are 0..4 on both axes.
TABLE_WIDTH = 5
TABLE_HEIGHT = 5

# -----------------------------------------------------------------------------
# 2. TURNING
# -----------------------------------------------------------------------------
# Clockwise order. RIGHT = index + 1, LEFT = index - 1 (both mod 4).
DIRECTION_CYCLE = (
    Direction.NORTH,
    Direction.EAST,
    Direction.SOUTH,
    Direction.WEST,
)

# -----------------------------------------------------------------------------
# 3. OUTPUT LINES
# -----------------------------------------------------------------------------
NOT_PLACED_REPORT = "Robot not placed."

INVALID_COORDINATES_MSG = "PLACE command ignored: Invalid coordinates ({x},{y}) or off table."
INVALID_DIRECTION_MSG = "PLACE command ignored: Invalid direction '{direction}'."
INVALID_PLACE_FORMAT_MSG = (
    "PLACE command ignored: Invalid format or missing/incorrect arguments. "
    "Expected 'X,Y,DIRECTION'. Input: '{line}'"
)
NOT_PLACED_IGNORED_MSG = "Command '{line}' ignored: Robot not placed."
UNKNOWN_COMMAND_MSG = "Warning: Unknown command '{line}' was encountered and ignored."

# -----------------------------------------------------------------------------
# 4. SERVER & CLIENT
# -----------------------------------------------------------------------------
SERVER_HOST = "0.0.0.0"
SERVER_PORT = 5000
DEFAULT_URL = "http://localhost:5000"
REQUEST_TIMEOUT = 10  # HTTP request timeout in seconds

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
