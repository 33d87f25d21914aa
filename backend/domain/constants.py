"""
Game constants for Uncle Wyrm.
"""

# Steering keys
LEFT = "LEFT"
RIGHT = "RIGHT"
VALID_KEYS = {LEFT, RIGHT}

# Round states
ALIVE = "alive"
DEAD = "dead"
WON = "won"

# Board
BOARD_HEIGHT = 500
BOARD_WIDTH = 500
TOP_LIMIT = 20
BOTTOM_MARGIN = 35
GAP_ADJUST = 10
GAP_HALF_WIDTH = 20

# Wyrm body
DOT_RAD = 5
NUM_DOTS = 50  # buffered capacity
START_DOTS = 3
START_Y = 50
SEGMENT_SPACING = 10
NECK_SEGMENTS = 4
GROWTH = 3
GROWTH_CEILING = 36

# Apples
APPLE_RAD = 15
RAND_POS = 23
APPLE_TOLERANCE = 2
MAX_PLACEMENT_ATTEMPTS = 1000
SCORE_PER_APPLE = 5

# Heading
SPEED = 10
TURN_STEP = 11.25

# Timing (milliseconds)
DELAY = 100
ROTATE_DELAY = 20
ROTATE_RATIO = DELAY // ROTATE_DELAY
