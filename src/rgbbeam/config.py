"""Global constants and default settings."""

WINDOW_WIDTH = 480
WINDOW_HEIGHT = 720
FPS = 60
WINDOW_TITLE = "RGB Beam"

# Lane geometry (units; the pygame renderer maps one unit to one pixel)
LANE_TOP = 80
LANE_HEIGHT = 600
BLOCK_SIZE = 60
SPAWN_POSITION = -BLOCK_SIZE
FLOOR_POSITION = LANE_HEIGHT - BLOCK_SIZE

# Round flow
COUNTDOWN_START = 3
COUNTDOWN_STEP_MS = 1000
SEED_BLOCK_COUNT = 5
SEED_BLOCK_SPACING = BLOCK_SIZE

# Periodic processes (milliseconds)
ACCELERATION_PERIOD_MS = 6000
TARGET_TICK_MS = 50

# Fall speed is expressed in units per frame at this reference rate
REFERENCE_FPS = 60

# Difficulty curve
INITIAL_SPAWN_INTERVAL_MS = 1000
SPAWN_INTERVAL_DECAY = 0.92
MIN_SPAWN_INTERVAL_MS = 260
INITIAL_FALL_SPEED = 1.2
FALL_SPEED_GROWTH = 1.08
MAX_FALL_SPEED = 4.5
TIME_LIMIT_SCALE = 1.25
MIN_TIME_LIMIT_MS = 420
MAX_TIME_LIMIT_MS = 1400

# Visual effects
BEAM_LIFETIME_MS = 180
