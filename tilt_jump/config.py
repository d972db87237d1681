"""Game configuration constants for Tilt Jump.

Units are matrix cells and ticks: the simulation advances in fixed steps, so
velocities are cells per tick and gravity is cells per tick squared.
"""

from __future__ import annotations

# Display (LED matrix)
SCREEN_WIDTH = 25
SCREEN_HEIGHT = 25

# Tick loop
TICK_RATE = 20  # ticks/s
TICK_INTERVAL = 1.0 / TICK_RATE  # s

# Physics
GRAVITY = 0.15  # cells/tick^2, +y is down
JUMP_FORCE = -2.0  # cells/tick
SUPER_JUMP_FORCE = -6.0  # cells/tick
MAX_HORIZONTAL_SPEED = 2.0  # cells/tick

# Player
PLAYER_START = (12.0, 20.0)
PLAYER_WIDTH = 2.0
PLAYER_HEIGHT = 2.0

# Platforms
PLATFORM_WIDTH = 4.0
PLATFORM_HEIGHT = 1.0
MOVING_PLATFORM_SPEED = 0.5  # cells/tick
# Cumulative draw in [0, 100): normal, bouncy, moving
KIND_WEIGHTS = (80, 15, 5)
NORMAL_INTENSITY = 255
BOUNCY_INTENSITY = 100
MOVING_INTENSITY = 180

# Generation
START_PLATFORM = (10.0, 22.0)  # directly under PLAYER_START
PLATFORM_COUNT = 8  # initial layout, start platform included
INITIAL_FIRST_GAP_Y = 18.0
INITIAL_GAP_MIN = 2.0
INITIAL_GAP_MAX = 6.0
SPAWN_GAP_MIN = 3.0
SPAWN_GAP_MAX = 7.0
SPAWN_LOOKAHEAD = 10.0  # keep the top platform at least this far above the camera
DESPAWN_MARGIN = 5.0

# Camera / terminal check
CAMERA_FOLLOW_THRESHOLD = 8.0
GAME_OVER_MARGIN = 5.0

# Score
SCORE_SCALE = 10  # points per cell climbed

# Input
MAX_TILT = 6.0  # raw accelerometer clamp (m/s^2)
TILT_GAIN = 0.4  # tilt -> cells/tick

# Rendering
VISIBLE_MARGIN = 2.0
PLAYER_INTENSITY = 255
HOME_PLATFORM_INTENSITY = 200
GAME_OVER_INTENSITY = 255

# Desktop viewer
CELL_PIXELS = 24
VIEWER_FPS = 60
COL_BG = (8, 8, 10)
COL_CELL_OFF = (22, 22, 26)
COL_CELL_ON = (240, 240, 245)
COL_TEXT = (200, 200, 210)
