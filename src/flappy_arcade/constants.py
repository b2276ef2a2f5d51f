"""
constants.py: Centralized configuration for the game world, physics and driver.
"""

# -------- Game World Config --------
GAME_WIDTH = 360
GAME_HEIGHT = 640

# -------- Bird Config --------
BIRD_WIDTH = 34
BIRD_HEIGHT = 24

# -------- Pipe Config --------
PIPE_WIDTH = 64
PIPE_HEIGHT = 512
PIPE_Y = 0                      # Top of the gap anchor range
PIPE_SPEED = 2.0                # Horizontal speed (pixels/tick)
PIPE_SPAWN_INTERVAL = 1.5       # Seconds of wall-clock time between pairs

# -------- Physics Config (Pixels / Tick) --------
GRAVITY = 0.32                  # Added to the vertical velocity every tick
MAX_FALL_VELOCITY = 6.5         # Clamping for stability
JUMP_IMPULSE = -8.0             # Velocity set by a flap

# -------- Driver Config --------
RENDER_FPS = 60
DB_FILE = "flappy_arcade.db"
LOGGER_NAME = "flappy_arcade"

# -------- Colors --------
SKY_COLOR = (0, 191, 255)
PIPE_COLOR = (0, 150, 0)
BIRD_COLOR = (255, 220, 0)
TEXT_COLOR = (255, 255, 255)
