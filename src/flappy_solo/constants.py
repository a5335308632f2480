"""
constants.py: Centralized configuration for the game world, physics and rendering.
"""

# -------- Window & Loop Config --------
DEFAULT_SCREEN_WIDTH = 1280
DEFAULT_SCREEN_HEIGHT = 720
RENDER_FPS = 60
WINDOW_TITLE = "Flappy Solo"

# -------- Scaling --------
REFERENCE_HEIGHT = 720          # Every base constant below is tuned for 720p

# -------- Bird Config (multiplied by scale) --------
BIRD_X_RATIO = 0.2              # Bird X = viewport width * ratio
BIRD_SIZE = 40
GRAVITY_ACCEL = 1000.0          # Vertical acceleration (pixels/s^2)
LIFT_IMPULSE = -300.0           # Velocity set on every flap (pixels/s)

# -------- Pipe Config --------
PIPE_WIDTH = 80                 # (x scale)
PIPE_SPEED_PPS = 300.0          # Horizontal speed, pixels/second (x scale)
PIPE_GAP_RATIO = 0.28           # Gap = viewport height * ratio
PIPE_MIN_TOP_RATIO = 0.1        # Lowest allowed top segment, fraction of height
PIPE_BOTTOM_MARGIN_RATIO = 0.2  # Space kept free under the gap, fraction of height
PIPE_SPAWN_INTERVAL_MS = 1500

# -------- Tilt --------
TILT_REFERENCE_VELOCITY = 300.0  # Velocity mapped to the full tilt
MAX_TILT_DEG = 45.0

# -------- Text --------
PROMPT_TEXT = "Click or press a key to start"
PROMPT_FONT_RATIO = 0.03
SCORE_FONT_RATIO = 0.04

# -------- Colors (fallback drawing) --------
SKY_COLOR = (0, 191, 255)
PIPE_COLOR = (0, 150, 0)
BIRD_COLOR = (255, 210, 0)
PROMPT_COLOR = (0, 0, 0)
SCORE_COLOR = (255, 255, 255)

# -------- Asset Files --------
ASSETS_DIR = "assets"
BIRD_IMAGE = "character.png"
PIPE_IMAGE = "pipe.png"
BACKGROUND_IMAGE = "background.PNG"
START_IMAGE = "start_screen.png"
FALLBACK_PIPE_HEIGHT = 720      # Unscaled height of the generated pipe sprite
