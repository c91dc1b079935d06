"""
constants.py: Centralized configuration for game physics, world and scoring.
"""

# -------- Scaling Reference --------
ORIGINAL_WIDTH = 500            # Reference width all scaled values are designed for
ORIGINAL_HEIGHT = 200           # Reference height all scaled values are designed for
TOP = 0                         # Top boundary of the game area

# -------- Physics Config (Pixels / Second / Second) --------
GRAVITY_FAC = 15
GRAVITY = 20 * GRAVITY_FAC      # Downward acceleration (pixels/s^2)
JUMP_VEL = -0.8 * GRAVITY       # Vertical velocity set by a flap (pixels/s)
HERO_SPEED = 80                 # Constant horizontal speed before scaling (pixels/s)

# -------- Hero Config --------
HERO_START_X = 20
HERO_START_Y = 20
HERO_BASE_WIDTH = 15
HERO_BASE_HEIGHT = 10
HERO_SIZE_FACTOR = 2            # Hero is drawn twice its base size
HERO_COLLISION_SCALE = 0.6      # Hitbox is 60% of the visual box, centered
RENDER_X = 60                   # Screen x where the hero is drawn

# -------- Pipe Config --------
PIPE_WID = 50                   # Width of each pipe
PIPE_PAD = PIPE_WID * 4         # Horizontal spacing between pipe pairs
PIPE_BUF = 20                   # Pipes kept in the buffer (10 pairs)
PIPE_START_X = 200              # Minimum lead of the first pipe ahead of the hero
HOLE_HEIGHT_FACTOR = 2.5        # Hole height relative to the hero height
MAX_HOLE_ATTEMPTS = 5           # Resamples allowed to avoid repeating the last hole

# -------- World Config --------
NUM_CLOUDS = 8
NUM_FOREGROUND_CLOUDS = 4

CLOUD_COLORS = (
    "#FFFFFF", "#F8F8FF", "#F0F8FF", "#E6F3FF", "#F5F5F5",
    "#FFFAFA", "#F0FFFF", "#E0F6FF", "#F7F7F7", "#E8F4F8",
)
FOREGROUND_CLOUD_COLORS = ("#FFFFFF", "#F8F8FF", "#F0F8FF", "#F5F5F5", "#FFFAFA")
BUILDING_COLORS = (
    "#3F4147", "#4B4D52", "#5A4741", "#6B5D56",
    "#525459", "#4A5451", "#3A4C4C", "#504C49",
)

# -------- High Score Config --------
DEFAULT_INITIALS = "WIN"
MAX_INITIALS = 5
MAX_HIGH_SCORES = 5
DEFAULT_HIGH_SCORES = (
    (50, "ACE"),
    (40, "FLY"),
    (25, "SKY"),
    (10, DEFAULT_INITIALS),
    (1, "TRY"),
)
DB_FILE = "flappy_scores.db"
