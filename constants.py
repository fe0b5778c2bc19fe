# constants.py

"""
Application Constants

This module defines static configuration values for the application's framework.
These are not expected to change between simulation runs.

Data Contract:
- All values are immutable constants.
- Units are specified in comments where applicable.
"""

# Screen dimensions (initial; the window is resizable)
WIDTH = 1600  # Pixels
HEIGHT = 900  # Pixels

# Framerate
FPS = 60  # Frames per second

# Colors (RGB)
WHITE = (255, 255, 255)

# Window Title
TITLE = "Collision Particles"

# Background cleared before every frame.
BACKGROUND_COLOR = WHITE

# Name of the dedicated application logger.
LOGGER_NAME = "collision_sim"

# Particle palettes. Colors are hex strings, accepted directly by pygame.Color.
PALETTES = {
    "classic": ["#2185C5", "#7ECEFD", "#FFF6E5", "#FF7F66"],
    "flat": ["#3498db", "#2ecc71", "#e74c3c", "#f39c12",
             "#9b59b6", "#1abc9c", "#f1c40f", "#e67e22"],
    "material": ["#4285F4", "#34A853", "#FBBC05", "#EA4335",
                 "#6F2DBD", "#FF6D00", "#009688", "#795548"],
}
DEFAULT_PALETTE = "material"

# Pointer proximity effect
POINTER_RADIUS = 150.0    # Pixels. Particles closer than this fade in.
OPACITY_MAX = 0.3         # Upper bound of the fill opacity.
OPACITY_STEP_UP = 0.05    # Added per tick while the pointer is near.
OPACITY_STEP_DOWN = 0.03  # Removed per tick while the pointer is far.

# Initial velocity components are drawn uniformly from [-MAX, MAX).
MAX_INITIAL_SPEED = 1.0   # Pixels per tick

# Samples tried for a single particle before placement gives up.
DEFAULT_MAX_PLACEMENT_ATTEMPTS = 10000

# Width of the particle outline in pixels.
STROKE_WIDTH = 1
