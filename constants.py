# constants.py
"""
Application-level constants.

These values are static and do not change between simulation runs.
Physics values below are the defaults the engine falls back to when the
configuration file does not override them.
"""

# --- Force Law ---
# Gravitational-style constant used by the pairwise force.
G = 100
# Separation used in the force law is clamped to this range. The floor avoids
# the singularity at zero distance, the ceiling bounds long-range pull.
FORCE_DISTANCE_MIN = 40
FORCE_DISTANCE_MAX = 2000

# --- Particles ---
INITIAL_PARTICLE_COUNT = 10
PARTICLE_MASS = 2
PARTICLE_DIAMETER = 20
TRAIL_LENGTH = 10

# --- Pointer Force ---
# Virtual mass of the pointer when it acts as a force source.
POINTER_MASS = 10

# --- Polarity ---
# +1 makes particles repel each other, -1 makes them attract.
REPEL = 1
ATTRACT = -1

# --- Speed Colouring ---
# Speeds across the domain map linearly onto the range of "redness".
# Speeds above the domain extrapolate past 255 rather than saturating.
SPEED_COLOUR_DOMAIN = (1, 15)
SPEED_COLOUR_RANGE = (0, 255)
PARTICLE_RED = 255
REST_COLOUR = (255, 255, 255)

# --- Visualization settings ---
# Set to True to run in borderless fullscreen mode.
FULLSCREEN = False
WINDOW_WIDTH = 1280
WINDOW_HEIGHT = 720
FPS = 60
BACKGROUND_COLOR = (51, 51, 51)
WINDOW_CAPTION = "Particle Trails"
