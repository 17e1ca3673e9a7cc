"""Display and debug-drawing configuration constants."""

# Screen dimensions in pixels for the debug window
SCREEN_WIDTH = 1088
SCREEN_HEIGHT = 612

# The frame rate for the demo loop, in frames per second
FRAME_RATE = 60

# World units are drawn this many pixels wide
PIXELS_PER_UNIT = 32.0

# Colours (RGB)
BACKGROUND_COLOR = (20, 24, 32)
AGENT_COLOR = (230, 230, 230)
TARGET_COLOR = (240, 200, 60)
OBSTACLE_COLOR = (90, 110, 140)
VELOCITY_COLOR = (220, 60, 60)  # manager velocity arrow
DESIRED_VELOCITY_COLOR = (220, 60, 220)  # per-behaviour desired velocity arrow
HELPER_COLOR = (255, 255, 255)  # radii, wander circle, avoidance
FLOW_FIELD_COLOR = (220, 60, 220)

AGENT_RADIUS = 0.25  # world units
HIT_MARKER_RADIUS = 0.15
CARROT_RADIUS = 0.05

# UI Display Constants
SEPARATOR_WIDTH = 60  # Width of separator lines in console output
