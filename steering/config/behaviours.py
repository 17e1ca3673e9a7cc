"""Default values and floors for steering managers and behaviours.

Numeric settings below their floor are clamped to the floor when assigned,
never rejected.
"""

# =============================================================================
# STEERING MANAGER
# =============================================================================

DEFAULT_MAX_SPEED = 5.0  # units per second
MIN_MAX_SPEED = 0.0

DEFAULT_MASS = 1.0  # kilograms
MIN_MASS = 1.0

DEFAULT_ROTATE = True
DEFAULT_TIMESCALE_INDEPENDENT = False
DEFAULT_DEBUG = True


# =============================================================================
# BEHAVIOUR BASE
# =============================================================================

DEFAULT_WEIGHT = 1.0
MIN_WEIGHT = 0.0
MAX_WEIGHT = 1.0


# =============================================================================
# DISTANCE-SCALED BEHAVIOURS
# =============================================================================

DEFAULT_SLOWING_RADIUS = 2.0  # Arrival
DEFAULT_SAFE_RADIUS = 2.0  # Eschew
DEFAULT_ATTRACTION_RADIUS = 2.0  # Magnet
MIN_BEHAVIOUR_RADIUS = 1.0


# =============================================================================
# WANDER
# =============================================================================

DEFAULT_CIRCLE_DISTANCE = 1.0
MIN_CIRCLE_DISTANCE = 1.0
DEFAULT_CIRCLE_RADIUS = 0.5
MIN_CIRCLE_RADIUS = 0.0

# Wander angle drift is sampled per second in [-360, 360) and scaled by dt
WANDER_ANGLE_RANGE = 360.0


# =============================================================================
# AVOID
# =============================================================================

DEFAULT_SEE_AHEAD_DISTANCE = 2.0
MIN_SEE_AHEAD_DISTANCE = 1.0
DEFAULT_RAYCAST_RADIUS = 0.0  # 0 selects a thin ray instead of a circle sweep
MIN_RAYCAST_RADIUS = 0.0

# Layer mask matching every layer (Python ints are unbounded, -1 has all bits set)
ALL_LAYERS = -1


# =============================================================================
# PURSUIT / EVADE
# =============================================================================

DEFAULT_MAX_FUTURE_STEPS = 5
MIN_MAX_FUTURE_STEPS = 0

# Target velocity is estimated as displacement over this fixed interval
TARGET_SAMPLE_INTERVAL = 1.0  # seconds
# Accumulated float ticks within this of the interval count as reaching it
SAMPLE_TIME_EPSILON = 1e-9


# =============================================================================
# FLOW FIELD
# =============================================================================

MIN_FLOW_FIELD_CELLS = 1
RANDOM_VECTOR_LOW = -100
RANDOM_VECTOR_HIGH = 100
# Flow field debug arrows span 2/3.5 of a cell
FLOW_ARROW_DIVISOR = 3.5
# Seed of the shared Perlin generator used when a field is given none
DEFAULT_NOISE_SEED = 0
