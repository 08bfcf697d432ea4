"""mathematical constants and defaults computed once here to avoid recomputation"""
import math

# general math constants
PI2 = math.pi**2.0
THREE_OVER_PI_SQUARED = 3.0 / PI2

# glicko 2 scale, 400 / ln(10)
GLICKO2_SCALE = 173.7178
DEFAULT_RATING = 1500.0
DEFAULT_RD = 350.0
DEFAULT_VOLATILITY = 0.06

# system constant, reasonable choices are between 0.3 and 1.2
DEFAULT_TAU = 0.5

# root finding
EPSILON = 1e-6
MAX_ITER = 1000
