"""Default sampling parameters.

The resolution matches what the teach-pendant preview has always used; a
finer step gives smoother robot motion at the cost of more waypoints.
"""

# Angular step used to discretize arcs and circles (degrees)
DEFAULT_RESOLUTION_DEG = 15.0

# Max gap between the last sampled angle and the arc end before the exact
# end point is appended (degrees)
ENDPOINT_TOLERANCE_DEG = 1e-3

DEFAULT_NOZZLE_NUMBER = 1
