"""
Constants declarations for geodistance
"""

# WGS84 Ellipsoid Constants
WGS84_A = 6378137.0  # Major axis (meters)
WGS84_F = 1 / 298.257223563  # Flattening
WGS84_B = (1 - WGS84_F) * WGS84_A

# Vincenty solver
MAX_ITERATIONS = 200
CONVERGENCE_THRESHOLD = 1e-12  # radians, between successive lambda values
PRECISION = 6  # decimal places of the distance in kilometers
