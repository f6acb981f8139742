"""
Constants declarations for geotriangulation
"""

# Cartesian -> geodetic iteration (GOST 32453-2017, 5.1.2)
GEODETIC_TOLERANCE = 1e-10  # radians
MAX_GEODETIC_ITERATIONS = 100

# Distance from the rotation axis below which a point is treated as polar (meters)
POLAR_AXIS_TOLERANCE = 1e-10

# Gauss-Krueger zonal projection on the Krasovsky ellipsoid (GOST 51794)
GK_ZONE_WIDTH_DEGREES = 6
GK_MERIDIAN_ARC_SCALE = 6367558.4968  # meters per radian of footpoint latitude
GK_KRASOVSKY_A = 6378245.0
GK_FALSE_EASTING = 500_000.0
GK_ZONE_PREFIX = 1_000_000.0

# Round-off allowed before a law-of-cosines / inverse-trig argument is rejected
DOMAIN_TOLERANCE = 1e-9
