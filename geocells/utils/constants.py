"""Constant data shared by the geohash codec, adjacency and coverage modules."""

# Default geohash length
GEOHASH_PRECISION = 10

# Longest geohash `encode` will produce
MAX_PRECISION = 22

# Characters used in geohashes (excludes a, i, l, o)
BASE32 = "0123456789bcdefghjkmnpqrstuvwxyz"

# Sorts after every BASE32 character; closes open-ended query ranges
RANGE_SENTINEL = "~"

DIRECTIONS = ("n", "s", "e", "w")

# Neighbour/border tables indexed by len(geohash) % 2
NEIGHBOUR = {
    "n": ("p0r21436x8zb9dcf5h7kjnmqesgutwvy", "bc01fg45238967deuvhjyznpkmstqrwx"),
    "s": ("14365h7k9dcfesgujnmqp0r2twvyx8zb", "238967debc01fg45kmstqrwxuvhjyznp"),
    "e": ("bc01fg45238967deuvhjyznpkmstqrwx", "p0r21436x8zb9dcf5h7kjnmqesgutwvy"),
    "w": ("238967debc01fg45kmstqrwxuvhjyznp", "14365h7k9dcfesgujnmqp0r2twvyx8zb"),
}
BORDER = {
    "n": ("prxz", "bcfguvyz"),
    "s": ("028b", "0145hjnp"),
    "e": ("bcfguvyz", "prxz"),
    "w": ("0145hjnp", "028b"),
}

# Meridional circumference of the earth in meters
EARTH_MERI_CIRCUMFERENCE = 40007860

# Length of a degree of latitude at the equator
METERS_PER_DEGREE_LATITUDE = 110574

BITS_PER_CHAR = 5

MAXIMUM_BITS_PRECISION = MAX_PRECISION * BITS_PER_CHAR

# Equatorial radius of the earth in meters
EARTH_EQ_RADIUS = 6378137.0

# Eccentricity squared, (EQ_RADIUS^2 - POL_RADIUS^2) / EQ_RADIUS^2 with a
# polar radius of 6356752.3 m, kept exact to avoid rounding errors
E2 = 0.00669447819799

# Cutoff for rounding errors on double calculations
EPSILON = 1e-12

# Mean earth radius used by the haversine distance
EARTH_RADIUS_KM = 6371.0
