# -*- coding: utf-8 -*-

"""
geoutm/config.py

This module centralizes the fixed constants used by the geoutm projection code.
Keeping the ellipsoid, the UTM grid conventions and the logging defaults in one
place keeps the forward and inverse paths consistent with each other.

Contents:
---------
1. ELLIPSOID:
   - Semi-major (`a`) and semi-minor (`b`) axes of the reference ellipsoid.
   - Values are WGS84. Only this ellipsoid is supported.

2. UTM_GRID:
   - Scale factor on the central meridian (`scale_factor`).
   - False easting applied to every zone (`false_easting`).
   - False northing applied in the southern hemisphere (`false_northing_south`).
   - Zone geometry (`zone_width_deg`, `min_zone`, `max_zone`).

3. LOGGING:
   - Format and default level used by the command line front end.
     The library itself never installs handlers.

Usage:
------
    from geoutm.config import ELLIPSOID, UTM_GRID

    n = (ELLIPSOID['a'] - ELLIPSOID['b']) / (ELLIPSOID['a'] + ELLIPSOID['b'])

"""
import logging

# ───────────────────────────────────────────────────────────────────────────────
# 1) REFERENCE ELLIPSOID (meters)
# ───────────────────────────────────────────────────────────────────────────────
ELLIPSOID = {
    'name': 'WGS84',
    'a': 6378137.0,             # semi-major axis (m)
    'b': 6356752.314,           # semi-minor axis (m)
}

# ───────────────────────────────────────────────────────────────────────────────
# 2) UTM GRID CONVENTIONS
# ───────────────────────────────────────────────────────────────────────────────
UTM_GRID = {
    'scale_factor': 0.9996,             # k0 on the central meridian
    'false_easting': 500000.0,          # central meridian easting (m)
    'false_northing_south': 10000000.0, # added to negative northings (m)
    'zone_width_deg': 6.0,              # longitudinal width of a zone (deg)
    'min_zone': 1,
    'max_zone': 60,
}

# ───────────────────────────────────────────────────────────────────────────────
# 3) LOGGING (command line only)
# ───────────────────────────────────────────────────────────────────────────────
LOGGING = {
    'format': '%(asctime)s [%(levelname)s] %(message)s',
    'level': logging.WARNING,
    'verbose_level': logging.DEBUG,
}
