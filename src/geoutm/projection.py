"""
projection.py

Transverse Mercator series on the reference ellipsoid. These are the raw
projection formulas: no UTM scale factor, no false easting or northing.
The UTM conventions are applied in `geoutm.utm`.

Reference:
    Hoffmann-Wellenhof, B., Lichtenegger, H., and Collins, J.,
    GPS: Theory and Practice, 3rd ed. New York: Springer-Verlag Wien, 1994.

Public functions:
- `arc_length_of_meridian(phi)` -> meters from the equator
- `utm_central_meridian(zone)` -> radians
- `footpoint_latitude(y)` -> radians
- `map_lat_lon_to_xy(phi, lam, lam0)` -> (x, y)
- `map_xy_to_lat_lon(x, y, lam0)` -> (phi, lam)

All angles are radians. Inputs may be scalars or numpy arrays of a common
shape. Accuracy is only meaningful within a few degrees of the central
meridian, and `map_xy_to_lat_lon` divides by cos of the footpoint latitude so
it degenerates at the poles.
"""
from typing import Tuple
import numpy as np

from geoutm.angle_utils import deg_to_rad
from geoutm.config import ELLIPSOID

SM_A = ELLIPSOID['a']
SM_B = ELLIPSOID['b']

# third flattening
_N = (SM_A - SM_B) / (SM_A + SM_B)

# second eccentricity squared
_EP2 = (SM_A ** 2 - SM_B ** 2) / SM_B ** 2

# leading coefficient shared by the arc length and footpoint series
_ALPHA = ((SM_A + SM_B) / 2.0) * (1.0 + _N ** 2 / 4.0 + _N ** 4 / 64.0)


def arc_length_of_meridian(phi):
    """Ellipsoidal distance from the equator to latitude `phi` (meters).

    Sign follows the latitude.
    """
    phi = np.asarray(phi, dtype=float)
    n = _N

    beta = (-3.0 * n / 2.0) + (9.0 * n ** 3 / 16.0) + (-3.0 * n ** 5 / 32.0)
    gamma = (15.0 * n ** 2 / 16.0) + (-15.0 * n ** 4 / 32.0)
    delta = (-35.0 * n ** 3 / 48.0) + (105.0 * n ** 5 / 256.0)
    epsilon = 315.0 * n ** 4 / 512.0

    return _ALPHA * (phi
                     + beta * np.sin(2.0 * phi)
                     + gamma * np.sin(4.0 * phi)
                     + delta * np.sin(6.0 * phi)
                     + epsilon * np.sin(8.0 * phi))


def utm_central_meridian(zone):
    """Central meridian of a UTM zone, in radians.

    No range check; zones 1..60 give -177..+177 degrees.
    """
    return deg_to_rad(-183.0 + 6.0 * np.asarray(zone, dtype=float))


def footpoint_latitude(y):
    """Footpoint latitude (radians) for an unscaled transverse Mercator northing.

    Closed-form series inversion of `arc_length_of_meridian`; no iteration.
    """
    y = np.asarray(y, dtype=float)
    n = _N
    y_ = y / _ALPHA

    beta_ = (3.0 * n / 2.0) + (-27.0 * n ** 3 / 32.0) + (269.0 * n ** 5 / 512.0)
    gamma_ = (21.0 * n ** 2 / 16.0) + (-55.0 * n ** 4 / 32.0)
    delta_ = (151.0 * n ** 3 / 96.0) + (-417.0 * n ** 5 / 128.0)
    epsilon_ = 1097.0 * n ** 4 / 512.0

    return (y_
            + beta_ * np.sin(2.0 * y_)
            + gamma_ * np.sin(4.0 * y_)
            + delta_ * np.sin(6.0 * y_)
            + epsilon_ * np.sin(8.0 * y_))


def map_lat_lon_to_xy(phi, lam, lam0) -> Tuple[np.ndarray, np.ndarray]:
    """Project latitude/longitude onto the transverse Mercator plane.

    Parameters:
    - phi: latitude (radians)
    - lam: longitude (radians)
    - lam0: central meridian (radians)

    Returns: (x, y) in meters, unscaled and without false origin. Transverse
    Mercator is not UTM; see `geoutm.utm.lat_lon_to_utm`.
    """
    phi = np.asarray(phi, dtype=float)
    lam = np.asarray(lam, dtype=float)

    cp = np.cos(phi)
    nu2 = _EP2 * cp ** 2
    N = SM_A ** 2 / (SM_B * np.sqrt(1.0 + nu2))
    t = np.tan(phi)
    t2 = t * t
    l = lam - lam0

    # coefficients for l**n; l**1 and l**2 have coefficient 1.0
    l3coef = 1.0 - t2 + nu2
    l4coef = 5.0 - t2 + 9.0 * nu2 + 4.0 * (nu2 * nu2)
    l5coef = 5.0 - 18.0 * t2 + (t2 * t2) + 14.0 * nu2 - 58.0 * t2 * nu2
    l6coef = 61.0 - 58.0 * t2 + (t2 * t2) + 270.0 * nu2 - 330.0 * t2 * nu2
    l7coef = 61.0 - 479.0 * t2 + 179.0 * (t2 * t2) - (t2 * t2 * t2)
    l8coef = 1385.0 - 3111.0 * t2 + 543.0 * (t2 * t2) - (t2 * t2 * t2)

    x = (N * cp * l
         + (N / 6.0 * cp ** 3 * l3coef * l ** 3)
         + (N / 120.0 * cp ** 5 * l5coef * l ** 5)
         + (N / 5040.0 * cp ** 7 * l7coef * l ** 7))

    y = (arc_length_of_meridian(phi)
         + (t / 2.0 * N * cp ** 2 * l ** 2)
         + (t / 24.0 * N * cp ** 4 * l4coef * l ** 4)
         + (t / 720.0 * N * cp ** 6 * l6coef * l ** 6)
         + (t / 40320.0 * N * cp ** 8 * l8coef * l ** 8))

    return x, y


def map_xy_to_lat_lon(x, y, lam0) -> Tuple[np.ndarray, np.ndarray]:
    """Inverse of `map_lat_lon_to_xy`.

    Parameters:
    - x: easting (meters, unscaled, central meridian at 0)
    - y: northing (meters, unscaled, equator at 0)
    - lam0: central meridian (radians)

    Returns: (phi, lam) in radians.

    Nf, nuf2, tf play the role of N, nu2, t in `map_lat_lon_to_xy` but are
    evaluated at the footpoint latitude.
    """
    x = np.asarray(x, dtype=float)
    phif = footpoint_latitude(y)

    cf = np.cos(phif)
    nuf2 = _EP2 * cf ** 2
    Nf = SM_A ** 2 / (SM_B * np.sqrt(1.0 + nuf2))
    tf = np.tan(phif)
    tf2 = tf * tf
    tf4 = tf2 * tf2

    # fractional coefficients for x**n
    Nfpow = Nf
    x1frac = 1.0 / (Nfpow * cf)
    Nfpow = Nfpow * Nf
    x2frac = tf / (2.0 * Nfpow)
    Nfpow = Nfpow * Nf
    x3frac = 1.0 / (6.0 * Nfpow * cf)
    Nfpow = Nfpow * Nf
    x4frac = tf / (24.0 * Nfpow)
    Nfpow = Nfpow * Nf
    x5frac = 1.0 / (120.0 * Nfpow * cf)
    Nfpow = Nfpow * Nf
    x6frac = tf / (720.0 * Nfpow)
    Nfpow = Nfpow * Nf
    x7frac = 1.0 / (5040.0 * Nfpow * cf)
    Nfpow = Nfpow * Nf
    x8frac = tf / (40320.0 * Nfpow)

    # polynomial coefficients for x**n; x**1 has none
    x2poly = -1.0 - nuf2
    x3poly = -1.0 - 2.0 * tf2 - nuf2
    x4poly = (5.0 + 3.0 * tf2 + 6.0 * nuf2 - 6.0 * tf2 * nuf2
              - 3.0 * (nuf2 * nuf2) - 9.0 * tf2 * (nuf2 * nuf2))
    x5poly = 5.0 + 28.0 * tf2 + 24.0 * tf4 + 6.0 * nuf2 + 8.0 * tf2 * nuf2
    x6poly = -61.0 - 90.0 * tf2 - 45.0 * tf4 - 107.0 * nuf2 + 162.0 * tf2 * nuf2
    x7poly = -61.0 - 662.0 * tf2 - 1320.0 * tf4 - 720.0 * (tf4 * tf2)
    x8poly = 1385.0 + 3633.0 * tf2 + 4095.0 * tf4 + 1575.0 * (tf4 * tf2)

    phi = (phif
           + x2frac * x2poly * x ** 2
           + x4frac * x4poly * x ** 4
           + x6frac * x6poly * x ** 6
           + x8frac * x8poly * x ** 8)

    lam = (lam0
           + x1frac * x
           + x3frac * x3poly * x ** 3
           + x5frac * x5poly * x ** 5
           + x7frac * x7poly * x ** 7)

    return phi, lam
