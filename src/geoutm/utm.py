"""
utm.py

Universal Transverse Mercator conversions built on `geoutm.projection`.

Public functions:
- `lat_lon_to_utm(lat, lon, zone=None, out=None)` -> UTMPoint | ConversionFailure
- `utm_to_lat_lon(easting, northing, zone, south=False, out=None)`
  -> GeodeticPoint | ConversionFailure
- `zone_for_longitude(lon)` -> int

Validation failures are returned as `ConversionFailure`, never raised, and
are detected before any computation. When `out` is given (a mutable sequence
with at least two slots, e.g. a list or numpy array) the two computed values
are also written to `out[0]` and `out[1]`, only on success.
"""
from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional, Union
import logging
import math
import numbers
import numpy as np

from geoutm.angle_utils import deg_to_rad, rad_to_deg
from geoutm.config import UTM_GRID
from geoutm.projection import map_lat_lon_to_xy, map_xy_to_lat_lon, utm_central_meridian

logger = logging.getLogger(__name__)

SCALE_FACTOR = UTM_GRID['scale_factor']
FALSE_EASTING = UTM_GRID['false_easting']
FALSE_NORTHING_SOUTH = UTM_GRID['false_northing_south']
MIN_ZONE = UTM_GRID['min_zone']
MAX_ZONE = UTM_GRID['max_zone']


class ConversionError(Enum):
    INVALID_ZONE = 'invalid zone'
    INVALID_OUTPUT = 'invalid output target'


@dataclass(frozen=True)
class UTMPoint:
    """Successful geodetic -> UTM conversion. `zone` is the zone actually used."""
    easting: float
    northing: float
    zone: int
    ok: bool = True


@dataclass(frozen=True)
class GeodeticPoint:
    """Successful UTM -> geodetic conversion, degrees."""
    latitude: float
    longitude: float
    ok: bool = True


@dataclass(frozen=True)
class ConversionFailure:
    error: ConversionError
    message: str = ''
    ok: bool = False


def _usable_output(out: Any) -> bool:
    """True if `out` is absent or can receive two floats by index."""
    if out is None:
        return True
    if isinstance(out, np.ndarray):
        if not out.flags.writeable:
            return False
        if not np.can_cast(np.float64, out.dtype, 'same_kind'):
            return False
    if not hasattr(out, '__setitem__'):
        return False
    try:
        return len(out) >= 2
    except TypeError:
        return False


def _fail(error: ConversionError, message: str) -> ConversionFailure:
    logger.debug('%s: %s', error.value, message)
    return ConversionFailure(error, message)


def zone_for_longitude(lon: float) -> int:
    """UTM zone containing longitude `lon` (degrees).

    floor((lon + 180) / 6) + 1, with lon == 180 folded into zone 60 since that
    meridian is the eastern edge of zone 60. Other longitudes outside
    [-180, 180] are not clamped and give a zone outside [1, 60].

    Raises ValueError if `lon` is NaN or infinite.
    """
    if not math.isfinite(lon):
        raise ValueError(f'cannot derive a UTM zone from lon={lon}')
    zone = int(math.floor((lon + 180.0) / UTM_GRID['zone_width_deg'])) + 1
    # floor gives 61 here; treated as zone 60 rather than rejected
    if lon == 180.0:
        zone = MAX_ZONE
    return zone


def _explicit_zone(zone: Any) -> Optional[int]:
    """Return `zone` as an int if it is an integral value, else None."""
    if isinstance(zone, bool):
        return None
    if isinstance(zone, numbers.Integral):
        return int(zone)
    if isinstance(zone, float) and zone.is_integer():
        return int(zone)
    return None


def lat_lon_to_utm(lat: float, lon: float, zone: Optional[int] = None,
                   out=None) -> Union[UTMPoint, ConversionFailure]:
    """Convert latitude/longitude (degrees) to UTM easting/northing (meters).

    Parameters:
    - lat, lon: geodetic coordinates in degrees
    - zone: UTM zone to project into; derived from `lon` when None
    - out: optional mutable sequence receiving (easting, northing)

    Returns: `UTMPoint` on success. `ConversionFailure` with
    `INVALID_OUTPUT` if `out` cannot hold two values, or `INVALID_ZONE` if
    the supplied or derived zone is outside [1, 60].

    Southern-hemisphere points get the 10,000,000 m false northing, so
    northings are never negative.
    """
    if not _usable_output(out):
        return _fail(ConversionError.INVALID_OUTPUT,
                     f'cannot write easting/northing to {type(out).__name__}')

    if zone is None:
        if not math.isfinite(lon):
            return _fail(ConversionError.INVALID_ZONE,
                         f'cannot derive a zone from lon={lon}')
        zone_ = zone_for_longitude(lon)
    else:
        zone_ = _explicit_zone(zone)
        if zone_ is None:
            return _fail(ConversionError.INVALID_ZONE,
                         f'zone {zone!r} is not an integer')

    if zone_ < MIN_ZONE or zone_ > MAX_ZONE:
        return _fail(ConversionError.INVALID_ZONE,
                     f'zone {zone_} outside [{MIN_ZONE}, {MAX_ZONE}]')

    logger.debug('lat=%s lon=%s -> zone %d', lat, lon, zone_)

    x, y = map_lat_lon_to_xy(deg_to_rad(lat), deg_to_rad(lon), utm_central_meridian(zone_))

    easting = float(x) * SCALE_FACTOR + FALSE_EASTING
    northing = float(y) * SCALE_FACTOR
    if northing < 0.0:
        northing += FALSE_NORTHING_SOUTH

    if out is not None:
        out[0] = easting
        out[1] = northing
    return UTMPoint(easting, northing, zone_)


def utm_to_lat_lon(easting: float, northing: float, zone: int, south: bool = False,
                   out=None) -> Union[GeodeticPoint, ConversionFailure]:
    """Convert UTM easting/northing (meters) to latitude/longitude (degrees).

    Parameters:
    - easting, northing: UTM coordinates in meters
    - zone: UTM zone the point lies in
    - south: bool, True if the point is in the southern hemisphere.
      Only truthiness is looked at; a negative int counts as south.
    - out: optional mutable sequence receiving (latitude, longitude)

    Returns: `GeodeticPoint`, or `ConversionFailure` with `INVALID_OUTPUT`
    if `out` cannot hold two values.

    The zone is not range checked here: a zone outside [1, 60] gives a
    central meridian outside [-177, 177] and a result that is defined but
    not geographically meaningful.
    """
    if not _usable_output(out):
        return _fail(ConversionError.INVALID_OUTPUT,
                     f'cannot write latitude/longitude to {type(out).__name__}')

    if not MIN_ZONE <= zone <= MAX_ZONE:
        logger.debug('zone %s outside [%d, %d]; converting anyway', zone, MIN_ZONE, MAX_ZONE)

    x = (easting - FALSE_EASTING) / SCALE_FACTOR
    y = northing
    if south:
        y -= FALSE_NORTHING_SOUTH
    y /= SCALE_FACTOR

    phi, lam = map_xy_to_lat_lon(x, y, utm_central_meridian(zone))

    lat = float(rad_to_deg(phi))
    lon = float(rad_to_deg(lam))

    if out is not None:
        out[0] = lat
        out[1] = lon
    return GeodeticPoint(lat, lon)
