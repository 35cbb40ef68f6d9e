"""geoutm: geodetic <-> Universal Transverse Mercator conversions on WGS84."""
from geoutm.utm import (
    ConversionError,
    ConversionFailure,
    GeodeticPoint,
    UTMPoint,
    lat_lon_to_utm,
    utm_to_lat_lon,
    zone_for_longitude,
)

__version__ = '0.1.0'

__all__ = [
    'ConversionError',
    'ConversionFailure',
    'GeodeticPoint',
    'UTMPoint',
    'lat_lon_to_utm',
    'utm_to_lat_lon',
    'zone_for_longitude',
    '__version__',
]
