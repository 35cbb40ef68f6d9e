"""Compare against PROJ's transverse Mercator for points inside their zone."""
import pytest

pyproj = pytest.importorskip('pyproj')

from geoutm import utm

# series truncation plus the rounded semi-minor axis stay well under this
TOL_M = 0.05

POINTS = [
    (-28.234982, 79.293801),
    (29.109890, -9.237811),
    (34.123080, 19.237891),
    (-33.298711, 127.000999),
    (60.109830, 18.238791),
    (45.333988, -134.982133),
    (-53.849968, -17.978963),
    (0.8213581, -112.3973616),
]


def _epsg(zone, lat):
    return (32700 if lat < 0.0 else 32600) + zone


@pytest.mark.parametrize('lat, lon', POINTS)
def test_forward_matches_proj(lat, lon):
    res = utm.lat_lon_to_utm(lat, lon)
    tr = pyproj.Transformer.from_crs('EPSG:4326', f'EPSG:{_epsg(res.zone, lat)}', always_xy=True)
    e, n = tr.transform(lon, lat)
    assert abs(res.easting - e) < TOL_M
    assert abs(res.northing - n) < TOL_M


@pytest.mark.parametrize('lat, lon', POINTS)
def test_inverse_matches_proj(lat, lon):
    zone = utm.zone_for_longitude(lon)
    tr = pyproj.Transformer.from_crs(f'EPSG:{_epsg(zone, lat)}', 'EPSG:4326', always_xy=True)
    fwd = pyproj.Transformer.from_crs('EPSG:4326', f'EPSG:{_epsg(zone, lat)}', always_xy=True)
    e, n = fwd.transform(lon, lat)
    res = utm.utm_to_lat_lon(e, n, zone, south=lat < 0.0)
    lon2, lat2 = tr.transform(e, n)
    assert abs(res.latitude - lat2) < 1e-6
    assert abs(res.longitude - lon2) < 1e-6
