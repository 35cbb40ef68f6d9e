"""Command line front end for geoutm.

Usage:
    geoutm forward LAT LON [--zone ZONE]
    geoutm inverse EASTING NORTHING ZONE [--south]

Options:
    --zone: project into this zone instead of the one containing LON
    --south: EASTING/NORTHING are in the southern hemisphere
    -v/--verbose: debug logging on stderr
"""
import argparse
import logging
import sys

from geoutm import __version__
from geoutm.config import LOGGING
from geoutm.utm import lat_lon_to_utm, utm_to_lat_lon

logger = logging.getLogger(__name__)


def build_parser():
    parser = argparse.ArgumentParser(prog='geoutm',
                                     description='Convert between latitude/longitude and UTM (WGS84).')
    parser.add_argument('--version', action='version', version=f'%(prog)s {__version__}')
    parser.add_argument('-v', '--verbose', action='store_true')
    sub = parser.add_subparsers(dest='command', required=True)

    fwd = sub.add_parser('forward', help='latitude/longitude (deg) -> UTM (m)')
    fwd.add_argument('lat', type=float)
    fwd.add_argument('lon', type=float)
    fwd.add_argument('--zone', type=int, default=None)

    inv = sub.add_parser('inverse', help='UTM (m) -> latitude/longitude (deg)')
    inv.add_argument('easting', type=float)
    inv.add_argument('northing', type=float)
    inv.add_argument('zone', type=int)
    inv.add_argument('--south', action='store_true')
    return parser


def main(argv=None):
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=LOGGING['verbose_level'] if args.verbose else LOGGING['level'],
        format=LOGGING['format'],
    )

    if args.command == 'forward':
        res = lat_lon_to_utm(args.lat, args.lon, zone=args.zone)
        if res.ok:
            print(f'{res.zone} {res.easting:.2f} {res.northing:.2f}')
    else:
        res = utm_to_lat_lon(args.easting, args.northing, args.zone, south=args.south)
        if res.ok:
            print(f'{res.latitude:.9f} {res.longitude:.9f}')

    if not res.ok:
        logger.debug('conversion failed: %s', res.error.name)
        print(f'error: {res.message}', file=sys.stderr)
        return 2
    return 0


if __name__ == '__main__':
    sys.exit(main())
