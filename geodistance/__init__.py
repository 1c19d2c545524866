
from geodistance._version import __version__  # noqa: F401
from geodistance.utils.logging import LOGGER
from geodistance.coordinates import GeoCoordinate
from geodistance.parsers import CoordinateParseError, parse_coordinate
from geodistance.distance import calc_distance, vincenty_distance, vincenty_distances
from geodistance.collections import GeoPath

__all__ = [
    'CoordinateParseError',
    'GeoCoordinate',
    'GeoPath',
    'LOGGER',
    'calc_distance',
    'parse_coordinate',
    'vincenty_distance',
    'vincenty_distances',
]
