"""Module for parsing text into GeoCoordinates"""

__all__ = ['CoordinateParseError', 'parse_coordinate']

import re

from geodistance.coordinates import GeoCoordinate


# A signed decimal number with an optional exponent, e.g. '-71.0693514', '.5', '1e-05'
_RE_DECIMAL = re.compile(r'^[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?$')


class CoordinateParseError(ValueError):
    """Raised when text cannot be read as a "lat,lng" coordinate pair"""


def _parse_decimal(part: str, text: str) -> float:
    """Converts one half of a coordinate string to a float"""
    part = part.strip()
    if not _RE_DECIMAL.match(part):
        raise CoordinateParseError(f'Invalid number {part!r} in coordinate {text!r}')

    return float(part)


def parse_coordinate(text: str) -> GeoCoordinate:
    """
    Parses a coordinate from a string of two decimal numbers separated
    by a comma, e.g. "42.3541165,-71.0693514". The first number is the
    latitude, the second the longitude; whitespace around either is ignored.

    Args:
        text:
            The coordinate string

    Raises:
        CoordinateParseError:
            If the separator is missing, either half is not a decimal
            number, or the values are out of range

    Returns:
        GeoCoordinate
    """
    lat_str, sep, lng_str = text.partition(',')
    if not sep:
        raise CoordinateParseError(f'Missing "," separator in coordinate {text!r}')

    lat = _parse_decimal(lat_str, text)
    lng = _parse_decimal(lng_str, text)

    try:
        return GeoCoordinate(lat, lng)
    except ValueError as err:
        raise CoordinateParseError(f'Coordinate {text!r} is out of range: {err}') from err
