"""
Representation of a specific point on earth
"""

__all__ = ['GeoCoordinate']

import math
from typing import Tuple, Union


class GeoCoordinate:
    """
    Representation of a coordinate on the globe (i.e., a lat/lng pair), in
    decimal degrees. Instances are immutable.
    """

    __slots__ = ('_lat', '_lng')

    def __init__(
        self,
        lat: Union[float, int, str],
        lng: Union[float, int, str],
        _bounded: bool = True,
    ):
        _lat, _lng = float(lat), float(lng)
        if not (math.isfinite(_lat) and math.isfinite(_lng)):
            raise ValueError(f'Coordinate values must be finite, got ({lat}, {lng})')

        if _bounded:
            if not -90 <= _lat <= 90:
                raise ValueError(f'Latitude {_lat} is outside of [-90, 90]')

            if not -180 <= _lng <= 180:
                raise ValueError(f'Longitude {_lng} is outside of [-180, 180]')

        object.__setattr__(self, '_lat', _lat)
        object.__setattr__(self, '_lng', _lng)

    def __setattr__(self, name, value):
        raise AttributeError(f'{self.__class__.__name__} is immutable')

    def __delattr__(self, name):
        raise AttributeError(f'{self.__class__.__name__} is immutable')

    def __eq__(self, other):
        if not isinstance(other, GeoCoordinate):
            return False

        return self.lat == other.lat and self.lng == other.lng

    def __hash__(self):
        return hash((self.lat, self.lng))

    def __repr__(self):
        return f'<GeoCoordinate({self.lat}, {self.lng})>'

    @property
    def lat(self) -> float:
        """Latitude, in degrees"""
        return self._lat

    @property
    def lng(self) -> float:
        """Longitude, in degrees"""
        return self._lng

    @classmethod
    def from_str(cls, text: str) -> 'GeoCoordinate':
        """
        Create a GeoCoordinate from a "lat,lng" string, e.g. "42.3541165,-71.0693514".

        Raises:
            CoordinateParseError, if the text is not a valid coordinate pair
        """
        from geodistance.parsers import parse_coordinate  # pylint: disable=import-outside-toplevel

        return parse_coordinate(text)

    def to_float(self, reverse: bool = False) -> Tuple[float, float]:
        """
        Converts the coordinate to a tuple of floats (latitude, longitude).

        Args:
            reverse: (bool)
                (Default False) If True, reverses the order to (longitude, latitude)

        Returns:
            Tuple[float, float]
        """
        if reverse:
            return self.lng, self.lat

        return self.lat, self.lng

    def to_str(self) -> str:
        """
        Converts the coordinate to a "lat,lng" string. Floats are written with
        their shortest round-tripping representation, so
        GeoCoordinate.from_str(c.to_str()) == c.
        """
        return f'{self.lat!r},{self.lng!r}'
