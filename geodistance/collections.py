"""
Module for sequences of GeoCoordinates
"""

__all__ = ['GeoPath']

from functools import cached_property
from typing import Iterable, List, Optional

import numpy as np
from pydantic import validate_call

from geodistance._const import PRECISION
from geodistance.coordinates import GeoCoordinate
from geodistance.distance import vincenty_distances
from geodistance.parsers import parse_coordinate
from geodistance.utils.functions import round_half_away


class GeoPath:

    """
    An ordered sequence of GeoCoordinates (e.g. a route), measured leg by leg
    """

    @validate_call(config=dict(arbitrary_types_allowed=True))
    def __init__(self, coordinates: List[GeoCoordinate]):
        self.coordinates = list(coordinates)

    def __add__(self, other):
        if not isinstance(other, GeoPath):
            raise ValueError('You can only combine a GeoPath with another GeoPath')

        return GeoPath(self.coordinates + other.coordinates)

    def __bool__(self):
        return bool(self.coordinates)

    def __contains__(self, item):
        return item in self.coordinates

    def __eq__(self, other):
        """Test equality"""
        if not isinstance(other, GeoPath):
            return False

        return self.coordinates == other.coordinates

    def __getitem__(self, item):
        """Index or slice; slices return a new GeoPath"""
        if isinstance(item, slice):
            return GeoPath(self.coordinates[item])

        return self.coordinates[item]

    def __iter__(self):
        """Iterate through the coordinates"""
        return self.coordinates.__iter__()

    def __len__(self):
        """The number of coordinates"""
        return self.coordinates.__len__()

    def __repr__(self):
        """REPL representation"""
        if not self.coordinates:
            return '<Empty GeoPath>'

        return f'<GeoPath with {len(self.coordinates)} coordinates>'

    @classmethod
    def from_str(cls, texts: Iterable[str]) -> 'GeoPath':
        """
        Create a GeoPath from "lat,lng" strings.

        Args:
            texts:
                An iterable of coordinate strings, in path order

        Raises:
            CoordinateParseError, if any string is malformed

        Returns:
            GeoPath
        """
        return cls([parse_coordinate(x) for x in texts])

    @cached_property
    def leg_distances(self) -> np.ndarray:
        """Provides an array of the distances (in kilometers) between consecutive
        coordinates. The length of the returned array will always be len(self) - 1;
        legs that fail to converge are NaN."""
        if len(self.coordinates) < 2:
            raise ValueError('Cannot compute distances between fewer than two coordinates.')

        return vincenty_distances(self.coordinates[:-1], self.coordinates[1:])

    @cached_property
    def length(self) -> Optional[float]:
        """The total path length in kilometers, or None if any leg failed to converge"""
        legs = self.leg_distances
        if np.isnan(legs).any():
            return None

        return round_half_away(float(legs.sum()), PRECISION)
