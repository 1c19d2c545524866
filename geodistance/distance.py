"""
Geodesic distance on the WGS84 ellipsoid, via Vincenty's inverse formula.
"""

__all__ = ['calc_distance', 'vincenty_distance', 'vincenty_distances']

import math
from typing import Optional, Sequence

import numpy as np

from geodistance._const import (
    CONVERGENCE_THRESHOLD, MAX_ITERATIONS, PRECISION, WGS84_A, WGS84_B, WGS84_F
)
from geodistance.coordinates import GeoCoordinate
from geodistance.parsers import parse_coordinate
from geodistance.utils.functions import round_half_away
from geodistance.utils.logging import LOGGER, warn_once


def _arc_length_meters(
    cosSqAlpha: float,
    sinSigma: float,
    cos2SigmaM: float,
    cosSigma: float,
    sigma: float,
) -> float:
    """Closed-form ellipsoidal correction, applied once lambda has converged"""
    uSq = cosSqAlpha * (WGS84_A ** 2 - WGS84_B ** 2) / (WGS84_B ** 2)
    A = 1 + uSq / 16384 * (4096 + uSq * (-768 + uSq * (320 - 175 * uSq)))
    B = uSq / 1024 * (256 + uSq * (-128 + uSq * (74 - 47 * uSq)))
    deltaSigma = B * sinSigma * (
        cos2SigmaM + B / 4 * (
            cosSigma * (-1 + 2 * cos2SigmaM ** 2) -
            B / 6 * cos2SigmaM * (-3 + 4 * sinSigma ** 2) * (-3 + 4 * cos2SigmaM ** 2)
        )
    )

    return WGS84_B * A * (sigma - deltaSigma)


def vincenty_distance(coord1: GeoCoordinate, coord2: GeoCoordinate) -> Optional[float]:
    """
    Calculate the distance in kilometers between two coordinates using Vincenty's
    inverse formula (WGS84 ellipsoid), rounded to 6 decimal places.

    Points whose sigma sine vanishes (coincident points, or points too close
    together to separate in floating point) are reported as 0.0.

    Args:
        coord1:
            The start Coordinate

        coord2:
            The end Coordinate

    Returns:
        (float) the distance in kilometers, or None if lambda did not converge
        within 200 iterations (typically nearly-antipodal points)
    """
    U1 = math.atan((1 - WGS84_F) * math.tan(math.radians(coord1.lat)))
    U2 = math.atan((1 - WGS84_F) * math.tan(math.radians(coord2.lat)))
    L = math.radians(coord2.lng - coord1.lng)
    Lambda = L

    sinU1, cosU1 = math.sin(U1), math.cos(U1)
    sinU2, cosU2 = math.sin(U2), math.cos(U2)

    for _ in range(MAX_ITERATIONS):
        sinLambda, cosLambda = math.sin(Lambda), math.cos(Lambda)
        sinSigma = math.sqrt((cosU2 * sinLambda) ** 2 +
                             (cosU1 * sinU2 - sinU1 * cosU2 * cosLambda) ** 2)

        if sinSigma == 0:
            if coord1 != coord2:
                LOGGER.debug('Sigma sine vanished between %r and %r', coord1, coord2)
                warn_once(
                    'Sigma sine vanished between distinct points; distance reported as 0.0. '
                    '(this warning will not repeat)'
                )
            return 0.0

        cosSigma = sinU1 * sinU2 + cosU1 * cosU2 * cosLambda
        sigma = math.atan2(sinSigma, cosSigma)
        sinAlpha = cosU1 * cosU2 * sinLambda / sinSigma
        cosSqAlpha = 1 - sinAlpha ** 2

        # Equatorial line
        cos2SigmaM = 0. if cosSqAlpha == 0 else cosSigma - 2 * sinU1 * sinU2 / cosSqAlpha

        C = WGS84_F / 16 * cosSqAlpha * (4 + WGS84_F - 3 * cosSqAlpha)
        Lambda_prev = Lambda
        Lambda = L + (1 - C) * WGS84_F * sinAlpha * (
            sigma + C * sinSigma * (cos2SigmaM + C * cosSigma * (-1 + 2 * cos2SigmaM ** 2))
        )

        if abs(Lambda - Lambda_prev) < CONVERGENCE_THRESHOLD:
            break
    else:
        LOGGER.debug(
            'Vincenty failed to converge after %d iterations between %r and %r',
            MAX_ITERATIONS, coord1, coord2
        )
        return None

    meters = _arc_length_meters(cosSqAlpha, sinSigma, cos2SigmaM, cosSigma, sigma)
    return round_half_away(meters / 1000, PRECISION)


def calc_distance(src: str, dst: str) -> Optional[float]:
    """
    Parse two "lat,lng" strings and calculate the distance between them.

    Args:
        src:
            The start coordinate, e.g. "42.3541165,-71.0693514"

        dst:
            The end coordinate, e.g. "40.7791472, -73.9680804"

    Raises:
        CoordinateParseError, if either string is malformed

    Returns:
        (float) the distance in kilometers, or None if the solver did not converge
    """
    return vincenty_distance(parse_coordinate(src), parse_coordinate(dst))


def vincenty_distances(
    sources: Sequence[GeoCoordinate],
    destinations: Sequence[GeoCoordinate],
) -> np.ndarray:
    """
    Element-wise distances (in kilometers) between two equal-length sequences
    of coordinates. Pairs that fail to converge are NaN.

    Args:
        sources:
            The start coordinates

        destinations:
            The end coordinates, matched to sources by position

    Returns:
        np.ndarray of floats, with the same length as the inputs
    """
    if len(sources) != len(destinations):
        raise ValueError(
            f'Cannot pair {len(sources)} source coordinates '
            f'with {len(destinations)} destination coordinates.'
        )

    distances = [vincenty_distance(x, y) for x, y in zip(sources, destinations)]
    return np.array(
        [np.nan if dist is None else dist for dist in distances],
        dtype=float
    )
