import numpy as np
import pytest
from pydantic import ValidationError

from geodistance import GeoCoordinate, GeoPath
from geodistance.parsers import CoordinateParseError


BOSTON = GeoCoordinate(42.3541165, -71.0693514)
NEW_YORK = GeoCoordinate(40.7791472, -73.9680804)
CINCINNATI = GeoCoordinate(39.152501, -84.412977)


def test_geopath_init():
    path = GeoPath([BOSTON, NEW_YORK])
    assert path.coordinates == [BOSTON, NEW_YORK]

    assert len(GeoPath([])) == 0
    assert not GeoPath([])

    with pytest.raises(ValidationError):
        GeoPath([BOSTON, (40.7791472, -73.9680804)])

    with pytest.raises(ValidationError):
        GeoPath(BOSTON)


def test_geopath_from_str():
    path = GeoPath.from_str(['42.3541165,-71.0693514', ' 40.7791472, -73.9680804 '])
    assert path == GeoPath([BOSTON, NEW_YORK])

    with pytest.raises(CoordinateParseError):
        GeoPath.from_str(['42.3541165,-71.0693514', '40.7791472'])


def test_geopath_dunders():
    path = GeoPath([BOSTON, NEW_YORK, CINCINNATI])

    assert len(path) == 3
    assert list(path) == [BOSTON, NEW_YORK, CINCINNATI]
    assert NEW_YORK in path
    assert GeoCoordinate(0., 0.) not in path

    assert path[0] == BOSTON
    assert path[-1] == CINCINNATI
    assert path[1:] == GeoPath([NEW_YORK, CINCINNATI])

    assert path == GeoPath([BOSTON, NEW_YORK, CINCINNATI])
    assert path != GeoPath([CINCINNATI, NEW_YORK, BOSTON])
    assert path != [BOSTON, NEW_YORK, CINCINNATI]

    assert repr(path) == '<GeoPath with 3 coordinates>'
    assert repr(GeoPath([])) == '<Empty GeoPath>'


def test_geopath_add():
    path = GeoPath([BOSTON]) + GeoPath([NEW_YORK, CINCINNATI])
    assert path == GeoPath([BOSTON, NEW_YORK, CINCINNATI])

    with pytest.raises(ValueError):
        _ = GeoPath([BOSTON]) + [NEW_YORK]


def test_geopath_leg_distances():
    path = GeoPath([BOSTON, NEW_YORK, CINCINNATI])
    np.testing.assert_array_equal(
        path.leg_distances,
        np.array([298.396186, 909.877092])
    )

    # Revisiting a point is a zero-length leg
    path = GeoPath([BOSTON, BOSTON, NEW_YORK])
    np.testing.assert_array_equal(
        path.leg_distances,
        np.array([0., 298.396186])
    )

    path = GeoPath([GeoCoordinate(0., 0.), GeoCoordinate(0., 180.), GeoCoordinate(0., 179.)])
    legs = path.leg_distances
    assert np.isnan(legs[0])
    assert legs[1] == pytest.approx(111.319491, abs=1e-6)

    with pytest.raises(ValueError):
        _ = GeoPath([BOSTON]).leg_distances

    with pytest.raises(ValueError):
        _ = GeoPath([]).leg_distances


def test_geopath_length():
    path = GeoPath([BOSTON, NEW_YORK, CINCINNATI])
    assert path.length == 1208.273278

    assert GeoPath([BOSTON, NEW_YORK]).length == 298.396186

    path = GeoPath([GeoCoordinate(0., 0.), GeoCoordinate(0., 180.), GeoCoordinate(0., 179.)])
    assert path.length is None

    with pytest.raises(ValueError):
        _ = GeoPath([BOSTON]).length


def test_geopath_caller_list_not_shared():
    coords = [BOSTON, NEW_YORK]
    path = GeoPath(coords)
    assert path.length == 298.396186

    coords.append(CINCINNATI)
    coords[0] = NEW_YORK
    assert path.coordinates == [BOSTON, NEW_YORK]
    assert path.coordinates is not coords
    assert len(path.leg_distances) == 1
    assert path.length == 298.396186
