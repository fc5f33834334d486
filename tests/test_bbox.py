import math

import pytest

from geotypes.bbox import (
    bbox_to_object, bbox_to_polygon, calc_positions_bounds, create_bbox_2d, create_bbox_3d, get_bbox_center,
    is_2d_bbox, is_3d_bbox, is_empty_bbox, is_position_in_bbox, object_to_bbox, union_bbox, validate_bbox,
)
from geotypes.schemas.geojson import (
    Feature, FeatureCollection, GeometryCollection, LineString, MultiPoint, MultiPolygon, Point, Polygon,
)
from geotypes.utils import calculate_feature_collection_bbox, calculate_geometry_bbox

EMPTY = (math.inf, math.inf, -math.inf, -math.inf)


def test_bbox_dimensions():
    assert is_2d_bbox(create_bbox_2d(0, 0, 1, 1))
    assert is_3d_bbox(create_bbox_3d(0, 0, -10, 1, 1, 10))
    assert not is_3d_bbox((0, 0, 1, 1))


def test_bbox_object_conversion():
    box = bbox_to_object((0, 1, -10, 2, 3, 10))
    assert (box.west, box.south, box.east, box.north) == (0, 1, 2, 3)
    assert (box.min_elevation, box.max_elevation) == (-10, 10)
    assert object_to_bbox(box) == (0, 1, -10, 2, 3, 10)
    assert object_to_bbox(bbox_to_object((0, 1, 2, 3))) == (0, 1, 2, 3)


def test_bbox_to_polygon():
    polygon = bbox_to_polygon((0, 1, 2, 3))
    assert polygon.coordinates == [[(0, 1), (2, 1), (2, 3), (0, 3), (0, 1)]]


def test_bbox_to_polygon_from_3d_bbox_uses_horizontal_bounds():
    polygon = bbox_to_polygon((0, 1, -10, 2, 3, 10))
    assert polygon.coordinates[0][2] == (2, 3)


def test_union_bbox():
    assert union_bbox([0, 0, 1, 1], [2, 2, 3, 3]) == (0, 0, 3, 3)
    assert union_bbox((-5, 0, 1, 1), (0, -5, 0.5, 0.5)) == (-5, -5, 1, 1)


def test_union_bbox_with_elevation():
    assert union_bbox((0, 0, -1, 1, 1, 1), (2, 2, -5, 3, 3, 0)) == (0, 0, -5, 3, 3, 1)


def test_union_bbox_drops_elevation_when_one_side_lacks_it():
    assert union_bbox((0, 0, -1, 1, 1, 1), (2, 2, 3, 3)) == (0, 0, 3, 3)
    assert union_bbox((2, 2, 3, 3), (0, 0, -1, 1, 1, 1)) == (0, 0, 3, 3)


def test_position_in_bbox():
    assert is_position_in_bbox((0.5, 0.5), (0, 0, 1, 1))
    assert not is_position_in_bbox((2, 2), (0, 0, 1, 1))


def test_position_in_bbox_is_inclusive():
    assert is_position_in_bbox((0, 0), (0, 0, 1, 1))
    assert is_position_in_bbox((1, 1), (0, 0, 1, 1))


def test_position_in_bbox_with_elevation():
    bbox = (0, 0, 0, 1, 1, 100)
    assert is_position_in_bbox((0.5, 0.5, 50), bbox)
    assert not is_position_in_bbox((0.5, 0.5, 150), bbox)
    # a 2D position is only tested horizontally
    assert is_position_in_bbox((0.5, 0.5), bbox)


def test_position_with_elevation_in_2d_bbox():
    assert is_position_in_bbox((0.5, 0.5, 9000), (0, 0, 1, 1))


@pytest.mark.parametrize('bbox, expected', [
    ([0, 0, 1, 1], True),
    ((-180, -90, 180, 90), True),
    ([0, 0, -10, 1, 1, 10], False),  # 3D layout reads min_elevation as east
    ([1, 0, 0, 1], False),
    ([0, 1, 1, 0], False),
    ([0, 0, 1], False),
    ([0, 0, '1', 1], False),
    ([0, 0, True, 1], False),
    ('0,0,1,1', False),
    (None, False),
])
def test_validate_bbox(bbox, expected):
    assert validate_bbox(bbox) is expected


def test_bbox_center():
    assert get_bbox_center((0, 0, 2, 4)) == (1, 2)
    assert get_bbox_center((0, 0, 10, 2, 4, 20)) == (1, 2, 15)


def test_positions_bounds_are_padded():
    bounds = calc_positions_bounds([(1, 2), (3, 0), (2, 5)])
    assert bounds.south_west == pytest.approx((0.999, -0.001))
    assert bounds.north_east == pytest.approx((3.001, 5.001))

    unpadded = calc_positions_bounds([(1, 2), (3, 0)], padding=0)
    assert unpadded.south_west == (1, 0)
    assert unpadded.north_east == (3, 2)


def test_point_bbox():
    assert calculate_geometry_bbox(Point(coordinates=(10, 20))) == (10, 20, 10, 20)


def test_line_string_bbox():
    line = LineString(coordinates=[(0, 5), (-3, 2), (4, -1)])
    assert calculate_geometry_bbox(line) == (-3, -1, 4, 5)


def test_polygon_bbox_ignores_elevation():
    polygon = Polygon(coordinates=[[(0, 0, 10), (2, 0, 20), (2, 3, 30), (0, 0, 10)]])
    assert calculate_geometry_bbox(polygon) == (0, 0, 2, 3)


def test_multi_polygon_bbox():
    multi = MultiPolygon(coordinates=[
        [[(0, 0), (1, 0), (1, 1), (0, 0)]],
        [[(5, 5), (6, 5), (6, 7), (5, 5)]],
    ])
    assert calculate_geometry_bbox(multi) == (0, 0, 6, 7)


def test_geometry_collection_bbox_recurses():
    collection = GeometryCollection(geometries=[
        Point(coordinates=(-10, 3)),
        GeometryCollection(geometries=[LineString(coordinates=[(0, 0), (4, 8)])]),
    ])
    assert calculate_geometry_bbox(collection) == (-10, 0, 4, 8)


def test_empty_geometries_give_empty_sentinel():
    assert calculate_geometry_bbox(GeometryCollection(geometries=[])) == EMPTY
    assert calculate_geometry_bbox(MultiPoint(coordinates=[])) == EMPTY
    assert is_empty_bbox(calculate_geometry_bbox(LineString(coordinates=[])))
    assert not is_empty_bbox((0, 0, 0, 0))


def test_feature_collection_bbox_skips_null_geometry():
    collection = FeatureCollection(features=[
        Feature(geometry=Point(coordinates=(1, 1))),
        Feature(geometry=None, properties={'name': 'nowhere'}),
        Feature(geometry=LineString(coordinates=[(2, -2), (3, 0)])),
    ])
    assert calculate_feature_collection_bbox(collection) == (1, -2, 3, 1)


def test_empty_feature_collection_bbox():
    assert calculate_feature_collection_bbox(FeatureCollection(features=[])) == EMPTY


def test_union_with_empty_sentinel_is_neutral():
    assert union_bbox(EMPTY, (0, 1, 2, 3)) == (0, 1, 2, 3)
    assert union_bbox((0, 1, 2, 3), EMPTY) == (0, 1, 2, 3)
