import logging
import math
from collections.abc import Iterator, Sequence
from typing import Any, Literal

import numpy as np
from shapely import Point as ShapelyPoint, Polygon as ShapelyPolygon

from geotypes.bbox import create_bbox_2d
from geotypes.core.constants import EARTH_RADIUS, METERS_PER_DEGREE_LATITUDE, METERS_PER_DEGREE_LONGITUDE
from geotypes.enums.geometry_type import GeometryType
from geotypes.enums.polygon_location import PolygonLocation
from geotypes.schemas.bbox import BBox2D
from geotypes.schemas.geojson import POSITION_TYPE, FeatureCollection, Geometry, LineString, Point, Polygon

logger = logging.getLogger(__name__)

# Nesting depth of `coordinates` for each geometry tag
_COORDINATE_DEPTH = {
    GeometryType.POINT: 0,
    GeometryType.LINE_STRING: 1,
    GeometryType.MULTI_POINT: 1,
    GeometryType.POLYGON: 2,
    GeometryType.MULTI_LINE_STRING: 2,
    GeometryType.MULTI_POLYGON: 3,
}


def degrees_to_radians(degrees: float) -> float:
    return degrees * (math.pi / 180)

def radians_to_degrees(radians: float) -> float:
    return radians * (180 / math.pi)


# ----- Spherical trigonometry -----
# numpy ufuncs so that NaN/inf inputs come back as NaN instead of raising

@np.errstate(invalid='ignore')
def calculate_distance(pos1: POSITION_TYPE, pos2: POSITION_TYPE) -> float:
    """Great-circle distance in meters (haversine, spherical earth).

    Elevation components are ignored.
    """
    lon1, lat1 = pos1[0], pos1[1]
    lon2, lat2 = pos2[0], pos2[1]

    d_lat = degrees_to_radians(lat2 - lat1)
    d_lon = degrees_to_radians(lon2 - lon1)

    a = np.sin(d_lat / 2) ** 2 + \
        np.cos(degrees_to_radians(lat1)) * np.cos(degrees_to_radians(lat2)) * np.sin(d_lon / 2) ** 2
    # rounding can push a slightly outside [0, 1]
    a = np.clip(a, 0.0, 1.0)

    c = 2 * np.arctan2(np.sqrt(a), np.sqrt(1 - a))
    return float(EARTH_RADIUS * c)


@np.errstate(invalid='ignore')
def calculate_bearing(pos1: POSITION_TYPE, pos2: POSITION_TYPE) -> float:
    """Initial bearing from pos1 to pos2, degrees clockwise from north in [0, 360).

    The bearing is 0 when both positions are equal.
    """
    lon1, lat1 = pos1[0], pos1[1]
    lon2, lat2 = pos2[0], pos2[1]

    d_lon = degrees_to_radians(lon2 - lon1)
    lat1_rad = degrees_to_radians(lat1)
    lat2_rad = degrees_to_radians(lat2)

    y = np.sin(d_lon) * np.cos(lat2_rad)
    x = np.cos(lat1_rad) * np.sin(lat2_rad) - np.sin(lat1_rad) * np.cos(lat2_rad) * np.cos(d_lon)

    bearing = (radians_to_degrees(float(np.arctan2(y, x))) + 360) % 360
    return bearing


@np.errstate(invalid='ignore')
def calculate_destination(start: POSITION_TYPE, distance: float, bearing: float) -> POSITION_TYPE:
    """Point reached after `distance` meters on initial `bearing` degrees.

    Returns a 2D position. The longitude is not wrapped back into
    [-180, 180]; callers that need it normalized must do so themselves.
    """
    lon, lat = start[0], start[1]
    bearing_rad = degrees_to_radians(bearing)
    lat_rad = degrees_to_radians(lat)
    lon_rad = degrees_to_radians(lon)

    angular_distance = distance / EARTH_RADIUS

    dest_lat_rad = np.arcsin(
        np.sin(lat_rad) * np.cos(angular_distance) +
        np.cos(lat_rad) * np.sin(angular_distance) * np.cos(bearing_rad)
    )
    dest_lon_rad = lon_rad + np.arctan2(
        np.sin(bearing_rad) * np.sin(angular_distance) * np.cos(lat_rad),
        np.cos(angular_distance) - np.sin(lat_rad) * np.sin(dest_lat_rad),
    )

    return (radians_to_degrees(float(dest_lon_rad)), radians_to_degrees(float(dest_lat_rad)))


def calculate_line_length(line_string: LineString) -> float:
    coordinates = line_string.coordinates
    return sum(
        (calculate_distance(coordinates[i - 1], coordinates[i]) for i in range(1, len(coordinates))),
        0.0,
    )


@np.errstate(invalid='ignore')
def calculate_polygon_area(polygon: Polygon) -> float:
    """Approximate area in square meters from the spherical excess of the outer ring.

    Holes are not subtracted and the ring is expected to be closed already.
    """
    ring = polygon.coordinates[0] if polygon.coordinates else []
    if len(ring) < 3:
        logger.debug('Polygon ring has %d vertices, area is 0', len(ring))
        return 0.0

    area = 0.0
    for p1, p2 in zip(ring, ring[1:]):
        area += degrees_to_radians(p2[0] - p1[0]) * \
            (2 + np.sin(degrees_to_radians(p1[1])) + np.sin(degrees_to_radians(p2[1])))

    return float(abs(area * EARTH_RADIUS * EARTH_RADIUS / 2))


@np.errstate(invalid='ignore', divide='ignore')
def create_buffer(point: Point, distance: float) -> Polygon:
    """Rectangular buffer of half-width `distance` meters around a point.

    Uses a flat meters-per-degree approximation, good enough away from the poles.
    """
    lon, lat = point.coordinates[0], point.coordinates[1]

    delta_lon = float(distance / (METERS_PER_DEGREE_LONGITUDE * np.cos(degrees_to_radians(lat))))
    delta_lat = distance / METERS_PER_DEGREE_LATITUDE

    return Polygon(coordinates=[[
        (lon - delta_lon, lat - delta_lat),
        (lon + delta_lon, lat - delta_lat),
        (lon + delta_lon, lat + delta_lat),
        (lon - delta_lon, lat + delta_lat),
        (lon - delta_lon, lat - delta_lat),
    ]])


# ----- Bounding boxes -----

def _iter_positions(coordinates: Any, depth: int) -> Iterator[POSITION_TYPE]:
    if depth == 0:
        yield coordinates
        return
    for child in coordinates:
        yield from _iter_positions(child, depth - 1)


def _bbox_of_boxes(boxes: Iterator[BBox2D]) -> BBox2D:
    min_lon = min_lat = math.inf
    max_lon = max_lat = -math.inf
    for west, south, east, north in boxes:
        min_lon = min(min_lon, west)
        min_lat = min(min_lat, south)
        max_lon = max(max_lon, east)
        max_lat = max(max_lat, north)
    return create_bbox_2d(min_lon, min_lat, max_lon, max_lat)


def calculate_geometry_bbox(geometry: Geometry) -> BBox2D:
    """2D bounding box of any geometry; elevation is never included.

    A geometry without any position (empty coordinates or an empty
    collection) gives the inverted sentinel ``(inf, inf, -inf, -inf)``,
    see ``geotypes.bbox.is_empty_bbox``.
    """
    if geometry.type == GeometryType.GEOMETRY_COLLECTION:
        bbox = _bbox_of_boxes(calculate_geometry_bbox(child) for child in geometry.geometries)
    else:
        positions = _iter_positions(geometry.coordinates, _COORDINATE_DEPTH[geometry.type])
        bbox = _bbox_of_boxes((p[0], p[1], p[0], p[1]) for p in positions)

    if math.isinf(bbox[0]):
        logger.debug('%s has no positions, returning the empty bbox sentinel', geometry.type)
    return bbox


def calculate_feature_collection_bbox(feature_collection: FeatureCollection) -> BBox2D:
    """Union of the boxes of every feature that has a geometry."""
    return _bbox_of_boxes(
        calculate_geometry_bbox(feature.geometry)
        for feature in feature_collection.features
        if feature.geometry is not None
    )


# ----- Douglas-Peucker -----

def _segment_distances(points: np.ndarray, start: np.ndarray, end: np.ndarray) -> np.ndarray:
    """Planar distance of each point to the segment start-end."""
    chord = end - start
    offsets = points - start
    length_sq = chord @ chord

    if length_sq == 0:
        return np.hypot(offsets[:, 0], offsets[:, 1])

    param = np.clip(offsets @ chord / length_sq, 0.0, 1.0)
    delta = points - (start + param[:, np.newaxis] * chord)
    return np.hypot(delta[:, 0], delta[:, 1])


def _douglas_peucker(xy: np.ndarray, first: int, last: int, tolerance: float) -> list[int]:
    if last - first < 2:
        return [first, last]

    distances = _segment_distances(xy[first + 1:last], xy[first], xy[last])
    offset = int(np.argmax(distances))

    if distances[offset] > tolerance:
        split = first + 1 + offset
        left = _douglas_peucker(xy, first, split, tolerance)
        right = _douglas_peucker(xy, split, last, tolerance)
        return left[:-1] + right

    return [first, last]


def simplify_line_string(line_string: LineString, tolerance: float) -> LineString:
    """Douglas-Peucker simplification with a planar tolerance in coordinate units.

    Kept positions are returned as given, elevation included.
    """
    coordinates = line_string.coordinates
    if len(coordinates) <= 2:
        return line_string

    xy = np.array([(p[0], p[1]) for p in coordinates], dtype=float)
    kept = _douglas_peucker(xy, 0, len(coordinates) - 1, tolerance)

    return LineString(coordinates=[coordinates[i] for i in kept])


# ----- Point in polygon -----

def locate_point_in_polygon(point: POSITION_TYPE, polygon: Sequence[Sequence[POSITION_TYPE]]) -> PolygonLocation:
    """Where `point` lies relative to a polygon given as rings (outer ring, then holes).

    Each ring must be a valid linear ring (at least 3 distinct positions),
    otherwise shapely raises ValueError.
    """
    if not polygon:
        return PolygonLocation.OUTSIDE

    shell, *holes = [[(p[0], p[1]) for p in ring] for ring in polygon]
    shape = ShapelyPolygon(shell, holes)
    target = ShapelyPoint(point[0], point[1])

    if shape.boundary.intersects(target):
        return PolygonLocation.BOUNDARY
    if shape.contains(target):
        return PolygonLocation.INSIDE
    return PolygonLocation.OUTSIDE


def is_point_in_polygon(point: POSITION_TYPE, polygon: Sequence[Sequence[POSITION_TYPE]]) -> bool | Literal[0]:
    """True inside, False outside, and 0 when the point is on the boundary.

    Compare the result with ``is``: ``0 == False`` in Python.
    """
    location = locate_point_in_polygon(point, polygon)
    if location == PolygonLocation.BOUNDARY:
        return 0
    return location == PolygonLocation.INSIDE
