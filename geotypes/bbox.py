from collections.abc import Iterable
from numbers import Real
from typing import Any

from geotypes.core.constants import DEFAULT_BOUNDS_PADDING
from geotypes.schemas.bbox import BBox, BBox2D, BBox3D, BoundingBox, LngLatBounds
from geotypes.schemas.geojson import POSITION_TYPE, Polygon


def is_2d_bbox(bbox: BBox) -> bool:
    return len(bbox) == 4

def is_3d_bbox(bbox: BBox) -> bool:
    return len(bbox) == 6

def create_bbox_2d(west: float, south: float, east: float, north: float) -> BBox2D:
    return (west, south, east, north)

def create_bbox_3d(west: float, south: float, min_elevation: float,
                   east: float, north: float, max_elevation: float) -> BBox3D:
    return (west, south, min_elevation, east, north, max_elevation)


def bbox_to_object(bbox: BBox) -> BoundingBox:
    if is_2d_bbox(bbox):
        west, south, east, north = bbox
        return BoundingBox(west=west, south=south, east=east, north=north)
    west, south, min_elevation, east, north, max_elevation = bbox
    return BoundingBox(
        west=west, south=south, east=east, north=north,
        min_elevation=min_elevation, max_elevation=max_elevation,
    )

def object_to_bbox(bounding_box: BoundingBox) -> BBox:
    if bounding_box.has_elevation:
        return create_bbox_3d(
            bounding_box.west, bounding_box.south, bounding_box.min_elevation,
            bounding_box.east, bounding_box.north, bounding_box.max_elevation,
        )
    return create_bbox_2d(bounding_box.west, bounding_box.south, bounding_box.east, bounding_box.north)


def bbox_to_polygon(bbox: BBox) -> Polygon:
    """Closed rectangular ring, counter-clockwise from the south-west corner."""
    box = bbox_to_object(bbox)
    return Polygon(coordinates=[[
        (box.west, box.south),
        (box.east, box.south),
        (box.east, box.north),
        (box.west, box.north),
        (box.west, box.south),
    ]])


def union_bbox(bbox1: BBox, bbox2: BBox) -> BBox:
    """Smallest box enclosing both inputs.

    Elevation bounds survive only when both inputs carry them: a 2D input
    takes precedence and yields a 2D result.
    """
    box1 = bbox_to_object(bbox1)
    box2 = bbox_to_object(bbox2)

    result = BoundingBox(
        west=min(box1.west, box2.west),
        south=min(box1.south, box2.south),
        east=max(box1.east, box2.east),
        north=max(box1.north, box2.north),
    )
    if box1.has_elevation and box2.has_elevation:
        result = result.model_copy(update={
            'min_elevation': min(box1.min_elevation, box2.min_elevation),
            'max_elevation': max(box1.max_elevation, box2.max_elevation),
        })

    return object_to_bbox(result)


def is_position_in_bbox(position: POSITION_TYPE, bbox: BBox) -> bool:
    lon, lat = position[0], position[1]
    box = bbox_to_object(bbox)

    in_bounds = box.west <= lon <= box.east and box.south <= lat <= box.north

    # elevation only counts when both sides have it
    if len(position) > 2 and box.has_elevation:
        return in_bounds and box.min_elevation <= position[2] <= box.max_elevation

    return in_bounds


def validate_bbox(bbox: Any) -> bool:
    """Structural check of the horizontal part of a bbox; never raises."""
    if not isinstance(bbox, (list, tuple)) or len(bbox) < 4:
        return False

    min_x, min_y, max_x, max_y = bbox[:4]
    if not all(isinstance(v, Real) and not isinstance(v, bool) for v in (min_x, min_y, max_x, max_y)):
        return False
    return min_x <= max_x and min_y <= max_y


def is_empty_bbox(bbox: BBox) -> bool:
    """True for the inverted sentinel box produced from inputs without positions."""
    box = bbox_to_object(bbox)
    return box.west > box.east or box.south > box.north


def get_bbox_center(bbox: BBox) -> POSITION_TYPE:
    box = bbox_to_object(bbox)
    center_lon = (box.west + box.east) / 2
    center_lat = (box.south + box.north) / 2

    if box.has_elevation:
        return (center_lon, center_lat, (box.min_elevation + box.max_elevation) / 2)
    return (center_lon, center_lat)


def calc_positions_bounds(positions: Iterable[POSITION_TYPE], padding: float = DEFAULT_BOUNDS_PADDING) -> LngLatBounds:
    """South-west / north-east corners of a path, padded outward so shapes
    fitted to the bounds do not touch the edges."""
    min_lng = min_lat = float('inf')
    max_lng = max_lat = float('-inf')
    for position in positions:
        lng, lat = position[0], position[1]
        min_lng = min(min_lng, lng)
        min_lat = min(min_lat, lat)
        max_lng = max(max_lng, lng)
        max_lat = max(max_lat, lat)

    return LngLatBounds(
        south_west=(min_lng - padding, min_lat - padding),
        north_east=(max_lng + padding, max_lat + padding),
    )
