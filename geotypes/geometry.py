from numbers import Real
from typing import Any, TypeGuard

from pydantic import ValidationError

from geotypes.core.constants import MAX_LATITUDE, MAX_LONGITUDE, MIN_LATITUDE, MIN_LONGITUDE
from geotypes.enums.geometry_type import GeometryType
from geotypes.schemas.geojson import (
    Feature, Geometry, GeometryCollection, LineString, MultiLineString, MultiPoint, MultiPolygon, Point, Polygon,
    parse_geometry,
)


def is_point(geometry: Geometry) -> TypeGuard[Point]:
    return geometry.type == GeometryType.POINT

def is_line_string(geometry: Geometry) -> TypeGuard[LineString]:
    return geometry.type == GeometryType.LINE_STRING

def is_polygon(geometry: Geometry) -> TypeGuard[Polygon]:
    return geometry.type == GeometryType.POLYGON

def is_multi_point(geometry: Geometry) -> TypeGuard[MultiPoint]:
    return geometry.type == GeometryType.MULTI_POINT

def is_multi_line_string(geometry: Geometry) -> TypeGuard[MultiLineString]:
    return geometry.type == GeometryType.MULTI_LINE_STRING

def is_multi_polygon(geometry: Geometry) -> TypeGuard[MultiPolygon]:
    return geometry.type == GeometryType.MULTI_POLYGON

def is_geometry_collection(geometry: Geometry) -> TypeGuard[GeometryCollection]:
    return geometry.type == GeometryType.GEOMETRY_COLLECTION


def _is_number(value: Any) -> bool:
    return isinstance(value, Real) and not isinstance(value, bool)


def validate_coordinates(coordinates: Any) -> bool:
    """Longitude in [-180, 180] and latitude in [-90, 90]; elevation is not checked."""
    if not isinstance(coordinates, (list, tuple)) or len(coordinates) < 2:
        return False
    lon, lat = coordinates[0], coordinates[1]
    if not (_is_number(lon) and _is_number(lat)):
        return False
    return MIN_LONGITUDE <= lon <= MAX_LONGITUDE and MIN_LATITUDE <= lat <= MAX_LATITUDE


def validate_geometry(geometry: Any) -> bool:
    """Shape and coordinate-range check for Point, LineString and Polygon.

    Ring closure, winding order and self-intersection are not checked.
    Any other geometry type, or anything that is not a geometry, is invalid.
    """
    if geometry is None:
        return False
    if isinstance(geometry, dict):
        try:
            geometry = parse_geometry(geometry)
        except ValidationError:
            return False
    if not hasattr(geometry, 'type'):
        return False

    if is_point(geometry):
        return validate_coordinates(geometry.coordinates)
    if is_line_string(geometry):
        return all(validate_coordinates(coord) for coord in geometry.coordinates)
    if is_polygon(geometry):
        return all(validate_coordinates(coord) for ring in geometry.coordinates for coord in ring)
    return False


def validate_feature_geometry(feature: Any) -> bool:
    if isinstance(feature, dict):
        try:
            feature = Feature.model_validate(feature)
        except ValidationError:
            return False
    return isinstance(feature, Feature) and validate_geometry(feature.geometry)
