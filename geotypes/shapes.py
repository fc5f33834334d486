from shapely import Geometry as ShapelyGeometry
from shapely.geometry import mapping, shape

from geotypes.schemas.geojson import Geometry, parse_geometry


def to_shape(geometry: Geometry) -> ShapelyGeometry:
    return shape(geometry)

def from_shape(geom: ShapelyGeometry) -> Geometry:
    return parse_geometry(mapping(geom))
