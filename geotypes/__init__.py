"""GeoJSON models, bounding boxes, CRS tags, map styling contracts and
spherical-earth geodesic helpers."""
import logging

__version__ = '0.1.0'

from geotypes.bbox import (
    bbox_to_object, bbox_to_polygon, calc_positions_bounds, create_bbox_2d, create_bbox_3d, get_bbox_center,
    is_2d_bbox, is_3d_bbox, is_empty_bbox, is_position_in_bbox, object_to_bbox, union_bbox, validate_bbox,
)
from geotypes.core.errors import CRSError, GeocoderError, GeoTypesError
from geotypes.core.log import get_logger, setup_logging
from geotypes.crs import create_linked_crs, create_named_crs, crs_to_epsg, is_linked_crs, is_named_crs, resolve_crs
from geotypes.enums.crs_type import CRSType
from geotypes.enums.feature_type import FeatureType
from geotypes.enums.geometry_type import GeometryType
from geotypes.enums.layer_type import LayerType
from geotypes.enums.polygon_location import PolygonLocation
from geotypes.enums.spatial_query_type import SpatialQueryType
from geotypes.feature import create_circle, create_feature, create_feature_collection, is_feature, is_feature_collection
from geotypes.geometry import (
    is_geometry_collection, is_line_string, is_multi_line_string, is_multi_point, is_multi_polygon, is_point,
    is_polygon, validate_coordinates, validate_feature_geometry, validate_geometry,
)
from geotypes.layers import create_tile_layer, create_vector_layer, is_raster_layer, is_tile_layer, is_vector_layer
from geotypes.schemas.bbox import BBox, BBox2D, BBox3D, BoundingBox, LngLatBounds
from geotypes.schemas.crs import CRS, CommonCRS, LinkedCRS, NamedCRS
from geotypes.schemas.geojson import (
    Feature, FeatureCollection, GeoJSONObject, Geometry, GeometryCollection, LineString, MultiLineString,
    MultiPoint, MultiPolygon, Point, Polygon, parse_geojson, parse_geometry,
)
from geotypes.schemas.geojson import POSITION_TYPE as Position
from geotypes.schemas.styling import (
    AttributeQuery, ClusterConfig, Color, Layer, MapConfig, MapView, Query, RasterLayer, SpatialQuery, Style,
    StyledFeature, StyledFeatureCollection, TileLayer, VectorLayer,
)
from geotypes.services.geocoder import get_address_by_geocoder
from geotypes.shapes import from_shape, to_shape
from geotypes.utils import (
    calculate_bearing, calculate_destination, calculate_distance, calculate_feature_collection_bbox,
    calculate_geometry_bbox, calculate_line_length, calculate_polygon_area, create_buffer, degrees_to_radians,
    is_point_in_polygon, locate_point_in_polygon, radians_to_degrees, simplify_line_string,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())
