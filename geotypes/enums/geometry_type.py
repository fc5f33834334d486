from enum import StrEnum


class GeometryType(StrEnum):
    POINT = 'Point'
    LINE_STRING = 'LineString'
    POLYGON = 'Polygon'
    MULTI_POINT = 'MultiPoint'
    MULTI_LINE_STRING = 'MultiLineString'
    MULTI_POLYGON = 'MultiPolygon'
    GEOMETRY_COLLECTION = 'GeometryCollection'
