from typing import Annotated, Any, Literal
from pydantic import BaseModel, ConfigDict, Field, TypeAdapter

POSITION_TYPE = tuple[float, float] | tuple[float, float, float]
BBOX_TYPE = tuple[float, float, float, float] | tuple[float, float, float, float, float, float]


class GeoJSONModel(BaseModel):
    model_config = ConfigDict(frozen=True)

    @property
    def __geo_interface__(self) -> dict[str, Any]:
        return self.model_dump(mode='json', exclude_none=True)

# ----- Geometry Types -----
class Point(GeoJSONModel):
    type: Literal["Point"] = "Point"
    coordinates: POSITION_TYPE
    bbox: BBOX_TYPE | None = None

class MultiPoint(GeoJSONModel):
    type: Literal["MultiPoint"] = "MultiPoint"
    coordinates: list[POSITION_TYPE]
    bbox: BBOX_TYPE | None = None

class LineString(GeoJSONModel):
    type: Literal["LineString"] = "LineString"
    coordinates: list[POSITION_TYPE]
    bbox: BBOX_TYPE | None = None

class MultiLineString(GeoJSONModel):
    type: Literal["MultiLineString"] = "MultiLineString"
    coordinates: list[list[POSITION_TYPE]]
    bbox: BBOX_TYPE | None = None

class Polygon(GeoJSONModel):
    type: Literal["Polygon"] = "Polygon"
    # Each linear ring: at least 4 positions, first == last per RFC 7946 (not enforced here)
    coordinates: list[list[POSITION_TYPE]]
    bbox: BBOX_TYPE | None = None

class MultiPolygon(GeoJSONModel):
    type: Literal["MultiPolygon"] = "MultiPolygon"
    coordinates: list[list[list[POSITION_TYPE]]]
    bbox: BBOX_TYPE | None = None

class GeometryCollection(GeoJSONModel):
    type: Literal["GeometryCollection"] = "GeometryCollection"
    geometries: list['Geometry']
    bbox: BBOX_TYPE | None = None

Geometry = Annotated[
    Point | MultiPoint | LineString | MultiLineString | Polygon | MultiPolygon | GeometryCollection,
    Field(discriminator='type'),
]

GeometryCollection.model_rebuild()

# ----- Core GeoJSON Objects -----
class Feature(GeoJSONModel):
    type: Literal["Feature"] = "Feature"
    geometry: Geometry | None = None
    properties: dict[str, Any] | None = Field(default=None)
    id: str | int | None = None
    bbox: BBOX_TYPE | None = None

class FeatureCollection(GeoJSONModel):
    type: Literal["FeatureCollection"] = "FeatureCollection"
    features: list[Feature]
    bbox: BBOX_TYPE | None = None

GeoJSONObject = Annotated[
    Point | MultiPoint | LineString | MultiLineString | Polygon | MultiPolygon | GeometryCollection
    | Feature | FeatureCollection,
    Field(discriminator='type'),
]

_geometry_adapter = TypeAdapter(Geometry)
_geojson_adapter = TypeAdapter(GeoJSONObject)


def parse_geometry(obj: Any) -> Geometry:
    """Validate a plain mapping (e.g. decoded JSON) into a geometry model."""
    return _geometry_adapter.validate_python(obj)

def parse_geojson(obj: Any) -> GeoJSONObject:
    return _geojson_adapter.validate_python(obj)
