from typing import Annotated, Any, Literal
from pydantic import BaseModel, Field

from geotypes.enums.spatial_query_type import SpatialQueryType
from geotypes.schemas.geojson import Feature, FeatureCollection, Geometry

Color = str  # any CSS colour: '#ff0000', 'red', 'rgb(255,0,0)'

# ----- Style -----
class FillStyle(BaseModel):
    color: Color | None = None
    opacity: float | None = Field(None, ge=0, le=1)

class StrokeStyle(BaseModel):
    color: Color | None = None
    width: float | None = None
    opacity: float | None = Field(None, ge=0, le=1)
    dash_array: list[float] | None = None
    line_cap: Literal["butt", "round", "square"] | None = None
    line_join: Literal["miter", "round", "bevel"] | None = None

class MarkerStyle(BaseModel):
    size: float | None = None
    color: Color | None = None
    opacity: float | None = Field(None, ge=0, le=1)
    symbol: Literal["circle", "square", "triangle", "star", "cross", "diamond"] | None = None

class TextStyle(BaseModel):
    field: str | None = Field(None, description="Name of the feature property to label with")
    font: str | None = None
    size: float | None = None
    color: Color | None = None
    halo_color: Color | None = None
    halo_width: float | None = None
    offset: tuple[float, float] | None = None
    anchor: Literal["start", "middle", "end"] | None = None
    baseline: Literal["top", "middle", "bottom"] | None = None

class Style(BaseModel):
    fill: FillStyle | None = None
    stroke: StrokeStyle | None = None
    marker: MarkerStyle | None = None
    text: TextStyle | None = None


class StyledFeature(Feature):
    style: Style | None = None

class StyledFeatureCollection(FeatureCollection):
    features: list[StyledFeature]
    style: Style | None = Field(None, description="Default style for features without their own")

# ----- Layers -----
class BaseLayer(BaseModel):
    id: str
    name: str
    visible: bool | None = None
    opacity: float | None = Field(None, ge=0, le=1)
    min_zoom: float | None = None
    max_zoom: float | None = None
    metadata: dict[str, Any] | None = None

class VectorLayer(BaseLayer):
    type: Literal["vector"] = "vector"
    data: StyledFeatureCollection | FeatureCollection
    style: Style | None = None

class RasterLayer(BaseLayer):
    type: Literal["raster"] = "raster"
    url: str
    bounds: tuple[float, float, float, float] | None = None

class TileLayer(BaseLayer):
    type: Literal["tile"] = "tile"
    url: str = Field(..., description="Tile URL template, e.g. 'https://tile.openstreetmap.org/{z}/{x}/{y}.png'")
    attribution: str | None = None
    subdomains: list[str] | None = None

Layer = Annotated[VectorLayer | RasterLayer | TileLayer, Field(discriminator='type')]

# ----- Map -----
class MapView(BaseModel):
    center: tuple[float, float]  # [longitude, latitude]
    zoom: float
    bearing: float | None = None
    pitch: float | None = None
    bounds: tuple[float, float, float, float] | None = None  # [west, south, east, north]

class ClusterTextStyle(BaseModel):
    font: str | None = None
    size: float | None = None
    color: Color | None = None
    halo_color: Color | None = None
    halo_width: float | None = None

class ClusterStyle(BaseModel):
    cluster: Style | None = None
    cluster_text: ClusterTextStyle | None = None

class ClusterConfig(BaseModel):
    enabled: bool
    distance: float
    max_zoom: float
    min_points: int | None = None
    style: ClusterStyle | None = None

class MapControls(BaseModel):
    zoom: bool | None = None
    attribution: bool | None = None
    scale: bool | None = None
    fullscreen: bool | None = None

class MapInteractions(BaseModel):
    drag_pan: bool | None = None
    scroll_zoom: bool | None = None
    double_click_zoom: bool | None = None
    keyboard: bool | None = None

class MapConfig(BaseModel):
    container: Any = Field(..., description="Element selector or element handle")
    view: MapView
    layers: list[Layer] | None = None
    controls: MapControls | None = None
    interactions: MapInteractions | None = None

# ----- Queries -----
class SpatialQuery(BaseModel):
    type: SpatialQueryType
    geometry: Geometry
    buffer: float | None = Field(None, description="Buffer distance around the geometry, in meters")

class AttributeQuery(BaseModel):
    field: str
    operator: Literal["=", "!=", ">", "<", ">=", "<=", "like", "in", "not in"]
    value: Any

class Query(BaseModel):
    spatial: SpatialQuery | None = None
    attributes: list[AttributeQuery] | None = None
    logic: Literal["and", "or"] | None = None
