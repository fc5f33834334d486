from typing import TypeGuard

from geotypes.enums.layer_type import LayerType
from geotypes.schemas.geojson import FeatureCollection
from geotypes.schemas.styling import Layer, RasterLayer, Style, TileLayer, VectorLayer


def is_vector_layer(layer: Layer) -> TypeGuard[VectorLayer]:
    return layer.type == LayerType.VECTOR

def is_raster_layer(layer: Layer) -> TypeGuard[RasterLayer]:
    return layer.type == LayerType.RASTER

def is_tile_layer(layer: Layer) -> TypeGuard[TileLayer]:
    return layer.type == LayerType.TILE


def create_vector_layer(id: str, name: str, data: FeatureCollection, style: Style | None = None) -> VectorLayer:
    return VectorLayer(id=id, name=name, data=data, style=style, visible=True, opacity=1)

def create_tile_layer(id: str, name: str, url: str, attribution: str | None = None) -> TileLayer:
    return TileLayer(id=id, name=name, url=url, attribution=attribution, visible=True, opacity=1)
