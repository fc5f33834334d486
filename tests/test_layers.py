import pytest
from pydantic import TypeAdapter, ValidationError

from geotypes.layers import create_tile_layer, create_vector_layer, is_raster_layer, is_tile_layer, is_vector_layer
from geotypes.schemas.geojson import Feature, FeatureCollection, Point
from geotypes.schemas.styling import (
    Layer, MapConfig, Query, RasterLayer, StrokeStyle, Style, StyledFeature, StyledFeatureCollection, TileLayer,
)


def test_create_vector_layer():
    data = FeatureCollection(features=[Feature(geometry=Point(coordinates=(1, 1)))])
    layer = create_vector_layer('roads', 'Roads', data, Style(stroke=StrokeStyle(color='#ff0000', width=2)))
    assert is_vector_layer(layer)
    assert layer.visible is True
    assert layer.opacity == 1
    assert layer.style.stroke.color == '#ff0000'
    assert layer.data == data


def test_create_tile_layer():
    layer = create_tile_layer('osm', 'OpenStreetMap', 'https://tile.openstreetmap.org/{z}/{x}/{y}.png', '© OSM')
    assert is_tile_layer(layer)
    assert not is_raster_layer(layer)
    assert layer.attribution == '© OSM'
    assert layer.visible is True


def test_layer_union_dispatches_on_type():
    layer = TypeAdapter(Layer).validate_python({
        'type': 'raster', 'id': 'dem', 'name': 'Elevation', 'url': 'https://example.com/dem.tif',
        'bounds': [0, 0, 1, 1],
    })
    assert isinstance(layer, RasterLayer)
    assert is_raster_layer(layer)


def test_opacity_is_bounded():
    with pytest.raises(ValidationError):
        TileLayer(id='osm', name='OSM', url='https://example.com', opacity=2)


def test_styled_feature_collection():
    collection = StyledFeatureCollection(
        features=[StyledFeature(geometry=Point(coordinates=(0, 0)), style=Style())],
        style=Style(),
    )
    assert collection.type == 'FeatureCollection'
    assert collection.features[0].style == Style()


def test_map_config():
    config = MapConfig.model_validate({
        'container': '#map',
        'view': {'center': [4.35, 50.85], 'zoom': 12},
        'layers': [{'type': 'tile', 'id': 'osm', 'name': 'OSM', 'url': 'https://example.com/{z}/{x}/{y}.png'}],
        'controls': {'zoom': True},
    })
    assert config.view.center == (4.35, 50.85)
    assert is_tile_layer(config.layers[0])


def test_query():
    query = Query.model_validate({
        'spatial': {'type': 'within', 'geometry': {'type': 'Point', 'coordinates': [0, 0]}, 'buffer': 100},
        'attributes': [{'field': 'height', 'operator': '>', 'value': 10}],
        'logic': 'and',
    })
    assert query.spatial.geometry.type == 'Point'
    with pytest.raises(ValidationError):
        Query.model_validate({'attributes': [{'field': 'a', 'operator': '~', 'value': 1}]})
