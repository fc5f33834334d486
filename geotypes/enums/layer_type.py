from enum import StrEnum


class LayerType(StrEnum):
    VECTOR = 'vector'
    RASTER = 'raster'
    TILE = 'tile'
