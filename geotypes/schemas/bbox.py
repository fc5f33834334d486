from pydantic import BaseModel, Field

from geotypes.schemas.geojson import POSITION_TYPE

BBox2D = tuple[float, float, float, float]
# [west, south, min_elevation, east, north, max_elevation]
BBox3D = tuple[float, float, float, float, float, float]
BBox = BBox2D | BBox3D


class BoundingBox(BaseModel):
    west: float = Field(..., description="Minimum longitude")
    south: float = Field(..., description="Minimum latitude")
    east: float = Field(..., description="Maximum longitude")
    north: float = Field(..., description="Maximum latitude")
    min_elevation: float | None = None
    max_elevation: float | None = None

    @property
    def has_elevation(self) -> bool:
        return self.min_elevation is not None and self.max_elevation is not None


class LngLatBounds(BaseModel):
    south_west: POSITION_TYPE
    north_east: POSITION_TYPE
