from typing import Any, TypeGuard

from geotypes.core.constants import DEFAULT_CIRCLE_POINTS
from geotypes.enums.feature_type import FeatureType
from geotypes.schemas.geojson import POSITION_TYPE, Feature, FeatureCollection, GeoJSONObject, Geometry
from geotypes.utils import calculate_destination


def is_feature(obj: GeoJSONObject) -> TypeGuard[Feature]:
    return obj.type == FeatureType.FEATURE

def is_feature_collection(obj: GeoJSONObject) -> TypeGuard[FeatureCollection]:
    return obj.type == FeatureType.FEATURE_COLLECTION


def create_feature(geometry: Geometry | None, properties: dict[str, Any] | None,
                   id: str | int | None = None) -> Feature:
    return Feature(geometry=geometry, properties=properties, id=id)

def create_feature_collection(features: list[Feature]) -> FeatureCollection:
    return FeatureCollection(features=features)


def create_circle(center: POSITION_TYPE, radius: float, points: int = DEFAULT_CIRCLE_POINTS) -> list[POSITION_TYPE]:
    """Closed ring approximating a circle of `radius` meters around `center`.

    Vertices start due north and go clockwise; the first vertex is repeated at the end.
    """
    circle = [calculate_destination(center, radius, (360 / points) * i) for i in range(points)]
    circle.append(circle[0])
    return circle
