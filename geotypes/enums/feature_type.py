from enum import StrEnum


class FeatureType(StrEnum):
    FEATURE = 'Feature'
    FEATURE_COLLECTION = 'FeatureCollection'
