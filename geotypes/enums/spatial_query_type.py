from enum import StrEnum


class SpatialQueryType(StrEnum):
    INTERSECTS = 'intersects'
    CONTAINS = 'contains'
    WITHIN = 'within'
    TOUCHES = 'touches'
    CROSSES = 'crosses'
    OVERLAPS = 'overlaps'
