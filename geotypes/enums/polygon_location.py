import enum


class PolygonLocation(enum.IntEnum):
    BOUNDARY = 0
    INSIDE = 1
    OUTSIDE = 2
