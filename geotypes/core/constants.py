EARTH_RADIUS = 6378137  # meters, WGS84 equatorial radius used as a sphere

METERS_PER_DEGREE_LONGITUDE = 111320  # at the equator, scaled by cos(lat)
METERS_PER_DEGREE_LATITUDE = 110540

MIN_LONGITUDE, MAX_LONGITUDE = -180, 180
MIN_LATITUDE, MAX_LATITUDE = -90, 90

DEFAULT_CIRCLE_POINTS = 36
DEFAULT_BOUNDS_PADDING = 0.001  # degrees

WGS84_EPSG = 4326
WEB_MERCATOR_EPSG = 3857
CGCS2000_EPSG = 4490
BEIJING54_EPSG = 4214
XIAN80_EPSG = 4610

GEOCODER_STATUS_COMPLETE = 'complete'
