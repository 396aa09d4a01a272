import math

from app.core.errors import InvalidCoordinate
from app.schemas.pricing import Coordinate

EARTH_RADIUS_KM = 6371.0


def haversine_distance(pickup: Coordinate, drop: Coordinate) -> float:
    """Great-circle distance in kilometers between two coordinates.

    No range checking happens here; run untrusted input through
    ``validate_coordinate`` first.
    """
    to_rad = math.pi / 180
    d_lat = (drop.latitude - pickup.latitude) * to_rad
    d_lon = (drop.longitude - pickup.longitude) * to_rad

    a = (
        math.sin(d_lat / 2) * math.sin(d_lat / 2)
        + math.cos(pickup.latitude * to_rad) * math.cos(drop.latitude * to_rad)
        * math.sin(d_lon / 2) * math.sin(d_lon / 2)
    )
    # float noise can push a just outside [0, 1] for identical or antipodal points;
    # NaN from malformed input is left alone
    if a > 1.0:
        a = 1.0
    elif a < 0.0:
        a = 0.0
    c = 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))
    return EARTH_RADIUS_KM * c


def validate_coordinate(coordinate: Coordinate) -> Coordinate:
    lat, lon = coordinate.latitude, coordinate.longitude
    if not (math.isfinite(lat) and math.isfinite(lon)):
        raise InvalidCoordinate(lat, lon)
    if not (-90 <= lat <= 90 and -180 <= lon <= 180):
        raise InvalidCoordinate(lat, lon)
    return coordinate
