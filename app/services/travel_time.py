import math

from app.core.enums import ServiceType
from app.schemas.pricing import EstimatedTime

# km/h; independent of the 20 km/h figure used for two-wheeler time charges
AVERAGE_SPEED_KMH = {
    ServiceType.TWO_WHEELER: 25,
    ServiceType.TRUCK: 40,
    ServiceType.INTERCITY: 60,
    ServiceType.PACKERS_MOVERS: 30,
}
DEFAULT_SPEED_KMH = 30


def format_duration(minutes: int) -> str:
    if minutes < 60:
        return f"{minutes} mins"

    hours, remaining = divmod(minutes, 60)
    if remaining == 0:
        return f"{hours} {'hour' if hours == 1 else 'hours'}"

    return f"{hours}h {remaining}m"


def estimate_travel_time(service_type, distance_km: float) -> EstimatedTime:
    speed = AVERAGE_SPEED_KMH.get(service_type, DEFAULT_SPEED_KMH)
    minutes = math.ceil(distance_km / speed * 60)
    return EstimatedTime(
        minutes=minutes,
        hours=minutes // 60,
        display=format_duration(minutes),
    )
