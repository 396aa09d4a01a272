"""Surge multiplier from demand level and time of day."""
from datetime import datetime

from app.core.enums import DemandLevel

DEMAND_SURGE = {
    DemandLevel.NORMAL: 1.0,
    DemandLevel.HIGH: 1.5,
    DemandLevel.VERY_HIGH: 2.0,
    DemandLevel.PEAK: 2.5,
}
PEAK_HOUR_FACTOR = 1.3
LATE_NIGHT_FACTOR = 1.2


def is_peak_hour(hour: int) -> bool:
    # 8-10 AM and 6-9 PM, inclusive
    return 8 <= hour <= 10 or 18 <= hour <= 21


def is_late_night(hour: int) -> bool:
    # 11 PM - 5 AM
    return hour >= 23 or hour <= 5


def calculate_surge_multiplier(
    service_type,
    current_time: datetime,
    demand_level=DemandLevel.NORMAL,
) -> float:
    """Return the surge multiplier (>= 1.0) rounded to 2 decimals.

    ``service_type`` does not currently affect the result. Unknown demand
    levels count as normal. ``current_time`` is read in whatever timezone
    it carries, normally server local time.
    """
    hour = current_time.hour
    multiplier = DEMAND_SURGE.get(demand_level, 1.0)

    if is_peak_hour(hour):
        multiplier *= PEAK_HOUR_FACTOR

    if is_late_night(hour):
        multiplier *= LATE_NIGHT_FACTOR

    return round(multiplier, 2)


def observed_demand_level(current_time: datetime) -> DemandLevel:
    """Demand level derived from the clock alone.

    Stands in for live driver/request counts, which this service does not see.
    """
    hour = current_time.hour
    if is_peak_hour(hour) or is_late_night(hour):
        return DemandLevel.HIGH
    return DemandLevel.NORMAL
