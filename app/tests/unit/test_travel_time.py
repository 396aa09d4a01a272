import pytest

from app.core.enums import ServiceType
from app.services.travel_time import estimate_travel_time, format_duration


class TestFormatDuration:

    @pytest.mark.parametrize("minutes,expected", [
        (0, "0 mins"),
        (1, "1 mins"),
        (59, "59 mins"),
        (60, "1 hour"),
        (90, "1h 30m"),
        (120, "2 hours"),
        (121, "2h 1m"),
    ])
    def test_display(self, minutes, expected):
        assert format_duration(minutes) == expected


class TestEstimateTravelTime:

    @pytest.mark.parametrize("service_type,distance,minutes", [
        (ServiceType.TWO_WHEELER, 25.0, 60),
        (ServiceType.TRUCK, 40.0, 60),
        (ServiceType.INTERCITY, 60.0, 60),
        (ServiceType.PACKERS_MOVERS, 30.0, 60),
    ])
    def test_speed_table(self, service_type, distance, minutes):
        t = estimate_travel_time(service_type, distance)
        assert t.minutes == minutes
        assert t.hours == 1
        assert t.display == "1 hour"

    def test_accepts_plain_string(self):
        assert estimate_travel_time("truck", 40.0).minutes == 60

    def test_unknown_type_uses_default_speed(self):
        assert estimate_travel_time("hovercraft", 30.0).minutes == 60

    def test_minutes_round_up(self):
        assert estimate_travel_time(ServiceType.TWO_WHEELER, 50.0).minutes == 120
        assert estimate_travel_time(ServiceType.TWO_WHEELER, 50.01).minutes == 121

    def test_hours_and_minutes_display(self):
        t = estimate_travel_time(ServiceType.PACKERS_MOVERS, 45.0)
        assert t.minutes == 90
        assert t.hours == 1
        assert t.display == "1h 30m"

    def test_long_trip(self):
        t = estimate_travel_time(ServiceType.INTERCITY, 1200.0)
        assert t.minutes == 1200
        assert t.hours == 20
        assert t.display == "20 hours"

    def test_zero_distance(self):
        t = estimate_travel_time(ServiceType.TRUCK, 0.0)
        assert (t.minutes, t.hours, t.display) == (0, 0, "0 mins")
