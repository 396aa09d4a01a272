from enum import Enum


class ServiceType(str, Enum):
    TWO_WHEELER = "two-wheeler"
    TRUCK = "truck"
    INTERCITY = "intercity"
    PACKERS_MOVERS = "packers-movers"

    def __str__(self):
        return self.value


class DemandLevel(str, Enum):
    NORMAL = "normal"
    HIGH = "high"
    VERY_HIGH = "very_high"
    PEAK = "peak"

    def __str__(self):
        return self.value


class EstimateOutcome(str, Enum):
    SUCCESS = "success"
    INVALID_SERVICE_TYPE = "invalid_service_type"
    INVALID_COORDINATE = "invalid_coordinate"

    def __str__(self):
        return self.value
