"""Pricing error taxonomy.

Failures here are caused by bad input and are never retryable. The estimate
calculator hands them back as values; the HTTP layer maps them to 4xx.
"""
from app.core.enums import EstimateOutcome


class PricingError(Exception):
    status_code = 400

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class InvalidServiceType(PricingError):
    outcome = EstimateOutcome.INVALID_SERVICE_TYPE

    def __init__(self, service_type):
        self.service_type = service_type
        super().__init__(f"Invalid service type: {service_type}")


class InvalidCoordinate(PricingError):
    outcome = EstimateOutcome.INVALID_COORDINATE

    def __init__(self, latitude: float, longitude: float):
        self.latitude = latitude
        self.longitude = longitude
        super().__init__(
            f"Invalid coordinate ({latitude}, {longitude}): latitude must be within "
            f"[-90, 90] and longitude within [-180, 180]"
        )
