import logging
import math
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from types import MappingProxyType
from typing import Optional, Union

from app.core.enums import ServiceType
from app.core.errors import InvalidCoordinate, InvalidServiceType, PricingError
from app.schemas.pricing import (
    Coordinate,
    Estimate,
    EstimateOptions,
    PricingBreakdown,
    PricingRule,
)
from app.services.distance import haversine_distance
from app.services.travel_time import estimate_travel_time

logger = logging.getLogger(__name__)

PRICING_RULES = MappingProxyType({
    ServiceType.TWO_WHEELER: PricingRule(
        base_fare=30,
        per_km=8,
        per_minute=2,
        minimum_fare=50,
        maximum_fare=500,
    ),
    ServiceType.TRUCK: PricingRule(
        base_fare=150,
        per_km=25,
        per_minute=5,
        loading_charges=100,
        minimum_fare=300,
        maximum_fare=2000,
    ),
    ServiceType.INTERCITY: PricingRule(
        base_fare=500,
        per_km=15,
        driver_allowance=500,
        minimum_fare=1500,
    ),
    ServiceType.PACKERS_MOVERS: PricingRule(
        base_fare=1000,
        per_km=20,
        per_hour=200,
        labor_charges=300,
        packing_charges=500,
        minimum_fare=2000,
    ),
})

TAX_RATE = 0.18
TWO_WHEELER_FARE_SPEED_KMH = 20
INTERCITY_KM_PER_DAY = 500
ESTIMATE_VALIDITY = timedelta(minutes=15)


@dataclass(frozen=True)
class EstimateSuccess:
    estimate: Estimate
    success: bool = True


@dataclass(frozen=True)
class EstimateFailure:
    error: PricingError
    success: bool = False


EstimateResult = Union[EstimateSuccess, EstimateFailure]


def get_pricing_rule(service_type) -> PricingRule:
    try:
        return PRICING_RULES[ServiceType(service_type)]
    except ValueError:
        raise InvalidServiceType(service_type) from None


def round_half_up(value: float, places: int = 2) -> float:
    factor = 10 ** places
    return math.floor(value * factor + 0.5) / factor


def _apply_service_charges(
    service_type: ServiceType,
    rule: PricingRule,
    distance: float,
    options: EstimateOptions,
    breakdown: PricingBreakdown,
) -> float:
    """Fill in the service-specific part of the breakdown, return its sum."""
    if service_type == ServiceType.TWO_WHEELER:
        minutes = distance / TWO_WHEELER_FARE_SPEED_KMH * 60
        breakdown.time_charges = minutes * rule.per_minute
        return breakdown.time_charges

    if service_type == ServiceType.TRUCK:
        if options.loading_required:
            breakdown.additional_charges += rule.loading_charges
            return rule.loading_charges
        return 0.0

    if service_type == ServiceType.INTERCITY:
        days = math.ceil(distance / INTERCITY_KM_PER_DAY)
        breakdown.additional_charges = days * rule.driver_allowance
        return breakdown.additional_charges

    if service_type == ServiceType.PACKERS_MOVERS:
        charges = rule.labor_charges + rule.packing_charges
        if options.hours:
            charges += options.hours * rule.per_hour
        breakdown.additional_charges = charges
        return charges

    return 0.0


def calculate_estimate(
    service_type,
    pickup: Coordinate,
    drop: Coordinate,
    options: Optional[EstimateOptions] = None,
    now: Optional[datetime] = None,
) -> EstimateResult:
    """Build a fare estimate for a trip between two coordinates.

    Surge is applied to the summed fare before the minimum and maximum
    clamps, and tax is charged on the clamped figure. Unknown service types
    and non-finite coordinates come back as an ``EstimateFailure`` rather
    than being raised.
    """
    if options is None:
        options = EstimateOptions()

    # range checks belong to the caller, but NaN or inf cannot be priced at all
    for coordinate in (pickup, drop):
        if not (math.isfinite(coordinate.latitude) and math.isfinite(coordinate.longitude)):
            error = InvalidCoordinate(coordinate.latitude, coordinate.longitude)
            logger.info(f"Estimate rejected: {error}")
            return EstimateFailure(error=error)

    distance = haversine_distance(pickup, drop)

    try:
        rule = get_pricing_rule(service_type)
    except InvalidServiceType as e:
        logger.info(f"Estimate rejected: {e}")
        return EstimateFailure(error=e)

    service_type = ServiceType(service_type)

    breakdown = PricingBreakdown(base_fare=rule.base_fare)
    total = rule.base_fare

    breakdown.distance_charges = distance * rule.per_km
    total += breakdown.distance_charges

    total += _apply_service_charges(service_type, rule, distance, options, breakdown)

    if options.surge_multiplier and options.surge_multiplier > 1:
        total *= options.surge_multiplier
        breakdown.surge_multiplier = options.surge_multiplier

    if total < rule.minimum_fare:
        total = rule.minimum_fare

    if rule.maximum_fare is not None and total > rule.maximum_fare:
        total = rule.maximum_fare

    breakdown.taxes = total * TAX_RATE
    breakdown.total = total + breakdown.taxes

    if now is None:
        now = datetime.now(timezone.utc)

    estimate = Estimate(
        service_type=service_type,
        distance=round_half_up(distance),
        estimated_time=estimate_travel_time(service_type, distance),
        pricing=breakdown,
        valid_until=now + ESTIMATE_VALIDITY,
    )
    logger.debug(
        f"Estimate for {service_type}: {estimate.distance} km, total {breakdown.total:.2f}"
    )
    return EstimateSuccess(estimate=estimate)
