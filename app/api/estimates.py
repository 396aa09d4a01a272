"""Fare estimate endpoints with Redis caching"""
import logging
from datetime import datetime
from typing import List
from fastapi import APIRouter, HTTPException

from app.core.config import settings
from app.core.enums import EstimateOutcome, ServiceType
from app.core.errors import InvalidCoordinate, InvalidServiceType
from app.core.metrics import (
    estimate_cache_hits,
    estimate_cache_misses,
    estimates_calculated,
    surge_multiplier_applied,
)
from app.core.response_builders import build_estimate_response, build_pricing_details_response
from app.schemas.estimate import (
    EstimateOut,
    EstimateRequest,
    PricingDetailsOut,
    ServiceTypeInfo,
    SurgeOut,
)
from app.schemas.pricing import EstimateOptions
from app.services.catalog import list_service_types
from app.services.distance import validate_coordinate
from app.services.pricing import calculate_estimate, get_pricing_rule
from app.services.surge import calculate_surge_multiplier, observed_demand_level
from app.utils.estimate_cache import estimate_cache_key, get_cached_estimate, set_cached_estimate

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/estimates", tags=["estimates"])

VALID_SERVICE_TYPES = {t.value for t in ServiceType}


def _service_label(service_type: str) -> str:
    # keep metric label cardinality bounded
    return service_type if service_type in VALID_SERVICE_TYPES else "unknown"


@router.post("/calculate", response_model=EstimateOut)
async def calculate(req: EstimateRequest):
    label = _service_label(req.service_type)

    try:
        pickup = validate_coordinate(req.pickup_location.coordinates)
        drop = validate_coordinate(req.drop_location.coordinates)
    except InvalidCoordinate as e:
        estimates_calculated.labels(service_type=label, outcome=e.outcome.value).inc()
        raise HTTPException(status_code=e.status_code, detail=e.message)

    # surge windows are defined in server local time
    surge = calculate_surge_multiplier(
        req.service_type, datetime.now(), settings.DEFAULT_DEMAND_LEVEL
    )
    options = EstimateOptions(
        loading_required=req.options.loading_required,
        hours=req.options.hours,
        surge_multiplier=surge,
    )

    # unknown types go straight to the engine, which reports the failure
    cache_key = None
    if label != "unknown":
        cache_key = estimate_cache_key(
            req.service_type,
            pickup.model_dump(),
            drop.model_dump(),
            req.options.model_dump(),
            surge,
        )
        cached = await get_cached_estimate(cache_key)
        if cached is not None:
            estimate_cache_hits.labels(service_type=label).inc()
            surge_multiplier_applied.labels(service_type=label).observe(surge)
            return build_estimate_response(cached, req.pickup_location, req.drop_location)
        estimate_cache_misses.labels(service_type=label).inc()

    result = calculate_estimate(req.service_type, pickup, drop, options)
    if not result.success:
        estimates_calculated.labels(service_type=label, outcome=result.error.outcome.value).inc()
        raise HTTPException(status_code=result.error.status_code, detail=result.error.message)

    estimates_calculated.labels(service_type=label, outcome=EstimateOutcome.SUCCESS.value).inc()
    surge_multiplier_applied.labels(service_type=label).observe(surge)

    if cache_key is not None:
        await set_cached_estimate(cache_key, result.estimate)

    return build_estimate_response(result.estimate, req.pickup_location, req.drop_location)


@router.get("/service-types", response_model=List[ServiceTypeInfo])
async def service_types():
    return list_service_types()


@router.get("/pricing/{service_type}", response_model=PricingDetailsOut)
async def pricing_details(service_type: str):
    try:
        rule = get_pricing_rule(service_type)
    except InvalidServiceType:
        raise HTTPException(status_code=404, detail="Service type not found")
    return build_pricing_details_response(service_type, rule)


@router.get("/surge/{service_type}", response_model=SurgeOut)
async def current_surge(service_type: str):
    if service_type not in VALID_SERVICE_TYPES:
        raise HTTPException(status_code=400, detail=f"Invalid service type: {service_type}")

    now = datetime.now()
    demand_level = observed_demand_level(now)
    multiplier = calculate_surge_multiplier(service_type, now, demand_level)

    return SurgeOut(
        service_type=service_type,
        surge_multiplier=multiplier,
        demand_level=demand_level,
        message=f"High demand area - {multiplier}x pricing" if multiplier > 1.0 else "Normal pricing",
        last_updated=now.astimezone(),
    )
