import secrets

from app.schemas.estimate import EstimateOut, LocationIn, PricingDetailsOut
from app.schemas.pricing import Estimate, PricingRule
from app.services.catalog import PRICING_NOTES


def new_request_id() -> str:
    return secrets.token_hex(16)


def build_estimate_response(
    estimate: Estimate,
    pickup_location: LocationIn,
    drop_location: LocationIn,
) -> EstimateOut:
    return EstimateOut(
        **estimate.model_dump(),
        pickup_location=pickup_location,
        drop_location=drop_location,
        request_id=new_request_id(),
    )


def build_pricing_details_response(service_type, rule: PricingRule) -> PricingDetailsOut:
    notes = PRICING_NOTES[service_type]
    return PricingDetailsOut(
        service_type=service_type,
        pricing=rule,
        descriptions=dict(notes.descriptions),
        features=list(notes.features),
    )
