from datetime import datetime
from typing import Dict, List, Optional
from pydantic import BaseModel, Field

from app.core.enums import DemandLevel, ServiceType
from app.schemas.pricing import Coordinate, Estimate, PricingRule


class LocationIn(BaseModel):
    address: str = Field(min_length=1)
    coordinates: Coordinate


class EstimateOptionsIn(BaseModel):
    loading_required: bool = False
    hours: Optional[float] = Field(default=None, ge=1, le=24)


class EstimateRequest(BaseModel):
    service_type: str
    pickup_location: LocationIn
    drop_location: LocationIn
    options: EstimateOptionsIn = Field(default_factory=EstimateOptionsIn)


class EstimateOut(Estimate):
    pickup_location: LocationIn
    drop_location: LocationIn
    request_id: str


class ServiceTypeInfo(BaseModel):
    service_type: ServiceType
    name: str
    description: str
    features: List[str]
    max_weight: str
    estimated_time: str


class PricingDetailsOut(BaseModel):
    service_type: ServiceType
    pricing: PricingRule
    descriptions: Dict[str, str]
    features: List[str]


class SurgeOut(BaseModel):
    service_type: ServiceType
    surge_multiplier: float
    demand_level: DemandLevel
    message: str
    last_updated: datetime
