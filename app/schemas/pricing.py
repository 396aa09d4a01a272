from datetime import datetime
from typing import Optional
from pydantic import BaseModel, ConfigDict, Field

from app.core.enums import ServiceType


class Coordinate(BaseModel):
    model_config = ConfigDict(frozen=True)

    latitude: float
    longitude: float


class PricingRule(BaseModel):
    model_config = ConfigDict(frozen=True)

    base_fare: float
    per_km: float
    minimum_fare: float
    maximum_fare: Optional[float] = None
    per_minute: Optional[float] = None
    per_hour: Optional[float] = None
    loading_charges: Optional[float] = None
    driver_allowance: Optional[float] = None
    labor_charges: Optional[float] = None
    packing_charges: Optional[float] = None


class EstimateOptions(BaseModel):
    model_config = ConfigDict(frozen=True)

    loading_required: bool = False
    hours: Optional[float] = Field(default=None, ge=0)
    surge_multiplier: Optional[float] = Field(default=None, ge=1.0)


class PricingBreakdown(BaseModel):
    base_fare: float
    distance_charges: float = 0.0
    time_charges: float = 0.0
    additional_charges: float = 0.0
    taxes: float = 0.0
    total: float = 0.0
    surge_multiplier: Optional[float] = None


class EstimatedTime(BaseModel):
    minutes: int
    hours: int
    display: str


class Estimate(BaseModel):
    service_type: ServiceType
    distance: float
    estimated_time: EstimatedTime
    pricing: PricingBreakdown
    valid_until: datetime
