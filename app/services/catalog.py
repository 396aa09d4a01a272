from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping, Tuple

from app.core.enums import ServiceType
from app.schemas.estimate import ServiceTypeInfo

SERVICE_CATALOG = MappingProxyType({
    ServiceType.TWO_WHEELER: ServiceTypeInfo(
        service_type=ServiceType.TWO_WHEELER,
        name="Two Wheeler",
        description="Quick delivery with bikes or scooters",
        features=["Fast delivery", "Small packages", "City coverage"],
        max_weight="10 kg",
        estimated_time="20-45 mins",
    ),
    ServiceType.TRUCK: ServiceTypeInfo(
        service_type=ServiceType.TRUCK,
        name="Truck",
        description="Heavy goods transportation",
        features=["Heavy items", "Furniture", "Loading assistance"],
        max_weight="1000 kg",
        estimated_time="1-3 hours",
    ),
    ServiceType.INTERCITY: ServiceTypeInfo(
        service_type=ServiceType.INTERCITY,
        name="Intercity",
        description="Long distance transportation",
        features=["Long distance", "Multi-day trips", "Professional drivers"],
        max_weight="2000 kg",
        estimated_time="1-3 days",
    ),
    ServiceType.PACKERS_MOVERS: ServiceTypeInfo(
        service_type=ServiceType.PACKERS_MOVERS,
        name="Packers & Movers",
        description="Complete home/office relocation",
        features=["Packing service", "Professional movers", "Insurance coverage"],
        max_weight="No limit",
        estimated_time="4-8 hours",
    ),
})


def list_service_types() -> list:
    return list(SERVICE_CATALOG.values())


@dataclass(frozen=True)
class PricingNotes:
    descriptions: Mapping[str, str]
    features: Tuple[str, ...]


# display text for each charge in the rule table, keyed by PricingRule field
PRICING_NOTES = MappingProxyType({
    ServiceType.TWO_WHEELER: PricingNotes(
        descriptions=MappingProxyType({
            "base_fare": "Base fare for pickup",
            "per_km": "Per kilometer charge",
            "per_minute": "Waiting time charge",
        }),
        features=("Instant booking", "Real-time tracking", "Cash/Digital payment"),
    ),
    ServiceType.TRUCK: PricingNotes(
        descriptions=MappingProxyType({
            "base_fare": "Base fare for pickup",
            "per_km": "Per kilometer charge",
            "loading_charges": "Loading/unloading assistance",
        }),
        features=("Professional drivers", "Loading assistance", "Secure transportation"),
    ),
    ServiceType.INTERCITY: PricingNotes(
        descriptions=MappingProxyType({
            "base_fare": "Base fare for pickup",
            "per_km": "Per kilometer charge",
            "driver_allowance": "Per day driver allowance",
        }),
        features=("Long distance expert drivers", "Toll charges included", "24/7 support"),
    ),
    ServiceType.PACKERS_MOVERS: PricingNotes(
        descriptions=MappingProxyType({
            "base_fare": "Base service charge",
            "per_km": "Transportation charge per km",
            "labor_charges": "Labor charges for packing/moving",
            "packing_charges": "Packing materials and service",
        }),
        features=(
            "Professional packing",
            "Furniture disassembly/assembly",
            "Insurance coverage available",
        ),
    ),
})
