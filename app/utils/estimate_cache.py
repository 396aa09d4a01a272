"""Short-lived Redis cache for computed estimates.

Cache trouble is never fatal: every failure is logged and treated as a miss.
"""
import logging
from typing import Optional

from app.core.config import settings
from app.core.redis import get_redis
from app.schemas.pricing import Estimate
from app.utils.hashing import payload_hash

logger = logging.getLogger(__name__)

CACHE_PREFIX = "estimate:"


def estimate_cache_key(service_type, pickup: dict, drop: dict, options: dict, surge_multiplier: float) -> str:
    return payload_hash(
        {
            "service_type": str(service_type),
            "pickup": pickup,
            "drop": drop,
            "options": options,
            "surge_multiplier": surge_multiplier,
        },
        prefix=CACHE_PREFIX,
    )


async def get_cached_estimate(key: str) -> Optional[Estimate]:
    redis = get_redis()
    if redis is None:
        return None
    try:
        cached = await redis.get(key)
        if not cached:
            return None
        return Estimate.model_validate_json(cached)
    except Exception as e:
        logger.warning(f"Cache retrieval failed: {e}")
        return None


async def set_cached_estimate(key: str, estimate: Estimate) -> None:
    redis = get_redis()
    if redis is None:
        return
    try:
        await redis.set(key, estimate.model_dump_json(), ex=settings.ESTIMATE_CACHE_TTL)
    except Exception as e:
        logger.warning(f"Cache write failed: {e}")
