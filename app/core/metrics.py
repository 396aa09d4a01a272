"""Prometheus metrics for monitoring"""
from prometheus_client import Counter, Histogram, Gauge, CollectorRegistry, generate_latest

registry = CollectorRegistry()

request_count = Counter(
    'http_requests_total',
    'Total HTTP requests',
    ['method', 'endpoint', 'status'],
    registry=registry
)

request_duration = Histogram(
    'http_request_duration_seconds',
    'HTTP request duration in seconds',
    ['method', 'endpoint'],
    registry=registry
)

estimates_calculated = Counter(
    'estimates_calculated_total',
    'Total fare estimates computed',
    ['service_type', 'outcome'],
    registry=registry
)

estimate_cache_hits = Counter(
    'estimate_cache_hits_total',
    'Total estimate cache hits',
    ['service_type'],
    registry=registry
)

estimate_cache_misses = Counter(
    'estimate_cache_misses_total',
    'Total estimate cache misses',
    ['service_type'],
    registry=registry
)

surge_multiplier_applied = Histogram(
    'surge_multiplier',
    'Surge multiplier injected into estimates',
    ['service_type'],
    buckets=(1.0, 1.2, 1.3, 1.5, 1.8, 2.0, 2.5, 3.0, 3.25),
    registry=registry
)

redis_connected = Gauge(
    'redis_connected',
    'Redis connection status (1=connected, 0=disconnected)',
    registry=registry
)


def get_metrics_text() -> bytes:
    return generate_latest(registry)
