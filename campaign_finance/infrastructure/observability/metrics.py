"""Prometheus metrics for record loading, decode failures, caching and HTTP latency"""

from prometheus_client import Counter, Histogram, Gauge

# Record loading metrics
records_loaded_gauge = Gauge(
    "campaign_finance_records_loaded",
    "Records held by the most recent successful load",
)

decode_failure_counter = Counter(
    "campaign_finance_decode_failures_total",
    "Bulk-file lines skipped by the decoder",
    ["reason"],  # truncated record | missing candidate id
)

load_duration_histogram = Histogram(
    "campaign_finance_load_duration_seconds",
    "Time to read and parse the bulk file",
    buckets=[0.1, 0.25, 0.5, 1.0, 2.5, 5.0, 10.0, 30.0],
)

record_source_failure_counter = Counter(
    "campaign_finance_source_failures_total",
    "Failed reads of the bulk-file source",
)

# Cache metrics
cache_hit_counter = Counter(
    "campaign_finance_cache_hits_total",
    "Record cache lookups served from memory",
)

cache_miss_counter = Counter(
    "campaign_finance_cache_misses_total",
    "Record cache lookups that started a load",
)

# Service health
request_duration_histogram = Histogram(
    "http_request_duration_seconds",
    "HTTP request latency",
    ["method", "endpoint", "status"],
)


def record_load(records_loaded: int, failure_reasons: dict[str, int]) -> None:
    """Record the outcome of a bulk-file parse"""
    records_loaded_gauge.set(records_loaded)
    for reason, count in failure_reasons.items():
        decode_failure_counter.labels(reason=reason).inc(count)
