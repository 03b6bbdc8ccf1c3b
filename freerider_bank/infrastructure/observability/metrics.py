"""Prometheus metrics for transfers, virtual accounts, and HTTP latency"""

from prometheus_client import Counter, Histogram, Gauge

# Transfer metrics
transfer_counter = Counter(
    "freerider_transfer_total",
    "Ledger transfers processed",
    ["outcome"],  # success | INVALID_ACCOUNT | INSUFFICIENT_BALANCE | INVALID_PIN | error
)

transfer_amount_histogram = Histogram(
    "freerider_transfer_amount",
    "Successful transfer amounts in minor currency units",
    buckets=[1_000, 5_000, 10_000, 20_000, 50_000, 100_000],
)

provider_transfer_counter = Counter(
    "freerider_provider_transfer_total",
    "Quick-pay provider transfers",
    ["provider"],
)

# Virtual account metrics
virtual_account_created_counter = Counter(
    "freerider_virtual_account_created_total",
    "Virtual accounts issued",
)

virtual_account_active_gauge = Gauge(
    "freerider_virtual_account_active",
    "Virtual accounts not yet expired or consumed",
)

# Service health
request_duration_histogram = Histogram(
    "http_request_duration_seconds",
    "HTTP request latency",
    ["method", "endpoint", "status"],
)


def record_transfer(outcome: str, amount: int | None = None) -> None:
    """Count a transfer outcome; amounts are observed for successes only"""
    transfer_counter.labels(outcome=outcome).inc()
    if outcome == "success" and amount is not None:
        transfer_amount_histogram.observe(amount)
