"""Prometheus metrics for projections, urgency sections and installment plans"""

from prometheus_client import Counter, Histogram

from budget_gateway.domain.models import UrgencyBucket

# Projection metrics
projection_counter = Counter(
    "budget_projection_total",
    "Total obligation projections computed",
)

projected_obligations_histogram = Histogram(
    "budget_projected_obligations",
    "Obligations per projection request",
    buckets=[1, 5, 10, 25, 50, 100, 250],
)

invalid_schedule_counter = Counter(
    "budget_invalid_schedule_total",
    "Obligations rejected because their due date could not be caught up",
)

# Trend metrics
trend_counter = Counter(
    "budget_trend_total",
    "Income/expense trends computed",
)

# Urgency metrics
urgency_bucket_counter = Counter(
    "budget_urgency_bucket",
    "Obligations classified per urgency bucket",
    ["bucket"],  # overdue | this_week | next_week | this_month | later
)

# Installment metrics
installment_plan_counter = Counter(
    "budget_installment_plans_total",
    "Installment plans allocated",
    ["legs"],  # 2-3 | 4-6 | 7-12 | 13+
)

# Service health
request_duration_histogram = Histogram(
    "http_request_duration_seconds",
    "HTTP request latency",
    ["method", "endpoint", "status"],
)


def record_projection(obligation_count: int) -> None:
    projection_counter.inc()
    projected_obligations_histogram.observe(obligation_count)


def record_urgency(bucket_sizes: dict[UrgencyBucket, int]) -> None:
    """Record how many obligations landed in each bucket"""
    for bucket, size in bucket_sizes.items():
        if size:
            urgency_bucket_counter.labels(bucket=bucket.value).inc(size)


def record_installment_plan(count: int) -> None:
    """Record plan sizes bucketed for distribution analysis"""
    if count <= 3:
        legs = "2-3"
    elif count <= 6:
        legs = "4-6"
    elif count <= 12:
        legs = "7-12"
    else:
        legs = "13+"

    installment_plan_counter.labels(legs=legs).inc()
