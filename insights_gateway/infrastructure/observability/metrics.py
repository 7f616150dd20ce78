"""Prometheus metrics for monitoring insight generation and transaction store health"""

from prometheus_client import Counter, Histogram

from insights_gateway.domain.models import BehavioralInsights

# Insight metrics
insights_counter = Counter(
    "insights_generated_total",
    "Total insight reports requested",
    ["outcome"],  # generated | no_data
)

recurring_payments_histogram = Histogram(
    "insights_recurring_payments",
    "Recurring payments detected per report",
    buckets=[0, 1, 2, 5, 10, 20],
)

# Transaction store metrics
transaction_store_failures_counter = Counter(
    "transaction_store_failures_total",
    "Failed transaction store calls",
)

# Service health
request_duration_histogram = Histogram(
    "http_request_duration_seconds",
    "HTTP request latency",
    ["method", "endpoint", "status"],
)


def record_insights(insights: BehavioralInsights) -> None:
    """Record a generated report"""
    insights_counter.labels(outcome="generated").inc()
    recurring_payments_histogram.observe(len(insights.recurring_payments))


def record_no_data() -> None:
    """Record a request rejected for lack of transactions"""
    insights_counter.labels(outcome="no_data").inc()
