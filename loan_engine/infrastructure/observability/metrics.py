"""Prometheus metrics for monitoring assessment outcomes and exports"""

from prometheus_client import Counter, Histogram

# Assessment metrics
assessment_counter = Counter(
    "loan_assessment_total",
    "Total loan assessments made",
    ["outcome"],  # likely_approved | needs_review
)

approval_probability_histogram = Histogram(
    "loan_approval_probability",
    "Distribution of approval probability scores",
    buckets=[10, 20, 30, 40, 50, 65, 80, 90, 100],
)

validation_failure_counter = Counter(
    "loan_validation_failures_total",
    "Form submissions rejected for missing required fields",
)

export_counter = Counter(
    "loan_export_total",
    "CSV exports generated",
)

# Service health
request_duration_histogram = Histogram(
    "http_request_duration_seconds",
    "HTTP request latency",
    ["method", "endpoint", "status"],
)


def record_assessment(outcome: str, approval_probability: float) -> None:
    """Record outcome and score distribution for monitoring approval rates"""
    assessment_counter.labels(outcome=outcome).inc()
    approval_probability_histogram.observe(approval_probability)
