"""Prometheus metrics for monitoring score distribution, risk tiers and advisor performance"""

from prometheus_client import Counter, Histogram

# Evaluation metrics
evaluation_counter = Counter(
    "finhealth_evaluation_total",
    "Total financial health evaluations",
    ["risk_level"],  # Excellent | Moderate | High Risk
)

score_histogram = Histogram(
    "finhealth_score",
    "Distribution of financial health scores",
    buckets=[0, 20, 30, 40, 50, 60, 70, 80, 90, 100],
)

# Advisor API metrics
advisor_latency_histogram = Histogram(
    "advisor_latency_seconds",
    "Advisor API response time",
    buckets=[0.25, 0.5, 1.0, 2.5, 5.0, 10.0, 15.0],
)

advisor_failures_counter = Counter(
    "advisor_failures_total",
    "Failed advisor API calls",
)

# Service health
request_duration_histogram = Histogram(
    "http_request_duration_seconds",
    "HTTP request latency",
    ["method", "endpoint", "status"],
)


def record_evaluation(risk_level: str, score: int) -> None:
    """Record evaluation metrics for monitoring tier mix and score spread"""
    evaluation_counter.labels(risk_level=risk_level).inc()
    score_histogram.observe(score)
