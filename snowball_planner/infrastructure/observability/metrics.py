"""Prometheus metrics for plan outcomes, payoff horizons and debt imports"""

from prometheus_client import Counter, Histogram

# Plan metrics
plan_counter = Counter(
    "snowball_plan_total",
    "Total payoff plans computed",
    ["outcome"],  # paid_off | truncated | empty
)

months_to_payoff_histogram = Histogram(
    "snowball_months_to_payoff",
    "Months until every debt is paid off",
    buckets=[6, 12, 24, 36, 60, 120, 240, 360, 600],
)

# Import metrics
debts_imported_counter = Counter(
    "snowball_debts_imported_total",
    "Debts parsed from CSV uploads",
)

import_failures_counter = Counter(
    "snowball_import_failures_total",
    "Rejected CSV uploads",
    ["reason"],  # invalid | too_large
)

# Service health
request_duration_histogram = Histogram(
    "http_request_duration_seconds",
    "HTTP request latency",
    ["method", "endpoint", "status"],
)


def record_plan(debt_count: int, months_to_payoff: int, truncated: bool) -> None:
    """Record plan metrics for monitoring payoff horizons"""
    if debt_count == 0:
        outcome = "empty"
    elif truncated:
        outcome = "truncated"
    else:
        outcome = "paid_off"

    plan_counter.labels(outcome=outcome).inc()

    if debt_count:
        months_to_payoff_histogram.observe(months_to_payoff)
