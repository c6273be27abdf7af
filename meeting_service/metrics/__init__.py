# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""Prometheus metrics for the meeting service."""
from prometheus_client import Counter, Histogram

NOTIFICATIONS_CREATED = Counter(
    "notifications_created_total", "Total notifications created"
)
DIGEST_EMAILS_SENT = Counter(
    "digest_emails_sent_total", "Digest emails handed to the email gateway"
)
DISPATCH_RUNS = Counter(
    "notification_dispatch_runs_total", "Notification dispatch runs", ["status"]
)
DISPATCH_DURATION = Histogram(
    "notification_dispatch_seconds",
    "Time to run one notification dispatch end-to-end",
    buckets=[0.01, 0.05, 0.1, 0.25, 0.5, 1.0, 2.5, 5.0, 10.0, 30.0],
)
SEED_FAILURES = Counter(
    "seed_failures_total", "Bootstrap seeding phases that failed", ["phase"]
)
REQUEST_COUNT = Counter(
    "http_requests_total", "Total HTTP requests", ["method", "endpoint", "status"]
)
REQUEST_LATENCY = Histogram(
    "http_request_duration_seconds", "HTTP request latency", ["method", "endpoint"]
)
HTTP_ERRORS = Counter(
    "http_errors_total", "Total HTTP errors", ["method", "endpoint", "status"]
)
