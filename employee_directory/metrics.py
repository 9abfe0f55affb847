"""
Prometheus metrics for the employee directory.

Tracks HTTP requests, page views and projected employee records.
"""

from fastapi import Response
from prometheus_client import CONTENT_TYPE_LATEST, Counter, Histogram, generate_latest

# Request metrics
http_requests_total = Counter(
    "employee_directory_http_requests_total",
    "Total HTTP requests",
    ["method", "endpoint", "status"],
)

http_request_duration_seconds = Histogram(
    "employee_directory_http_request_duration_seconds",
    "HTTP request duration in seconds",
    ["method", "endpoint"],
    buckets=(0.005, 0.01, 0.025, 0.05, 0.1, 0.25, 0.5, 1.0, 2.5, 5.0),
)

# Page view metrics
page_views_total = Counter(
    "employee_directory_page_views_total", "Total page views", ["page"]
)

# Projection metrics
employees_projected_total = Counter(
    "employee_directory_employees_projected_total",
    "Total employee records projected into view records",
)

# Error page metrics
error_pages_rendered_total = Counter(
    "employee_directory_error_pages_rendered_total",
    "Total error pages rendered",
    ["reason"],
)


def track_request_metrics(
    method: str, endpoint: str, status_code: int, duration: float
):
    """Track HTTP request metrics."""
    http_requests_total.labels(
        method=method, endpoint=endpoint, status=status_code
    ).inc()
    http_request_duration_seconds.labels(method=method, endpoint=endpoint).observe(
        duration
    )


def track_page_view(page: str):
    """Track page view metrics."""
    page_views_total.labels(page=page).inc()


def track_employees_projected(count: int):
    """Track number of projected employee records."""
    employees_projected_total.inc(count)


def track_error_page(reason: str):
    """Track rendered error pages."""
    error_pages_rendered_total.labels(reason=reason).inc()


async def metrics_endpoint():
    """
    Prometheus metrics endpoint.

    Returns:
        Response with Prometheus metrics in text format
    """
    return Response(content=generate_latest(), media_type=CONTENT_TYPE_LATEST)
