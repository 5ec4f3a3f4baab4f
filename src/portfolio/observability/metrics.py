from __future__ import annotations

"""Prometheus metrics for the portfolio FastAPI service.

Adds an HTTP middleware that records request latency per method/path/status
and a counter of contact-form deliveries by outcome.
"""

import time
from typing import Callable, Awaitable

from prometheus_client import Counter, Histogram
from starlette.requests import Request
from starlette.responses import Response

# Histogram buckets chosen for web latencies (seconds)
REQUEST_LATENCY = Histogram(
    "portfolio_request_latency_seconds",
    "HTTP request latency in seconds",
    labelnames=("method", "path", "status"),
    buckets=(0.005, 0.01, 0.025, 0.05, 0.1, 0.25, 0.5, 1.0, 2.5),
)

CONTACT_MESSAGES = Counter(
    "portfolio_contact_messages_total",
    "Contact form messages by delivery outcome",
    labelnames=("outcome",),
)


def sanitize_path(path: str) -> str:
    """Reduce high-cardinality paths (e.g., /api/projects/{id}) to a coarse label.

    Keeps the first segment, or the first two under /api.
    """
    if not path:
        return "/"
    segs = [s for s in path.split("?")[0].split("/") if s]
    if not segs:
        return "/"
    if segs[0] == "api" and len(segs) > 1:
        return f"/api/{segs[1]}"
    return "/" + segs[0]


def metrics_middleware_factory() -> Callable[[Request, Callable[[Request], Awaitable[Response]]], Awaitable[Response]]:
    async def middleware(request: Request, call_next: Callable[[Request], Awaitable[Response]]) -> Response:
        # Avoid observing the metrics endpoint itself
        if request.url.path.startswith("/metrics"):
            return await call_next(request)
        start = time.perf_counter()
        response = await call_next(request)
        elapsed = time.perf_counter() - start
        REQUEST_LATENCY.labels(
            method=request.method,
            path=sanitize_path(request.url.path),
            status=str(response.status_code),
        ).observe(elapsed)
        return response

    return middleware
