from __future__ import annotations

import os
from datetime import UTC, datetime

from fastapi import FastAPI, Response
from fastapi.middleware.cors import CORSMiddleware
from prometheus_client import CONTENT_TYPE_LATEST, REGISTRY, generate_latest

from .routers.contact import router as contact_router
from .routers.pages import router as pages_router
from .routers.profile import router as profile_router
from .routers.projects import router as projects_router
from ..observability.metrics import metrics_middleware_factory


APP_NAME = "Portfolio Site API"
APP_VERSION = "0.1.0"
DEFAULT_CORS_ORIGINS = "http://localhost:3000,http://127.0.0.1:3000"

app = FastAPI(title=APP_NAME, version=APP_VERSION)

# Observability: request latency histogram
app.middleware("http")(metrics_middleware_factory())

# JSON API lives under /api; the bare paths serve the HTML pages
app.include_router(projects_router, prefix="/api")
app.include_router(profile_router, prefix="/api")
app.include_router(contact_router, prefix="/api")
app.include_router(pages_router)

app.add_middleware(
    CORSMiddleware,
    allow_origins=[o.strip() for o in os.getenv("PORTFOLIO_CORS_ORIGINS", DEFAULT_CORS_ORIGINS).split(",") if o.strip()],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.get("/api")
def api_root():
    return {"name": APP_NAME, "version": APP_VERSION}


@app.get("/api/health")
def api_health():
    return {
        "status": "ok",
        "timestamp": datetime.now(UTC).isoformat().replace("+00:00", "Z"),
        "components": {
            "api": "ok",
            "catalog": "static",
        },
    }


@app.get("/metrics")
def metrics() -> Response:
    data = generate_latest(REGISTRY)
    return Response(content=data, media_type=CONTENT_TYPE_LATEST)
