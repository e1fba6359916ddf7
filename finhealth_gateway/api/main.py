"""FastAPI application factory"""

from fastapi import FastAPI
from prometheus_client import generate_latest, CONTENT_TYPE_LATEST
from starlette.responses import Response

from finhealth_gateway.api.middleware import RequestIDMiddleware, MetricsMiddleware
from finhealth_gateway.api.v1 import evaluation, advice, report
from finhealth_gateway.infrastructure.observability.logging import setup_logging
from finhealth_gateway.config import settings

# Setup structured logging
setup_logging(settings.log_level)


def create_app() -> FastAPI:
    """Create and configure FastAPI application"""
    app = FastAPI(
        title="FinHealth Gateway",
        description="Financial health scoring, report and advisory chat service",
        version="0.1.0",
        docs_url="/docs",
        redoc_url="/redoc",
    )

    # Add middleware (order matters: last added = first executed)
    app.add_middleware(MetricsMiddleware)
    app.add_middleware(RequestIDMiddleware)

    @app.get("/health")
    def health_check():
        return {"status": "ok", "service": settings.service_name}

    # Prometheus metrics endpoint
    @app.get("/metrics")
    def metrics():
        return Response(content=generate_latest(), media_type=CONTENT_TYPE_LATEST)

    # Register API routers
    app.include_router(evaluation.router, prefix="/v1", tags=["evaluation"])
    app.include_router(advice.router, prefix="/v1", tags=["advice"])
    app.include_router(report.router, prefix="/v1", tags=["report"])

    return app


app = create_app()
