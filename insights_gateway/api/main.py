"""FastAPI application factory"""

from fastapi import FastAPI
from prometheus_client import generate_latest, CONTENT_TYPE_LATEST
from starlette.responses import Response

from insights_gateway.api.middleware import RequestIDMiddleware, MetricsMiddleware
from insights_gateway.api.v1 import categories, history, insights
from insights_gateway.domain.taxonomy import load_taxonomy
from insights_gateway.infrastructure.observability.logging import setup_logging
from insights_gateway.config import settings

# Setup structured logging
setup_logging(settings.log_level)


def create_app() -> FastAPI:
    """Create and configure FastAPI application"""
    app = FastAPI(
        title="Insights Gateway",
        description="Behavioral spending insights over categorized transactions",
        version="0.1.0",
        docs_url="/docs",
        redoc_url="/redoc",
    )

    # Read-only for the lifetime of the process
    app.state.taxonomy = load_taxonomy(settings.category_taxonomy_path)

    # Add middleware (order matters: last added = first executed)
    app.add_middleware(MetricsMiddleware)
    app.add_middleware(RequestIDMiddleware)

    # Health check endpoint
    @app.get("/health")
    def health_check():
        return {"status": "ok", "service": settings.service_name}

    # Prometheus metrics endpoint
    @app.get("/metrics")
    def metrics():
        return Response(content=generate_latest(), media_type=CONTENT_TYPE_LATEST)

    # Register API routers
    app.include_router(insights.router, prefix="/v1", tags=["insights"])
    app.include_router(history.router, prefix="/v1", tags=["history"])
    app.include_router(categories.router, prefix="/v1", tags=["categories"])

    return app


app = create_app()
