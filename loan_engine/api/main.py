"""FastAPI application factory"""

from fastapi import FastAPI
from prometheus_client import generate_latest, CONTENT_TYPE_LATEST
from starlette.responses import Response

from loan_engine.api.middleware import RequestIDMiddleware, MetricsMiddleware
from loan_engine.api.v1 import assessment, export, preview
from loan_engine.infrastructure.observability.logging import setup_logging
from loan_engine.config import settings

# Setup structured logging
setup_logging(settings.log_level)


def create_app() -> FastAPI:
    """Create and configure FastAPI application"""
    app = FastAPI(
        title="Loan Engine",
        description="Loan EMI, approval probability and amortization service",
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

    @app.get("/metrics")
    def metrics():
        return Response(content=generate_latest(), media_type=CONTENT_TYPE_LATEST)

    app.include_router(assessment.router, prefix="/v1", tags=["assessments"])
    app.include_router(preview.router, prefix="/v1", tags=["form"])
    app.include_router(export.router, prefix="/v1", tags=["exports"])

    return app


app = create_app()
