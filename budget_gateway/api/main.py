"""FastAPI application factory"""

from fastapi import FastAPI
from prometheus_client import generate_latest, CONTENT_TYPE_LATEST
from starlette.responses import Response

from budget_gateway.api.middleware import RequestContextMiddleware
from budget_gateway.api.v1 import installments, obligations, transactions
from budget_gateway.infrastructure.observability.logging import setup_logging
from budget_gateway.config import settings

setup_logging(settings.log_level)


def create_app() -> FastAPI:
    """Create and configure FastAPI application"""
    app = FastAPI(
        title="Budget Gateway",
        description="Recurring obligation projection, spending trends and installment allocation",
        version="0.1.0",
    )
    app.add_middleware(RequestContextMiddleware)

    @app.get("/health")
    def health_check():
        return {"status": "ok", "service": settings.service_name}

    @app.get("/metrics")
    def metrics():
        return Response(content=generate_latest(), media_type=CONTENT_TYPE_LATEST)

    app.include_router(obligations.router, prefix="/v1", tags=["obligations"])
    app.include_router(transactions.router, prefix="/v1", tags=["transactions"])
    app.include_router(installments.router, prefix="/v1", tags=["installments"])

    return app


app = create_app()
