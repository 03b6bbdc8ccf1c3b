"""FastAPI application factory"""

from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from prometheus_client import generate_latest, CONTENT_TYPE_LATEST
from starlette.responses import Response

from freerider_bank.api.middleware import RequestIDMiddleware, MetricsMiddleware
from freerider_bank.api.v1 import channel
from freerider_bank.infrastructure.observability.logging import setup_logging
from freerider_bank.config import settings
from freerider_bank.service import BankService

# Setup structured logging
setup_logging(settings.log_level)


def create_app(bank_service: BankService | None = None) -> FastAPI:
    """Create and configure FastAPI application around one ledger service"""
    service = bank_service
    if service is None:
        service = BankService(settings)
        service.seed_fixtures()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        await service.start()
        try:
            yield
        finally:
            await service.stop()

    app = FastAPI(
        title="FREERIDER Bank Gateway",
        description="Mock bank ledger and virtual accounts for transit-card top-ups",
        version="0.1.0",
        docs_url="/docs",
        redoc_url="/redoc",
        lifespan=lifespan,
    )
    app.state.bank_service = service

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
    app.include_router(channel.router, prefix="/v1", tags=["channel"])
    app.add_exception_handler(RequestValidationError, channel.request_validation_handler)

    return app


app = create_app()
