"""
FastAPI Backend for the FuelEU Maritime pool compliance engine.

Provides REST API endpoints for:
- Per-vessel GHG intensity compliance (balance, status, penalty, score)
- Pool aggregation and multi-year trends
- Remediation suggestions and banking/borrowing capacity

Version: 1.0.0
"""

import logging
from datetime import datetime, timezone

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from api.config import settings
from api.middleware import setup_middleware
from api.routers.fueleu import router as fueleu_router, get_engine

API_TITLE = "FuelEU Pool Compliance API"
API_VERSION = "1.0.0"

# JSON request logs are self-contained
logging.basicConfig(
    level=getattr(logging, settings.log_level.upper(), logging.INFO),
    format='%(message)s',
)
logger = logging.getLogger(__name__)


# =============================================================================
# Application Factory
# =============================================================================

def create_app() -> FastAPI:
    """
    Application factory.

    Creates and configures the FastAPI application with middleware and
    routes.

    Returns:
        FastAPI: Configured application instance
    """
    application = FastAPI(
        title=API_TITLE,
        description="""
## FuelEU Maritime Compliance API

GHG intensity compliance for vessels and vessel pools.

### Features
- Compliance balance (tCO2eq) and status per vessel
- Pool netting with gross deficit/surplus and net vs. gross penalties
- Multi-year trend under tightening limits
- Banking/borrowing capacity and remediation suggestions
        """,
        version=API_VERSION,
        docs_url="/api/docs",
        redoc_url="/api/redoc",
        openapi_url="/api/openapi.json",
    )

    setup_middleware(
        application,
        debug=settings.is_development or settings.debug,
        enable_hsts=settings.is_production,
    )

    # Configured origins only
    application.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins_list,
        allow_credentials=True,
        allow_methods=["GET", "POST", "OPTIONS"],
        allow_headers=["*"],
    )

    @application.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        logger.warning("Validation error on %s %s: %s", request.method, request.url.path, exc.errors())
        return JSONResponse(status_code=422, content={"detail": jsonable_encoder(exc.errors())})

    @application.get("/", tags=["System"])
    async def root():
        """API root."""
        return {
            "name": API_TITLE,
            "version": API_VERSION,
            "status": "operational",
            "docs": "/api/docs",
        }

    @application.get("/api/health", tags=["System"])
    async def health():
        """Liveness check; confirms the engine tables load."""
        engine = get_engine()
        return {
            "status": "healthy",
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "version": API_VERSION,
            "compliance_years": len(engine.targets),
        }

    application.include_router(fueleu_router)

    return application


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host=settings.api_host, port=settings.api_port, log_level=settings.log_level)
