"""Main FastAPI application for the CI/CD pipeline PoC services."""

import logging
import sys
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from pipeline_poc.api.routes import e2e, health, status
from pipeline_poc.config import Settings, settings
from pipeline_poc.core.assembler import ResponseAssembler

# Configure logging
logging.basicConfig(
    level=getattr(logging, settings.log_level),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    handlers=[logging.StreamHandler(sys.stdout)],
)

logger = logging.getLogger(__name__)


def create_app(
    app_settings: Optional[Settings] = None,
    assembler: Optional[ResponseAssembler] = None,
) -> FastAPI:
    """Create the FastAPI application for the configured service variant.

    Args:
        app_settings: Settings to use; the process-wide settings when omitted
        assembler: Response assembler; built from the settings when omitted

    Returns:
        FastAPI application with the variant's routers mounted
    """
    if app_settings is None:
        app_settings = settings
    if assembler is None:
        assembler = ResponseAssembler(app_settings)

    if app_settings.service_variant == "e2e-test":
        description = "End-to-end test application for the CI/CD pipeline"
    else:
        description = "Mock microservice for exercising CI/CD pipeline gates"

    app = FastAPI(
        title=app_settings.resolved_service_name,
        description=description,
        version=app_settings.service_version,
    )
    app.state.settings = app_settings
    app.state.assembler = assembler

    # Configure CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=app_settings.cors_origins_list,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Include routers
    if app_settings.service_variant == "e2e-test":
        app.include_router(e2e.router)
        app.include_router(e2e.actuator_router)
    else:
        app.include_router(health.router)
        app.include_router(status.router)

    @app.on_event("startup")
    async def startup():
        logger.info(
            f"Starting {app_settings.resolved_service_name} "
            f"({app_settings.service_variant}) on port {app_settings.port}"
        )
        logger.info(f"Environment: {app_settings.environment}")
        if not app_settings.credentials_configured:
            logger.warning("ADMIN_PASSWORD and/or API_KEY not configured")

    @app.on_event("shutdown")
    async def shutdown():
        logger.info("Shutting down service")

    return app


app = create_app()


def run() -> None:
    """Console entry point: serve the configured variant with uvicorn."""
    import uvicorn

    uvicorn.run(
        "pipeline_poc.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.environment == "development",
    )


if __name__ == "__main__":
    run()
