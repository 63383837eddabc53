#!/usr/bin/env python3
"""
PMTwin Matching API.

JSON endpoints over the matching core: ranked providers for a service
request, match statistics, and opportunities for a company.

Usage:
    python -m web.backend.app

Interactive docs are served at /docs (Swagger UI) and /redoc.
"""

import logging
from typing import Optional

from fastapi import FastAPI, HTTPException
from fastapi.exceptions import RequestValidationError

from core.config_loader import AppConfig
from .config import get_config
from .exceptions import (
    ServiceException,
    general_exception_handler,
    http_exception_handler,
    service_exception_handler,
    validation_exception_handler
)
from .routers import matches_router, opportunities_router, stats_router

logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)

SERVICE_NAME = "pmtwin-matching"


def create_app(config: Optional[AppConfig] = None) -> FastAPI:
    config = config or get_config()

    application = FastAPI(
        title="PMTwin Matching API",
        description="Provider and opportunity matching for the PMTwin marketplace",
        version="1.0.0"
    )

    application.add_exception_handler(ServiceException, service_exception_handler)
    application.add_exception_handler(RequestValidationError, validation_exception_handler)
    application.add_exception_handler(HTTPException, http_exception_handler)
    application.add_exception_handler(Exception, general_exception_handler)

    for router in (matches_router, stats_router, opportunities_router):
        application.include_router(router)

    @application.get("/health")
    def health_check():
        return {"status": "healthy", "service": SERVICE_NAME}

    blend = config.matching.opportunity.blend_location_and_payment
    logger.info(f"Matching API ready (location/payment blend {'on' if blend else 'off'})")
    return application


app = create_app()


def main():
    """Serve the API with uvicorn on the configured host and port."""
    import uvicorn

    config = get_config()
    logger.info(f"Starting {SERVICE_NAME} on {config.web.host}:{config.web.port} (docs at /docs)")
    uvicorn.run("web.backend.app:app", host=config.web.host, port=config.web.port, log_level="info")


if __name__ == "__main__":
    main()
