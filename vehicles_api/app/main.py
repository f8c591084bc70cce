"""
Main entrypoint for the Vehicles API.

This module assembles the FastAPI application, sets up logging, builds
the in‑memory repository and service, registers the error envelope
handlers and includes versioned routers.  The ``create_app`` function
builds and configures the app, which is then instantiated at module
import time as ``app``.  Run it with uvicorn, e.g.::

    uvicorn vehicles_api.app.main:app --reload
"""

import logging
from typing import Dict, Optional

from fastapi import FastAPI

from .core.config import settings
from .core.errors import register_exception_handlers
from .core.logging_config import setup_logging
from .core.seed import load_vehicles
from .api.v1.router import router as v1_router
from .repositories.vehicle_repository import VehicleRepository
from .schemas.vehicle import VehicleRead
from .services.vehicle_service import VehicleService


logger = logging.getLogger(__name__)


def create_app(seed: Optional[Dict[int, VehicleRead]] = None) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    seed : Optional[Dict[int, VehicleRead]]
        Initial contents of the vehicle store.  When omitted, the store
        is loaded from ``settings.vehicles_file`` if that is set and
        starts empty otherwise.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.  The service used by
        the routes is available as ``app.state.vehicle_service``.
    """
    setup_logging(settings.log_level, settings.log_file or None)

    if seed is None and settings.vehicles_file:
        seed = load_vehicles(settings.vehicles_file)

    app = FastAPI(title=settings.project_name, version=settings.api_version, debug=settings.debug)
    app.state.vehicle_service = VehicleService(VehicleRepository(seed))

    register_exception_handlers(app)
    app.include_router(v1_router, prefix=settings.api_prefix)

    logger.info("Vehicle store initialised with %d vehicles", len(app.state.vehicle_service.repository))
    return app


# Create the application instance at import time so that tools such as
# uvicorn can discover it without calling create_app manually.
app = create_app()
