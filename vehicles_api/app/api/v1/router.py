"""
Top‑level router for version 1 of the API.

This router aggregates resource routers under a unified prefix.  When
new resources are introduced, update this file to include their
routers.
"""

from fastapi import APIRouter

from .endpoints import vehicles

router = APIRouter()

router.include_router(vehicles.router, prefix="/vehicles", tags=["vehicles"])
