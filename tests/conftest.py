"""Pytest configuration and shared fixtures.

This module provides:
- A vehicle payload factory using the API field names
- A seeded repository and service for unit tests
- A FastAPI app built with ``create_app(seed=...)`` per test and an
  httpx ``AsyncClient`` bound to it through ``ASGITransport``
"""

from collections.abc import AsyncGenerator
from typing import Any, Callable, Dict

import pytest
import pytest_asyncio
from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient

from vehicles_api.app.main import create_app
from vehicles_api.app.repositories.vehicle_repository import VehicleRepository
from vehicles_api.app.schemas.vehicle import VehicleRead
from vehicles_api.app.services.vehicle_service import VehicleService


def vehicle_payload(**overrides: Any) -> Dict[str, Any]:
    """Return a valid vehicle body; keyword arguments replace fields."""
    payload: Dict[str, Any] = {
        "id": 1,
        "brand": "Toyota",
        "model": "Corolla",
        "registration": "ABC-123",
        "color": "red",
        "year": 2020,
        "passengers": 5,
        "max_speed": 180.0,
        "fuel_type": "gasoline",
        "transmission": "manual",
        "weight": 1300.0,
        "height": 1.45,
        "length": 4.6,
        "width": 1.78,
    }
    payload.update(overrides)
    return payload


@pytest.fixture
def make_vehicle() -> Callable[..., Dict[str, Any]]:
    return vehicle_payload


@pytest.fixture
def seed() -> Dict[int, VehicleRead]:
    """Four vehicles covering every query in the API."""
    vehicles = [
        vehicle_payload(id=1),
        vehicle_payload(
            id=2, model="Camry", registration="DEF-456", color="blue", year=2022,
            max_speed=200.0, fuel_type="hybrid", length=4.9, width=1.84,
        ),
        vehicle_payload(
            id=3, brand="Ford", model="Fiesta", registration="GHI-789", color="red", year=2020,
            max_speed=170.0, fuel_type="diesel", length=4.0, width=1.73,
        ),
        vehicle_payload(
            id=4, brand="Fiat", model="500", registration="JKL-012", color="white", year=2015,
            max_speed=160.0, fuel_type="gasoline", length=1.5, width=1.5,
        ),
    ]
    return {item["id"]: VehicleRead(**item) for item in vehicles}


@pytest.fixture
def repository(seed) -> VehicleRepository:
    return VehicleRepository(seed)


@pytest.fixture
def service(repository) -> VehicleService:
    return VehicleService(repository)


@pytest.fixture
def test_app(seed) -> FastAPI:
    """Provide a fresh FastAPI app with its own seeded store."""
    return create_app(seed=seed)


@pytest_asyncio.fixture
async def client(test_app) -> AsyncGenerator[AsyncClient, None]:
    async with AsyncClient(transport=ASGITransport(app=test_app), base_url="http://test") as ac:
        yield ac
