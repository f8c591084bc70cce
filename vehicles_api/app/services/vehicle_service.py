"""
Business logic for vehicles.

``VehicleService`` is a thin asynchronous façade over
``VehicleRepository``.  Every method forwards its arguments unchanged
and lets repository errors (``DuplicateIDError``, ``NotFoundError``)
propagate to the API layer, which maps them to HTTP status codes.
"""

import logging
from typing import List

from ..repositories.vehicle_repository import VehicleMap, VehicleRepository
from ..schemas.vehicle import VehicleCreate, VehicleRead


logger = logging.getLogger(__name__)


class VehicleService:
    """Service for managing vehicles."""

    def __init__(self, repository: VehicleRepository) -> None:
        self.repository = repository

    async def find_all(self) -> VehicleMap:
        return self.repository.find_all()

    async def create(self, data: VehicleCreate) -> VehicleRead:
        vehicle = self.repository.create(data)
        logger.info("Created vehicle %s (%s %s)", vehicle.id, vehicle.brand, vehicle.model)
        return vehicle

    async def create_batch(self, items: List[VehicleCreate]) -> VehicleMap:
        created = self.repository.create_batch(items)
        logger.info("Created %d vehicles in batch", len(created))
        return created

    async def find_by_color_year(self, color: str, year: int) -> VehicleMap:
        return self.repository.find_by_color_year(color, year)

    async def find_by_brand_range(self, brand: str, start_year: int, end_year: int) -> VehicleMap:
        return self.repository.find_by_brand_range(brand, start_year, end_year)

    async def average_speed(self, brand: str) -> float:
        return self.repository.average_speed(brand)

    async def update_speed(self, vehicle_id: int, speed: float) -> VehicleRead:
        vehicle = self.repository.update_speed(vehicle_id, speed)
        logger.info("Updated max speed of vehicle %s to %s", vehicle_id, speed)
        return vehicle

    async def find_by_fuel_type(self, fuel_type: str) -> VehicleMap:
        return self.repository.find_by_fuel_type(fuel_type)

    async def delete(self, vehicle_id: int) -> None:
        self.repository.delete(vehicle_id)
        logger.info("Deleted vehicle %s", vehicle_id)

    async def update_fuel_type(self, vehicle_id: int, fuel_type: str) -> VehicleRead:
        vehicle = self.repository.update_fuel_type(vehicle_id, fuel_type)
        logger.info("Updated fuel type of vehicle %s to %s", vehicle_id, fuel_type)
        return vehicle

    async def find_by_dimensions(
        self,
        min_length: float,
        max_length: float,
        min_width: float,
        max_width: float,
    ) -> VehicleMap:
        return self.repository.find_by_dimensions(min_length, max_length, min_width, max_width)
