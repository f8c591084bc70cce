"""
Vehicle endpoints for API v1.

These routes expose the in‑memory vehicle store: listing, single and
batch creation, the filtered queries, the average speed aggregate,
the two partial updates and deletion.  Handlers only decode and
validate input; the work is delegated to ``VehicleService``.

Path parameters that must be numbers (ids, years) are declared as
strings and parsed here so a malformed value produces the route's own
error message rather than a generic validation error.
"""

from typing import Any, Dict, List

from fastapi import APIRouter, Body, Depends, HTTPException, Query, Request, status

from vehicles_api.app.core.errors import (
    ERR_BAD_CRITERIA,
    ERR_BAD_FUEL_TYPE,
    ERR_BAD_REQUEST,
    ERR_BAD_SPEED,
    ERR_DUPLICATED_ID,
    ERR_NOT_FOUND,
)
from vehicles_api.app.core.exceptions import DuplicateIDError, NotFoundError
from vehicles_api.app.core.validators import parse_fuel_type, parse_int, parse_range, parse_speed
from vehicles_api.app.schemas.vehicle import (
    AverageSpeedResponse,
    MessageResponse,
    VehicleCreate,
    VehicleMapResponse,
    VehicleResponse,
)
from vehicles_api.app.services.vehicle_service import VehicleService


router = APIRouter()


def get_vehicle_service(request: Request) -> VehicleService:
    """Return the service instance created by ``create_app``."""
    return request.app.state.vehicle_service


def _parse_id(vehicle_id: str) -> int:
    try:
        return parse_int(vehicle_id, "id")
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=f"{ERR_BAD_REQUEST} {e}") from e


@router.get("", response_model=VehicleMapResponse)
async def list_vehicles(service: VehicleService = Depends(get_vehicle_service)) -> VehicleMapResponse:
    """Return every vehicle keyed by id."""
    vehicles = await service.find_all()
    return VehicleMapResponse(message="success", data=vehicles)


@router.post("", response_model=VehicleResponse, status_code=status.HTTP_201_CREATED)
async def create_vehicle(
    vehicle: VehicleCreate,
    service: VehicleService = Depends(get_vehicle_service),
) -> VehicleResponse:
    """Create a vehicle.

    Every attribute is required; ``id`` may be omitted to let the store
    pick one.  Returns 409 when the id is already taken.
    """
    try:
        created = await service.create(vehicle)
    except DuplicateIDError as e:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=f"{ERR_DUPLICATED_ID} {e}") from e
    return VehicleResponse(message="Vehicle created successfully.", data=created)


@router.post("/batch", response_model=VehicleMapResponse, status_code=status.HTTP_201_CREATED)
async def create_vehicles_batch(
    vehicles: List[VehicleCreate],
    service: VehicleService = Depends(get_vehicle_service),
) -> VehicleMapResponse:
    """Create several vehicles at once.

    Nothing is inserted if any id collides with a stored vehicle or
    with another item of the batch.
    """
    try:
        created = await service.create_batch(vehicles)
    except DuplicateIDError as e:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=f"{ERR_DUPLICATED_ID} {e}") from e
    return VehicleMapResponse(message="Vehicles created successfully.", data=created)


@router.get("/color/{color}/year/{year}", response_model=VehicleMapResponse)
async def get_by_color_year(
    color: str,
    year: str,
    service: VehicleService = Depends(get_vehicle_service),
) -> VehicleMapResponse:
    try:
        year_value = parse_int(year, "year")
        vehicles = await service.find_by_color_year(color, year_value)
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=f"{ERR_BAD_CRITERIA} {e}") from e
    return VehicleMapResponse(message="success", data=vehicles)


@router.get(
    "/brand/{brand}/start_year/{start_year}/end_year/{end_year}",
    response_model=VehicleMapResponse,
)
async def get_by_brand_range(
    brand: str,
    start_year: str,
    end_year: str,
    service: VehicleService = Depends(get_vehicle_service),
) -> VehicleMapResponse:
    """Vehicles of ``brand`` built between the two years, both inclusive."""
    try:
        start = parse_int(start_year, "start_year")
        end = parse_int(end_year, "end_year")
        vehicles = await service.find_by_brand_range(brand, start, end)
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=f"{ERR_BAD_CRITERIA} {e}") from e
    return VehicleMapResponse(message="success", data=vehicles)


@router.get("/average-speed/{brand}", response_model=AverageSpeedResponse)
async def get_average_speed(
    brand: str,
    service: VehicleService = Depends(get_vehicle_service),
) -> AverageSpeedResponse:
    try:
        average = await service.average_speed(brand)
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=f"{ERR_BAD_CRITERIA} {e}") from e
    return AverageSpeedResponse(message="success", data=f"{brand} - average speed is: {average:.2f} mph")


@router.get("/fuel_type/{fuel_type}", response_model=VehicleMapResponse)
async def get_by_fuel_type(
    fuel_type: str,
    service: VehicleService = Depends(get_vehicle_service),
) -> VehicleMapResponse:
    try:
        vehicles = await service.find_by_fuel_type(fuel_type)
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=f"{ERR_BAD_CRITERIA} {e}") from e
    return VehicleMapResponse(message="success", data=vehicles)


@router.get("/dimensions", response_model=VehicleMapResponse)
async def get_by_dimensions(
    length: str = Query("", description="Length range as min-max, e.g. 4.0-4.8"),
    width: str = Query("", description="Width range as min-max, e.g. 1.7-1.9"),
    service: VehicleService = Depends(get_vehicle_service),
) -> VehicleMapResponse:
    try:
        min_length, max_length = parse_range(length, "length")
        min_width, max_width = parse_range(width, "width")
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=f"{ERR_BAD_REQUEST} {e}") from e
    try:
        vehicles = await service.find_by_dimensions(min_length, max_length, min_width, max_width)
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=f"{ERR_BAD_CRITERIA} {e}") from e
    return VehicleMapResponse(message="success", data=vehicles)


@router.put("/{vehicle_id}/speed", response_model=VehicleResponse)
async def update_speed(
    vehicle_id: str,
    body: Dict[str, Any] = Body(...),
    service: VehicleService = Depends(get_vehicle_service),
) -> VehicleResponse:
    """Set ``max_speed``; the new value must be a positive number."""
    vehicle_id_value = _parse_id(vehicle_id)
    try:
        speed = parse_speed(body)
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=f"{ERR_BAD_SPEED} {e}") from e
    try:
        vehicle = await service.update_speed(vehicle_id_value, speed)
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=f"{ERR_NOT_FOUND} {e}") from e
    return VehicleResponse(message="Vehicle speed updated successfully.", data=vehicle)


@router.put("/{vehicle_id}/fupdate_fuel", response_model=VehicleResponse)
async def update_fuel_type(
    vehicle_id: str,
    body: Dict[str, Any] = Body(...),
    service: VehicleService = Depends(get_vehicle_service),
) -> VehicleResponse:
    vehicle_id_value = _parse_id(vehicle_id)
    try:
        fuel_type = parse_fuel_type(body)
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=f"{ERR_BAD_FUEL_TYPE} {e}") from e
    try:
        vehicle = await service.update_fuel_type(vehicle_id_value, fuel_type)
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=f"{ERR_NOT_FOUND} {e}") from e
    return VehicleResponse(message="Vehicle fuel type updated successfully.", data=vehicle)


@router.delete("/{vehicle_id}", response_model=MessageResponse)
async def delete_vehicle(
    vehicle_id: str,
    service: VehicleService = Depends(get_vehicle_service),
) -> MessageResponse:
    vehicle_id_value = _parse_id(vehicle_id)
    try:
        await service.delete(vehicle_id_value)
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=f"{ERR_NOT_FOUND} {e}") from e
    return MessageResponse(message="Vehicle deleted successfully.")
