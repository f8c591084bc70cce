"""
Pydantic models for vehicle data.

``VehicleBase`` holds every attribute except the identifier;
``VehicleCreate`` is the request body for single and batch creation
(the ``id`` may be omitted and is then assigned by the store) and
``VehicleRead`` is both the stored record and the response item.

Responses are wrapped in a ``{"message": ..., "data": ...}``
envelope; the envelope models live at the bottom of this module.
"""

from typing import Any, Dict, Optional

from pydantic import BaseModel, Field


class VehicleBase(BaseModel):
    # Numbers must arrive as JSON numbers ("2020" and true are rejected, an
    # integer is fine for a float field) and must be finite.
    model_config = {
        "strict": True,
        "allow_inf_nan": False,
    }

    brand: str = Field(..., min_length=1, examples=["Toyota"])
    model: str = Field(..., min_length=1, examples=["Corolla"])
    registration: str = Field(..., min_length=1, examples=["ABC-123"])
    color: str = Field(..., min_length=1, examples=["red"])
    year: int = Field(..., description="Fabrication year", examples=[2020])
    passengers: int = Field(..., description="Passenger capacity", examples=[5])
    max_speed: float = Field(..., examples=[180.0])
    fuel_type: str = Field(..., min_length=1, examples=["gasoline"])
    transmission: str = Field(..., min_length=1, examples=["manual"])
    weight: float = Field(..., examples=[1300.0])
    height: float = Field(..., examples=[1.45])
    length: float = Field(..., examples=[4.6])
    width: float = Field(..., examples=[1.78])


class VehicleCreate(VehicleBase):
    """Schema for creating a vehicle.

    ``id`` is optional; when it is left out the repository assigns the
    next free identifier.
    """

    id: Optional[int] = Field(None, examples=[1])


class VehicleRead(VehicleBase):
    """Schema for a stored vehicle."""

    id: int
    model_config = {
        "from_attributes": True,
    }


class MessageResponse(BaseModel):
    message: str
    data: Optional[Any] = None


class VehicleResponse(BaseModel):
    message: str
    data: VehicleRead


class VehicleMapResponse(BaseModel):
    """Vehicles keyed by id, as returned by listing and query endpoints."""

    message: str = "success"
    data: Dict[int, VehicleRead]


class AverageSpeedResponse(BaseModel):
    message: str = "success"
    data: str
