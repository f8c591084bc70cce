"""
Domain errors raised by the vehicle repository.

They derive from ``ValueError`` so callers that only care about
"the operation was rejected" can keep catching ``ValueError``, while
the HTTP layer distinguishes the concrete kind to pick a status code.
"""


class VehicleError(ValueError):
    """Base class for vehicle store errors."""


class DuplicateIDError(VehicleError):
    """A vehicle with the same identifier already exists."""

    def __init__(self, vehicle_id: int) -> None:
        self.vehicle_id = vehicle_id
        super().__init__(f"vehicle with id {vehicle_id} already exists")


class NotFoundError(VehicleError):
    """No vehicle matched the lookup or the query returned nothing."""
