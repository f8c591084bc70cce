"""
In‑memory vehicle repository.

``VehicleRepository`` keeps every vehicle in a dictionary keyed by its
integer id.  Queries are linear scans over the whole store; there is
no index.  All reads hand out copies so callers can never modify the
store behind the repository's back, and every access happens under a
single re‑entrant lock because FastAPI may dispatch requests from
several threads.

Results are returned as dictionaries ordered by id.  Range filters are
inclusive on both bounds.
"""

import threading
from typing import Callable, Dict, Iterable, List, Optional

from ..core.exceptions import DuplicateIDError, NotFoundError
from ..schemas.vehicle import VehicleCreate, VehicleRead


VehicleMap = Dict[int, VehicleRead]


class VehicleRepository:
    """Process‑wide vehicle store."""

    def __init__(self, db: Optional[VehicleMap] = None) -> None:
        self._lock = threading.RLock()
        self._db: VehicleMap = {}
        if db:
            for vehicle_id, vehicle in db.items():
                self._db[vehicle_id] = vehicle.model_copy()

    def __len__(self) -> int:
        with self._lock:
            return len(self._db)

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------
    def _select(self, predicate: Callable[[VehicleRead], bool]) -> VehicleMap:
        with self._lock:
            return {
                vehicle_id: vehicle.model_copy()
                for vehicle_id, vehicle in sorted(self._db.items())
                if predicate(vehicle)
            }

    def _next_id(self, reserved: Iterable[int] = ()) -> int:
        return max([*self._db.keys(), *reserved], default=0) + 1

    def _get(self, vehicle_id: int) -> VehicleRead:
        vehicle = self._db.get(vehicle_id)
        if vehicle is None:
            raise NotFoundError(f"vehicle with id {vehicle_id} not found")
        return vehicle

    # ------------------------------------------------------------------
    # Reads
    # ------------------------------------------------------------------
    def find_all(self) -> VehicleMap:
        """Return a copy of every stored vehicle."""
        return self._select(lambda vehicle: True)

    def find_by_color_year(self, color: str, year: int) -> VehicleMap:
        found = self._select(lambda v: v.color == color and v.year == year)
        if not found:
            raise NotFoundError(f"no vehicles found with color {color} and year {year}")
        return found

    def find_by_brand_range(self, brand: str, start_year: int, end_year: int) -> VehicleMap:
        found = self._select(lambda v: v.brand == brand and start_year <= v.year <= end_year)
        if not found:
            raise NotFoundError(f"brand: {brand} - year range: {start_year} - {end_year}")
        return found

    def find_by_fuel_type(self, fuel_type: str) -> VehicleMap:
        found = self._select(lambda v: v.fuel_type == fuel_type)
        if not found:
            raise NotFoundError(f"no vehicles found with fuel type: {fuel_type}")
        return found

    def find_by_dimensions(
        self,
        min_length: float,
        max_length: float,
        min_width: float,
        max_width: float,
    ) -> VehicleMap:
        found = self._select(
            lambda v: min_length <= v.length <= max_length and min_width <= v.width <= max_width
        )
        if not found:
            raise NotFoundError(
                f"no vehicles found with length {min_length}-{max_length} and width {min_width}-{max_width}"
            )
        return found

    def average_speed(self, brand: str) -> float:
        """Return the mean ``max_speed`` of all vehicles of ``brand``."""
        with self._lock:
            speeds = [v.max_speed for v in self._db.values() if v.brand == brand]
        if not speeds:
            raise NotFoundError(f"no vehicles found for brand {brand}")
        return sum(speeds) / len(speeds)

    # ------------------------------------------------------------------
    # Writes
    # ------------------------------------------------------------------
    def create(self, data: VehicleCreate) -> VehicleRead:
        """Insert a single vehicle.

        Raises ``DuplicateIDError`` if the id is taken.  A missing id is
        replaced with the next free one.
        """
        with self._lock:
            vehicle_id = data.id if data.id is not None else self._next_id()
            if vehicle_id in self._db:
                raise DuplicateIDError(vehicle_id)
            vehicle = VehicleRead(**{**data.model_dump(), "id": vehicle_id})
            self._db[vehicle_id] = vehicle
            return vehicle.model_copy()

    def create_batch(self, items: List[VehicleCreate]) -> VehicleMap:
        """Insert several vehicles, all or nothing.

        Every explicit id is checked against the store and against the
        rest of the batch before anything is written.
        """
        with self._lock:
            explicit = [item.id for item in items if item.id is not None]
            seen = set()
            for vehicle_id in explicit:
                if vehicle_id in self._db or vehicle_id in seen:
                    raise DuplicateIDError(vehicle_id)
                seen.add(vehicle_id)

            next_id = self._next_id(explicit)
            created: VehicleMap = {}
            for item in items:
                if item.id is None:
                    vehicle_id, next_id = next_id, next_id + 1
                else:
                    vehicle_id = item.id
                created[vehicle_id] = VehicleRead(**{**item.model_dump(), "id": vehicle_id})

            self._db.update(created)
            return {vehicle_id: vehicle.model_copy() for vehicle_id, vehicle in sorted(created.items())}

    def update_speed(self, vehicle_id: int, speed: float) -> VehicleRead:
        with self._lock:
            vehicle = self._get(vehicle_id).model_copy(update={"max_speed": speed})
            self._db[vehicle_id] = vehicle
            return vehicle.model_copy()

    def update_fuel_type(self, vehicle_id: int, fuel_type: str) -> VehicleRead:
        with self._lock:
            vehicle = self._get(vehicle_id).model_copy(update={"fuel_type": fuel_type})
            self._db[vehicle_id] = vehicle
            return vehicle.model_copy()

    def delete(self, vehicle_id: int) -> None:
        with self._lock:
            self._get(vehicle_id)
            del self._db[vehicle_id]
