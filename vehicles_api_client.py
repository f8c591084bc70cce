"""Vehicles API client.

This module defines a small client wrapper around the Vehicles REST
API.  It uses the ``requests`` library internally and exposes one
method per endpoint:

* :meth:`list_vehicles` – every stored vehicle keyed by id.
* :meth:`create_vehicle` / :meth:`create_vehicles_batch` – insert vehicles.
* :meth:`find_by_color_year`, :meth:`find_by_brand_range`,
  :meth:`find_by_fuel_type`, :meth:`find_by_dimensions` – filtered queries.
* :meth:`average_speed` – formatted average speed for a brand.
* :meth:`update_speed`, :meth:`update_fuel_type` – partial updates.
* :meth:`delete_vehicle` – remove a vehicle.

All methods return a tuple ``(data, error)``.  On success ``data`` is
the ``data`` member of the response envelope and ``error`` is ``None``;
on failure ``data`` is ``None`` and ``error`` is a dictionary with keys
``status_code`` and ``message``.
"""

from __future__ import annotations

import logging
from decimal import Decimal
from typing import Any, Dict, List, Optional, Tuple
from urllib.parse import quote

import requests


logger = logging.getLogger(__name__)

Result = Tuple[Optional[Any], Optional[Dict[str, Any]]]


class VehiclesAPI:
    """Client for interacting with the Vehicles API."""

    def __init__(
        self,
        *,
        base_url: str,
        session: Optional[requests.Session] = None,
        timeout: float = 15,
    ) -> None:
        """Initialise the API client.

        Args:
            base_url: Base URL for the API including any prefix, e.g.
                ``http://localhost:8080``.
            session: Optional requests session.  If not supplied a
                session will be created automatically.
            timeout: Timeout in seconds applied to every request.
        """
        self.base_url = base_url.rstrip("/")
        self.session = session or requests.Session()
        self.timeout = timeout

    # ------------------------------------------------------------------
    # Low level HTTP helpers
    # ------------------------------------------------------------------
    def _request(
        self, method: str, path: str, *, params: Dict[str, Any] | None = None,
        json_body: Any | None = None
    ) -> Result:
        """Perform an HTTP request and unwrap the response envelope.

        Args:
            method: HTTP method (``GET``, ``POST``, ``PUT``, ``DELETE``).
            path: Path relative to :attr:`base_url` (e.g. ``/vehicles``).
            params: Query parameters to include in the request.
            json_body: JSON body to send with the request.
        """
        url = f"{self.base_url}{path}"
        try:
            logger.debug("Sending %s request to %s", method, url)
            response = self.session.request(
                method=method,
                url=url,
                params=params,
                json=json_body,
                timeout=self.timeout,
            )
            response.raise_for_status()
            if response.content:
                return response.json().get("data"), None
            return None, None
        except requests.HTTPError as exc:
            status = exc.response.status_code if exc.response is not None else None
            message = ""
            if exc.response is not None:
                try:
                    message = exc.response.json().get("message") or ""
                except ValueError:
                    message = exc.response.text
            if not message:
                message = str(exc)
            logger.error("API request failed (%s): %s", status, message)
            return None, {"status_code": status, "message": message}
        except requests.RequestException as exc:
            logger.error("API request failed: %s", exc)
            return None, {"status_code": None, "message": str(exc)}

    @staticmethod
    def _segment(value: Any) -> str:
        return quote(str(value), safe="")

    # ------------------------------------------------------------------
    # Vehicle operations
    # ------------------------------------------------------------------
    def list_vehicles(self) -> Result:
        return self._request("GET", "/vehicles")

    def create_vehicle(self, vehicle: Dict[str, Any]) -> Result:
        """Create a vehicle; ``vehicle`` uses the API field names."""
        return self._request("POST", "/vehicles", json_body=vehicle)

    def create_vehicles_batch(self, vehicles: List[Dict[str, Any]]) -> Result:
        return self._request("POST", "/vehicles/batch", json_body=vehicles)

    def find_by_color_year(self, color: str, year: int) -> Result:
        return self._request("GET", f"/vehicles/color/{self._segment(color)}/year/{year}")

    def find_by_brand_range(self, brand: str, start_year: int, end_year: int) -> Result:
        return self._request(
            "GET",
            f"/vehicles/brand/{self._segment(brand)}/start_year/{start_year}/end_year/{end_year}",
        )

    def average_speed(self, brand: str) -> Result:
        return self._request("GET", f"/vehicles/average-speed/{self._segment(brand)}")

    def find_by_fuel_type(self, fuel_type: str) -> Result:
        return self._request("GET", f"/vehicles/fuel_type/{self._segment(fuel_type)}")

    @staticmethod
    def _bound(value: float) -> str:
        # Fixed notation: "1e-05" or a leading minus would add a dash the
        # server reads as the range separator.
        value = float(value)
        if not value >= 0:
            raise ValueError(f"dimension bounds must be non-negative, got {value}")
        # "+ 0.0" turns -0.0 into 0.0
        return format(Decimal(repr(value + 0.0)), "f")

    def find_by_dimensions(
        self, min_length: float, max_length: float, min_width: float, max_width: float
    ) -> Result:
        """Query by inclusive length and width ranges; bounds must be non-negative."""
        params = {
            "length": f"{self._bound(min_length)}-{self._bound(max_length)}",
            "width": f"{self._bound(min_width)}-{self._bound(max_width)}",
        }
        return self._request("GET", "/vehicles/dimensions", params=params)

    def update_speed(self, vehicle_id: int, max_speed: float) -> Result:
        return self._request("PUT", f"/vehicles/{vehicle_id}/speed", json_body={"max_speed": max_speed})

    def update_fuel_type(self, vehicle_id: int, fuel_type: str) -> Result:
        return self._request(
            "PUT", f"/vehicles/{vehicle_id}/fupdate_fuel", json_body={"fuel_type": fuel_type}
        )

    def delete_vehicle(self, vehicle_id: int) -> Result:
        return self._request("DELETE", f"/vehicles/{vehicle_id}")
