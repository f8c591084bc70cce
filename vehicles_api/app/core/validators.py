"""
Parsing helpers for path, query and body parameters.

Each helper raises ``ValueError`` with a short description when the
input cannot be used.  The endpoints turn that into an HTTP 400 with
the message that fits the route.
"""

import math
import re
from typing import Any, Dict, Tuple

# ASCII digits only: int() would also take " 12 ", "1_000" and non-ASCII digits.
_INT_RE = re.compile(r"[+-]?[0-9]+")


def parse_int(value: str, name: str) -> int:
    """Parse a base‑10 integer path parameter."""
    if not isinstance(value, str) or not _INT_RE.fullmatch(value):
        raise ValueError(f"{name}: expected an integer, got {value!r}")
    return int(value)


def parse_range(value: str, name: str) -> Tuple[float, float]:
    """Parse a ``min-max`` pair of finite floats, e.g. ``"1.5-4.2"``."""
    if not value:
        raise ValueError(f"{name}: parameter is required")
    parts = value.split("-")
    if len(parts) != 2:
        raise ValueError(f"{name}: expected 'min-max', got {value!r}")
    try:
        low, high = float(parts[0]), float(parts[1])
    except ValueError:
        raise ValueError(f"{name}: expected 'min-max', got {value!r}") from None
    if not (math.isfinite(low) and math.isfinite(high)):
        raise ValueError(f"{name}: bounds must be finite numbers")
    return low, high


def parse_speed(body: Dict[str, Any]) -> float:
    """Return ``max_speed`` from a request body; it must be a finite number above zero."""
    speed = body.get("max_speed")
    # bool is a subclass of int; true/false are not speeds
    if isinstance(speed, bool) or not isinstance(speed, (int, float)):
        raise ValueError("max_speed: must be a number")
    try:
        speed = float(speed)
    except OverflowError:
        raise ValueError("max_speed: must be a finite number") from None
    if not math.isfinite(speed):
        raise ValueError("max_speed: must be a finite number")
    if speed <= 0:
        raise ValueError("max_speed: must be greater than zero")
    return speed


def parse_fuel_type(body: Dict[str, Any]) -> str:
    fuel_type = body.get("fuel_type")
    if not isinstance(fuel_type, str) or fuel_type == "":
        raise ValueError("fuel_type: must be a non-empty string")
    return fuel_type
