"""
Loading of the initial vehicle set.

The store starts empty unless ``VEHICLES_FILE`` points at a JSON file
containing an array of vehicle objects in the same shape the API
accepts.  Every entry must carry an explicit ``id``; entries are
validated with ``VehicleCreate`` and duplicate ids abort loading.
"""

import json
import logging
from pathlib import Path
from typing import Dict, Union

from pydantic import ValidationError

from .exceptions import DuplicateIDError
from ..schemas.vehicle import VehicleCreate, VehicleRead


logger = logging.getLogger(__name__)


def load_vehicles(path: Union[str, Path]) -> Dict[int, VehicleRead]:
    """Read and validate a seed file.

    Raises ``ValueError`` when the file is not a JSON array, an entry is
    invalid or lacks an ``id`` and ``DuplicateIDError`` when two entries
    share an id.  ``OSError`` from reading the file propagates as is.
    """
    file_path = Path(path).resolve()
    with open(file_path, "r", encoding="utf-8") as f:
        raw = json.load(f)
    if not isinstance(raw, list):
        raise ValueError(f"{file_path}: expected a JSON array of vehicles")

    vehicles: Dict[int, VehicleRead] = {}
    for index, item in enumerate(raw):
        try:
            data = VehicleCreate.model_validate(item)
        except ValidationError as e:
            raise ValueError(f"{file_path}: invalid vehicle at index {index}: {e}") from e
        if data.id is None:
            raise ValueError(f"{file_path}: vehicle at index {index} has no id")
        if data.id in vehicles:
            raise DuplicateIDError(data.id)
        vehicles[data.id] = VehicleRead(**data.model_dump())

    logger.info("Loaded %d vehicles from %s", len(vehicles), file_path)
    return vehicles
