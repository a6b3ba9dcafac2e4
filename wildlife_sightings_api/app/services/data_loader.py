"""
Loader for the sightings data file.

There is no cache: every call reads and parses the file again, so the
API always reflects the file's current contents.  The blocking read
runs in a worker thread to keep the event loop free for other
requests.  Failures are raised as the ``SightingsDataError``
subclasses from ``core.errors``.
"""

from __future__ import annotations

import asyncio
import json
import logging
from pathlib import Path
from typing import Any, List, Optional, Union

from pydantic import ValidationError

from wildlife_sightings_api.app.core.config import settings
from wildlife_sightings_api.app.core.errors import (
    InvalidSightingsSchemaError,
    MalformedSightingsError,
    SightingsDataError,
    SightingsLoadError,
    SightingsNotFoundError,
)
from wildlife_sightings_api.app.schemas.sighting import SightingRecord


logger = logging.getLogger(__name__)


def parse_sightings(payload: Any) -> List[SightingRecord]:
    """Validate decoded JSON and return its ``sightings`` as records.

    Raises ``InvalidSightingsSchemaError`` when the payload is not an
    object with a ``sightings`` list, or when one of the entries does
    not validate as a ``SightingRecord``.
    """
    if not isinstance(payload, dict) or not isinstance(payload.get("sightings"), list):
        raise InvalidSightingsSchemaError("Invalid data structure: sightings array not found")

    records: List[SightingRecord] = []
    for index, item in enumerate(payload["sightings"]):
        try:
            records.append(SightingRecord.model_validate(item))
        except ValidationError as exc:
            first = exc.errors()[0]
            field = ".".join(str(part) for part in first.get("loc", ())) or "record"
            raise InvalidSightingsSchemaError(
                f"Invalid sighting record at index {index}: {field} - {first.get('msg')}"
            ) from exc
    return records


async def load_sightings(path: Optional[Union[str, Path]] = None) -> List[SightingRecord]:
    """Read the data file and return every sighting it contains.

    Parameters
    ----------
    path : str or Path, optional
        File to read.  Defaults to ``settings.data_file``, looked up at
        call time so tests can point it elsewhere.
    """
    file_path = Path(path or settings.data_file)
    try:
        raw = await asyncio.to_thread(file_path.read_text, encoding="utf-8")
        records = parse_sightings(json.loads(raw))
    except SightingsDataError as exc:
        logger.error("Error loading sightings data: %s", exc.message)
        raise
    except FileNotFoundError as exc:
        logger.error("Error loading sightings data: %s", exc)
        raise SightingsNotFoundError(
            "Sightings data file not found. Please ensure sightings.json exists in the data folder."
        ) from exc
    except json.JSONDecodeError as exc:
        logger.error("Error loading sightings data: %s", exc)
        raise MalformedSightingsError("Invalid JSON format in sightings.json file.") from exc
    except Exception as exc:
        logger.error("Error loading sightings data: %s", exc)
        raise SightingsLoadError(f"Failed to load sightings data: {exc}") from exc

    logger.info("Successfully loaded %d sightings", len(records))
    return records
