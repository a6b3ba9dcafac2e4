"""Wildlife Sightings API client.

A small wrapper around the read-only sightings API.  It uses the
``requests`` library internally and exposes one method per route:

* :meth:`list_sightings` – every sighting record.
* :meth:`list_verified` – verified sightings only.
* :meth:`list_species` – distinct species names.
* :meth:`forest_sightings` – forest sightings with their count.
* :meth:`search_eagle` – the first eagle sighting, or a message.
* :meth:`find_moose_index` – position of the first moose sighting.
* :meth:`recent_sightings` – the three most recent sightings.

Every method returns a tuple ``(data, error)``.  On success ``error``
is ``None``; on failure ``data`` is ``None`` (an empty list for the
listing methods) and ``error`` is a dictionary with ``status_code``,
``message`` and, when the server sent one, the ``route`` that failed.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional, Tuple

import requests


logger = logging.getLogger(__name__)

ApiResult = Tuple[Optional[Any], Optional[Dict[str, Any]]]


class WildlifeSightingsClient:
    """HTTP client for the Wildlife Sightings API."""

    API_PREFIX = "/api/sightings"

    def __init__(
        self,
        *,
        base_url: str,
        session: Optional[requests.Session] = None,
        timeout: float = 15,
    ) -> None:
        """Initialise the API client.

        Args:
            base_url: Base URL of the server, e.g. ``http://localhost:3000``.
            session: Optional requests session.  If not supplied a
                session will be created automatically.
            timeout: Seconds to wait for each response.
        """
        self.base_url = base_url.rstrip("/")
        self.session = session or requests.Session()
        self.timeout = timeout

    # ------------------------------------------------------------------
    # Low level HTTP helpers
    # ------------------------------------------------------------------
    def _get(self, path: str) -> ApiResult:
        """Perform a GET request below :attr:`API_PREFIX`.

        Returns:
            A tuple ``(data, error)`` as described in the module docstring.
        """
        url = f"{self.base_url}{self.API_PREFIX}{path}"
        try:
            logger.debug("Sending GET request to %s", url)
            response = self.session.get(url, timeout=self.timeout)
            response.raise_for_status()
            return response.json(), None
        except requests.HTTPError as exc:
            status = exc.response.status_code if exc.response is not None else None
            error: Dict[str, Any] = {"status_code": status, "message": str(exc)}
            if exc.response is not None:
                try:
                    body = exc.response.json()
                except ValueError:
                    body = None
                if isinstance(body, dict):
                    # Loader failures carry ``error``/``route``; unknown routes
                    # and generic failures carry ``message``.
                    error["message"] = body.get("message") or body.get("error") or error["message"]
                    if "route" in body:
                        error["route"] = body["route"]
                elif exc.response.text:
                    error["message"] = exc.response.text
            logger.error("API request failed (%s): %s", status, error["message"])
            return None, error
        except requests.RequestException as exc:
            logger.error("API request failed: %s", exc)
            return None, {"status_code": None, "message": str(exc)}
        except ValueError as exc:
            logger.error("API returned invalid JSON for %s: %s", url, exc)
            return None, {"status_code": None, "message": f"Invalid JSON response: {exc}"}

    # ------------------------------------------------------------------
    # Sighting operations
    # ------------------------------------------------------------------
    def list_sightings(self) -> Tuple[List[Dict[str, Any]], Optional[Dict[str, Any]]]:
        data, error = self._get("")
        return (data if isinstance(data, list) else []), error

    def list_verified(self) -> Tuple[List[Dict[str, Any]], Optional[Dict[str, Any]]]:
        data, error = self._get("/verified")
        return (data if isinstance(data, list) else []), error

    def list_species(self) -> Tuple[List[str], Optional[Dict[str, Any]]]:
        data, error = self._get("/species-list")
        return (data if isinstance(data, list) else []), error

    def forest_sightings(self) -> ApiResult:
        return self._get("/habitat/forest")

    def search_eagle(self) -> ApiResult:
        """Return the first eagle sighting.

        When the server reports no match the data is ``None`` and the
        error is ``None`` too: an empty search is not a failure.
        """
        data, error = self._get("/search/eagle")
        if isinstance(data, dict) and set(data) == {"message"}:
            logger.info("Eagle search: %s", data["message"])
            return None, None
        return data, error

    def find_moose_index(self) -> ApiResult:
        return self._get("/find-index/moose")

    def recent_sightings(self) -> Tuple[List[Dict[str, Any]], Optional[Dict[str, Any]]]:
        data, error = self._get("/recent")
        return (data if isinstance(data, list) else []), error
