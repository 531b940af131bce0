"""Jokebook API client.

This module defines a small client wrapper around the Jokebook REST
API.  It uses the ``requests`` library internally to make HTTP calls
and exposes one high‑level method per operation:

* :meth:`JokebookAPI.list_jokes` – fetch a fresh batch of jokes.
* :meth:`JokebookAPI.list_persons` – fetch every stored person.
* :meth:`JokebookAPI.add_person` – add a person record.

Every method returns a tuple ``(data, error)``.  On success ``error``
is ``None``; on failure ``data`` is empty and ``error`` is a dictionary
with ``status_code`` and ``message`` keys, so callers never have to
catch transport exceptions themselves.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional, Tuple

import requests


logger = logging.getLogger(__name__)

ApiError = Dict[str, Any]


class JokebookAPI:
    """Client for interacting with the Jokebook API."""

    def __init__(
        self,
        *,
        base_url: str,
        session: Optional[requests.Session] = None,
        timeout: Optional[float] = 15,
    ) -> None:
        """Initialise the API client.

        Args:
            base_url: Base URL of the service, e.g. ``http://localhost:3000``.
            session: Optional requests session.  If not supplied a
                session will be created automatically.
            timeout: Seconds to wait for each response; ``None`` waits
                forever.
        """
        self.base_url = base_url.rstrip("/")
        self.session = session or requests.Session()
        self.timeout = timeout

    # ------------------------------------------------------------------
    # Low level HTTP helpers
    # ------------------------------------------------------------------
    def _request(
        self, method: str, path: str, *, json_body: Any | None = None
    ) -> Tuple[Optional[Any], Optional[ApiError]]:
        """Perform an HTTP request to the API.

        Args:
            method: HTTP method (``GET`` or ``POST``).
            path: Path relative to :attr:`base_url` (e.g. ``/api/jokes``).
            json_body: JSON body to send with the request.
        Returns:
            A tuple ``(data, error)``.  ``data`` contains the parsed JSON
            response on success.  On failure ``error`` describes the
            issue; the message is taken from the ``error`` key of the
            response body when the server provided one.
        """
        url = f"{self.base_url}{path}"
        try:
            logger.debug("Sending %s request to %s", method, url)
            response = self.session.request(
                method=method,
                url=url,
                json=json_body,
                timeout=self.timeout,
            )
            response.raise_for_status()
            if response.content:
                return response.json(), None
            return None, None
        except requests.HTTPError as exc:
            status = exc.response.status_code if exc.response is not None else None
            message = ""
            if exc.response is not None:
                try:
                    message = exc.response.json().get("error") or ""
                except (ValueError, AttributeError):
                    message = exc.response.text
            if not message:
                message = str(exc)
            logger.error("API request failed (%s): %s", status, message)
            return None, {"status_code": status, "message": message}
        except requests.RequestException as exc:
            logger.error("API request failed: %s", exc)
            return None, {"status_code": None, "message": str(exc)}
        except ValueError as exc:
            logger.error("API returned invalid JSON: %s", exc)
            return None, {"status_code": None, "message": "Invalid JSON response"}

    def _get_list(self, path: str) -> Tuple[List[Dict[str, Any]], Optional[ApiError]]:
        data, error = self._request("GET", path)
        if error:
            return [], error
        if not isinstance(data, list):
            logger.error("Expected a list from %s, got %r", path, type(data).__name__)
            return [], {"status_code": None, "message": "Unexpected response"}
        return data, None

    # ------------------------------------------------------------------
    # Operations
    # ------------------------------------------------------------------
    def list_jokes(self) -> Tuple[List[Dict[str, Any]], Optional[ApiError]]:
        """Retrieve a fresh batch of ``{id, title, content}`` jokes."""
        return self._get_list("/api/jokes")

    def list_persons(self) -> Tuple[List[Dict[str, Any]], Optional[ApiError]]:
        """Retrieve every stored person in insertion order."""
        return self._get_list("/api/persons")

    def add_person(self, payload: Dict[str, Any]) -> Tuple[Optional[Dict[str, Any]], Optional[ApiError]]:
        """Add a person.

        Args:
            payload: ``{"name", "marks", "age", "dob"}``.
        Returns:
            A tuple ``(result, error)``; ``result`` is the server's
            ``{message, person, id}`` body.
        """
        return self._request("POST", "/api/persons", json_body=payload)
