"""Brainstormer API client.

A thin wrapper around the HTTP surface of the Brainstormer API built on
the ``requests`` library.  It exposes one method per operation:

* :meth:`list_sessions` – summaries of all sessions.
* :meth:`get_session` – one session including its ideas.
* :meth:`create_session` – start a new session.
* :meth:`list_ideas` – the ideas of a session.
* :meth:`create_idea` – add an idea to a session.

Every method returns a ``(data, error)`` tuple instead of raising.  On
success ``error`` is ``None``; on failure ``data`` is ``None`` and
``error`` is a dictionary with the keys ``status_code`` and
``message``.  For a 400 response ``message`` is the mapping of field
names to reasons returned by the server.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Optional, Tuple

import requests


logger = logging.getLogger(__name__)

Result = Tuple[Optional[Any], Optional[Dict[str, Any]]]


class BrainstormerAPI:
    """Client for interacting with the Brainstormer API."""

    def __init__(
        self,
        *,
        base_url: str,
        prefix: str = "/api/v1",
        timeout: float = 15,
        session: Optional[requests.Session] = None,
    ) -> None:
        """Initialise the API client.

        Args:
            base_url: Base URL of the server, e.g. ``http://localhost:8000``.
            prefix: Path under which the versioned API is mounted.
            timeout: Seconds to wait for each response.
            session: Optional requests session.  If not supplied a
                session will be created automatically.
        """
        self.base_url = base_url.rstrip("/") + prefix.rstrip("/")
        self.timeout = timeout
        self.session = session or requests.Session()

    # ------------------------------------------------------------------
    # Low level HTTP helper
    # ------------------------------------------------------------------
    def _request(self, method: str, path: str, *, json_body: Any | None = None) -> Result:
        """Perform an HTTP request and parse the JSON answer.

        Args:
            method: HTTP method (``GET`` or ``POST``).
            path: Path relative to the API prefix (e.g. ``/sessions/list``).
            json_body: JSON body to send with the request.
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
            message: Any = ""
            if exc.response is not None:
                try:
                    message = exc.response.json()
                except ValueError:
                    message = exc.response.text
            if message in ("", None):
                message = str(exc)
            logger.error("API request failed (%s): %s", status, message)
            return None, {"status_code": status, "message": message}
        except requests.RequestException as exc:
            logger.error("API request failed: %s", exc)
            return None, {"status_code": None, "message": str(exc)}

    # ------------------------------------------------------------------
    # Operations
    # ------------------------------------------------------------------
    def list_sessions(self) -> Result:
        return self._request("GET", "/sessions/list")

    def get_session(self, session_id: int) -> Result:
        return self._request("GET", f"/sessions/{session_id}")

    def create_session(self, session_name: str) -> Result:
        return self._request("POST", "/sessions/create", json_body={"sessionName": session_name})

    def list_ideas(self, session_id: int) -> Result:
        return self._request("GET", f"/ideas/forSession/{session_id}")

    def create_idea(self, session_id: int, name: str, description: Optional[str] = None) -> Result:
        body = {"sessionId": session_id, "name": name, "description": description}
        return self._request("POST", "/ideas/create", json_body=body)
