"""Post feed API client.

A thin wrapper around the three routes of the feed service, built on
the ``requests`` library:

* :meth:`FeedClient.list_posts` – every post, oldest first.
* :meth:`FeedClient.get_post` – one post by identifier, or ``None``.
* :meth:`FeedClient.create_post` – publish a post.

Posts are exchanged as plain dictionaries in the service's JSON wire
format.  Failed requests raise :class:`FeedClientError` carrying the
HTTP status (when there is one) and the server's ``detail`` message.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional
from uuid import UUID

import requests


logger = logging.getLogger(__name__)


class FeedClientError(Exception):
    """Raised when a request to the feed service fails."""

    def __init__(self, message: str, status_code: Optional[int] = None) -> None:
        super().__init__(message)
        self.message = message
        self.status_code = status_code


class FeedClient:
    """Client for the post feed service."""

    def __init__(
        self,
        base_url: str,
        *,
        session: Optional[requests.Session] = None,
        timeout: float = 15,
    ) -> None:
        """Initialise the client.

        Args:
            base_url: Base URL of the service, e.g. ``http://localhost:3000``.
            session: Optional requests session.  If not supplied a
                session will be created automatically.
            timeout: Timeout in seconds applied to every request.
        """
        self.base_url = base_url.rstrip("/")
        self.session = session or requests.Session()
        self.timeout = timeout

    def _request(self, method: str, path: str, *, json_body: Any | None = None) -> requests.Response:
        url = f"{self.base_url}{path}"
        try:
            logger.debug("Sending %s request to %s", method, url)
            response = self.session.request(
                method=method,
                url=url,
                json=json_body,
                timeout=self.timeout,
            )
        except requests.RequestException as exc:
            logger.error("Feed request failed: %s", exc)
            raise FeedClientError(str(exc)) from exc
        return response

    @staticmethod
    def _raise_for_status(response: requests.Response) -> None:
        if response.ok:
            return
        message = ""
        try:
            err_json = response.json()
            if isinstance(err_json, dict):
                message = err_json.get("detail") or str(err_json)
        except ValueError:
            message = response.text
        if not message:
            message = response.reason or f"HTTP {response.status_code}"
        logger.error("Feed request failed (%s): %s", response.status_code, message)
        raise FeedClientError(message, status_code=response.status_code)

    def list_posts(self) -> List[Dict[str, Any]]:
        """Return all posts in the feed."""
        response = self._request("GET", "/feed")
        self._raise_for_status(response)
        return response.json()

    def get_post(self, post_id: UUID | str) -> Optional[Dict[str, Any]]:
        """Return the post with ``post_id``, or ``None`` when it does not exist."""
        response = self._request("GET", f"/post/{post_id}")
        if response.status_code == 404:
            return None
        self._raise_for_status(response)
        return response.json()

    def create_post(self, payload: Dict[str, Any]) -> Dict[str, Any]:
        """Publish ``payload`` and return the body echoed by the service.

        The payload must contain every field of a post, including its
        ``id`` and ``created_at``; the service stores them as given.
        """
        response = self._request("POST", "/post", json_body=payload)
        self._raise_for_status(response)
        return response.json()
