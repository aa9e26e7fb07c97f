"""
Client implementation for the SePush (EskomSePush) business API.

This module defines the :class:`SePushClient` class which sends
token-authenticated requests to the SePush API and hands every
response to :func:`~sepush_api_client.response.handle_response`.

Usage
-----

.. code-block:: python

    from sepush_api_client import SePushClient

    client = SePushClient("YOUR-API-TOKEN")

    allowance = client.check_allowance()
    print(allowance.allowance.count, "of", allowance.allowance.limit)

    for area in client.areas_search("Stellenbosch").areas:
        print(area.id, area.name)

Each method makes exactly one request.  Nothing is retried; if the API
reports a failure the matching :class:`~sepush_api_client.exceptions.SePushError`
subclass is raised to the caller.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Optional, Union

import requests

from .config import DEFAULT_BASE_URL, DEFAULT_TIMEOUT, ClientConfig, load_token
from .exceptions import BadRequestError, InvalidTokenError, UnexpectedError
from .response import handle_response

logger = logging.getLogger(__name__)

Coordinate = Union[str, float]


class SePushClient:
    """A simple client for the SePush REST API.

    Parameters
    ----------
    token : str
        Your SePush API token.  It is sent in the ``token`` header on
        every request.
    base_url : str, optional
        Override the API host.  Defaults to
        ``https://developer.sepush.co.za``.
    timeout : float, optional
        Timeout in seconds for each request.  Defaults to 30 seconds.
    session : requests.Session, optional
        A session to send requests through.  The client sets its
        ``token`` header.  When omitted a new session is created.

    Raises
    ------
    InvalidTokenError
        If ``token`` is missing or empty.
    UnexpectedError
        If the HTTP session cannot be set up, for example when
        ``session`` has no ``headers`` mapping.
    """

    _API_PREFIX = "/business/2.0"
    _TEST_MODES = ("current", "future")

    def __init__(
        self,
        token: Optional[str],
        *,
        base_url: Optional[str] = None,
        timeout: Optional[float] = DEFAULT_TIMEOUT,
        session: Optional[requests.Session] = None,
    ) -> None:
        if not token:
            raise InvalidTokenError()

        self.config = ClientConfig(
            token=token,
            base_url=base_url or DEFAULT_BASE_URL,
            timeout=timeout,
        )
        try:
            self.session = session if session is not None else requests.Session()
            self.session.headers.update(self.config.headers)
        except (requests.RequestException, AttributeError, TypeError) as exc:
            raise UnexpectedError(detail=f"Failed to set up HTTP session: {exc}") from exc

    @classmethod
    def from_env(cls, **kwargs: Any) -> "SePushClient":
        """Create a client using the token from ``SEPUSH_TOKEN`` or ``ESKOMSEPUSH_TOKEN``."""
        return cls(load_token(), **kwargs)

    @property
    def token(self) -> str:
        return self.config.token

    def close(self) -> None:
        """Close the underlying HTTP session."""
        self.session.close()

    def __enter__(self) -> "SePushClient":
        return self

    def __exit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        self.close()

    # ------------------------------------------------------------------
    # HTTP request helpers
    # ------------------------------------------------------------------
    def _get(self, endpoint: str, params: Optional[Dict[str, Any]] = None) -> Any:
        """Send a GET request to ``endpoint`` and interpret the response.

        Errors raised by ``requests`` itself (connection refused, DNS
        failures, client side timeouts) are re-raised as
        :class:`UnexpectedError`.
        """
        url = self.config.url(f"{self._API_PREFIX}/{endpoint}")
        logger.debug("GET %s params=%s", url, params)
        try:
            response = self.session.get(url, params=params, timeout=self.config.timeout)
        except requests.RequestException as exc:
            logger.warning("Request to %s failed: %s", url, exc)
            raise UnexpectedError(detail=f"Failed to connect to {url}: {exc}") from exc
        return handle_response(response)

    # ------------------------------------------------------------------
    # API operations
    # ------------------------------------------------------------------
    def check_allowance(self) -> Any:
        """Return your API allowance for the current period.

        Returns
        -------
        SePushObject
            For example ``result.allowance.count`` and
            ``result.allowance.limit``.
        """
        return self._get("api_allowance")

    quota = check_allowance

    def status(self) -> Any:
        """Return the current national load shedding status."""
        return self._get("status")

    def areas_search(self, text: Optional[str] = None) -> Any:
        """Search for areas by name.

        Parameters
        ----------
        text : str
            The name, or part of the name, of the area.

        Returns
        -------
        SePushObject
            ``result.areas`` lists the matching areas with their ``id``
            and ``name``.
        """
        if text is None:
            raise BadRequestError(detail="text is required")
        return self._get("areas_search", {"text": text})

    def area_information(
        self,
        area_id: Optional[str] = None,
        test: Optional[str] = "current",
    ) -> Any:
        """Return the events and schedule for a single area.

        Parameters
        ----------
        area_id : str
            The area identifier, as returned by :meth:`areas_search`.
        test : str, optional
            Ask the API for test data.  Valid options are ``"current"``
            and ``"future"``.  Pass ``None`` to leave the ``test``
            parameter off the request.
        """
        if area_id is None:
            raise BadRequestError(detail="area_id is required")
        params: Dict[str, Any] = {"id": area_id}
        if test is not None:
            if test not in self._TEST_MODES:
                raise BadRequestError(
                    detail=f"test must be one of {', '.join(self._TEST_MODES)}, got {test!r}"
                )
            params["test"] = test
        return self._get("area", params)

    def areas_nearby(
        self,
        lat: Optional[Coordinate] = None,
        long: Optional[Coordinate] = None,
    ) -> Any:
        """Return the areas close to a coordinate."""
        if lat is None or long is None:
            raise BadRequestError(detail="lat and long are required")
        return self._get("areas_nearby", {"lat": lat, "long": long})

    def topics_nearby(
        self,
        lat: Optional[Coordinate] = None,
        long: Optional[Coordinate] = None,
    ) -> Any:
        """Return the discussion topics posted close to a coordinate."""
        if lat is None or long is None:
            raise BadRequestError(detail="lat and long are required")
        return self._get("topics_nearby", {"lat": lat, "long": long})
