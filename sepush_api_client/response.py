"""
Interpretation of SePush API responses.

:func:`handle_response` is the single place where an HTTP response is
turned into either a parsed value or one of the errors defined in
:mod:`sepush_api_client.exceptions`.

The API reports failures both through the status code and through an
``"error"`` field in the JSON body.  Either one marks the response as
failed.  The error kind is chosen from the status code, so a 200
response carrying an ``"error"`` field raises
:class:`~sepush_api_client.exceptions.UnexpectedError`.
"""

from __future__ import annotations

import logging
from types import SimpleNamespace
from typing import Any, Dict, Iterator, Optional

import requests

from .exceptions import UnexpectedError, error_for_status

logger = logging.getLogger(__name__)


class SePushObject(SimpleNamespace):
    """A JSON object whose fields can be read as attributes or keys.

    >>> allowance = SePushObject(count=39, limit=50)
    >>> allowance.count, allowance["limit"]
    (39, 50)

    Field names that are not valid identifiers are still reachable
    with ``obj["some-key"]``.
    """

    def __getitem__(self, key: str) -> Any:
        try:
            return self.__dict__[key]
        except KeyError:
            raise KeyError(key) from None

    def __contains__(self, key: object) -> bool:
        return key in self.__dict__

    def __iter__(self) -> Iterator[str]:
        return iter(self.__dict__)

    def __len__(self) -> int:
        return len(self.__dict__)

    def get(self, key: str, default: Any = None) -> Any:
        return self.__dict__.get(key, default)

    def to_dict(self) -> Dict[str, Any]:
        """Return the object, and everything nested in it, as plain dicts and lists."""
        return {key: _unwrap(value) for key, value in self.__dict__.items()}


def _unwrap(value: Any) -> Any:
    if isinstance(value, SePushObject):
        return value.to_dict()
    if isinstance(value, list):
        return [_unwrap(item) for item in value]
    return value


def _object_hook(pairs: Dict[str, Any]) -> SePushObject:
    obj = SePushObject()
    obj.__dict__.update(pairs)
    return obj


def _decode(response: requests.Response) -> Any:
    """Decode the body, returning ``None`` when it is empty or not JSON."""
    if not response.content:
        return None
    try:
        return response.json(object_hook=_object_hook)
    except ValueError:
        return None


def handle_response(response: Optional[requests.Response]) -> Any:
    """Return the parsed body of a successful response or raise.

    Parameters
    ----------
    response : requests.Response or None
        The response returned by the transport.

    Returns
    -------
    SePushObject or list
        The decoded JSON body.  Objects are returned as
        :class:`SePushObject` instances at every level of nesting.

    Raises
    ------
    SePushError
        The subclass matching the status code when the status is not
        200 or the body holds an ``"error"`` field, and
        :class:`UnexpectedError` when there is no response or a 200
        body cannot be decoded.
    """
    if response is None:
        logger.warning("No response received from the SePush API")
        raise UnexpectedError()

    payload = _decode(response)
    upstream_error = None
    if isinstance(payload, SePushObject) and "error" in payload:
        upstream_error = payload["error"]

    if response.status_code != 200 or upstream_error is not None:
        detail = str(upstream_error) if upstream_error is not None else (response.text or None)
        error = error_for_status(response.status_code, detail)
        logger.warning(
            "SePush API request to %s failed with status %s: %s",
            response.url,
            response.status_code,
            detail,
        )
        raise error

    if payload is None:
        logger.warning("Could not decode SePush API response body from %s", response.url)
        raise UnexpectedError(status_code=response.status_code, detail=response.text or None)
    return payload
