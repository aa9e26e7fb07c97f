"""
Custom exception types for the SePush API client.

Every failure raised by the client derives from :class:`SePushError`.
Each error carries an :class:`ErrorKind` and its message is looked up
from :data:`ERROR_MESSAGES`, so ``str(error)`` is always the fixed,
human readable message for that kind.  The text returned by the API
(if any) is kept separately on :attr:`SePushError.detail`.
"""

from __future__ import annotations

from enum import Enum
from typing import Dict, Optional, Type


class ErrorKind(Enum):
    """The categories of failure the client can report."""

    INVALID_TOKEN = "invalid_token"
    BAD_REQUEST = "bad_request"
    AUTHENTICATION = "authentication"
    NOT_FOUND = "not_found"
    REQUEST_TIMEOUT = "request_timeout"
    RATE_LIMIT = "rate_limit"
    SERVER = "server"
    UNEXPECTED = "unexpected"


ERROR_MESSAGES: Dict[ErrorKind, str] = {
    ErrorKind.INVALID_TOKEN: "The Auth Token you provided was invalid.",
    ErrorKind.BAD_REQUEST: "The request you sent was invalid.",
    ErrorKind.AUTHENTICATION: "Authentication Error, check your credentials.",
    ErrorKind.NOT_FOUND: "The resource you requested was not found.",
    ErrorKind.REQUEST_TIMEOUT: "The request you sent timed out.",
    ErrorKind.RATE_LIMIT: "You have exceeded your API quota/allowance.",
    ErrorKind.SERVER: "The SePush API returned a server error.",
    ErrorKind.UNEXPECTED: "Something went wrong while parsing your response data.",
}


class SePushError(Exception):
    """Base exception for all SePush client errors.

    Parameters
    ----------
    kind : ErrorKind, optional
        The category of the failure.  Subclasses fix this value, so it
        only needs to be given when raising the base class directly.
    status_code : int, optional
        The HTTP status returned by the API, when there was a response.
    detail : str, optional
        The error text returned by the API or the transport.
    """

    kind: ErrorKind = ErrorKind.UNEXPECTED

    def __init__(
        self,
        kind: Optional[ErrorKind] = None,
        *,
        status_code: Optional[int] = None,
        detail: Optional[str] = None,
    ) -> None:
        if kind is not None:
            self.kind = kind
        self.status_code = status_code
        self.detail = detail
        super().__init__(self.message)

    @property
    def message(self) -> str:
        return ERROR_MESSAGES[self.kind]

    def __str__(self) -> str:
        return self.message


class InvalidTokenError(SePushError):
    """Raised when the client is created without an auth token."""

    kind = ErrorKind.INVALID_TOKEN


class BadRequestError(SePushError):
    """Raised on HTTP 400 or when a required argument is missing."""

    kind = ErrorKind.BAD_REQUEST


class AuthenticationError(SePushError):
    """Raised on HTTP 403; the token was rejected."""

    kind = ErrorKind.AUTHENTICATION


class NotFoundError(SePushError):
    """Raised on HTTP 404."""

    kind = ErrorKind.NOT_FOUND


class RequestTimeoutError(SePushError):
    """Raised on HTTP 408."""

    kind = ErrorKind.REQUEST_TIMEOUT


class RateLimitError(SePushError):
    """Raised on HTTP 429 once the API allowance is used up."""

    kind = ErrorKind.RATE_LIMIT


class ServerError(SePushError):
    """Raised on any HTTP 5xx response."""

    kind = ErrorKind.SERVER


class UnexpectedError(SePushError):
    """Raised for unknown status codes, unreadable bodies and transport failures."""

    kind = ErrorKind.UNEXPECTED


_STATUS_ERRORS: Dict[int, Type[SePushError]] = {
    400: BadRequestError,
    403: AuthenticationError,
    404: NotFoundError,
    408: RequestTimeoutError,
    429: RateLimitError,
}


def error_for_status(status_code: Optional[int], detail: Optional[str] = None) -> SePushError:
    """Return the error matching an HTTP status code.

    Codes 500-599 map to :class:`ServerError`; any code not in the
    table, including 200, maps to :class:`UnexpectedError`.
    """
    if status_code is not None and 500 <= status_code <= 599:
        error_cls: Type[SePushError] = ServerError
    else:
        error_cls = _STATUS_ERRORS.get(status_code, UnexpectedError)  # type: ignore[arg-type]
    return error_cls(status_code=status_code, detail=detail)
