import pytest

from sepush_api_client.exceptions import (
    ERROR_MESSAGES,
    AuthenticationError,
    BadRequestError,
    ErrorKind,
    InvalidTokenError,
    NotFoundError,
    RateLimitError,
    RequestTimeoutError,
    SePushError,
    ServerError,
    UnexpectedError,
    error_for_status,
)


class TestErrorMessages:
    @pytest.mark.parametrize(
        "error_cls, message",
        [
            (InvalidTokenError, "The Auth Token you provided was invalid."),
            (BadRequestError, "The request you sent was invalid."),
            (AuthenticationError, "Authentication Error, check your credentials."),
            (NotFoundError, "The resource you requested was not found."),
            (RequestTimeoutError, "The request you sent timed out."),
            (RateLimitError, "You have exceeded your API quota/allowance."),
            (ServerError, "The SePush API returned a server error."),
            (UnexpectedError, "Something went wrong while parsing your response data."),
        ],
    )
    def test_fixed_message(self, error_cls, message):
        error = error_cls(detail="upstream text")
        assert str(error) == message
        assert error.message == message
        assert error.detail == "upstream text"
        assert isinstance(error, SePushError)

    def test_every_kind_has_a_message(self):
        assert set(ERROR_MESSAGES) == set(ErrorKind)

    def test_base_error_takes_kind(self):
        error = SePushError(ErrorKind.RATE_LIMIT, status_code=429)
        assert error.kind is ErrorKind.RATE_LIMIT
        assert error.status_code == 429
        assert str(error) == ERROR_MESSAGES[ErrorKind.RATE_LIMIT]

    def test_can_be_raised_and_caught_by_root(self):
        with pytest.raises(SePushError, match="timed out"):
            raise RequestTimeoutError()


class TestErrorForStatus:
    @pytest.mark.parametrize(
        "status, error_cls",
        [
            (400, BadRequestError),
            (403, AuthenticationError),
            (404, NotFoundError),
            (408, RequestTimeoutError),
            (429, RateLimitError),
            (500, ServerError),
            (503, ServerError),
            (599, ServerError),
        ],
    )
    def test_known_status(self, status, error_cls):
        error = error_for_status(status, "boom")
        assert type(error) is error_cls
        assert error.status_code == status
        assert error.detail == "boom"

    @pytest.mark.parametrize("status", [200, 401, 418, 600, 999, None])
    def test_unknown_status_is_unexpected(self, status):
        assert type(error_for_status(status)) is UnexpectedError
