from __future__ import annotations

import json
from typing import Any, Callable
from unittest.mock import patch

import pytest
import requests

from sepush_api_client import SePushClient

TOKEN = "valid_token"


def build_response(status: int, body: Any = None) -> requests.Response:
    """Create a ``requests.Response`` with the given status and body."""
    response = requests.Response()
    response.status_code = status
    response.url = "https://developer.sepush.co.za/business/2.0/test"
    if body is None:
        response._content = b""
    elif isinstance(body, (bytes, str)):
        response._content = body.encode() if isinstance(body, str) else body
    else:
        response._content = json.dumps(body).encode()
    response.headers["Content-Type"] = "application/json"
    return response


@pytest.fixture
def make_response() -> Callable[..., requests.Response]:
    return build_response


@pytest.fixture
def client() -> SePushClient:
    with SePushClient(TOKEN) as sepush:
        yield sepush


@pytest.fixture
def mock_get(client: SePushClient):
    """Patch the client's session so no request leaves the process."""
    with patch.object(client.session, "get") as mocked:
        mocked.return_value = build_response(200, {})
        yield mocked
