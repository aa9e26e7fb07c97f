"""
Connection settings for the SePush API client.

:class:`ClientConfig` is an immutable bundle of the auth token, the API
host and the request timeout.  A client builds one at construction and
every request reads its URL, headers and timeout from it.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Optional

from .exceptions import InvalidTokenError

DEFAULT_BASE_URL = "https://developer.sepush.co.za"
DEFAULT_TIMEOUT = 30.0

# Checked in order by ``load_token``
TOKEN_ENV_VARS = ("SEPUSH_TOKEN", "ESKOMSEPUSH_TOKEN")


@dataclass(frozen=True)
class ClientConfig:
    """Settings shared by every request a client makes."""

    token: str
    base_url: str = DEFAULT_BASE_URL
    timeout: Optional[float] = DEFAULT_TIMEOUT

    def url(self, path: str) -> str:
        """Join ``path`` to the base URL."""
        if path.startswith("http://") or path.startswith("https://"):
            return path
        return f"{self.base_url.rstrip('/')}/{path.lstrip('/')}"

    @property
    def headers(self) -> dict:
        return {"token": self.token}


def load_token(token: Optional[str] = None) -> str:
    """Return ``token`` or the first token found in the environment.

    Raises
    ------
    InvalidTokenError
        If no token was given and none of :data:`TOKEN_ENV_VARS` is set.
    """
    if token:
        return token
    for name in TOKEN_ENV_VARS:
        value = (os.environ.get(name) or "").strip()
        if value:
            return value
    raise InvalidTokenError(detail=f"Set one of {', '.join(TOKEN_ENV_VARS)}")
