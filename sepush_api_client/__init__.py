"""
Python client for the SePush (EskomSePush) load shedding API.

This package provides a `SePushClient` class that sends your API token
with every request, maps failed responses to typed exceptions and
returns the JSON payloads as objects whose fields can be read as
attributes.

Examples
--------

```python
import sepush_api_client

client = sepush_api_client.client("YOUR-API-TOKEN")

status = client.status()
areas = client.areas_nearby(-33.9, 18.4).areas
info = client.area_information(areas[0].id)
```

Every failure raises a subclass of `SePushError`:

```python
from sepush_api_client import RateLimitError

try:
    client.topics_nearby(-33.9, 18.4)
except RateLimitError as exc:
    print(exc)  # You have exceeded your API quota/allowance.
```

See Also
--------
The SePush developer documentation describes how to obtain a token
and the shape of each endpoint's response.
"""

from typing import Any, Optional

from .client import SePushClient
from .config import ClientConfig, load_token
from .exceptions import (
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
)
from .response import SePushObject, handle_response


def client(token: Optional[str], **kwargs: Any) -> SePushClient:
    """Return a new :class:`SePushClient` for ``token``."""
    return SePushClient(token, **kwargs)


__all__ = [
    "client",
    "SePushClient",
    "ClientConfig",
    "load_token",
    "SePushObject",
    "handle_response",
    "ErrorKind",
    "ERROR_MESSAGES",
    "SePushError",
    "InvalidTokenError",
    "BadRequestError",
    "AuthenticationError",
    "NotFoundError",
    "RequestTimeoutError",
    "RateLimitError",
    "ServerError",
    "UnexpectedError",
]
