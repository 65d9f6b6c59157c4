"""Process-wide client configuration."""

from dataclasses import dataclass, field
from typing import Optional

from .interfaces import HttpClientContextProvider
from .transport import DefaultHttpClientContextProvider


@dataclass
class HttpApiConfig:
    """Settings shared by every invocation of a client.

    Attributes:
        http_host: Base URL requests are sent to unless an ``HttpHost``
                   hook or an absolute path overrides it.
        timeout: Request timeout in seconds.
        default_headers: Headers set on every request before any hook runs.
        provider: Hands out the transport handle used by each invocation.
    """
    http_host: Optional[str] = None
    timeout: float = 30.0
    default_headers: dict[str, str] = field(default_factory=dict)
    provider: HttpClientContextProvider = field(
        default_factory=DefaultHttpClientContextProvider
    )
