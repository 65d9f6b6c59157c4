"""Transport handles and the providers that hand them out."""

import logging
from typing import TYPE_CHECKING, Optional

import httpx

from .errors import ConnectionError
from .models import HttpApiRequest

if TYPE_CHECKING:
    from .contexts import ApiActionContext

logger = logging.getLogger(__name__)


class HttpClientContext:
    """Transport handle wrapping an ``httpx.AsyncClient``.

    Args:
        client: The client requests are sent through.
        owns_client: Whether disposing the handle closes the client.
    """

    def __init__(self, client: httpx.AsyncClient, *, owns_client: bool = True):
        self.client = client
        self.owns_client = owns_client

    async def send(self, request: HttpApiRequest) -> httpx.Response:
        """Send the request and return the response.

        Raises:
            ConnectionError: If unable to connect or the request timed out.
        """
        kwargs = {}
        if request.timeout is not None:
            kwargs["timeout"] = request.timeout
        http_request = self.client.build_request(
            request.method,
            request.build_url(),
            params=request.query or None,
            headers=request.headers,
            content=request.content,
            json=request.json,
            data=request.form,
            **kwargs,
        )
        try:
            return await self.client.send(http_request)
        except httpx.ConnectError as e:
            raise ConnectionError(str(e)) from e
        except httpx.TimeoutException as e:
            raise ConnectionError(f"Request timed out: {e}") from e

    async def aclose(self):
        await self.client.aclose()


class DefaultHttpClientContextProvider:
    """Creates a new ``httpx.AsyncClient`` per invocation and closes it afterwards.

    Args:
        transport: Optional httpx transport, e.g. ``httpx.MockTransport``.
    """

    def __init__(self, *, transport: Optional[httpx.AsyncBaseTransport] = None):
        self._transport = transport

    async def create_context(self, context: "ApiActionContext") -> HttpClientContext:
        client = httpx.AsyncClient(
            timeout=context.config.timeout, transport=self._transport
        )
        return HttpClientContext(client, owns_client=True)

    async def dispose_context(self, handle: HttpClientContext) -> None:
        if handle.owns_client:
            await handle.aclose()


class SharedHttpClientContextProvider:
    """Hands every invocation the same pooled ``httpx.AsyncClient``.

    The client lives until ``aclose()`` is called; disposing a handle leaves
    it open. httpx pools connections and is safe to share between tasks.

    Example:
        >>> provider = SharedHttpClientContextProvider(timeout=10.0)
        >>> async with HttpApiClient(provider=provider) as client:
        ...     await client.invoke(get_user, 42)
    """

    def __init__(
        self,
        *,
        timeout: float = 30.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
        limits: Optional[httpx.Limits] = None,
    ):
        kwargs = {}
        if limits is not None:
            kwargs["limits"] = limits
        self._client = httpx.AsyncClient(timeout=timeout, transport=transport, **kwargs)

    async def create_context(self, context: "ApiActionContext") -> HttpClientContext:
        return HttpClientContext(self._client, owns_client=False)

    async def dispose_context(self, handle: HttpClientContext) -> None:
        if handle.owns_client:
            await handle.aclose()

    async def aclose(self):
        """Close the shared client."""
        logger.debug("Closing shared HTTP client")
        await self._client.aclose()
