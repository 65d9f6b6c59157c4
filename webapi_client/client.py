"""Client facade invoking action descriptors."""

import dataclasses
from typing import Any, Optional

from .config import HttpApiConfig
from .contexts import ApiActionContext
from .descriptors import ApiActionDescriptor
from .engine import ApiActionExecutor
from .interfaces import HttpClientContextProvider
from .models import HttpApiRequest


class HttpApiClient:
    """Async client executing API actions.

    Action descriptors are shared templates; every ``invoke`` runs on its
    own clone, so one descriptor can be invoked concurrently from any number
    of tasks.

    Example:
        >>> async with HttpApiClient(http_host="https://api.example.com") as client:
        ...     user = await client.invoke(get_user, 42)
    """

    def __init__(
        self,
        config: Optional[HttpApiConfig] = None,
        *,
        http_host: Optional[str] = None,
        timeout: Optional[float] = None,
        headers: Optional[dict[str, str]] = None,
        provider: Optional[HttpClientContextProvider] = None,
    ):
        """Create a new client.

        Args:
            config: Complete configuration. Keyword arguments override its fields.
            http_host: Base URL for actions without an ``HttpHost`` hook.
            timeout: Request timeout in seconds.
            headers: Headers sent with every request.
            provider: Transport context provider.
        """
        if config is None:
            config = HttpApiConfig()
        self.config = dataclasses.replace(
            config, default_headers=dict(config.default_headers)
        )
        if http_host is not None:
            self.config.http_host = http_host
        if timeout is not None:
            self.config.timeout = timeout
        if headers:
            self.config.default_headers.update(headers)
        if provider is not None:
            self.config.provider = provider
        self._executor = ApiActionExecutor()

    async def __aenter__(self):
        return self

    async def __aexit__(self, *args):
        await self.close()

    async def close(self):
        """Close the transport provider if it holds resources."""
        aclose = getattr(self.config.provider, "aclose", None)
        if aclose is not None:
            await aclose()

    def create_context(self, action: ApiActionDescriptor) -> ApiActionContext:
        """Build the execution context for an already bound action."""
        request = HttpApiRequest(
            host=self.config.http_host,
            headers=dict(self.config.default_headers),
            timeout=self.config.timeout,
        )
        return ApiActionContext(config=self.config, action=action, request=request)

    async def invoke(self, action: ApiActionDescriptor, *args: Any, **kwargs: Any) -> Any:
        """Invoke an action with the given arguments.

        Args:
            action: The action template.
            *args: Positional arguments, bound in parameter order.
            **kwargs: Keyword arguments, bound by parameter name.

        Returns:
            The result, of the action's declared return type.

        Raises:
            TypeError: If the arguments do not match the action's parameters.
            ApiInvocationError: If any stage of the invocation fails.
        """
        context = self.create_context(action.bind(*args, **kwargs))
        return await self._executor.execute(context)
