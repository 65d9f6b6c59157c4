"""Capabilities the execution engine consumes.

Hooks, filters, result extractors and transport providers are plain objects
satisfying one of these protocols. The engine only ever calls the methods
below; it never inspects how a descriptor was declared.
"""

from typing import TYPE_CHECKING, Any, Optional, Protocol, runtime_checkable

import httpx

if TYPE_CHECKING:
    from .contexts import ApiActionContext
    from .descriptors import ApiParameterDescriptor
    from .models import HttpApiRequest


@runtime_checkable
class ApiActionAttribute(Protocol):
    """Action-level hook, run before the request is sent."""

    async def before_request(self, context: "ApiActionContext") -> None: ...


@runtime_checkable
class ApiParameterAttribute(Protocol):
    """Parameter-level hook, run with the parameter it is declared on."""

    async def before_request(
        self,
        context: "ApiActionContext",
        parameter: Optional["ApiParameterDescriptor"] = None,
    ) -> None: ...


@runtime_checkable
class ApiActionFilterAttribute(Protocol):
    """Wraps the send with begin and end callbacks."""

    async def on_begin_request(self, context: "ApiActionContext") -> None: ...

    async def on_end_request(self, context: "ApiActionContext") -> None: ...


@runtime_checkable
class ApiReturnAttribute(Protocol):
    """Turns the received response into the declared result type."""

    async def get_result(self, context: "ApiActionContext") -> Any: ...


@runtime_checkable
class HttpClientHandle(Protocol):
    """A transport handle able to send one request."""

    async def send(self, request: "HttpApiRequest") -> httpx.Response: ...


@runtime_checkable
class HttpClientContextProvider(Protocol):
    """Hands out and disposes transport handles.

    Implementations must be safe to call from concurrent invocations.
    """

    async def create_context(self, context: "ApiActionContext") -> HttpClientHandle: ...

    async def dispose_context(self, handle: HttpClientHandle) -> None: ...
