"""Per-invocation execution context."""

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Optional

import httpx

from .config import HttpApiConfig
from .descriptors import ApiActionDescriptor
from .models import HttpApiRequest

if TYPE_CHECKING:
    from .interfaces import HttpClientHandle


@dataclass
class ApiActionContext:
    """State threaded through every stage of one invocation.

    A context belongs to exactly one invocation and is discarded when it
    completes.

    Attributes:
        config: Client configuration.
        action: The invocation's own (cloned) action descriptor.
        request: The outgoing request, built up by hooks.
        response: The received response; None until the send completes.
        client_context: Transport handle acquired for this invocation.
        tags: Scratch values filters keep between their callbacks.
    """
    config: HttpApiConfig
    action: ApiActionDescriptor
    request: HttpApiRequest = field(default_factory=HttpApiRequest)
    response: Optional[httpx.Response] = None
    client_context: Optional["HttpClientHandle"] = None
    tags: dict[str, Any] = field(default_factory=dict)
