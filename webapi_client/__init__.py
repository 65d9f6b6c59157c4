"""Web API client - describe HTTP API actions once, invoke them concurrently."""

from .attributes import (
    FormContent,
    Header,
    HttpDelete,
    HttpGet,
    HttpHost,
    HttpMethod,
    HttpPatch,
    HttpPost,
    HttpPut,
    JsonContent,
    PathQuery,
    Timeout,
    Url,
)
from .client import HttpApiClient
from .config import HttpApiConfig
from .contexts import ApiActionContext
from .descriptors import ApiActionDescriptor, ApiParameterDescriptor, ApiReturnDescriptor
from .engine import ApiActionExecutor, cast_result
from .errors import (
    WebApiError,
    ConnectionError,
    HttpError,
    Phase,
    ApiInvocationError,
    TransportAcquireError,
    HookError,
    FilterError,
    SendError,
    ResultError,
    TransportReleaseError,
)
from .filters import ApiActionFilter, TraceFilter
from .models import HttpApiRequest
from .returns import ApiReturn, AutoReturn, JsonReturn, TextReturn
from .transport import (
    DefaultHttpClientContextProvider,
    HttpClientContext,
    SharedHttpClientContextProvider,
)

__version__ = "0.1.0"
__all__ = [
    "HttpApiClient",
    "HttpApiConfig",
    "ApiActionContext",
    "ApiActionDescriptor",
    "ApiParameterDescriptor",
    "ApiReturnDescriptor",
    "ApiActionExecutor",
    "cast_result",
    "HttpApiRequest",
    "WebApiError",
    "ConnectionError",
    "HttpError",
    "Phase",
    "ApiInvocationError",
    "TransportAcquireError",
    "HookError",
    "FilterError",
    "SendError",
    "ResultError",
    "TransportReleaseError",
    "HttpHost",
    "HttpMethod",
    "HttpGet",
    "HttpPost",
    "HttpPut",
    "HttpPatch",
    "HttpDelete",
    "Header",
    "Timeout",
    "PathQuery",
    "Url",
    "JsonContent",
    "FormContent",
    "ApiActionFilter",
    "TraceFilter",
    "ApiReturn",
    "AutoReturn",
    "JsonReturn",
    "TextReturn",
    "DefaultHttpClientContextProvider",
    "SharedHttpClientContextProvider",
    "HttpClientContext",
]
