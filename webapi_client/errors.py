"""Error types for the web API client."""

from enum import Enum
from typing import Optional


class WebApiError(Exception):
    """Base exception for web API client errors."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class ConnectionError(WebApiError):
    """Raised when unable to connect to the server."""

    def __init__(self, message: str):
        super().__init__(f"Connection error: {message}")

    def is_retryable(self) -> bool:
        return True


class HttpError(WebApiError):
    """Raised for non-success HTTP responses."""

    def __init__(self, status: int, message: str):
        self.status = status
        super().__init__(f"HTTP {status}: {message}")

    def is_retryable(self) -> bool:
        return self.status >= 500


class Phase(str, Enum):
    """Pipeline phase an invocation failed in."""

    ACQUIRE = "acquire"
    ACTION_HOOK = "action_hook"
    PARAMETER_HOOK = "parameter_hook"
    FILTER_BEGIN = "filter_begin"
    SEND = "send"
    FILTER_END = "filter_end"
    RESULT = "result"
    RELEASE = "release"


class ApiInvocationError(WebApiError):
    """Raised when an action invocation fails.

    Attributes:
        phase: The pipeline phase that produced the failure.
        action: Name of the action being executed.
        cause: The exception raised by the failing stage.
    """

    def __init__(self, phase: Phase, action: str, cause: BaseException):
        self.phase = phase
        self.action = action
        self.cause = cause
        super().__init__(f"{action} failed in {phase.value}: {cause}")

    def is_retryable(self) -> bool:
        is_retryable = getattr(self.cause, "is_retryable", None)
        if callable(is_retryable):
            return bool(is_retryable())
        return False


class TransportAcquireError(ApiInvocationError):
    """Raised when no transport handle could be obtained; nothing was sent."""


class HookError(ApiInvocationError):
    """Raised when a pre-request hook fails; the request was never sent."""


class FilterError(ApiInvocationError):
    """Raised when a filter's begin or end callback fails."""


class SendError(ApiInvocationError):
    """Raised when the request was dispatched but no response was obtained."""


class ResultError(ApiInvocationError):
    """Raised when the response could not be turned into the declared type."""


class TransportReleaseError(ApiInvocationError):
    """Raised when disposing the transport handle fails after a successful call."""


_PHASE_ERRORS = {
    Phase.ACQUIRE: TransportAcquireError,
    Phase.ACTION_HOOK: HookError,
    Phase.PARAMETER_HOOK: HookError,
    Phase.FILTER_BEGIN: FilterError,
    Phase.SEND: SendError,
    Phase.FILTER_END: FilterError,
    Phase.RESULT: ResultError,
    Phase.RELEASE: TransportReleaseError,
}


def invocation_error(
    phase: Phase, action: Optional[str], cause: BaseException
) -> ApiInvocationError:
    """Build the error type matching ``phase`` for ``cause``."""
    return _PHASE_ERRORS[phase](phase, action or "<anonymous>", cause)
