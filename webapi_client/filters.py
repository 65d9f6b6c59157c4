"""Built-in filters wrapping the send."""

import logging
import time
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .contexts import ApiActionContext

logger = logging.getLogger(__name__)


class ApiActionFilter:
    """Base filter whose callbacks do nothing; override either one."""

    async def on_begin_request(self, context: "ApiActionContext") -> None:
        pass

    async def on_end_request(self, context: "ApiActionContext") -> None:
        pass


class TraceFilter(ApiActionFilter):
    """Logs each request and the response status with its elapsed time.

    Args:
        level: Logging level for the trace records.
    """

    _START_TAG = "trace.start"

    def __init__(self, level: int = logging.INFO):
        self.level = level

    async def on_begin_request(self, context: "ApiActionContext") -> None:
        context.tags[self._START_TAG] = time.perf_counter()
        request = context.request
        url = request.build_url() if request.host or "://" in request.path else request.path
        logger.log(self.level, "%s -> %s %s", context.action.name, request.method, url)

    async def on_end_request(self, context: "ApiActionContext") -> None:
        started = context.tags.pop(self._START_TAG, None)
        elapsed_ms = (time.perf_counter() - started) * 1000 if started is not None else 0.0
        status = context.response.status_code if context.response is not None else None
        logger.log(
            self.level, "%s <- %s in %.1fms", context.action.name, status, elapsed_ms
        )
