"""Execution engine running one action invocation end to end."""

import logging
import types
import typing
from typing import Any

from .contexts import ApiActionContext
from .errors import Phase, invocation_error
from .interfaces import HttpClientContextProvider

logger = logging.getLogger(__name__)


class ApiActionExecutor:
    """Runs the request pipeline for an execution context.

    The context must carry its own clone of the action descriptor. The
    pipeline is, in order and with a single attempt:

    1. acquire a transport handle from the configured provider
    2. action-level hooks, in declaration order
    3. parameter-level hooks, parameter by parameter, in declaration order
    4. filter begin callbacks, in declaration order
    5. send the request
    6. filter end callbacks, in declaration order
    7. extract the result and cast it to the declared type
    8. release the transport handle

    Step 8 runs exactly once whenever step 1 succeeded, whichever later
    step failed. Failures are raised as ``ApiInvocationError`` subclasses
    naming the phase; cancellation propagates as is.
    """

    async def execute(self, context: ApiActionContext) -> Any:
        action = context.action
        provider = context.config.provider

        try:
            context.client_context = await provider.create_context(context)
        except Exception as e:
            logger.warning("%s: failed to acquire transport: %s", action.name, e)
            raise invocation_error(Phase.ACQUIRE, action.name, e) from e
        logger.debug("%s: acquired transport", action.name)

        try:
            result = await self._execute_pipeline(context)
        except BaseException:
            await self._release(provider, context, propagate=False)
            raise
        await self._release(provider, context, propagate=True)
        logger.debug("%s: released transport", action.name)
        return result

    async def _execute_pipeline(self, context: ApiActionContext) -> Any:
        action = context.action
        phase = Phase.ACTION_HOOK
        try:
            logger.debug("%s: %s", action.name, phase.value)
            for attribute in action.attributes:
                await attribute.before_request(context)

            phase = Phase.PARAMETER_HOOK
            logger.debug("%s: %s", action.name, phase.value)
            for parameter in action.parameters:
                for attribute in parameter.attributes:
                    await attribute.before_request(context, parameter)

            phase = Phase.FILTER_BEGIN
            logger.debug("%s: %s", action.name, phase.value)
            for action_filter in action.filters:
                await action_filter.on_begin_request(context)

            phase = Phase.SEND
            logger.debug("%s: sending %s request", action.name, context.request.method)
            context.response = await context.client_context.send(context.request)

            phase = Phase.FILTER_END
            logger.debug("%s: %s", action.name, phase.value)
            for action_filter in action.filters:
                await action_filter.on_end_request(context)

            phase = Phase.RESULT
            logger.debug("%s: %s", action.name, phase.value)
            value = await action.returns.attribute.get_result(context)
            return cast_result(value, action.returns.data_type)
        except Exception as e:
            logger.warning("%s failed in %s: %s", action.name, phase.value, e)
            raise invocation_error(phase, action.name, e) from e

    async def _release(
        self,
        provider: HttpClientContextProvider,
        context: ApiActionContext,
        *,
        propagate: bool,
    ) -> None:
        handle, context.client_context = context.client_context, None
        try:
            await provider.dispose_context(handle)
        except Exception as e:
            if propagate:
                logger.warning("%s: failed to release transport: %s", context.action.name, e)
                raise invocation_error(Phase.RELEASE, context.action.name, e) from e
            # An earlier failure is already propagating and takes precedence.
            logger.exception("%s: failed to release transport", context.action.name)


def cast_result(value: Any, data_type: Any) -> Any:
    """Adapt an extracted value to the declared result type.

    A ``None`` data type declares no result and always yields ``None``.

    Raises:
        TypeError: If the value is not an instance of the declared type.
    """
    if data_type is None:
        return None
    if data_type is Any or data_type is object:
        return value

    origin = typing.get_origin(data_type)
    if origin is typing.Union or origin is types.UnionType:
        return value
    expected = origin or data_type
    if not isinstance(expected, type):
        # Literals, type variables and the like are taken on trust.
        return value
    if isinstance(value, expected):
        return value
    if expected is float and isinstance(value, int) and not isinstance(value, bool):
        return float(value)
    raise TypeError(
        f"Expected result of type {getattr(data_type, '__name__', data_type)}, "
        f"got {type(value).__name__}"
    )
