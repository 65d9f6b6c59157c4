"""Result extractors turning a response into the declared result type."""

import typing
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any

import httpx

from .errors import HttpError

if TYPE_CHECKING:
    from .contexts import ApiActionContext


class ApiReturn(ABC):
    """Abstract base extractor; subclasses implement ``extract``.

    Args:
        ensure_success: Raise ``HttpError`` for non-2xx responses instead of
                        extracting a result from them.
    """

    def __init__(self, *, ensure_success: bool = True):
        self.ensure_success = ensure_success

    async def get_result(self, context: "ApiActionContext") -> Any:
        response = context.response
        if response is None:
            raise RuntimeError("No response to extract a result from")
        if self.ensure_success and not response.is_success:
            await response.aread()
            raise HttpError(response.status_code, response.reason_phrase)
        return await self.extract(response, context.action.returns.data_type)

    @abstractmethod
    async def extract(self, response: httpx.Response, data_type: Any) -> Any:
        ...


class AutoReturn(ApiReturn):
    """Picks the extraction from the declared type.

    ``None`` means no result, ``httpx.Response`` the raw response, ``str``
    the text, ``bytes`` the content. Anything else is decoded from JSON,
    with models built through their ``from_dict``.
    """

    async def extract(self, response: httpx.Response, data_type: Any) -> Any:
        if data_type is None:
            return None
        if data_type is httpx.Response:
            return response
        await response.aread()
        if data_type is str:
            return response.text
        if data_type is bytes:
            return response.content
        return from_json(response.json(), data_type)


class JsonReturn(ApiReturn):
    """Decodes the body as JSON regardless of the declared type."""

    async def extract(self, response: httpx.Response, data_type: Any) -> Any:
        await response.aread()
        return from_json(response.json(), data_type)


class TextReturn(ApiReturn):
    """Returns the body text."""

    async def extract(self, response: httpx.Response, data_type: Any) -> Any:
        await response.aread()
        return response.text


def from_json(data: Any, data_type: Any) -> Any:
    """Build ``data_type`` from decoded JSON.

    Models exposing ``from_dict`` are built from the data; ``list[Model]``
    builds one model per item. Other types get the decoded value as is.
    """
    if typing.get_origin(data_type) is list:
        args = typing.get_args(data_type)
        if args and hasattr(args[0], "from_dict") and isinstance(data, list):
            return [args[0].from_dict(item) for item in data]
        return data
    if isinstance(data_type, type) and hasattr(data_type, "from_dict"):
        return data_type.from_dict(data)
    return data
