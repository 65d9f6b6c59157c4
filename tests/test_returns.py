"""Tests for result extractors in webapi_client.returns."""

import unittest
from dataclasses import dataclass
from typing import Any

import httpx

from webapi_client import (
    ApiActionContext,
    ApiActionDescriptor,
    ApiReturn,
    ApiReturnDescriptor,
    AutoReturn,
    HttpApiConfig,
    HttpError,
    JsonReturn,
    TextReturn,
)
from webapi_client.returns import from_json


@dataclass
class User:
    id: int
    name: str

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "User":
        return cls(id=data["id"], name=data["name"])


def make_context(data_type: Any, response: httpx.Response) -> ApiActionContext:
    action = ApiActionDescriptor(name="test", returns=ApiReturnDescriptor(data_type))
    context = ApiActionContext(config=HttpApiConfig(), action=action)
    context.response = response
    return context


class TestAutoReturn(unittest.IsolatedAsyncioTestCase):
    """Tests for AutoReturn."""

    async def test_void(self):
        context = make_context(None, httpx.Response(204))
        self.assertIsNone(await AutoReturn().get_result(context))

    async def test_raw_response(self):
        response = httpx.Response(200, text="hi")
        context = make_context(httpx.Response, response)
        self.assertIs(await AutoReturn().get_result(context), response)

    async def test_text(self):
        context = make_context(str, httpx.Response(200, text="hello"))
        self.assertEqual(await AutoReturn().get_result(context), "hello")

    async def test_bytes(self):
        context = make_context(bytes, httpx.Response(200, content=b"\x00\x01"))
        self.assertEqual(await AutoReturn().get_result(context), b"\x00\x01")

    async def test_json_dict(self):
        context = make_context(dict, httpx.Response(200, json={"a": 1}))
        self.assertEqual(await AutoReturn().get_result(context), {"a": 1})

    async def test_model(self):
        context = make_context(User, httpx.Response(200, json={"id": 1, "name": "ann"}))
        self.assertEqual(await AutoReturn().get_result(context), User(1, "ann"))

    async def test_model_list(self):
        body = [{"id": 1, "name": "ann"}, {"id": 2, "name": "bo"}]
        context = make_context(list[User], httpx.Response(200, json=body))
        self.assertEqual(
            await AutoReturn().get_result(context), [User(1, "ann"), User(2, "bo")]
        )

    async def test_error_status_raises(self):
        context = make_context(dict, httpx.Response(503, json={}))
        with self.assertRaises(HttpError) as ctx:
            await AutoReturn().get_result(context)
        self.assertEqual(ctx.exception.status, 503)
        self.assertTrue(ctx.exception.is_retryable())

    async def test_error_status_allowed(self):
        context = make_context(dict, httpx.Response(404, json={"code": "NOT_FOUND"}))
        result = await AutoReturn(ensure_success=False).get_result(context)
        self.assertEqual(result, {"code": "NOT_FOUND"})

    async def test_missing_response(self):
        context = make_context(dict, httpx.Response(200))
        context.response = None
        with self.assertRaises(RuntimeError):
            await AutoReturn().get_result(context)


class TestApiReturn(unittest.TestCase):
    """Tests for the ApiReturn base class."""

    def test_base_is_abstract(self):
        """ApiReturn itself should not be usable as an extractor."""
        with self.assertRaises(TypeError):
            ApiReturn()

    def test_subclass_without_extract_is_abstract(self):
        class Incomplete(ApiReturn):
            pass

        with self.assertRaises(TypeError):
            Incomplete()


class TestJsonReturn(unittest.IsolatedAsyncioTestCase):
    """Tests for JsonReturn."""

    async def test_decodes_json_for_str(self):
        context = make_context(str, httpx.Response(200, json="quoted"))
        self.assertEqual(await JsonReturn().get_result(context), "quoted")

    async def test_model(self):
        context = make_context(User, httpx.Response(200, json={"id": 3, "name": "cy"}))
        self.assertEqual(await JsonReturn().get_result(context), User(3, "cy"))


class TestTextReturn(unittest.IsolatedAsyncioTestCase):
    """Tests for TextReturn."""

    async def test_text(self):
        context = make_context(str, httpx.Response(200, text='{"a": 1}'))
        self.assertEqual(await TextReturn().get_result(context), '{"a": 1}')


class TestFromJson(unittest.TestCase):
    """Tests for from_json."""

    def test_plain_list(self):
        self.assertEqual(from_json([1, 2], list[int]), [1, 2])

    def test_passthrough(self):
        self.assertEqual(from_json({"a": 1}, Any), {"a": 1})


if __name__ == "__main__":
    unittest.main()
