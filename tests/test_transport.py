"""Tests for transport handles and providers in webapi_client.transport."""

import json
import unittest

import httpx

from webapi_client import (
    ApiActionContext,
    ApiActionDescriptor,
    ConnectionError,
    DefaultHttpClientContextProvider,
    HttpApiConfig,
    HttpApiRequest,
    HttpClientContext,
    SharedHttpClientContextProvider,
)


def echo(request: httpx.Request) -> httpx.Response:
    return httpx.Response(200, json={
        "method": request.method,
        "url": str(request.url),
        "header": request.headers.get("x-test"),
        "body": request.content.decode(),
    })


def make_context(provider) -> ApiActionContext:
    return ApiActionContext(
        config=HttpApiConfig(timeout=5.0, provider=provider),
        action=ApiActionDescriptor(name="test"),
    )


class TestHttpClientContext(unittest.IsolatedAsyncioTestCase):
    """Tests for HttpClientContext.send()."""

    async def asyncSetUp(self):
        self.client = httpx.AsyncClient(transport=httpx.MockTransport(echo))
        self.handle = HttpClientContext(self.client)

    async def asyncTearDown(self):
        await self.client.aclose()

    async def test_builds_request(self):
        request = HttpApiRequest(
            method="POST",
            host="https://api.example.com/v1/",
            path="/items",
            query=[("tag", "a"), ("tag", "b")],
            headers={"X-Test": "1"},
            json={"name": "x"},
        )
        response = await self.handle.send(request)
        data = response.json()
        self.assertEqual(data["method"], "POST")
        self.assertEqual(data["url"], "https://api.example.com/v1/items?tag=a&tag=b")
        self.assertEqual(data["header"], "1")
        self.assertEqual(json.loads(data["body"]), {"name": "x"})

    async def test_form_body(self):
        request = HttpApiRequest(method="POST", host="https://api.example.com", form={"a": "1"})
        response = await self.handle.send(request)
        self.assertEqual(response.json()["body"], "a=1")

    async def test_connect_error(self):
        def refuse(request):
            raise httpx.ConnectError("refused", request=request)

        async with httpx.AsyncClient(transport=httpx.MockTransport(refuse)) as client:
            with self.assertRaises(ConnectionError) as ctx:
                await HttpClientContext(client).send(HttpApiRequest(host="https://api.example.com"))
        self.assertTrue(ctx.exception.is_retryable())

    async def test_timeout(self):
        def slow(request):
            raise httpx.ReadTimeout("slow", request=request)

        async with httpx.AsyncClient(transport=httpx.MockTransport(slow)) as client:
            with self.assertRaises(ConnectionError) as ctx:
                await HttpClientContext(client).send(HttpApiRequest(host="https://api.example.com"))
        self.assertIn("timed out", ctx.exception.message)

    async def test_relative_path_without_host(self):
        with self.assertRaises(ValueError):
            await self.handle.send(HttpApiRequest(path="/items"))


class TestDefaultHttpClientContextProvider(unittest.IsolatedAsyncioTestCase):
    """Tests for DefaultHttpClientContextProvider."""

    async def test_client_per_invocation(self):
        provider = DefaultHttpClientContextProvider(transport=httpx.MockTransport(echo))
        first = await provider.create_context(make_context(provider))
        second = await provider.create_context(make_context(provider))
        self.assertIsNot(first.client, second.client)
        self.assertTrue(first.owns_client)
        self.assertEqual(first.client.timeout, httpx.Timeout(5.0))

        await provider.dispose_context(first)
        await provider.dispose_context(second)
        self.assertTrue(first.client.is_closed)
        self.assertTrue(second.client.is_closed)


class TestSharedHttpClientContextProvider(unittest.IsolatedAsyncioTestCase):
    """Tests for SharedHttpClientContextProvider."""

    async def test_shared_client_survives_dispose(self):
        provider = SharedHttpClientContextProvider(transport=httpx.MockTransport(echo))
        first = await provider.create_context(make_context(provider))
        second = await provider.create_context(make_context(provider))
        self.assertIs(first.client, second.client)
        self.assertFalse(first.owns_client)

        await provider.dispose_context(first)
        self.assertFalse(first.client.is_closed)
        response = await second.send(HttpApiRequest(host="https://api.example.com"))
        self.assertEqual(response.status_code, 200)

        await provider.aclose()
        self.assertTrue(first.client.is_closed)


class TestHttpApiRequest(unittest.TestCase):
    """Tests for the HttpApiRequest dataclass."""

    def test_build_url_joins(self):
        request = HttpApiRequest(host="https://api.example.com/", path="/users")
        self.assertEqual(request.build_url(), "https://api.example.com/users")

    def test_build_url_host_only(self):
        self.assertEqual(HttpApiRequest(host="https://a.example.com").build_url(), "https://a.example.com")

    def test_absolute_path_wins(self):
        request = HttpApiRequest(host="https://api.example.com", path="http://other/x")
        self.assertEqual(request.build_url(), "http://other/x")

    def test_set_header_replaces_case_insensitively(self):
        request = HttpApiRequest(headers={"accept": "text/plain"})
        request.set_header("Accept", "application/json")
        self.assertEqual(request.headers, {"Accept": "application/json"})

    def test_replace_route_value_missing(self):
        request = HttpApiRequest(path="/users")
        self.assertFalse(request.replace_route_value("id", 1))
        self.assertEqual(request.path, "/users")


if __name__ == "__main__":
    unittest.main()
