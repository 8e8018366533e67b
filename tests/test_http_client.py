import httpx
import pytest

from fetch_wrapper.config import FetchConfig
from fetch_wrapper.http_client import HttpxTransport, create_http_client, request_kwargs
from fetch_wrapper.settings import Settings


def test_request_kwargs_skip_unset_fields() -> None:
    assert request_kwargs(FetchConfig(method="GET")) == {}


def test_request_kwargs_map_transport_options() -> None:
    config = FetchConfig(
        method="POST",
        headers=[("Content-Type", "application/json"), ("broken",)],
        body='{"a": 1}',
        params={"page": 2},
        timeout=3.0,
        follow_redirects=True,
        extra={"extensions": {"trace": None}},
    )

    assert request_kwargs(config) == {
        "headers": [("Content-Type", "application/json")],
        "content": '{"a": 1}',
        "params": {"page": 2},
        "timeout": 3.0,
        "follow_redirects": True,
        "extensions": {"trace": None},
    }


def test_create_http_client_uses_settings() -> None:
    client = create_http_client(Settings(base_url="http://api.local", timeout=4.0))

    assert client.base_url.host == "api.local"
    assert client.timeout.read == 4.0


@pytest.mark.anyio
async def test_fetch_sends_config_through_client() -> None:
    async def handler(request: httpx.Request) -> httpx.Response:
        assert request.method == "PATCH"
        assert request.url.path == "/items/7"
        assert request.url.params["dry_run"] == "1"
        assert request.headers["Authorization"] == "xxx"
        assert request.content == b"payload"
        return httpx.Response(202)

    client = httpx.AsyncClient(transport=httpx.MockTransport(handler), base_url="http://mock.local")
    transport = HttpxTransport(client)
    config = FetchConfig(method="PATCH", headers={"Authorization": "xxx"}, body="payload", params={"dry_run": "1"})

    response = await transport.fetch("/items/7", config)

    assert response.status_code == 202
    await transport.aclose()
