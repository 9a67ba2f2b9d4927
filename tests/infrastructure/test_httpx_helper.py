import httpx
import pytest

from daocore.domain.exceptions import TransportError
from daocore.infrastructure.http.httpx_helper import HttpxHelper


def test_get_and_post_map_response_fields():
    seen = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append((request.method, str(request.url)))
        return httpx.Response(
            201,
            content=b'{"ok": true}',
            headers={"content-type": "application/json; charset=utf-8"},
        )

    helper = HttpxHelper(client=httpx.Client(transport=httpx.MockTransport(handler)))

    got = helper.get("https://example.test/a?id=1")
    posted = helper.post("https://example.test/b.json")

    assert seen == [
        ("GET", "https://example.test/a?id=1"),
        ("POST", "https://example.test/b.json"),
    ]
    assert got.status_code == 201
    assert got.body == b'{"ok": true}'
    assert got.headers["content-type"].startswith("application/json")
    assert got.encoding == "utf-8"
    assert posted.has_body()


def test_empty_body_is_reported_as_absent():
    helper = HttpxHelper(
        client=httpx.Client(transport=httpx.MockTransport(lambda r: httpx.Response(204)))
    )
    assert not helper.get("https://example.test/").has_body()


def test_connection_failure_is_transport_error():
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    helper = HttpxHelper(client=httpx.Client(transport=httpx.MockTransport(handler)))

    with pytest.raises(TransportError) as exc_info:
        helper.post("https://example.test/1.1/statuses/update.json?status=hi")

    assert isinstance(exc_info.value.__cause__, httpx.ConnectError)
