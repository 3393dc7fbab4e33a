"""Tests for page fetching."""

import httpx
import pytest

from web_inspector.config import DEFAULT_USER_AGENT, Settings
from web_inspector.errors import ConnectionFailure, FetchTimeout, HttpStatusError
from web_inspector.fetcher import fetch_page


def test_returns_body_and_headers(settings, serve_html):
    client = serve_html("<html>ok</html>", headers={"X-Frame-Options": "DENY"})

    page = fetch_page("https://example.com/", settings=settings, client=client)

    assert page.html == "<html>ok</html>"
    assert page.headers["x-frame-options"] == "DENY"
    assert page.status_code == 200
    assert page.url == "https://example.com/"


def test_sends_configured_headers(make_client):
    seen = {}

    def handler(request):
        seen.update(request.headers)
        return httpx.Response(200, text="ok")

    settings = Settings(timeout=5.0, user_agent="TestBot/1.0")
    fetch_page("https://example.com/", settings=settings, client=make_client(handler))

    assert seen["user-agent"] == "TestBot/1.0"
    assert seen["accept"].startswith("text/html")


def test_default_user_agent(settings):
    assert settings.request_headers["User-Agent"] == DEFAULT_USER_AGENT


def test_follows_one_redirect(settings, make_client):
    def handler(request):
        if request.url.path == "/old":
            return httpx.Response(301, headers={"Location": "/new"})
        return httpx.Response(200, text="<html>new</html>")

    page = fetch_page("https://example.com/old", settings=settings, client=make_client(handler))

    assert page.html == "<html>new</html>"
    assert page.url == "https://example.com/new"


def test_redirect_target_used_whatever_its_status(settings, make_client):
    def handler(request):
        if request.url.path == "/old":
            return httpx.Response(301, headers={"Location": "https://example.com/missing"})
        return httpx.Response(404, text="<html>gone</html>")

    page = fetch_page("https://example.com/old", settings=settings, client=make_client(handler))

    assert page.status_code == 404
    assert page.html == "<html>gone</html>"
    assert page.url == "https://example.com/missing"


def test_second_redirect_not_followed(settings, make_client):
    requested = []

    def handler(request):
        requested.append(request.url.path)
        if request.url.path == "/a":
            return httpx.Response(302, headers={"Location": "/b"})
        return httpx.Response(302, headers={"Location": "/c"}, text="moved")

    page = fetch_page("https://example.com/a", settings=settings, client=make_client(handler))

    assert requested == ["/a", "/b"]
    assert page.status_code == 302


def test_http_error_status(settings, serve_html):
    client = serve_html("not here", status=404)

    with pytest.raises(HttpStatusError) as excinfo:
        fetch_page("https://example.com/", settings=settings, client=client)

    assert str(excinfo.value) == "HTTP 404: Not Found"
    assert excinfo.value.status_code == 404


def test_timeout(settings, make_client):
    def handler(request):
        raise httpx.ReadTimeout("timed out", request=request)

    with pytest.raises(FetchTimeout) as excinfo:
        fetch_page("https://example.com/", settings=settings, client=make_client(handler))

    assert str(excinfo.value) == "Request timeout after 5 seconds"


def test_connection_failure(settings, make_client):
    def handler(request):
        raise httpx.ConnectError("Name or service not known", request=request)

    with pytest.raises(ConnectionFailure, match="Name or service not known"):
        fetch_page("https://nowhere.invalid/", settings=settings, client=make_client(handler))


def test_malformed_redirect_location(settings, make_client):
    def handler(request):
        return httpx.Response(302, headers={"Location": "http://[bad"})

    with pytest.raises(ConnectionFailure, match="Invalid redirect location"):
        fetch_page("https://example.com/", settings=settings, client=make_client(handler))
