"""
Shared fixtures for the web-inspector test suite.

HTTP is always served by ``httpx.MockTransport``; no test touches the
network.
"""

import logging
from typing import Callable, Dict, Optional

import httpx
import pytest

from web_inspector.config import Settings


GOOD_PAGE = """<!DOCTYPE html>
<html lang="en">
<head>
  <meta charset="UTF-8">
  <meta name="viewport" content="width=device-width, initial-scale=1">
  <title>Handmade Leather Wallets | Acme Goods</title>
  <link rel="stylesheet" href="/styles.css" media="print">
  <link rel="canonical" href="https://example.com/">
</head>
<body>
  <a href="#main">Skip to main content</a>
  <header><nav><a href="/">Home</a><a href="/shop">Shop</a><a href="/contact">Contact</a></nav></header>
  <main id="main">
    <h1>Leather wallets</h1>
    <h2>Our range</h2>
    <img src="/wallet.jpg" alt="Brown wallet" width="400" height="300">
  </main>
  <footer>Contact: <a href="mailto:hello@example.com">hello@example.com</a></footer>
  <script defer src="/app.js"></script>
</body>
</html>
"""


@pytest.fixture(autouse=True)
def restore_root_logging():
    """The CLI reconfigures the root logger; undo that after each test."""
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    root.handlers = handlers
    root.setLevel(level)


@pytest.fixture
def settings() -> Settings:
    return Settings(timeout=5.0)


@pytest.fixture
def make_client():
    """Build ``httpx.Client`` instances backed by a request handler."""
    clients = []

    def factory(handler: Callable[[httpx.Request], httpx.Response]) -> httpx.Client:
        client = httpx.Client(transport=httpx.MockTransport(handler))
        clients.append(client)
        return client

    yield factory

    for client in clients:
        client.close()


@pytest.fixture
def serve_html(make_client):
    """Client that answers every request with the same page."""

    def factory(html: str, headers: Optional[Dict[str, str]] = None, status: int = 200) -> httpx.Client:
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(status, text=html, headers=headers or {})

        return make_client(handler)

    return factory


@pytest.fixture
def good_page() -> str:
    return GOOD_PAGE
