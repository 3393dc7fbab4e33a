"""Fetch a page's body and response headers."""

import time
from typing import Optional
from urllib.parse import urljoin

import httpx
import structlog

from .config import Settings, get_settings
from .errors import ConnectionFailure, FetchTimeout, HttpStatusError
from .models import FetchResult


log = structlog.get_logger(__name__)


def fetch_page(
    url: str,
    *,
    settings: Optional[Settings] = None,
    client: Optional[httpx.Client] = None,
) -> FetchResult:
    """Fetch ``url`` following at most one redirect.

    Args:
        url: Absolute http(s) URL to fetch
        settings: Timeout and request headers; defaults to the environment
        client: Client to send requests with (tests pass one backed by a
            mock transport); a private client is created when omitted

    Returns:
        FetchResult with the body and headers of the response used

    Raises:
        FetchTimeout: the timeout elapsed
        HttpStatusError: a non-2xx response that was not a redirect
        ConnectionFailure: DNS, TLS or network failure
    """
    settings = settings or get_settings()

    if client is None:
        with httpx.Client(headers=settings.request_headers, timeout=settings.timeout) as own_client:
            return _fetch(own_client, url, settings)
    return _fetch(client, url, settings)


def _fetch(client: httpx.Client, url: str, settings: Settings) -> FetchResult:
    deadline = time.monotonic() + settings.timeout
    log.info("fetch.start", url=url, timeout=settings.timeout)

    response = _get(client, url, settings, deadline)

    location = response.headers.get("location")
    if 300 <= response.status_code < 400 and location:
        # Only one hop: the second response is used whatever its status.
        try:
            target = urljoin(url, location)
        except ValueError as e:
            log.warning("fetch.bad_redirect", url=url, location=location, error=str(e))
            raise ConnectionFailure(f"Invalid redirect location {location!r}: {e}") from e
        log.info("fetch.redirect", url=url, location=target, status=response.status_code)
        response = _get(client, target, settings, deadline)
        return _result(response)

    if not response.is_success:
        log.warning("fetch.http_status", url=url, status=response.status_code)
        raise HttpStatusError(response.status_code, response.reason_phrase)

    return _result(response)


def _get(client: httpx.Client, url: str, settings: Settings, deadline: float) -> httpx.Response:
    remaining = deadline - time.monotonic()
    if remaining <= 0:
        raise FetchTimeout(settings.timeout)

    try:
        response = client.get(
            url,
            headers=settings.request_headers,
            timeout=remaining,
            follow_redirects=False,
        )
        # Body is read eagerly by Client.get; a slow body still counts.
        if time.monotonic() > deadline:
            raise FetchTimeout(settings.timeout)
        return response
    except httpx.TimeoutException as e:
        log.warning("fetch.timeout", url=url, timeout=settings.timeout)
        raise FetchTimeout(settings.timeout) from e
    except (httpx.RequestError, httpx.InvalidURL) as e:
        log.warning("fetch.connection_failure", url=url, error=str(e))
        raise ConnectionFailure(str(e) or type(e).__name__) from e


def _result(response: httpx.Response) -> FetchResult:
    return FetchResult(
        html=response.text,
        headers=response.headers,
        url=str(response.url),
        status_code=response.status_code,
    )
