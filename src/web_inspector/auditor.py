"""Main auditor: select rules, fetch the page, evaluate and score."""

import time
from typing import Optional
from urllib.parse import urlparse

import httpx
import structlog

from .aggregator import build_result, connection_failure_result
from .config import Settings
from .engine import evaluate
from .errors import FetchError, InvalidInputError
from .fetcher import fetch_page
from .models import AnalysisResult
from .rules import select_rules


log = structlog.get_logger(__name__)


def normalize_url(url: str) -> str:
    """Ensure URL has a scheme."""
    url = url.strip()
    if not url.startswith(("http://", "https://")):
        url = "https://" + url
    return url


def validate_site_url(site_url: Optional[str]) -> str:
    """Return the trimmed URL or raise InvalidInputError."""
    if site_url is None or not site_url.strip():
        raise InvalidInputError("siteUrl is required")

    site_url = site_url.strip()
    try:
        parsed = urlparse(site_url)
    except ValueError as e:
        raise InvalidInputError(f"Invalid siteUrl: {e}") from e

    if parsed.scheme not in ("http", "https"):
        raise InvalidInputError(f"Invalid siteUrl: scheme must be http or https, got {site_url!r}")
    if not parsed.hostname:
        raise InvalidInputError(f"Invalid siteUrl: missing host in {site_url!r}")
    return site_url


def analyze_website(
    site_url: Optional[str],
    source_filter: Optional[str] = "all",
    *,
    settings: Optional[Settings] = None,
    client: Optional[httpx.Client] = None,
) -> AnalysisResult:
    """Run a complete analysis of one page.

    Args:
        site_url: Absolute http(s) URL of the page
        source_filter: Rule selection token, ``"all"`` for every rule
        settings: Fetch settings; defaults to the environment
        client: HTTP client to fetch with (used by tests)

    Returns:
        AnalysisResult. A page that cannot be fetched still yields a
        result, with a single ``connection-error`` violation.

    Raises:
        InvalidInputError: site_url is missing or not an http(s) URL
    """
    site_url = validate_site_url(site_url)
    rules = select_rules(source_filter)
    start_time = time.monotonic()
    log.info("analysis.start", site_url=site_url, source_filter=source_filter, rules=len(rules))

    try:
        page = fetch_page(site_url, settings=settings, client=client)
    except FetchError as e:
        log.warning("analysis.fetch_failed", site_url=site_url, error=str(e))
        return connection_failure_result(site_url, len(rules), str(e))

    verdicts = evaluate(rules, page, site_url)
    result = build_result(site_url, rules, verdicts)

    log.info(
        "analysis.finished",
        site_url=site_url,
        score=result.overall_score,
        passed=result.summary.passed_rules,
        failed=result.summary.failed_rules,
        warnings=result.summary.warning_rules,
        info=result.summary.info_rules,
        duration_ms=int((time.monotonic() - start_time) * 1000),
    )
    return result
