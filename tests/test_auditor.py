"""End-to-end tests for analyze_website."""

import httpx
import pytest

from web_inspector.auditor import analyze_website, normalize_url, validate_site_url
from web_inspector.errors import InvalidInputError
from web_inspector.rules import RULES


class TestValidation:
    @pytest.mark.parametrize("value", [None, "", "   "])
    def test_missing(self, value):
        with pytest.raises(InvalidInputError, match="siteUrl is required"):
            validate_site_url(value)

    @pytest.mark.parametrize("value", ["ftp://example.com", "example.com", "not a url"])
    def test_bad_scheme(self, value):
        with pytest.raises(InvalidInputError, match="scheme must be http or https"):
            validate_site_url(value)

    def test_missing_host(self):
        with pytest.raises(InvalidInputError, match="missing host"):
            validate_site_url("https://")

    def test_trims(self):
        assert validate_site_url("  https://example.com  ") == "https://example.com"

    def test_invalid_input_raised_before_fetching(self, make_client):
        def handler(request):
            raise AssertionError("should not fetch")

        with pytest.raises(InvalidInputError):
            analyze_website("", client=make_client(handler))


class TestNormalizeUrl:
    @pytest.mark.parametrize(
        "value, expected",
        [
            ("example.com", "https://example.com"),
            (" http://example.com ", "http://example.com"),
            ("https://example.com/a", "https://example.com/a"),
        ],
    )
    def test_normalize(self, value, expected):
        assert normalize_url(value) == expected


class TestAnalyzeWebsite:
    def test_full_catalog(self, settings, serve_html, good_page):
        client = serve_html(good_page, headers={"X-Content-Type-Options": "nosniff"})

        result = analyze_website("https://www.example.com/", settings=settings, client=client)

        summary = result.summary
        assert summary.total_rules == len(RULES)
        assert summary.total_rules == summary.passed_rules + len(result.violations)
        assert len(result.violations) == summary.failed_rules + summary.warning_rules + summary.info_rules
        assert 0 <= result.overall_score <= 100
        assert result.site_name == "example.com"
        assert result.analyzed_at.endswith("Z")
        assert len(result.recommendations) <= 5

        failed = {v.id for v in result.violations}
        for passing in ("sec-001", "sec-005", "wcag-001", "html-002", "html-004", "seo-001", "seo-003", "ux-001"):
            assert passing not in failed

    def test_source_filter(self, settings, serve_html, good_page):
        result = analyze_website(
            "https://example.com/", "wcag", settings=settings, client=serve_html(good_page)
        )
        assert result.summary.total_rules == 6
        assert all(v.id.startswith("wcag-") for v in result.violations)

    def test_filter_matching_nothing(self, settings, serve_html, good_page):
        result = analyze_website(
            "https://example.com/", "no-such-rule", settings=settings, client=serve_html(good_page)
        )
        assert result.summary.total_rules == 0
        assert result.overall_score == 0
        assert result.violations == []

    def test_deterministic_apart_from_timestamp(self, settings, serve_html, good_page):
        client = serve_html(good_page)
        first = analyze_website("https://example.com/", settings=settings, client=client).to_dict()
        second = analyze_website("https://example.com/", settings=settings, client=client).to_dict()
        first.pop("analyzedAt")
        second.pop("analyzedAt")
        assert first == second

    def test_connection_error(self, settings, make_client):
        def handler(request):
            raise httpx.ConnectError("connection refused", request=request)

        result = analyze_website(
            "https://example.com/", "owasp", settings=settings, client=make_client(handler)
        )

        assert result.overall_score == 0
        assert result.summary.total_rules == 5
        assert result.summary.failed_rules == 1
        (violation,) = result.violations
        assert violation.id == "connection-error"
        assert violation.details == "connection refused"

    def test_http_error_becomes_connection_error(self, settings, serve_html):
        result = analyze_website(
            "https://example.com/", settings=settings, client=serve_html("oops", status=500)
        )
        (violation,) = result.violations
        assert violation.id == "connection-error"
        assert violation.details == "HTTP 500: Internal Server Error"

    def test_malformed_redirect_becomes_connection_error(self, settings, make_client):
        def handler(request):
            return httpx.Response(302, headers={"Location": "http://[bad"})

        result = analyze_website("https://example.com/", settings=settings, client=make_client(handler))

        assert result.overall_score == 0
        (violation,) = result.violations
        assert violation.id == "connection-error"
        assert "Invalid redirect location" in violation.details
