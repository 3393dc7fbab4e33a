"""Tests for the HTTP API."""

import pytest
from fastapi.testclient import TestClient

from web_inspector import web
from web_inspector.rules import RULE_SOURCES


@pytest.fixture
def api(settings, serve_html, good_page):
    app = web.create_app(settings=settings, http_client=serve_html(good_page))
    with TestClient(app) as client:
        yield client


def test_analyze(api):
    response = api.post("/api/analyze", json={"siteUrl": "https://example.com/", "sourceFilter": "wcag"})

    assert response.status_code == 200
    data = response.json()
    assert set(data) == {
        "siteName", "siteUrl", "analyzedAt", "overallScore",
        "violations", "recommendations", "summary",
    }
    assert data["siteUrl"] == "https://example.com/"
    assert data["summary"]["totalRules"] == 6


def test_source_filter_defaults_to_all(api):
    response = api.post("/api/analyze", json={"siteUrl": "https://example.com/"})
    assert response.status_code == 200
    assert response.json()["summary"]["totalRules"] == 80


@pytest.mark.parametrize("body", [{}, {"siteUrl": ""}, {"sourceFilter": "wcag"}])
def test_missing_site_url(api, body):
    response = api.post("/api/analyze", json=body)
    assert response.status_code == 400
    assert response.json() == {"error": "siteUrl is required"}


def test_no_body(api):
    response = api.post("/api/analyze")
    assert response.status_code == 400
    assert response.json() == {"error": "siteUrl is required"}


def test_malformed_site_url(api):
    response = api.post("/api/analyze", json={"siteUrl": "example.com"})
    assert response.status_code == 400
    assert response.json()["error"].startswith("Invalid siteUrl")


def test_invalid_json(api):
    response = api.post(
        "/api/analyze", content="{not json", headers={"Content-Type": "application/json"}
    )
    assert response.status_code == 400
    assert response.json()["error"] == "Invalid request body"


def test_get_not_allowed(api):
    assert api.get("/api/analyze").status_code == 405


def test_unexpected_failure(api, monkeypatch):
    def explode(*args, **kwargs):
        raise RuntimeError("boom")

    monkeypatch.setattr(web, "analyze_website", explode)

    response = api.post("/api/analyze", json={"siteUrl": "https://example.com/"})

    assert response.status_code == 500
    assert response.json() == {"error": "Failed to analyze website", "message": "boom"}


def test_cors_preflight(api):
    response = api.options(
        "/api/analyze",
        headers={
            "Origin": "https://app.example.org",
            "Access-Control-Request-Method": "POST",
            "Access-Control-Request-Headers": "Content-Type",
        },
    )
    assert response.status_code == 200
    assert response.headers["access-control-allow-origin"] == "*"
    assert "POST" in response.headers["access-control-allow-methods"]


def test_cors_on_response(api):
    response = api.post(
        "/api/analyze",
        json={"siteUrl": "https://example.com/", "sourceFilter": "wcag"},
        headers={"Origin": "https://app.example.org"},
    )
    assert response.headers["access-control-allow-origin"] == "*"


def test_sources(api):
    response = api.get("/api/sources")

    assert response.status_code == 200
    data = response.json()
    assert [s["id"] for s in data] == [s.id for s in RULE_SOURCES]
    by_id = {s["id"]: s for s in data}
    assert by_id["all"]["ruleCount"] == 80
    assert by_id["security"]["ruleCount"] == 5
