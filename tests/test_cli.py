"""Tests for the command-line interface."""

import json
import sys

import pytest
from click.testing import CliRunner

from web_inspector import cli
from web_inspector.aggregator import build_result
from web_inspector.errors import InvalidInputError
from web_inspector.models import Evidence, Verdict
from web_inspector.rules import get_rule


@pytest.fixture
def runner():
    return CliRunner()


@pytest.fixture
def fake_analysis(monkeypatch):
    """Replace analyze_website with a canned two-rule result."""
    calls = []

    def analyze(url, source_filter="all", *, settings=None, client=None):
        calls.append({"url": url, "source_filter": source_filter, "settings": settings})
        rules = [get_rule("wcag-001"), get_rule("seo-005")]
        verdicts = [
            Verdict(False, "1 images found, 1 without alt text.",
                    evidence=Evidence('<img src="a.png">', 4)),
            Verdict(False, "No sitemap reference found. Check /sitemap.xml manually."),
        ]
        return build_result(url, rules, verdicts, analyzed_at="2024-01-02T03:04:05.678Z")

    monkeypatch.setattr(cli, "analyze_website", analyze)
    return calls


def test_scan_json(runner, fake_analysis):
    result = runner.invoke(cli.cli, ["scan", "example.com", "--json", "--source", "wcag"])

    assert result.exit_code == 0, result.output
    data = json.loads(result.output)
    assert data["siteUrl"] == "https://example.com"
    assert data["summary"]["totalRules"] == 2
    assert data["violations"][0]["lineNumber"] == 4
    assert fake_analysis[0]["source_filter"] == "wcag"


def test_scan_report(runner, fake_analysis):
    result = runner.invoke(cli.cli, ["scan", "https://example.com"])

    assert result.exit_code == 0, result.output
    assert "Provide Text Alternatives" in result.output
    assert "wcag-001" in result.output
    # Info-level violations are hidden unless verbose.
    assert "seo-005" not in result.output
    assert "use --verbose" in result.output
    assert "0/100  0 of 2 rules passed" in result.output


def test_scan_verbose(runner, fake_analysis):
    result = runner.invoke(cli.cli, ["scan", "https://example.com", "--verbose"])

    assert result.exit_code == 0, result.output
    assert "seo-005" in result.output
    assert "Line 4:" in result.output
    assert '<img src="a.png">' in result.output


def test_scan_timeout(runner, fake_analysis):
    result = runner.invoke(cli.cli, ["scan", "example.com", "--json", "-t", "2.5"])

    assert result.exit_code == 0, result.output
    assert fake_analysis[0]["settings"].timeout == 2.5


def test_scan_invalid_url(runner, monkeypatch):
    def analyze(url, source_filter="all", **kwargs):
        raise InvalidInputError("Invalid siteUrl: missing host in 'https://'")

    monkeypatch.setattr(cli, "analyze_website", analyze)

    result = runner.invoke(cli.cli, ["scan", "https://"])

    assert result.exit_code == 1
    assert "missing host" in result.output


def test_rules_filtered(runner):
    result = runner.invoke(cli.cli, ["rules", "--source", "wcag"])

    assert result.exit_code == 0, result.output
    for i in range(1, 7):
        assert f"wcag-00{i}" in result.output
    assert "sec-001" not in result.output
    assert "6 rules in 1 categories" in result.output


def test_rules_no_match(runner):
    result = runner.invoke(cli.cli, ["rules", "--source", "nothing-here"])
    assert result.exit_code == 0
    assert "No rules match" in result.output


def test_sources(runner):
    result = runner.invoke(cli.cli, ["sources"])
    assert result.exit_code == 0, result.output
    assert "core-web-vitals" in result.output
    assert "design-systems" in result.output


def test_help_without_command(runner):
    result = runner.invoke(cli.cli, [])
    assert result.exit_code == 0
    assert "scan" in result.output


def test_main_inserts_scan_for_bare_url(monkeypatch, fake_analysis, capsys):
    monkeypatch.setattr(sys, "argv", ["web-inspector", "example.com", "--json"])

    with pytest.raises(SystemExit) as excinfo:
        cli.main()

    assert excinfo.value.code == 0
    assert fake_analysis[0]["url"] == "https://example.com"


@pytest.mark.parametrize("score, color", [(100, "green"), (80, "green"), (79, "yellow"), (40, "orange1"), (0, "red")])
def test_score_color(score, color):
    assert cli.score_color(score) == color
