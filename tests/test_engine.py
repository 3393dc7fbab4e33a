"""Tests for rule evaluation and its fallbacks."""

import dataclasses

import pytest

from web_inspector.engine import evaluate, evaluate_rule
from web_inspector.models import FetchResult, Rule, Severity, Verdict
from web_inspector.rules import RULES, get_rule


def make_rule(rule_id="custom-001", category="Custom", good_examples=("Do the right thing",)):
    return Rule(
        id=rule_id,
        name="Custom rule",
        category=category,
        severity=Severity.WARNING,
        description="A rule with no specific check.",
        rationale="Testing.",
        impact="None.",
        source="Example Guide",
        source_url="https://example.com/guide",
        good_examples=good_examples,
    )


@pytest.fixture
def page(good_page):
    return FetchResult(html=good_page, headers={"X-Frame-Options": "DENY"})


class TestFallbacks:
    def test_javascript_heuristic(self, page):
        verdict = evaluate_rule(make_rule(category="JavaScript"), page, "https://example.com")
        assert verdict.passed
        assert verdict.details.startswith("JavaScript analysis: 1 script tags found.")
        assert verdict.recommendation == "Do the right thing"

    def test_javascript_heuristic_too_many_scripts(self):
        page = FetchResult(html="<script></script>" * 20)
        verdict = evaluate_rule(make_rule(category="Modern JavaScript"), page, "https://example.com")
        assert not verdict.passed

    def test_performance_heuristic(self, page):
        verdict = evaluate_rule(make_rule(category="Performance"), page, "https://example.com")
        assert verdict.passed
        assert verdict.details.startswith("Page size: 1KB.")

    def test_performance_heuristic_default_recommendation(self):
        page = FetchResult(html="x" * 600_000)
        verdict = evaluate_rule(make_rule(category="Performance", good_examples=()), page, "https://example.com")
        assert not verdict.passed
        assert verdict.recommendation == "Optimize page size, minimize resources, enable compression."

    def test_accessibility_heuristic(self):
        rule = make_rule(category="Accessibility", good_examples=())
        assert evaluate_rule(rule, FetchResult(html='<img alt="x">'), "https://example.com").passed
        verdict = evaluate_rule(rule, FetchResult(html="<p>plain</p>"), "https://example.com")
        assert not verdict.passed
        assert verdict.recommendation == "Follow WCAG 2.1 guidelines for accessibility."

    def test_manual_review(self, page):
        verdict = evaluate_rule(make_rule(category="Branding"), page, "https://example.com")
        assert not verdict.passed
        assert verdict.details == "This rule requires manual inspection or advanced tooling: Custom rule"
        assert verdict.recommendation == "Do the right thing"

    def test_manual_review_without_examples(self, page):
        rule = make_rule(category="Branding", good_examples=())
        verdict = evaluate_rule(rule, page, "https://example.com")
        assert verdict.recommendation == "Follow Example Guide guidelines. Manual review needed."

    def test_specific_check_takes_precedence(self, page):
        rule = dataclasses.replace(get_rule("sec-001"), category="Accessibility")
        verdict = evaluate_rule(rule, page, "http://example.com")
        assert verdict.details == "Site uses insecure HTTP protocol."


class TestFaultIsolation:
    def test_raising_check_becomes_failed_verdict(self, page):
        def broken(html, headers, site_url):
            raise ZeroDivisionError("division by zero")

        rules = [get_rule("sec-001"), make_rule("broken-001"), get_rule("html-002")]
        checks = {"sec-001": lambda *args: Verdict(True, "ok"), "broken-001": broken,
                  "html-002": lambda *args: Verdict(True, "ok")}

        verdicts = evaluate(rules, page, "https://example.com", checks=checks)

        assert [v.passed for v in verdicts] == [True, False, True]
        assert verdicts[1].details == "Check for rule broken-001 failed: ZeroDivisionError: division by zero"
        assert verdicts[1].recommendation is None


class TestEvaluate:
    def test_one_verdict_per_rule_in_order(self, page):
        verdicts = evaluate(RULES, page, "https://example.com")
        assert len(verdicts) == len(RULES)
        assert all(isinstance(v, Verdict) for v in verdicts)
        https = verdicts[[r.id for r in RULES].index("sec-001")]
        assert https.details == "Site uses HTTPS encryption."

    def test_deterministic(self, page):
        first = evaluate(RULES, page, "https://example.com")
        second = evaluate(RULES, page, "https://example.com")
        assert first == second

    def test_headers_reach_checks(self, page):
        verdict = evaluate_rule(get_rule("sec-005"), page, "https://example.com")
        assert verdict.passed
        assert "X-Frame-Options: ✓" in verdict.details

    def test_empty_rule_list(self, page):
        assert evaluate([], page, "https://example.com") == []
