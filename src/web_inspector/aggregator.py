"""Turn verdicts into a scored analysis result."""

from datetime import datetime, timezone
from typing import Optional, Sequence
from urllib.parse import urlparse

from .evidence import round_half_up
from .models import AnalysisResult, Rule, Severity, Summary, Verdict, Violation


MAX_RECOMMENDATIONS = 5

CONNECTION_RECOMMENDATIONS = [
    "Ensure website is publicly accessible",
    "Check CORS settings",
    "Verify SSL certificate",
]


def utc_timestamp(now: Optional[datetime] = None) -> str:
    """ISO-8601 UTC with milliseconds and a ``Z`` suffix."""
    now = now or datetime.now(timezone.utc)
    return now.astimezone(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


def site_name(url: str) -> str:
    try:
        host = urlparse(url).hostname
    except ValueError:
        host = None
    if not host:
        return "Unknown Site"
    return host[4:] if host.startswith("www.") else host


def overall_score(passed: int, total: int) -> int:
    if total == 0:
        return 0
    return round_half_up(100 * passed / total)


def category_recommendations(violations: Sequence[Violation]) -> list[str]:
    """One line per violated category, first-seen order, at most five."""
    counts: dict[str, int] = {}
    for violation in violations:
        counts[violation.category] = counts.get(violation.category, 0) + 1
    lines = [f"Fix {n} {category} issue(s)" for category, n in counts.items()]
    return lines[:MAX_RECOMMENDATIONS]


def build_result(
    site_url: str,
    rules: Sequence[Rule],
    verdicts: Sequence[Verdict],
    analyzed_at: Optional[str] = None,
) -> AnalysisResult:
    """Merge rules with their verdicts into violations, counts and a score."""
    if len(rules) != len(verdicts):
        raise ValueError(f"Got {len(verdicts)} verdicts for {len(rules)} rules")

    summary = Summary(total_rules=len(rules))
    violations: list[Violation] = []

    for rule, verdict in zip(rules, verdicts):
        if verdict.passed:
            summary.passed_rules += 1
            continue

        violations.append(Violation.from_verdict(rule, verdict, page=site_url))
        if rule.severity is Severity.ERROR:
            summary.failed_rules += 1
        elif rule.severity is Severity.WARNING:
            summary.warning_rules += 1
        else:
            summary.info_rules += 1

    return AnalysisResult(
        site_name=site_name(site_url),
        site_url=site_url,
        analyzed_at=analyzed_at or utc_timestamp(),
        overall_score=overall_score(summary.passed_rules, summary.total_rules),
        violations=violations,
        recommendations=category_recommendations(violations),
        summary=summary,
    )


def connection_failure_result(
    site_url: str,
    total_rules: int,
    message: str,
    analyzed_at: Optional[str] = None,
) -> AnalysisResult:
    """Result reported when the page could not be fetched at all.

    The summary is not reconciled: it reports the selected
    rule count as the total with a single failure.
    """
    violation = Violation(
        id="connection-error",
        rule_name="Website Accessibility Check",
        category="Connectivity",
        severity=Severity.ERROR,
        description="Unable to access the website for analysis.",
        details=message,
        recommendation=(
            "Ensure the website is publicly accessible and not behind authentication. "
            "Check CORS and firewall settings."
        ),
        page=site_url,
    )
    return AnalysisResult(
        site_name=site_name(site_url),
        site_url=site_url,
        analyzed_at=analyzed_at or utc_timestamp(),
        overall_score=0,
        violations=[violation],
        recommendations=list(CONNECTION_RECOMMENDATIONS),
        summary=Summary(total_rules=total_rules, failed_rules=1),
    )
