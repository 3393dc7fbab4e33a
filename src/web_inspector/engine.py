"""Evaluate rules against a fetched page."""

from typing import Iterable, Mapping, Optional

import structlog

from .checks import CHECKS, Check
from .errors import EvaluationFault
from .evidence import count, has, round_half_up
from .models import FetchResult, Rule, Verdict


log = structlog.get_logger(__name__)


def category_heuristic(rule: Rule, html: str) -> Optional[Verdict]:
    """Coarse check keyed on the rule's category, for rules without a check.

    Returns None when the category has no heuristic either.
    """
    category = rule.category.lower()

    if "javascript" in category:
        scripts = count(r"<script", html)
        return Verdict(
            passed=scripts < 20,
            details=f"JavaScript analysis: {scripts} script tags found. Manual review recommended for: {rule.name}",
            recommendation=_first_good_example(rule) or f"Follow {rule.source} guidelines for best practices.",
        )

    if "performance" in category:
        return Verdict(
            passed=len(html) < 500_000,
            details=f"Page size: {round_half_up(len(html) / 1024)}KB. Manual performance testing recommended for: {rule.name}",
            recommendation=_first_good_example(rule) or "Optimize page size, minimize resources, enable compression.",
        )

    if "accessibility" in category:
        aria = has(r"aria-", html)
        alt = has(r"alt=", html)
        return Verdict(
            passed=aria or alt,
            details=(
                f"Accessibility features: ARIA({aria}), Alt text({alt}). "
                f"Manual testing recommended for: {rule.name}"
            ),
            recommendation=_first_good_example(rule) or "Follow WCAG 2.1 guidelines for accessibility.",
        )

    return None


def manual_review(rule: Rule) -> Verdict:
    return Verdict(
        passed=False,
        details=f"This rule requires manual inspection or advanced tooling: {rule.name}",
        recommendation=_first_good_example(rule) or f"Follow {rule.source} guidelines. Manual review needed.",
    )


def _first_good_example(rule: Rule) -> Optional[str]:
    return rule.good_examples[0] if rule.good_examples else None


def evaluate_rule(
    rule: Rule,
    page: FetchResult,
    site_url: str,
    checks: Mapping[str, Check] = CHECKS,
) -> Verdict:
    """Evaluate one rule: specific check, else category heuristic, else manual review.

    An exception raised by a check is contained here and reported as a
    failed verdict; it never propagates to the caller.
    """
    check = checks.get(rule.id)
    if check is None:
        return category_heuristic(rule, page.html) or manual_review(rule)

    try:
        return check(page.html, page.headers, site_url)
    except Exception as e:
        fault = EvaluationFault(rule.id, e)
        log.warning("rule.fault", rule_id=rule.id, error=str(fault), exc_info=True)
        return Verdict(passed=False, details=str(fault))


def evaluate(
    rules: Iterable[Rule],
    page: FetchResult,
    site_url: str,
    checks: Mapping[str, Check] = CHECKS,
) -> list[Verdict]:
    """Evaluate ``rules`` in order, one verdict per rule."""
    return [evaluate_rule(rule, page, site_url, checks) for rule in rules]
