"""Data models for rule definitions, verdicts and analysis results."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Iterable, Optional

import httpx


class Severity(Enum):
    """Severity level of a rule."""
    ERROR = "error"
    WARNING = "warning"
    INFO = "info"


@dataclass(frozen=True)
class Rule:
    """A single best-practice rule from the catalog."""
    id: str
    name: str
    category: str
    severity: Severity
    description: str
    rationale: str
    impact: str
    source: str
    source_url: str
    good_examples: tuple[str, ...] = ()
    bad_examples: tuple[str, ...] = ()

    @property
    def fallback_recommendation(self) -> str:
        """Recommendation used when a failing check supplies none."""
        if self.good_examples:
            return self.good_examples[0]
        return f"Follow {self.source} guidelines."


@dataclass(frozen=True)
class RuleSource:
    """A named grouping of rules for one standard.

    An empty ``rule_ids`` selects every rule, not none.
    """
    id: str
    name: str
    organization: str
    description: str
    url: str
    rule_ids: tuple[str, ...] = ()

    def select(self, rules: Iterable[Rule]) -> list[Rule]:
        if not self.rule_ids:
            return list(rules)
        wanted = set(self.rule_ids)
        return [rule for rule in rules if rule.id in wanted]


@dataclass(frozen=True)
class FetchResult:
    """Body and headers of a fetched page."""
    html: str
    headers: httpx.Headers = field(default_factory=httpx.Headers)
    url: str = ""
    status_code: int = 200

    def __post_init__(self) -> None:
        if not isinstance(self.headers, httpx.Headers):
            object.__setattr__(self, "headers", httpx.Headers(self.headers))


@dataclass(frozen=True)
class Evidence:
    """Located snippet of markup supporting a verdict."""
    snippet: str
    line_number: int


@dataclass(frozen=True)
class Verdict:
    """Outcome of evaluating one rule."""
    passed: bool
    details: str
    recommendation: Optional[str] = None
    evidence: Optional[Evidence] = None


@dataclass
class Violation:
    """A failed rule merged with its verdict."""
    id: str
    rule_name: str
    category: str
    severity: Severity
    description: str
    details: str
    recommendation: str
    page: str
    rationale: Optional[str] = None
    impact: Optional[str] = None
    source: Optional[str] = None
    source_url: Optional[str] = None
    examples: list[str] = field(default_factory=list)
    code_snippet: Optional[str] = None
    line_number: Optional[int] = None

    @classmethod
    def from_verdict(cls, rule: Rule, verdict: Verdict, page: str) -> "Violation":
        evidence = verdict.evidence
        return cls(
            id=rule.id,
            rule_name=rule.name,
            category=rule.category,
            severity=rule.severity,
            description=rule.description,
            details=verdict.details,
            recommendation=verdict.recommendation or rule.fallback_recommendation,
            page=page,
            rationale=rule.rationale,
            impact=rule.impact,
            source=rule.source,
            source_url=rule.source_url,
            examples=list(rule.good_examples),
            code_snippet=evidence.snippet if evidence else None,
            line_number=evidence.line_number if evidence else None,
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "ruleName": self.rule_name,
            "category": self.category,
            "severity": self.severity.value,
            "description": self.description,
            "details": self.details,
            "rationale": self.rationale,
            "impact": self.impact,
            "source": self.source,
            "sourceUrl": self.source_url,
            "recommendation": self.recommendation,
            "examples": list(self.examples),
            "page": self.page,
            "codeSnippet": self.code_snippet,
            "lineNumber": self.line_number,
        }


@dataclass
class Summary:
    """Rule counts for one analysis."""
    total_rules: int = 0
    passed_rules: int = 0
    failed_rules: int = 0
    warning_rules: int = 0
    info_rules: int = 0

    def to_dict(self) -> dict[str, int]:
        return {
            "totalRules": self.total_rules,
            "passedRules": self.passed_rules,
            "failedRules": self.failed_rules,
            "warningRules": self.warning_rules,
            "infoRules": self.info_rules,
        }


@dataclass
class AnalysisResult:
    """Complete analysis result for a URL."""
    site_name: str
    site_url: str
    analyzed_at: str
    overall_score: int
    violations: list[Violation] = field(default_factory=list)
    recommendations: list[str] = field(default_factory=list)
    summary: Summary = field(default_factory=Summary)

    def to_dict(self) -> dict[str, Any]:
        """Render the JSON contract with camelCase keys."""
        return {
            "siteName": self.site_name,
            "siteUrl": self.site_url,
            "analyzedAt": self.analyzed_at,
            "overallScore": self.overall_score,
            "violations": [v.to_dict() for v in self.violations],
            "recommendations": list(self.recommendations),
            "summary": self.summary.to_dict(),
        }
