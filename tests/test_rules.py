"""Tests for the rule catalog, rule sources and rule selection."""

import dataclasses

import pytest

from web_inspector.checks import CHECKS
from web_inspector.models import Severity
from web_inspector.rules import (
    RULE_SOURCES,
    RULES,
    RULES_BY_ID,
    get_rule,
    get_source,
    select_rules,
)


class TestCatalog:
    def test_ids_are_unique(self):
        ids = [rule.id for rule in RULES]
        assert len(ids) == len(set(ids))

    def test_catalog_size(self):
        assert len(RULES) == 80

    def test_every_rule_has_a_specific_check(self):
        assert {rule.id for rule in RULES} == set(CHECKS)

    def test_rules_are_immutable(self):
        with pytest.raises(dataclasses.FrozenInstanceError):
            RULES[0].severity = Severity.INFO

    def test_rules_are_complete(self):
        for rule in RULES:
            assert rule.name and rule.category and rule.description, rule.id
            assert rule.source and rule.source_url.startswith("https://"), rule.id
            assert rule.good_examples, rule.id

    def test_get_rule(self):
        assert get_rule("wcag-001").name == "Provide Text Alternatives for Non-Text Content"
        with pytest.raises(KeyError):
            get_rule("nope-001")

    def test_shadowed_checks_have_their_own_ids(self):
        assert RULES_BY_ID["html-004"].name == "Declare the HTML5 DOCTYPE"
        assert RULES_BY_ID["sec-005"].category == "Security"


class TestSources:
    def test_all_source_selects_everything(self):
        all_source = get_source("all")
        assert all_source.rule_ids == ()
        assert all_source.select(RULES) == list(RULES)

    def test_source_rule_ids_exist(self):
        for source in RULE_SOURCES:
            for rule_id in source.rule_ids:
                assert rule_id in RULES_BY_ID, f"{source.id} references unknown rule {rule_id}"

    def test_sources_cover_catalog(self):
        covered = {rule_id for source in RULE_SOURCES for rule_id in source.rule_ids}
        assert covered == set(RULES_BY_ID)

    def test_select_keeps_catalog_order(self):
        selected = get_source("security").select(RULES)
        assert [r.id for r in selected] == ["sec-001", "sec-002", "sec-003", "sec-004", "sec-005"]

    def test_unknown_source(self):
        with pytest.raises(KeyError):
            get_source("nope")


class TestSelectRules:
    @pytest.mark.parametrize("token", ["all", "", None])
    def test_everything(self, token):
        assert select_rules(token) == list(RULES)

    def test_id_prefix(self):
        selected = select_rules("wcag")
        assert [r.id for r in selected] == [f"wcag-00{i}" for i in range(1, 7)]

    def test_source_citation_is_case_insensitive(self):
        selected = select_rules("owasp")
        assert {r.id for r in selected} == {"sec-001", "sec-002", "sec-003", "sec-004", "sec-005"}

    def test_uppercase_token_still_matches_source(self):
        assert select_rules("WCAG") == select_rules("wcag")

    def test_union_of_prefix_and_source(self):
        selected = select_rules("lighthouse")
        ids = {r.id for r in selected}
        assert {"lighthouse-001", "lighthouse-002", "lighthouse-003", "lighthouse-004"} <= ids
        # perf-003 cites "Google Lighthouse - Render-Blocking Resources"
        assert "perf-003" in ids
        assert all(r.id.startswith("lighthouse") or "lighthouse" in r.source.lower() for r in selected)

    def test_catalog_order_preserved(self):
        selected = select_rules("google")
        positions = [RULES.index(rule) for rule in selected]
        assert positions == sorted(positions)

    def test_no_match(self):
        assert select_rules("no-such-token") == []

    def test_custom_rule_list(self):
        subset = RULES[:3]
        assert select_rules("all", rules=subset) == list(subset)
