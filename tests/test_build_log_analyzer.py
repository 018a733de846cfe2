"""
Unit Tests — Build Log Analyzer
================================
Tests for the rule table, ordered rule matching, the global severity
policy, the fallback analysis and rendering determinism.

No network or server required.
"""
import dataclasses
import re

import pytest

from appledev.core.constants import TRUNCATION_MARKER
from appledev.parser.build_log_analyzer import (
    analyze_build_log,
    derive_severity,
    diagnose,
    match_rules,
)
from appledev.parser.diagnostic_rules import DIAGNOSTIC_RULES, Rule, rule_categories


EXPECTED_CATEGORIES = [
    "Type Not Found",
    "Symbol Not Found",
    "Member Not Found",
    "Type Mismatch",
    "Ambiguous Reference",
    "Missing Argument",
    "Unresolved Identifier",
    "Protocol Conformance Error",
    "Missing Try Keyword",
    "Mutability Error",
    "Actor Isolation Error",
    "Linker Error",
    "Main Actor Isolation",
    "Sendable Conformance Error",
]


# ===========================================================================
# 1. Rule table
# ===========================================================================
class TestRuleTable:

    def test_declaration_order(self):
        assert rule_categories() == EXPECTED_CATEGORIES

    def test_table_is_immutable_tuple(self):
        assert isinstance(DIAGNOSTIC_RULES, tuple)
        for rule in DIAGNOSTIC_RULES:
            assert isinstance(rule.remedies, tuple)
            assert isinstance(rule.references, tuple)

    def test_rules_are_frozen(self):
        with pytest.raises(dataclasses.FrozenInstanceError):
            DIAGNOSTIC_RULES[0].category = "Changed"

    def test_patterns_are_case_insensitive(self):
        for rule in DIAGNOSTIC_RULES:
            assert rule.pattern.flags & re.IGNORECASE

    def test_every_rule_has_remedies_and_references(self):
        for rule in DIAGNOSTIC_RULES:
            assert rule.remedies, f"{rule.category} has no remedies"
            assert rule.references, f"{rule.category} has no references"


# ===========================================================================
# 2. Per-rule recognition
# ===========================================================================
RULE_SAMPLES = [
    ("cannot find type 'Foo' in scope", "Type Not Found"),
    ("cannot find 'bar' in scope", "Symbol Not Found"),
    ("value of type 'String' has no member 'foo'", "Member Not Found"),
    ("cannot convert value of type 'Int' to expected argument type 'String'", "Type Mismatch"),
    ("ambiguous use of 'init'", "Ambiguous Reference"),
    ("missing argument for parameter 'name' in call", "Missing Argument"),
    ("use of unresolved identifier 'foo'", "Unresolved Identifier"),
    ("type 'Foo' does not conform to protocol 'Codable'", "Protocol Conformance Error"),
    ("call can throw, but it is not marked with 'try' and the error is not handled",
     "Missing Try Keyword"),
    ("cannot use mutating member on immutable value: 'self' is immutable", "Mutability Error"),
    ("actor-isolated property 'count' can not be referenced from a non-isolated context",
     "Actor Isolation Error"),
    ("clang: error: linker command failed with exit code 1", "Linker Error"),
    ("Undefined symbols for architecture arm64:", "Linker Error"),
    ("call to main actor-isolated instance method 'update()' in a synchronous context",
     "Main Actor Isolation"),
    ("capture of 'self' with non-sendable type 'Model' in a concurrently-executing closure",
     "Sendable Conformance Error"),
]


class TestRuleRecognition:

    @pytest.mark.parametrize("log, category", RULE_SAMPLES)
    def test_sample_matches_only_its_rule(self, log, category):
        findings = match_rules(log)
        assert [f.category for f in findings] == [category]

    def test_matching_is_case_insensitive(self):
        findings = match_rules("CANNOT FIND TYPE 'Foo' IN SCOPE")
        assert [f.category for f in findings] == ["Type Not Found"]

    def test_matching_is_unanchored(self):
        log = "/src/App.swift:12:5: error: cannot find type 'Foo' in scope\n    let x: Foo"
        findings = match_rules(log)
        assert findings[0].matched_text == "cannot find type 'Foo' in scope"

    def test_rule_search_returns_none_without_match(self):
        rule: Rule = DIAGNOSTIC_RULES[0]
        assert rule.search("nothing to see here") is None


# ===========================================================================
# 3. Diagnose
# ===========================================================================
class TestDiagnose:

    def test_type_not_found_scenario(self):
        report = diagnose("error: cannot find type 'Foo' in scope")
        assert len(report.findings) == 1
        f = report.findings[0]
        assert f.category == "Type Not Found"
        assert f.severity == "error"
        assert f.matched_text == "cannot find type 'Foo' in scope"

    def test_symbol_not_found_warning_scenario(self):
        report = diagnose("warning: cannot find 'bar' in scope")
        assert len(report.findings) == 1
        assert report.findings[0].category == "Symbol Not Found"
        assert report.findings[0].severity == "warning"

    def test_findings_follow_rule_order_not_text_order(self):
        log = (
            "ld: Undefined symbols for architecture arm64\n"
            "clang: error: linker command failed with exit code 1\n"
            "App.swift:3:9: error: cannot find type 'Widget' in scope\n"
        )
        categories = [f.category for f in diagnose(log).findings]
        assert categories == ["Type Not Found", "Linker Error"]

    def test_one_finding_per_rule_with_first_match_text(self):
        log = (
            "error: cannot find type 'First' in scope\n"
            "error: cannot find type 'Second' in scope\n"
        )
        findings = diagnose(log).findings
        assert len(findings) == 1
        assert findings[0].matched_text == "cannot find type 'First' in scope"

    def test_overlapping_rules_both_report(self):
        log = (
            "error: actor-isolated property 'count' can not be mutated from "
            "the main actor-isolated context"
        )
        categories = [f.category for f in diagnose(log).findings]
        assert categories == ["Actor Isolation Error", "Main Actor Isolation"]

    def test_multiple_unrelated_errors_all_reported(self):
        log = "\n".join(sample for sample, _ in RULE_SAMPLES)
        categories = [f.category for f in diagnose(log).findings]
        assert categories == EXPECTED_CATEGORIES

    def test_finding_count_equals_matching_rules(self):
        log = "ambiguous use of 'map'\nuse of unresolved identifier 'x'\nall good"
        expected = sum(1 for rule in DIAGNOSTIC_RULES if rule.search(log))
        assert len(diagnose(log).findings) == expected == 2

    def test_annotations_do_not_affect_matching(self):
        plain = diagnose("cannot find 'bar' in scope")
        annotated = diagnose(
            "cannot find 'bar' in scope",
            error_code="cannot find type 'X' in scope",
            context="linker command failed",
        )
        assert plain.findings == annotated.findings
        assert annotated.error_code == "cannot find type 'X' in scope"
        assert annotated.context == "linker command failed"

    def test_empty_log_has_no_findings(self):
        report = diagnose("")
        assert report.findings == []
        assert not report.has_findings

    def test_none_log_treated_as_empty(self):
        assert diagnose(None).findings == []


# ===========================================================================
# 4. Severity policy
# ===========================================================================
class TestSeverity:

    def test_error_without_warning_word(self):
        assert derive_severity("error: something broke") == "error"

    def test_warning_word_anywhere(self):
        assert derive_severity("build finished\nWARNING issued earlier") == "warning"

    def test_global_policy_applies_to_every_finding(self):
        log = (
            "error: cannot find type 'Foo' in scope\n"
            "error: linker command failed with exit code 1\n"
            "warning: variable 'x' was never used\n"
        )
        findings = diagnose(log).findings
        assert len(findings) == 2
        assert all(f.severity == "warning" for f in findings)

    def test_warning_without_colon_still_counts(self):
        findings = diagnose("cannot find 'x' in scope (see warnings above)").findings
        assert findings[0].severity == "warning"


# ===========================================================================
# 5. Rendered analysis
# ===========================================================================
class TestAnalyzeBuildLog:

    def test_findings_report_layout(self):
        text = analyze_build_log("error: cannot find type 'Foo' in scope")
        assert text.startswith("# Xcode Build Diagnostic Analysis\n\n")
        assert "## Found 1 Issue(s)" in text
        assert "### 🔴 1. Type Not Found" in text
        assert "```\ncannot find type 'Foo' in scope\n```" in text
        assert "## General Troubleshooting" in text

    def test_warning_marker_in_title(self):
        text = analyze_build_log("warning: cannot find 'bar' in scope")
        assert "### 🟡 1. Symbol Not Found" in text

    def test_empty_log_gives_no_clear_errors(self):
        text = analyze_build_log("")
        assert text.startswith("# Build Log Analysis\n\n")
        assert "No Clear Errors Detected" in text
        assert "Raw Log" not in text
        assert "## Suggestions" in text
        assert "## Common Build Failure Causes" in text

    def test_log_without_markers_gives_no_clear_errors(self):
        text = analyze_build_log("Build succeeded\n** BUILD SUCCEEDED **")
        assert "No Clear Errors Detected" in text

    def test_unmatched_error_marker_shows_excerpt(self):
        log = "ERROR: Provisioning profile doesn't include signing certificate"
        text = analyze_build_log(log)
        assert "Build Issues Detected" in text
        assert f"**Raw Log:**\n```\n{log}\n```" in text
        assert TRUNCATION_MARKER not in text

    def test_unmatched_warning_marker_shows_excerpt(self):
        text = analyze_build_log("warning: deployment target is too old")
        assert "Build Issues Detected" in text

    def test_long_unmatched_log_is_truncated(self):
        log = "error: " + "x" * 2500
        text = analyze_build_log(log)
        assert log[:2000] + TRUNCATION_MARKER in text
        assert log[:2001] not in text

    def test_log_of_exactly_limit_is_not_truncated(self):
        log = "error: " + "y" * (2000 - len("error: "))
        assert len(log) == 2000
        text = analyze_build_log(log)
        assert f"```\n{log}\n```" in text
        assert TRUNCATION_MARKER not in text

    def test_context_and_error_code_in_header(self):
        text = analyze_build_log(
            "cannot find 'bar' in scope",
            error_code="cannot find",
            context="Swift 6, iOS 18",
        )
        assert "**Error Code:** cannot find" in text
        assert "**Context:** Swift 6, iOS 18" in text

    def test_idempotent(self):
        log = "error: cannot find type 'Foo' in scope\nld: linker command failed"
        assert analyze_build_log(log, "E1", "ctx") == analyze_build_log(log, "E1", "ctx")

    def test_fallback_idempotent(self):
        assert analyze_build_log("error: ???") == analyze_build_log("error: ???")

    def test_never_crashes(self):
        text = analyze_build_log("!@#$%^&*()_+\x00\xff garbage data (((")
        assert isinstance(text, str)
