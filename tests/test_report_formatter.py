"""
Unit Tests — Report Formatter
==============================
Validates the Markdown layouts of findings and fallback reports.
Assertions use exact substrings so layout drift is caught.
"""
from appledev.core.constants import EXCERPT_LIMIT, SEVERITY_MARKERS, TRUNCATION_MARKER
from appledev.core.report_formatter import (
    COMMON_FAILURE_CAUSES,
    FALLBACK_SUGGESTIONS,
    GENERAL_TROUBLESHOOTING,
    has_issue_markers,
    log_excerpt,
    render_finding,
    render_report,
    severity_marker,
)
from appledev.models.diagnostic_report import Finding, Report


def _finding(**overrides) -> Finding:
    data = dict(
        category="Linker Error",
        severity="error",
        matched_text="linker command failed",
        explanation="The linker couldn't find implementations.",
        remedies=["Link the framework", "Clean build folder"],
        references=["https://example.com/linking"],
    )
    data.update(overrides)
    return Finding(**data)


# ---------------------------------------------------------------------------
# 1. Helpers
# ---------------------------------------------------------------------------
class TestHelpers:

    def test_severity_markers(self):
        assert severity_marker("error") == SEVERITY_MARKERS["error"]
        assert severity_marker("warning") == SEVERITY_MARKERS["warning"]
        assert severity_marker("note") == SEVERITY_MARKERS["note"]

    def test_unknown_severity_renders_as_note(self):
        assert severity_marker("fatal") == SEVERITY_MARKERS["note"]

    def test_excerpt_short_log_unchanged(self):
        assert log_excerpt("short") == "short"

    def test_excerpt_long_log_truncated(self):
        log = "a" * (EXCERPT_LIMIT + 1)
        assert log_excerpt(log) == "a" * EXCERPT_LIMIT + TRUNCATION_MARKER

    def test_issue_markers_case_insensitive(self):
        assert has_issue_markers("Error: x")
        assert has_issue_markers("WARNING: y")
        assert not has_issue_markers("error without colon")
        assert not has_issue_markers("")


# ---------------------------------------------------------------------------
# 2. Finding block
# ---------------------------------------------------------------------------
class TestRenderFinding:

    def test_exact_block(self):
        block = render_finding(2, _finding())
        assert block == (
            "### 🔴 2. Linker Error\n\n"
            "**Message:**\n```\nlinker command failed\n```\n\n"
            "**Explanation:**\nThe linker couldn't find implementations.\n\n"
            "**Fix-it Suggestions:**\n"
            "- Link the framework\n"
            "- Clean build folder\n"
            "\n"
            "**Related Documentation:**\n"
            "- [https://example.com/linking](https://example.com/linking)\n"
            "\n"
            "---\n\n"
        )

    def test_references_omitted_when_empty(self):
        block = render_finding(1, _finding(references=[]))
        assert "Related Documentation" not in block
        assert block.endswith("- Clean build folder\n\n---\n\n")

    def test_remedy_order_preserved(self):
        block = render_finding(1, _finding(remedies=["b", "a", "c"]))
        assert block.index("- b") < block.index("- a") < block.index("- c")


# ---------------------------------------------------------------------------
# 3. Report layouts
# ---------------------------------------------------------------------------
class TestRenderReport:

    def test_findings_numbered_in_order(self):
        report = Report(findings=[
            _finding(category="Type Not Found"),
            _finding(category="Linker Error", severity="warning"),
        ])
        text = render_report(report)
        assert "## Found 2 Issue(s)" in text
        assert text.index("### 🔴 1. Type Not Found") < text.index("### 🟡 2. Linker Error")

    def test_findings_report_ends_with_troubleshooting(self):
        text = render_report(Report(findings=[_finding()]))
        expected_tail = "## General Troubleshooting\n\n" + "".join(
            f"{line}\n" for line in GENERAL_TROUBLESHOOTING
        )
        assert text.endswith(expected_tail)

    def test_header_annotations_optional(self):
        text = render_report(Report(findings=[_finding()]))
        assert "**Context:**" not in text
        assert "**Error Code:**" not in text

    def test_fallback_static_blocks(self):
        text = render_report(Report(log_text=""))
        for line in FALLBACK_SUGGESTIONS:
            assert line in text
        for cause in COMMON_FAILURE_CAUSES:
            assert f"- {cause}\n" in text

    def test_fallback_header_carries_context(self):
        text = render_report(Report(log_text="", context="Xcode 16"))
        assert text.startswith("# Build Log Analysis\n\n**Context:** Xcode 16\n\n")
