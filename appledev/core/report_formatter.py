"""
Report Formatter
================
THE SINGLE SOURCE OF TRUTH for the Markdown text of a diagnostic report.

STRICT DETERMINISM CONTRACT:
  - This module NEVER reads environment variables.
  - This module NEVER stamps dates or times.
  - Given the same Report, it ALWAYS returns the exact same string.

Two layouts:
  - Findings report  — one numbered block per Finding, then general tips.
  - Fallback report  — used when no rule matched; either "no clear errors"
                       or a raw log excerpt, then suggestions and common causes.
"""
import re

from appledev.core.constants import (
    ERROR_MARKER,
    EXCERPT_LIMIT,
    SEVERITY_MARKERS,
    SEVERITY_NOTE,
    TRUNCATION_MARKER,
    WARNING_MARKER,
)
from appledev.models.diagnostic_report import Finding, Report


# ---------------------------------------------------------------------------
# Static Blocks
# ---------------------------------------------------------------------------
GENERAL_TROUBLESHOOTING: tuple[str, ...] = (
    "1. **Clean Build:** Press `Cmd+Shift+K` to clean the build folder",
    "2. **Derived Data:** Delete `~/Library/Developer/Xcode/DerivedData`",
    "3. **SPM Cache:** Reset package caches via `File > Packages > Reset Package Caches`",
    "4. **Restart Xcode:** Sometimes a fresh start helps",
    "5. **Check Swift Version:** Ensure your Swift version matches the code requirements",
)

FALLBACK_SUGGESTIONS: tuple[str, ...] = (
    "1. **Check the full error message** in Xcode's Issue Navigator (Cmd+5)",
    "2. **Click on the error** to navigate to the problematic code",
    "3. **Read Xcode's Fix-it suggestions** (click the red/yellow indicator)",
    "4. **Search the error message** on developer.apple.com or forums",
)

COMMON_FAILURE_CAUSES: tuple[str, ...] = (
    "Missing import statements",
    "Syntax errors in Swift code",
    "Type mismatches",
    "Missing required frameworks",
    "Incorrect deployment target",
    "Code signing issues",
    "Swift version incompatibilities",
)

_ERROR_MARKER_RE = re.compile(re.escape(ERROR_MARKER), re.IGNORECASE)
_WARNING_MARKER_RE = re.compile(re.escape(WARNING_MARKER), re.IGNORECASE)


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------
def severity_marker(severity: str) -> str:
    """Return the coloured marker for a severity; unknown values render as notes."""
    return SEVERITY_MARKERS.get(severity, SEVERITY_MARKERS[SEVERITY_NOTE])


def log_excerpt(log_text: str, limit: int = EXCERPT_LIMIT) -> str:
    """First `limit` characters of the log, with a marker when truncated."""
    if len(log_text) > limit:
        return log_text[:limit] + TRUNCATION_MARKER
    return log_text


def has_issue_markers(log_text: str) -> bool:
    """True when the log carries an "error:" or "warning:" marker."""
    return bool(_ERROR_MARKER_RE.search(log_text) or _WARNING_MARKER_RE.search(log_text))


def _render_header(title: str, report: Report) -> str:
    output = f"# {title}\n\n"
    if report.error_code:
        output += f"**Error Code:** {report.error_code}\n\n"
    if report.context:
        output += f"**Context:** {report.context}\n\n"
    return output


def render_finding(index: int, finding: Finding) -> str:
    """Render one finding as a numbered block terminated by a rule delimiter."""
    output = f"### {severity_marker(finding.severity)} {index}. {finding.category}\n\n"
    output += f"**Message:**\n```\n{finding.matched_text}\n```\n\n"
    output += f"**Explanation:**\n{finding.explanation}\n\n"

    output += "**Fix-it Suggestions:**\n"
    for remedy in finding.remedies:
        output += f"- {remedy}\n"
    output += "\n"

    if finding.references:
        output += "**Related Documentation:**\n"
        for url in finding.references:
            output += f"- [{url}]({url})\n"
        output += "\n"

    output += "---\n\n"
    return output


# ---------------------------------------------------------------------------
# Layouts
# ---------------------------------------------------------------------------
def render_findings(report: Report) -> str:
    output = _render_header("Xcode Build Diagnostic Analysis", report)
    output += f"## Found {len(report.findings)} Issue(s)\n\n"

    for i, finding in enumerate(report.findings, start=1):
        output += render_finding(i, finding)

    output += "## General Troubleshooting\n\n"
    output += "".join(f"{line}\n" for line in GENERAL_TROUBLESHOOTING)
    return output


def render_fallback(report: Report) -> str:
    output = _render_header("Build Log Analysis", report)

    if not has_issue_markers(report.log_text):
        output += "## ✅ No Clear Errors Detected\n\n"
        output += "The build log doesn't contain obvious error or warning markers.\n\n"
    else:
        output += "## ⚠️ Build Issues Detected\n\n"
        output += f"**Raw Log:**\n```\n{log_excerpt(report.log_text)}\n```\n\n"

    output += "## Suggestions\n\n"
    output += "".join(f"{line}\n" for line in FALLBACK_SUGGESTIONS)
    output += "\n"

    output += "## Common Build Failure Causes\n\n"
    output += "".join(f"- {cause}\n" for cause in COMMON_FAILURE_CAUSES)
    return output


def render_report(report: Report) -> str:
    """
    Render a Report to Markdown.

    Uses the findings layout when at least one rule matched, the fallback
    layout otherwise. Never raises.
    """
    if report.has_findings:
        return render_findings(report)
    return render_fallback(report)
