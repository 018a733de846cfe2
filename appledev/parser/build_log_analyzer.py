"""
Build Log Analyzer
==================
Converts a raw Xcode / swiftc build log into a structured diagnostic Report.

Pipeline:
    1. Scan DIAGNOSTIC_RULES in declaration order
    2. Keep the first match of each rule (one Finding per rule, no early exit)
    3. Derive severity from the whole log
    4. Render findings, or the fallback analysis when nothing matched

Contract:
    - DETERMINISTIC: same log → same Report, same rendered text.
    - Regex pattern matching only; no compiler diagnostic parsing
      (no line / column extraction, repeated occurrences collapse).
    - Never raises for any string input. No match is a valid result.

Severity Policy:
    A finding is "warning" when the word "warning" appears anywhere in the
    log (case-insensitive), otherwise "error". The signal is global, so a
    log mixing errors and warnings labels every finding as a warning.
"""
import logging
from typing import Iterable, Optional

from appledev.core.constants import SEVERITY_ERROR, SEVERITY_WARNING
from appledev.core.report_formatter import render_report
from appledev.models.diagnostic_report import Finding, Report
from appledev.parser.diagnostic_rules import DIAGNOSTIC_RULES, Rule

logger = logging.getLogger(__name__)


def derive_severity(log_text: str) -> str:
    """Return the severity applied to every finding of this log."""
    return SEVERITY_WARNING if "warning" in log_text.lower() else SEVERITY_ERROR


def match_rules(
    log_text: str,
    rules: Iterable[Rule] = DIAGNOSTIC_RULES,
) -> list[Finding]:
    """
    Evaluate every rule against log_text and build one Finding per match.

    Parameters
    ----------
    log_text : str
        Build output to scan. May be empty.
    rules : Iterable[Rule]
        Ordered rule table; defaults to DIAGNOSTIC_RULES.

    Returns
    -------
    list[Finding]
        Findings in rule declaration order. Empty if nothing matched.
    """
    severity = derive_severity(log_text)
    findings: list[Finding] = []

    for rule in rules:
        match = rule.search(log_text)
        if match is None:
            continue
        findings.append(Finding(
            category=rule.category,
            severity=severity,
            matched_text=match.group(0),
            explanation=rule.explanation,
            remedies=list(rule.remedies),
            references=list(rule.references),
        ))

    return findings


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------
def diagnose(
    log_text: str,
    error_code: Optional[str] = None,
    context: Optional[str] = None,
) -> Report:
    """
    Analyse a build log into a Report.

    error_code and context are carried into the report header verbatim and
    never influence matching.
    """
    log_text = log_text or ""
    findings = match_rules(log_text)

    logger.info(
        "Matched %d rule(s) against build log (%d chars)",
        len(findings), len(log_text),
    )
    return Report(
        findings=findings,
        error_code=error_code,
        context=context,
        log_text=log_text,
    )


def analyze_build_log(
    log_text: str,
    error_code: Optional[str] = None,
    context: Optional[str] = None,
) -> str:
    """Diagnose a build log and render the Markdown report."""
    return render_report(diagnose(log_text, error_code, context))
