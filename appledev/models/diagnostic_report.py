"""
Diagnostic Report Models
========================
Pydantic models for the output of one build-log analysis.

Fields (Finding):
    category        — rule classification label (e.g. "Type Not Found")
    severity        — "error" or "warning", derived from the whole log
    matched_text    — literal substring the rule pattern matched
    explanation     — human-readable description of the cause
    remedies        — suggested fixes, most actionable first
    references      — documentation URLs

Fields (Report):
    findings        — one Finding per matched rule, in rule declaration order
    error_code      — optional caller annotation, rendered verbatim
    context         — optional caller annotation, rendered verbatim
    log_text        — the analysed input, needed by the fallback rendering
"""
from typing import List, Literal, Optional
from pydantic import BaseModel

Severity = Literal["error", "warning", "note"]


class Finding(BaseModel):
    category: str
    severity: Severity
    matched_text: str
    explanation: str
    remedies: List[str] = []
    references: List[str] = []


class Report(BaseModel):
    findings: List[Finding] = []
    error_code: Optional[str] = None
    context: Optional[str] = None
    log_text: str = ""

    @property
    def has_findings(self) -> bool:
        return len(self.findings) > 0
