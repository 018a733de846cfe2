"""
Constants
Centralised storage for report severities, fallback markers and excerpt limits.
"""
SEVERITY_ERROR = "error"
SEVERITY_WARNING = "warning"
SEVERITY_NOTE = "note"

SEVERITY_MARKERS = {
    SEVERITY_ERROR: "\U0001F534",
    SEVERITY_WARNING: "\U0001F7E1",
    SEVERITY_NOTE: "\U0001F535",
}

# Raw log excerpt shown when no rule matches
EXCERPT_LIMIT = 2000
TRUNCATION_MARKER = "\n...(truncated)"

ERROR_MARKER = "error:"
WARNING_MARKER = "warning:"
