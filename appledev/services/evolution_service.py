"""
Swift Evolution Service
=======================
Checks a Swift language feature against the curated proposal table.

Matching (case-insensitive, any of):
    - a proposal keyword is contained in the feature, or vice versa
    - the proposal title contains the feature
    - the proposal id equals the feature

Pure in-memory search: never fails, returns a "no match" template when the
table has no hit.
"""
import logging
import re
from typing import Iterable, Optional
from urllib.parse import quote

from appledev.models.proposal import Proposal
from appledev.services.evolution_proposals import PROPOSALS, usage_example_for

logger = logging.getLogger(__name__)


STATUS_MARKERS: dict[str, str] = {
    "implemented":   "✅",
    "accepted":      "🟢",
    "active-review": "🔵",
    "scheduled":     "📅",
    "returned":      "🔙",
    "rejected":      "❌",
    "withdrawn":     "⬅️",
}
UNKNOWN_STATUS_MARKER = "❓"

KNOWN_FEATURES: tuple[str, ...] = (
    "`@Observable` macro",
    "`nonisolated(unsafe)`",
    "Typed throws",
    "Parameter packs",
    "if/switch expressions",
    "Noncopyable types",
    "Actor isolation",
    "Macros",
)

_LEADING_INT = re.compile(r"\d+")


# ---------------------------------------------------------------------------
# Search
# ---------------------------------------------------------------------------
def proposal_matches(proposal: Proposal, feature: str) -> bool:
    needle = feature.lower()

    keyword_match = any(
        kw.lower() in needle or needle in kw.lower()
        for kw in proposal.keywords
    )
    title_match = needle in proposal.title.lower()
    id_match = proposal.id.lower() == needle

    return keyword_match or title_match or id_match


def find_proposals(
    feature: str,
    proposals: Iterable[Proposal] = PROPOSALS,
) -> list[Proposal]:
    """Return matching proposals in table order."""
    return [p for p in proposals if proposal_matches(p, feature)]


# ---------------------------------------------------------------------------
# Version comparison
# ---------------------------------------------------------------------------
def _parse_version(version: str) -> tuple[int, int]:
    parts = []
    for component in version.strip().split(".")[:2]:
        m = _LEADING_INT.match(component.strip())
        parts.append(int(m.group(0)) if m else 0)
    while len(parts) < 2:
        parts.append(0)
    return parts[0], parts[1]


def compare_versions(target: str, required: str) -> bool:
    """
    True when `target` is at least `required`, comparing major.minor.

    A missing minor component counts as 0, and so does any component that
    does not start with a digit.
    """
    return _parse_version(target) >= _parse_version(required)


# ---------------------------------------------------------------------------
# Rendering
# ---------------------------------------------------------------------------
def status_marker(status: str) -> str:
    return STATUS_MARKERS.get(status, UNKNOWN_STATUS_MARKER)


def _render_usage_example(proposal: Proposal) -> str:
    example = usage_example_for(proposal)
    if not example:
        return ""
    return f"**Usage Example:**\n\n```swift\n{example}```\n\n"


def format_matches(
    matches: list[Proposal],
    feature: str,
    target_version: Optional[str] = None,
) -> str:
    output = f'# Swift Evolution: "{feature}"\n\n'

    if target_version:
        output += f"**Target Swift Version:** {target_version}\n\n"

    output += f"## Found {len(matches)} Related Proposal(s)\n\n"

    for proposal in matches:
        output += f"### {status_marker(proposal.status)} {proposal.id}: {proposal.title}\n\n"
        output += "| Property | Value |\n"
        output += "|----------|-------|\n"
        output += f"| **Status** | {proposal.status} |\n"
        output += f"| **Swift Version** | {proposal.swift_version or 'N/A'} |\n"
        output += f"| **Proposal** | [{proposal.id}]({proposal.link}) |\n\n"

        output += f"**Summary:**\n{proposal.summary}\n\n"

        if target_version and proposal.swift_version:
            if compare_versions(target_version, proposal.swift_version):
                output += f"✅ **Available in Swift {target_version}**\n\n"
            else:
                output += (
                    f"⚠️ **Requires Swift {proposal.swift_version}** "
                    f"(you specified {target_version})\n\n"
                )

        output += _render_usage_example(proposal)
        output += "---\n\n"

    output += "## Resources\n\n"
    output += "- [Swift Evolution Dashboard](https://apple.github.io/swift-evolution/)\n"
    output += "- [Swift Evolution Proposals](https://github.com/swiftlang/swift-evolution/tree/main/proposals)\n"
    output += "- [Swift.org](https://www.swift.org/)\n"
    return output


def format_no_match(feature: str) -> str:
    # Same unreserved set as JavaScript's encodeURIComponent
    encoded = quote(feature, safe="!~*'()")

    output = f'# Swift Evolution: "{feature}"\n\n'
    output += "## ❓ No Exact Match Found\n\n"
    output += f'The feature "{feature}" wasn\'t found in the local Swift Evolution database.\n\n'

    output += "## Suggestions\n\n"
    output += "1. **Search Swift Evolution directly:**\n"
    output += f"   [apple.github.io/swift-evolution](https://apple.github.io/swift-evolution/?search={encoded})\n\n"
    output += "2. **Check the GitHub proposals:**\n"
    output += "   [github.com/swiftlang/swift-evolution](https://github.com/swiftlang/swift-evolution/tree/main/proposals)\n\n"
    output += "3. **Search Swift Forums:**\n"
    output += f"   [forums.swift.org](https://forums.swift.org/search?q={encoded})\n\n"

    output += "## Available Features in Database\n\n"
    output += "Some features I can check:\n"
    output += "".join(f"- {name}\n" for name in KNOWN_FEATURES)
    return output


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------
def check_feature(feature: str, target_version: Optional[str] = None) -> str:
    """
    Look up a Swift feature in the proposal table and render the result.

    Parameters
    ----------
    feature : str
        Feature or syntax to check (e.g. "typed throws", "SE-0413").
    target_version : str | None
        Swift version to check compatibility against (e.g. "5.9").

    Returns
    -------
    str
        Markdown summary of matching proposals, or the no-match template.
    """
    matches = find_proposals(feature)
    logger.info("Swift Evolution lookup %r matched %d proposal(s)", feature, len(matches))

    if not matches:
        return format_no_match(feature)
    return format_matches(matches, feature, target_version)
