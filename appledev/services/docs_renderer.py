"""
Docs Renderer
=============
Turns Apple documentation JSON into Markdown, and provides the templated
fallbacks used when no live page is available.

Live pages end with a fetch-date footer, so their output is not stable
across days. The not-found and error templates are static.
"""
import re
from datetime import datetime, timezone
from typing import Any, Optional


QUICK_LINKS: tuple[tuple[str, str], ...] = (
    ("Apple Developer Documentation", "https://developer.apple.com/documentation/"),
    ("SwiftUI Documentation", "https://developer.apple.com/documentation/swiftui"),
    ("Swift Documentation", "https://developer.apple.com/documentation/swift"),
    ("WWDC Videos", "https://developer.apple.com/videos/"),
)


# ---------------------------------------------------------------------------
# Page accessors
# ---------------------------------------------------------------------------
def _section(doc: dict[str, Any], kind: str) -> Optional[dict[str, Any]]:
    for section in doc.get("primaryContentSections") or []:
        if isinstance(section, dict) and section.get("kind") == kind:
            return section
    return None


def doc_path_from_title(title: str, framework: str) -> str:
    """Best-effort public documentation path for a page title."""
    normalized_title = re.sub(r"[^a-z0-9]", "", title.lower())
    return f"{framework.lower()}/{normalized_title}"


def _render_inline(inline: dict[str, Any]) -> str:
    kind = inline.get("type")
    if kind == "text":
        return inline.get("text", "")
    if kind == "codeVoice":
        return f"`{inline.get('code', '')}`"
    if kind == "reference":
        identifier = inline.get("identifier") or ""
        return f"**{identifier.split('/')[-1]}**"
    return ""


def parse_content_section(content: list[Any]) -> str:
    """Render headings, paragraphs and code listings of a content section."""
    output = ""

    for item in content:
        if not isinstance(item, dict):
            continue
        kind = item.get("type")
        if kind == "heading":
            level = item.get("level") or 2
            output += f"{'#' * level} {item.get('text', '')}\n\n"
        elif kind == "paragraph":
            inlines = item.get("inlineContent") or []
            text = "".join(_render_inline(c) for c in inlines if isinstance(c, dict))
            output += f"{text}\n\n"
        elif kind == "codeListing":
            output += "```" + (item.get("syntax") or "swift") + "\n"
            output += "\n".join(item.get("code") or [])
            output += "\n```\n\n"

    return output


def extract_code_examples(doc: dict[str, Any]) -> list[str]:
    """Collect every code listing of the content section."""
    section = _section(doc, "content")
    if not section:
        return []
    return [
        "\n".join(item["code"])
        for item in section.get("content") or []
        if isinstance(item, dict) and item.get("type") == "codeListing" and item.get("code")
    ]


# ---------------------------------------------------------------------------
# Live page
# ---------------------------------------------------------------------------
def format_live_doc(doc: dict[str, Any], query: str, include_examples: bool = True) -> str:
    metadata = doc.get("metadata") or {}
    title = metadata.get("title") or query
    role_heading = metadata.get("roleHeading") or ""
    modules = metadata.get("modules") or []
    framework = (modules[0].get("name") or "") if modules else ""

    output = f"# 📚 Apple Developer Documentation: {title}\n\n"
    output += "> ✅ **Live documentation from developer.apple.com**\n\n"

    if role_heading:
        output += f"**Type:** {role_heading}\n"
    if framework:
        output += f"**Framework:** {framework}\n"

    platforms = metadata.get("platforms") or []
    if platforms:
        output += "**Availability:** "
        output += ", ".join(
            f"{p.get('name', '')} {p.get('introducedAt', '')}+" for p in platforms
        )
        output += "\n"

    output += (
        "**Documentation URL:** https://developer.apple.com/documentation/"
        f"{doc_path_from_title(title, framework)}\n\n"
    )

    declarations = _section(doc, "declarations")
    if declarations and declarations.get("declarations"):
        tokens = declarations["declarations"][0].get("tokens") or []
        output += "## Declaration\n\n"
        output += "```swift\n"
        output += "".join(t.get("text", "") for t in tokens)
        output += "\n```\n\n"

    abstract = doc.get("abstract") or []
    if abstract:
        output += "## Overview\n\n"
        output += "".join(a.get("text", "") for a in abstract) + "\n\n"

    content = _section(doc, "content")
    if content and content.get("content"):
        output += parse_content_section(content["content"])

    if include_examples:
        examples = extract_code_examples(doc)
        if examples:
            output += "## Code Examples\n\n"
            for example in examples:
                output += "```swift\n"
                output += example
                output += "\n```\n\n"

    fetched_on = datetime.now(timezone.utc).strftime("%Y-%m-%d")
    output += "---\n"
    output += f"*Documentation fetched live from Apple Developer on {fetched_on}*\n"
    return output


# ---------------------------------------------------------------------------
# Fallback templates
# ---------------------------------------------------------------------------
def format_not_found(query: str, framework: Optional[str] = None) -> str:
    output = f"# Apple Documentation: {query}\n\n"
    output += f'> ⚠️ Could not find live documentation for "{query}"'
    if framework:
        output += f" in {framework}"
    output += "\n\n"

    output += "## Suggestions\n\n"
    output += "1. Check the spelling of the API name\n"
    output += '2. Try specifying the framework (e.g., "SwiftUI")\n'
    output += '3. Use the full API name (e.g., "NavigationStack" instead of "navigation")\n\n'

    output += "## Quick Links\n\n"
    output += "".join(f"- [{name}]({url})\n" for name, url in QUICK_LINKS)
    return output


def format_error(query: str) -> str:
    output = f"# Apple Documentation: {query}\n\n"
    output += "> ❌ Error fetching documentation\n\n"
    output += "An error occurred while fetching documentation. Please try again.\n\n"
    output += "## Quick Links\n\n"
    name, url = QUICK_LINKS[0]
    output += f"- [{name}]({url})\n"
    return output
