"""
Documentation Catalog
=====================
Static lookup tables that turn a user query into Apple documentation paths.

Resolution order (see candidate_paths):
    1. Direct API mapping (e.g. "navigationstack" → "swiftui/navigationstack"),
       else "<framework>/<query>" when a framework was given
    2. Each documentation root registered for the given framework
    3. The common frameworks, in a fixed order

Paths are relative to APPLE_DOCS_API and carry no ".json" suffix.
"""
from typing import Optional


# ---------------------------------------------------------------------------
# Framework → documentation roots
# ---------------------------------------------------------------------------
FRAMEWORK_PATHS: dict[str, tuple[str, ...]] = {
    "swiftui":      ("swiftui",),
    "uikit":        ("uikit",),
    "foundation":   ("foundation",),
    "observation":  ("observation",),
    "swiftdata":    ("swiftdata",),
    "combine":      ("combine",),
    "realitykit":   ("realitykit",),
    "arkit":        ("arkit",),
    "coredata":     ("coredata",),
    "coreml":       ("coreml",),
    "mapkit":       ("mapkit",),
    "cloudkit":     ("cloudkit",),
    "healthkit":    ("healthkit",),
    "storekit":     ("storekit",),
    "avfoundation": ("avfoundation",),
    "swift":        ("swift", "observation"),
}

COMMON_FRAMEWORKS: tuple[str, ...] = (
    "swiftui", "foundation", "uikit", "observation", "swiftdata", "combine",
)


# ---------------------------------------------------------------------------
# Known API names → (framework, documentation path)
# ---------------------------------------------------------------------------
API_MAPPINGS: dict[str, tuple[str, str]] = {
    # SwiftUI
    "navigationstack":     ("swiftui", "swiftui/navigationstack"),
    "navigationlink":      ("swiftui", "swiftui/navigationlink"),
    "navigationpath":      ("swiftui", "swiftui/navigationpath"),
    "navigationsplitview": ("swiftui", "swiftui/navigationsplitview"),
    "list":                ("swiftui", "swiftui/list"),
    "form":                ("swiftui", "swiftui/form"),
    "sheet":               ("swiftui", "swiftui/view/sheet(ispresented:ondismiss:content:)"),
    "state":               ("swiftui", "swiftui/state"),
    "binding":             ("swiftui", "swiftui/binding"),
    "environment":         ("swiftui", "swiftui/environment"),
    "environmentobject":   ("swiftui", "swiftui/environmentobject"),
    "stateobject":         ("swiftui", "swiftui/stateobject"),
    "observedobject":      ("swiftui", "swiftui/observedobject"),
    "view":                ("swiftui", "swiftui/view"),
    "text":                ("swiftui", "swiftui/text"),
    "button":              ("swiftui", "swiftui/button"),
    "image":               ("swiftui", "swiftui/image"),
    "asyncimage":          ("swiftui", "swiftui/asyncimage"),
    "lazyvgrid":           ("swiftui", "swiftui/lazyvgrid"),
    "lazyhgrid":           ("swiftui", "swiftui/lazyhgrid"),
    "scrollview":          ("swiftui", "swiftui/scrollview"),
    "tabview":             ("swiftui", "swiftui/tabview"),
    "alert":               ("swiftui", "swiftui/view/alert(ispresented:content:)"),
    "toolbar":             ("swiftui", "swiftui/view/toolbar(content:)-5w0tj"),
    "searchable":          ("swiftui", "swiftui/view/searchable(text:placement:prompt:)"),
    "task":                ("swiftui", "swiftui/view/task(priority:_:)"),
    "onappear":            ("swiftui", "swiftui/view/onappear(perform:)"),
    "ondisappear":         ("swiftui", "swiftui/view/ondisappear(perform:)"),

    # Observation
    "observable":          ("observation", "observation/observable"),
    "@observable":         ("observation", "observation/observable()"),

    # SwiftData
    "@model":              ("swiftdata", "swiftdata/model()"),
    "modelcontainer":      ("swiftdata", "swiftdata/modelcontainer"),
    "modelcontext":        ("swiftdata", "swiftdata/modelcontext"),
    "@query":              ("swiftdata", "swiftdata/query"),

    # Combine
    "publisher":           ("combine", "combine/publisher"),
    "subject":             ("combine", "combine/subject"),
    "passthroughsubject":  ("combine", "combine/passthroughsubject"),
    "currentvaluesubject": ("combine", "combine/currentvaluesubject"),

    # Foundation
    "url":                 ("foundation", "foundation/url"),
    "urlsession":          ("foundation", "foundation/urlsession"),
    "data":                ("foundation", "foundation/data"),
    "date":                ("foundation", "foundation/date"),
    "userdefaults":        ("foundation", "foundation/userdefaults"),
    "notification":        ("foundation", "foundation/notification"),
    "notificationcenter":  ("foundation", "foundation/notificationcenter"),

    # UIKit
    "uiviewcontroller":       ("uikit", "uikit/uiviewcontroller"),
    "uitableview":            ("uikit", "uikit/uitableview"),
    "uicollectionview":       ("uikit", "uikit/uicollectionview"),
    "uinavigationcontroller": ("uikit", "uikit/uinavigationcontroller"),
}


def normalize_query(query: str) -> str:
    """Lowercase the query and drop a single leading '@'."""
    normalized = query.lower()
    if normalized.startswith("@"):
        normalized = normalized[1:]
    return normalized


def get_doc_path(query: str, framework: Optional[str] = None) -> Optional[str]:
    """
    Resolve the preferred documentation path for a query.

    Looks up the API mapping (plain, then '@'-prefixed) and falls back to
    "<framework>/<query>" when a framework is given. Returns None otherwise.
    """
    normalized = normalize_query(query)

    if normalized in API_MAPPINGS:
        return API_MAPPINGS[normalized][1]

    if f"@{normalized}" in API_MAPPINGS:
        return API_MAPPINGS[f"@{normalized}"][1]

    if framework:
        return f"{framework.lower()}/{normalized}"

    return None


def candidate_paths(query: str, framework: Optional[str] = None) -> list[str]:
    """Ordered, de-duplicated documentation paths to try for a query."""
    normalized = normalize_query(query)
    paths: list[str] = []

    direct = get_doc_path(query, framework)
    if direct:
        paths.append(direct)

    if framework:
        for root in FRAMEWORK_PATHS.get(framework.lower(), ()):
            paths.append(f"{root}/{normalized}")

    for root in COMMON_FRAMEWORKS:
        paths.append(f"{root}/{normalized}")

    seen: set[str] = set()
    unique: list[str] = []
    for path in paths:
        if path not in seen:
            seen.add(path)
            unique.append(path)
    return unique
