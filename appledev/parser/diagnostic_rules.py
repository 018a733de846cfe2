"""
Diagnostic Rules
================
The curated table of known Swift / Xcode build-log signatures.

Each rule bundles:
    pattern      — compiled regex, case-insensitive, searched anywhere in the log
    category     — short classification label shown as the finding title
    explanation  — what usually causes the diagnostic
    remedies     — suggested fixes, most likely / most actionable first
    references   — documentation URLs

Ordering Contract:
    DIAGNOSTIC_RULES is scanned top-to-bottom and findings are reported in
    this order, regardless of where each pattern matched in the log.
    Declaration order is therefore the tie-break between overlapping rules.

The table is a tuple of frozen dataclasses built once at import time and
shared read-only by every request.
"""
import re
from dataclasses import dataclass
from typing import Optional


# ---------------------------------------------------------------------------
# Rule
# ---------------------------------------------------------------------------
@dataclass(frozen=True)
class Rule:
    """Immutable error/warning signature with its remediation bundle."""
    pattern: re.Pattern
    category: str
    explanation: str
    remedies: tuple[str, ...]
    references: tuple[str, ...] = ()

    def search(self, text: str) -> Optional[re.Match]:
        """Return the first match of this rule in text, or None."""
        return self.pattern.search(text)


def _rule(
    pattern: str,
    category: str,
    explanation: str,
    remedies: list[str],
    references: list[str],
) -> Rule:
    return Rule(
        pattern=re.compile(pattern, re.IGNORECASE),
        category=category,
        explanation=explanation,
        remedies=tuple(remedies),
        references=tuple(references),
    )


_SWIFT_BOOK = "https://docs.swift.org/swift-book/documentation/the-swift-programming-language"


# ---------------------------------------------------------------------------
# Rule Table
# ---------------------------------------------------------------------------
DIAGNOSTIC_RULES: tuple[Rule, ...] = (
    _rule(
        r"cannot find type '(\w+)' in scope",
        "Type Not Found",
        "The compiler cannot find a type with this name. This usually means the type "
        "isn't imported, doesn't exist, or is misspelled.",
        [
            "Import the module containing this type",
            "Check for typos in the type name",
            "Ensure the type is declared as public if it's from another module",
            "Add the framework to your target's dependencies",
        ],
        ["https://developer.apple.com/documentation/swift/importing_modules"],
    ),
    _rule(
        r"cannot find '(\w+)' in scope",
        "Symbol Not Found",
        "The compiler cannot find a variable, function, or other symbol with this name.",
        [
            "Check spelling of the identifier",
            "Ensure the symbol is declared before use",
            "Import the required module",
            "Check access control (private/internal/public)",
        ],
        [f"{_SWIFT_BOOK}/accesscontrol/"],
    ),
    _rule(
        r"value of type '(.+)' has no member '(\w+)'",
        "Member Not Found",
        "You're trying to access a property or method that doesn't exist on this type.",
        [
            "Check the API documentation for available members",
            "Ensure you're using the correct type",
            "The API might have been renamed or deprecated",
            "Check if you need to cast to a different type",
        ],
        ["https://developer.apple.com/documentation/"],
    ),
    _rule(
        r"cannot convert value of type '(.+)' to expected argument type '(.+)'",
        "Type Mismatch",
        "The types don't match - you're passing a value of one type where another "
        "type is expected.",
        [
            "Use explicit type conversion if appropriate",
            "Check if the API expects an optional type",
            "Use a different initializer or method",
            "Ensure generic type parameters match",
        ],
        [f"{_SWIFT_BOOK}/typecasting/"],
    ),
    _rule(
        r"ambiguous use of '(\w+)'",
        "Ambiguous Reference",
        "Multiple declarations match this name and the compiler can't determine which "
        "one to use.",
        [
            "Add explicit type annotations",
            "Use fully qualified names (Module.Type)",
            "Provide more context to help type inference",
            "Check for conflicting imports",
        ],
        [f"{_SWIFT_BOOK}/"],
    ),
    _rule(
        r"missing argument for parameter '(\w+)'",
        "Missing Argument",
        "A required parameter wasn't provided when calling a function or initializer.",
        [
            "Add the missing argument",
            "Check if there's an overload that doesn't require this parameter",
            "Provide a default value if creating your own function",
        ],
        [f"{_SWIFT_BOOK}/functions/"],
    ),
    _rule(
        r"use of unresolved identifier '(\w+)'",
        "Unresolved Identifier",
        "The compiler doesn't recognize this identifier in the current scope.",
        [
            "Declare the variable/constant before using it",
            "Check for typos",
            "Ensure proper scope (the declaration might be in a different scope)",
            "Import required modules",
        ],
        [f"{_SWIFT_BOOK}/declarations/"],
    ),
    _rule(
        r"type '(.+)' does not conform to protocol '(.+)'",
        "Protocol Conformance Error",
        "Your type declares conformance to a protocol but doesn't implement all "
        "required members.",
        [
            "Implement all required protocol methods and properties",
            "Check for method signature mismatches",
            "Add missing associated types",
            "Use protocol extension default implementations where available",
        ],
        [f"{_SWIFT_BOOK}/protocols/"],
    ),
    _rule(
        r"call can throw, but it is not marked with 'try'",
        "Missing Try Keyword",
        "You're calling a throwing function without the 'try' keyword.",
        [
            "Add 'try' before the throwing call",
            "Use 'try?' for optional result (returns nil on error)",
            "Use 'try!' if you're certain it won't throw (crashes on error)",
            "Wrap in do-catch block",
        ],
        [f"{_SWIFT_BOOK}/errorhandling/"],
    ),
    _rule(
        r"cannot use mutating member on immutable value",
        "Mutability Error",
        "You're trying to modify a value that is immutable (declared with 'let' or "
        "accessed through a non-mutating context).",
        [
            "Change 'let' to 'var' if the value should be mutable",
            "Mark the method as 'mutating' if in a struct",
            "Check if you're in a computed property or closure that captures self",
            "Use a class instead of struct if reference semantics are needed",
        ],
        [f"{_SWIFT_BOOK}/methods/"],
    ),
    _rule(
        r"actor-isolated property '(\w+)' can not be (mutated|referenced) from",
        "Actor Isolation Error",
        "You're trying to access actor-isolated state from outside the actor's context.",
        [
            "Use 'await' to access actor-isolated members",
            "Mark the calling function as 'async'",
            "Use 'nonisolated' for members that don't need isolation",
            "Consider if the member should be on a different actor",
        ],
        [f"{_SWIFT_BOOK}/concurrency/"],
    ),
    _rule(
        r"linker command failed|Undefined symbols? for architecture",
        "Linker Error",
        "The linker couldn't find implementations for referenced symbols. This is "
        "typically a configuration issue.",
        [
            "Ensure all required frameworks are linked in Build Phases",
            "Check that source files are added to the correct target",
            "Verify library search paths in Build Settings",
            "Clean build folder (Cmd+Shift+K) and rebuild",
        ],
        ["https://developer.apple.com/documentation/xcode/configuring-a-new-target-in-your-project"],
    ),
    _rule(
        r"main actor-isolated|@MainActor",
        "Main Actor Isolation",
        "Code must run on the main actor (main thread) for UI updates or accessing "
        "main-actor-isolated properties.",
        [
            "Add @MainActor to the enclosing type or function",
            "Use MainActor.run { } for isolated blocks",
            "Use 'await MainActor.run { }' from async context",
            "Check if the property needs main actor isolation",
        ],
        ["https://developer.apple.com/documentation/swift/mainactor"],
    ),
    _rule(
        r"'@Sendable' closure|capture of '(.+)' with non-sendable type",
        "Sendable Conformance Error",
        "A closure or type crossing concurrency boundaries must be Sendable to ensure "
        "thread safety.",
        [
            "Make the captured type conform to Sendable",
            "Use 'sending' parameter modifier (Swift 6)",
            "Capture only Sendable values in the closure",
            "Consider using an actor instead",
        ],
        [f"{_SWIFT_BOOK}/concurrency/"],
    ),
)


def rule_categories() -> list[str]:
    """Return rule categories in declaration order."""
    return [rule.category for rule in DIAGNOSTIC_RULES]
