"""
Swift Evolution Proposals
=========================
Curated, read-only table of Swift Evolution proposals and the usage
examples shown for the most commonly asked-about features.
"""
from appledev.models.proposal import Proposal

_PROPOSALS_URL = "https://github.com/swiftlang/swift-evolution/blob/main/proposals"


def _proposal(id, title, swift_version, summary, doc, keywords, status="implemented"):
    return Proposal(
        id=id,
        title=title,
        status=status,
        swift_version=swift_version,
        summary=summary,
        link=f"{_PROPOSALS_URL}/{doc}",
        keywords=keywords,
    )


PROPOSALS: tuple[Proposal, ...] = (
    # Swift 6.0
    _proposal(
        "SE-0423", "Dynamic actor isolation enforcement from non-strict-concurrency contexts", "6.0",
        "Enforces actor isolation dynamically when called from contexts without strict concurrency checking.",
        "0423-dynamic-actor-isolation.md",
        ["actor", "isolation", "concurrency", "dynamic"],
    ),
    _proposal(
        "SE-0420", "Inheritance of actor isolation", "6.0",
        "Allows subclasses to inherit the actor isolation of their superclass methods.",
        "0420-inheritance-of-actor-isolation.md",
        ["actor", "isolation", "inheritance", "class"],
    ),
    _proposal(
        "SE-0414", "Region-based isolation", "6.0",
        "Introduces region-based isolation to allow more flexible data sharing across concurrency domains.",
        "0414-region-based-isolation.md",
        ["region", "isolation", "sendable", "concurrency"],
    ),
    _proposal(
        "SE-0411", "Isolated default value expressions", "6.0",
        "Allows default parameter values to be isolated to an actor.",
        "0411-isolated-default-values.md",
        ["default", "parameter", "actor", "isolation"],
    ),

    # Swift 5.10
    _proposal(
        "SE-0412", "Strict concurrency for global variables", "5.10",
        "Requires global and static variables to be isolated to a global actor or be Sendable.",
        "0412-strict-concurrency-for-global-variables.md",
        ["global", "static", "concurrency", "sendable", "strict"],
    ),
    _proposal(
        "SE-0401", "Remove Actor Isolation Inference caused by Property Wrappers", "5.10",
        "Property wrappers no longer infer actor isolation on the enclosing type.",
        "0401-remove-property-wrapper-isolation.md",
        ["property wrapper", "actor", "isolation", "inference"],
    ),

    # Swift 5.9
    _proposal(
        "SE-0395", "Observation", "5.9",
        "Introduces the @Observable macro for automatic change tracking in classes.",
        "0395-observability.md",
        ["@observable", "observable", "observation", "macro", "swiftui"],
    ),
    _proposal(
        "SE-0394", "Package Manager Support for Custom Macros", "5.9",
        "Allows Swift packages to define and distribute custom macros.",
        "0394-swiftpm-expression-macros.md",
        ["macro", "package", "spm", "swiftpm"],
    ),
    _proposal(
        "SE-0392", "Custom Actor Executors", "5.9",
        "Allows actors to customize their execution context.",
        "0392-custom-actor-executors.md",
        ["actor", "executor", "custom", "concurrency"],
    ),
    _proposal(
        "SE-0389", "Attached Macros", "5.9",
        "Macros that can be attached to declarations to generate additional code.",
        "0389-attached-macros.md",
        ["macro", "attached", "declaration", "codegen"],
    ),
    _proposal(
        "SE-0382", "Expression Macros", "5.9",
        "Macros that can be used in expression contexts (#stringify, etc.).",
        "0382-expression-macros.md",
        ["macro", "expression", "#", "freestanding"],
    ),
    _proposal(
        "SE-0380", "if and switch expressions", "5.9",
        "Allows if and switch to be used as expressions that return values.",
        "0380-if-switch-expressions.md",
        ["if", "switch", "expression", "return"],
    ),
    _proposal(
        "SE-0393", "Value and Type Parameter Packs", "5.9",
        "Introduces variadic generics via parameter packs.",
        "0393-parameter-packs.md",
        ["parameter pack", "variadic", "generic", "each", "repeat"],
    ),
    _proposal(
        "SE-0390", "Noncopyable structs and enums", "5.9",
        "Introduces ~Copyable types that cannot be implicitly copied.",
        "0390-noncopyable-structs-and-enums.md",
        ["noncopyable", "~copyable", "move", "consume", "ownership"],
    ),

    # Swift 5.7
    _proposal(
        "SE-0352", "Implicitly Opened Existentials", "5.7",
        "Existential types (any Protocol) can be implicitly opened when passed to generic functions.",
        "0352-implicit-open-existentials.md",
        ["existential", "any", "protocol", "generic", "open"],
    ),
    _proposal(
        "SE-0309", "Unlock existential types for all protocols", "5.7",
        "Any protocol can now be used as an existential type with 'any'.",
        "0309-unlock-existential-types-for-all-protocols.md",
        ["existential", "any", "protocol", "self", "associated type"],
    ),
    _proposal(
        "SE-0345", "if let shorthand for shadowing optionals", "5.7",
        "Allows 'if let x' as shorthand for 'if let x = x'.",
        "0345-if-let-shorthand.md",
        ["if let", "optional", "unwrap", "shorthand", "shadow"],
    ),
    _proposal(
        "SE-0326", "Enable multi-statement closure parameter/result type inference", "5.7",
        "Closures with multiple statements can now have their parameter/result types inferred.",
        "0326-extending-multi-statement-closure-type-inference.md",
        ["closure", "inference", "multi-statement", "type"],
    ),

    # nonisolated(unsafe) ships with SE-0412
    _proposal(
        "SE-0412", "nonisolated(unsafe)", "5.10",
        "Allows opting out of actor isolation checking for specific declarations when the "
        "programmer ensures thread safety manually.",
        "0412-strict-concurrency-for-global-variables.md",
        ["nonisolated", "unsafe", "actor", "isolation", "concurrency", "global"],
    ),

    _proposal(
        "SE-0413", "Typed throws", "6.0",
        "Allows functions to specify the exact error type they throw using 'throws(ErrorType)'.",
        "0413-typed-throws.md",
        ["throws", "typed throws", "error", "throwing", "typed"],
    ),
    _proposal(
        "SE-0377", "borrowing and consuming parameter ownership modifiers", "5.9",
        "Allows explicit control over parameter ownership with borrowing and consuming modifiers.",
        "0377-parameter-ownership-modifiers.md",
        ["borrowing", "consuming", "ownership", "parameter", "move"],
    ),
)


# ---------------------------------------------------------------------------
# Usage examples, keyed by the keyword that selects them
# ---------------------------------------------------------------------------
OBSERVABLE_EXAMPLE = """\
import Observation

@Observable
class CounterModel {
    var count = 0

    func increment() {
        count += 1
    }
}

// SwiftUI automatically tracks changes
struct CounterView: View {
    var model: CounterModel

    var body: some View {
        Text("Count: \\(model.count)")
        Button("Increment") {
            model.increment()
        }
    }
}
"""

NONISOLATED_EXAMPLE = """\
// nonisolated(unsafe) allows opting out of isolation checking
// Use only when you manually ensure thread safety

nonisolated(unsafe) var globalCache: [String: Data] = [:]

// Or on a property
actor DataManager {
    // This property is accessible without await
    // but YOU must ensure thread safety
    nonisolated(unsafe) var unsafeCache: [String: Data] = [:]
}
"""

TYPED_THROWS_EXAMPLE = """\
// Swift 6.0 Typed Throws
enum ValidationError: Error {
    case tooShort
    case invalidFormat
}

// Specify exact error type
func validate(_ input: String) throws(ValidationError) {
    guard input.count >= 3 else {
        throw .tooShort
    }
}

// Caller knows exactly what errors to handle
do {
    try validate("ab")
} catch .tooShort {
    print("Input is too short")
} catch .invalidFormat {
    print("Invalid format")
}
"""

PARAMETER_PACK_EXAMPLE = """\
// Parameter Packs (Variadic Generics)
func all<each T>(_ value: repeat each T) -> (repeat each T) {
    return (repeat each value)
}

// Works with any number of arguments
let result = all(1, "hello", 3.14)
// result is (Int, String, Double)

// Example: Type-safe zip
func zip<each T, each U>(
    _ first: repeat each T,
    _ second: repeat each U
) -> (repeat (each T, each U)) {
    return (repeat (each first, each second))
}
"""

IF_SWITCH_EXPRESSION_EXAMPLE = """\
// if/switch expressions (Swift 5.9+)
let value = if condition {
    "yes"
} else {
    "no"
}

// Works with switch too
let description = switch score {
    case 90...100: "Excellent"
    case 70..<90: "Good"
    case 50..<70: "Fair"
    default: "Needs improvement"
}
"""

NONCOPYABLE_EXAMPLE = """\
// Noncopyable types (~Copyable)
struct FileHandle: ~Copyable {
    private var fd: Int32

    init(path: String) {
        self.fd = open(path, O_RDONLY)
    }

    deinit {
        close(fd)
    }

    consuming func close() {
        close(fd)
        // self is consumed, cannot be used after
    }
}

// Cannot copy, only move
var handle = FileHandle(path: "/tmp/test")
let handle2 = consume handle  // handle is no longer valid
"""


def usage_example_for(proposal: Proposal) -> str:
    """Return the Swift example for a proposal, or "" when none is curated."""
    if proposal.has_keyword("@observable"):
        return OBSERVABLE_EXAMPLE
    if proposal.has_keyword("nonisolated"):
        return NONISOLATED_EXAMPLE
    if proposal.has_keyword("typed throws"):
        return TYPED_THROWS_EXAMPLE
    if proposal.has_keyword("parameter pack"):
        return PARAMETER_PACK_EXAMPLE
    if proposal.has_keyword("if") and proposal.has_keyword("expression"):
        return IF_SWITCH_EXPRESSION_EXAMPLE
    if proposal.has_keyword("noncopyable"):
        return NONCOPYABLE_EXAMPLE
    return ""
