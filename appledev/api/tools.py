"""
Tool Protocol Endpoints
=======================
Request/response surface for the three tools.

Routes:
    GET  /tools        — list tool names, descriptions and JSON input schemas
    POST /tools/call   — invoke one tool by name with an arguments object

Error Contract:
    Tool failures are reported in-band: the response carries a single text
    content item and isError=true, and the HTTP status stays 200.
        - unknown tool name          → "Unknown tool: <name>"
        - invalid arguments          → "Error executing <name>: <details>"
        - any exception from a tool  → "Error executing <name>: <details>"
"""
import logging
from dataclasses import dataclass
from typing import Any, Awaitable, Callable, Dict, List, Literal, Optional, Type

from fastapi import APIRouter
from pydantic import BaseModel, ConfigDict, Field

from appledev.parser.build_log_analyzer import analyze_build_log
from appledev.services.docs_service import fetch_docs
from appledev.services.evolution_service import check_feature

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Tools"])


# ---------------------------------------------------------------------------
# Tool argument schemas (wire names are camelCase)
# ---------------------------------------------------------------------------
class _ToolArgs(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore")


class FetchDocsArgs(_ToolArgs):
    query: str = Field(
        description="The API, framework, class, or symbol to search for "
                    "(e.g., 'NavigationStack', 'SwiftData', '@Observable')",
    )
    framework: Optional[str] = Field(
        default=None,
        description="Optional: Specific framework to search within "
                    "(e.g., 'SwiftUI', 'Foundation', 'UIKit')",
    )
    include_examples: bool = Field(
        default=True,
        alias="includeExamples",
        description="Whether to include code examples (default: true)",
    )


class AnalyzeBuildLogArgs(_ToolArgs):
    build_log: str = Field(
        alias="buildLog",
        description="The Xcode build log or error message to analyze",
    )
    error_code: Optional[str] = Field(
        default=None,
        alias="errorCode",
        description="Optional: Specific error code (e.g., 'cannot find type', 'ambiguous use of')",
    )
    context: Optional[str] = Field(
        default=None,
        description="Optional: Additional context about the project "
                    "(Swift version, target platform)",
    )


class EvolutionCheckArgs(_ToolArgs):
    feature: str = Field(
        description="The Swift feature or syntax to check "
                    "(e.g., 'nonisolated(unsafe)', 'typed throws')",
    )
    swift_version: Optional[str] = Field(
        default=None,
        alias="swiftVersion",
        description="Optional: Target Swift version to check compatibility (e.g., '5.9', '6.0')",
    )


# ---------------------------------------------------------------------------
# Handlers
# ---------------------------------------------------------------------------
async def _run_fetch_docs(args: FetchDocsArgs) -> str:
    return await fetch_docs(args.query, args.framework, args.include_examples)


async def _run_analyze_build_log(args: AnalyzeBuildLogArgs) -> str:
    return analyze_build_log(args.build_log, args.error_code, args.context)


async def _run_evolution_check(args: EvolutionCheckArgs) -> str:
    return check_feature(args.feature, args.swift_version)


# ---------------------------------------------------------------------------
# Registry
# ---------------------------------------------------------------------------
@dataclass(frozen=True)
class ToolDefinition:
    """A registered tool: wire name, description, argument model and handler."""
    name: str
    description: str
    args_model: Type[_ToolArgs]
    handler: Callable[[Any], Awaitable[str]]

    def input_schema(self) -> Dict[str, Any]:
        return self.args_model.model_json_schema(by_alias=True)


TOOLS: tuple[ToolDefinition, ...] = (
    ToolDefinition(
        name="fetch_latest_apple_docs",
        description=(
            "Fetches the latest Apple Developer Documentation for a specific API, "
            "framework, or symbol.\n\n"
            "Examples:\n"
            '- "NavigationStack" - SwiftUI navigation\n'
            '- "SwiftData" - Data persistence framework\n'
            '- "RealityKit" - AR/VR framework\n'
            '- "async/await" - Swift concurrency\n\n'
            "Returns official documentation summary, code examples, and availability information."
        ),
        args_model=FetchDocsArgs,
        handler=_run_fetch_docs,
    ),
    ToolDefinition(
        name="xcode_diagnostic_analyzer",
        description=(
            "Analyzes Xcode build logs and error messages, providing:\n"
            "- Error classification and explanation\n"
            "- Fix-it suggestions matching Apple's recommendations\n"
            "- Related documentation links\n"
            "- Common solutions for the specific error\n\n"
            "Supports Swift compiler errors, linker errors, and build system errors."
        ),
        args_model=AnalyzeBuildLogArgs,
        handler=_run_analyze_build_log,
    ),
    ToolDefinition(
        name="swift_evolution_check",
        description=(
            "Checks the status of Swift language features against Swift Evolution proposals.\n\n"
            "Use this to verify:\n"
            "- If a feature is available in a specific Swift version\n"
            "- The proposal number and status (implemented, in review, accepted)\n"
            "- Required compiler flags or availability annotations\n"
            "- Migration guidance from older syntax\n\n"
            "Examples: 'nonisolated(unsafe)', 'typed throws', 'parameter packs', 'macros'"
        ),
        args_model=EvolutionCheckArgs,
        handler=_run_evolution_check,
    ),
)

_TOOLS_BY_NAME: Dict[str, ToolDefinition] = {tool.name: tool for tool in TOOLS}


# ---------------------------------------------------------------------------
# Request / Response schemas
# ---------------------------------------------------------------------------
class ToolInfo(BaseModel):
    name: str
    description: str
    inputSchema: Dict[str, Any]


class ToolListResponse(BaseModel):
    tools: List[ToolInfo]


class ToolCallRequest(BaseModel):
    name: str
    arguments: Optional[Dict[str, Any]] = None


class TextContent(BaseModel):
    type: Literal["text"] = "text"
    text: str


class ToolCallResponse(BaseModel):
    content: List[TextContent]
    isError: bool = False


def _text_response(text: str, is_error: bool = False) -> ToolCallResponse:
    return ToolCallResponse(content=[TextContent(text=text)], isError=is_error)


# ---------------------------------------------------------------------------
# Dispatch
# ---------------------------------------------------------------------------
def list_tools() -> List[ToolInfo]:
    return [
        ToolInfo(name=t.name, description=t.description, inputSchema=t.input_schema())
        for t in TOOLS
    ]


async def call_tool(name: str, arguments: Optional[Dict[str, Any]] = None) -> ToolCallResponse:
    """
    Validate arguments and run one tool.

    Never raises: unknown names, validation failures and tool exceptions are
    all converted into an isError response.
    """
    tool = _TOOLS_BY_NAME.get(name)
    if tool is None:
        logger.warning("[TOOLS] Unknown tool requested: %s", name)
        return _text_response(f"Unknown tool: {name}", is_error=True)

    logger.info("[TOOLS] Calling %s", name)
    try:
        args = tool.args_model.model_validate(arguments or {})
        result = await tool.handler(args)
    except Exception as e:
        logger.error("[TOOLS] %s failed: %s", name, e, exc_info=True)
        return _text_response(f"Error executing {name}: {e}", is_error=True)

    return _text_response(result)


# ---------------------------------------------------------------------------
# Endpoints
# ---------------------------------------------------------------------------
@router.get("/tools", response_model=ToolListResponse)
async def get_tools():
    """List every registered tool with its input schema."""
    return ToolListResponse(tools=list_tools())


@router.post("/tools/call", response_model=ToolCallResponse)
async def post_tool_call(request: ToolCallRequest):
    """Invoke a tool by name; failures are reported with isError=true."""
    return await call_tool(request.name, request.arguments)
