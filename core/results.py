"""Tool result envelopes.

Every tool invocation resolves to exactly one of the variants below. Expected
failures (HTTP status errors, transport errors, unknown tools, handler faults)
are values, not exceptions, so the dispatch boundary can handle them uniformly.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, ClassVar, Union

from mcp.types import CallToolResult, TextContent

from utils.response_utils import pretty_json


@dataclass(frozen=True)
class Success:
    body: Any
    kind: ClassVar[str] = "success"

    @property
    def is_error(self) -> bool:
        return False

    @property
    def text(self) -> str:
        return pretty_json(self.body)


@dataclass(frozen=True)
class HttpError:
    status: int
    body: Any
    kind: ClassVar[str] = "http_error"

    @property
    def is_error(self) -> bool:
        return True

    @property
    def text(self) -> str:
        return f"API Error {self.status}: {pretty_json(self.body)}"


@dataclass(frozen=True)
class NetworkError:
    message: str
    kind: ClassVar[str] = "network_error"

    @property
    def is_error(self) -> bool:
        return True

    @property
    def text(self) -> str:
        return f"Network Error: {self.message}"


@dataclass(frozen=True)
class UnknownTool:
    name: str
    kind: ClassVar[str] = "unknown_tool"

    @property
    def is_error(self) -> bool:
        return True

    @property
    def text(self) -> str:
        return f"Unknown tool: {self.name}"


@dataclass(frozen=True)
class HandlerFault:
    tool: str
    message: str
    kind: ClassVar[str] = "handler_fault"

    @property
    def is_error(self) -> bool:
        return True

    @property
    def text(self) -> str:
        return f"Error executing tool {self.tool}: {self.message}"


@dataclass(frozen=True)
class Combined:
    """Labeled sub-results of a composite tool, rendered in order.

    The combined result is an error as soon as one section is.
    """

    sections: tuple[tuple[str, "ToolResult"], ...]
    kind: ClassVar[str] = "combined"

    @classmethod
    def of(cls, *sections: tuple[str, "ToolResult"]) -> "Combined":
        if not sections:
            raise ValueError("Combined result needs at least one section")
        return cls(tuple(sections))

    @property
    def is_error(self) -> bool:
        return any(result.is_error for _, result in self.sections)

    @property
    def text(self) -> str:
        return "\n\n".join(f"{label}:\n{result.text}" for label, result in self.sections)


ToolResult = Union[Success, HttpError, NetworkError, UnknownTool, HandlerFault, Combined]


def to_call_tool_result(result: ToolResult) -> CallToolResult:
    """Render a result as the MCP envelope: one text block plus the error flag."""
    return CallToolResult(
        content=[TextContent(type="text", text=result.text)],
        isError=result.is_error,
    )
