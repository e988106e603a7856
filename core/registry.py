from __future__ import annotations

import inspect
import logging
import pkgutil
from importlib import import_module
from types import ModuleType
from typing import Annotated, Any, Iterable, Mapping, Optional

from mcp.server.fastmcp import FastMCP
from pydantic import BaseModel, Field, ValidationError

from core.models import ToolDefinition, ToolInput  # type: ignore
from core.results import HandlerFault, ToolResult, UnknownTool, to_call_tool_result  # type: ignore
from core.transport import ApiClient  # type: ignore

logger = logging.getLogger(__name__)

TOOLS_PACKAGE = "tools"


def discover_tools(package: str = TOOLS_PACKAGE) -> list[ToolDefinition]:
    """Import every public module of `package` and collect its `get_tools()` definitions."""
    pkg = import_module(package)
    definitions: list[ToolDefinition] = []
    for _, name, _ in sorted(pkgutil.iter_modules(pkg.__path__), key=lambda m: m.name):
        if name.startswith("_"):
            continue
        mod: ModuleType = import_module(f"{package}.{name}")
        if not hasattr(mod, "get_tools"):
            logger.debug(f"Module {mod.__name__} exposes no get_tools(); skipping")
            continue
        tools = list(mod.get_tools())
        logger.info(f"Imported tools module: {mod.__name__} ({len(tools)} tools)")
        definitions.extend(tools)
    return definitions


class ToolRegistry:
    """Static table of tools, keyed by name, bound to one ApiClient."""

    def __init__(self, client: ApiClient, definitions: Optional[Iterable[ToolDefinition]] = None):
        self.client = client
        self._tools: dict[str, ToolDefinition] = {}
        for definition in discover_tools() if definitions is None else definitions:
            if definition.name in self._tools:
                raise ValueError(f"Duplicate tool name: {definition.name}")
            self._tools[definition.name] = definition

    @property
    def names(self) -> list[str]:
        return list(self._tools)

    def get(self, name: str) -> Optional[ToolDefinition]:
        return self._tools.get(name)

    def __len__(self) -> int:
        return len(self._tools)

    def __contains__(self, name: object) -> bool:
        return name in self._tools

    async def dispatch(self, name: str, arguments: Optional[Mapping[str, Any]] = None) -> ToolResult:
        """Run the named tool. Never raises: every failure comes back as an error result."""
        definition = self._tools.get(name)
        if definition is None:
            logger.warning(f"Call to unknown tool {name!r}")
            return UnknownTool(name)

        logger.info(f"Calling tool {name}")
        try:
            request = definition.parse(arguments)
            result = await definition.handler(self.client, request)
        except ValidationError as e:
            logger.warning(f"Invalid arguments for tool {name}: {e}")
            return HandlerFault(name, _validation_message(e))
        except Exception as e:
            logger.exception(f"Tool {name} failed")
            return HandlerFault(name, str(e) or type(e).__name__)

        if result.is_error:
            logger.info(f"Tool {name} returned an error result ({result.kind})")
        return result

    def register_with(self, mcp: FastMCP) -> list[str]:
        """Add every tool to a FastMCP server, returning the registered names."""
        registered: list[str] = []
        for definition in self._tools.values():
            mcp.add_tool(
                self._make_wrapper(definition),
                name=definition.name,
                title=definition.title,
                description=definition.description,
            )
            logger.info(f"Added tool via add_tool: {definition.name} (title={definition.title})")
            registered.append(definition.name)
        return registered

    def _make_wrapper(self, definition: ToolDefinition):
        name = definition.name

        async def _wrapped(**call_kwargs):
            arguments = {k: _plain(v) for k, v in call_kwargs.items() if v is not None}
            return to_call_tool_result(await self.dispatch(name, arguments))

        # FastMCP derives the published input schema from this signature
        _wrapped.__signature__ = signature_for(definition.input_model)
        _wrapped.__name__ = name
        _wrapped.__doc__ = definition.description
        return _wrapped


def signature_for(model: type[ToolInput]) -> inspect.Signature:
    """Build a keyword-only signature mirroring the fields of `model`."""
    params = []
    for field_name, info in model.model_fields.items():
        annotation = Annotated[(info.annotation, *info.metadata, Field(description=info.description))]
        default = inspect.Parameter.empty if info.is_required() else info.default
        params.append(
            inspect.Parameter(field_name, inspect.Parameter.KEYWORD_ONLY, default=default, annotation=annotation)
        )
    return inspect.Signature(parameters=params)


def _plain(value: Any) -> Any:
    if isinstance(value, BaseModel):
        return value.model_dump(mode="json", exclude_none=True)
    return value


def _validation_message(error: ValidationError) -> str:
    parts = []
    for err in error.errors():
        loc = ".".join(str(p) for p in err.get("loc", ())) or "arguments"
        parts.append(f"{loc}: {err.get('msg')}")
    return "invalid arguments (" + "; ".join(parts) + ")"
