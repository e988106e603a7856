# tools package for MCP server tools
# Modules in this package expose `get_tools() -> list[ToolDefinition]`.
# The registry imports every module here whose name does not start with "_".
__all__ = []
