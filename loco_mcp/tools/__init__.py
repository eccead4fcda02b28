# tools package for MCP server tools
# Modules in this package expose `get_tools() -> dict[str, dict]` mapping tool names to
# {"func": async callable, "title": str, "description": str}.
# The server imports every module here not starting with "_" and registers the returned tools.
__all__ = []
