"""MCP server exposing the Loco translation-management API as tools."""

__version__ = "1.1.0"
