"""MCP server serving vue-hooks-plus hook sources and playground demos"""

__version__ = "1.0.0"
