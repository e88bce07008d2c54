"""
vue-hooks-plus MCP server over stdio
"""

import asyncio
import sys
from typing import List, Optional

import mcp.types as types
from mcp.server.lowlevel import Server
from mcp.server.stdio import stdio_server

from vue_hooks_mcp.config.config import MCPConfig, load_config
from vue_hooks_mcp.utils.logging import get_logger, setup_logging
from vue_hooks_mcp.utils.metrics import get_metrics_collector
from .dispatcher import ToolDispatcher
from .utils.github import ContentFetcher, GitHubClient
from .utils.registry import build_registry

logger = get_logger(__name__)


class HooksMCPServer:
    """MCP server exposing vue-hooks-plus source and demo tools"""

    def __init__(
        self,
        config: Optional[MCPConfig] = None,
        fetcher: Optional[ContentFetcher] = None,
    ):
        self.config = config or load_config()
        self.fetcher = fetcher or GitHubClient(self.config.github)
        self.registry = build_registry(self.fetcher)
        self.dispatcher = ToolDispatcher(self.registry)

        self.app = Server(self.config.server.name, version=self.config.server.version)
        self._register_handlers()

        logger.info(
            f"MCP server {self.config.server.name} {self.config.server.version} "
            f"initialized with tools: {', '.join(self.registry.names())}"
        )

    def _register_handlers(self):
        """Wire tools/list and tools/call to the dispatcher"""

        @self.app.list_tools()
        async def list_tools() -> List[types.Tool]:
            return [
                types.Tool(
                    name=descriptor.name,
                    description=descriptor.description,
                    inputSchema=descriptor.input_schema,
                )
                for descriptor in self.dispatcher.list_tools()
            ]

        # McpError must reach the session untouched to go out as a JSON-RPC error
        self.app.request_handlers[types.CallToolRequest] = self._handle_call_tool

    async def _handle_call_tool(
        self, request: types.CallToolRequest
    ) -> types.ServerResult:
        envelope = await self.dispatcher.call_tool(
            request.params.name, request.params.arguments
        )
        return types.ServerResult(
            types.CallToolResult(
                content=[
                    types.TextContent(type="text", text=item.text)
                    for item in envelope.content
                ],
                isError=False,
            )
        )

    def log_metrics_summary(self):
        """Log tool call counters and timings collected during this session"""
        collector = get_metrics_collector()
        calls = collector.get_metrics_summary("tool_call_count")
        errors = collector.get_metrics_summary("tool_error_count")
        performance = collector.get_performance_summary()

        logger.info(
            f"Tool calls: {calls['count']}, failed: {errors['count']} "
            f"(last {calls['window_minutes']} minutes)"
        )
        if performance["count"]:
            logger.info(
                f"Tool performance: success rate {performance['success_rate']:.2f}, "
                f"avg {performance['avg_duration']:.3f}s, "
                f"max {performance['max_duration']:.3f}s"
            )

    async def serve_stdio(self):
        """Serve requests on stdin/stdout until the client disconnects"""
        async with stdio_server() as (read_stream, write_stream):
            logger.info("Server running...")
            try:
                await self.app.run(
                    read_stream,
                    write_stream,
                    self.app.create_initialization_options(),
                )
            finally:
                self.log_metrics_summary()

    def run(self):
        """Run the MCP server"""
        asyncio.run(self.serve_stdio())


def main():
    """Main entry point"""
    config = load_config()
    setup_logging(config.logging)

    if not config.github.token:
        logger.error("GITHUB_TOKEN is not set; refusing to start")
        sys.exit(1)

    try:
        server = HooksMCPServer(config)
        server.run()
    except KeyboardInterrupt:
        logger.info("Server stopped by user")
    except Exception as e:
        logger.exception(f"MCP server error: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
