"""
Tool call dispatch: resolve, validate, execute and normalise errors
"""

from typing import Any, Mapping, Optional, Tuple

from mcp.shared.exceptions import McpError
from mcp.types import INTERNAL_ERROR, INVALID_PARAMS, ErrorData

from vue_hooks_mcp.utils.logging import get_logger
from vue_hooks_mcp.utils.metrics import record_metric, time_operation
from .utils.registry import ToolDescriptor, ToolRegistry
from .utils.response_models import ResponseEnvelope, create_success_response
from .utils.validation import ParameterValidationError, validate_params

logger = get_logger(__name__)


def _describe_error(error: BaseException) -> str:
    return str(error) or error.__class__.__name__


class ToolDispatcher:
    """Routes tools/call requests to the handlers of a ToolRegistry"""

    def __init__(self, registry: ToolRegistry):
        self.registry = registry

    def list_tools(self) -> Tuple[ToolDescriptor, ...]:
        return self.registry.descriptors()

    async def call_tool(
        self, name: Any, arguments: Optional[Mapping[str, Any]] = None
    ) -> ResponseEnvelope:
        """
        Run one tool call.

        Args:
            name: tool name from the request
            arguments: raw tool arguments
        Returns:
            ResponseEnvelope with a single text item
        Raises:
            McpError: INVALID_PARAMS for bad names or arguments, INTERNAL_ERROR
                for any other failure. Handler McpErrors pass through unchanged.
        """
        try:
            return await self._call_tool(name, arguments)
        except McpError as e:
            # single log point for failed calls; internal errors carry the cause
            logger.error(
                f"Tool call {name!r} failed: [{e.error.code}] {e.error.message}",
                exc_info=e.__cause__ if e.error.code == INTERNAL_ERROR else None,
            )
            record_metric("tool_error_count", 1, {"tool": str(name)})
            raise

    async def _call_tool(
        self, name: Any, arguments: Optional[Mapping[str, Any]]
    ) -> ResponseEnvelope:
        if not name or not isinstance(name, str):
            raise McpError(
                ErrorData(code=INVALID_PARAMS, message="Tool name is required")
            )

        definition = self.registry.get(name)
        if definition is None:
            raise McpError(
                ErrorData(code=INVALID_PARAMS, message=f"Tool not found: {name}")
            )

        record_metric("tool_call_count", 1, {"tool": name})

        try:
            params = validate_params(definition, arguments)
            with time_operation(f"tool_{name}"):
                result = await definition.handler(params)
        except ParameterValidationError as e:
            raise McpError(
                ErrorData(
                    code=INVALID_PARAMS, message=f"Invalid parameters: {e.message}"
                )
            ) from e
        except McpError:
            raise
        except Exception as e:
            raise McpError(
                ErrorData(
                    code=INTERNAL_ERROR,
                    message=f"Error executing tool: {_describe_error(e)}",
                )
            ) from e

        return create_success_response(result)
