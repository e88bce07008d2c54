"""
Static tool registry: what the server advertises and how each tool is run
"""

from dataclasses import dataclass
from functools import partial
from types import MappingProxyType
from typing import Any, Awaitable, Callable, Dict, Iterable, Optional, Tuple, Type

from pydantic import BaseModel

from .github import ContentFetcher
from .input_models import HookNameInput
from .tools_functions import _get_hook, _get_hook_demo

ToolHandler = Callable[[Any], Awaitable[Any]]


@dataclass(frozen=True)
class ToolDescriptor:
    """Public description of a tool, as returned by tools/list"""

    name: str
    description: str
    input_schema: Dict[str, Any]


@dataclass(frozen=True)
class ToolDefinition:
    """A descriptor together with its input model and handler"""

    descriptor: ToolDescriptor
    input_model: Optional[Type[BaseModel]]
    handler: ToolHandler

    @property
    def name(self) -> str:
        return self.descriptor.name


class ToolRegistry:
    """Read-only, ordered collection of tool definitions"""

    def __init__(self, definitions: Iterable[ToolDefinition]):
        tools: Dict[str, ToolDefinition] = {}
        for definition in definitions:
            if definition.name in tools:
                raise ValueError(f"Duplicate tool name: {definition.name}")
            tools[definition.name] = definition
        self._tools = MappingProxyType(tools)

    def __contains__(self, name: object) -> bool:
        return name in self._tools

    def __len__(self) -> int:
        return len(self._tools)

    def get(self, name: str) -> Optional[ToolDefinition]:
        return self._tools.get(name)

    def names(self) -> Tuple[str, ...]:
        return tuple(self._tools)

    def descriptors(self) -> Tuple[ToolDescriptor, ...]:
        return tuple(definition.descriptor for definition in self._tools.values())


def schema_for(input_model: Type[BaseModel]) -> Dict[str, Any]:
    """JSON schema advertised for a tool, derived from its input model"""
    schema = input_model.model_json_schema()
    schema.pop("title", None)
    for prop in schema.get("properties", {}).values():
        prop.pop("title", None)
    return schema


def define_tool(
    name: str,
    description: str,
    handler: ToolHandler,
    input_model: Optional[Type[BaseModel]] = None,
) -> ToolDefinition:
    """Build a ToolDefinition, generating the input schema from the model"""
    input_schema = (
        schema_for(input_model)
        if input_model is not None
        else {"type": "object", "properties": {}}
    )
    return ToolDefinition(
        descriptor=ToolDescriptor(
            name=name, description=description, input_schema=input_schema
        ),
        input_model=input_model,
        handler=handler,
    )


def build_registry(fetcher: ContentFetcher) -> ToolRegistry:
    """The tools this server exposes, with handlers bound to ``fetcher``"""
    return ToolRegistry(
        [
            define_tool(
                "get_hook",
                "Get the source code for a specific vue-hooks-plus hook",
                partial(_get_hook, fetcher=fetcher),
                HookNameInput,
            ),
            define_tool(
                "get_hook_demo",
                "Get demo code url for a specific vue-hooks-plus hook",
                partial(_get_hook_demo, fetcher=fetcher),
                HookNameInput,
            ),
        ]
    )
