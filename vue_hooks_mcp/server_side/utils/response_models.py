"""
Response Models For MCP Tools

"""

import json
from typing import Any, List, Literal

from pydantic import BaseModel, Field


class TextContent(BaseModel):
    type: Literal["text"] = "text"
    text: str


class ResponseEnvelope(BaseModel):
    content: List[TextContent] = Field(..., description="Ordered content items")


def create_success_response(data: Any) -> ResponseEnvelope:
    """
    Wrap a handler result into a single text item.

    Strings are passed through as-is, anything else is pretty-printed JSON.
    """
    if isinstance(data, str):
        text = data
    else:
        text = json.dumps(data, indent=2, ensure_ascii=False)
    return ResponseEnvelope(content=[TextContent(text=text)])
