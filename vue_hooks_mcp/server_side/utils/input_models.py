"""
Input Models For MCP Tools

"""

from pydantic import BaseModel, Field

HOOK_NAME_DESCRIPTION = 'Name of the vue-hooks-plus hook (e.g., "useRequest","useBoolean")'


class HookNameInput(BaseModel):
    hookName: str = Field(..., min_length=1, description=HOOK_NAME_DESCRIPTION)
