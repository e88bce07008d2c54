"""
Functions that used in actual tool implementations

"""

import json
from typing import Any, Dict, Mapping, Union

from mcp.shared.exceptions import McpError
from mcp.types import INTERNAL_ERROR, INVALID_PARAMS, ErrorData

from .code import decode_github_content, encode_playground_payload
from .github import ContentFetcher
from .input_models import HookNameInput

REPO_OWNER = "NelsonYong"
REPO_NAME = "vue-hooks-plus"

HOOK_SOURCE_PATH = "packages/hooks/src/{hook_name}/index.ts"
HOOK_DEMO_PATH = "docs/demo/{hook_name}/demo.vue"

SFC_PLAYGROUND_URL = "https://sfc.vuejs.org/"
SFC_ENTRY_FILE = "App.vue"
SFC_IMPORT_MAP_FILE = "import-map.json"
SFC_PACKAGE_NAME = "vue-hooks-plus"
SFC_PACKAGE_CDN_URL = "https://cdn.jsdelivr.net/npm/vue-hooks-plus/dist/js/index.es.js"

# Demo components use the docs site's prefixed element names
DEMO_COMPONENT_PREFIX = "vhp-"

DEMO_STYLE_BLOCK = """
<style>
body{
    padding: 12px;
    border-radius: 12px;
    overflow: hidden;
    margin-top: 8px;
    box-shadow: 1px 3px 4px rgba(188, 189, 190, 0.3);
    border: 1px solid rgba(235, 235, 235, 0.38);
    background-color: #010e19;
    color: white;
}
button{
    border: 1px solid #42d392;
    color:rgba(255, 255, 255, .87);
    background-color: #33a06f;
    padding-left: 6px;
    padding-right: 6px;
    border-radius: 5px;
    min-width: 60px;
    height: 36px;
    font-weight: 500;
    white-space: nowrap;
    transition: color 0.25s, border-color 0.25s, background-color 0.25s, box-shadow 0.4s,
      opacity 0.4s;
    cursor: pointer;
    transform: scale(1);
}
button:hover {
    border-color: #35eb9a;
    background-color: #42b883;
  }

button::after {
    position: absolute;
    content: '';
    inset: 0;
    border-radius: inherit;
    opacity: 0;
    box-shadow: 0 0 0 6px #42b883;
    transition: 0.4s;
  }
button:active::after {
    box-shadow: none;
    opacity: 1;
    transition: 0s;
  }
input {
    opacity: 1;
    color: white;
    background-color: rgba(255, 255, 255, 0.08);
    padding-left: 8px;
    height: 36px;
    font-weight: 500;
    border-radius: 5px;
    font-size: 15px;
    transition: all 0.3s;
}
</style>"""


def validate_hook_name(args: Union[HookNameInput, Mapping[str, Any], None]) -> str:
    """
    Extract the hook name from tool arguments.

    Raises:
        - McpError(INVALID_PARAMS) when hookName is missing, empty or not a string
    """
    if isinstance(args, HookNameInput):
        hook_name = args.hookName
    elif isinstance(args, Mapping):
        hook_name = args.get("hookName")
    else:
        hook_name = None

    if not hook_name or not isinstance(hook_name, str):
        raise McpError(
            ErrorData(
                code=INVALID_PARAMS,
                message="Hook name is required and must be a string",
            )
        )
    return hook_name


async def _fetch_decoded(fetcher: ContentFetcher, path: str) -> str:
    github_content = await fetcher.get_file_content(REPO_OWNER, REPO_NAME, path)
    if github_content is None:
        raise LookupError(f"No content returned for {REPO_OWNER}/{REPO_NAME}/{path}")
    return decode_github_content(github_content.get("content"))


def build_playground_project(source: str) -> Dict[str, str]:
    """
    Turn a demo component into the file map the Vue SFC Playground loads.

    Args:
        - source: decoded demo.vue text
    Returns:
        - dict: entry file and import map, in playground order
    """
    import_map = {"imports": {SFC_PACKAGE_NAME: SFC_PACKAGE_CDN_URL}}
    return {
        SFC_ENTRY_FILE: source.replace(DEMO_COMPONENT_PREFIX, "") + DEMO_STYLE_BLOCK,
        SFC_IMPORT_MAP_FILE: json.dumps(import_map, separators=(",", ":")),
    }


def build_playground_url(source: str) -> str:
    """Playground URL whose fragment carries the base64 project JSON"""
    project = build_playground_project(source)
    payload = json.dumps(project, separators=(",", ":"), ensure_ascii=False)
    return f"{SFC_PLAYGROUND_URL}#{encode_playground_payload(payload)}"


async def _get_hook(
    input_data: Union[HookNameInput, Mapping[str, Any]], fetcher: ContentFetcher
) -> str:
    """
    Fetch the TypeScript source of a vue-hooks-plus hook.

    Args:
        - input_data: HookNameInput (or raw mapping) naming the hook
        - fetcher: GitHub contents reader
    Returns:
        - str: the hook's index.ts source
    """
    hook_name = validate_hook_name(input_data)
    path = HOOK_SOURCE_PATH.format(hook_name=hook_name)

    try:
        return await _fetch_decoded(fetcher, path)
    except McpError:
        raise
    except Exception as e:
        raise McpError(
            ErrorData(
                code=INTERNAL_ERROR,
                message=f"Failed to get hook source code: {e}",
            )
        ) from e


async def _get_hook_demo(
    input_data: Union[HookNameInput, Mapping[str, Any]], fetcher: ContentFetcher
) -> str:
    """
    Build a Vue SFC Playground link running the hook's demo.

    Args:
        - input_data: HookNameInput (or raw mapping) naming the hook
        - fetcher: GitHub contents reader
    Returns:
        - str: playground URL with the project encoded in the fragment
    """
    hook_name = validate_hook_name(input_data)
    path = HOOK_DEMO_PATH.format(hook_name=hook_name)

    try:
        source = await _fetch_decoded(fetcher, path)
        return build_playground_url(source)
    except McpError:
        raise
    except Exception as e:
        raise McpError(
            ErrorData(
                code=INTERNAL_ERROR,
                message=f"Failed to get hook demo code: {e}",
            )
        ) from e
