"""
GitHub contents API client used by the hook tools
"""

import asyncio
from typing import Any, Dict, Optional, Protocol
from urllib.parse import quote

import aiohttp

from vue_hooks_mcp.config.config import GitHubConfig
from vue_hooks_mcp.utils.logging import get_logger

logger = get_logger(__name__)


class ContentFetcher(Protocol):
    """Anything able to read a repository file the way GitHubClient does"""

    async def get_file_content(
        self, owner: str, repo: str, path: str, ref: Optional[str] = None
    ) -> Optional[Dict[str, Any]]: ...


class GitHubClient:
    """Reads repository files through ``GET /repos/{owner}/{repo}/contents/{path}``"""

    def __init__(self, config: GitHubConfig):
        self.config = config

    def _headers(self) -> Dict[str, str]:
        headers = {
            "Accept": "application/vnd.github+json",
            "X-GitHub-Api-Version": self.config.api_version,
        }
        if self.config.token:
            headers["Authorization"] = f"Bearer {self.config.token}"
        return headers

    def _contents_url(self, owner: str, repo: str, path: str) -> str:
        return (
            f"{self.config.api_url}/repos/{quote(owner, safe='')}/"
            f"{quote(repo, safe='')}/contents/{quote(path, safe='/')}"
        )

    async def get_file_content(
        self, owner: str, repo: str, path: str, ref: Optional[str] = None
    ) -> Optional[Dict[str, Any]]:
        """
        Fetch a file's metadata and base64 content.

        Args:
            - owner: repository owner
            - repo: repository name
            - path: file path inside the repository
            - ref: optional branch, tag or commit
        Returns:
            - dict: the contents API payload, or None when the file could not be read
        """
        url = self._contents_url(owner, repo, path)
        params = {"ref": ref} if ref else None
        timeout = aiohttp.ClientTimeout(total=self.config.timeout)
        target = f"{owner}/{repo}/{path}"

        try:
            async with aiohttp.ClientSession(timeout=timeout) as session:
                async with session.get(
                    url, headers=self._headers(), params=params
                ) as response:
                    if response.status != 200:
                        body = await response.text()
                        logger.warning(
                            f"GitHub returned {response.status} for {target}: {body[:200]}"
                        )
                        return None

                    data = await response.json(content_type=None)
        except asyncio.TimeoutError:
            # aiohttp's timeout errors may also be ClientErrors
            logger.warning(
                f"GitHub request for {target} timed out after {self.config.timeout}s"
            )
            return None
        except aiohttp.ClientError as e:
            logger.warning(f"GitHub request for {target} failed: {e!r}")
            return None
        except ValueError as e:
            logger.warning(f"GitHub response for {target} is not JSON: {e}")
            return None

        if not isinstance(data, dict) or "content" not in data:
            logger.warning(f"GitHub path {target} is not a file")
            return None

        return data
