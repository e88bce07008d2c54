"""
GitHub contents client against a local mock API
"""

import asyncio
import unittest
from unittest import IsolatedAsyncioTestCase

from vue_hooks_mcp.config.config import GitHubConfig
from vue_hooks_mcp.server_side.utils.code import decode_github_content
from vue_hooks_mcp.server_side.utils.github import GitHubClient
from tests.mocks import MockEndpoint, MockGitHubServer, MockResponse

OWNER = "NelsonYong"
REPO = "vue-hooks-plus"
HOOK_PATH = "packages/hooks/src/useBoolean/index.ts"


class TestGitHubClient(IsolatedAsyncioTestCase):
    async def asyncSetUp(self):
        self.server = MockGitHubServer()
        await self.server.start()

    async def asyncTearDown(self):
        await self.server.stop()

    def client(self, token="test-token", timeout=5.0) -> GitHubClient:
        return GitHubClient(
            GitHubConfig(
                token=token, api_url=self.server.get_base_url(), timeout=timeout
            )
        )

    async def test_reads_file_with_versioned_authenticated_request(self):
        endpoint = self.server.add_file(OWNER, REPO, HOOK_PATH, "export {}")

        data = await self.client().get_file_content(OWNER, REPO, HOOK_PATH)

        self.assertIsNotNone(data)
        self.assertEqual(decode_github_content(data["content"]), "export {}")
        self.assertEqual(endpoint.call_count, 1)
        headers = endpoint.requests[0]["headers"]
        self.assertEqual(headers["X-GitHub-Api-Version"], "2022-11-28")
        self.assertEqual(headers["Authorization"], "Bearer test-token")
        self.assertEqual(endpoint.requests[0]["query"], {})

    async def test_ref_is_sent_as_query_parameter(self):
        endpoint = self.server.add_file(OWNER, REPO, HOOK_PATH, "export {}")

        await self.client().get_file_content(OWNER, REPO, HOOK_PATH, ref="v2.0.0")

        self.assertEqual(endpoint.requests[0]["query"], {"ref": "v2.0.0"})

    async def test_no_token_means_no_authorization_header(self):
        endpoint = self.server.add_file(OWNER, REPO, HOOK_PATH, "export {}")

        await self.client(token=None).get_file_content(OWNER, REPO, HOOK_PATH)

        self.assertNotIn("Authorization", endpoint.requests[0]["headers"])

    async def test_not_found_returns_none(self):
        with self.assertLogs("vue_hooks_mcp.server_side.utils.github", "WARNING") as logs:
            data = await self.client().get_file_content(OWNER, REPO, "missing.ts")

        self.assertIsNone(data)
        self.assertIn("404", logs.output[0])

    async def test_unauthorized_returns_none(self):
        self.server.add_endpoint(
            MockEndpoint(
                path=f"/repos/{OWNER}/{REPO}/contents/{HOOK_PATH}",
                method="GET",
                response=MockResponse(
                    status_code=401, content='{"message": "Bad credentials"}'
                ),
            )
        )

        self.assertIsNone(await self.client().get_file_content(OWNER, REPO, HOOK_PATH))

    async def test_directory_listing_returns_none(self):
        self.server.add_endpoint(
            MockEndpoint(
                path=f"/repos/{OWNER}/{REPO}/contents/packages",
                method="GET",
                response=MockResponse(status_code=200, content='[{"type": "dir"}]'),
            )
        )

        self.assertIsNone(await self.client().get_file_content(OWNER, REPO, "packages"))

    async def test_invalid_json_returns_none(self):
        self.server.add_endpoint(
            MockEndpoint(
                path=f"/repos/{OWNER}/{REPO}/contents/{HOOK_PATH}",
                method="GET",
                response=MockResponse(status_code=200, content="<html>oops</html>"),
            )
        )

        self.assertIsNone(await self.client().get_file_content(OWNER, REPO, HOOK_PATH))

    async def test_timeout_returns_none(self):
        self.server.add_endpoint(
            MockEndpoint(
                path=f"/repos/{OWNER}/{REPO}/contents/{HOOK_PATH}",
                method="GET",
                response=MockResponse(status_code=200, content="{}", delay=0.5),
            )
        )

        with self.assertLogs("vue_hooks_mcp.server_side.utils.github", "WARNING") as logs:
            data = await self.client(timeout=0.1).get_file_content(
                OWNER, REPO, HOOK_PATH
            )

        self.assertIsNone(data)
        self.assertIn("timed out", logs.output[0])

    async def test_connection_refused_returns_none(self):
        client = GitHubClient(GitHubConfig(api_url="http://127.0.0.1:1", timeout=2.0))

        self.assertIsNone(await client.get_file_content(OWNER, REPO, HOOK_PATH))

    async def test_cancellation_propagates(self):
        self.server.add_endpoint(
            MockEndpoint(
                path=f"/repos/{OWNER}/{REPO}/contents/{HOOK_PATH}",
                method="GET",
                response=MockResponse(status_code=200, content="{}", delay=0.5),
            )
        )

        task = asyncio.create_task(
            self.client().get_file_content(OWNER, REPO, HOOK_PATH)
        )
        await asyncio.sleep(0.1)
        task.cancel()

        with self.assertRaises(asyncio.CancelledError):
            await task


if __name__ == "__main__":
    unittest.main()
