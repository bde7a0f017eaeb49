"""Unit tests for the GitHub API client."""

import httpx
import pytest

from connector.adapter.error import ProviderError
from connector.adapter.github import MockGitHubClient, RealGitHubClient
from connector.domain.error import NotFoundError

REPOS = [{"id": 1, "name": "first"}, {"id": 2, "name": "second"}]


def _client(handler, **kwargs) -> RealGitHubClient:
    return RealGitHubClient(
        api_url="https://api.github.com/",
        user_agent="dev-connector-test",
        transport=httpx.MockTransport(handler),
        **kwargs,
    )


class TestRealGitHubClient:
    @pytest.mark.asyncio
    async def test_requests_oldest_repositories(self):
        seen = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            return httpx.Response(200, json=REPOS)

        repos = await _client(handler).list_repositories("octocat")

        assert repos == REPOS
        request = seen[0]
        assert request.url.path == "/users/octocat/repos"
        assert request.url.params["per_page"] == "5"
        assert request.url.params["sort"] == "created"
        assert request.url.params["direction"] == "asc"
        assert request.headers["User-Agent"] == "dev-connector-test"
        assert "Authorization" not in request.headers

    @pytest.mark.asyncio
    async def test_sends_credentials_when_configured(self):
        seen = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            return httpx.Response(200, json=[])

        client = _client(handler, client_id="id", client_secret="secret")
        await client.list_repositories("octocat")

        assert seen[0].headers["Authorization"].startswith("Basic ")

    @pytest.mark.asyncio
    async def test_unknown_user_is_not_found(self):
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(404, json={"message": "Not Found"})

        with pytest.raises(NotFoundError):
            await _client(handler).list_repositories("nobody")

    @pytest.mark.asyncio
    async def test_transport_failure_is_provider_error(self):
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("connection refused", request=request)

        with pytest.raises(ProviderError):
            await _client(handler).list_repositories("octocat")

    @pytest.mark.asyncio
    async def test_invalid_json_is_provider_error(self):
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(200, content=b"<html>")

        with pytest.raises(ProviderError):
            await _client(handler).list_repositories("octocat")

    @pytest.mark.parametrize(
        "username", ["..", "a/b", "-octocat", "octo--cat", "octocat\n"]
    )
    @pytest.mark.asyncio
    async def test_malformed_username_never_sent(self, username):
        seen = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            return httpx.Response(200, json=REPOS)

        with pytest.raises(NotFoundError):
            await _client(handler).list_repositories(username)

        assert seen == []


class TestMockGitHubClient:
    @pytest.mark.asyncio
    async def test_known_user(self):
        repos = await MockGitHubClient().list_repositories("octocat")

        assert repos[0]["name"] == "Hello-World"

    @pytest.mark.asyncio
    async def test_unknown_user(self):
        with pytest.raises(NotFoundError):
            await MockGitHubClient().list_repositories("nobody")
