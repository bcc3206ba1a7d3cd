# =============================================================================
# GitHub Manager - Test Fixtures
# =============================================================================
"""
Shared fixtures for the GitHub manager tests.

HTTP traffic never leaves the process: a `FakeGitHub` router is plugged
into the client through `httpx.MockTransport` and records every request so
tests can assert on method, path, query string and JSON body.
"""

import json
from dataclasses import dataclass, field
from typing import Any, Optional

import httpx
import pytest

from github_manager import GitHubManager, Settings


# -----------------------------------------------------------------------------
# Fake GitHub
# -----------------------------------------------------------------------------
@dataclass
class RecordedRequest:
    """A request seen by the fake server."""

    method: str
    path: str
    query: dict[str, str]
    body: Optional[Any]
    headers: dict[str, str] = field(default_factory=dict)


class FakeGitHub:
    """
    Minimal in-process GitHub API.

    Routes are registered per (method, raw path); unknown routes answer 404.
    """

    def __init__(self) -> None:
        self.requests: list[RecordedRequest] = []
        self._routes: dict[tuple[str, str], tuple[int, bytes, dict[str, str]]] = {}

    def add(
        self,
        method: str,
        path: str,
        status: int = 200,
        json_body: Optional[Any] = None,
        headers: Optional[dict[str, str]] = None,
    ) -> None:
        """Register the response for a route."""
        content = b"" if json_body is None else json.dumps(json_body).encode()
        self._routes[(method, path)] = (status, content, headers or {})

    def handler(self, request: httpx.Request) -> httpx.Response:
        """httpx.MockTransport handler."""
        path = request.url.raw_path.decode().split("?")[0]
        body = json.loads(request.content) if request.content else None
        self.requests.append(
            RecordedRequest(
                method=request.method,
                path=path,
                query=dict(request.url.params),
                body=body,
                headers=dict(request.headers),
            )
        )
        route = self._routes.get((request.method, path))
        if route is None:
            return httpx.Response(404, json={"message": "Not Found"})
        status, content, headers = route
        return httpx.Response(status, content=content, headers=headers)

    @property
    def last(self) -> RecordedRequest:
        """Most recent request."""
        return self.requests[-1]


# -----------------------------------------------------------------------------
# Fixtures
# -----------------------------------------------------------------------------
@pytest.fixture
def fake_github() -> FakeGitHub:
    """
    Create an empty fake GitHub server.

    Returns:
        FakeGitHub instance.
    """
    return FakeGitHub()


@pytest.fixture
def settings() -> Settings:
    """
    Build settings isolated from the environment and any `.env` file.

    Returns:
        Settings with a test token.
    """
    return Settings(
        _env_file=None,
        github_token="test-token",
        github_api_base_url="https://api.github.com",
    )


@pytest.fixture
def github(fake_github: FakeGitHub, settings: Settings) -> GitHubManager:
    """
    Create a GitHubManager wired to the fake server.

    Yields:
        GitHubManager instance.
    """
    manager = GitHubManager(
        settings=settings,
        transport=httpx.MockTransport(fake_github.handler),
    )
    yield manager
    manager.close()


# -----------------------------------------------------------------------------
# Sample Payloads
# -----------------------------------------------------------------------------
@pytest.fixture
def user_payload() -> dict[str, Any]:
    """Sample user/organization account."""
    return {
        "login": "acme",
        "id": 1,
        "node_id": "MDQ6VXNlcjE=",
        "avatar_url": "https://github.com/images/error/acme.gif",
        "html_url": "https://github.com/acme",
        "type": "Organization",
        "site_admin": False,
    }


@pytest.fixture
def repository_payload(user_payload: dict[str, Any]) -> dict[str, Any]:
    """Sample repository."""
    return {
        "id": 1296269,
        "node_id": "MDEwOlJlcG9zaXRvcnkxMjk2MjY5",
        "name": "widgets",
        "full_name": "acme/widgets",
        "owner": user_payload,
        "private": False,
        "html_url": "https://github.com/acme/widgets",
        "description": "Widget factory",
        "fork": False,
        "url": "https://api.github.com/repos/acme/widgets",
        "default_branch": "main",
    }


@pytest.fixture
def check_run_payload(user_payload: dict[str, Any]) -> dict[str, Any]:
    """Sample check run."""
    return {
        "id": 42,
        "head_sha": "ce587453ced02b1526dfb4cb910479d431683101",
        "node_id": "MDg6Q2hlY2tSdW40",
        "external_id": "build-42",
        "url": "https://api.github.com/repos/acme/widgets/check-runs/42",
        "html_url": "https://github.com/acme/widgets/runs/42",
        "details_url": "https://ci.example.com/builds/42",
        "status": "completed",
        "conclusion": "neutral",
        "started_at": "2018-05-04T01:14:52Z",
        "completed_at": "2018-05-04T01:14:52Z",
        "output": {
            "title": "Mighty Readme report",
            "summary": "There are 0 failures, 2 warnings, and 1 notice.",
            "text": "You may have some misspelled words on lines 2 and 4.",
            "annotations_count": 2,
            "annotations_url": (
                "https://api.github.com/repos/acme/widgets/check-runs/42/annotations"
            ),
        },
        "name": "mighty_readme",
        "check_suite": {"id": 5},
        "app": {
            "id": 1,
            "slug": "octoapp",
            "node_id": "MDExOkludGVncmF0aW9uMQ==",
            "owner": user_payload,
            "name": "Octocat App",
            "description": "",
            "external_url": "https://example.com",
            "html_url": "https://github.com/apps/octoapp",
            "created_at": "2017-07-08T16:18:44-04:00",
            "updated_at": "2017-07-08T16:18:44-04:00",
            "permissions": {"metadata": "read", "contents": "read"},
            "events": ["push", "pull_request"],
        },
        "pull_requests": [
            {
                "url": "https://api.github.com/repos/acme/widgets/pulls/1347",
                "id": 1934,
                "number": 1347,
                "head": {"ref": "say-hello", "sha": "3dca65fa", "repo": {"id": 526}},
                "base": {"ref": "main", "sha": "e7fdf794", "repo": {"id": 526}},
            }
        ],
    }


@pytest.fixture
def check_suite_payload(repository_payload: dict[str, Any]) -> dict[str, Any]:
    """Sample check suite."""
    return {
        "id": 5,
        "node_id": "MDEwOkNoZWNrU3VpdGU1",
        "head_branch": "main",
        "head_sha": "d6fde92930d4715a2b49857d24b940956b26d2d3",
        "status": "completed",
        "conclusion": "startup_failure",
        "url": "https://api.github.com/repos/acme/widgets/check-suites/5",
        "before": "146e867f55c26428e5f9fade55a9bbf5e95a7912",
        "after": "d6fde92930d4715a2b49857d24b940956b26d2d3",
        "pull_requests": [],
        "app": {"id": 1, "slug": "octoapp", "name": "Octocat App"},
        "repository": repository_payload,
        "created_at": "2011-01-26T19:01:12Z",
        "updated_at": "2011-01-26T19:14:43Z",
        "latest_check_runs_count": 1,
        "check_runs_url": (
            "https://api.github.com/repos/acme/widgets/check-suites/5/check-runs"
        ),
        "rerequestable": True,
        "runs_rerequestable": False,
    }


@pytest.fixture
def package_payload(
    user_payload: dict[str, Any], repository_payload: dict[str, Any]
) -> dict[str, Any]:
    """Sample container package."""
    return {
        "id": 197,
        "name": "hello_docker",
        "package_type": "container",
        "url": "https://api.github.com/orgs/acme/packages/container/hello_docker",
        "html_url": "https://github.com/orgs/acme/packages/container/package/hello_docker",
        "version_count": 3,
        "visibility": "private",
        "owner": user_payload,
        "repository": repository_payload,
        "created_at": "2020-05-19T22:19:11Z",
        "updated_at": "2020-05-19T22:19:11Z",
    }


@pytest.fixture
def package_version_payload() -> dict[str, Any]:
    """Sample container package version."""
    return {
        "id": 836,
        "name": "sha256:b3d3e366b55f9a54599220198b3db5da8f53592acbbb7dc7e4e9878762fc5344",
        "url": (
            "https://api.github.com/orgs/acme/packages/container/hello_docker"
            "/versions/836"
        ),
        "package_html_url": "https://github.com/orgs/acme/packages/container/package/hello_docker",
        "html_url": "https://github.com/orgs/acme/packages/container/hello_docker/836",
        "license": "MIT",
        "created_at": "2020-05-19T22:19:11Z",
        "updated_at": "2020-05-19T22:19:11Z",
        "metadata": {"package_type": "container", "container": {"tags": ["latest"]}},
    }


@pytest.fixture
def artifact_payload() -> dict[str, Any]:
    """Sample Actions artifact."""
    return {
        "id": 11,
        "node_id": "MDg6QXJ0aWZhY3QxMQ==",
        "name": "Rails",
        "size_in_bytes": 556,
        "url": "https://api.github.com/repos/acme/widgets/actions/artifacts/11",
        "archive_download_url": (
            "https://api.github.com/repos/acme/widgets/actions/artifacts/11/zip"
        ),
        "expired": False,
        "created_at": "2020-01-10T14:59:22Z",
        "expires_at": "2020-03-21T14:59:22Z",
        "updated_at": "2020-02-21T14:59:22Z",
        "workflow_run": {
            "id": 2332938,
            "repository_id": 1296269,
            "head_repository_id": 1296269,
            "head_branch": "main",
            "head_sha": "328faa0536e6fef19753d9d91dc96a9931694ce3",
        },
    }
