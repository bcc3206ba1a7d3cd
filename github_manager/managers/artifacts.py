# =============================================================================
# GitHub Manager - Actions Artifacts
# =============================================================================
"""
Manager for the GitHub Actions artifact endpoints.
"""

from typing import Any, Optional, Union

from ..client import GitHubApiError
from ..formats import ReturnFormat, format_response
from ..models import Artifact, ArtifactsList
from .base import BaseManager, ResourceId, resource_id


class GitHubArtifactsManager(BaseManager):
    """Artifact endpoints of a repository."""

    @staticmethod
    def _artifacts_path(owner: str, repo: str) -> str:
        return f"/repos/{owner}/{repo}/actions/artifacts"

    def list_artifacts(
        self,
        owner: str,
        repo: str,
        params: Optional[dict[str, Any]] = None,
        fmt: ReturnFormat = ReturnFormat.MODEL,
    ) -> Union[ArtifactsList, dict, str]:
        """
        List all artifacts for a repository.

        Args:
            owner: Repository owner.
            repo: Repository name.
            params: Query parameters (per_page, page, name).
            fmt: Return format.

        Returns:
            The artifacts page.
        """
        body = self._get(self._artifacts_path(owner, repo), params=params)
        return format_response(body, fmt, ArtifactsList)

    def get_artifact(
        self,
        owner: str,
        repo: str,
        artifact: ResourceId,
        fmt: ReturnFormat = ReturnFormat.MODEL,
    ) -> Union[Artifact, dict, str]:
        """
        Get a specific artifact for a workflow run.

        Args:
            owner: Repository owner.
            repo: Repository name.
            artifact: Artifact id or record.
            fmt: Return format.

        Returns:
            The artifact.
        """
        body = self._get(
            f"{self._artifacts_path(owner, repo)}/{resource_id(artifact)}"
        )
        return format_response(body, fmt, Artifact)

    def delete_artifact(self, owner: str, repo: str, artifact: ResourceId) -> bool:
        """
        Delete an artifact for a workflow run.

        Returns:
            True if GitHub answered 204 No Content.
        """
        return self._execute(
            "DELETE",
            f"{self._artifacts_path(owner, repo)}/{resource_id(artifact)}",
            expected_status=204,
        )

    def get_artifact_download_url(
        self, owner: str, repo: str, artifact: ResourceId
    ) -> str:
        """
        Get the redirect URL of an artifact's zip archive.

        The URL expires after 1 minute.

        Args:
            owner: Repository owner.
            repo: Repository name.
            artifact: Artifact id or record.

        Returns:
            Value of the `Location` header of the 302 response.

        Raises:
            GitHubApiError: If the redirect carries no `Location` header.
        """
        response = self.client.request(
            "GET",
            f"{self._artifacts_path(owner, repo)}/{resource_id(artifact)}/zip",
            expected_status=302,
        )
        location = response.headers.get("Location")
        if not location:
            raise GitHubApiError(
                message="Redirect response carries no Location header",
                status_code=response.status_code,
            )
        return location

    def list_workflow_run_artifacts(
        self,
        owner: str,
        repo: str,
        run_id: ResourceId,
        params: Optional[dict[str, Any]] = None,
        fmt: ReturnFormat = ReturnFormat.MODEL,
    ) -> Union[ArtifactsList, dict, str]:
        """
        List artifacts of a workflow run.

        Args:
            owner: Repository owner.
            repo: Repository name.
            run_id: Workflow run id or record.
            params: Query parameters (per_page, page, name).
            fmt: Return format.

        Returns:
            The artifacts page.
        """
        body = self._get(
            f"/repos/{owner}/{repo}/actions/runs/{resource_id(run_id)}/artifacts",
            params=params,
        )
        return format_response(body, fmt, ArtifactsList)
