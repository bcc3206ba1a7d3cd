# =============================================================================
# GitHub Manager - Check Runs
# =============================================================================
"""
Manager for the GitHub Checks API check run endpoints.

Check runs are created and updated by GitHub Apps; listing and reading
work with any token that can read the repository.
"""

from typing import Any, Optional, Union

from ..formats import ReturnFormat, format_list_response, format_response
from ..models import CheckRun, CheckRunAnnotation, CheckRunsList
from .base import BaseManager, ResourceId, ref_path, resource_id


class GitHubCheckRunsManager(BaseManager):
    """
    Check run endpoints.

    Identifier arguments accept either an integer id or the corresponding
    record (`CheckRun`, `CheckSuite`).
    """

    @staticmethod
    def _check_runs_path(owner: str, repo: str) -> str:
        return f"/repos/{owner}/{repo}/check-runs"

    def create_check_run(
        self,
        owner: str,
        repo: str,
        name: str,
        head_sha: str,
        params: Optional[dict[str, Any]] = None,
        fmt: ReturnFormat = ReturnFormat.MODEL,
    ) -> Union[CheckRun, dict, str]:
        """
        Create a new check run for a commit.

        Args:
            owner: Repository owner.
            repo: Repository name.
            name: Name of the check.
            head_sha: SHA of the commit.
            params: Extra body parameters (details_url, external_id, status,
                started_at, conclusion, completed_at, output, actions).
            fmt: Return format.

        Returns:
            The created check run.
        """
        payload: dict[str, Any] = dict(params or {})
        payload["name"] = name
        payload["head_sha"] = head_sha
        body = self._post(self._check_runs_path(owner, repo), json=payload)
        return format_response(body, fmt, CheckRun)

    def get_check_run(
        self,
        owner: str,
        repo: str,
        check_run: ResourceId,
        fmt: ReturnFormat = ReturnFormat.MODEL,
    ) -> Union[CheckRun, dict, str]:
        """
        Get a single check run.

        Args:
            owner: Repository owner.
            repo: Repository name.
            check_run: Check run id or record.
            fmt: Return format.

        Returns:
            The check run.
        """
        body = self._get(
            f"{self._check_runs_path(owner, repo)}/{resource_id(check_run)}"
        )
        return format_response(body, fmt, CheckRun)

    def update_check_run(
        self,
        owner: str,
        repo: str,
        check_run: ResourceId,
        params: dict[str, Any],
        fmt: ReturnFormat = ReturnFormat.MODEL,
    ) -> Union[CheckRun, dict, str]:
        """
        Update a check run.

        Args:
            owner: Repository owner.
            repo: Repository name.
            check_run: Check run id or record.
            params: Body parameters to change (name, details_url, status,
                conclusion, output, actions, ...).
            fmt: Return format.

        Returns:
            The updated check run.
        """
        body = self._patch(
            f"{self._check_runs_path(owner, repo)}/{resource_id(check_run)}",
            json=params,
        )
        return format_response(body, fmt, CheckRun)

    def list_check_run_annotations(
        self,
        owner: str,
        repo: str,
        check_run: ResourceId,
        params: Optional[dict[str, Any]] = None,
        fmt: ReturnFormat = ReturnFormat.MODEL,
    ) -> Union[list[CheckRunAnnotation], list, str]:
        """
        List annotations for a check run.

        Args:
            owner: Repository owner.
            repo: Repository name.
            check_run: Check run id or record.
            params: Query parameters (per_page, page).
            fmt: Return format.

        Returns:
            Annotations in response order.
        """
        body = self._get(
            f"{self._check_runs_path(owner, repo)}/{resource_id(check_run)}"
            "/annotations",
            params=params,
        )
        return format_list_response(body, fmt, CheckRunAnnotation)

    def rerequest_check_run(
        self, owner: str, repo: str, check_run: ResourceId
    ) -> bool:
        """
        Trigger GitHub to rerequest an existing check run.

        Args:
            owner: Repository owner.
            repo: Repository name.
            check_run: Check run id or record.

        Returns:
            True if GitHub answered 201 Created.
        """
        return self._execute(
            "POST",
            f"{self._check_runs_path(owner, repo)}/{resource_id(check_run)}"
            "/rerequest",
            expected_status=201,
        )

    def list_check_suite_check_runs(
        self,
        owner: str,
        repo: str,
        check_suite: ResourceId,
        params: Optional[dict[str, Any]] = None,
        fmt: ReturnFormat = ReturnFormat.MODEL,
    ) -> Union[CheckRunsList, dict, str]:
        """
        List check runs in a check suite.

        Args:
            owner: Repository owner.
            repo: Repository name.
            check_suite: Check suite id or record.
            params: Query parameters (check_name, status, filter, per_page,
                page).
            fmt: Return format.

        Returns:
            The check runs page.
        """
        body = self._get(
            f"/repos/{owner}/{repo}/check-suites/{resource_id(check_suite)}"
            "/check-runs",
            params=params,
        )
        return format_response(body, fmt, CheckRunsList)

    def list_ref_check_runs(
        self,
        owner: str,
        repo: str,
        ref: str,
        params: Optional[dict[str, Any]] = None,
        fmt: ReturnFormat = ReturnFormat.MODEL,
    ) -> Union[CheckRunsList, dict, str]:
        """
        List check runs for a commit SHA, branch name or tag name.

        Args:
            owner: Repository owner.
            repo: Repository name.
            ref: Commit SHA, branch or tag.
            params: Query parameters (check_name, status, filter, per_page,
                page, app_id).
            fmt: Return format.

        Returns:
            The check runs page.
        """
        path = f"/repos/{owner}/{repo}/commits/{ref_path(ref)}/check-runs"
        body = self._get(path, params=params)
        return format_response(body, fmt, CheckRunsList)
