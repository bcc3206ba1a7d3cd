# =============================================================================
# GitHub Manager - Check Suites
# =============================================================================
"""
Manager for the GitHub Checks API check suite endpoints.
"""

from typing import Any, Iterable, Optional, Union

from ..formats import ReturnFormat, format_response
from ..models import (
    AutoTriggerCheck,
    CheckSuite,
    CheckSuitePreferences,
    CheckSuitesList,
)
from .base import BaseManager, ResourceId, ref_path, resource_id


class GitHubCheckSuitesManager(BaseManager):
    """Check suite endpoints."""

    def create_check_suite(
        self,
        owner: str,
        repo: str,
        head_sha: str,
        fmt: ReturnFormat = ReturnFormat.MODEL,
    ) -> Union[CheckSuite, dict, str]:
        """
        Create a check suite manually.

        GitHub answers 201 for a new suite and 200 when a suite already
        exists for the commit; both return the suite.

        Args:
            owner: Repository owner.
            repo: Repository name.
            head_sha: SHA of the head commit.
            fmt: Return format.

        Returns:
            The check suite.
        """
        body = self._post(
            f"/repos/{owner}/{repo}/check-suites",
            json={"head_sha": head_sha},
            expected_status=(201, 200),
        )
        return format_response(body, fmt, CheckSuite)

    def update_preferences(
        self,
        owner: str,
        repo: str,
        auto_trigger_checks: Iterable[Union[AutoTriggerCheck, dict[str, Any]]],
        fmt: ReturnFormat = ReturnFormat.MODEL,
    ) -> Union[CheckSuitePreferences, dict, str]:
        """
        Change the default automatic flow when creating check suites.

        Args:
            owner: Repository owner.
            repo: Repository name.
            auto_trigger_checks: Per-app settings (app_id, setting).
            fmt: Return format.

        Returns:
            The repository's check suite preferences.
        """
        body = self._patch(
            f"/repos/{owner}/{repo}/check-suites/preferences",
            json={"auto_trigger_checks": list(auto_trigger_checks)},
        )
        return format_response(body, fmt, CheckSuitePreferences)

    def get_check_suite(
        self,
        owner: str,
        repo: str,
        check_suite: ResourceId,
        fmt: ReturnFormat = ReturnFormat.MODEL,
    ) -> Union[CheckSuite, dict, str]:
        """
        Get a single check suite.

        Args:
            owner: Repository owner.
            repo: Repository name.
            check_suite: Check suite id or record.
            fmt: Return format.

        Returns:
            The check suite.
        """
        body = self._get(
            f"/repos/{owner}/{repo}/check-suites/{resource_id(check_suite)}"
        )
        return format_response(body, fmt, CheckSuite)

    def rerequest_check_suite(
        self, owner: str, repo: str, check_suite: ResourceId
    ) -> bool:
        """
        Trigger GitHub to rerequest an existing check suite.

        Args:
            owner: Repository owner.
            repo: Repository name.
            check_suite: Check suite id or record.

        Returns:
            True if GitHub answered 201 Created.
        """
        return self._execute(
            "POST",
            f"/repos/{owner}/{repo}/check-suites/{resource_id(check_suite)}"
            "/rerequest",
            expected_status=201,
        )

    def list_ref_check_suites(
        self,
        owner: str,
        repo: str,
        ref: str,
        params: Optional[dict[str, Any]] = None,
        fmt: ReturnFormat = ReturnFormat.MODEL,
    ) -> Union[CheckSuitesList, dict, str]:
        """
        List check suites for a commit SHA, branch name or tag name.

        Args:
            owner: Repository owner.
            repo: Repository name.
            ref: Commit SHA, branch or tag.
            params: Query parameters (app_id, check_name, per_page, page).
            fmt: Return format.

        Returns:
            The check suites page.
        """
        path = f"/repos/{owner}/{repo}/commits/{ref_path(ref)}/check-suites"
        body = self._get(path, params=params)
        return format_response(body, fmt, CheckSuitesList)
