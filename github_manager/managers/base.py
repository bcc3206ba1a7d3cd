# =============================================================================
# GitHub Manager - Base Manager
# =============================================================================
"""
Shared plumbing for resource managers.

A manager groups the endpoints of one GitHub resource area. Each endpoint
method builds its path, hands the parameters to the shared client and
returns the body in the requested format; mutating endpoints without a
response body report a boolean instead.
"""

import logging
from typing import Any, Optional, Union
from urllib.parse import quote

from ..client import ExpectedStatus, GitHubApiError, GitHubClient

logger = logging.getLogger(__name__)

ResourceId = Union[int, str, Any]


def resource_id(value: ResourceId) -> Union[int, str]:
    """
    Resolve an identifier from an id or a typed record.

    Args:
        value: An integer/string id, or a record exposing `.id`.

    Returns:
        The identifier to substitute into a path.

    Raises:
        TypeError: If the value carries no usable id.
    """
    if isinstance(value, bool):
        raise TypeError("A boolean is not a valid resource id")
    if isinstance(value, (int, str)):
        return value
    identifier = getattr(value, "id", None)
    if identifier is None:
        raise TypeError(f"Cannot resolve a resource id from {value!r}")
    return identifier


def path_segment(value: Any) -> str:
    """Percent-encode a value as one path segment."""
    return quote(str(value), safe="")


def ref_path(ref: str) -> str:
    """Percent-encode a git ref, keeping the slashes of `heads/main`."""
    return quote(ref, safe="/")


class BaseManager:
    """
    Base class for resource managers.

    Attributes:
        client: Shared GitHubClient used to issue requests.
    """

    def __init__(self, client: GitHubClient) -> None:
        """
        Initialize the manager.

        Args:
            client: Shared GitHubClient instance.
        """
        self.client = client

    # -------------------------------------------------------------------------
    # HTTP Helpers
    # -------------------------------------------------------------------------

    def _get(
        self,
        path: str,
        params: Optional[dict[str, Any]] = None,
        expected_status: ExpectedStatus = 200,
    ) -> str:
        """Make a GET request and return the body."""
        return self.client.request(
            "GET", path, params=params, expected_status=expected_status
        ).text

    def _post(
        self,
        path: str,
        json: Optional[dict[str, Any]] = None,
        expected_status: ExpectedStatus = 201,
    ) -> str:
        """Make a POST request and return the body."""
        return self.client.request(
            "POST", path, json=json, expected_status=expected_status
        ).text

    def _patch(
        self,
        path: str,
        json: Optional[dict[str, Any]] = None,
        expected_status: ExpectedStatus = 200,
    ) -> str:
        """Make a PATCH request and return the body."""
        return self.client.request(
            "PATCH", path, json=json, expected_status=expected_status
        ).text

    def _execute(
        self,
        method: str,
        path: str,
        expected_status: ExpectedStatus,
        params: Optional[dict[str, Any]] = None,
        json: Optional[dict[str, Any]] = None,
    ) -> bool:
        """
        Run an operation whose only result is its status code.

        Failures are logged and reported as False instead of raised.

        Args:
            method: HTTP method.
            path: API path.
            expected_status: Documented success status code(s).
            params: Query parameters.
            json: JSON body.

        Returns:
            True if the response status matched `expected_status`.
        """
        try:
            self.client.request(
                method,
                path,
                params=params,
                json=json,
                expected_status=expected_status,
            )
        except GitHubApiError as e:
            logger.error(
                f"{method} {path} failed with status {e.status_code}: {e.message}"
            )
            return False
        return True
