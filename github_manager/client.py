# =============================================================================
# GitHub Manager - API Client
# =============================================================================
"""
HTTP client for GitHub REST API.

This module provides the single request executor shared by every manager:
it attaches the default headers, encodes query and body parameters, checks
the status code against the one documented for the endpoint and maps error
responses onto a small exception hierarchy.
"""

import logging
from enum import Enum
from typing import Any, Optional, Union

import httpx
from pydantic import BaseModel

from .config import Settings

logger = logging.getLogger(__name__)

ExpectedStatus = Union[int, tuple[int, ...]]


# =============================================================================
# Custom Exceptions
# =============================================================================


class GitHubApiError(Exception):
    """
    Base exception for GitHub API errors.

    Attributes:
        message: Error description.
        status_code: HTTP status code (0 when no response was received).
        response_data: Raw response data from GitHub.
    """

    def __init__(
        self,
        message: str,
        status_code: int = 0,
        response_data: Optional[dict] = None,
    ) -> None:
        """
        Initialize the exception.

        Args:
            message: Error description.
            status_code: HTTP status code.
            response_data: Raw response data.
        """
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.response_data = response_data or {}


class GitHubAuthenticationError(GitHubApiError):
    """Raised when authentication fails (401)."""

    pass


class GitHubForbiddenError(GitHubApiError):
    """Raised when access is forbidden (403)."""

    pass


class GitHubNotFoundError(GitHubApiError):
    """Raised when a resource is not found (404)."""

    pass


class GitHubValidationError(GitHubApiError):
    """Raised when request validation fails (422)."""

    pass


class GitHubUnexpectedStatusError(GitHubApiError):
    """Raised when a non-error status differs from the documented one."""

    pass


class GitHubRateLimitError(GitHubApiError):
    """
    Raised when rate limit is exceeded.

    Attributes:
        reset_at: Unix timestamp when rate limit resets.
        retry_after: Seconds to wait before retrying.
    """

    def __init__(
        self,
        message: str,
        reset_at: int = 0,
        retry_after: int = 0,
        **kwargs: Any,
    ) -> None:
        """
        Initialize the rate limit exception.

        Args:
            message: Error description.
            reset_at: Unix timestamp when limit resets.
            retry_after: Seconds to wait.
            **kwargs: Additional arguments for parent.
        """
        super().__init__(message, **kwargs)
        self.reset_at = reset_at
        self.retry_after = retry_after


# =============================================================================
# Parameter Encoding
# =============================================================================


def encode_value(value: Any) -> Any:
    """
    Convert a parameter value into something httpx can serialize.

    Enums become their value, pydantic models are dumped without unset
    fields, and containers are converted recursively with `None` entries
    dropped.

    Args:
        value: Parameter value.

    Returns:
        JSON-compatible value.
    """
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, BaseModel):
        return value.model_dump(mode="json", exclude_none=True)
    if isinstance(value, dict):
        return {k: encode_value(v) for k, v in value.items() if v is not None}
    if isinstance(value, (list, tuple)):
        return [encode_value(v) for v in value]
    return value


def encode_params(params: Optional[dict[str, Any]]) -> Optional[dict[str, Any]]:
    """
    Drop absent parameters and encode the rest.

    Args:
        params: Query or body parameters.

    Returns:
        Encoded parameters, or None when nothing remains.
    """
    if not params:
        return None
    encoded = encode_value(params)
    return encoded or None


def _header_int(response: httpx.Response, name: str, default: int) -> int:
    """
    Read an integer header, falling back to `default`.

    `Retry-After` may also carry an HTTP-date, which is not converted.
    """
    try:
        return int(response.headers.get(name, default))
    except ValueError:
        return default


# =============================================================================
# GitHub Client
# =============================================================================


class GitHubClient:
    """
    Synchronous client for GitHub REST API.

    Every call blocks until the response arrives and issues exactly one
    HTTP request; there is no retry, cache or redirect following.

    Attributes:
        token: GitHub personal access token.
        base_url: GitHub API base URL.
        timeout: Request timeout in seconds.
    """

    def __init__(
        self,
        token: str = "",
        base_url: str = "https://api.github.com",
        timeout: float = 30.0,
        api_version: str = "2022-11-28",
        user_agent: str = "github-manager/0.1.0",
        transport: Optional[httpx.BaseTransport] = None,
    ) -> None:
        """
        Initialize the GitHub client.

        Args:
            token: GitHub personal access token. Empty for anonymous access.
            base_url: GitHub API base URL.
            timeout: Request timeout in seconds.
            api_version: X-GitHub-Api-Version header value.
            user_agent: User-Agent header value.
            transport: Optional httpx transport (used by tests).
        """
        self.token = token
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout

        headers = {
            "Accept": "application/vnd.github+json",
            "X-GitHub-Api-Version": api_version,
            "User-Agent": user_agent,
        }
        if token:
            headers["Authorization"] = f"Bearer {token}"

        self._client = httpx.Client(
            base_url=self.base_url,
            timeout=timeout,
            headers=headers,
            transport=transport,
            follow_redirects=False,
        )

    @classmethod
    def from_settings(
        cls,
        settings: Settings,
        transport: Optional[httpx.BaseTransport] = None,
    ) -> "GitHubClient":
        """
        Build a client from loaded settings.

        Args:
            settings: Settings instance.
            transport: Optional httpx transport.

        Returns:
            Configured GitHubClient.
        """
        return cls(
            token=settings.github_token,
            base_url=settings.github_api_base_url,
            timeout=settings.github_request_timeout,
            api_version=settings.github_api_version,
            user_agent=settings.github_user_agent,
            transport=transport,
        )

    def close(self) -> None:
        """Close the HTTP client."""
        self._client.close()

    def __enter__(self) -> "GitHubClient":
        """Context manager entry."""
        return self

    def __exit__(self, *args: Any) -> None:
        """Context manager exit."""
        self.close()

    # -------------------------------------------------------------------------
    # Request Execution
    # -------------------------------------------------------------------------

    def request(
        self,
        method: str,
        path: str,
        params: Optional[dict[str, Any]] = None,
        json: Optional[dict[str, Any]] = None,
        expected_status: ExpectedStatus = 200,
    ) -> httpx.Response:
        """
        Make an HTTP request to the GitHub API.

        Args:
            method: HTTP method (GET, POST, PATCH, PUT, DELETE).
            path: API path (e.g., /repos/owner/repo/check-runs).
            params: Query parameters; None values are omitted.
            json: JSON body for POST/PATCH/PUT; None values are omitted.
            expected_status: Documented success status code(s).

        Returns:
            The httpx response whose status matched `expected_status`.

        Raises:
            GitHubAuthenticationError: For 401 responses.
            GitHubForbiddenError: For 403 responses.
            GitHubRateLimitError: When rate limit is exceeded.
            GitHubNotFoundError: For 404 responses.
            GitHubValidationError: For 422 responses.
            GitHubUnexpectedStatusError: For a success status other than
                the expected one.
            GitHubApiError: For other error responses and transport failures.
        """
        accepted = (
            expected_status
            if isinstance(expected_status, tuple)
            else (expected_status,)
        )
        body = encode_params(json)
        if body is None and method in ("POST", "PATCH", "PUT"):
            body = {}

        logger.debug(f"{method} {path}")
        try:
            response = self._client.request(
                method=method,
                url=path,
                params=encode_params(params),
                json=body,
            )
        except httpx.TimeoutException as e:
            raise GitHubApiError(
                message=f"Request timed out: {str(e)}",
                status_code=0,
            )
        except httpx.RequestError as e:
            raise GitHubApiError(
                message=f"Request failed: {str(e)}",
                status_code=0,
            )

        if response.status_code in accepted:
            return response

        raise self._error_for(response, accepted)

    def _error_for(
        self, response: httpx.Response, accepted: tuple[int, ...]
    ) -> GitHubApiError:
        """
        Build the exception matching an unexpected response.

        Args:
            response: The httpx response.
            accepted: Status codes that would have meant success.

        Returns:
            The exception to raise.
        """
        status = response.status_code
        error_data: dict = {}
        try:
            parsed = response.json()
            if isinstance(parsed, dict):
                error_data = parsed
        except ValueError:
            pass

        error_message = str(error_data.get("message") or response.text)

        if status < 400:
            return GitHubUnexpectedStatusError(
                message=(
                    f"Unexpected status {status}, expected "
                    f"{', '.join(str(code) for code in accepted)}"
                ),
                status_code=status,
                response_data=error_data,
            )

        if status in (403, 429):
            remaining = response.headers.get("X-RateLimit-Remaining", "1")
            if (
                status == 429
                or remaining == "0"
                or "rate limit" in error_message.lower()
            ):
                return GitHubRateLimitError(
                    message=f"Rate limit exceeded: {error_message}",
                    status_code=status,
                    response_data=error_data,
                    reset_at=_header_int(response, "X-RateLimit-Reset", 0),
                    retry_after=_header_int(response, "Retry-After", 60),
                )
            return GitHubForbiddenError(
                message=error_message,
                status_code=status,
                response_data=error_data,
            )

        if status == 401:
            return GitHubAuthenticationError(
                message=f"Authentication failed: {error_message}",
                status_code=401,
                response_data=error_data,
            )

        if status == 404:
            return GitHubNotFoundError(
                message=f"Resource not found: {error_message}",
                status_code=404,
                response_data=error_data,
            )

        if status == 422:
            return GitHubValidationError(
                message=f"Validation failed: {error_message}",
                status_code=422,
                response_data=error_data,
            )

        return GitHubApiError(
            message=f"GitHub API error: {error_message}",
            status_code=status,
            response_data=error_data,
        )
