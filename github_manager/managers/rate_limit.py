# =============================================================================
# GitHub Manager - Rate Limit
# =============================================================================
"""
Manager for the GitHub rate limit endpoint.

Reading `/rate_limit` does not count against the primary rate limit.
"""

from typing import Union

from ..formats import ReturnFormat, format_response
from ..models import RateOverview
from .base import BaseManager


class GitHubRateLimitManager(BaseManager):
    """Rate limit status endpoint."""

    def get_rate_limit(
        self, fmt: ReturnFormat = ReturnFormat.MODEL
    ) -> Union[RateOverview, dict, str]:
        """
        Get the current rate limit status.

        Args:
            fmt: Return format.

        Returns:
            Rate limits per resource.
        """
        body = self._get("/rate_limit")
        return format_response(body, fmt, RateOverview)
