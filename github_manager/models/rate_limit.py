# =============================================================================
# GitHub Manager - Rate Limit Models
# =============================================================================
"""
Pydantic models for GitHub rate limit status.
"""

from datetime import datetime, timezone
from typing import Optional

from pydantic import BaseModel, Field


class RateLimit(BaseModel):
    """
    Rate limit information for a specific resource.

    Attributes:
        limit: Maximum requests allowed.
        remaining: Requests remaining in current window.
        reset: Unix timestamp when the limit resets.
        used: Requests used in current window.
    """

    limit: int = Field(..., description="Maximum requests")
    remaining: int = Field(..., description="Remaining requests")
    reset: int = Field(..., description="Reset timestamp (Unix)")
    used: int = Field(default=0, description="Used requests")

    class Config:
        """Pydantic configuration."""

        extra = "ignore"

    @property
    def reset_at(self) -> datetime:
        """Reset time as an aware UTC datetime."""
        return datetime.fromtimestamp(self.reset, tz=timezone.utc)


class RateOverview(BaseModel):
    """
    GitHub API rate limit response.

    Attributes:
        resources: Rate limits by resource type (core, search, graphql, ...).
        rate: Overall rate limit (deprecated but still returned).
    """

    resources: dict[str, RateLimit] = Field(
        default_factory=dict, description="Rate limits by resource"
    )
    rate: Optional[RateLimit] = Field(default=None, description="Overall rate limit")

    class Config:
        """Pydantic configuration."""

        extra = "ignore"

    @property
    def core(self) -> Optional[RateLimit]:
        """Limits of the core REST API."""
        return self.resources.get("core")

    @property
    def search(self) -> Optional[RateLimit]:
        """Limits of the search API."""
        return self.resources.get("search")
