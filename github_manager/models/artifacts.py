# =============================================================================
# GitHub Manager - Artifact Models
# =============================================================================
"""
Pydantic models for GitHub Actions Artifacts API.
"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field


class ArtifactWorkflowRun(BaseModel):
    """
    Workflow run that produced an artifact.

    Attributes:
        id: Workflow run ID.
        repository_id: Repository of the run.
        head_repository_id: Repository of the head commit.
        head_branch: Head branch of the run.
        head_sha: Head commit SHA of the run.
    """

    id: int = Field(..., description="Workflow run ID")
    repository_id: Optional[int] = Field(default=None, description="Repository ID")
    head_repository_id: Optional[int] = Field(
        default=None, description="Head repository ID"
    )
    head_branch: Optional[str] = Field(default=None, description="Head branch")
    head_sha: Optional[str] = Field(default=None, description="Head SHA")

    class Config:
        """Pydantic configuration."""

        extra = "ignore"


class Artifact(BaseModel):
    """
    GitHub Actions artifact model.

    Attributes:
        id: Artifact ID.
        node_id: GraphQL node ID.
        name: Artifact name.
        size_in_bytes: Size of the archive.
        url: API URL.
        archive_download_url: API URL redirecting to the zip archive.
        expired: Whether the artifact has expired.
        created_at: Creation timestamp.
        expires_at: Expiration timestamp.
        updated_at: Last update timestamp.
        workflow_run: Workflow run that produced it.
    """

    id: int = Field(..., description="Artifact ID")
    node_id: Optional[str] = Field(default=None, description="GraphQL node ID")
    name: str = Field(..., description="Artifact name")
    size_in_bytes: int = Field(default=0, description="Size in bytes")
    url: Optional[str] = Field(default=None, description="API URL")
    archive_download_url: Optional[str] = Field(
        default=None, description="Archive download URL"
    )
    expired: bool = Field(default=False, description="Is expired")
    created_at: Optional[datetime] = Field(default=None, description="Created at")
    expires_at: Optional[datetime] = Field(default=None, description="Expires at")
    updated_at: Optional[datetime] = Field(default=None, description="Updated at")
    workflow_run: Optional[ArtifactWorkflowRun] = Field(
        default=None, description="Producing workflow run"
    )

    class Config:
        """Pydantic configuration."""

        extra = "ignore"


class ArtifactsList(BaseModel):
    """
    Response model for listing artifacts.

    Attributes:
        total_count: Total number of artifacts.
        artifacts: Artifacts in this page.
    """

    total_count: int = Field(default=0, description="Total count")
    artifacts: list[Artifact] = Field(default_factory=list, description="Artifacts")

    class Config:
        """Pydantic configuration."""

        extra = "ignore"
