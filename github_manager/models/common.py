# =============================================================================
# GitHub Manager - Common Models
# =============================================================================
"""
Common Pydantic models shared across GitHub API resources.

These models represent fundamental GitHub entities like users, apps and
repositories that are referenced by check runs, packages and artifacts.
"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field


class User(BaseModel):
    """
    GitHub user model.

    Represents a GitHub account, which can own packages and repositories or
    act as the owner of a GitHub App.

    Attributes:
        login: The user's GitHub username.
        id: Unique identifier for the user.
        node_id: GraphQL node ID.
        avatar_url: URL to the user's avatar image.
        html_url: URL to the user's GitHub profile page.
        type: Account type (User, Organization, Bot).
        site_admin: Whether the user is a site administrator.
    """

    login: str = Field(..., description="GitHub username")
    id: int = Field(..., description="User ID")
    node_id: Optional[str] = Field(default=None, description="GraphQL node ID")
    avatar_url: Optional[str] = Field(default=None, description="Avatar URL")
    html_url: Optional[str] = Field(default=None, description="Profile URL")
    type: Optional[str] = Field(default="User", description="Account type")
    site_admin: bool = Field(default=False, description="Is site admin")

    class Config:
        """Pydantic configuration."""

        extra = "ignore"


class Repository(BaseModel):
    """
    GitHub repository model.

    Attributes:
        id: Unique identifier for the repository.
        node_id: GraphQL node ID.
        name: Repository name (without owner).
        full_name: Full repository name (owner/repo).
        owner: Repository owner (User model).
        private: Whether the repository is private.
        html_url: URL to the repository page.
        description: Optional repository description.
        fork: Whether this is a fork of another repository.
        url: API URL of the repository.
        default_branch: Name of the default branch.
        created_at: Repository creation timestamp.
        updated_at: Last update timestamp.
        pushed_at: Last push timestamp.
    """

    id: int = Field(..., description="Repository ID")
    node_id: Optional[str] = Field(default=None, description="GraphQL node ID")
    name: str = Field(..., description="Repository name")
    full_name: str = Field(..., description="Full name (owner/repo)")
    owner: Optional[User] = Field(default=None, description="Repository owner")
    private: bool = Field(default=False, description="Is private")
    html_url: Optional[str] = Field(default=None, description="Repository URL")
    description: Optional[str] = Field(default=None, description="Description")
    fork: bool = Field(default=False, description="Is a fork")
    url: Optional[str] = Field(default=None, description="API URL")
    default_branch: Optional[str] = Field(default=None, description="Default branch")
    created_at: Optional[datetime] = Field(default=None, description="Created at")
    updated_at: Optional[datetime] = Field(default=None, description="Updated at")
    pushed_at: Optional[datetime] = Field(default=None, description="Last push at")

    class Config:
        """Pydantic configuration."""

        extra = "ignore"


class GitHubApp(BaseModel):
    """
    GitHub App that created a check run or check suite.

    Attributes:
        id: Unique identifier for the app.
        slug: URL-friendly name of the app.
        node_id: GraphQL node ID.
        owner: Account owning the app.
        name: Display name of the app.
        description: Optional description.
        external_url: App homepage.
        html_url: App page on GitHub.
        created_at: Creation timestamp.
        updated_at: Last update timestamp.
        permissions: Permissions granted to the app.
        events: Webhook events the app subscribes to.
    """

    id: int = Field(..., description="App ID")
    slug: Optional[str] = Field(default=None, description="App slug")
    node_id: Optional[str] = Field(default=None, description="GraphQL node ID")
    owner: Optional[User] = Field(default=None, description="App owner")
    name: Optional[str] = Field(default=None, description="App name")
    description: Optional[str] = Field(default=None, description="Description")
    external_url: Optional[str] = Field(default=None, description="Homepage")
    html_url: Optional[str] = Field(default=None, description="App page URL")
    created_at: Optional[datetime] = Field(default=None, description="Created at")
    updated_at: Optional[datetime] = Field(default=None, description="Updated at")
    permissions: dict[str, str] = Field(
        default_factory=dict, description="Granted permissions"
    )
    events: list[str] = Field(default_factory=list, description="Subscribed events")

    class Config:
        """Pydantic configuration."""

        extra = "ignore"


class BranchReference(BaseModel):
    """
    Branch pointer inside a pull request reference.

    Attributes:
        ref: Branch name.
        sha: Commit SHA.
        repo: Minimal repository information (id, url, name).
    """

    ref: str = Field(..., description="Branch name")
    sha: str = Field(..., description="Commit SHA")
    repo: Optional[dict] = Field(default=None, description="Repository reference")

    class Config:
        """Pydantic configuration."""

        extra = "ignore"


class PullRequestReference(BaseModel):
    """
    Pull request linked to a check run or check suite.

    Attributes:
        id: Pull request ID.
        number: Pull request number.
        url: API URL of the pull request.
        head: Head branch reference.
        base: Base branch reference.
    """

    id: int = Field(..., description="Pull request ID")
    number: int = Field(..., description="Pull request number")
    url: Optional[str] = Field(default=None, description="API URL")
    head: Optional[BranchReference] = Field(default=None, description="Head branch")
    base: Optional[BranchReference] = Field(default=None, description="Base branch")

    class Config:
        """Pydantic configuration."""

        extra = "ignore"
