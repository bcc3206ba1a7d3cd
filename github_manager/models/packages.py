# =============================================================================
# GitHub Manager - Package Models
# =============================================================================
"""
Pydantic models for GitHub Packages API.

These models handle packages and package versions owned by the
authenticated user, an organization or another user.
"""

from datetime import datetime
from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field

from .common import Repository, User


class PackageType(str, Enum):
    """
    Registry a package belongs to.

    Docker images pushed to ghcr.io use `CONTAINER`; `DOCKER` covers the
    legacy docker.pkg.github.com registry.
    """

    NPM = "npm"
    MAVEN = "maven"
    RUBYGEMS = "rubygems"
    DOCKER = "docker"
    NUGET = "nuget"
    CONTAINER = "container"


class PackageVisibility(str, Enum):
    """Visibility of a package."""

    PUBLIC = "public"
    PRIVATE = "private"
    INTERNAL = "internal"


class PackageVersionState(str, Enum):
    """State filter for listing package versions."""

    ACTIVE = "active"
    DELETED = "deleted"


class Package(BaseModel):
    """
    GitHub package model.

    Attributes:
        id: Package ID.
        name: Package name.
        package_type: Registry of the package.
        url: API URL.
        html_url: Page on GitHub.
        version_count: Number of versions.
        visibility: Package visibility.
        owner: Owning account.
        repository: Linked repository, when any.
        created_at: Creation timestamp.
        updated_at: Last update timestamp.
    """

    id: int = Field(..., description="Package ID")
    name: str = Field(..., description="Package name")
    package_type: PackageType = Field(..., description="Package type")
    url: Optional[str] = Field(default=None, description="API URL")
    html_url: Optional[str] = Field(default=None, description="Page URL")
    version_count: int = Field(default=0, description="Version count")
    visibility: Optional[PackageVisibility] = Field(
        default=None, description="Visibility"
    )
    owner: Optional[User] = Field(default=None, description="Package owner")
    repository: Optional[Repository] = Field(
        default=None, description="Linked repository"
    )
    created_at: Optional[datetime] = Field(default=None, description="Created at")
    updated_at: Optional[datetime] = Field(default=None, description="Updated at")

    class Config:
        """Pydantic configuration."""

        extra = "ignore"


class ContainerMetadata(BaseModel):
    """Container image tags of a package version."""

    tags: list[str] = Field(default_factory=list, description="Image tags")

    class Config:
        """Pydantic configuration."""

        extra = "ignore"


class DockerMetadata(BaseModel):
    """Docker image tags of a package version."""

    tag: list[str] = Field(default_factory=list, description="Image tags")

    class Config:
        """Pydantic configuration."""

        extra = "ignore"


class PackageVersionMetadata(BaseModel):
    """
    Registry-specific metadata of a package version.

    Attributes:
        package_type: Registry of the package.
        container: Container tags (container packages only).
        docker: Docker tags (docker packages only).
    """

    package_type: PackageType = Field(..., description="Package type")
    container: Optional[ContainerMetadata] = Field(
        default=None, description="Container metadata"
    )
    docker: Optional[DockerMetadata] = Field(
        default=None, description="Docker metadata"
    )

    class Config:
        """Pydantic configuration."""

        extra = "ignore"


class PackageVersion(BaseModel):
    """
    GitHub package version model.

    Attributes:
        id: Version ID.
        name: Version name (tag, version string or digest).
        url: API URL.
        package_html_url: Page of the parent package.
        html_url: Page of the version.
        license: License of the version.
        description: Version description.
        created_at: Creation timestamp.
        updated_at: Last update timestamp.
        deleted_at: Deletion timestamp for deleted versions.
        metadata: Registry-specific metadata.
    """

    id: int = Field(..., description="Version ID")
    name: str = Field(..., description="Version name")
    url: Optional[str] = Field(default=None, description="API URL")
    package_html_url: Optional[str] = Field(
        default=None, description="Package page URL"
    )
    html_url: Optional[str] = Field(default=None, description="Version page URL")
    license: Optional[str] = Field(default=None, description="License")
    description: Optional[str] = Field(default=None, description="Description")
    created_at: Optional[datetime] = Field(default=None, description="Created at")
    updated_at: Optional[datetime] = Field(default=None, description="Updated at")
    deleted_at: Optional[datetime] = Field(default=None, description="Deleted at")
    metadata: Optional[PackageVersionMetadata] = Field(
        default=None, description="Registry metadata"
    )

    class Config:
        """Pydantic configuration."""

        extra = "ignore"
