# =============================================================================
# GitHub Manager - Packages
# =============================================================================
"""
Manager for the GitHub Packages API.

Every endpoint exists in three scopes: the authenticated user (`/user`),
an organization (`/orgs/{org}`) and another user (`/users/{username}`).
The scope is chosen with the `org` / `username` keyword arguments; passing
neither targets the authenticated user.
"""

import logging
from typing import Any, Optional, Union

from ..formats import ReturnFormat, format_list_response, format_response
from ..models import Package, PackageType, PackageVersion
from .base import BaseManager, ResourceId, path_segment, resource_id

logger = logging.getLogger(__name__)


def owner_scope(org: Optional[str] = None, username: Optional[str] = None) -> str:
    """
    Build the path prefix of a package owner.

    Args:
        org: Organization name.
        username: User handle.

    Returns:
        `/user`, `/orgs/{org}` or `/users/{username}`.

    Raises:
        ValueError: If both `org` and `username` are given.
    """
    if org and username:
        raise ValueError("Pass either org or username, not both")
    if org:
        return f"/orgs/{org}"
    if username:
        return f"/users/{username}"
    return "/user"


class GitHubPackagesManager(BaseManager):
    """Package and package version endpoints."""

    @staticmethod
    def _package_path(
        package_type: Union[PackageType, str],
        package_name: str,
        org: Optional[str],
        username: Optional[str],
    ) -> str:
        return (
            f"{owner_scope(org, username)}/packages/"
            f"{PackageType(package_type).value}/{path_segment(package_name)}"
        )

    # -------------------------------------------------------------------------
    # Packages
    # -------------------------------------------------------------------------

    def list_packages(
        self,
        package_type: Union[PackageType, str],
        params: Optional[dict[str, Any]] = None,
        org: Optional[str] = None,
        username: Optional[str] = None,
        fmt: ReturnFormat = ReturnFormat.MODEL,
    ) -> Union[list[Package], list, str]:
        """
        List packages of one type.

        Args:
            package_type: Registry type of the packages.
            params: Query parameters (visibility, page, per_page).
            org: Organization owning the packages.
            username: User owning the packages.
            fmt: Return format.

        Returns:
            Packages in response order.
        """
        query: dict[str, Any] = dict(params or {})
        query["package_type"] = PackageType(package_type)
        body = self._get(f"{owner_scope(org, username)}/packages", params=query)
        return format_list_response(body, fmt, Package)

    def get_package(
        self,
        package_type: Union[PackageType, str],
        package_name: str,
        org: Optional[str] = None,
        username: Optional[str] = None,
        fmt: ReturnFormat = ReturnFormat.MODEL,
    ) -> Union[Package, dict, str]:
        """
        Get a specific package.

        Args:
            package_type: Registry type of the package.
            package_name: Name of the package.
            org: Organization owning the package.
            username: User owning the package.
            fmt: Return format.

        Returns:
            The package.
        """
        body = self._get(
            self._package_path(package_type, package_name, org, username)
        )
        return format_response(body, fmt, Package)

    def delete_package(
        self,
        package_type: Union[PackageType, str],
        package_name: str,
        org: Optional[str] = None,
        username: Optional[str] = None,
    ) -> bool:
        """
        Delete an entire package.

        Public packages with more than 5,000 downloads cannot be deleted.

        Returns:
            True if GitHub answered 204 No Content.
        """
        return self._execute(
            "DELETE",
            self._package_path(package_type, package_name, org, username),
            expected_status=204,
        )

    def restore_package(
        self,
        package_type: Union[PackageType, str],
        package_name: str,
        token: Optional[str] = None,
        org: Optional[str] = None,
        username: Optional[str] = None,
    ) -> bool:
        """
        Restore a package deleted within the last 30 days.

        Args:
            package_type: Registry type of the package.
            package_name: Name of the package.
            token: Package token, when the package name was reused.
            org: Organization owning the package.
            username: User owning the package.

        Returns:
            True if GitHub answered 204 No Content.
        """
        return self._execute(
            "POST",
            f"{self._package_path(package_type, package_name, org, username)}"
            "/restore",
            expected_status=204,
            params={"token": token},
        )

    # -------------------------------------------------------------------------
    # Package Versions
    # -------------------------------------------------------------------------

    def list_package_versions(
        self,
        package_type: Union[PackageType, str],
        package_name: str,
        params: Optional[dict[str, Any]] = None,
        org: Optional[str] = None,
        username: Optional[str] = None,
        fmt: ReturnFormat = ReturnFormat.MODEL,
    ) -> Union[list[PackageVersion], list, str]:
        """
        List versions of a package.

        Args:
            package_type: Registry type of the package.
            package_name: Name of the package.
            params: Query parameters (page, per_page, state).
            org: Organization owning the package.
            username: User owning the package.
            fmt: Return format.

        Returns:
            Package versions in response order.
        """
        body = self._get(
            f"{self._package_path(package_type, package_name, org, username)}"
            "/versions",
            params=params,
        )
        return format_list_response(body, fmt, PackageVersion)

    def get_package_version(
        self,
        package_type: Union[PackageType, str],
        package_name: str,
        package_version: ResourceId,
        org: Optional[str] = None,
        username: Optional[str] = None,
        fmt: ReturnFormat = ReturnFormat.MODEL,
    ) -> Union[PackageVersion, dict, str]:
        """
        Get a specific package version.

        Args:
            package_type: Registry type of the package.
            package_name: Name of the package.
            package_version: Version id or record.
            org: Organization owning the package.
            username: User owning the package.
            fmt: Return format.

        Returns:
            The package version.
        """
        body = self._get(
            f"{self._package_path(package_type, package_name, org, username)}"
            f"/versions/{resource_id(package_version)}"
        )
        return format_response(body, fmt, PackageVersion)

    def delete_package_version(
        self,
        package_type: Union[PackageType, str],
        package_name: str,
        package_version: ResourceId,
        org: Optional[str] = None,
        username: Optional[str] = None,
    ) -> bool:
        """
        Delete a specific package version.

        Returns:
            True if GitHub answered 204 No Content.
        """
        return self._execute(
            "DELETE",
            f"{self._package_path(package_type, package_name, org, username)}"
            f"/versions/{resource_id(package_version)}",
            expected_status=204,
        )

    def restore_package_version(
        self,
        package_type: Union[PackageType, str],
        package_name: str,
        package_version: ResourceId,
        org: Optional[str] = None,
        username: Optional[str] = None,
    ) -> bool:
        """
        Restore a package version deleted within the last 30 days.

        Returns:
            True if GitHub answered 204 No Content.
        """
        restored = self._execute(
            "POST",
            f"{self._package_path(package_type, package_name, org, username)}"
            f"/versions/{resource_id(package_version)}/restore",
            expected_status=204,
        )
        if restored:
            logger.info(
                f"Restored version {resource_id(package_version)} of {package_name}"
            )
        return restored
