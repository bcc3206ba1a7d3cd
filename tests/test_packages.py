# =============================================================================
# GitHub Manager - Packages Tests
# =============================================================================
"""
Unit tests for the packages manager.

These tests verify that the manager:
- Targets the authenticated user, an organization or a user
- Encodes package names as a single path segment
- Parses packages and versions in response order
- Reports delete/restore success only on 204
"""

import logging

import httpx
import pytest

from github_manager import GitHubManager, ReturnFormat
from github_manager.managers.packages import owner_scope
from github_manager.models import (
    Package,
    PackageType,
    PackageVersion,
    PackageVersionState,
    PackageVisibility,
)


class TestOwnerScope:
    """Tests for the package owner path prefix."""

    def test_authenticated_user(self) -> None:
        """Test the default scope."""
        assert owner_scope() == "/user"

    def test_organization(self) -> None:
        """Test the organization scope."""
        assert owner_scope(org="acme") == "/orgs/acme"

    def test_user(self) -> None:
        """Test the user scope."""
        assert owner_scope(username="octocat") == "/users/octocat"

    def test_both_rejected(self) -> None:
        """Test that ambiguous scopes are refused."""
        with pytest.raises(ValueError):
            owner_scope(org="acme", username="octocat")


class TestListPackages:
    """Tests for listing packages."""

    def test_org_packages(self, github, fake_github, package_payload) -> None:
        """Test path, query string and one record per element."""
        second = dict(package_payload, id=198, name="goodbye_docker")
        fake_github.add(
            "GET", "/orgs/acme/packages", json_body=[package_payload, second]
        )

        packages = github.packages.list_packages(
            PackageType.CONTAINER,
            params={"visibility": PackageVisibility.PRIVATE, "page": None},
            org="acme",
        )

        assert fake_github.last.query == {
            "visibility": "private",
            "package_type": "container",
        }
        assert [p.name for p in packages] == ["hello_docker", "goodbye_docker"]
        assert all(isinstance(p, Package) for p in packages)

    def test_authenticated_user_packages(self, github, fake_github) -> None:
        """Test that a plain string package type is accepted."""
        fake_github.add("GET", "/user/packages", json_body=[])

        result = github.packages.list_packages("npm", fmt=ReturnFormat.JSON)

        assert result == []
        assert fake_github.last.query == {"package_type": "npm"}

    def test_unknown_package_type(self, github) -> None:
        """Test that an unknown package type is rejected before any request."""
        with pytest.raises(ValueError):
            github.packages.list_packages("pypi")


class TestGetPackage:
    """Tests for reading a package."""

    def test_typed_record_keeps_fields(
        self, github, fake_github, package_payload
    ) -> None:
        """Test that every documented field is parsed."""
        fake_github.add(
            "GET",
            "/users/octocat/packages/container/hello_docker",
            json_body=package_payload,
        )

        package = github.packages.get_package(
            PackageType.CONTAINER, "hello_docker", username="octocat"
        )

        assert package.id == 197
        assert package.package_type is PackageType.CONTAINER
        assert package.visibility is PackageVisibility.PRIVATE
        assert package.version_count == 3
        assert package.owner.login == "acme"
        assert package.repository.full_name == "acme/widgets"
        assert package.html_url.endswith("/package/hello_docker")

    def test_name_with_slash_is_one_segment(self, github, fake_github) -> None:
        """Test that namespaced container names are percent-encoded."""
        fake_github.add(
            "GET",
            "/orgs/acme/packages/container/team%2Fapp",
            json_body={"id": 1, "name": "team/app", "package_type": "container"},
        )

        package = github.packages.get_package(
            PackageType.CONTAINER, "team/app", org="acme"
        )

        assert fake_github.last.path == "/orgs/acme/packages/container/team%2Fapp"
        assert package.name == "team/app"


class TestDeleteAndRestorePackage:
    """Tests for deleting and restoring packages."""

    def test_delete_no_content(self, github, fake_github) -> None:
        """Test that 204 reports True."""
        fake_github.add("DELETE", "/orgs/acme/packages/npm/left-pad", status=204)

        assert github.packages.delete_package("npm", "left-pad", org="acme") is True
        assert fake_github.last.method == "DELETE"

    def test_delete_forbidden(self, github, fake_github) -> None:
        """Test that an error status reports False."""
        fake_github.add(
            "DELETE",
            "/user/packages/npm/left-pad",
            status=403,
            json_body={"message": "Package has more than 5000 downloads"},
        )

        assert github.packages.delete_package("npm", "left-pad") is False

    def test_restore_with_token(self, github, fake_github) -> None:
        """Test that the optional token goes in the query string."""
        fake_github.add("POST", "/user/packages/npm/left-pad/restore", status=204)

        assert github.packages.restore_package("npm", "left-pad", token="abc") is True
        assert fake_github.last.query == {"token": "abc"}

    def test_restore_without_token(self, github, fake_github) -> None:
        """Test that an absent token is not sent."""
        fake_github.add("POST", "/user/packages/npm/left-pad/restore", status=204)

        assert github.packages.restore_package("npm", "left-pad") is True
        assert fake_github.last.query == {}


class TestPackageVersions:
    """Tests for package version endpoints."""

    BASE = "/orgs/acme/packages/container/hello_docker/versions"

    def test_list_versions(
        self, github, fake_github, package_version_payload
    ) -> None:
        """Test the state filter and parsed versions."""
        deleted = dict(
            package_version_payload, id=835, deleted_at="2020-06-01T00:00:00Z"
        )
        fake_github.add(
            "GET", self.BASE, json_body=[package_version_payload, deleted]
        )

        versions = github.packages.list_package_versions(
            PackageType.CONTAINER,
            "hello_docker",
            params={"state": PackageVersionState.ACTIVE, "per_page": 50},
            org="acme",
        )

        assert fake_github.last.query == {"state": "active", "per_page": "50"}
        assert [v.id for v in versions] == [836, 835]
        assert versions[0].deleted_at is None
        assert versions[1].deleted_at is not None

    def test_get_version(self, github, fake_github, package_version_payload) -> None:
        """Test that every documented field is parsed."""
        fake_github.add("GET", f"{self.BASE}/836", json_body=package_version_payload)

        version = github.packages.get_package_version(
            PackageType.CONTAINER, "hello_docker", 836, org="acme"
        )

        assert isinstance(version, PackageVersion)
        assert version.name.startswith("sha256:")
        assert version.license == "MIT"
        assert version.metadata.package_type is PackageType.CONTAINER
        assert version.metadata.container.tags == ["latest"]
        assert version.package_html_url.endswith("/package/hello_docker")

    def test_delete_version_by_record(
        self, github, fake_github, package_version_payload
    ) -> None:
        """Test deleting a version given its record."""
        fake_github.add("DELETE", f"{self.BASE}/836", status=204)
        version = PackageVersion.model_validate(package_version_payload)

        assert (
            github.packages.delete_package_version(
                PackageType.CONTAINER, "hello_docker", version, org="acme"
            )
            is True
        )

    def test_restore_version(self, github, fake_github) -> None:
        """Test that restoring a version reports 204 as success."""
        fake_github.add("POST", f"{self.BASE}/836/restore", status=204)

        assert (
            github.packages.restore_package_version(
                PackageType.CONTAINER, "hello_docker", 836, org="acme"
            )
            is True
        )

    def test_restore_missing_version(self, github) -> None:
        """Test that a 404 reports False instead of raising."""
        assert (
            github.packages.restore_package_version(
                PackageType.CONTAINER, "hello_docker", 1, org="acme"
            )
            is False
        )


class TestTransportFailure:
    """Tests for boolean operations when no response arrives."""

    def test_delete_reports_false_and_logs(self, settings, caplog) -> None:
        """Test that a refused connection is logged and reported as False."""

        def refuse(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("connection refused", request=request)

        with caplog.at_level(logging.ERROR, logger="github_manager.managers.base"):
            with GitHubManager(
                settings=settings, transport=httpx.MockTransport(refuse)
            ) as github:
                deleted = github.packages.delete_package("npm", "left-pad", org="acme")

        assert deleted is False
        assert any(r.levelno == logging.ERROR for r in caplog.records)
        assert "DELETE /orgs/acme/packages/npm/left-pad failed" in caplog.text
