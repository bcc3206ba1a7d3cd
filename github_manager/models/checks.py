# =============================================================================
# GitHub Manager - Checks Models
# =============================================================================
"""
Pydantic models for GitHub Checks API.

These models cover check runs, their annotations and outputs, check suites
and the per-repository check suite preferences. The output, annotation,
image and action models double as request payloads when creating or
updating a check run.
"""

from datetime import datetime
from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field

from .common import GitHubApp, PullRequestReference, Repository


class CheckStatus(str, Enum):
    """
    Status of a check run or check suite.

    Only GitHub Actions can set `waiting`, `requested` or `pending`.
    """

    QUEUED = "queued"
    IN_PROGRESS = "in_progress"
    COMPLETED = "completed"
    WAITING = "waiting"
    REQUESTED = "requested"
    PENDING = "pending"


class CheckConclusion(str, Enum):
    """Final conclusion of a completed check run."""

    SUCCESS = "success"
    FAILURE = "failure"
    NEUTRAL = "neutral"
    CANCELLED = "cancelled"
    SKIPPED = "skipped"
    TIMED_OUT = "timed_out"
    ACTION_REQUIRED = "action_required"
    STALE = "stale"


class CheckSuiteConclusion(str, Enum):
    """Summary conclusion for all check runs of a check suite."""

    SUCCESS = "success"
    FAILURE = "failure"
    NEUTRAL = "neutral"
    CANCELLED = "cancelled"
    SKIPPED = "skipped"
    TIMED_OUT = "timed_out"
    ACTION_REQUIRED = "action_required"
    STARTUP_FAILURE = "startup_failure"
    STALE = "stale"


class AnnotationLevel(str, Enum):
    """Severity of a check run annotation."""

    NOTICE = "notice"
    WARNING = "warning"
    FAILURE = "failure"


class CheckRunFilter(str, Enum):
    """
    Filter for listing check runs by their `completed_at` timestamp.

    Attributes:
        LATEST: Only the most recent check runs.
        ALL: Every check run.
    """

    LATEST = "latest"
    ALL = "all"


# -----------------------------------------------------------------------------
# Check Run Components
# -----------------------------------------------------------------------------


class CheckRunAnnotation(BaseModel):
    """
    Annotation attached to a specific line range of a file.

    Attributes:
        path: Path of the annotated file.
        start_line: First annotated line.
        end_line: Last annotated line.
        start_column: First annotated column (single-line annotations).
        end_column: Last annotated column (single-line annotations).
        annotation_level: Severity of the annotation.
        title: Short title.
        message: Annotation message.
        raw_details: Details not shown in the summary.
        blob_href: URL of the annotated blob.
    """

    path: str = Field(..., description="Annotated file path")
    start_line: int = Field(..., description="Start line")
    end_line: int = Field(..., description="End line")
    start_column: Optional[int] = Field(default=None, description="Start column")
    end_column: Optional[int] = Field(default=None, description="End column")
    annotation_level: Optional[AnnotationLevel] = Field(
        default=None, description="Severity level"
    )
    title: Optional[str] = Field(default=None, description="Annotation title")
    message: Optional[str] = Field(default=None, description="Annotation message")
    raw_details: Optional[str] = Field(default=None, description="Raw details")
    blob_href: Optional[str] = Field(default=None, description="Blob URL")

    class Config:
        """Pydantic configuration."""

        extra = "ignore"


class CheckRunImage(BaseModel):
    """Image shown in the check run output."""

    alt: str = Field(..., description="Alternative text")
    image_url: str = Field(..., description="Image URL")
    caption: Optional[str] = Field(default=None, description="Short caption")

    class Config:
        """Pydantic configuration."""

        extra = "ignore"


class CheckRunAction(BaseModel):
    """
    Button displayed on GitHub to request an extra task from the app.

    Attributes:
        label: Button text (max 20 characters).
        description: Action description (max 40 characters).
        identifier: Reference sent back in the `check_run.requested_action`
            webhook (max 20 characters).
    """

    label: str = Field(..., description="Button label")
    description: str = Field(..., description="Action description")
    identifier: str = Field(..., description="Action identifier")

    class Config:
        """Pydantic configuration."""

        extra = "ignore"


class CheckRunOutput(BaseModel):
    """
    Descriptive output of a check run.

    As a response, GitHub reports `annotations_count` and `annotations_url`;
    as a request payload, `annotations` and `images` may be supplied.

    Attributes:
        title: Output title.
        summary: Markdown summary.
        text: Markdown details.
        annotations_count: Number of annotations.
        annotations_url: API URL listing the annotations.
        annotations: Annotations to add (requests only).
        images: Images to add (requests only).
    """

    title: Optional[str] = Field(default=None, description="Output title")
    summary: Optional[str] = Field(default=None, description="Output summary")
    text: Optional[str] = Field(default=None, description="Output details")
    annotations_count: Optional[int] = Field(
        default=None, description="Annotation count"
    )
    annotations_url: Optional[str] = Field(
        default=None, description="Annotations URL"
    )
    annotations: Optional[list[CheckRunAnnotation]] = Field(
        default=None, description="Annotations to add"
    )
    images: Optional[list[CheckRunImage]] = Field(
        default=None, description="Images to add"
    )

    class Config:
        """Pydantic configuration."""

        extra = "ignore"


class CheckSuiteReference(BaseModel):
    """Minimal check suite information embedded in a check run."""

    id: int = Field(..., description="Check suite ID")

    class Config:
        """Pydantic configuration."""

        extra = "ignore"


# -----------------------------------------------------------------------------
# Check Runs
# -----------------------------------------------------------------------------


class CheckRun(BaseModel):
    """
    GitHub check run model.

    Attributes:
        id: Check run ID.
        name: Name of the check.
        head_sha: SHA of the commit being checked.
        node_id: GraphQL node ID.
        external_id: Integrator-supplied reference.
        url: API URL.
        html_url: Page on GitHub.
        details_url: Integrator's details page.
        status: Current status.
        conclusion: Conclusion once completed.
        started_at: Start timestamp.
        completed_at: Completion timestamp.
        output: Descriptive output.
        check_suite: Owning check suite.
        app: GitHub App that created the run.
        pull_requests: Pull requests the run belongs to.
    """

    id: int = Field(..., description="Check run ID")
    name: str = Field(..., description="Check name")
    head_sha: str = Field(..., description="Head commit SHA")
    node_id: Optional[str] = Field(default=None, description="GraphQL node ID")
    external_id: Optional[str] = Field(default=None, description="External ID")
    url: Optional[str] = Field(default=None, description="API URL")
    html_url: Optional[str] = Field(default=None, description="Page URL")
    details_url: Optional[str] = Field(default=None, description="Details URL")
    status: Optional[CheckStatus] = Field(default=None, description="Status")
    conclusion: Optional[CheckConclusion] = Field(
        default=None, description="Conclusion"
    )
    started_at: Optional[datetime] = Field(default=None, description="Started at")
    completed_at: Optional[datetime] = Field(
        default=None, description="Completed at"
    )
    output: Optional[CheckRunOutput] = Field(default=None, description="Output")
    check_suite: Optional[CheckSuiteReference] = Field(
        default=None, description="Owning check suite"
    )
    app: Optional[GitHubApp] = Field(default=None, description="Creating app")
    pull_requests: list[PullRequestReference] = Field(
        default_factory=list, description="Linked pull requests"
    )

    class Config:
        """Pydantic configuration."""

        extra = "ignore"


class CheckRunsList(BaseModel):
    """
    Response model for listing check runs.

    Attributes:
        total_count: Total number of matching check runs.
        check_runs: Check runs in this page.
    """

    total_count: int = Field(default=0, description="Total count")
    check_runs: list[CheckRun] = Field(
        default_factory=list, description="Check runs"
    )

    class Config:
        """Pydantic configuration."""

        extra = "ignore"


# -----------------------------------------------------------------------------
# Check Suites
# -----------------------------------------------------------------------------


class CheckSuite(BaseModel):
    """
    GitHub check suite model.

    Attributes:
        id: Check suite ID.
        node_id: GraphQL node ID.
        head_branch: Branch of the head commit.
        head_sha: SHA of the head commit.
        status: Current status.
        conclusion: Summary conclusion.
        url: API URL.
        before: SHA before the push.
        after: SHA after the push.
        pull_requests: Linked pull requests.
        app: GitHub App owning the suite.
        repository: Repository of the suite.
        created_at: Creation timestamp.
        updated_at: Last update timestamp.
        latest_check_runs_count: Number of latest check runs.
        check_runs_url: API URL listing the suite's check runs.
        rerequestable: Whether the suite can be re-requested.
        runs_rerequestable: Whether the runs can be re-requested.
    """

    id: int = Field(..., description="Check suite ID")
    node_id: Optional[str] = Field(default=None, description="GraphQL node ID")
    head_branch: Optional[str] = Field(default=None, description="Head branch")
    head_sha: str = Field(..., description="Head commit SHA")
    status: Optional[CheckStatus] = Field(default=None, description="Status")
    conclusion: Optional[CheckSuiteConclusion] = Field(
        default=None, description="Conclusion"
    )
    url: Optional[str] = Field(default=None, description="API URL")
    before: Optional[str] = Field(default=None, description="SHA before push")
    after: Optional[str] = Field(default=None, description="SHA after push")
    pull_requests: list[PullRequestReference] = Field(
        default_factory=list, description="Linked pull requests"
    )
    app: Optional[GitHubApp] = Field(default=None, description="Owning app")
    repository: Optional[Repository] = Field(default=None, description="Repository")
    created_at: Optional[datetime] = Field(default=None, description="Created at")
    updated_at: Optional[datetime] = Field(default=None, description="Updated at")
    latest_check_runs_count: int = Field(
        default=0, description="Latest check run count"
    )
    check_runs_url: Optional[str] = Field(default=None, description="Check runs URL")
    rerequestable: Optional[bool] = Field(default=None, description="Rerequestable")
    runs_rerequestable: Optional[bool] = Field(
        default=None, description="Runs rerequestable"
    )

    class Config:
        """Pydantic configuration."""

        extra = "ignore"


class CheckSuitesList(BaseModel):
    """
    Response model for listing check suites.

    Attributes:
        total_count: Total number of matching check suites.
        check_suites: Check suites in this page.
    """

    total_count: int = Field(default=0, description="Total count")
    check_suites: list[CheckSuite] = Field(
        default_factory=list, description="Check suites"
    )

    class Config:
        """Pydantic configuration."""

        extra = "ignore"


class AutoTriggerCheck(BaseModel):
    """
    Automatic check suite creation setting for one GitHub App.

    Attributes:
        app_id: ID of the GitHub App.
        setting: Whether suites are created automatically on push.
    """

    app_id: int = Field(..., description="GitHub App ID")
    setting: bool = Field(..., description="Auto-create suites")

    class Config:
        """Pydantic configuration."""

        extra = "ignore"


class SuitePreferences(BaseModel):
    """Preferences block of a check suite preferences response."""

    auto_trigger_checks: list[AutoTriggerCheck] = Field(
        default_factory=list, description="Auto trigger settings"
    )

    class Config:
        """Pydantic configuration."""

        extra = "ignore"


class CheckSuitePreferences(BaseModel):
    """
    Check suite preferences of a repository.

    Attributes:
        preferences: Auto trigger settings per app.
        repository: Repository the preferences apply to.
    """

    preferences: SuitePreferences = Field(
        default_factory=SuitePreferences, description="Preferences"
    )
    repository: Optional[Repository] = Field(default=None, description="Repository")

    class Config:
        """Pydantic configuration."""

        extra = "ignore"
