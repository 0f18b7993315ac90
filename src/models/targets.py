"""Review target and review result types."""

from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator


class PullRequestTarget(BaseModel):
    """A single pull request to review."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["pull_request"] = "pull_request"
    number: int = Field(gt=0)

    @property
    def label(self) -> str:
        return f"PR #{self.number}"


class CommitTarget(BaseModel):
    """A single commit to review."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["commit"] = "commit"
    sha: str

    @field_validator("sha")
    @classmethod
    def validate_sha(cls, v: str) -> str:
        """Validate sha is a non-empty identifier."""
        v = v.strip()
        if not v:
            raise ValueError("sha cannot be empty")
        return v

    @property
    def label(self) -> str:
        return f"commit {self.sha}"


class ReleaseNotesTarget(BaseModel):
    """The latest commits of the repository, summarised as release notes."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["release_notes"] = "release_notes"
    per_page: int = Field(default=10, gt=0)

    @property
    def label(self) -> str:
        return f"latest {self.per_page} commits"


ReviewTarget = Annotated[
    PullRequestTarget | CommitTarget | ReleaseNotesTarget,
    Field(discriminator="kind"),
]


class ReviewResult(BaseModel):
    """Final text produced by one generation session for one target.

    ``complete`` is False when the step budget ran out while the model was
    still asking for tools; ``text`` then holds whatever text it had produced.
    """

    model_config = ConfigDict(frozen=True)

    target: ReviewTarget
    text: str
    tool_calls: int = 0
    complete: bool = True
