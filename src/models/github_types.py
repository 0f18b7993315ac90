"""GitHub-specific type definitions."""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

from src.exceptions import DiffFetchFailed


class DiffOk(BaseModel):
    """Raw diff text returned by the host."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["ok"] = "ok"
    text: str


class DiffErr(BaseModel):
    """Non-success answer from the host for a diff request."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["error"] = "error"
    identifier: str
    status: int
    reason: str

    def to_exception(self) -> DiffFetchFailed:
        return DiffFetchFailed(self.identifier, self.status, self.reason)


DiffResult = DiffOk | DiffErr


class PullRequestDiffParams(BaseModel):
    """Arguments of the pull request diff tool."""

    owner: str = Field(min_length=1, description="Repository owner")
    repo: str = Field(min_length=1, description="Repository name")
    pull_number: int = Field(gt=0, description="Pull request number")


class CommitDiffParams(BaseModel):
    """Arguments of the commit diff tool."""

    owner: str = Field(min_length=1, description="Repository owner")
    repo: str = Field(min_length=1, description="Repository name")
    sha: str = Field(min_length=1, description="Commit SHA")


class CommitListParams(BaseModel):
    """Arguments of the recent commits tool."""

    owner: str = Field(min_length=1, description="Repository owner")
    repo: str = Field(min_length=1, description="Repository name")
    per_page: int = Field(default=10, gt=0, le=100, description="Number of commits")
