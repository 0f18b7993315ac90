"""Data models for the AI diff reviewer."""

from .github_types import (
    CommitDiffParams,
    CommitListParams,
    DiffErr,
    DiffOk,
    DiffResult,
    PullRequestDiffParams,
)
from .targets import (
    CommitTarget,
    PullRequestTarget,
    ReleaseNotesTarget,
    ReviewResult,
    ReviewTarget,
)

__all__ = [
    "CommitDiffParams",
    "CommitListParams",
    "DiffErr",
    "DiffOk",
    "DiffResult",
    "PullRequestDiffParams",
    "CommitTarget",
    "PullRequestTarget",
    "ReleaseNotesTarget",
    "ReviewResult",
    "ReviewTarget",
]
