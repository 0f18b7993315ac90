"""Review handlers for each invocation mode."""

from .review_handler import (
    handle_commit_review,
    handle_pr_review,
    handle_release_notes,
    review_target,
)

__all__ = [
    "handle_pr_review",
    "handle_commit_review",
    "handle_release_notes",
    "review_target",
]
