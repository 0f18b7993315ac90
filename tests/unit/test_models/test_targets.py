"""Tests for review target models."""

import pytest
from pydantic import TypeAdapter, ValidationError

from src.models.targets import (
    CommitTarget,
    PullRequestTarget,
    ReleaseNotesTarget,
    ReviewTarget,
)


def test_pull_request_target_must_be_positive():
    with pytest.raises(ValidationError):
        PullRequestTarget(number=0)


def test_commit_target_strips_and_rejects_empty_sha():
    assert CommitTarget(sha="  abc  ").sha == "abc"
    with pytest.raises(ValidationError):
        CommitTarget(sha="   ")


def test_targets_are_immutable():
    target = PullRequestTarget(number=3)

    with pytest.raises(ValidationError):
        target.number = 4


def test_review_target_discriminates_on_kind():
    adapter = TypeAdapter(ReviewTarget)

    assert isinstance(adapter.validate_python({"kind": "commit", "sha": "a1"}), CommitTarget)
    assert isinstance(
        adapter.validate_python({"kind": "pull_request", "number": 9}), PullRequestTarget
    )
    assert isinstance(
        adapter.validate_python({"kind": "release_notes"}), ReleaseNotesTarget
    )
