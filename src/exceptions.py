"""Error taxonomy for the review pipeline.

Every failure the pipeline reports on purpose derives from ``ReviewerError``,
so command entry points can turn them into an error message and a non-zero
exit status without catching unrelated bugs by accident.
"""


class ReviewerError(Exception):
    """Base class for all review pipeline errors."""


class ConfigurationMissing(ReviewerError):
    """A required configuration value is absent."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Environment variable {name} is not set.")


class InvalidInput(ReviewerError):
    """The invocation input (PR number, commit reference) is unusable."""


class RangeResolutionFailed(ReviewerError):
    """The compare-commits request for a commit range failed."""

    def __init__(self, status: int | None, reason: str) -> None:
        self.status = status
        self.reason = reason
        super().__init__(f"Failed to compare commits: {status} - {reason}")


class NoCommitsInRange(ReviewerError):
    """The compare-commits response held no commits."""

    def __init__(self, base: str, head: str) -> None:
        self.base = base
        self.head = head
        super().__init__(f"No commits found in the commit range {base}...{head}.")


class NoCommitSpecified(ReviewerError):
    """Neither a commit range nor a fallback commit SHA was provided."""

    def __init__(self) -> None:
        super().__init__("No commit or commit range found in environment variables.")


class GitHubRequestFailed(ReviewerError):
    """The host answered a read request with a non-success status."""

    action = "fetch"

    def __init__(self, identifier: str, status: int, reason: str) -> None:
        self.identifier = identifier
        self.status = status
        self.reason = reason
        super().__init__(
            f"Failed to {self.action} {identifier}: {status} - {reason}"
        )


class DiffFetchFailed(GitHubRequestFailed):
    """The host answered a diff request with a non-success status."""

    action = "fetch diff for"
