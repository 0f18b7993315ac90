"""Plain-text transcript output for review results."""

import sys
from typing import Literal, TextIO

from src.models.targets import (
    CommitTarget,
    PullRequestTarget,
    ReviewResult,
)

ReportMode = Literal["pull_request", "commit", "release_notes"]

MODE_BANNERS: dict[str, str] = {
    "pull_request": "=== AI Review Summary ===",
    "commit": "=== AI Commit-by-Commit Review ===",
    "release_notes": "=== AI-Generated Release Notes ===",
}


def target_banner(result: ReviewResult) -> str:
    """Banner line naming the target of one result."""
    target = result.target
    if isinstance(target, PullRequestTarget):
        return f"--- Review for pull request #{target.number} ---"
    if isinstance(target, CommitTarget):
        return f"--- Review for commit {target.sha} ---"
    return f"--- Release notes for the {target.label} ---"


class OutputReporter:
    """Writes a mode banner, then each result under its own target banner."""

    def __init__(self, mode: ReportMode, stream: TextIO | None = None) -> None:
        self.mode = mode
        self.stream = stream if stream is not None else sys.stdout
        self.reported = 0

    def _write(self, line: str) -> None:
        print(line, file=self.stream, flush=True)

    def begin(self) -> None:
        self._write(MODE_BANNERS[self.mode])

    def report(self, result: ReviewResult) -> None:
        banner = target_banner(result)
        self._write(banner)
        self._write(result.text)
        self._write("-" * len(banner))
        self.reported += 1

    def end(self) -> None:
        self._write("=" * len(MODE_BANNERS[self.mode]))
