"""Resolve a commit range specification into the commits to review."""

import logging
from collections.abc import Callable

from src.exceptions import InvalidInput, NoCommitSpecified, NoCommitsInRange
from src.models.targets import CommitTarget

logger = logging.getLogger(__name__)

RANGE_SEPARATOR = "..."


def split_commit_range(commit_range: str) -> tuple[str, str]:
    """Split ``"<base>...<head>"`` on the first separator.

    Raises:
        InvalidInput: If either side of the separator is empty
    """
    base, _, head = commit_range.partition(RANGE_SEPARATOR)
    base, head = base.strip(), head.strip()
    if not base or not head:
        raise InvalidInput(f"Invalid commit range: '{commit_range}'")
    return base, head


def resolve_commit_targets(
    commit_range: str | None,
    fallback_sha: str | None,
    compare: Callable[[str, str], list[str]],
) -> list[CommitTarget]:
    """Turn a commit range or single commit reference into review targets.

    A range is expanded through ``compare`` and keeps the order the host
    returns (oldest to newest). Anything else is reviewed as a single commit,
    falling back to ``fallback_sha`` when no range is given.

    Args:
        commit_range: Either a bare SHA or "<base>...<head>"
        fallback_sha: SHA used when commit_range is empty
        compare: Callable returning the SHAs between base and head

    Returns:
        Non-empty, ordered list of commit targets

    Raises:
        RangeResolutionFailed: If the compare call fails (raised by ``compare``)
        NoCommitsInRange: If the range holds no commits
        NoCommitSpecified: If neither input is available
    """
    commit_range = (commit_range or "").strip()

    if RANGE_SEPARATOR in commit_range:
        base, head = split_commit_range(commit_range)
        shas = compare(base, head)
        if not shas:
            raise NoCommitsInRange(base, head)
        logger.info(f"Resolved {len(shas)} commits in range {base}...{head}")
        return [CommitTarget(sha=sha) for sha in shas]

    single_commit = commit_range or (fallback_sha or "").strip()
    if not single_commit:
        raise NoCommitSpecified()

    logger.info(f"Reviewing single commit {single_commit}")
    return [CommitTarget(sha=single_commit)]
