"""GitHub fetch tools exposed to the review agents."""

import logging

from pydantic_ai import RunContext

from src.models.dependencies import SessionDependencies
from src.models.github_types import (
    CommitDiffParams,
    CommitListParams,
    DiffErr,
    DiffResult,
    PullRequestDiffParams,
)
from src.models.targets import CommitTarget, PullRequestTarget, ReleaseNotesTarget

logger = logging.getLogger(__name__)

TOOL_BUDGET_EXHAUSTED = (
    "The tool budget for this review is exhausted. "
    "Answer with the information you already have."
)


def _unwrap(result: DiffResult) -> str:
    """Return the diff text, or raise DiffFetchFailed for an error result."""
    if isinstance(result, DiffErr):
        raise result.to_exception()
    return result.text


def _pin_repository(
    ctx: RunContext[SessionDependencies], owner: str, repo: str
) -> tuple[str, str]:
    """Replace model-supplied repository coordinates with the configured ones."""
    config = ctx.deps.config
    if (owner, repo) != (config.owner, config.repo):
        logger.warning(
            f"Model requested {owner}/{repo}; using configured "
            f"repository {config.repo_full_name}"
        )
    return config.owner, config.repo


async def fetch_pull_request_diff(
    ctx: RunContext[SessionDependencies], params: PullRequestDiffParams
) -> str:
    """Fetch the diff of the pull request under review.

    Args:
        ctx: Run context with SessionDependencies
        params: owner, repo and pull_number supplied by the model

    Returns:
        Raw diff text

    Raises:
        DiffFetchFailed: If GitHub answers with a non-success status
    """
    if not ctx.deps.claim_tool_call():
        logger.warning("Refusing extra fetch_pull_request_diff call")
        return TOOL_BUDGET_EXHAUSTED

    owner, repo = _pin_repository(ctx, params.owner, params.repo)
    pull_number = params.pull_number
    target = ctx.deps.target
    if isinstance(target, PullRequestTarget) and pull_number != target.number:
        logger.warning(
            f"Model requested PR #{pull_number}; using PR #{target.number}"
        )
        pull_number = target.number

    result = await ctx.deps.github.get_pull_request_diff(owner, repo, pull_number)
    return _unwrap(result)


async def fetch_commit_diff(
    ctx: RunContext[SessionDependencies], params: CommitDiffParams
) -> str:
    """Fetch the diff of the commit under review.

    Raises:
        DiffFetchFailed: If GitHub answers with a non-success status
    """
    if not ctx.deps.claim_tool_call():
        logger.warning("Refusing extra fetch_commit_diff call")
        return TOOL_BUDGET_EXHAUSTED

    owner, repo = _pin_repository(ctx, params.owner, params.repo)
    sha = params.sha
    target = ctx.deps.target
    if isinstance(target, CommitTarget) and sha != target.sha:
        logger.warning(f"Model requested commit {sha}; using {target.sha}")
        sha = target.sha

    result = await ctx.deps.github.get_commit_diff(owner, repo, sha)
    return _unwrap(result)


async def fetch_commits(
    ctx: RunContext[SessionDependencies], params: CommitListParams
) -> list[str] | str:
    """Fetch the messages of the latest commits.

    A refused call returns the budget notice as plain text, never as a
    commit message.

    Raises:
        GitHubRequestFailed: If GitHub answers with a non-success status
    """
    if not ctx.deps.claim_tool_call():
        logger.warning("Refusing extra fetch_commits call")
        return TOOL_BUDGET_EXHAUSTED

    owner, repo = _pin_repository(ctx, params.owner, params.repo)
    per_page = params.per_page
    target = ctx.deps.target
    if isinstance(target, ReleaseNotesTarget):
        per_page = target.per_page

    return await ctx.deps.github.list_commit_messages(owner, repo, per_page)
