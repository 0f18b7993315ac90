"""Review orchestration for each invocation mode.

Targets are reviewed strictly one after another. Pull request and release
notes runs let any failure propagate; commit-by-commit runs log a failing
commit and continue with the next one.
"""

import logging
from typing import Any

from pydantic_ai import Agent
from pydantic_ai.models import Model

from src.agents.reviewers import (
    commit_review_agent,
    pr_review_agent,
    release_notes_agent,
)
from src.agents.session import DEFAULT_STEP_BUDGET, run_session
from src.config.settings import ReviewConfig
from src.models.dependencies import SessionDependencies
from src.models.targets import (
    CommitTarget,
    PullRequestTarget,
    ReleaseNotesTarget,
    ReviewResult,
    ReviewTarget,
)
from src.prompts.review_prompts import (
    build_commit_prompt,
    build_pr_prompt,
    build_release_notes_prompt,
)
from src.services.github_client import GitHubClient
from src.utils.reporter import OutputReporter

logger = logging.getLogger(__name__)


def _agent_and_prompt(
    target: ReviewTarget, config: ReviewConfig
) -> tuple[Agent[SessionDependencies, Any], str]:
    if isinstance(target, PullRequestTarget):
        return pr_review_agent, build_pr_prompt(config.owner, config.repo, target.number)
    if isinstance(target, CommitTarget):
        return commit_review_agent, build_commit_prompt(
            config.owner, config.repo, target.sha
        )
    if isinstance(target, ReleaseNotesTarget):
        return release_notes_agent, build_release_notes_prompt(
            config.owner, config.repo, target.per_page
        )
    raise TypeError(f"Unsupported review target: {target!r}")


async def review_target(
    target: ReviewTarget,
    config: ReviewConfig,
    github: GitHubClient,
    model: Model | str,
    step_budget: int = DEFAULT_STEP_BUDGET,
) -> ReviewResult:
    """Run one bounded generation session for a single target."""
    agent, prompt = _agent_and_prompt(target, config)
    deps = SessionDependencies(config=config, github=github, target=target)

    logger.info(f"Starting review of {target.label} in {config.repo_full_name}")
    return await run_session(agent, prompt, deps, model, step_budget)


async def handle_pr_review(
    pull_number: int,
    config: ReviewConfig,
    github: GitHubClient,
    model: Model | str,
    reporter: OutputReporter,
) -> ReviewResult:
    """Review a single pull request and print the result."""
    result = await review_target(
        PullRequestTarget(number=pull_number), config, github, model
    )
    reporter.begin()
    reporter.report(result)
    reporter.end()
    return result


async def handle_commit_review(
    targets: list[CommitTarget],
    config: ReviewConfig,
    github: GitHubClient,
    model: Model | str,
    reporter: OutputReporter,
) -> list[ReviewResult]:
    """Review commits one by one, in the given order.

    A commit whose review fails is logged and skipped; the remaining commits
    are still reviewed and reported.
    """
    results: list[ReviewResult] = []
    reporter.begin()

    for target in targets:
        try:
            result = await review_target(target, config, github, model)
        except Exception:
            logger.exception(
                f"Error reviewing commit {target.sha}; continuing with next commit"
            )
            continue

        reporter.report(result)
        results.append(result)

    reporter.end()

    failed = len(targets) - len(results)
    logger.info(
        f"Commit review finished: {len(results)} reviewed, {failed} failed"
    )
    return results


async def handle_release_notes(
    config: ReviewConfig,
    github: GitHubClient,
    model: Model | str,
    reporter: OutputReporter,
) -> ReviewResult:
    """Generate release notes from the latest commits and print them."""
    result = await review_target(
        ReleaseNotesTarget(per_page=config.release_commit_count),
        config,
        github,
        model,
    )
    reporter.begin()
    reporter.report(result)
    reporter.end()
    return result
