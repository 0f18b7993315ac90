"""Review the commits of a push one by one.

The commit range comes from SEMAPHORE_GIT_COMMIT_RANGE ("base...head" or a
single SHA), falling back to SEMAPHORE_GIT_SHA.
"""

import argparse
import asyncio
import logging
import sys
from typing import TextIO

import httpx
from github import Github
from pydantic import ValidationError
from pydantic_ai.models import Model

from src.agents.reviewers import build_model
from src.config.settings import ReviewConfig, Settings, resolve_config
from src.exceptions import ReviewerError
from src.handlers.review_handler import handle_commit_review
from src.models.targets import ReviewResult
from src.services.commit_range import resolve_commit_targets
from src.services.github_client import open_github_client
from src.utils.logging import setup_logging, setup_observability
from src.utils.reporter import OutputReporter

logger = logging.getLogger(__name__)


async def run_commit_review(
    config: ReviewConfig,
    commit_range: str | None,
    fallback_sha: str | None,
    model: Model | str,
    transport: httpx.AsyncBaseTransport | None = None,
    github_client: Github | None = None,
    stream: TextIO | None = None,
) -> list[ReviewResult]:
    """Resolve every commit up front, then review them in order."""
    async with open_github_client(
        config, transport=transport, github_client=github_client
    ) as github:
        targets = resolve_commit_targets(
            commit_range, fallback_sha, github.compare_commits
        )
        return await handle_commit_review(
            targets, config, github, model, OutputReporter("commit", stream)
        )


def main(
    argv: list[str] | None = None,
    settings: Settings | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
    github_client: Github | None = None,
    model: Model | None = None,
) -> int:
    """Entry point; returns the process exit status.

    Exits non-zero when configuration or commit resolution fails, or when
    not a single commit could be reviewed.
    """
    argparse.ArgumentParser(
        prog="review-commits",
        description=(
            "Review each commit of SEMAPHORE_GIT_COMMIT_RANGE "
            "(or SEMAPHORE_GIT_SHA) with a language model."
        ),
    ).parse_args(argv)

    # Default logging until LOG_LEVEL is known
    setup_logging()
    try:
        if settings is None:
            settings = Settings()
    except ValidationError as e:
        logger.error(f"Invalid configuration: {e}")
        return 1
    setup_observability(settings.log_level, settings.logfire_token)

    try:
        config = resolve_config(settings)
        if model is None:
            model = build_model(config)
        results = asyncio.run(
            run_commit_review(
                config,
                settings.semaphore_git_commit_range,
                settings.semaphore_git_sha,
                model,
                transport=transport,
                github_client=github_client,
            )
        )
    except ReviewerError as e:
        logger.error(f"Error running commit-by-commit review agent: {e}")
        return 1
    except Exception:
        logger.exception("Commit review agent terminated due to unexpected error")
        return 1

    return 0 if results else 1


if __name__ == "__main__":
    sys.exit(main())
