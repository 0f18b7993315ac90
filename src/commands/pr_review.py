"""Review a single pull request.

Usage: review-pr <pull-number>
"""

import argparse
import asyncio
import logging
import sys
from typing import TextIO

import httpx
from pydantic import ValidationError
from pydantic_ai.models import Model

from src.agents.reviewers import build_model
from src.config.settings import ReviewConfig, Settings, resolve_config
from src.exceptions import InvalidInput, ReviewerError
from src.handlers.review_handler import handle_pr_review
from src.models.targets import ReviewResult
from src.services.github_client import open_github_client
from src.utils.logging import setup_logging, setup_observability
from src.utils.reporter import OutputReporter

logger = logging.getLogger(__name__)


def parse_pull_number(raw: str) -> int:
    """Parse a positive pull request number.

    Raises:
        InvalidInput: If ``raw`` is not a positive integer
    """
    try:
        pull_number = int(raw.strip())
    except ValueError:
        raise InvalidInput(f"Invalid pull request number: {raw}") from None
    if pull_number <= 0:
        raise InvalidInput(f"Invalid pull request number: {raw}")
    return pull_number


async def run_pr_review(
    config: ReviewConfig,
    pull_number: int,
    model: Model | str,
    transport: httpx.AsyncBaseTransport | None = None,
    stream: TextIO | None = None,
) -> ReviewResult:
    async with open_github_client(config, transport=transport) as github:
        return await handle_pr_review(
            pull_number, config, github, model, OutputReporter("pull_request", stream)
        )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="review-pr",
        description="Ask a language model to review a GitHub pull request.",
    )
    parser.add_argument("pull_number", help="Number of the pull request to review")
    return parser


def main(
    argv: list[str] | None = None,
    settings: Settings | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
    model: Model | None = None,
) -> int:
    """Entry point; returns the process exit status."""
    args = build_parser().parse_args(argv)

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
        pull_number = parse_pull_number(args.pull_number)
        if model is None:
            model = build_model(config)
        asyncio.run(run_pr_review(config, pull_number, model, transport=transport))
    except ReviewerError as e:
        logger.error(f"Error running code review agent: {e}")
        return 1
    except Exception:
        logger.exception("Code review agent terminated due to unexpected error")
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
