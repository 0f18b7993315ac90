"""Generate release notes from the latest commit messages."""

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
from src.exceptions import ReviewerError
from src.handlers.review_handler import handle_release_notes
from src.models.targets import ReviewResult
from src.services.github_client import open_github_client
from src.utils.logging import setup_logging, setup_observability
from src.utils.reporter import OutputReporter

logger = logging.getLogger(__name__)


async def run_release_notes(
    config: ReviewConfig,
    model: Model | str,
    transport: httpx.AsyncBaseTransport | None = None,
    stream: TextIO | None = None,
) -> ReviewResult:
    async with open_github_client(config, transport=transport) as github:
        return await handle_release_notes(
            config, github, model, OutputReporter("release_notes", stream)
        )


def main(
    argv: list[str] | None = None,
    settings: Settings | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
    model: Model | None = None,
) -> int:
    """Entry point; returns the process exit status."""
    argparse.ArgumentParser(
        prog="release-notes",
        description="Summarise the latest commits as Markdown release notes.",
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
        config = resolve_config(settings, require_model_key=True)
        if model is None:
            model = build_model(config)
        asyncio.run(run_release_notes(config, model, transport=transport))
    except ReviewerError as e:
        logger.error(f"Error generating release notes: {e}")
        return 1
    except Exception:
        logger.exception("Release notes generation terminated due to unexpected error")
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
