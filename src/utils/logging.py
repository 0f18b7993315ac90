"""Logging and observability setup using Pydantic Logfire."""

import logging
import sys


def setup_logging(log_level: str = "INFO") -> None:
    """Configure application logging.

    Logs go to stderr so stdout carries only the review transcript.
    Reduces noise from verbose third-party libraries.
    """
    logging.basicConfig(
        level=getattr(logging, log_level),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        stream=sys.stderr,
        force=True,  # Reconfigure if already setup
    )

    # Reduce noise from verbose libraries
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("urllib3").setLevel(logging.WARNING)


def setup_observability(log_level: str = "INFO", logfire_token: str | None = None) -> None:
    """Setup logging and optionally Logfire instrumentation.

    Logfire tracing of agent runs and HTTP calls is enabled only when a
    token is configured.
    """
    setup_logging(log_level)

    logger = logging.getLogger(__name__)

    if not logfire_token:
        logger.debug("Logfire token not configured, skipping observability setup")
        return

    try:
        import logfire

        logfire.configure(token=logfire_token, console=False)

        # Instrument Pydantic AI agents
        logfire.instrument_pydantic_ai()

        # Instrument httpx for HTTP tracing
        logfire.instrument_httpx()

        logger.info("Logfire observability enabled")

    except ImportError:
        logger.warning(
            "Logfire package not installed. Install with: pip install 'ai-diff-reviewer[logfire]'"
        )
