"""Services for external API interactions."""

from src.services.commit_range import resolve_commit_targets
from src.services.github_client import GitHubClient, open_github_client

__all__ = ["GitHubClient", "open_github_client", "resolve_commit_targets"]
