"""Read-only access to the GitHub REST API.

Diffs and commit listings are fetched with httpx so the raw diff media type
can be requested; commit ranges are resolved through PyGithub's compare API.
"""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from typing import Any

import httpx
import requests
from github import Auth, Github, GithubException
from github.Repository import Repository

from src.config.settings import ReviewConfig
from src.exceptions import GitHubRequestFailed, RangeResolutionFailed
from src.models.github_types import DiffErr, DiffOk, DiffResult

logger = logging.getLogger(__name__)

DIFF_MEDIA_TYPE = "application/vnd.github.v3.diff"
JSON_MEDIA_TYPE = "application/vnd.github.v3+json"


def _reason_from_exception(exc: GithubException) -> str:
    """Extract the human-readable message from a PyGithub exception."""
    if isinstance(exc.data, dict) and exc.data.get("message"):
        return str(exc.data["message"])
    return str(exc.data) if exc.data else "Unknown error"


class GitHubClient:
    """Thin wrapper over the handful of GitHub endpoints the reviewer reads."""

    def __init__(
        self,
        config: ReviewConfig,
        http_client: httpx.AsyncClient,
        github_client: Github,
    ) -> None:
        self.config = config
        self.http_client = http_client
        self.github_client = github_client
        self._repo: Repository | None = None

    def _headers(self, accept: str) -> dict[str, str]:
        return {
            "Accept": accept,
            "Authorization": f"Bearer {self.config.token}",
        }

    async def _get_diff(self, path: str, identifier: str) -> DiffResult:
        response = await self.http_client.get(
            f"{self.config.api_url}{path}", headers=self._headers(DIFF_MEDIA_TYPE)
        )
        if not response.is_success:
            logger.warning(
                f"Diff request for {identifier} failed: "
                f"{response.status_code} - {response.reason_phrase}"
            )
            return DiffErr(
                identifier=identifier,
                status=response.status_code,
                reason=response.reason_phrase,
            )

        logger.info(f"Fetched diff for {identifier} ({len(response.text)} bytes)")
        return DiffOk(text=response.text)

    async def get_pull_request_diff(
        self, owner: str, repo: str, pull_number: int
    ) -> DiffResult:
        """Fetch the raw diff of a pull request.

        Args:
            owner: Repository owner
            repo: Repository name
            pull_number: Pull request number

        Returns:
            DiffOk with the diff text, or DiffErr with the host's status
        """
        return await self._get_diff(
            f"/repos/{owner}/{repo}/pulls/{pull_number}", f"#{pull_number}"
        )

    async def get_commit_diff(self, owner: str, repo: str, sha: str) -> DiffResult:
        """Fetch the raw diff of a single commit.

        Args:
            owner: Repository owner
            repo: Repository name
            sha: Commit SHA

        Returns:
            DiffOk with the diff text, or DiffErr with the host's status
        """
        return await self._get_diff(f"/repos/{owner}/{repo}/commits/{sha}", sha)

    async def list_commit_messages(
        self, owner: str, repo: str, per_page: int = 10
    ) -> list[str]:
        """Fetch the messages of the most recent commits, newest first.

        Raises:
            GitHubRequestFailed: If the host answers with a non-success status
        """
        response = await self.http_client.get(
            f"{self.config.api_url}/repos/{owner}/{repo}/commits",
            params={"per_page": per_page},
            headers=self._headers(JSON_MEDIA_TYPE),
        )
        if not response.is_success:
            raise GitHubRequestFailed(
                f"commits of {owner}/{repo}",
                response.status_code,
                response.reason_phrase,
            )

        data: list[dict[str, Any]] = response.json()
        messages = [item["commit"]["message"] for item in data]
        logger.info(f"Fetched {len(messages)} commit messages for {owner}/{repo}")
        return messages

    def _get_repo(self) -> Repository:
        if self._repo is None:
            self._repo = self.github_client.get_repo(self.config.repo_full_name)
        return self._repo

    def compare_commits(self, base: str, head: str) -> list[str]:
        """List the SHAs between two commits in the order GitHub returns them.

        Raises:
            RangeResolutionFailed: If the compare request fails or GitHub
                cannot be reached
        """
        try:
            comparison = self._get_repo().compare(base, head)
            shas = [commit.sha for commit in comparison.commits]
        except GithubException as e:
            raise RangeResolutionFailed(e.status, _reason_from_exception(e)) from e
        except requests.RequestException as e:
            raise RangeResolutionFailed(None, str(e)) from e

        logger.info(f"Compare {base[:7]}...{head[:7]} returned {len(shas)} commits")
        return shas


@asynccontextmanager
async def open_github_client(
    config: ReviewConfig,
    transport: httpx.AsyncBaseTransport | None = None,
    github_client: Github | None = None,
) -> AsyncIterator[GitHubClient]:
    """Open the HTTP session and PyGithub client for one command run.

    PyGithub is built without its retry policy: a failed compare request is
    reported as it happened.
    """
    if github_client is None:
        github_client = Github(
            auth=Auth.Token(config.token),
            base_url=config.api_url,
            retry=None,
            lazy=True,
        )

    async with httpx.AsyncClient(
        timeout=config.request_timeout, transport=transport
    ) as http_client:
        try:
            yield GitHubClient(config, http_client, github_client)
        finally:
            github_client.close()
