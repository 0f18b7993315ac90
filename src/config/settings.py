"""Application settings using Pydantic Settings for environment variable management."""

from typing import Literal

from pydantic import AliasChoices, BaseModel, ConfigDict, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from src.exceptions import ConfigurationMissing


class Settings(BaseSettings):
    """Raw settings loaded from environment variables.

    Nothing here is validated for presence; ``resolve_config`` turns a
    ``Settings`` instance into the ``ReviewConfig`` the pipeline consumes.
    """

    model_config = SettingsConfigDict(
        env_file=".env.local",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=False,
    )

    # GitHub Configuration
    # GitHub Actions doesn't allow env var names starting with GITHUB_,
    # so the GH_* variants are accepted as well
    github_owner: str | None = Field(
        default=None,
        validation_alias=AliasChoices("GITHUB_OWNER", "GH_OWNER"),
        description="Owner (user or organisation) of the reviewed repository",
    )
    github_repo: str | None = Field(
        default=None,
        validation_alias=AliasChoices("GITHUB_REPO", "GH_REPO"),
        description="Name of the reviewed repository",
    )
    github_token: str | None = Field(
        default=None,
        validation_alias=AliasChoices("GITHUB_TOKEN", "GH_TOKEN"),
        description="GitHub token sent as a bearer credential",
    )
    github_api_url: str = Field(
        default="https://api.github.com", description="GitHub REST API base URL"
    )

    # OpenAI Configuration
    openai_api_key: str | None = Field(
        default=None, description="OpenAI API key for AI models"
    )
    openai_model: str = Field(default="gpt-4o", description="OpenAI model to use")

    # CI-provided commit references (Semaphore)
    semaphore_git_commit_range: str | None = Field(
        default=None, description="Commit range of the push, e.g. 'abc...def'"
    )
    semaphore_git_sha: str | None = Field(
        default=None, description="SHA of the commit that triggered the job"
    )

    # Observability
    logfire_token: str | None = Field(
        default=None, description="Pydantic Logfire token for observability"
    )
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="INFO", description="Logging level"
    )

    # Review Configuration
    release_commit_count: int = Field(
        default=10, gt=0, description="Number of recent commits used for release notes"
    )
    request_timeout: float = Field(
        default=30.0, gt=0, description="Timeout in seconds for GitHub HTTP requests"
    )


class ReviewConfig(BaseModel):
    """Validated, read-only configuration shared by every pipeline component."""

    model_config = ConfigDict(frozen=True)

    owner: str
    repo: str
    token: str = Field(repr=False)
    api_url: str = "https://api.github.com"
    openai_api_key: str | None = Field(default=None, repr=False)
    openai_model: str = "gpt-4o"
    release_commit_count: int = 10
    request_timeout: float = 30.0

    @property
    def repo_full_name(self) -> str:
        """Repository in 'owner/repo' format."""
        return f"{self.owner}/{self.repo}"


def resolve_config(settings: Settings, require_model_key: bool = False) -> ReviewConfig:
    """Validate that every required value is present and build a ReviewConfig.

    Args:
        settings: Settings loaded from the environment
        require_model_key: Also require OPENAI_API_KEY (release-notes mode)

    Returns:
        The validated configuration record

    Raises:
        ConfigurationMissing: For the first required value that is absent
    """
    required = [
        ("GITHUB_OWNER", settings.github_owner),
        ("GITHUB_REPO", settings.github_repo),
        ("GITHUB_TOKEN", settings.github_token),
    ]
    if require_model_key:
        required.append(("OPENAI_API_KEY", settings.openai_api_key))

    for name, value in required:
        if not value or not value.strip():
            raise ConfigurationMissing(name)

    return ReviewConfig(
        owner=settings.github_owner.strip(),
        repo=settings.github_repo.strip(),
        token=settings.github_token.strip(),
        api_url=settings.github_api_url.rstrip("/"),
        openai_api_key=settings.openai_api_key,
        openai_model=settings.openai_model,
        release_commit_count=settings.release_commit_count,
        request_timeout=settings.request_timeout,
    )
