import pytest

from src.config.settings import ReviewConfig, Settings, resolve_config
from src.exceptions import ConfigurationMissing

ENV_VARS = [
    "GITHUB_OWNER",
    "GH_OWNER",
    "GITHUB_REPO",
    "GH_REPO",
    "GITHUB_TOKEN",
    "GH_TOKEN",
    "OPENAI_API_KEY",
    "SEMAPHORE_GIT_COMMIT_RANGE",
    "SEMAPHORE_GIT_SHA",
]


@pytest.fixture(autouse=True)
def clean_env(monkeypatch) -> None:
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def github_env(monkeypatch) -> None:
    monkeypatch.setenv("GITHUB_OWNER", "acme")
    monkeypatch.setenv("GITHUB_REPO", "widgets")
    monkeypatch.setenv("GITHUB_TOKEN", "ghp-secret")  # pragma: allowlist secret


def test_settings_defaults() -> None:
    settings = Settings(_env_file=None)

    assert settings.github_owner is None
    assert settings.github_token is None
    assert settings.github_api_url == "https://api.github.com"
    assert settings.openai_model == "gpt-4o"
    assert settings.release_commit_count == 10


def test_settings_reads_ci_commit_references(monkeypatch) -> None:
    monkeypatch.setenv("SEMAPHORE_GIT_COMMIT_RANGE", "abc...def")
    monkeypatch.setenv("SEMAPHORE_GIT_SHA", "def")

    settings = Settings(_env_file=None)

    assert settings.semaphore_git_commit_range == "abc...def"
    assert settings.semaphore_git_sha == "def"


def test_settings_accepts_gh_token_alias(monkeypatch) -> None:
    monkeypatch.setenv("GH_TOKEN", "from-actions")  # pragma: allowlist secret

    settings = Settings(_env_file=None)

    assert settings.github_token == "from-actions"  # pragma: allowlist secret


def test_resolve_config_success(github_env) -> None:
    config = resolve_config(Settings(_env_file=None))

    assert isinstance(config, ReviewConfig)
    assert config.owner == "acme"
    assert config.repo == "widgets"
    assert config.token == "ghp-secret"  # pragma: allowlist secret
    assert config.repo_full_name == "acme/widgets"


def test_resolve_config_token_not_in_repr(github_env) -> None:
    config = resolve_config(Settings(_env_file=None))

    assert "ghp-secret" not in repr(config)


@pytest.mark.parametrize("missing", ["GITHUB_OWNER", "GITHUB_REPO", "GITHUB_TOKEN"])
def test_resolve_config_missing_value(github_env, monkeypatch, missing) -> None:
    monkeypatch.delenv(missing)

    with pytest.raises(ConfigurationMissing) as exc_info:
        resolve_config(Settings(_env_file=None))

    assert exc_info.value.name == missing
    assert missing in str(exc_info.value)


def test_resolve_config_reports_first_missing_value() -> None:
    with pytest.raises(ConfigurationMissing) as exc_info:
        resolve_config(Settings(_env_file=None))

    assert exc_info.value.name == "GITHUB_OWNER"


def test_resolve_config_blank_value_is_missing(github_env, monkeypatch) -> None:
    monkeypatch.setenv("GITHUB_TOKEN", "   ")

    with pytest.raises(ConfigurationMissing, match="GITHUB_TOKEN"):
        resolve_config(Settings(_env_file=None))


def test_resolve_config_model_key_only_required_when_asked(github_env) -> None:
    settings = Settings(_env_file=None)

    assert resolve_config(settings).openai_api_key is None
    with pytest.raises(ConfigurationMissing, match="OPENAI_API_KEY"):
        resolve_config(settings, require_model_key=True)


def test_review_config_is_frozen(github_env) -> None:
    config = resolve_config(Settings(_env_file=None))

    with pytest.raises(ValueError):
        config.owner = "someone-else"
