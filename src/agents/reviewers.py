"""Review agents using Pydantic AI and OpenAI.

Each agent carries its fixed system instructions and exactly one fetch tool.
No model is bound here; the model is chosen per run so configuration stays
explicit.
"""

from pydantic_ai import Agent, RunContext
from pydantic_ai.models.openai import OpenAIResponsesModel
from pydantic_ai.providers.openai import OpenAIProvider

from src.config.settings import ReviewConfig
from src.models.dependencies import SessionDependencies
from src.models.github_types import (
    CommitDiffParams,
    CommitListParams,
    PullRequestDiffParams,
)
from src.prompts.review_prompts import (
    COMMIT_REVIEW_SYSTEM_PROMPT,
    PR_REVIEW_SYSTEM_PROMPT,
    RELEASE_NOTES_SYSTEM_PROMPT,
)
from src.tools import github_tools


def build_model(config: ReviewConfig) -> OpenAIResponsesModel:
    """Create the OpenAI model used for generation.

    Without an explicit key the provider falls back to OPENAI_API_KEY.
    """
    if config.openai_api_key:
        provider = OpenAIProvider(api_key=config.openai_api_key)
    else:
        provider = OpenAIProvider()
    return OpenAIResponsesModel(config.openai_model, provider=provider)


pr_review_agent = Agent[SessionDependencies, str](
    name="pr_reviewer",
    deps_type=SessionDependencies,
    output_type=str,
    instructions=PR_REVIEW_SYSTEM_PROMPT,
)

commit_review_agent = Agent[SessionDependencies, str](
    name="commit_reviewer",
    deps_type=SessionDependencies,
    output_type=str,
    instructions=COMMIT_REVIEW_SYSTEM_PROMPT,
)

release_notes_agent = Agent[SessionDependencies, str](
    name="release_notes_writer",
    deps_type=SessionDependencies,
    output_type=str,
    instructions=RELEASE_NOTES_SYSTEM_PROMPT,
)


@pr_review_agent.tool
async def fetch_pull_request_diff(
    ctx: RunContext[SessionDependencies], params: PullRequestDiffParams
) -> str:
    """A tool to retrieve the diff for a GitHub pull request."""
    return await github_tools.fetch_pull_request_diff(ctx, params)


@commit_review_agent.tool
async def fetch_commit_diff(
    ctx: RunContext[SessionDependencies], params: CommitDiffParams
) -> str:
    """A tool to retrieve the diff for a GitHub commit."""
    return await github_tools.fetch_commit_diff(ctx, params)


@release_notes_agent.tool
async def fetch_commits(
    ctx: RunContext[SessionDependencies], params: CommitListParams
) -> list[str] | str:
    """Retrieve a list of recent commit messages from a GitHub repo."""
    return await github_tools.fetch_commits(ctx, params)
