"""Dependency injection types for Pydantic AI agents."""

from pydantic import BaseModel, ConfigDict, Field, PrivateAttr

from src.config.settings import ReviewConfig
from src.models.targets import ReviewTarget
from src.services.github_client import GitHubClient


class SessionDependencies(BaseModel):
    """Dependencies for one generation session.

    Holds the read-only configuration, the GitHub client and the target the
    session reviews. The tool-call counter lives here so the tool layer can
    enforce the per-session budget.
    """

    config: ReviewConfig
    github: GitHubClient = Field(exclude=True)
    target: ReviewTarget
    max_tool_calls: int = Field(default=1, ge=0)

    _tool_calls: int = PrivateAttr(default=0)

    model_config = ConfigDict(arbitrary_types_allowed=True)

    @property
    def tool_calls(self) -> int:
        return self._tool_calls

    def claim_tool_call(self) -> bool:
        """Reserve one tool invocation; False when the budget is spent."""
        if self._tool_calls >= self.max_tool_calls:
            return False
        self._tool_calls += 1
        return True
