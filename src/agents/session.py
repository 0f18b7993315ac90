"""Step-bounded generation sessions.

A session allows at most ``step_budget`` model requests: the first may ask
for a tool, the last must be the final answer. The budget is enforced here,
on top of whatever the agent framework would allow.
"""

import logging
from enum import Enum
from typing import Any

from pydantic_ai import Agent
from pydantic_ai.messages import ModelResponse, TextPart, ToolCallPart
from pydantic_ai.models import Model
from pydantic_ai.usage import UsageLimits

from src.models.dependencies import SessionDependencies
from src.models.targets import ReviewResult

logger = logging.getLogger(__name__)

DEFAULT_STEP_BUDGET = 2


class SessionState(str, Enum):
    AWAITING_TOOL_DECISION = "awaiting_tool_decision"
    AWAITING_FINAL_ANSWER = "awaiting_final_answer"
    DONE = "done"


class GenerationSession:
    """Tracks model responses for one review target and decides when to stop."""

    def __init__(self, step_budget: int = DEFAULT_STEP_BUDGET) -> None:
        if step_budget < 1:
            raise ValueError(f"step_budget must be positive, got: {step_budget}")
        self.step_budget = step_budget
        self.steps = 0
        self.state = SessionState.AWAITING_TOOL_DECISION
        self.text = ""
        self.complete = False

    def record_response(self, response: ModelResponse) -> bool:
        """Register one model response.

        Returns:
            True if the requested tool calls should run and the model be asked
            again, False once the session is finished
        """
        if self.state is SessionState.DONE:
            raise RuntimeError("Session already finished")

        self.steps += 1
        wants_tools = any(isinstance(part, ToolCallPart) for part in response.parts)

        if wants_tools and self.steps < self.step_budget:
            self.state = SessionState.AWAITING_FINAL_ANSWER
            return True

        self.text = "".join(
            part.content for part in response.parts if isinstance(part, TextPart)
        ).strip()
        self.complete = not wants_tools
        self.state = SessionState.DONE
        if not self.complete:
            logger.warning(
                f"Step budget of {self.step_budget} exhausted while the model "
                "still requested tools; stopping session"
            )
        return False


async def run_session(
    agent: Agent[SessionDependencies, Any],
    prompt: str,
    deps: SessionDependencies,
    model: Model | str,
    step_budget: int = DEFAULT_STEP_BUDGET,
) -> ReviewResult:
    """Drive one bounded model interaction and return its final text.

    Args:
        agent: Agent carrying the system instructions and the fetch tool
        prompt: Target-specific prompt naming the tool-call payload
        deps: Session dependencies (config, GitHub client, target)
        model: Model used for generation
        step_budget: Maximum number of model requests

    Returns:
        ReviewResult for ``deps.target``

    Raises:
        DiffFetchFailed: If the fetch tool fails. The tool turns a DiffErr
            into this exception, so a failed fetch ends the run here instead
            of reaching the model; callers decide whether to skip or abort.
    """
    session = GenerationSession(step_budget)

    async with agent.iter(
        prompt,
        deps=deps,
        model=model,
        usage_limits=UsageLimits(request_limit=step_budget),
    ) as agent_run:
        async for node in agent_run:
            if Agent.is_call_tools_node(node):
                if not session.record_response(node.model_response):
                    break

    logger.info(
        f"Session for {deps.target.label} finished after {session.steps} "
        f"step(s) and {deps.tool_calls} tool call(s)"
    )
    return ReviewResult(
        target=deps.target,
        text=session.text,
        tool_calls=deps.tool_calls,
        complete=session.complete,
    )
