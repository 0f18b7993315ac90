"""Tool functions for the AI review agents."""

from . import github_tools

__all__ = ["github_tools"]
