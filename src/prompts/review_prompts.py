"""System instructions and per-target prompts for the review agents."""

PR_REVIEW_SYSTEM_PROMPT = """
You are an AI assistant that reviews code changes in a pull request.
- Summarize key modifications.
- Flag potential security issues or code smells.
- Suggest best practices or improvements where relevant.
- Be concise but thorough in your review.
""".strip()

COMMIT_REVIEW_SYSTEM_PROMPT = """
You are an AI assistant that reviews code changes in a commit.
- Summarize key modifications.
- Flag potential security issues or code smells.
- Suggest best practices or improvements where relevant.
- Be concise but thorough in your review.
""".strip()

RELEASE_NOTES_SYSTEM_PROMPT = """
You are an AI assistant that organizes and creates release notes.
- Read commit messages.
- Categorize them (Features, Fixes, Docs, etc.).
- Provide a concise, Markdown-friendly summary of changes.
- Omit trivial or merge commits if irrelevant.
""".strip()


def build_pr_prompt(owner: str, repo: str, pull_number: int) -> str:
    return f"""
The pull request to analyze is #{pull_number} in the {owner}/{repo} repository.
If you need the diff, call the "fetch_pull_request_diff" tool with:
{{
  "owner": "{owner}",
  "repo": "{repo}",
  "pull_number": {pull_number}
}}.
""".strip()


def build_commit_prompt(owner: str, repo: str, sha: str) -> str:
    return f"""
The commit to analyze is {sha} in the {owner}/{repo} repository.
If you need the diff, call the "fetch_commit_diff" tool with:
{{
  "owner": "{owner}",
  "repo": "{repo}",
  "sha": "{sha}"
}}.
""".strip()


def build_release_notes_prompt(owner: str, repo: str, per_page: int) -> str:
    return f"""
We need release notes for the latest commits in {owner}/{repo}.
To get them, call the "fetch_commits" tool with:
{{
  "owner": "{owner}",
  "repo": "{repo}",
  "per_page": {per_page}
}}.
Summarize the commit messages as release notes.
""".strip()
