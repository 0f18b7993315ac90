import io

from src.models.targets import (
    CommitTarget,
    PullRequestTarget,
    ReleaseNotesTarget,
    ReviewResult,
)
from src.utils.reporter import MODE_BANNERS, OutputReporter, target_banner


def test_target_banner_names_target() -> None:
    assert (
        target_banner(ReviewResult(target=PullRequestTarget(number=7), text=""))
        == "--- Review for pull request #7 ---"
    )
    assert (
        target_banner(ReviewResult(target=CommitTarget(sha="abc"), text=""))
        == "--- Review for commit abc ---"
    )
    assert "latest 5 commits" in target_banner(
        ReviewResult(target=ReleaseNotesTarget(per_page=5), text="")
    )


def test_reporter_preserves_order_and_content() -> None:
    stream = io.StringIO()
    reporter = OutputReporter("commit", stream)
    text = "## Summary\n- **bold** stays as-is\n"

    reporter.begin()
    reporter.report(ReviewResult(target=CommitTarget(sha="c2"), text=text))
    reporter.report(ReviewResult(target=CommitTarget(sha="c1"), text="second"))
    reporter.end()

    output = stream.getvalue()
    assert output.startswith(MODE_BANNERS["commit"] + "\n")
    assert text in output
    assert output.index("commit c2") < output.index("commit c1")
    assert output.rstrip("\n").endswith("=" * len(MODE_BANNERS["commit"]))
    assert reporter.reported == 2


def test_reporter_defaults_to_stdout(capsys) -> None:
    reporter = OutputReporter("pull_request")

    reporter.begin()

    assert capsys.readouterr().out == "=== AI Review Summary ===\n"
