import pytest

from dev_utils.core import branch
from dev_utils.domain.models import CommandResult
from dev_utils.errors import CommandError, UsageError


class FakeGit:
    """Records git calls; `fail` names calls (e.g. "pull", "checkout main") that should fail."""

    def __init__(self, current="feature", fail=()):
        self.current = current
        self.fail = set(fail)
        self.calls = []

    def _result(self, name):
        self.calls.append(name)
        return CommandResult(1 if name in self.fail else 0)

    def current_branch(self):
        return self.current

    def checkout(self, name, create=False, quiet=False):
        call = f"checkout -b {name}" if create else f"checkout {name}"
        result = self._result(call + (" (quiet)" if quiet else ""))
        if result.ok:
            self.current = name
        return result

    def pull(self):
        return self._result("pull")

    def rebase(self, onto):
        return self._result(f"rebase {onto}")

    def commit_all(self, message, no_verify=False):
        return self._result(f"commit {message}" + (" --no-verify" if no_verify else ""))


def test_rebase_on_refreshes_target_then_rebases():
    git = FakeGit(current="feature")

    branch.rebase_on(git, "main")

    assert git.calls == ["checkout main", "pull", "checkout feature", "rebase main"]


def test_rebase_on_target_branch_only_pulls():
    git = FakeGit(current="main")

    branch.rebase_on(git, "main")

    assert git.calls == ["pull"]


def test_rebase_on_returns_to_original_branch_when_pull_fails():
    git = FakeGit(current="feature", fail={"pull"})

    with pytest.raises(CommandError, match="failed to pull 'main'"):
        branch.rebase_on(git, "main")

    assert git.calls[-1] == "checkout feature (quiet)"
    assert "rebase main" not in git.calls


def test_rebase_on_returns_quietly_when_target_checkout_fails():
    git = FakeGit(current="feature", fail={"checkout main"})

    with pytest.raises(CommandError, match="failed to checkout 'main'"):
        branch.rebase_on(git, "main")

    assert git.calls == ["checkout main", "checkout feature (quiet)"]


def test_rebase_conflict_reports_continue_hint():
    git = FakeGit(current="feature", fail={"rebase main"})

    with pytest.raises(CommandError, match="rebase --continue"):
        branch.rebase_on(git, "main")


def test_rebase_outside_repository():
    with pytest.raises(CommandError):
        branch.rebase_on(FakeGit(current=None), "main")


def test_commit_requires_message(tmp_path):
    git = FakeGit()

    with pytest.raises(UsageError):
        branch.commit_all(git, "", cwd=tmp_path)

    assert git.calls == []


def test_commit_runs_terraform_fmt_in_terraform_project(tmp_path, monkeypatch):
    (tmp_path / "main.tf").write_text("")
    commands = []

    def fake_run_command(command, capture=True):
        commands.append(command)
        return CommandResult(0)

    monkeypatch.setattr("dev_utils.core.branch.run_command", fake_run_command)
    git = FakeGit()

    branch.commit_all(git, "Fix typo", no_verify=True, cwd=tmp_path)

    assert commands == [["terraform", "fmt", "--recursive"]]
    assert git.calls == ["commit Fix typo --no-verify"]


def test_commit_skips_fmt_outside_terraform_project(tmp_path, monkeypatch):
    monkeypatch.setattr(
        "dev_utils.core.branch.run_command",
        lambda *args, **kwargs: pytest.fail("terraform fmt should not run"),
    )

    branch.commit_all(FakeGit(), "msg", cwd=tmp_path)


@pytest.mark.parametrize("returncode", [1, 127])
def test_commit_still_runs_when_terraform_fmt_fails(tmp_path, monkeypatch, capsys, returncode):
    (tmp_path / ".terraform").mkdir()
    monkeypatch.setattr(
        "dev_utils.core.branch.run_command",
        lambda command, capture=True: CommandResult(returncode, "", "terraform: command not found"),
    )
    git = FakeGit()

    branch.commit_all(git, "msg", cwd=tmp_path)

    assert git.calls == ["commit msg"]
    assert "terraform fmt failed" in capsys.readouterr().err


def test_new_branch_failure_mentions_existing_branch():
    git = FakeGit(fail={"checkout -b topic"})

    with pytest.raises(CommandError, match="already exist"):
        branch.new_branch(git, "topic")


def test_switch_to_branch():
    git = FakeGit(current="feature")

    branch.switch_to_branch(git, "main")

    assert git.calls == ["checkout main", "pull"]


def test_show_current_branch_copies_to_clipboard(monkeypatch, capsys):
    copied = []
    monkeypatch.setattr(
        "dev_utils.core.branch.copy_to_clipboard",
        lambda text: copied.append(text) or "xclip",
    )

    assert branch.show_current_branch(FakeGit(current="feature/x")) == "feature/x"
    assert copied == ["feature/x"]
    assert capsys.readouterr().out.splitlines()[0] == "feature/x"
