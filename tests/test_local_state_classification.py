import os

import pytest

from dev_utils.core.check import check_gh_auth, check_required_tools, classify_local_path
from dev_utils.domain.models import CommandResult, LocalState
from dev_utils.errors import PreconditionError


def test_missing_path_is_absent(tmp_path):
    assert classify_local_path(tmp_path / "nope") is LocalState.ABSENT


def test_directory_with_git_metadata_is_version_controlled(tmp_path):
    (tmp_path / "repo" / ".git").mkdir(parents=True)
    assert classify_local_path(tmp_path / "repo") is LocalState.VERSION_CONTROLLED


def test_git_file_counts_as_working_copy(tmp_path):
    (tmp_path / "worktree").mkdir()
    (tmp_path / "worktree" / ".git").write_text("gitdir: /elsewhere\n")
    assert classify_local_path(tmp_path / "worktree") is LocalState.VERSION_CONTROLLED


def test_plain_directory_and_file_are_occupied(tmp_path):
    (tmp_path / "dir").mkdir()
    (tmp_path / "file").write_text("x")
    assert classify_local_path(tmp_path / "dir") is LocalState.OCCUPIED_NON_VC
    assert classify_local_path(tmp_path / "file") is LocalState.OCCUPIED_NON_VC


@pytest.mark.skipif(not hasattr(os, "symlink") or os.name == "nt", reason="symlinks unavailable")
def test_dangling_symlink_is_occupied(tmp_path):
    os.symlink(tmp_path / "missing-target", tmp_path / "link")
    assert classify_local_path(tmp_path / "link") is LocalState.OCCUPIED_NON_VC


def test_custom_working_copy_check(tmp_path):
    assert classify_local_path(tmp_path, lambda _path: True) is LocalState.VERSION_CONTROLLED


def test_check_required_tools_reports_missing(monkeypatch):
    monkeypatch.setattr(
        "dev_utils.core.check.shutil.which",
        lambda tool: None if tool == "gh" else f"/usr/bin/{tool}",
    )

    check_required_tools(["git"])
    with pytest.raises(PreconditionError, match="'gh'"):
        check_required_tools(["git", "gh"])


def test_check_gh_auth():
    class Github:
        def __init__(self, code):
            self.code = code

        def auth_status(self):
            return CommandResult(self.code)

    check_gh_auth(Github(0))
    with pytest.raises(PreconditionError, match="gh auth login"):
        check_gh_auth(Github(1))
