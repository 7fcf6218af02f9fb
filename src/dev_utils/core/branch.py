# Branch workflows: everyday git shortcuts
#
# Main features:
#   - show_current_branch(): print the branch and copy it to the clipboard
#   - rebase_on(): refresh a target branch and rebase the current one onto it
#   - switch_to_branch(): checkout a branch and pull
#   - commit_all(): best-effort terraform fmt, then `git commit -am`
#   - new_branch(): `git checkout -b`
#
# Every failure raises CommandError after printing what happened.

from pathlib import Path
from typing import Optional

from ..errors import CommandError, UsageError
from ..infra.clipboard import copy_to_clipboard
from ..infra.git_cli import GitCli
from ..infra.logger import log_info, log_success, log_warning
from ..infra.process import run_command


def _require_branch(git: GitCli, message: str) -> str:
    branch = git.current_branch()
    if not branch:
        raise CommandError(message)
    return branch


def show_current_branch(git: GitCli) -> str:
    """Print the current branch and copy it to the clipboard."""
    branch = _require_branch(git, "not on a branch or not in a git repository")
    print(branch)

    tool = copy_to_clipboard(branch)
    if tool:
        log_info(f"'{branch}' copied to clipboard ({tool})")
    else:
        log_warning(f"'{branch}' (clipboard command not found)")
    return branch


def rebase_on(git: GitCli, target_branch: str) -> None:
    """Rebase the current branch onto an up-to-date `target_branch`.

    When already on the target this only pulls. If checking out or pulling the
    target fails, the original branch is checked out again before raising.
    """
    current = _require_branch(git, "could not determine current branch. Not in a git repository?")

    if current == target_branch:
        log_warning(f"already on '{target_branch}'. Pulling...")
        if not git.pull().ok:
            raise CommandError(f"failed to pull '{target_branch}'")
        log_success(f"pull successful on '{target_branch}'")
        return

    log_info(f"rebasing '{current}' onto '{target_branch}'...")

    log_info(f"--> checking out '{target_branch}'...")
    if not git.checkout(target_branch).ok:
        git.checkout(current, quiet=True)
        raise CommandError(f"failed to checkout '{target_branch}'")

    log_info(f"--> pulling latest changes for '{target_branch}'...")
    if not git.pull().ok:
        git.checkout(current, quiet=True)
        raise CommandError(f"failed to pull '{target_branch}'")

    log_info(f"--> checking out '{current}'...")
    if not git.checkout(current).ok:
        raise CommandError(f"failed to checkout back to '{current}'")

    log_info(f"--> rebasing '{current}' onto '{target_branch}'...")
    if not git.rebase(target_branch).ok:
        raise CommandError(
            "rebase failed. Please resolve conflicts and run "
            "'git rebase --continue' or 'git rebase --abort'."
        )

    log_success(f"successfully rebased '{current}' onto '{target_branch}'")


def switch_to_branch(git: GitCli, branch: str) -> None:
    log_info(f"switching to {branch} and pulling...")
    if not git.checkout(branch).ok:
        raise CommandError(f"failed to checkout {branch}")
    if not git.pull().ok:
        raise CommandError(f"failed to pull {branch}")
    log_success(f"switched to {branch} and pulled successfully")


def is_terraform_project(directory: Path) -> bool:
    return any(directory.glob("*.tf")) or (directory / ".terraform").is_dir()


def commit_all(
    git: GitCli,
    message: Optional[str],
    no_verify: bool = False,
    cwd: Optional[Path] = None,
) -> None:
    """Stage tracked changes and commit them, formatting terraform first.

    Args:
        git: git adapter
        message: commit message (required)
        no_verify: bypass pre-commit hooks
        cwd: directory checked for terraform files (defaults to the current one)
    """
    if not message or not message.strip():
        raise UsageError("commit message is required", usage='commit "Your commit message"')

    if is_terraform_project(cwd or Path.cwd()):
        log_info("--> running terraform fmt recursively...")
        if not run_command(["terraform", "fmt", "--recursive"], capture=False).ok:
            log_warning("terraform fmt failed; committing anyway")

    if no_verify:
        log_warning("bypassing pre-commit hooks (--no-verify)")

    log_info(f"--> committing with message: '{message}'")
    if not git.commit_all(message, no_verify=no_verify).ok:
        raise CommandError("git commit failed")
    log_success("commit successful")


def new_branch(git: GitCli, name: Optional[str]) -> None:
    if not name or not name.strip():
        raise UsageError("branch name is required", usage="new <new-branch-name>")

    if not git.checkout(name, create=True).ok:
        raise CommandError(f"failed to create branch '{name}'. Does it already exist?")
    log_success(f"switched to a new branch '{name}'")
